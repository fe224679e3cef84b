#!/usr/bin/env python
"""Roll out a fixed policy in a finger task and report episode returns.

Usage::

    python -m mujoco_finger.scripts.rollout --task turn_easy --episodes 3
    mujoco-finger-rollout --task spin --policy random --steps 200 --diagnostics
"""
from __future__ import annotations

import argparse
import logging
from typing import Any, Dict, List, Sequence

import numpy as np

from mujoco_finger.envs.finger import list_task_names
from mujoco_finger.tasks.finger import FingerTaskConfig, make_finger_env


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Run finger-task rollouts with a fixed policy.")
    p.add_argument("--task", type=str, default="spin", choices=list(list_task_names()))
    p.add_argument("--episodes", type=int, default=1)
    p.add_argument(
        "--steps", type=int, default=1000,
        help="Control steps per episode (max_episode_steps).",
    )
    p.add_argument("--frame-skip", type=int, default=2)
    p.add_argument("--seed", type=int, default=0)
    p.add_argument(
        "--policy", type=str, default="zero", choices=["zero", "random"],
        help="zero: always [0, 0]; random: uniform in [-1, 1].",
    )
    p.add_argument(
        "--diagnostics", action="store_true",
        help="Print the initial joint configuration and target of each episode.",
    )
    p.add_argument(
        "--log-level", type=str, default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return p


def config_from_args(args: argparse.Namespace) -> FingerTaskConfig:
    return FingerTaskConfig(
        task_name=args.task,
        frame_skip=args.frame_skip,
        max_episode_steps=args.steps,
        seed=args.seed,
        diagnostics=args.diagnostics,
    )


def run_rollouts(
    cfg: FingerTaskConfig, episodes: int, policy: str = "zero"
) -> List[Dict[str, Any]]:
    """Run ``episodes`` full episodes and return one summary dict per episode."""
    env = make_finger_env(cfg)
    summaries: List[Dict[str, Any]] = []
    try:
        for ep in range(episodes):
            first = env.reset()
            ep_return = 0.0
            steps = 0
            done = False
            while not done:
                if policy == "random":
                    action = env.sample_action()
                else:
                    action = np.zeros(env.action_dim)
                res = env.step(action)
                ep_return += res.reward
                steps += 1
                done = res.done
            summary: Dict[str, Any] = {"episode": ep, "return": ep_return, "steps": steps}
            if cfg.diagnostics:
                summary["qpos0"] = first.info.get("qpos0")
                summary["target"] = first.info.get("target")
            summaries.append(summary)
    finally:
        env.close()
    return summaries


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))
    cfg = config_from_args(args)
    for summary in run_rollouts(cfg, args.episodes, policy=args.policy):
        line = (
            f"episode {summary['episode']}: return={summary['return']:.1f} "
            f"steps={summary['steps']}"
        )
        if args.diagnostics:
            line += f" qpos0={summary['qpos0']} target={summary['target']}"
        print(line)


if __name__ == "__main__":
    main()
