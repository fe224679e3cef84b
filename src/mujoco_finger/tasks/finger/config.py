"""Finger task configuration objects."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict

from mujoco_finger.robots.configs import FINGER_MODEL_PATH
from mujoco_finger.envs.finger.resetting import DEFAULT_MAX_ATTEMPTS


@dataclass
class FingerTaskConfig:
    """High-level configuration for the finger tasks."""

    task_name: str = "spin"
    frame_skip: int = 2
    max_episode_steps: int = 1000
    seed: int | None = None
    model_path: str = FINGER_MODEL_PATH
    max_init_attempts: int = DEFAULT_MAX_ATTEMPTS
    diagnostics: bool = False
    env_kwargs: Dict[str, Any] = field(default_factory=dict)


def make_finger_spin_cfg() -> FingerTaskConfig:
    return FingerTaskConfig(task_name="spin")


def make_finger_turn_easy_cfg() -> FingerTaskConfig:
    return FingerTaskConfig(task_name="turn_easy")


def make_finger_turn_hard_cfg() -> FingerTaskConfig:
    return FingerTaskConfig(task_name="turn_hard")


_CFG_FACTORIES: dict[str, Callable[[], FingerTaskConfig]] = {
    "finger_spin": make_finger_spin_cfg,
    "finger_turn_easy": make_finger_turn_easy_cfg,
    "finger_turn_hard": make_finger_turn_hard_cfg,
}


def get_finger_cfg(name: str) -> FingerTaskConfig:
    """Build one named finger config profile."""
    if name not in _CFG_FACTORIES:
        raise ValueError(
            f"Unknown finger cfg '{name}'. Available: {sorted(_CFG_FACTORIES)}"
        )
    return _CFG_FACTORIES[name]()


def list_finger_cfgs() -> tuple[str, ...]:
    """List available finger config profile names."""
    return tuple(sorted(_CFG_FACTORIES.keys()))
