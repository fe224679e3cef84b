"""Factories for creating finger task environments."""
from __future__ import annotations

from mujoco_finger.envs.finger import FingerEnv, FingerGymnasium
from mujoco_finger.tasks.finger.config import FingerTaskConfig


def _env_kwargs(cfg: FingerTaskConfig) -> dict:
    kwargs = dict(cfg.env_kwargs)
    kwargs.setdefault("task_name", cfg.task_name)
    kwargs.setdefault("frame_skip", cfg.frame_skip)
    kwargs.setdefault("max_episode_steps", cfg.max_episode_steps)
    kwargs.setdefault("seed", cfg.seed)
    kwargs.setdefault("model_path", cfg.model_path)
    kwargs.setdefault("max_init_attempts", cfg.max_init_attempts)
    kwargs.setdefault("diagnostics", cfg.diagnostics)
    return kwargs


def make_finger_env(config: FingerTaskConfig | None = None) -> FingerEnv:
    """Create a raw finger environment from ``FingerTaskConfig``."""
    cfg = config or FingerTaskConfig()
    return FingerEnv(**_env_kwargs(cfg))


def make_finger_gymnasium(config: FingerTaskConfig | None = None) -> FingerGymnasium:
    """Create a Gymnasium finger environment from task config."""
    cfg = config or FingerTaskConfig()
    return FingerGymnasium(**_env_kwargs(cfg))
