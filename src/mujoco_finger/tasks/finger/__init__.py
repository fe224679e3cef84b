"""Finger task entrypoints and config."""

from mujoco_finger.tasks.finger.config import (
    FingerTaskConfig,
    get_finger_cfg,
    list_finger_cfgs,
)
from mujoco_finger.tasks.finger.factory import (
    make_finger_env,
    make_finger_gymnasium,
)
from mujoco_finger.envs.finger import FingerEnv, FingerGymnasium

__all__ = [
    "FingerTaskConfig",
    "FingerEnv",
    "FingerGymnasium",
    "get_finger_cfg",
    "list_finger_cfgs",
    "make_finger_env",
    "make_finger_gymnasium",
]
