"""Task layer: config profiles and env factories."""

from mujoco_finger.tasks.finger import (
    FingerTaskConfig,
    get_finger_cfg,
    list_finger_cfgs,
    make_finger_env,
    make_finger_gymnasium,
)

__all__ = [
    "FingerTaskConfig",
    "get_finger_cfg",
    "list_finger_cfgs",
    "make_finger_env",
    "make_finger_gymnasium",
]
