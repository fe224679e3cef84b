"""Finger model definition — MJCF asset and the object names tasks rely on."""

from mujoco_finger.robots.configs import (
    FINGER_MODEL_PATH,
    FingerHandles,
    FingerModelConfig,
    get_model_config,
    resolve_finger_handles,
)

__all__ = [
    "FINGER_MODEL_PATH",
    "FingerHandles",
    "FingerModelConfig",
    "get_model_config",
    "resolve_finger_handles",
]
