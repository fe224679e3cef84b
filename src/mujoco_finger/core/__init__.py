"""Core engine modules — model loading, sensor lookup, joint randomization."""

from mujoco_finger.core.xml_builder import load_model_xml, build_model
from mujoco_finger.core.sensors import SensorLayout, SensorSnapshot
from mujoco_finger.core.randomizers import (
    RetryResult,
    bounded_retry,
    random_quaternion,
    randomize_limited_and_rotational_joints,
)

__all__ = [
    "load_model_xml",
    "build_model",
    "SensorLayout",
    "SensorSnapshot",
    "RetryResult",
    "bounded_retry",
    "random_quaternion",
    "randomize_limited_and_rotational_joints",
]
