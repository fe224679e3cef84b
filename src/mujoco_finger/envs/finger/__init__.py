"""Finger environments and their MDP pieces.

* :mod:`~mujoco_finger.envs.finger.variants` — ``spin`` / ``turn_easy`` / ``turn_hard``
* :mod:`~mujoco_finger.envs.finger.observations` — sensor-derived observation terms
* :mod:`~mujoco_finger.envs.finger.rewards` — sparse reward terms
* :mod:`~mujoco_finger.envs.finger.resetting` — target placement and joint sampling
* :mod:`~mujoco_finger.envs.finger.finger_env` — raw env + Gymnasium wrapper
"""

from mujoco_finger.envs.finger.variants import (
    TASK_VARIANTS,
    Spin,
    TaskVariant,
    Turn,
    TurnEasy,
    TurnHard,
    list_task_names,
    parse_task_variant,
)
from mujoco_finger.envs.finger.finger_env import FingerEnv, FingerGymnasium

__all__ = [
    "TASK_VARIANTS",
    "Spin",
    "TaskVariant",
    "Turn",
    "TurnEasy",
    "TurnHard",
    "list_task_names",
    "parse_task_variant",
    "FingerEnv",
    "FingerGymnasium",
]
