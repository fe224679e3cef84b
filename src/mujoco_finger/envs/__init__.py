"""Gymnasium-ready environments for the finger tasks.

* :class:`FingerEnv` — raw env returning :class:`StepResult` records
* :class:`FingerGymnasium` — Gymnasium wrapper with a ``Dict`` observation space
"""

from mujoco_finger.envs.step_result import StepResult
from mujoco_finger.envs.finger import FingerEnv, FingerGymnasium

__all__ = [
    "StepResult",
    "FingerEnv",
    "FingerGymnasium",
]
