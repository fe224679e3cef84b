"""Sparse reward terms for the finger tasks."""
from __future__ import annotations

from mujoco_finger.core.sensors import SensorSnapshot
from mujoco_finger.envs.finger.observations import dist_to_target
from mujoco_finger.envs.finger.variants import Spin, TaskVariant, Turn


def spin_reward(hinge_velocity: float, spin_velocity: float = 15.0) -> float:
    """1.0 once the hinge turns at ``spin_velocity`` or faster (negative direction)."""
    return float(hinge_velocity <= -spin_velocity)


def turn_reward(distance: float) -> float:
    """1.0 while the tip is inside (or on the edge of) the target disc."""
    return float(distance <= 0.0)


def compute_reward(snapshot: SensorSnapshot, variant: TaskVariant) -> float:
    """Reward for one step of ``variant``; no side effects."""
    if isinstance(variant, Spin):
        return spin_reward(snapshot.scalar("hinge_velocity"), variant.spin_velocity)
    if isinstance(variant, Turn):
        return turn_reward(dist_to_target(snapshot))
    raise TypeError(f"Unsupported finger variant {type(variant).__name__}")
