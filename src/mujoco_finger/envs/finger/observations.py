"""Observation terms for the finger tasks.

All terms are pure functions of a :class:`SensorSnapshot`.  Positions are
projected onto the x-z plane the finger moves in and expressed relative
to the spinner body, so they do not depend on where the spinner is placed.
"""
from __future__ import annotations

from typing import Dict

import numpy as np

from mujoco_finger.core.sensors import SensorSnapshot
from mujoco_finger.envs.finger.variants import TaskVariant

# x and z of a world-frame 3-vector; y is the out-of-plane axis.
_PLANE_AXES = [0, 2]


def planar(vec: np.ndarray) -> np.ndarray:
    return np.asarray(vec, dtype=float)[_PLANE_AXES]


def velocity(snapshot: SensorSnapshot) -> np.ndarray:
    """Joint velocities ``[proximal, distal, hinge]`` (3,)."""
    return np.array(
        [
            snapshot.scalar("proximal_velocity"),
            snapshot.scalar("distal_velocity"),
            snapshot.scalar("hinge_velocity"),
        ],
        dtype=float,
    )


def tip_position(snapshot: SensorSnapshot) -> np.ndarray:
    """Spinner tip relative to the spinner origin (2,)."""
    return planar(snapshot["tip"]) - planar(snapshot["spinner"])


def target_position(snapshot: SensorSnapshot) -> np.ndarray:
    """Target centre relative to the spinner origin (2,)."""
    return planar(snapshot["target"]) - planar(snapshot["spinner"])


def bounded_position(snapshot: SensorSnapshot) -> np.ndarray:
    """``[proximal angle, distal angle, tip x, tip z]`` (4,)."""
    tip = tip_position(snapshot)
    return np.array(
        [snapshot.scalar("proximal"), snapshot.scalar("distal"), tip[0], tip[1]],
        dtype=float,
    )


def touch(snapshot: SensorSnapshot) -> np.ndarray:
    """Log-compressed touch readings ``log1p([top, bottom])`` (2,)."""
    raw = np.array(
        [snapshot.scalar("touchtop"), snapshot.scalar("touchbottom")], dtype=float
    )
    return np.log1p(raw)


def to_target(snapshot: SensorSnapshot) -> np.ndarray:
    """Vector from the tip to the target centre (2,)."""
    return target_position(snapshot) - tip_position(snapshot)


def dist_to_target(snapshot: SensorSnapshot) -> float:
    """Signed distance from the tip to the target disc.

    Zero or negative when the tip is inside the disc.
    """
    return float(np.linalg.norm(to_target(snapshot)) - snapshot.target_radius)


def build_observation(
    snapshot: SensorSnapshot, variant: TaskVariant
) -> Dict[str, np.ndarray]:
    """Assemble the observation dict for ``variant``."""
    obs = {
        "position": bounded_position(snapshot),
        "velocity": velocity(snapshot),
        "touch": touch(snapshot),
    }
    if variant.has_target:
        obs["target_position"] = target_position(snapshot)
        obs["dist_to_target"] = np.asarray(dist_to_target(snapshot), dtype=float)
    return obs


def observation_shapes(variant: TaskVariant) -> Dict[str, tuple]:
    """Per-key shapes of :func:`build_observation` for ``variant``."""
    shapes = {"position": (4,), "velocity": (3,), "touch": (2,)}
    if variant.has_target:
        shapes["target_position"] = (2,)
        shapes["dist_to_target"] = ()
    return shapes
