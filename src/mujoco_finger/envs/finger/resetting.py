"""Episode initialization for the finger tasks.

Spin hides the target markers and lowers the hinge damping.  Turn places
the target on the circle swept by the spinner tip, at a random bearing
around the hinge anchor.  Both then draw joint angles until MuJoCo reports
no contacts.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import mujoco
import numpy as np

from mujoco_finger.core.randomizers import (
    bounded_retry,
    randomize_limited_and_rotational_joints,
)
from mujoco_finger.envs.finger.variants import Spin, TaskVariant, Turn
from mujoco_finger.errors import InitializationExhaustedError
from mujoco_finger.robots.configs import FingerHandles

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 1000


@dataclass
class EpisodeInit:
    """What the initializer chose for one episode."""

    qpos0: np.ndarray
    attempts: int
    target: np.ndarray | None = None


def hide_target_markers(model: mujoco.MjModel, handles: FingerHandles) -> None:
    model.site_rgba[handles.target_site_id, 3] = 0.0
    model.site_rgba[handles.tip_site_id, 3] = 0.0


def target_circle_radius(model: mujoco.MjModel, handles: FingerHandles) -> float:
    """Distance from the hinge axis to the spinner tip."""
    return float(np.sum(model.geom_size[handles.radius_geom_id]))


def place_target(
    model: mujoco.MjModel,
    data: mujoco.MjData,
    handles: FingerHandles,
    angle: float,
    target_radius: float,
) -> np.ndarray:
    """Move the target site to ``angle`` on the tip circle; return its (x, z).

    ``data.xanchor`` must be current (call ``mj_forward`` first).
    """
    hinge_x, _, hinge_z = data.xanchor[handles.hinge_joint_id]
    radius = target_circle_radius(model, handles)
    target_x = hinge_x + radius * math.sin(angle)
    target_z = hinge_z + radius * math.cos(angle)
    model.site_pos[handles.target_site_id, 0] = target_x
    model.site_pos[handles.target_site_id, 2] = target_z
    model.site_size[handles.target_site_id, 0] = target_radius
    return np.array([target_x, target_z], dtype=float)


def set_random_joint_angles(
    model: mujoco.MjModel,
    data: mujoco.MjData,
    rng: np.random.Generator,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> int:
    """Randomize joints until the configuration is contact-free.

    Returns the number of attempts used.  Raises
    :class:`InitializationExhaustedError` when ``max_attempts`` is spent.
    """

    def _attempt() -> bool:
        randomize_limited_and_rotational_joints(model, data, rng)
        mujoco.mj_forward(model, data)
        return data.ncon == 0

    result = bounded_retry(_attempt, max_attempts)
    if not result.success:
        raise InitializationExhaustedError(result.attempts)
    if result.attempts > max(1, max_attempts // 10):
        logger.warning(
            "Contact-free joint sample took %d of %d attempts",
            result.attempts, max_attempts,
        )
    return result.attempts


def initialize_episode(
    model: mujoco.MjModel,
    data: mujoco.MjData,
    rng: np.random.Generator,
    variant: TaskVariant,
    handles: FingerHandles,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> EpisodeInit:
    """Apply per-variant setup, then draw a contact-free joint configuration."""
    target = None
    if isinstance(variant, Spin):
        hide_target_markers(model, handles)
        model.dof_damping[handles.hinge_dof_id] = variant.hinge_damping
    elif isinstance(variant, Turn):
        angle = rng.uniform(-math.pi, math.pi)
        target = place_target(model, data, handles, angle, variant.target_radius)
    else:
        raise TypeError(f"Unsupported finger variant {type(variant).__name__}")

    attempts = set_random_joint_angles(model, data, rng, max_attempts)
    logger.debug(
        "Initialized %s episode after %d attempt(s), target=%s",
        variant.name, attempts, target,
    )
    return EpisodeInit(qpos0=data.qpos.copy(), attempts=attempts, target=target)
