"""Random joint configurations and bounded rejection sampling."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

import mujoco
import numpy as np


@dataclass(frozen=True)
class RetryResult:
    """Outcome of :func:`bounded_retry`."""

    success: bool
    attempts: int


def bounded_retry(attempt: Callable[[], bool], max_attempts: int) -> RetryResult:
    """Call ``attempt`` until it returns ``True`` or ``max_attempts`` is spent.

    ``attempts`` counts every call made, including the successful one.
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
    for i in range(1, max_attempts + 1):
        if attempt():
            return RetryResult(success=True, attempts=i)
    return RetryResult(success=False, attempts=max_attempts)


def random_quaternion(rng: np.random.Generator, max_angle: float = math.pi) -> np.ndarray:
    """Unit quaternion about a uniform random axis.

    The rotation angle is drawn from ``[-max_angle, max_angle]``; the default
    covers every orientation.
    """
    axis = rng.standard_normal(3)
    axis /= np.linalg.norm(axis)
    angle = rng.uniform(-max_angle, max_angle)
    quat = np.zeros(4)
    mujoco.mju_axisAngle2Quat(quat, axis, angle)
    return quat


def randomize_limited_and_rotational_joints(
    model: mujoco.MjModel,
    data: mujoco.MjData,
    rng: np.random.Generator,
) -> None:
    """Write random values into ``data.qpos`` for every joint that admits one.

    * hinge: uniform in its range if limited, otherwise in ``[-pi, pi]``
    * slide: uniform in its range if limited, otherwise untouched
    * ball: random orientation, bounded by ``range[1]`` if limited
    * free: random orientation, position untouched

    Joints are visited in model order so a seeded ``rng`` gives a
    reproducible configuration.
    """
    for jid in range(model.njnt):
        jtype = int(model.jnt_type[jid])
        limited = bool(model.jnt_limited[jid])
        lo, hi = model.jnt_range[jid]
        qadr = int(model.jnt_qposadr[jid])

        if jtype == mujoco.mjtJoint.mjJNT_HINGE:
            if limited:
                data.qpos[qadr] = rng.uniform(lo, hi)
            else:
                data.qpos[qadr] = rng.uniform(-math.pi, math.pi)
        elif jtype == mujoco.mjtJoint.mjJNT_SLIDE:
            if limited:
                data.qpos[qadr] = rng.uniform(lo, hi)
        elif jtype == mujoco.mjtJoint.mjJNT_BALL:
            max_angle = float(hi) if limited else math.pi
            data.qpos[qadr: qadr + 4] = random_quaternion(rng, max_angle)
        elif jtype == mujoco.mjtJoint.mjJNT_FREE:
            data.qpos[qadr + 3: qadr + 7] = random_quaternion(rng)
