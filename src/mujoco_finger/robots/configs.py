"""Finger model configuration.

The entry records where the MJCF lives and which named objects the task
layer reads or writes:

    hinge_joint    — spinner joint whose anchor centres the target circle
    radius_geom    — geom whose size entries sum to the target-circle radius
    target_site    — goal marker, repositioned and resized for turn tasks
    tip_site       — marker on the spinner tip, hidden for spin
    sensor_names   — every sensor the observation functions need

Resolving by name keeps the task logic independent of the order in which
the asset declares its objects.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Tuple

import mujoco

from mujoco_finger.errors import ConfigurationError

_ROBOTS_DIR = Path(__file__).resolve().parent

FINGER_MODEL_PATH = str(_ROBOTS_DIR / "finger.xml")


@dataclass(frozen=True)
class FingerModelConfig:
    """Names of the model objects used by the finger tasks."""

    model_path: str = FINGER_MODEL_PATH
    hinge_joint: str = "hinge"
    radius_geom: str = "cap1"
    target_site: str = "target"
    tip_site: str = "tip"
    sensor_names: Tuple[str, ...] = (
        "proximal",
        "distal",
        "proximal_velocity",
        "distal_velocity",
        "hinge_velocity",
        "tip",
        "target",
        "spinner",
        "touchtop",
        "touchbottom",
    )


MODEL_CONFIGS: Dict[str, FingerModelConfig] = {
    "finger": FingerModelConfig(),
}


def get_model_config(name: str = "finger") -> FingerModelConfig:
    """Return the model config registered under ``name``."""
    if name not in MODEL_CONFIGS:
        raise ValueError(f"Unknown model '{name}'. Available: {list(MODEL_CONFIGS)}")
    return MODEL_CONFIGS[name]


@dataclass(frozen=True)
class FingerHandles:
    """Runtime-resolved MuJoCo ids for one :class:`FingerModelConfig`."""

    hinge_joint_id: int
    hinge_dof_id: int
    radius_geom_id: int
    target_site_id: int
    tip_site_id: int


def _require_id(model: mujoco.MjModel, objtype: mujoco.mjtObj, name: str) -> int:
    obj_id = mujoco.mj_name2id(model, objtype, name)
    if obj_id < 0:
        kind = objtype.name.replace("mjOBJ_", "").lower()
        raise ConfigurationError(f"Model has no {kind} named '{name}'.")
    return int(obj_id)


def resolve_finger_handles(
    model: mujoco.MjModel, config: FingerModelConfig
) -> FingerHandles:
    """Look up every named object of ``config`` in ``model``."""
    hinge = _require_id(model, mujoco.mjtObj.mjOBJ_JOINT, config.hinge_joint)
    return FingerHandles(
        hinge_joint_id=hinge,
        hinge_dof_id=int(model.jnt_dofadr[hinge]),
        radius_geom_id=_require_id(model, mujoco.mjtObj.mjOBJ_GEOM, config.radius_geom),
        target_site_id=_require_id(model, mujoco.mjtObj.mjOBJ_SITE, config.target_site),
        tip_site_id=_require_id(model, mujoco.mjtObj.mjOBJ_SITE, config.tip_site),
    )
