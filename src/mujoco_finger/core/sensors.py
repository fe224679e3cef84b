"""Name-based access to MuJoCo's flat ``sensordata`` vector.

The layout is resolved once from the compiled model; per-step reads only
slice the vector.  Observation code works on a :class:`SensorSnapshot`,
a plain copy of the readings, so it never touches a live ``MjData``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping

import mujoco
import numpy as np

from mujoco_finger.errors import ConfigurationError


@dataclass(frozen=True)
class SensorSnapshot:
    """Copied sensor readings plus the model parameters observations need.

    Parameters
    ----------
    values : Mapping[str, np.ndarray]
        Sensor name -> 1-D reading (length = sensor dimension).
    target_radius : float
        Current radius of the target site (0 when the task has no target).
    """

    values: Mapping[str, np.ndarray] = field(default_factory=dict)
    target_radius: float = 0.0

    def __getitem__(self, name: str) -> np.ndarray:
        return self.values[name]

    def scalar(self, name: str) -> float:
        return float(self.values[name][0])


class SensorLayout:
    """Maps sensor names to slices of ``data.sensordata``.

    Parameters
    ----------
    slices : Dict[str, slice]
        Sensor name -> slice into the sensordata vector.
    """

    def __init__(self, slices: Dict[str, slice]) -> None:
        self._slices = dict(slices)

    @classmethod
    def from_model(cls, model: mujoco.MjModel) -> "SensorLayout":
        """Build the layout from the sensor declarations of ``model``."""
        slices: Dict[str, slice] = {}
        for sid in range(model.nsensor):
            name = mujoco.mj_id2name(model, mujoco.mjtObj.mjOBJ_SENSOR, sid)
            if not name:
                continue
            adr = int(model.sensor_adr[sid])
            dim = int(model.sensor_dim[sid])
            slices[name] = slice(adr, adr + dim)
        return cls(slices)

    def __contains__(self, name: str) -> bool:
        return name in self._slices

    def slice_of(self, name: str) -> slice:
        return self._slices[name]

    def require(self, names: Iterable[str]) -> "SensorLayout":
        """Raise :class:`ConfigurationError` unless every name is present."""
        missing = [n for n in names if n not in self]
        if missing:
            raise ConfigurationError(
                f"Model is missing required sensors {missing}. "
                f"Available: {sorted(self._slices)}"
            )
        return self

    def read(self, data: mujoco.MjData, name: str) -> np.ndarray:
        """Return a copy of one sensor's reading."""
        return np.array(data.sensordata[self._slices[name]], dtype=float)

    def snapshot(
        self, data: mujoco.MjData, target_radius: float = 0.0
    ) -> SensorSnapshot:
        """Copy every named sensor reading into a :class:`SensorSnapshot`."""
        values = {name: self.read(data, name) for name in self._slices}
        return SensorSnapshot(values=values, target_radius=float(target_radius))
