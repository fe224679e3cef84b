"""Finger task variants.

Each variant is an immutable value carrying its own parameters, so task
logic dispatches on the variant type once instead of comparing task-name
strings.  ``spin`` has no target; the turn variants differ only in the
radius of the target disc.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, Dict, Tuple, Union

from mujoco_finger.errors import ConfigurationError


@dataclass(frozen=True)
class Spin:
    """Spin the free body fast enough in the required direction."""

    name: ClassVar[str] = "spin"
    has_target: ClassVar[bool] = False

    spin_velocity: float = 15.0
    hinge_damping: float = 0.03


@dataclass(frozen=True)
class Turn:
    """Rotate the body until its tip lies inside the target disc."""

    name: ClassVar[str] = "turn"
    has_target: ClassVar[bool] = True

    target_radius: float

    def __post_init__(self) -> None:
        if not self.target_radius > 0.0:
            raise ConfigurationError(
                f"target_radius must be positive, got {self.target_radius}"
            )


@dataclass(frozen=True)
class TurnEasy(Turn):
    name: ClassVar[str] = "turn_easy"

    target_radius: float = 0.07


@dataclass(frozen=True)
class TurnHard(Turn):
    name: ClassVar[str] = "turn_hard"

    target_radius: float = 0.03


TaskVariant = Union[Spin, TurnEasy, TurnHard]

TASK_VARIANTS: Dict[str, Callable[[], TaskVariant]] = {
    Spin.name: Spin,
    TurnEasy.name: TurnEasy,
    TurnHard.name: TurnHard,
}


def parse_task_variant(task_name: str) -> TaskVariant:
    """Return the variant for ``task_name`` or raise :class:`ConfigurationError`."""
    if task_name not in TASK_VARIANTS:
        raise ConfigurationError(
            f"Unknown task_name '{task_name}' for finger. "
            f"Available: {sorted(TASK_VARIANTS)}"
        )
    return TASK_VARIANTS[task_name]()


def list_task_names() -> Tuple[str, ...]:
    """List accepted ``task_name`` values."""
    return tuple(TASK_VARIANTS)
