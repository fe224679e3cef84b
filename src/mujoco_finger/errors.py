"""Exception types raised by the finger task layer.

MuJoCo's own errors (invalid model, numerical divergence) are never
wrapped; they propagate to the caller unchanged.
"""
from __future__ import annotations


class FingerError(Exception):
    """Base class for errors raised by :mod:`mujoco_finger`."""


class ConfigurationError(FingerError, ValueError):
    """Invalid task configuration or an asset missing required names."""


class InitializationExhaustedError(FingerError, RuntimeError):
    """No contact-free joint configuration was found within the attempt budget."""

    def __init__(self, attempts: int) -> None:
        super().__init__(
            f"Could not find a collision-free state after {attempts} attempts."
        )
        self.attempts = int(attempts)
