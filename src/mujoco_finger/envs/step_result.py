"""Shared step-result container for the finger environments."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

import numpy as np


@dataclass
class StepResult:
    """Container returned by ``env.reset()`` and ``env.step()``.

    ``obs`` maps observation names to arrays.  ``discount`` is passed
    through for consumers that expect a dm_env-style record; the finger
    tasks never change it from 1.0.
    """

    obs: Dict[str, np.ndarray]
    reward: float
    discount: float
    done: bool
    info: Dict = field(default_factory=dict)
