"""Fault model — per-flight Bernoulli draw from a linear hazard.

The chance of a fault during one flight is taken as
``fault_probability_per_hour × duration_hours``.  This is a linear rate,
not an exponential survival model, and it is deliberately not clamped:
any product ≥ 1 means the flight always faults.
"""

from __future__ import annotations

import numpy as np


class FaultModel:
    """Decides whether a completed flight suffered a fault.

    Parameters
    ----------
    rng : np.random.Generator
        Owned by the simulation and seeded once per run.
    """

    def __init__(self, rng: np.random.Generator) -> None:
        self._rng = rng

    def occurred(self, fault_probability_per_hour: float, duration_hours: float) -> bool:
        # Always draw so the random stream does not depend on the rates.
        sample = self._rng.random()
        return bool(sample < fault_probability_per_hour * duration_hours)
