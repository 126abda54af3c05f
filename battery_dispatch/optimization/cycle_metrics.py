"""
Equivalent-cycle metrics derived from a solved energy trajectory.

Energy throughput is normalized by capacity_max into "equivalent full cycles",
the usual unit for battery wear accounting: one full charge followed by one
full discharge counts as one round-trip cycle.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict, Sequence

import numpy as np

from battery_dispatch.settings import CYCLE_TOLERANCE


@dataclass(frozen=True)
class CycleMetrics:
    """Throughput [kWh] and equivalent cycles [-] of one energy trajectory."""

    charged_energy: float
    discharged_energy: float
    cycle_count_charge: float
    cycle_count_discharge: float
    cycle_count_round_trip: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def compute_cycle_metrics(
    energy: Sequence[float],
    capacity_max: float,
    tol: float = CYCLE_TOLERANCE,
) -> CycleMetrics:
    """
    Summarize an energy trajectory E[0..T] into throughput and cycle counts.

    For each step, delta = E[t+1] - E[t]. Deltas above tol count as charged
    energy, deltas below -tol as discharged energy, anything in between is
    solver noise and ignored.

    Args:
        energy: Stored energy at each step boundary [kWh], length T + 1.
        capacity_max: Normalization capacity [kWh], must be > 0.
        tol: Absolute noise threshold [kWh].

    Returns:
        CycleMetrics for the trajectory. A trajectory with fewer than two
        points yields all zeros.

    Raises:
        ValueError: If capacity_max <= 0 or tol < 0.
    """
    if capacity_max <= 0.0:
        raise ValueError(f"capacity_max must be > 0 to normalize cycles, got {capacity_max}")
    if tol < 0.0:
        raise ValueError(f"Cycle tolerance must be >= 0, got {tol}")

    delta = np.diff(np.asarray(energy, dtype=float))

    charged = float(delta[delta > tol].sum())
    discharged = float(np.abs(delta[delta < -tol]).sum())

    return CycleMetrics(
        charged_energy=charged,
        discharged_energy=discharged,
        cycle_count_charge=charged / capacity_max,
        cycle_count_discharge=discharged / capacity_max,
        cycle_count_round_trip=(charged + discharged) / (2.0 * capacity_max),
    )
