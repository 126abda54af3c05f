"""Plain-text tables for console output of a dispatch plan."""

from __future__ import annotations

from battery_dispatch.optimization.dispatch_optimizer import DispatchPlan
from battery_dispatch.settings import CYCLE_TOLERANCE


def _denoise(value: float) -> float:
    # Solver noise such as -1e-12 or -0.0 prints as 0.00
    return float(value) if abs(value) > CYCLE_TOLERANCE else 0.0


def format_schedule(plan: DispatchPlan) -> str:
    """
    Per-step table with one row per time step.

    Example:
        t   Price   Charge    Disch   Energy
        0    20.0     0.00     0.00     0.00
        1    18.0    30.00     0.00    28.50
    """
    lines = [f"{'t':>4}  {'Price':>8}  {'Charge':>8}  {'Disch':>8}  {'Energy':>8}"]
    for t in range(plan.n_timesteps):
        lines.append(
            f"{t:>4}  {plan.prices[t]:>8.1f}  {_denoise(plan.charge_power[t]):>8.2f}  "
            f"{_denoise(plan.discharge_power[t]):>8.2f}  {_denoise(plan.energy[t]):>8.2f}"
        )
    return "\n".join(lines)


def format_cycle_summary(plan: DispatchPlan) -> str:
    """Energy throughput and equivalent cycles of the plan."""
    m = plan.metrics
    return "\n".join([
        f"Charged energy = {m.charged_energy:.3f}",
        f"Discharged energy = {m.discharged_energy:.3f}",
        f"Equivalent cycles (charge) = {m.cycle_count_charge:.4f}",
        f"Equivalent cycles (discharge) = {m.cycle_count_discharge:.4f}",
        f"Equivalent cycles (round-trip) = {m.cycle_count_round_trip:.4f}",
    ])
