"""
Battery dispatch optimizer.

Builds the dispatch LP for a BatteryCore and a price series, solves it with
scipy's HiGHS backend and extracts a DispatchPlan with cycle metrics.

Every outcome is returned as a DispatchResult; the caller inspects
`result.status` instead of catching exceptions:

    OPTIMAL        plan and metrics are available
    NO_TIME_STEPS  empty price series, the solver was not called
    INFEASIBLE     constraints cannot be met (configuration bug)
    UNBOUNDED      objective unbounded (cannot happen with bounded variables)
    LIMIT_REACHED  iteration or time limit hit before optimality
    ERROR          numerical difficulties or malformed problem

Invalid configuration raises ValueError before the solver is called.

Typical use:
    battery = BatteryCore(capacity_max=100, power_charge_max=30, power_discharge_max=30,
                          eta_charge=0.95, eta_discharge=0.95)
    result = DispatchOptimizer(battery, prices).optimize()
    if result.success:
        print(result.plan.objective_value, result.plan.metrics.cycle_count_round_trip)
    else:
        print(f"No solution found: {result.status.value}")
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

import numpy as np
import pandas as pd
from scipy.optimize import linprog

from battery_dispatch.core.battery_core import BatteryCore
from battery_dispatch.core.price_series import PriceSeries, as_price_array
from battery_dispatch.optimization.cycle_metrics import CycleMetrics, compute_cycle_metrics
from battery_dispatch.optimization.dispatch_model import build_dispatch_model
from battery_dispatch.optimization.linear_model import LinearModel
from battery_dispatch.settings import (
    CYCLE_TOLERANCE,
    DEFAULT_TIME_LIMIT_S,
    FEASIBILITY_TOLERANCE,
    LP_METHOD,
)

logger = logging.getLogger(__name__)


class SolveStatus(Enum):
    """Outcome of one optimize() call."""

    OPTIMAL = 'optimal'
    NO_TIME_STEPS = 'no_time_steps'
    INFEASIBLE = 'infeasible'
    UNBOUNDED = 'unbounded'
    LIMIT_REACHED = 'limit_reached'
    ERROR = 'error'


# scipy.optimize.linprog status codes
_LINPROG_STATUS = {
    0: SolveStatus.OPTIMAL,
    1: SolveStatus.LIMIT_REACHED,
    2: SolveStatus.INFEASIBLE,
    3: SolveStatus.UNBOUNDED,
    4: SolveStatus.ERROR,
}


@dataclass
class DispatchPlan:
    """
    Solved schedule over T steps.

    Attributes:
        prices: Price per step [currency/kWh], length T.
        charge_power: Power drawn from the grid per step [kWh/step], length T.
        discharge_power: Power delivered to the grid per step [kWh/step], length T.
        energy: Stored energy at each step boundary [kWh], length T + 1.
        objective_value: Trading profit at the optimum [currency].
        metrics: Throughput and equivalent cycles of the energy trajectory.
    """

    prices: np.ndarray
    charge_power: np.ndarray
    discharge_power: np.ndarray
    energy: np.ndarray
    objective_value: float
    metrics: CycleMetrics

    @property
    def n_timesteps(self) -> int:
        return len(self.prices)

    @property
    def net_power(self) -> np.ndarray:
        """Discharge minus charge per step; positive = selling to the grid."""
        return self.discharge_power - self.charge_power

    def simultaneous_steps(self, tol: float = CYCLE_TOLERANCE) -> List[int]:
        """Return steps where the battery charges and discharges at the same time."""
        both = (self.charge_power > tol) & (self.discharge_power > tol)
        return np.flatnonzero(both).tolist()

    def to_records(self) -> List[Dict[str, float]]:
        """One dict per step with keys t, price, charge_power, discharge_power, energy."""
        return [
            {
                't': t,
                'price': float(self.prices[t]),
                'charge_power': float(self.charge_power[t]),
                'discharge_power': float(self.discharge_power[t]),
                'energy': float(self.energy[t]),
            }
            for t in range(self.n_timesteps)
        ]

    def to_dataframe(self) -> pd.DataFrame:
        """
        Return the schedule as a pandas DataFrame indexed by step.

        `energy` is the stored energy at the start of each step; the final
        value energy[T] is available on the plan itself.
        """
        return pd.DataFrame(self.to_records()).set_index('t')


@dataclass
class DispatchResult:
    """
    Result of DispatchOptimizer.optimize().

    `plan` is set if and only if `status` is SolveStatus.OPTIMAL.
    """

    status: SolveStatus
    plan: Optional[DispatchPlan] = None
    message: str = ''
    solve_time_s: float = 0.0
    n_timesteps: int = 0

    @property
    def success(self) -> bool:
        return self.status is SolveStatus.OPTIMAL

    def get_summary(self) -> str:
        """Return a human-readable summary of the outcome."""
        lines = [f"Dispatch result: {self.status.value} ({self.n_timesteps} timesteps)"]
        if self.message:
            lines.append(f"  Solver message: {self.message}")
        if self.plan is None:
            if self.status is SolveStatus.NO_TIME_STEPS:
                lines.append("  Nothing to optimize: the price series is empty")
            else:
                lines.append("  No solution found")
            return "\n".join(lines)

        m = self.plan.metrics
        lines += [
            f"  Maximum profit: {self.plan.objective_value:.2f}",
            f"  Charged energy: {m.charged_energy:.3f} kWh",
            f"  Discharged energy: {m.discharged_energy:.3f} kWh",
            f"  Equivalent cycles (round-trip): {m.cycle_count_round_trip:.4f}",
            f"  Solve time: {self.solve_time_s:.3f} s",
        ]
        return "\n".join(lines)


class DispatchOptimizer:
    """
    Profit-maximizing charge/discharge scheduler for a single battery.

    Each optimize() call builds its own model from read-only inputs, so one
    instance per scenario can run on its own thread.
    """

    def __init__(
        self,
        battery: BatteryCore,
        prices: PriceSeries,
        name: str = 'battery',
        energy_final: Optional[float] = None,
        time_limit_s: Optional[float] = DEFAULT_TIME_LIMIT_S,
    ) -> None:
        """
        Args:
            battery: Operating envelope and initial energy.
            prices: Price per time step [currency/kWh]; may be empty.
            name: Prefix for LP variable names.
            energy_final: Optional stored energy required at the end of the horizon [kWh].
            time_limit_s: Optional solver wall-clock limit [s].

        Raises:
            ValueError: If prices contain non-finite values or time_limit_s is not positive.
        """
        if time_limit_s is not None and time_limit_s <= 0:
            raise ValueError(f"time_limit_s must be > 0, got {time_limit_s}")

        self.battery = battery
        self.prices = as_price_array(prices)
        self.name = name
        self.energy_final = energy_final
        self.time_limit_s = time_limit_s

    @property
    def n_timesteps(self) -> int:
        return len(self.prices)

    def build_model(self) -> LinearModel:
        """Build the LP for the current inputs (requires at least one step)."""
        return build_dispatch_model(
            self.battery,
            self.prices,
            name=self.name,
            energy_final=self.energy_final,
        )

    def optimize(self) -> DispatchResult:
        """
        Build and solve the dispatch LP.

        Returns:
            DispatchResult; see the module docstring for the status variants.

        Raises:
            ValueError: If energy_final lies outside the capacity bounds.
        """
        T = self.n_timesteps
        if T == 0:
            logger.info("Price series is empty, nothing to optimize")
            return DispatchResult(
                status=SolveStatus.NO_TIME_STEPS,
                message="No time steps to optimize",
            )

        model = self.build_model()
        logger.info("Solving dispatch LP with %d timesteps (%d variables)", T, model.n_vars)

        options = {'disp': False}
        if self.time_limit_s is not None:
            options['time_limit'] = float(self.time_limit_s)

        start = time.perf_counter()
        try:
            lp = linprog(
                c=model.cost_coefficients,
                A_eq=model.A_eq,
                b_eq=model.b_eq,
                bounds=model.var_bounds,
                method=LP_METHOD,
                options=options,
            )
        except ValueError as exc:
            logger.warning("LP solver rejected the problem: %s", exc)
            return DispatchResult(
                status=SolveStatus.ERROR,
                message=str(exc),
                solve_time_s=time.perf_counter() - start,
                n_timesteps=T,
            )
        solve_time_s = time.perf_counter() - start

        status = _LINPROG_STATUS.get(lp.status, SolveStatus.ERROR)
        if status is not SolveStatus.OPTIMAL:
            logger.warning("Optimization failed (%s): %s", status.value, lp.message)
            return DispatchResult(
                status=status,
                message=lp.message,
                solve_time_s=solve_time_s,
                n_timesteps=T,
            )

        plan = self._extract_plan(model, lp.x)
        logger.info("Optimal profit: %.2f (%.3f s)", plan.objective_value, solve_time_s)

        return DispatchResult(
            status=SolveStatus.OPTIMAL,
            plan=plan,
            message=lp.message,
            solve_time_s=solve_time_s,
            n_timesteps=T,
        )

    def _extract_plan(self, model: LinearModel, x: np.ndarray) -> DispatchPlan:
        charge_power, discharge_power, energy = model.split_solution(x)

        balance = self.balance_residual(charge_power, discharge_power, energy)
        if balance.size and np.max(np.abs(balance)) > FEASIBILITY_TOLERANCE:
            logger.warning(
                "Energy balance residual %.2e exceeds tolerance %.0e",
                np.max(np.abs(balance)),
                FEASIBILITY_TOLERANCE,
            )

        metrics = compute_cycle_metrics(energy, self.battery.capacity_max)

        return DispatchPlan(
            prices=self.prices.copy(),
            charge_power=charge_power,
            discharge_power=discharge_power,
            energy=energy,
            objective_value=model.objective(x),
            metrics=metrics,
        )

    def balance_residual(
        self,
        charge_power: np.ndarray,
        discharge_power: np.ndarray,
        energy: np.ndarray,
    ) -> np.ndarray:
        """
        Residual of the energy balance per step.

        E[t+1] - E[t] - eta_charge * P_charge[t] + P_discharge[t] / eta_discharge,
        which is zero for a consistent trajectory.
        """
        return (
            np.diff(energy)
            - self.battery.eta_charge * charge_power
            + discharge_power / self.battery.eta_discharge
        )
