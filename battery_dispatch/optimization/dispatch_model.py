"""
Construction of the battery dispatch linear program.

Translates a BatteryCore and a price vector of length T into a LinearModel:

Variables (all continuous):
    P_charge[t]    in [0, power_charge_max]          t in [0, T)
    P_discharge[t] in [0, power_discharge_max]       t in [0, T)
    E[t]           in [capacity_min, capacity_max]   t in [0, T]

Constraints:
    E[0] = energy_initial
    E[t+1] = E[t] + eta_charge * P_charge[t] - P_discharge[t] / eta_discharge
    E[T] = energy_final                               (only if requested)

Objective (maximize):
    sum_t price[t] * (P_discharge[t] - P_charge[t])

The model does not forbid charging and discharging in the same step. At a
positive price this is never profitable, so the LP stays free of binaries.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
from scipy import sparse

from battery_dispatch.core.battery_core import BatteryCore
from battery_dispatch.core.price_series import PriceSeries, as_price_array
from battery_dispatch.optimization.linear_model import LinearModel, variable_layout

logger = logging.getLogger(__name__)


def build_dispatch_model(
    battery: BatteryCore,
    prices: PriceSeries,
    name: str = 'battery',
    energy_final: Optional[float] = None,
) -> LinearModel:
    """
    Build the dispatch LP for one battery over one price horizon.

    Args:
        battery: Operating envelope; read, never modified.
        prices: Price per time step [currency/kWh], length T >= 1.
        name: Prefix for variable names.
        energy_final: Optional stored energy required at the end of the horizon [kWh].

    Returns:
        LinearModel with 3T + 1 variables and T + 1 (or T + 2) equality rows.

    Raises:
        ValueError: If prices are empty or invalid, or energy_final lies
            outside the capacity bounds.
    """
    price = as_price_array(prices)
    T = len(price)
    if T == 0:
        raise ValueError("Cannot build a dispatch model without time steps")

    if energy_final is not None and not battery.capacity_min <= energy_final <= battery.capacity_max:
        raise ValueError(
            f"energy_final={energy_final:.2f} kWh must lie within "
            f"[{battery.capacity_min:.2f}, {battery.capacity_max:.2f}] kWh"
        )

    n_vars = 3 * T + 1
    i_charge, i_discharge, i_energy = variable_layout(T)

    # Variable names
    var_names = [f"{name}_P_charge_{t}" for t in range(T)]
    var_names += [f"{name}_P_discharge_{t}" for t in range(T)]
    var_names += [f"{name}_E_{t}" for t in range(T + 1)]

    # Variable bounds
    var_bounds = [(0.0, battery.power_charge_max)] * T
    var_bounds += [(0.0, battery.power_discharge_max)] * T
    var_bounds += [(battery.capacity_min, battery.capacity_max)] * (T + 1)
    # Fixing E[0] through its bounds keeps the boundary value exact after presolve
    var_bounds[i_energy[0]] = (battery.energy_initial, battery.energy_initial)

    # Cost coefficients (linprog minimizes, so profit is negated):
    # buying at price[t] costs +price, selling earns -price
    cost_coefficients = np.zeros(n_vars)
    cost_coefficients[i_charge] = price
    cost_coefficients[i_discharge] = -price

    # Equality constraints as COO triplets
    rows, cols, vals = [], [], []
    b_eq = []

    # Initial energy: E[0] = energy_initial
    rows.append(np.array([0]))
    cols.append(np.array([i_energy[0]]))
    vals.append(np.array([1.0]))
    b_eq.append(battery.energy_initial)

    # Energy balance for each step t (row 1 + t):
    # E[t+1] - E[t] - eta_c * P_charge[t] + P_discharge[t] / eta_d = 0
    balance_rows = 1 + np.arange(T)
    rows += [balance_rows] * 4
    cols += [i_energy[1:], i_energy[:-1], i_charge, i_discharge]
    vals += [
        np.ones(T),
        -np.ones(T),
        np.full(T, -battery.eta_charge),
        np.full(T, 1.0 / battery.eta_discharge),
    ]
    b_eq += [0.0] * T

    # Terminal energy: E[T] = energy_final
    if energy_final is not None:
        rows.append(np.array([T + 1]))
        cols.append(np.array([i_energy[-1]]))
        vals.append(np.array([1.0]))
        b_eq.append(float(energy_final))

    A_eq = sparse.coo_matrix(
        (np.concatenate(vals), (np.concatenate(rows), np.concatenate(cols))),
        shape=(len(b_eq), n_vars),
    ).tocsr()

    model = LinearModel(
        name=name,
        n_timesteps=T,
        n_vars=n_vars,
        var_names=var_names,
        var_bounds=var_bounds,
        cost_coefficients=cost_coefficients,
        A_eq=A_eq,
        b_eq=np.array(b_eq, dtype=float),
        sense='max',
    )
    logger.debug("Built dispatch model:\n%s", model.get_summary())
    return model
