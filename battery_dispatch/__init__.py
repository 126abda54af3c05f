"""
Battery dispatch optimizer for energy arbitrage.

This package computes a profit-maximizing charge/discharge schedule for an
energy-storage device over a discrete price horizon, using a linear program
solved with scipy's HiGHS backend.

Architecture:
    - core.battery_core: Operating envelope (BatteryCore)
    - core.price_series: Price input normalization
    - optimization: LP construction, solve, cycle metrics (DispatchOptimizer)
    - io: Price reader and result writer (Excel / CSV)
    - visualization: Plotly figures of a solved plan

Quick start:
    from battery_dispatch import BatteryCore, DispatchOptimizer

    battery = BatteryCore(capacity_max=100, power_charge_max=30, power_discharge_max=30,
                          eta_charge=0.95, eta_discharge=0.95)
    result = DispatchOptimizer(battery, prices=[20, 18, 15, 30, 40]).optimize()
    print(result.get_summary())
"""

from battery_dispatch.core import BatteryCore
from battery_dispatch.optimization import (
    CycleMetrics,
    DispatchOptimizer,
    DispatchPlan,
    DispatchResult,
    SolveStatus,
)

__version__ = "0.1.0"

__all__ = [
    'BatteryCore',
    'CycleMetrics',
    'DispatchOptimizer',
    'DispatchPlan',
    'DispatchResult',
    'SolveStatus',
]
