"""
Battery dispatch optimization.

Builds the time-indexed dispatch LP, solves it with scipy (HiGHS) and derives
equivalent-cycle metrics from the solved energy trajectory.
"""

from battery_dispatch.optimization.linear_model import LinearModel, variable_layout
from battery_dispatch.optimization.dispatch_model import build_dispatch_model
from battery_dispatch.optimization.cycle_metrics import CycleMetrics, compute_cycle_metrics
from battery_dispatch.optimization.dispatch_optimizer import (
    DispatchOptimizer,
    DispatchPlan,
    DispatchResult,
    SolveStatus,
)

__all__ = [
    'LinearModel',
    'variable_layout',
    'build_dispatch_model',
    'CycleMetrics',
    'compute_cycle_metrics',
    'DispatchOptimizer',
    'DispatchPlan',
    'DispatchResult',
    'SolveStatus',
]
