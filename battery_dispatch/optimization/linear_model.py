"""
LinearModel: matrix representation of a battery dispatch LP.

Holds everything scipy.optimize.linprog needs (cost vector, bounds, equality
constraints) together with the variable layout, so that solver output can be
mapped back to named trajectories.

Variable layout for a horizon of T steps (n_vars = 3T + 1):
    [P_charge_0, ..., P_charge_{T-1},
     P_discharge_0, ..., P_discharge_{T-1},
     E_0, ..., E_T]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np
from scipy import sparse


def variable_layout(n_timesteps: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Column indices of (P_charge[0..T-1], P_discharge[0..T-1], E[0..T]).

    Shared by model construction and solution splitting.
    """
    T = n_timesteps
    return np.arange(T), T + np.arange(T), 2 * T + np.arange(T + 1)


@dataclass
class LinearModel:
    """
    Linear program in linprog form: minimize c @ x s.t. A_eq @ x = b_eq, bounds.

    Attributes:
        name: Prefix used in variable names.
        n_timesteps: Number of dispatch steps T.
        n_vars: Total number of decision variables (3T + 1).
        var_names: One name per variable, '{name}_P_charge_{t}' etc.
        var_bounds: (lower, upper) per variable.
        cost_coefficients: Minimization coefficients c.
        A_eq: Sparse equality constraint matrix.
        b_eq: Equality right-hand side.
        sense: 'max' if the original objective is a maximization of -c @ x.
    """

    name: str
    n_timesteps: int
    n_vars: int
    var_names: List[str]
    var_bounds: List[Tuple[float, float]]
    cost_coefficients: np.ndarray
    A_eq: sparse.csr_matrix
    b_eq: np.ndarray
    sense: str = 'max'

    def __post_init__(self) -> None:
        if len(self.var_names) != self.n_vars or len(self.var_bounds) != self.n_vars:
            raise ValueError(
                f"Model {self.name} declares {self.n_vars} variables, but has "
                f"{len(self.var_names)} names and {len(self.var_bounds)} bounds"
            )
        if self.cost_coefficients.shape != (self.n_vars,):
            raise ValueError(
                f"Cost vector has shape {self.cost_coefficients.shape}, expected ({self.n_vars},)"
            )
        if self.A_eq.shape != (len(self.b_eq), self.n_vars):
            raise ValueError(
                f"A_eq has shape {self.A_eq.shape}, expected ({len(self.b_eq)}, {self.n_vars})"
            )

    def split_solution(self, x: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Split a solution vector into (charge_power, discharge_power, energy).

        Returns copies, so callers may keep them after the solver result is gone.
        """
        x = np.asarray(x, dtype=float)
        i_charge, i_discharge, i_energy = variable_layout(self.n_timesteps)
        return x[i_charge], x[i_discharge], x[i_energy]

    def objective(self, x: np.ndarray) -> float:
        """Objective value of x in the model's own sense (profit for 'max')."""
        value = float(self.cost_coefficients @ np.asarray(x, dtype=float))
        return -value if self.sense == 'max' else value

    def get_summary(self) -> str:
        """Return a human-readable summary of the model size."""
        lines = [
            f"LinearModel {self.name}: {self.n_timesteps} timesteps",
            f"  Variables: {self.n_vars}",
            f"  Equality constraints: {self.A_eq.shape[0]}",
            f"  Non-zeros: {self.A_eq.nnz}",
        ]
        return "\n".join(lines)
