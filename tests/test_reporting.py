"""Tests for console output formatting."""

import numpy as np

from battery_dispatch.optimization import DispatchPlan, compute_cycle_metrics
from battery_dispatch.reporting import format_cycle_summary, format_schedule


def _plan():
    energy = np.array([0.0, 28.5, 0.0])
    return DispatchPlan(
        prices=np.array([12.0, 40.0]),
        charge_power=np.array([30.0, 0.0]),
        discharge_power=np.array([0.0, 27.0]),
        energy=energy,
        objective_value=723.0,
        metrics=compute_cycle_metrics(energy, capacity_max=100.0),
    )


class TestReporting:

    def test_schedule_has_one_row_per_step(self):
        lines = format_schedule(_plan()).splitlines()

        assert lines[0].split() == ['t', 'Price', 'Charge', 'Disch', 'Energy']
        assert len(lines) == 3
        assert lines[1].split() == ['0', '12.0', '30.00', '0.00', '0.00']
        assert lines[2].split() == ['1', '40.0', '0.00', '27.00', '28.50']

    def test_cycle_summary(self):
        text = format_cycle_summary(_plan())

        assert "Charged energy = 28.500" in text
        assert "Discharged energy = 28.500" in text
        assert "Equivalent cycles (round-trip) = 0.2850" in text

    def test_solver_noise_prints_as_zero(self):
        """Tiny negative powers from the solver never show up as -0.00."""
        plan = _plan()
        plan.charge_power = np.array([30.0, -1e-12])
        plan.discharge_power = np.array([-0.0, 27.0])
        plan.energy = np.array([-1e-12, 28.5, 0.0])

        rows = [line.split() for line in format_schedule(plan).splitlines()[1:]]

        assert rows[0] == ['0', '12.0', '30.00', '0.00', '0.00']
        assert rows[1] == ['1', '40.0', '0.00', '27.00', '28.50']
        assert '-0.00' not in format_schedule(plan)
