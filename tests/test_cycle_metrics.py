"""
Tests for equivalent-cycle metrics.

Run with: pytest tests/test_cycle_metrics.py -v
"""

import pytest

from battery_dispatch.optimization import CycleMetrics, compute_cycle_metrics


class TestComputeCycleMetrics:
    """Tests for throughput and cycle counting on hand-made trajectories."""

    def test_full_cycle(self):
        """Charging to full and back to empty is one equivalent cycle."""
        m = compute_cycle_metrics([0.0, 50.0, 100.0, 40.0, 0.0], capacity_max=100.0)

        assert m.charged_energy == pytest.approx(100.0)
        assert m.discharged_energy == pytest.approx(100.0)
        assert m.cycle_count_charge == pytest.approx(1.0)
        assert m.cycle_count_discharge == pytest.approx(1.0)
        assert m.cycle_count_round_trip == pytest.approx(1.0)

    def test_partial_cycle(self):
        m = compute_cycle_metrics([20.0, 60.0, 50.0], capacity_max=100.0)

        assert m.charged_energy == pytest.approx(40.0)
        assert m.discharged_energy == pytest.approx(10.0)
        assert m.cycle_count_charge == pytest.approx(0.4)
        assert m.cycle_count_discharge == pytest.approx(0.1)
        assert m.cycle_count_round_trip == pytest.approx(0.25)

    def test_solver_noise_is_ignored(self):
        """Deltas within the tolerance count as idle steps."""
        m = compute_cycle_metrics([10.0, 10.0 + 2e-7, 10.0 - 2e-7, 10.0], capacity_max=100.0)

        assert m.charged_energy == 0.0
        assert m.discharged_energy == 0.0
        assert m.cycle_count_round_trip == 0.0

    def test_custom_tolerance(self):
        m = compute_cycle_metrics([0.0, 0.5, 0.0], capacity_max=10.0, tol=1.0)
        assert m.cycle_count_round_trip == 0.0

    def test_constant_trajectory(self):
        m = compute_cycle_metrics([30.0] * 5, capacity_max=100.0)
        assert m == CycleMetrics(0.0, 0.0, 0.0, 0.0, 0.0)

    @pytest.mark.parametrize("energy", [[], [42.0]])
    def test_short_trajectory(self, energy):
        """A trajectory without steps has no throughput."""
        m = compute_cycle_metrics(energy, capacity_max=100.0)
        assert m.cycle_count_round_trip == 0.0

    def test_metrics_are_non_negative(self):
        m = compute_cycle_metrics([100.0, 70.0, 40.0, 10.0], capacity_max=100.0)

        assert m.charged_energy == 0.0
        assert m.discharged_energy == pytest.approx(90.0)
        assert m.cycle_count_round_trip == pytest.approx(0.45)

    def test_invalid_capacity(self):
        with pytest.raises(ValueError, match="capacity_max"):
            compute_cycle_metrics([0.0, 1.0], capacity_max=0.0)

    def test_invalid_tolerance(self):
        with pytest.raises(ValueError, match="tolerance"):
            compute_cycle_metrics([0.0, 1.0], capacity_max=10.0, tol=-1e-6)

    def test_to_dict(self):
        m = compute_cycle_metrics([0.0, 10.0], capacity_max=10.0)

        assert m.to_dict() == {
            'charged_energy': 10.0,
            'discharged_energy': 0.0,
            'cycle_count_charge': 1.0,
            'cycle_count_discharge': 0.0,
            'cycle_count_round_trip': 0.5,
        }
