"""
Unit tests for BatteryCore validation and configuration handling.

Run with: pytest tests/test_battery_core.py -v
"""

import math

import pytest

from battery_dispatch.core import BatteryCore


class TestBatteryCore:
    """Tests for the battery operating envelope."""

    def test_initialization(self):
        """Test battery initialization with valid parameters."""
        battery = BatteryCore(
            capacity_max=100.0,
            capacity_min=10.0,
            power_charge_max=30.0,
            power_discharge_max=25.0,
            eta_charge=0.95,
            eta_discharge=0.9,
            energy_initial=50.0,
        )

        assert battery.capacity_max == 100.0
        assert battery.capacity_min == 10.0
        assert battery.power_charge_max == 30.0
        assert battery.power_discharge_max == 25.0
        assert battery.eta_charge == 0.95
        assert battery.eta_discharge == 0.9
        assert battery.energy_initial == 50.0

    def test_defaults(self):
        """Test that omitted parameters fall back to a lossless, empty battery."""
        battery = BatteryCore(capacity_max=100.0, power_charge_max=30.0, power_discharge_max=30.0)

        assert battery.capacity_min == 0.0
        assert battery.eta_charge == 1.0
        assert battery.eta_discharge == 1.0
        assert battery.energy_initial == 0.0

    def test_energy_initial_defaults_to_capacity_min(self):
        battery = BatteryCore(
            capacity_max=100.0, capacity_min=20.0, power_charge_max=30.0, power_discharge_max=30.0
        )
        assert battery.energy_initial == 20.0

    def test_derived_quantities(self):
        """Test usable capacity and round-trip efficiency."""
        battery = BatteryCore(
            capacity_max=100.0,
            capacity_min=20.0,
            power_charge_max=30.0,
            power_discharge_max=30.0,
            eta_charge=0.95,
            eta_discharge=0.95,
        )

        assert battery.usable_capacity == pytest.approx(80.0)
        assert battery.round_trip_efficiency == pytest.approx(0.9025)

    def test_min_above_max_is_rejected(self):
        """A minimum capacity above the maximum fails before any optimization."""
        with pytest.raises(ValueError, match="Capacity limits"):
            BatteryCore(capacity_max=10.0, capacity_min=50.0, power_charge_max=5.0, power_discharge_max=5.0)

    def test_invalid_capacity(self):
        """Test that non-positive or negative capacities raise ValueError."""
        with pytest.raises(ValueError, match="capacity_max"):
            BatteryCore(capacity_max=0.0, power_charge_max=5.0, power_discharge_max=5.0)

        with pytest.raises(ValueError, match="Capacity limits"):
            BatteryCore(capacity_max=10.0, capacity_min=-1.0, power_charge_max=5.0, power_discharge_max=5.0)

    def test_invalid_power(self):
        """Test that non-positive power bounds raise ValueError."""
        with pytest.raises(ValueError, match="power_charge_max"):
            BatteryCore(capacity_max=10.0, power_charge_max=0.0, power_discharge_max=5.0)

        with pytest.raises(ValueError, match="power_discharge_max"):
            BatteryCore(capacity_max=10.0, power_charge_max=5.0, power_discharge_max=-5.0)

    @pytest.mark.parametrize("eta", [0.0, -0.5, 1.5])
    def test_invalid_efficiency(self, eta):
        """Test that efficiencies outside (0, 1] raise ValueError."""
        with pytest.raises(ValueError, match="Efficiency"):
            BatteryCore(capacity_max=10.0, power_charge_max=5.0, power_discharge_max=5.0, eta_charge=eta)

        with pytest.raises(ValueError, match="Efficiency"):
            BatteryCore(capacity_max=10.0, power_charge_max=5.0, power_discharge_max=5.0, eta_discharge=eta)

    @pytest.mark.parametrize("value", [math.nan, math.inf, "ten", None, True])
    def test_non_numeric_values(self, value):
        with pytest.raises(ValueError, match="capacity_max"):
            BatteryCore(capacity_max=value, power_charge_max=5.0, power_discharge_max=5.0)

    def test_energy_initial_outside_bounds(self):
        with pytest.raises(ValueError, match="energy_initial"):
            BatteryCore(capacity_max=10.0, power_charge_max=5.0, power_discharge_max=5.0, energy_initial=11.0)

    def test_energy_initial_setter(self):
        """Test that energy_initial can be reassigned and is validated."""
        battery = BatteryCore(capacity_max=100.0, power_charge_max=30.0, power_discharge_max=30.0)

        battery.energy_initial = 75
        assert battery.energy_initial == 75.0

        with pytest.raises(ValueError, match="energy_initial"):
            battery.energy_initial = 120.0
        assert battery.energy_initial == 75.0

    def test_configuration_is_read_only(self):
        battery = BatteryCore(capacity_max=100.0, power_charge_max=30.0, power_discharge_max=30.0)

        with pytest.raises(AttributeError):
            battery.capacity_max = 200.0


class TestBatteryCoreConfiguration:
    """Tests for construction from configuration mappings."""

    def test_from_dict_round_trip(self):
        params = {
            'capacity_max': 100.0,
            'capacity_min': 0.0,
            'power_charge_max': 30.0,
            'power_discharge_max': 30.0,
            'eta_charge': 0.95,
            'eta_discharge': 0.95,
            'energy_initial': 0.0,
        }
        battery = BatteryCore.from_dict(params)

        assert battery.to_dict() == params
        assert BatteryCore.from_dict(battery.to_dict()).to_dict() == params

    def test_from_dict_unknown_key(self):
        """A misspelled parameter must not silently fall back to its default."""
        with pytest.raises(ValueError, match="Unknown battery parameters"):
            BatteryCore.from_dict({
                'capacity_max': 100.0,
                'power_charge_max': 30.0,
                'power_discharge_max': 30.0,
                'eta_chrage': 0.9,
            })

    def test_from_dict_missing_key(self):
        with pytest.raises(ValueError, match="Missing battery parameters"):
            BatteryCore.from_dict({'capacity_max': 100.0, 'power_charge_max': 30.0})

    def test_repr(self):
        battery = BatteryCore(capacity_max=100.0, power_charge_max=30.0, power_discharge_max=30.0)
        assert repr(battery).startswith("BatteryCore(capacity_max=100.0")
