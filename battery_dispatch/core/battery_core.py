"""
BatteryCore: static operating envelope of an energy-storage device.

BatteryCore captures ONLY the physical limits that the dispatch optimizer needs:
energy bounds, power bounds, one-way efficiencies and the stored energy at the
start of the horizon. It has no behavior beyond validation.

UNITS
-----
Energy bounds and the initial energy share one unit (e.g. kWh). Power bounds
are expressed as energy per time step, so that one step at full charge power
moves at most `power_charge_max` units of energy across the grid connection.

Efficiency modeling:
    - Charging: stored energy = eta_charge * power drawn from the grid
    - Discharging: energy drawn from storage = power delivered / eta_discharge
    - Round-trip efficiency = eta_charge * eta_discharge

VALIDATION
----------
All invariants are checked at construction time and raise ValueError:
    - every parameter is a finite number
    - 0 <= capacity_min <= capacity_max, capacity_max > 0
    - power_charge_max > 0, power_discharge_max > 0
    - eta_charge, eta_discharge in (0, 1]
    - capacity_min <= energy_initial <= capacity_max

EXAMPLE USAGE
-------------
battery = BatteryCore(
    capacity_max=100.0,
    capacity_min=0.0,
    power_charge_max=30.0,
    power_discharge_max=30.0,
    eta_charge=0.95,
    eta_discharge=0.95,
)
print(f"Round-trip efficiency: {battery.round_trip_efficiency:.1%}")
"""

from __future__ import annotations

import math
from typing import Any, Dict, Mapping, Optional


class BatteryCore:
    """
    Validated operating envelope of a battery plus its initial stored energy.

    Configuration parameters are read-only. `energy_initial` may be reassigned
    between optimizations; the new value is validated against the capacity bounds.
    """

    _PARAMETERS = (
        'capacity_max',
        'capacity_min',
        'power_charge_max',
        'power_discharge_max',
        'eta_charge',
        'eta_discharge',
        'energy_initial',
    )

    def __init__(
        self,
        capacity_max: float,
        power_charge_max: float,
        power_discharge_max: float,
        capacity_min: float = 0.0,
        eta_charge: float = 1.0,
        eta_discharge: float = 1.0,
        energy_initial: Optional[float] = None,
    ) -> None:
        """
        Args:
            capacity_max:
                Upper bound on stored energy [kWh]. Must be > 0.

            power_charge_max:
                Maximum charging power per time step [kWh/step]. Must be > 0.

            power_discharge_max:
                Maximum discharging power per time step [kWh/step]. Must be > 0.

            capacity_min:
                Lower bound on stored energy [kWh] (default: 0.0).

            eta_charge:
                One-way charging efficiency in (0, 1] (default: 1.0).

            eta_discharge:
                One-way discharging efficiency in (0, 1] (default: 1.0).

            energy_initial:
                Stored energy at the start of the horizon [kWh].
                If None, the battery starts at capacity_min.

        Raises:
            ValueError: If any invariant of the operating envelope is violated.
        """
        if energy_initial is None:
            energy_initial = capacity_min

        values = {
            'capacity_max': capacity_max,
            'capacity_min': capacity_min,
            'power_charge_max': power_charge_max,
            'power_discharge_max': power_discharge_max,
            'eta_charge': eta_charge,
            'eta_discharge': eta_discharge,
            'energy_initial': energy_initial,
        }
        for key, value in values.items():
            values[key] = self._as_finite(key, value)

        if values['capacity_max'] <= 0.0:
            raise ValueError(f"capacity_max must be > 0, got {values['capacity_max']}")
        if not 0.0 <= values['capacity_min'] <= values['capacity_max']:
            raise ValueError(
                f"Capacity limits must satisfy 0 <= capacity_min <= capacity_max, "
                f"got [{values['capacity_min']}, {values['capacity_max']}]"
            )
        for key in ('power_charge_max', 'power_discharge_max'):
            if values[key] <= 0.0:
                raise ValueError(f"{key} must be > 0, got {values[key]}")
        for key in ('eta_charge', 'eta_discharge'):
            if not 0.0 < values[key] <= 1.0:
                raise ValueError(f"Efficiency {key} must be in (0, 1], got {values[key]}")

        self._capacity_max = values['capacity_max']
        self._capacity_min = values['capacity_min']
        self._power_charge_max = values['power_charge_max']
        self._power_discharge_max = values['power_discharge_max']
        self._eta_charge = values['eta_charge']
        self._eta_discharge = values['eta_discharge']

        self._energy_initial = 0.0
        self.energy_initial = values['energy_initial']

    @staticmethod
    def _as_finite(key: str, value: Any) -> float:
        if isinstance(value, bool):
            raise ValueError(f"{key} must be a number, got {value!r}")
        try:
            value = float(value)
        except (TypeError, ValueError):
            raise ValueError(f"{key} must be a number, got {value!r}") from None
        if not math.isfinite(value):
            raise ValueError(f"{key} must be finite, got {value}")
        return value

    # ------------------------------------------------------------------
    # Construction from configuration mappings
    # ------------------------------------------------------------------

    @classmethod
    def from_dict(cls, params: Mapping[str, Any]) -> BatteryCore:
        """
        Build a BatteryCore from a configuration mapping.

        Keys are the constructor argument names. Unknown keys are rejected so
        that a misspelled parameter does not silently fall back to its default.

        Raises:
            ValueError: If the mapping has unknown or missing keys, or invalid values.
        """
        unknown = set(params) - set(cls._PARAMETERS)
        if unknown:
            raise ValueError(f"Unknown battery parameters: {sorted(unknown)}")

        missing = {'capacity_max', 'power_charge_max', 'power_discharge_max'} - set(params)
        if missing:
            raise ValueError(f"Missing battery parameters: {sorted(missing)}")

        return cls(**params)

    def to_dict(self) -> Dict[str, float]:
        """Return the configuration as a mapping accepted by from_dict()."""
        return {key: getattr(self, key) for key in self._PARAMETERS}

    # ------------------------------------------------------------------
    # Read-only configuration
    # ------------------------------------------------------------------

    @property
    def capacity_max(self) -> float:
        """Upper bound on stored energy [kWh]."""
        return self._capacity_max

    @property
    def capacity_min(self) -> float:
        """Lower bound on stored energy [kWh]."""
        return self._capacity_min

    @property
    def power_charge_max(self) -> float:
        """Maximum charging power per time step [kWh/step]."""
        return self._power_charge_max

    @property
    def power_discharge_max(self) -> float:
        """Maximum discharging power per time step [kWh/step]."""
        return self._power_discharge_max

    @property
    def eta_charge(self) -> float:
        """One-way charging efficiency (0-1]."""
        return self._eta_charge

    @property
    def eta_discharge(self) -> float:
        """One-way discharging efficiency (0-1]."""
        return self._eta_discharge

    @property
    def usable_capacity(self) -> float:
        """Energy window between capacity_min and capacity_max [kWh]."""
        return self._capacity_max - self._capacity_min

    @property
    def round_trip_efficiency(self) -> float:
        """Fraction of charged energy recovered after a full round trip."""
        return self._eta_charge * self._eta_discharge

    # ------------------------------------------------------------------
    # Mutable state
    # ------------------------------------------------------------------

    @property
    def energy_initial(self) -> float:
        """Stored energy at the start of the horizon [kWh]."""
        return self._energy_initial

    @energy_initial.setter
    def energy_initial(self, value: float) -> None:
        """
        Set the initial energy with validation.

        Raises:
            ValueError: If value lies outside [capacity_min, capacity_max].
        """
        value = self._as_finite('energy_initial', value)
        if not self._capacity_min <= value <= self._capacity_max:
            raise ValueError(
                f"energy_initial={value:.2f} kWh must lie within "
                f"[{self._capacity_min:.2f}, {self._capacity_max:.2f}] kWh"
            )
        self._energy_initial = value

    def __repr__(self) -> str:
        params = ', '.join(f"{key}={getattr(self, key)!r}" for key in self._PARAMETERS)
        return f"{type(self).__name__}({params})"
