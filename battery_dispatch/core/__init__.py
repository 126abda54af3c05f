"""Battery configuration and price input handling."""

from battery_dispatch.core.battery_core import BatteryCore
from battery_dispatch.core.price_series import PriceSeries, as_price_array

__all__ = [
    'BatteryCore',
    'PriceSeries',
    'as_price_array',
]
