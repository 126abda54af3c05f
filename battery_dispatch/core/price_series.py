"""
Price series normalization.

The optimizer accepts any ordered collection of prices, one per time step:

1. Sequence (list, tuple):
    prices = [20.0, 18.0, 15.0, ...]

2. Array-like (numpy array, pandas Series):
    prices = df['price'].to_numpy()   # positional order is used

3. Dictionary (lookup table keyed by time index):
    prices = {0: 20.0, 1: 18.0, 2: 15.0, ...}

All are normalized to a private 1-D float array so the caller's object is
never mutated by the optimizer.
"""

from __future__ import annotations

import numbers
from typing import Dict, Sequence, Union

import numpy as np

# Type alias for accepted price inputs
PriceSeries = Union[Sequence[float], np.ndarray, Dict[int, float]]


def as_price_array(prices: PriceSeries) -> np.ndarray:
    """
    Convert a price input to a 1-D float64 array.

    Args:
        prices: Ordered prices [currency/kWh]. Dicts must be keyed by
            consecutive integer time indices starting at 0.

    Returns:
        New numpy array of length T (T may be 0).

    Raises:
        ValueError: If the input is not one-dimensional, a dict has non-integer keys or gaps in
            its time indices, or any price is NaN or infinite.
    """
    if isinstance(prices, dict):
        if not all(isinstance(t, numbers.Integral) and not isinstance(t, bool) for t in prices):
            raise ValueError(f"Price dict keys must be integer time indices, got {list(prices)[:5]}")
        keys = sorted(prices)
        if keys != list(range(len(keys))):
            raise ValueError(
                f"Price dict must be keyed by time indices 0..{len(keys) - 1}, got {keys[:5]}..."
            )
        values = [prices[t] for t in keys]
    elif hasattr(prices, 'to_numpy'):
        values = prices.to_numpy()
    else:
        values = prices

    try:
        array = np.array(values, dtype=float)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Prices must be numeric: {exc}") from None

    if array.ndim != 1:
        raise ValueError(f"Prices must be one-dimensional, got shape {array.shape}")

    if not np.all(np.isfinite(array)):
        bad = np.flatnonzero(~np.isfinite(array))
        raise ValueError(f"Prices must be finite, found invalid values at steps {bad[:5].tolist()}")

    return array
