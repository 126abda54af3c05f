"""
Tests for price series normalization.

Run with: pytest tests/test_price_series.py -v
"""

import math

import numpy as np
import pandas as pd
import pytest

from battery_dispatch.core import as_price_array


class TestAsPriceArray:
    """Tests for the accepted price input formats."""

    def test_list(self):
        prices = as_price_array([20.0, 18, 15.5])

        assert prices.dtype == np.float64
        assert prices.tolist() == [20.0, 18.0, 15.5]

    def test_numpy_array_is_copied(self):
        """The caller's array must not be shared with the optimizer."""
        source = np.array([1.0, 2.0, 3.0])
        prices = as_price_array(source)

        prices[0] = 99.0
        assert source[0] == 1.0

    def test_pandas_series_uses_positional_order(self):
        series = pd.Series([5.0, 6.0, 7.0], index=[10, 11, 12])
        assert as_price_array(series).tolist() == [5.0, 6.0, 7.0]

    def test_dict_keyed_by_time_index(self):
        prices = as_price_array({2: 30.0, 0: 10.0, 1: 20.0})
        assert prices.tolist() == [10.0, 20.0, 30.0]

    def test_dict_with_gap(self):
        with pytest.raises(ValueError, match="time indices"):
            as_price_array({0: 10.0, 2: 30.0})

    @pytest.mark.parametrize("prices", [{0: 1.0, 'a': 2.0}, {'0': 1.0, '1': 2.0}, {0: 1.0, 1.5: 2.0}])
    def test_dict_with_non_integer_keys(self, prices):
        with pytest.raises(ValueError, match="integer time indices"):
            as_price_array(prices)

    def test_empty(self):
        """An empty input is valid and yields zero time steps."""
        assert as_price_array([]).shape == (0,)
        assert as_price_array({}).shape == (0,)

    def test_negative_prices_allowed(self):
        assert as_price_array([-5.0, 0.0, 5.0]).tolist() == [-5.0, 0.0, 5.0]

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite(self, bad):
        with pytest.raises(ValueError, match="finite"):
            as_price_array([1.0, bad, 3.0])

    def test_non_numeric(self):
        with pytest.raises(ValueError, match="numeric"):
            as_price_array([1.0, "expensive"])

    def test_two_dimensional(self):
        with pytest.raises(ValueError, match="one-dimensional"):
            as_price_array([[1.0, 2.0], [3.0, 4.0]])
