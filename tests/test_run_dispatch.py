"""
End-to-end run of the day-ahead arbitrage example script.

Run with: pytest tests/test_run_dispatch.py -v
"""

import importlib.util
import inspect
from pathlib import Path
from typing import Optional

import pytest

SCRIPT = Path(__file__).resolve().parents[1] / 'examples' / 'day_ahead_arbitrage' / 'run_dispatch.py'


@pytest.fixture
def run_dispatch():
    spec = importlib.util.spec_from_file_location('run_dispatch', SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestRunDispatch:

    def test_plot_file_is_optional(self, run_dispatch):
        param = inspect.signature(run_dispatch.run_scenario).parameters['plot_file']

        assert param.default is None
        assert param.annotation == Optional[Path]

    def test_bundled_prices(self, run_dispatch, tmp_path, capsys):
        """The bundled 24-hour series is optimized and written without a plot."""
        output = tmp_path / 'results.csv'

        run_dispatch.run_scenario(run_dispatch.DATA_PATH / 'day_ahead_prices.csv', output)

        out = capsys.readouterr().out
        assert "Loaded 24 timesteps" in out
        assert "Maximum profit = " in out
        assert "-0.00" not in out
        assert output.read_text(encoding='utf-8').startswith("t,Price,Pcharge,Pdisch,Energy")

    def test_empty_prices(self, run_dispatch, tmp_path, capsys):
        prices = tmp_path / 'prices.csv'
        prices.write_text("hour;price\n", encoding='utf-8')
        output = tmp_path / 'results.csv'

        run_dispatch.run_scenario(prices, output)

        assert "No solution found (no_time_steps)" in capsys.readouterr().out
        assert output.read_text(encoding='utf-8').startswith("No solution found")
