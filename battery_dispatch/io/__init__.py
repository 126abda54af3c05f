"""Tabular price input and result output (Excel and CSV)."""

from battery_dispatch.io.price_reader import parse_price, read_prices
from battery_dispatch.io.result_writer import results_table, summary_table, write_results

__all__ = [
    'parse_price',
    'read_prices',
    'results_table',
    'summary_table',
    'write_results',
]
