"""
Price series reader for spreadsheet and CSV sources.

Expected input: a sheet (or CSV file) in which price samples appear in
row-major order. Cells that do not parse as numbers (headers, timestamps,
notes, empty cells) are skipped:

        A             B
    1   Hour          Price
    2   00:00         20,0
    3   01:00         18,5
    ...

Notes:
    - A decimal comma is accepted ("18,5" -> 18.5), as exported by spreadsheet
      tools in many European locales.
    - Without `column`, every cell is scanned. In the example above the
      timestamps are not numeric, so only prices are returned. Pass `column`
      when other numeric columns (e.g. an hour index) are present.
    - An empty result is valid: the optimizer reports it as "no time steps".
"""

from __future__ import annotations

import logging
import math
import numbers
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

import pandas as pd

logger = logging.getLogger(__name__)

EXCEL_SUFFIXES = {'.xlsx', '.xlsm', '.xls'}
CSV_SUFFIXES = {'.csv', '.txt'}


def parse_price(value: Any) -> Optional[float]:
    """
    Parse one cell into a price.

    Args:
        value: Raw cell value (number, string, None, NaN, datetime, ...).

    Returns:
        The price as float, or None if the cell is not a finite number.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, numbers.Real):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip().replace(',', '.')
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None

    return number if math.isfinite(number) else None


def read_prices(
    filepath: Union[str, Path],
    column: Optional[Union[int, str]] = None,
    sheet_name: Union[int, str] = 0,
    sep: str = ',',
) -> List[float]:
    """
    Read an ordered price series from an Excel workbook or a CSV file.

    Args:
        filepath: Path to a .xlsx/.xlsm/.xls or .csv/.txt file.
        column: Optional column selector. An int is a 0-based column position;
            a str is matched against the cells of the first row (header).
            If None, all cells are scanned row by row.
        sheet_name: Worksheet name or 0-based index (Excel only).
        sep: Field separator (CSV only). Use ';' for files with decimal commas.

    Returns:
        List of prices in file order (possibly empty).

    Raises:
        FileNotFoundError: If filepath does not exist.
        ValueError: If the file type is unsupported or the column is not found.
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Price file not found: {path}")

    suffix = path.suffix.lower()
    if suffix in EXCEL_SUFFIXES:
        frame = pd.read_excel(path, sheet_name=sheet_name, header=None, dtype=object)
    elif suffix in CSV_SUFFIXES:
        try:
            frame = pd.read_csv(
                path,
                sep=sep,
                header=None,
                dtype=str,
                keep_default_na=False,
                encoding='utf-8-sig',  # utf-8-sig handles BOM
            )
        except pd.errors.EmptyDataError:
            frame = pd.DataFrame()
    else:
        raise ValueError(
            f"Unsupported price file type '{suffix}'. "
            f"Expected one of {sorted(EXCEL_SUFFIXES | CSV_SUFFIXES)}"
        )

    prices = _collect_prices(frame, column)
    logger.info("Loaded %d prices from %s", len(prices), path)
    return prices


def _collect_prices(frame: pd.DataFrame, column: Optional[Union[int, str]]) -> List[float]:
    if frame.empty:
        return []

    if column is None:
        cells: Iterable[Any] = (value for row in frame.itertuples(index=False) for value in row)
    elif isinstance(column, str):
        header = [str(value).strip() for value in frame.iloc[0]]
        if column not in header:
            raise ValueError(f"Column '{column}' not found in header {header}")
        cells = frame.iloc[1:, header.index(column)]
    else:
        if not 0 <= column < frame.shape[1]:
            raise ValueError(f"Column index {column} out of range (file has {frame.shape[1]} columns)")
        cells = frame.iloc[:, column]

    prices = []
    for value in cells:
        price = parse_price(value)
        if price is not None:
            prices.append(price)
    return prices
