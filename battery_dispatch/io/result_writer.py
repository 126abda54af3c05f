"""
Result writer for solved dispatch schedules.

Output layout (sheet "Results" for Excel, same rows for CSV):

    t   Price   Pcharge   Pdisch   Energy
    0   20.0    0.00      0.00     0.00
    ...
                                               <- blank row
    Profit                          412.35
    Charged energy                  ...
    Discharged energy               ...
    Equivalent cycles (charge)      ...
    Equivalent cycles (discharge)   ...
    Equivalent cycles (round-trip)  ...
    Final energy                    ...

When the optimizer did not reach an optimum, the sheet holds a single
"No solution found" row followed by the solver status and message.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import pandas as pd
from openpyxl.utils import get_column_letter

from battery_dispatch.optimization.dispatch_optimizer import DispatchPlan, DispatchResult

logger = logging.getLogger(__name__)

SHEET_NAME = 'Results'
TABLE_COLUMNS = ['t', 'Price', 'Pcharge', 'Pdisch', 'Energy']


def results_table(plan: DispatchPlan) -> pd.DataFrame:
    """Per-step schedule with the column names of the result sheet."""
    return pd.DataFrame({
        't': range(plan.n_timesteps),
        'Price': plan.prices,
        'Pcharge': plan.charge_power,
        'Pdisch': plan.discharge_power,
        'Energy': plan.energy[:-1],
    }, columns=TABLE_COLUMNS)


def summary_table(result: DispatchResult) -> pd.DataFrame:
    """Two-column (label, value) summary placed below the schedule."""
    plan = result.plan
    if plan is None:
        rows = [
            ('No solution found', ''),
            ('Status', result.status.value),
            ('Message', result.message),
        ]
    else:
        m = plan.metrics
        rows = [
            ('Profit', plan.objective_value),
            ('Charged energy', m.charged_energy),
            ('Discharged energy', m.discharged_energy),
            ('Equivalent cycles (charge)', m.cycle_count_charge),
            ('Equivalent cycles (discharge)', m.cycle_count_discharge),
            ('Equivalent cycles (round-trip)', m.cycle_count_round_trip),
            ('Final energy', float(plan.energy[-1])),
        ]
    return pd.DataFrame(rows, columns=['label', 'value'])


def write_results(result: DispatchResult, filepath: Union[str, Path]) -> Path:
    """
    Write a dispatch result to an Excel workbook or a CSV file.

    Args:
        result: Output of DispatchOptimizer.optimize().
        filepath: Target path; the suffix selects the format (.xlsx or .csv).

    Returns:
        The path that was written.

    Raises:
        ValueError: If the file type is unsupported.
    """
    path = Path(filepath)
    suffix = path.suffix.lower()
    if suffix not in ('.xlsx', '.csv'):
        raise ValueError(f"Unsupported result file type '{suffix}'. Expected '.xlsx' or '.csv'")

    summary = summary_table(result)
    table = results_table(result.plan) if result.plan is not None else None

    if suffix == '.xlsx':
        _write_workbook(path, table, summary)
    else:
        _write_csv(path, table, summary)

    logger.info("Results saved to %s", path)
    return path


def _write_workbook(path: Path, table: Optional[pd.DataFrame], summary: pd.DataFrame) -> None:
    with pd.ExcelWriter(path, engine='openpyxl') as writer:
        startrow = 0
        if table is not None:
            table.to_excel(writer, sheet_name=SHEET_NAME, index=False)
            startrow = len(table) + 2
        summary.to_excel(writer, sheet_name=SHEET_NAME, index=False, header=False, startrow=startrow)

        sheet = writer.sheets[SHEET_NAME]
        for idx, cells in enumerate(sheet.columns, start=1):
            width = max((len(str(cell.value)) for cell in cells if cell.value is not None), default=8)
            sheet.column_dimensions[get_column_letter(idx)].width = width + 2


def _write_csv(path: Path, table: Optional[pd.DataFrame], summary: pd.DataFrame) -> None:
    with open(path, 'w', newline='', encoding='utf-8') as f:
        if table is not None:
            table.to_csv(f, index=False)
            f.write('\n')
        summary.to_csv(f, index=False, header=False)
