from __future__ import annotations

import os
from typing import Iterable

from openpyxl import Workbook, load_workbook
from openpyxl.worksheet.worksheet import Worksheet

from .csv_writer import product_to_row
from .types import CSV_COLUMNS, Product


def _ensure_sheet(wb_path: str) -> tuple[Workbook, Worksheet, bool]:
    """
    Returns (workbook, sheet, is_new_file)
    """
    if os.path.exists(wb_path):
        wb = load_workbook(wb_path)
        return wb, wb.active, False
    wb = Workbook()
    return wb, wb.active, True


def _sheet_is_empty(ws: Worksheet) -> bool:
    return ws.max_row == 1 and ws.max_column == 1 and ws.cell(row=1, column=1).value is None


def write_products_to_excel(products: Iterable[Product], out_path: str) -> bool:
    """Mirror of write_products_to_csv for .xlsx files. Returns True if the file is new."""
    wb, ws, is_new = _ensure_sheet(out_path)

    if _sheet_is_empty(ws):
        for col_idx, title in enumerate(CSV_COLUMNS, start=1):
            ws.cell(row=1, column=col_idx).value = title

    for row_idx, p in enumerate(products, start=ws.max_row + 1):
        row = product_to_row(p)
        for col_idx, column in enumerate(CSV_COLUMNS, start=1):
            ws.cell(row=row_idx, column=col_idx).value = row[column]

    wb.save(out_path)
    return is_new
