"""XLSX exporter using openpyxl."""

from __future__ import annotations

import io
import re
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Font
from openpyxl.worksheet.worksheet import Worksheet

from .base import ExportColumn, ExportData, ExportFormat, ExportResult, Row, TabularExporter

SHEET_NAME_LIMIT = 31
_INVALID_SHEET_CHARS = re.compile(r"[\\/*?:\[\]]")
_NATIVE_CELL_TYPES = (int, float, Decimal, str, bool, datetime, date, time)


def sheet_name(title: str) -> str:
    """Excel rejects a few characters and names longer than 31 characters."""
    name = _INVALID_SHEET_CHARS.sub("", title)[:SHEET_NAME_LIMIT].strip()
    return name or "Sheet1"


def _clean(value: Any) -> Any:
    if isinstance(value, str):
        return ILLEGAL_CHARACTERS_RE.sub("", value)
    return value


def _cell_value(column: ExportColumn, row: Row) -> Any:
    if column.formatter is not None:
        return _clean(column.formatter(row.get(column.key)))
    value = row.get(column.key)
    if value is None:
        return ""
    # openpyxl refuses timezone-aware datetimes
    if isinstance(value, (datetime, time)) and value.tzinfo is not None:
        return value.isoformat()
    if isinstance(value, _NATIVE_CELL_TYPES):
        return _clean(value)
    return _clean(str(value))


def _append_text_row(sheet: Worksheet, values: list[Any]) -> None:
    """Append ``values``; strings starting with ``=`` stay text instead of formulas."""
    sheet.append(values)
    for cell in sheet[sheet.max_row]:
        if isinstance(cell.value, str) and cell.value.startswith("="):
            cell.data_type = "s"


@dataclass(frozen=True)
class XlsxExporter(TabularExporter):
    format: ExportFormat = ExportFormat.XLSX
    extension: str = "xlsx"
    media_type: str = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

    def serialize(self, data: ExportData, filename: str) -> ExportResult:
        workbook = Workbook()
        sheet = workbook.active
        sheet.title = sheet_name(data.title)

        _append_text_row(sheet, [_clean(header) for header in data.headers()])
        for cell in sheet[1]:
            cell.font = Font(bold=True)

        for row in data.rows:
            _append_text_row(sheet, [_cell_value(column, row) for column in data.columns])

        buffer = io.BytesIO()
        workbook.save(buffer)
        return self._result(filename, buffer.getvalue())
