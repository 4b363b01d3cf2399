"""CSV exporter."""

from __future__ import annotations

from dataclasses import dataclass

from .base import ExportData, ExportFormat, ExportResult, TabularExporter

_SPECIAL_CHARS = (",", '"', "\n")


def escape_csv_field(value: str) -> str:
    if any(char in value for char in _SPECIAL_CHARS):
        return '"' + value.replace('"', '""') + '"'
    return value


@dataclass(frozen=True)
class CsvExporter(TabularExporter):
    format: ExportFormat = ExportFormat.CSV
    extension: str = "csv"
    media_type: str = "text/csv; charset=utf-8"

    def serialize(self, data: ExportData, filename: str) -> ExportResult:
        lines = [",".join(escape_csv_field(header) for header in data.headers())]
        for cells in data.formatted_rows():
            lines.append(",".join(escape_csv_field(cell) for cell in cells))
        content = "\n".join(lines).encode("utf-8")
        return self._result(filename, content)
