"""Base exporter definitions and the tabular data every exporter consumes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ExportFormat(str, Enum):
    CSV = "csv"
    XLSX = "xlsx"
    XML = "xml"
    PDF = "pdf"


EXPORT_FORMAT_LABELS: dict[ExportFormat, str] = {
    ExportFormat.CSV: "CSV",
    ExportFormat.XLSX: "Excel (XLSX)",
    ExportFormat.XML: "XML",
    ExportFormat.PDF: "PDF",
}

CellFormatter = Callable[[Any], str]
Row = Mapping[str, Any]


class UnsupportedFormatError(ValueError):
    """Raised when no exporter is registered for the requested format."""

    def __init__(self, format_key: str) -> None:
        self.format_key = format_key
        super().__init__(f"Unsupported export format: {format_key}")


@dataclass(frozen=True, slots=True)
class ExportColumn:
    key: str
    header: str
    formatter: CellFormatter | None = None

    def format(self, row: Row) -> str:
        """Render this column's cell of ``row`` as display text."""
        value = row.get(self.key)
        if self.formatter is not None:
            return self.formatter(value)
        return "" if value is None else str(value)


@dataclass(slots=True)
class ExportData:
    """Format-agnostic table produced by templates."""

    title: str
    columns: list[ExportColumn]
    rows: list[Row]
    metadata: dict[str, str] | None = None

    def headers(self) -> list[str]:
        return [column.header for column in self.columns]

    def formatted_rows(self) -> list[list[str]]:
        return [[column.format(row) for column in self.columns] for row in self.rows]


@dataclass(slots=True)
class ExportResult:
    filename: str
    media_type: str
    content: bytes = field(repr=False)


class TabularExporter(ABC):
    format: ExportFormat
    extension: str
    media_type: str

    @abstractmethod
    def serialize(self, data: ExportData, filename: str) -> ExportResult:
        ...

    def _result(self, filename: str, content: bytes) -> ExportResult:
        return ExportResult(
            filename=f"{filename}.{self.extension}",
            media_type=self.media_type,
            content=content,
        )
