"""Tabular exporters for the supported download formats."""

from .base import (
    EXPORT_FORMAT_LABELS,
    ExportColumn,
    ExportData,
    ExportFormat,
    ExportResult,
    TabularExporter,
    UnsupportedFormatError,
)
from .csv import CsvExporter
from .pdf import PdfExporter
from .registry import ExportOrchestrator, create_default_orchestrator
from .xlsx import XlsxExporter
from .xml import XmlExporter

__all__ = [
    "EXPORT_FORMAT_LABELS",
    "CsvExporter",
    "ExportColumn",
    "ExportData",
    "ExportFormat",
    "ExportOrchestrator",
    "ExportResult",
    "PdfExporter",
    "TabularExporter",
    "UnsupportedFormatError",
    "XlsxExporter",
    "XmlExporter",
    "create_default_orchestrator",
]
