"""Exporter registry and export orchestration."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, TypeVar

from .base import ExportFormat, ExportResult, TabularExporter, UnsupportedFormatError
from .csv import CsvExporter
from .pdf import PdfExporter
from .xlsx import XlsxExporter
from .xml import XmlExporter

if TYPE_CHECKING:
    from ..templates.base import ExportTemplate

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _coerce_format(value: ExportFormat | str) -> ExportFormat | None:
    try:
        return ExportFormat(value)
    except ValueError:
        return None


class ExportOrchestrator:
    """Resolves exporters by format and runs template output through them."""

    def __init__(self, exporters: Iterable[TabularExporter]) -> None:
        # Later exporters replace earlier ones registered under the same format.
        self._registry: dict[ExportFormat, TabularExporter] = {
            exporter.format: exporter for exporter in exporters
        }

    def export(
        self,
        template: ExportTemplate[T],
        records: Sequence[T],
        format: ExportFormat | str,
        filename: str,
    ) -> ExportResult:
        resolved = _coerce_format(format)
        exporter = self._registry.get(resolved) if resolved is not None else None
        if exporter is None:
            key = format.value if isinstance(format, ExportFormat) else str(format)
            logger.warning("No exporter registered for format %r", key)
            raise UnsupportedFormatError(key)

        data = template.transform(records)
        result = exporter.serialize(data, filename)
        logger.info(
            "Exported %d records with template %s as %s (%d bytes)",
            len(data.rows),
            template.id,
            result.filename,
            len(result.content),
        )
        return result

    def get_supported_formats(self) -> list[ExportFormat]:
        return list(self._registry)

    def supports_format(self, format: ExportFormat | str) -> bool:
        resolved = _coerce_format(format)
        return resolved is not None and resolved in self._registry


def create_default_orchestrator() -> ExportOrchestrator:
    return ExportOrchestrator(
        [
            CsvExporter(),
            XlsxExporter(),
            XmlExporter(),
            PdfExporter(),
        ]
    )
