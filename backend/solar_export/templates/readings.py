"""Templates for solar device readings."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from ..exporters.base import ExportColumn, ExportData
from ..schemas.reading import ReadingRecord
from . import formatters
from .base import ExportTemplate, TemplateOptions, export_metadata, resolve_title, to_row

logger = logging.getLogger(__name__)

TIMESTAMP_COLUMN = ExportColumn("timestamp", "Timestamp", formatters.timestamp)
POWER_COLUMN = ExportColumn("power", "Power (W)", formatters.fixed(2))


@dataclass(frozen=True, slots=True)
class ReadingsTemplateConfig:
    include_device: bool = True
    include_temperature: bool = True
    title: str | None = None


@dataclass(frozen=True, slots=True)
class CompactReadingsTemplateConfig:
    title: str | None = None


@dataclass(frozen=True)
class ReadingsExportTemplate(ExportTemplate[ReadingRecord]):
    """Full detail: device, timestamp, electrical values and temperature.

    The device and temperature columns only appear when enabled and when the
    batch actually carries such values, so the column set depends on the data.
    """

    config: ReadingsTemplateConfig = field(default_factory=ReadingsTemplateConfig)

    id = "readings-default"
    name = "Default Readings Template"
    description = "Standard layout with timestamp, voltage, current and power columns"

    def transform(self, records: Sequence[ReadingRecord]) -> ExportData:
        rows = [to_row(record) for record in records]
        columns: list[ExportColumn] = []

        if self.config.include_device and any(row.get("deviceName") for row in rows):
            columns.append(ExportColumn("deviceName", "Device"))

        columns.append(TIMESTAMP_COLUMN)
        columns.extend(
            [
                ExportColumn("voltage", "Voltage (V)", formatters.fixed(2)),
                ExportColumn("current", "Current (A)", formatters.fixed(2)),
                POWER_COLUMN,
            ]
        )

        if self.config.include_temperature and any(row.get("temperature") is not None for row in rows):
            columns.append(ExportColumn("temperature", "Temperature (°C)", formatters.fixed(1)))

        logger.debug("Template %s shaped %d rows into %d columns", self.id, len(rows), len(columns))
        return ExportData(
            title=resolve_title(self.config.title, "Readings"),
            columns=columns,
            rows=rows,
            metadata=export_metadata(len(records)),
        )

    def configure(self, options: TemplateOptions) -> ReadingsExportTemplate:
        return replace(
            self,
            config=ReadingsTemplateConfig(
                include_device=options.include_device,
                include_temperature=options.include_temperature,
                title=options.title,
            ),
        )


@dataclass(frozen=True)
class CompactReadingsExportTemplate(ExportTemplate[ReadingRecord]):
    config: CompactReadingsTemplateConfig = field(default_factory=CompactReadingsTemplateConfig)

    id = "readings-compact"
    name = "Compact Readings Template"
    description = "Compact layout showing only power and timestamp"

    def transform(self, records: Sequence[ReadingRecord]) -> ExportData:
        return ExportData(
            title=resolve_title(self.config.title, "Readings (Compact)"),
            columns=[TIMESTAMP_COLUMN, POWER_COLUMN],
            rows=[to_row(record) for record in records],
            metadata=export_metadata(len(records)),
        )

    def configure(self, options: TemplateOptions) -> CompactReadingsExportTemplate:
        return replace(self, config=CompactReadingsTemplateConfig(title=options.title))
