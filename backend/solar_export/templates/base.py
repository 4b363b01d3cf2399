"""Base template definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from ..exporters.base import ExportData

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class TemplateOptions:
    """User customisation applied on top of a registered template."""

    title: str | None = None
    include_device: bool = True
    include_temperature: bool = True


class ExportTemplate(ABC, Generic[T]):
    """Shapes a batch of records into an :class:`ExportData` table."""

    id: str
    name: str
    description: str

    @abstractmethod
    def transform(self, records: Sequence[T]) -> ExportData:
        ...

    @abstractmethod
    def configure(self, options: TemplateOptions) -> ExportTemplate[T]:
        """Return a copy of this template with ``options`` applied."""


def to_row(record: Any) -> dict[str, Any]:
    """Copy a record into a row keyed by its wire field names."""
    if isinstance(record, BaseModel):
        return record.model_dump(by_alias=True)
    if isinstance(record, Mapping):
        return dict(record)
    return dict(vars(record))


def export_metadata(total_records: int) -> dict[str, str]:
    return {
        "exportedAt": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        "totalRecords": str(total_records),
    }


def resolve_title(override: str | None, default: str) -> str:
    return override if override else default
