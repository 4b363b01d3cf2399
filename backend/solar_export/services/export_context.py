"""Wiring of the export orchestrator and template catalog."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any

from ..exporters.base import ExportFormat, ExportResult
from ..exporters.registry import ExportOrchestrator, create_default_orchestrator
from ..templates.base import TemplateOptions
from ..templates.registry import TemplateRegistry, create_default_template_registry


class TemplateNotFoundError(KeyError):
    """Raised when an export names a template id nobody registered."""


@dataclass
class ExportContext:
    """Orchestrator and templates shared by every export of one application."""

    orchestrator: ExportOrchestrator = field(default_factory=create_default_orchestrator)
    templates: TemplateRegistry = field(default_factory=create_default_template_registry)

    def export(
        self,
        template_id: str,
        records: Sequence[Any],
        format: ExportFormat | str,
        filename: str,
        options: TemplateOptions | None = None,
    ) -> ExportResult:
        template = self.templates.get(template_id)
        if template is None:
            raise TemplateNotFoundError(template_id)
        if options is not None:
            template = template.configure(options)
        return self.orchestrator.export(template, records, format, filename)


def create_export_context() -> ExportContext:
    return ExportContext()


@lru_cache
def get_export_context() -> ExportContext:
    """Process-wide context used by the HTTP layer."""
    return create_export_context()


def reset_export_context() -> None:
    get_export_context.cache_clear()
