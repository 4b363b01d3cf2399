"""Template registry."""

from __future__ import annotations

from typing import Any

from .base import ExportTemplate
from .readings import CompactReadingsExportTemplate, ReadingsExportTemplate


class TemplateRegistry:
    """Keeps templates by id in registration order."""

    def __init__(self) -> None:
        self._templates: dict[str, ExportTemplate[Any]] = {}

    def register(self, template: ExportTemplate[Any]) -> None:
        # Re-registering an id replaces the template but keeps its original slot.
        self._templates[template.id] = template

    def get(self, template_id: str) -> ExportTemplate[Any] | None:
        return self._templates.get(template_id)

    def get_all(self) -> list[ExportTemplate[Any]]:
        return list(self._templates.values())

    def has(self, template_id: str) -> bool:
        return template_id in self._templates


def create_default_template_registry() -> TemplateRegistry:
    registry = TemplateRegistry()
    registry.register(ReadingsExportTemplate())
    registry.register(CompactReadingsExportTemplate())
    return registry
