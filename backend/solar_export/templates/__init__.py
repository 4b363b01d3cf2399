"""Export templates shaping domain records into tables."""

from .base import ExportTemplate, TemplateOptions
from .readings import (
    CompactReadingsExportTemplate,
    CompactReadingsTemplateConfig,
    ReadingsExportTemplate,
    ReadingsTemplateConfig,
)
from .registry import TemplateRegistry, create_default_template_registry

__all__ = [
    "CompactReadingsExportTemplate",
    "CompactReadingsTemplateConfig",
    "ExportTemplate",
    "ReadingsExportTemplate",
    "ReadingsTemplateConfig",
    "TemplateOptions",
    "TemplateRegistry",
    "create_default_template_registry",
]
