"""Service layer modules."""

from .downloads import release_download, stage_download
from .export_context import (
    ExportContext,
    TemplateNotFoundError,
    create_export_context,
    get_export_context,
    reset_export_context,
)

__all__ = [
    "ExportContext",
    "TemplateNotFoundError",
    "create_export_context",
    "get_export_context",
    "release_download",
    "reset_export_context",
    "stage_download",
]
