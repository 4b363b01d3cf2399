"""Staging of export artifacts as short-lived download files."""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from ..exporters.base import ExportResult

logger = logging.getLogger(__name__)


def stage_download(result: ExportResult, directory: Path) -> Path:
    """Write ``result`` to a unique file under ``directory`` and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    suffix = Path(result.filename).suffix
    with tempfile.NamedTemporaryFile(dir=directory, suffix=suffix, delete=False) as handle:
        handle.write(result.content)
    path = Path(handle.name)
    logger.debug("Staged %s at %s", result.filename, path)
    return path


def release_download(path: str | Path) -> None:
    Path(path).unlink(missing_ok=True)
    logger.debug("Released staged download %s", path)

