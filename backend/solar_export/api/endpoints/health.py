"""Health-check endpoints."""

from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends

from ...core.config import settings
from ...services import ExportContext, get_export_context

router = APIRouter()


def _get_context() -> ExportContext:
    return get_export_context()


@router.get("/", summary="Service health status")
def healthcheck(context: ExportContext = Depends(_get_context)) -> dict[str, Any]:
    """Return static metadata for uptime probes."""
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.env,
        "dataDir": str(settings.data_dir),
        "formats": [fmt.value for fmt in context.orchestrator.get_supported_formats()],
    }
