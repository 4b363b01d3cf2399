"""Export endpoints."""

from datetime import date

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status
from fastapi.responses import FileResponse

from ...core.config import settings
from ...exporters.base import EXPORT_FORMAT_LABELS
from ...schemas.export import ExportPayload, FormatInfo, TemplateInfo
from ...services import (
    ExportContext,
    TemplateNotFoundError,
    get_export_context,
    release_download,
    stage_download,
)
from ...templates.base import TemplateOptions

router = APIRouter()


def _get_context() -> ExportContext:
    return get_export_context()


def _default_filename() -> str:
    return f"{settings.default_filename}-{date.today().isoformat()}"


@router.get("/formats", response_model=list[FormatInfo], summary="List supported export formats")
def list_formats(context: ExportContext = Depends(_get_context)) -> list[FormatInfo]:
    return [
        FormatInfo(format=fmt.value, label=EXPORT_FORMAT_LABELS[fmt], extension=fmt.value)
        for fmt in context.orchestrator.get_supported_formats()
    ]


@router.get("/templates", response_model=list[TemplateInfo], summary="List export templates")
def list_templates(context: ExportContext = Depends(_get_context)) -> list[TemplateInfo]:
    return [
        TemplateInfo(id=template.id, name=template.name, description=template.description)
        for template in context.templates.get_all()
    ]


@router.post(
    "/",
    response_class=FileResponse,
    summary="Export readings as a downloadable file",
)
def export_readings(
    payload: ExportPayload,
    background: BackgroundTasks,
    context: ExportContext = Depends(_get_context),
) -> FileResponse:
    options = TemplateOptions(
        title=payload.title or None,
        include_device=payload.include_device,
        include_temperature=payload.include_temperature,
    )
    try:
        result = context.export(
            payload.template_id,
            payload.records,
            payload.format,
            payload.filename or _default_filename(),
            options,
        )
    except TemplateNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Template {payload.template_id} not found",
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    path = stage_download(result, settings.downloads_dir)
    background.add_task(release_download, str(path))
    return FileResponse(path=path, media_type=result.media_type, filename=result.filename)
