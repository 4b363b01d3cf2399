"""Request and response bodies of the export endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .reading import ReadingRecord


class ExportPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    records: list[ReadingRecord] = Field(default_factory=list)
    template_id: str = Field(default="readings-default", alias="templateId")
    format: str
    filename: str | None = None
    title: str | None = None
    include_device: bool = Field(default=True, alias="includeDevice")
    include_temperature: bool = Field(default=True, alias="includeTemperature")


class FormatInfo(BaseModel):
    format: str
    label: str
    extension: str


class TemplateInfo(BaseModel):
    id: str
    name: str
    description: str
