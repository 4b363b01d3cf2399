"""Reading record schema shared by export templates and the API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ReadingRecord(BaseModel):
    """Single measurement reported by a solar device."""

    model_config = ConfigDict(populate_by_name=True)

    device_name: str | None = Field(default=None, alias="deviceName")
    timestamp: float = Field(description="Epoch milliseconds")
    voltage: float | None = None
    current: float | None = None
    power: float | None = None
    temperature: float | None = None
