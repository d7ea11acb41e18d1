"""Pydantic response models for the InfluxDB bridge API."""

from pydantic import BaseModel


class WriteResponse(BaseModel):
    status: str
    database: str | None = None
    retention_policy: str | None = None
    points_written: int = 0


class HealthResponse(BaseModel):
    status: str = "ok"
    service: str = "influx-bridge"
