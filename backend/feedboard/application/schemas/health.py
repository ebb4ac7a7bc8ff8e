"""Pydantic DTOs for the health endpoint."""

from pydantic import BaseModel


class HealthStatus(BaseModel):
    status: str
    version: str
    environment: str
    store: str


class HealthEnvelope(BaseModel):
    ok: bool = True
    data: HealthStatus
