"""Pydantic schemas for service-level endpoints."""

from pydantic import BaseModel


class StatusResponse(BaseModel):
    """Liveness of the backing stores."""
    redis: bool
    db: bool


class StatsResponse(BaseModel):
    """Document counts."""
    users: int
    files: int


class HealthResponse(BaseModel):
    status: str
    service: str
