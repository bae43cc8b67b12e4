"""Pydantic schemas for session endpoints."""

from pydantic import BaseModel


class ConnectResponse(BaseModel):
    """Response model for token issue."""
    token: str
