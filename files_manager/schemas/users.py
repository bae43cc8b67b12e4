"""Pydantic schemas for user endpoints."""

from typing import Optional

from pydantic import BaseModel


class RegisterRequest(BaseModel):
    """
    Request model for user registration.

    Both fields are optional here so that a missing one is reported as
    ``Missing email`` / ``Missing password`` rather than a validation error.
    """
    email: Optional[str] = None
    password: Optional[str] = None


class UserResponse(BaseModel):
    """Response model for a user."""
    id: str
    email: str
