"""Pydantic schemas for API requests and responses."""

from files_manager.schemas.auth import ConnectResponse
from files_manager.schemas.users import RegisterRequest, UserResponse
from files_manager.schemas.files import UploadRequest, FileNodeResponse
from files_manager.schemas.app import StatusResponse, StatsResponse, HealthResponse
from files_manager.schemas.common import ErrorResponse

__all__ = [
    "ConnectResponse",
    "RegisterRequest",
    "UserResponse",
    "UploadRequest",
    "FileNodeResponse",
    "StatusResponse",
    "StatsResponse",
    "HealthResponse",
    "ErrorResponse",
]
