"""Service layer for business logic."""

from files_manager.services.auth_service import AuthService
from files_manager.services.file_service import FileService
from files_manager.services.upload_service import UploadService
from files_manager.services.listing_service import ListingService
from files_manager.services.content_service import ContentService

__all__ = [
    "AuthService",
    "FileService",
    "UploadService",
    "ListingService",
    "ContentService",
]
