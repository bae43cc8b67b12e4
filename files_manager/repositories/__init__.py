"""Repository layer for data access."""

from files_manager.repositories.session_repository import SessionRepository
from files_manager.repositories.user_repository import User, UserRepository
from files_manager.repositories.file_repository import FileRepository

__all__ = [
    "SessionRepository",
    "User",
    "UserRepository",
    "FileRepository",
]
