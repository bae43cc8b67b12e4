"""Blob retrieval for file and image nodes."""

import mimetypes
from dataclasses import dataclass
from typing import Optional

from common.constants import DERIVATIVE_WIDTHS
from common.logging_config import get_logger
from files_manager.exceptions import NotAFileError, NotFoundError, StorageError
from files_manager.repositories.file_repository import FileRepository
from files_manager.services.access_control import can_read
from files_manager.stores.blobs import BlobStore

logger = get_logger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class BlobContent:
    data: bytes
    content_type: str


def content_type_for(name: str) -> str:
    """Guess a Content-Type from the file name's extension."""
    content_type, _ = mimetypes.guess_type(name)
    if content_type is None:
        return DEFAULT_CONTENT_TYPE
    if content_type.startswith("text/"):
        return f"{content_type}; charset=utf-8"
    return content_type


class ContentService:
    def __init__(self, file_repo: FileRepository, blob_store: BlobStore):
        self.file_repo = file_repo
        self.blob_store = blob_store

    def get_content(self, file_id: str, caller_user_id: Optional[str], size: int = 0) -> BlobContent:
        """
        Read the blob of a file or image, or one of its derivatives when
        ``size`` is a derivative width.

        Raises:
            NotFoundError: Missing node, unreadable by caller, unknown size,
                or no blob on disk (e.g. derivative not generated yet)
            NotAFileError: The node is a folder
            StorageError: The blob exists but could not be read
        """
        node = self.file_repo.get_by_id(file_id)
        if node is None or not can_read(node, caller_user_id):
            raise NotFoundError(f"File {file_id} not visible to caller")
        if node.is_folder:
            raise NotAFileError(f"File {file_id} is a folder")
        if size and size not in DERIVATIVE_WIDTHS:
            raise NotFoundError(f"No derivative of width {size}")

        path = node.local_path if not size else f"{node.local_path}_{size}"
        try:
            data = self.blob_store.read_all(path)
        except FileNotFoundError:
            logger.warning(f"Blob for file {file_id} (size={size}) not on disk")
            raise NotFoundError(f"Blob missing for file {file_id}")
        except OSError as e:
            logger.error(f"Blob read failed for file {file_id}: {e}", exc_info=True)
            raise StorageError(str(e)) from e

        return BlobContent(data=data, content_type=content_type_for(node.name))
