"""Paginated, parent-scoped listing of a user's nodes."""

from typing import Any, List

from common.constants import PAGE_SIZE
from common.logging_config import get_logger
from files_manager.repositories.file_repository import FileRepository
from files_manager.types import FileNode, ParentRef

logger = get_logger(__name__)


class ListingService:
    def __init__(self, file_repo: FileRepository, page_size: int = PAGE_SIZE):
        self.file_repo = file_repo
        self.page_size = page_size

    def list(self, user_id: str, parent_id: Any = None, page: int = 0) -> List[FileNode]:
        """
        Return page ``page`` (zero-based) of the caller's nodes under
        ``parent_id``. A parent that is malformed, missing or not a folder
        yields an empty list, as does a page past the end.
        """
        if page < 0:
            return []

        try:
            parent = ParentRef.parse(parent_id)
        except ValueError:
            logger.debug(f"Listing malformed parent {parent_id!r}: empty result")
            return []

        if not parent.is_root:
            folder = self.file_repo.get_by_id(parent.node_id)
            if folder is None or not folder.is_folder:
                logger.debug(f"Listing parent {parent.node_id} is not a folder: empty result")
                return []

        return self.file_repo.list_children(
            user_id,
            parent,
            skip=page * self.page_size,
            limit=self.page_size,
        )
