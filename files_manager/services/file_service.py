"""File service: the folder/file hierarchy and its integrity rules."""

from typing import Any, Optional

from common.logging_config import get_logger
from files_manager.exceptions import (
    MissingFieldError,
    NotFoundError,
    ParentNotFolderError,
    ParentNotFoundError,
)
from files_manager.repositories.file_repository import FileRepository
from files_manager.services.access_control import can_read, can_write
from files_manager.types import ROOT, FileNode, FileType, ParentRef

logger = get_logger(__name__)

BLOB_TYPES = (FileType.FILE, FileType.IMAGE)


class FileService:
    def __init__(self, file_repo: FileRepository):
        self.file_repo = file_repo

    def validate_parent(self, parent: ParentRef) -> None:
        """
        A non-root parent must exist and be a folder.

        Raises:
            ParentNotFoundError: The referenced node does not exist
            ParentNotFolderError: The referenced node is a file or image
        """
        if parent.is_root:
            return
        node = self.file_repo.get_by_id(parent.node_id)
        if node is None:
            logger.warning(f"Parent {parent.node_id} not found")
            raise ParentNotFoundError(f"Parent {parent.node_id} not found")
        if not node.is_folder:
            logger.warning(f"Parent {parent.node_id} is a {node.type.value}, not a folder")
            raise ParentNotFolderError(f"Parent {parent.node_id} is not a folder")

    def resolve_parent(self, raw: Any) -> ParentRef:
        """
        Parse a caller-supplied parent id and check it.

        Raises:
            ParentNotFoundError: Malformed id, or no such node
            ParentNotFolderError: The referenced node is a file or image
        """
        try:
            parent = ParentRef.parse(raw)
        except ValueError:
            logger.warning(f"Malformed parent id {raw!r}")
            raise ParentNotFoundError(f"Malformed parent id {raw!r}")
        self.validate_parent(parent)
        return parent

    def create_folder(
        self,
        user_id: str,
        name: Optional[str],
        parent: ParentRef = ROOT,
        is_public: bool = False,
        parent_checked: bool = False,
    ) -> FileNode:
        """``parent_checked`` skips the parent lookup for a ref from ``resolve_parent``."""
        if not name:
            raise MissingFieldError("name")
        if not parent_checked:
            self.validate_parent(parent)

        node = self.file_repo.create(
            user_id=user_id,
            name=name,
            file_type=FileType.FOLDER,
            parent=parent,
            is_public=is_public,
        )
        logger.info(f"Created folder {node.id} '{name}' [user_id={user_id}]")
        return node

    def create_file_record(
        self,
        user_id: str,
        name: Optional[str],
        file_type: Optional[FileType],
        parent: ParentRef,
        local_path: str,
        is_public: bool = False,
        parent_checked: bool = False,
    ) -> FileNode:
        """
        Persist metadata for a blob that is already on disk at ``local_path``.
        """
        if not name:
            raise MissingFieldError("name")
        if file_type not in BLOB_TYPES:
            raise MissingFieldError("type")
        if not parent_checked:
            self.validate_parent(parent)

        node = self.file_repo.create(
            user_id=user_id,
            name=name,
            file_type=file_type,
            parent=parent,
            is_public=is_public,
            local_path=local_path,
        )
        logger.info(f"Created {file_type.value} record {node.id} '{name}' [user_id={user_id}]")
        return node

    def get_by_id(self, file_id: str, caller_user_id: Optional[str]) -> FileNode:
        node = self.file_repo.get_by_id(file_id)
        if node is None or not can_read(node, caller_user_id):
            raise NotFoundError(f"File {file_id} not visible to caller")
        return node

    def set_published(self, file_id: str, caller_user_id: str, is_public: bool) -> FileNode:
        """
        Set the visibility flag. Only the owner may do this; anyone else gets
        NotFound. Applying the same value twice is a no-op.
        """
        node = self.file_repo.get_owned(file_id, caller_user_id)
        if node is None or not can_write(node, caller_user_id):
            raise NotFoundError(f"File {file_id} not owned by caller")

        if node.is_public != is_public:
            self.file_repo.set_public(file_id, caller_user_id, is_public)
            logger.info(f"File {file_id} isPublic={is_public} [user_id={caller_user_id}]")

        updated = self.file_repo.get_owned(file_id, caller_user_id)
        if updated is None:
            raise NotFoundError(f"File {file_id} disappeared during update")
        return updated
