"""File metadata repository for document store operations."""

from typing import List, Optional

from bson import ObjectId

from common.logging_config import get_logger
from files_manager.stores.documents import DocumentCollection
from files_manager.types import FileNode, FileType, ParentRef, is_valid_id

logger = get_logger(__name__)


class FileRepository:
    """
    Persists FileNode records. Owner ids and folder references are stored
    as ObjectIds; the root parent is stored as ``0``.
    """

    def __init__(self, collection: DocumentCollection):
        self.collection = collection

    def create(
        self,
        user_id: str,
        name: str,
        file_type: FileType,
        parent: ParentRef,
        is_public: bool = False,
        local_path: Optional[str] = None,
    ) -> FileNode:
        document = {
            "userId": ObjectId(user_id),
            "name": name,
            "type": file_type.value,
            "isPublic": is_public,
            "parentId": parent.to_document(),
        }
        if local_path is not None:
            document["localPath"] = local_path

        doc = self.collection.insert_one(document)
        logger.debug(f"Inserted {file_type.value} record {doc['_id']} [user_id={user_id}]")
        return FileNode.from_document(doc)

    def get_by_id(self, file_id: str) -> Optional[FileNode]:
        if not is_valid_id(file_id):
            return None
        doc = self.collection.find_one({"_id": ObjectId(file_id)})
        if doc is None:
            return None
        return FileNode.from_document(doc)

    def get_owned(self, file_id: str, user_id: str) -> Optional[FileNode]:
        if not is_valid_id(file_id) or not is_valid_id(user_id):
            return None
        doc = self.collection.find_one({"_id": ObjectId(file_id), "userId": ObjectId(user_id)})
        if doc is None:
            return None
        return FileNode.from_document(doc)

    def set_public(self, file_id: str, user_id: str, is_public: bool) -> bool:
        """Set the visibility flag on a node owned by ``user_id``."""
        matched = self.collection.update_one(
            {"_id": ObjectId(file_id), "userId": ObjectId(user_id)},
            {"isPublic": is_public},
        )
        return matched > 0

    def list_children(self, user_id: str, parent: ParentRef, skip: int, limit: int) -> List[FileNode]:
        """
        Page through the caller's nodes under ``parent`` in insertion order.
        """
        pipeline = [
            {"$match": {"userId": ObjectId(user_id), "parentId": parent.to_document()}},
            {"$skip": skip},
            {"$limit": limit},
        ]
        return [FileNode.from_document(doc) for doc in self.collection.aggregate(pipeline)]

    def is_path_referenced(self, local_path: str) -> bool:
        return self.collection.find_one({"localPath": local_path}) is not None

    def count(self) -> int:
        return self.collection.count()
