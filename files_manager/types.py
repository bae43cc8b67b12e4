"""Domain types for the file/folder hierarchy."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from bson import ObjectId

from common.constants import ROOT_PARENT_ID


class FileType(str, Enum):
    FOLDER = "folder"
    FILE = "file"
    IMAGE = "image"

    @classmethod
    def parse(cls, value: Any) -> Optional["FileType"]:
        """Return the matching member, or None for anything else."""
        try:
            return cls(value)
        except ValueError:
            return None


def is_valid_id(value: Any) -> bool:
    """True if ``value`` is usable as a node or user reference."""
    if isinstance(value, ObjectId):
        return True
    return isinstance(value, str) and ObjectId.is_valid(value)


@dataclass(frozen=True)
class ParentRef:
    """
    Parent of a node: either the root sentinel or a reference to a folder.

    The root is stored as the integer ``0`` and a folder reference as an
    ObjectId; ``node_id`` is always the string form (or None for root), so
    comparisons never mix the two representations.
    """
    node_id: Optional[str] = None

    @property
    def is_root(self) -> bool:
        return self.node_id is None

    @classmethod
    def root(cls) -> "ParentRef":
        return cls(None)

    @classmethod
    def node(cls, node_id: Union[str, ObjectId]) -> "ParentRef":
        if not is_valid_id(node_id):
            raise ValueError(f"Invalid node reference: {node_id!r}")
        return cls(str(node_id))

    @classmethod
    def parse(cls, raw: Any) -> "ParentRef":
        """
        Parse a caller-supplied parent id.

        ``None``, ``0``, ``"0"`` and ``""`` all denote the root.

        Raises:
            ValueError: If the value is neither root nor a valid node reference
        """
        if isinstance(raw, bool):
            raise ValueError(f"Invalid node reference: {raw!r}")
        if raw is None or raw == "" or raw == ROOT_PARENT_ID or raw == str(ROOT_PARENT_ID):
            return cls.root()
        return cls.node(raw)

    @classmethod
    def from_document(cls, value: Any) -> "ParentRef":
        if value is None or value == ROOT_PARENT_ID or value == str(ROOT_PARENT_ID):
            return cls.root()
        return cls(str(value))

    def to_document(self) -> Union[int, ObjectId]:
        return ROOT_PARENT_ID if self.is_root else ObjectId(self.node_id)

    def to_public(self) -> Union[int, str]:
        return ROOT_PARENT_ID if self.is_root else self.node_id


ROOT = ParentRef.root()


@dataclass(frozen=True)
class FileNode:
    id: str
    user_id: str
    name: str
    type: FileType
    is_public: bool
    parent: ParentRef
    local_path: Optional[str] = None

    @property
    def is_folder(self) -> bool:
        return self.type == FileType.FOLDER

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "FileNode":
        return cls(
            id=str(doc["_id"]),
            user_id=str(doc["userId"]),
            name=doc["name"],
            type=FileType(doc["type"]),
            is_public=bool(doc.get("isPublic", False)),
            parent=ParentRef.from_document(doc.get("parentId")),
            local_path=doc.get("localPath"),
        )

    def to_public_view(self) -> Dict[str, Any]:
        """Caller-facing representation; ``localPath`` is never included."""
        return {
            "id": self.id,
            "userId": self.user_id,
            "name": self.name,
            "type": self.type.value,
            "isPublic": self.is_public,
            "parentId": self.parent.to_public(),
        }


@dataclass(frozen=True)
class DerivativeJob:
    """Message asking the external worker to generate derivatives of a blob."""
    user_id: str
    file_id: str

    def to_payload(self) -> Dict[str, str]:
        return {"userId": self.user_id, "fileId": self.file_id}
