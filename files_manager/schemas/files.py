"""Pydantic schemas for file endpoints."""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from files_manager.types import FileNode


class UploadRequest(BaseModel):
    """
    Request model for upload.

    ``name``, ``type`` and ``data`` are left optional and checked by the
    upload pipeline, which reports the first missing one by name.
    """
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    type: Optional[str] = None
    data: Optional[str] = None
    is_public: bool = Field(False, alias="isPublic")
    parent_id: Any = Field(None, alias="parentId")


class FileNodeResponse(BaseModel):
    """Caller-facing view of a node. The blob path is never exposed."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    user_id: str = Field(alias="userId")
    name: str
    type: str
    is_public: bool = Field(alias="isPublic")
    parent_id: Union[int, str] = Field(alias="parentId")

    @classmethod
    def from_node(cls, node: FileNode) -> "FileNodeResponse":
        return cls(**node.to_public_view())
