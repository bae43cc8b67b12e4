"""File operation API routes."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from files_manager.auth import get_container, get_current_user, get_optional_user_id
from files_manager.repositories.user_repository import User
from files_manager.schemas.files import FileNodeResponse, UploadRequest

router = APIRouter(prefix="/files", tags=["Files"])


@router.post("", response_model=FileNodeResponse, status_code=status.HTTP_201_CREATED)
def upload_file(
    request: UploadRequest,
    current_user: User = Depends(get_current_user),
    container=Depends(get_container),
):
    """
    Create a folder, or store a file/image blob and its metadata.

    Parameters:
        - name: Node name (required)
        - type: folder | file | image (required)
        - data: Base64 content (required unless type is folder)
        - isPublic: Visibility flag (default false)
        - parentId: Parent folder id, or 0 for the root (default 0)
        - X-Token header (required)

    Raises:
        - 400: Missing name/type/data, parent not found, parent not a folder
        - 401: Invalid or missing token
        - 500: Blob could not be written
    """
    node = container.upload_service.upload(
        user_id=current_user.user_id,
        name=request.name,
        type=request.type,
        data=request.data,
        is_public=request.is_public,
        parent_id=request.parent_id,
    )
    return FileNodeResponse.from_node(node)


@router.get("", response_model=List[FileNodeResponse])
def list_files(
    parent_id: Optional[str] = Query(None, alias="parentId"),
    page: int = Query(0),
    current_user: User = Depends(get_current_user),
    container=Depends(get_container),
):
    """
    List the caller's nodes under a parent, 20 per page.

    Parameters:
        - parentId: Parent folder id, or 0 for the root (default 0)
        - page: Zero-based page index (default 0)

    Returns an empty list for a parent that is missing or not a folder.
    """
    nodes = container.listing_service.list(current_user.user_id, parent_id, page)
    return [FileNodeResponse.from_node(node) for node in nodes]


@router.get("/{file_id}", response_model=FileNodeResponse)
def get_file(
    file_id: str,
    current_user: User = Depends(get_current_user),
    container=Depends(get_container),
):
    """
    Return a node's metadata.

    Raises:
        - 401: Invalid or missing token
        - 404: No such node, or a private node owned by someone else
    """
    node = container.file_service.get_by_id(file_id, current_user.user_id)
    return FileNodeResponse.from_node(node)


@router.put("/{file_id}/publish", response_model=FileNodeResponse)
def publish_file(
    file_id: str,
    current_user: User = Depends(get_current_user),
    container=Depends(get_container),
):
    """Make a node owned by the caller public."""
    node = container.file_service.set_published(file_id, current_user.user_id, True)
    return FileNodeResponse.from_node(node)


@router.put("/{file_id}/unpublish", response_model=FileNodeResponse)
def unpublish_file(
    file_id: str,
    current_user: User = Depends(get_current_user),
    container=Depends(get_container),
):
    """Make a node owned by the caller private."""
    node = container.file_service.set_published(file_id, current_user.user_id, False)
    return FileNodeResponse.from_node(node)


@router.get("/{file_id}/data")
def get_file_data(
    file_id: str,
    size: int = Query(0),
    caller_user_id: Optional[str] = Depends(get_optional_user_id),
    container=Depends(get_container),
):
    """
    Return the raw bytes of a file or image.

    Parameters:
        - size: 0 for the original, or 500 | 250 | 100 for a derivative
        - X-Token header (optional; needed for private files)

    Raises:
        - 400: The node is a folder
        - 404: No such node, not visible to the caller, or blob not available
        - 500: Blob could not be read
    """
    content = container.content_service.get_content(file_id, caller_user_id, size)
    return Response(content=content.data, media_type=content.content_type)
