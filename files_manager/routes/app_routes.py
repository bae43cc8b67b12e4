"""Service status and statistics routes."""

from fastapi import APIRouter, Depends

from files_manager.auth import get_container
from files_manager.schemas.app import StatsResponse, StatusResponse

router = APIRouter(tags=["App"])


@router.get("/status", response_model=StatusResponse)
def get_status(container=Depends(get_container)):
    """Report whether Redis and MongoDB answer a ping."""
    return StatusResponse(
        redis=container.key_value_store.is_alive(),
        db=container.users.is_alive(),
    )


@router.get("/stats", response_model=StatsResponse)
def get_stats(container=Depends(get_container)):
    """Count users and file nodes."""
    return StatsResponse(
        users=container.user_repo.count(),
        files=container.file_repo.count(),
    )
