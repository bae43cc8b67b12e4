"""User API routes."""

from fastapi import APIRouter, Depends, status

from files_manager.auth import get_container, get_current_user
from files_manager.repositories.user_repository import User
from files_manager.schemas.users import RegisterRequest, UserResponse

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(request: RegisterRequest, container=Depends(get_container)):
    """
    Register a new user account.

    Parameters:
        - email: Unique email address
        - password: User password (stored as a bcrypt hash)

    Raises:
        - 400: Missing email or password, or email already registered
    """
    user = container.auth_service.register_user(request.email, request.password)
    return UserResponse(id=user.user_id, email=user.email)


@router.get("/me", response_model=UserResponse)
def me(current_user: User = Depends(get_current_user)):
    """Return the user owning the ``X-Token`` session."""
    return UserResponse(id=current_user.user_id, email=current_user.email)
