"""Session API routes."""

from typing import Optional

from fastapi import APIRouter, Depends, Header, Response, status

from files_manager.auth import get_container, parse_basic_auth
from files_manager.schemas.auth import ConnectResponse

router = APIRouter(tags=["Authentication"])


@router.get("/connect", response_model=ConnectResponse)
def connect(
    authorization: Optional[str] = Header(None),
    container=Depends(get_container),
):
    """
    Exchange Basic credentials for a session token.

    Parameters:
        - Authorization header: Basic base64(email:password)

    Returns:
        - token: Opaque session token, valid for 24 hours

    Raises:
        - 401: Missing/malformed header, unknown email or wrong password
        - 500: Session store failure
    """
    email, password = parse_basic_auth(authorization)
    token = container.auth_service.issue_token(email, password)
    return ConnectResponse(token=token)


@router.get("/disconnect", status_code=status.HTTP_204_NO_CONTENT)
def disconnect(
    x_token: Optional[str] = Header(None),
    container=Depends(get_container),
):
    """
    Revoke the session token given in ``X-Token``.

    Raises:
        - 401: Missing, unknown or expired token
    """
    container.auth_service.revoke_token(x_token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
