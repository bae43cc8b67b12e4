"""Authentication and security utilities."""

import base64
import binascii
import uuid
from typing import Optional, Tuple

import bcrypt
from fastapi import Depends, Header, Request

from common.logging_config import get_logger
from files_manager import config
from files_manager.exceptions import UnauthorizedError
from files_manager.repositories.user_repository import User

logger = get_logger(__name__)


def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: Plain text password to hash

    Returns:
        Bcrypt hash of the password
    """
    password_bytes = password.encode('utf-8')
    salt = bcrypt.gensalt(rounds=config.BCRYPT_ROUNDS)
    hashed = bcrypt.hashpw(password_bytes, salt)
    return hashed.decode('utf-8')


def verify_password(password: str, password_hash: str) -> bool:
    """
    Verify a password against a bcrypt hash.

    A stored value that is not a bcrypt hash never matches.
    """
    try:
        return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))
    except ValueError:
        return False


def generate_token() -> str:
    """
    Generate a new opaque session token (uuid4, 122 random bits).
    """
    return str(uuid.uuid4())


def parse_basic_auth(authorization: str) -> Tuple[str, str]:
    """
    Extract ``(email, password)`` from a ``Basic`` Authorization header.

    Raises:
        UnauthorizedError: If the header is missing or malformed
    """
    if not authorization:
        raise UnauthorizedError("Missing Authorization header")

    scheme, _, encoded = authorization.partition(" ")
    if scheme.lower() != "basic" or not encoded:
        raise UnauthorizedError("Invalid authorization header format")

    try:
        decoded = base64.b64decode(encoded.strip(), validate=True).decode('utf-8')
    except (binascii.Error, UnicodeDecodeError):
        raise UnauthorizedError("Invalid Basic credentials encoding")

    email, sep, password = decoded.partition(":")
    if not sep or not email:
        raise UnauthorizedError("Invalid Basic credentials")
    return email, password


def get_container(request: Request):
    """
    FastAPI dependency returning the container the app was built with.
    """
    return request.app.state.container


def get_current_user(
    x_token: Optional[str] = Header(None),
    container=Depends(get_container),
) -> User:
    """
    FastAPI dependency resolving the ``X-Token`` header to a user.

    Raises:
        UnauthorizedError: If the token is missing, unknown or expired
    """
    user = container.auth_service.require_user(x_token)
    logger.debug(f"Token resolved [user_id={user.user_id}]")
    return user


def get_optional_user_id(
    x_token: Optional[str] = Header(None),
    container=Depends(get_container),
) -> Optional[str]:
    """
    Like ``get_current_user`` but yields None for anonymous callers instead
    of rejecting them.
    """
    return container.auth_service.resolve_token(x_token)
