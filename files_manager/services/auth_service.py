"""Authentication service: user registration and session token lifecycle."""

from typing import Optional

from pymongo.errors import DuplicateKeyError

from common.logging_config import get_logger
from files_manager.auth import generate_token, hash_password, verify_password
from files_manager.exceptions import (
    FilesManagerError,
    MissingFieldError,
    ServerError,
    UnauthorizedError,
    UserAlreadyExistsError,
)
from files_manager.repositories.session_repository import SessionRepository
from files_manager.repositories.user_repository import User, UserRepository

logger = get_logger(__name__)


class AuthService:
    def __init__(self, user_repo: UserRepository, session_repo: SessionRepository):
        self.user_repo = user_repo
        self.session_repo = session_repo

    def register_user(self, email: Optional[str], password: Optional[str]) -> User:
        if not email:
            raise MissingFieldError("email")
        if not password:
            raise MissingFieldError("password")

        logger.info(f"Attempting to register user: {email}")
        if self.user_repo.get_by_email(email) is not None:
            logger.warning(f"Registration failed: email '{email}' already exists")
            raise UserAlreadyExistsError(f"Email '{email}' already exists")

        try:
            user = self.user_repo.create_user(email, hash_password(password))
        except DuplicateKeyError:
            logger.warning(f"Registration failed due to unique index: email '{email}'")
            raise UserAlreadyExistsError(f"Email '{email}' already exists")
        logger.info(f"Successfully registered user: {email} [user_id={user.user_id}]")
        return user

    def issue_token(self, email: str, password: str) -> str:
        """
        Exchange credentials for a fresh session token valid for 24 hours.

        Raises:
            UnauthorizedError: Unknown email or wrong password
            ServerError: The user or session store failed
        """
        logger.info(f"Login attempt for user: {email}")
        try:
            user = self.user_repo.get_by_email(email)
            if user is None:
                logger.warning(f"Login failed: email '{email}' not found")
                raise UnauthorizedError("Unknown email")

            if not verify_password(password, user.password_hash):
                logger.warning(f"Login failed: invalid password for '{email}'")
                raise UnauthorizedError("Password mismatch")

            token = generate_token()
            self.session_repo.create(token, user.user_id)
        except FilesManagerError:
            raise
        except Exception as e:
            logger.error(f"Token issue failed for '{email}': {e}", exc_info=True)
            raise ServerError(str(e)) from e

        logger.info(f"Successfully logged in user: {email} [user_id={user.user_id}]")
        return token

    def revoke_token(self, token: Optional[str]) -> None:
        """
        Delete the session for ``token``. A token that is already gone
        (revoked or expired) is reported as Unauthorized.
        """
        if not token:
            raise UnauthorizedError("Missing token")
        try:
            user_id = self.session_repo.get_user_id(token)
            if user_id is None:
                logger.warning("Logout failed: token not found")
                raise UnauthorizedError("Unknown token")
            self.session_repo.delete(token)
        except FilesManagerError:
            raise
        except Exception as e:
            logger.error(f"Token revoke failed: {e}", exc_info=True)
            raise ServerError(str(e)) from e

        logger.info(f"Session revoked [user_id={user_id}]")

    def resolve_token(self, token: Optional[str]) -> Optional[str]:
        if not token:
            return None
        user_id = self.session_repo.get_user_id(token)
        if user_id is None:
            logger.debug("Token resolution failed: no live session")
        return user_id

    def require_user(self, token: Optional[str]) -> User:
        """
        Resolve ``token`` to an existing user.

        Raises:
            UnauthorizedError: No live session, or its user no longer exists
        """
        user_id = self.resolve_token(token)
        if user_id is None:
            raise UnauthorizedError("Invalid or expired token")
        user = self.user_repo.get_by_user_id(user_id)
        if user is None:
            logger.warning(f"Session points at missing user [user_id={user_id}]")
            raise UnauthorizedError("Unknown user")
        return user
