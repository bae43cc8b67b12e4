"""Session repository: token -> user id mappings with a fixed lifetime."""

from typing import Optional

from common.constants import AUTH_KEY_PREFIX, TOKEN_TTL_SECONDS
from common.logging_config import get_logger
from files_manager.stores.key_value import KeyValueStore

logger = get_logger(__name__)


class SessionRepository:
    def __init__(self, store: KeyValueStore, ttl_seconds: int = TOKEN_TTL_SECONDS):
        self.store = store
        self.ttl_seconds = ttl_seconds

    @staticmethod
    def _key(token: str) -> str:
        return f"{AUTH_KEY_PREFIX}{token}"

    def create(self, token: str, user_id: str) -> None:
        self.store.set(self._key(token), user_id, self.ttl_seconds)
        logger.debug(f"Session stored [user_id={user_id}] ttl={self.ttl_seconds}s")

    def get_user_id(self, token: str) -> Optional[str]:
        return self.store.get(self._key(token))

    def delete(self, token: str) -> bool:
        return self.store.delete(self._key(token))
