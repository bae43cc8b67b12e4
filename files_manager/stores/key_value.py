"""Key-value store with per-key expiry, backed by Redis."""

from typing import Optional

import redis

from common.logging_config import get_logger

logger = get_logger(__name__)


class KeyValueStore:
    """Contract for a key-value store whose entries expire on their own."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> bool:
        raise NotImplementedError

    def is_alive(self) -> bool:
        raise NotImplementedError


class RedisKeyValueStore(KeyValueStore):
    """
    Redis implementation. Expiry is delegated to Redis (``SET ... EX``), so a
    key past its TTL is simply absent on the next read.
    """

    def __init__(self, redis_client: redis.Redis):
        if redis_client is None:
            raise ValueError("Redis client is required")
        self.redis = redis_client

    @classmethod
    def from_url(cls, url: str, socket_timeout: Optional[float] = None) -> "RedisKeyValueStore":
        client = redis.Redis.from_url(
            url,
            decode_responses=True,
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_timeout,
        )
        return cls(client)

    def get(self, key: str) -> Optional[str]:
        value = self.redis.get(key)
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        if ttl_seconds <= 0:
            raise ValueError("TTL must be positive")
        self.redis.set(key, value, ex=ttl_seconds)

    def delete(self, key: str) -> bool:
        return self.redis.delete(key) > 0

    def is_alive(self) -> bool:
        try:
            return bool(self.redis.ping())
        except redis.RedisError as e:
            logger.warning(f"Redis ping failed: {e}")
            return False
