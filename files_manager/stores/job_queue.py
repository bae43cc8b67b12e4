"""Fire-and-forget job queue for derivative generation."""

import json
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Dict, Optional

import redis

from common.logging_config import get_logger

logger = get_logger(__name__)


class JobQueue:
    """Base class for job queues (to be extended by specific implementations)"""

    def enqueue(self, payload: Dict[str, Any]) -> None:
        raise NotImplementedError

    def close(self) -> None:
        pass


class RedisJobQueue(JobQueue):
    """Pushes JSON-encoded jobs onto a Redis list consumed by the worker."""

    def __init__(self, redis_client: redis.Redis, queue_name: str):
        if redis_client is None:
            raise ValueError("Redis client is required")
        self.redis = redis_client
        self.queue_name = queue_name

    @classmethod
    def from_url(
        cls,
        url: str,
        queue_name: str,
        socket_timeout: Optional[float] = None,
    ) -> "RedisJobQueue":
        """
        Connect to ``url``. With ``socket_timeout`` set, a stalled server
        fails a push with ``redis.TimeoutError`` after that many seconds.
        """
        client = redis.Redis.from_url(
            url,
            decode_responses=True,
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_timeout,
        )
        return cls(client, queue_name)

    def enqueue(self, payload: Dict[str, Any]) -> None:
        self.redis.rpush(self.queue_name, json.dumps(payload))
        logger.info(f"Job added to queue {self.queue_name}: {payload}")


class BackgroundJobQueue(JobQueue):
    """
    Hands each job to a worker thread and returns at once; the caller never
    waits for the underlying queue. Failures are logged, never raised.
    """

    def __init__(self, queue: JobQueue, max_workers: int = 2):
        self.queue = queue
        self.executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="job-queue")

    def enqueue(self, payload: Dict[str, Any]) -> Future:
        future = self.executor.submit(self.queue.enqueue, payload)
        future.add_done_callback(lambda f: self._log_failure(f, payload))
        return future

    @staticmethod
    def _log_failure(future: Future, payload: Dict[str, Any]) -> None:
        exc = future.exception()
        if exc is not None:
            logger.warning(f"Failed to enqueue derivative job {payload}: {exc}")

    def close(self) -> None:
        """Wait for pending jobs to be handed off, then stop the workers."""
        self.executor.shutdown(wait=True)
        self.queue.close()
