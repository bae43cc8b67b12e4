"""Background task for cleaning up orphaned blobs."""

import asyncio
import os
import re
import time
from typing import Callable, Optional

from common.constants import DERIVATIVE_WIDTHS
from common.logging_config import get_logger
from files_manager.config import ORPHAN_GRACE_SECONDS, ORPHAN_SWEEP_INTERVAL
from files_manager.repositories.file_repository import FileRepository
from files_manager.stores.blobs import BlobStore

logger = get_logger(__name__)

_DERIVATIVE_SUFFIX = re.compile(r"^(?P<primary>.+)_(?P<width>\d+)$")


class OrphanedBlobCleaner:
    """
    Background task that periodically deletes blobs no metadata record
    points at. Such blobs are left behind when the process dies between
    writing a blob and inserting its record.
    """

    def __init__(
        self,
        file_repo: FileRepository,
        blob_store: BlobStore,
        storage_dir: str,
        interval_seconds: int = ORPHAN_SWEEP_INTERVAL,
        grace_seconds: int = ORPHAN_GRACE_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        """
        Initialize cleaner task.

        Args:
            file_repo: Repository used to check whether a blob is referenced
            blob_store: Filesystem holding the blobs
            storage_dir: Directory to sweep
            interval_seconds: Time between sweeps (default 6 hours)
            grace_seconds: Minimum blob age before it may be deleted, so an
                upload still between its two steps is never swept
            clock: Current time source, in epoch seconds
        """
        self.file_repo = file_repo
        self.blob_store = blob_store
        self.storage_dir = storage_dir
        self.interval_seconds = interval_seconds
        self.grace_seconds = grace_seconds
        self.clock = clock
        self._running = False
        self._task = None

    async def start(self) -> None:
        """Start the background cleanup task."""
        if self._running:
            logger.warning("Cleanup task already running")
            return

        self._running = True
        self._task = asyncio.create_task(self._run())
        logger.info(f"Started orphaned blob cleanup task (interval: {self.interval_seconds}s)")

    async def stop(self) -> None:
        """Stop the background cleanup task."""
        if not self._running:
            return

        self._running = False
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass

        logger.info("Stopped orphaned blob cleanup task")

    async def _run(self) -> None:
        """Main loop for cleanup task."""
        while self._running:
            try:
                await asyncio.sleep(self.interval_seconds)

                if not self._running:
                    break

                await self.cleanup_cycle()

            except asyncio.CancelledError:
                break
            except Exception as e:
                logger.error(f"Error in cleanup task: {e}", exc_info=True)

    @staticmethod
    def primary_path(path: str) -> str:
        """Map a derivative blob path to the blob it was generated from."""
        match = _DERIVATIVE_SUFFIX.match(path)
        if match and int(match.group("width")) in DERIVATIVE_WIDTHS:
            return match.group("primary")
        return path

    async def cleanup_cycle(self) -> int:
        """
        Execute one sweep in the default executor, off the event loop.

        Returns:
            Number of blobs deleted
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.sweep)

    def sweep(self) -> int:
        """Blocking body of a cleanup cycle."""
        paths = self.blob_store.list_files(self.storage_dir)
        if not paths:
            logger.debug("No blobs to inspect")
            return 0

        logger.info(f"Starting cleanup cycle over {len(paths)} blobs")

        now = self.clock()
        referenced = {}
        cleaned_count = 0

        for path in paths:
            primary = self.primary_path(path)
            if primary not in referenced:
                referenced[primary] = self.file_repo.is_path_referenced(primary)
            if referenced[primary]:
                continue

            try:
                age = now - self.blob_store.modified_at(path)
                if age < self.grace_seconds:
                    logger.debug(f"Skipping recent unreferenced blob {os.path.basename(path)} (age={age:.0f}s)")
                    continue
                if self.blob_store.delete(path):
                    logger.info(f"Cleaned orphaned blob {os.path.basename(path)}")
                    cleaned_count += 1
            except OSError as e:
                logger.warning(f"Error cleaning orphaned blob {os.path.basename(path)}: {e}")

        logger.info(f"Cleanup cycle complete: {cleaned_count} cleaned")
        return cleaned_count


def build_cleaner(container, interval_seconds: Optional[int] = None) -> OrphanedBlobCleaner:
    """Create a cleaner sweeping the container's storage directory."""
    return OrphanedBlobCleaner(
        file_repo=container.file_repo,
        blob_store=container.blob_store,
        storage_dir=container.storage_dir,
        interval_seconds=ORPHAN_SWEEP_INTERVAL if interval_seconds is None else interval_seconds,
    )
