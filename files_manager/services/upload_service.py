"""Upload pipeline: validate, persist the blob, record metadata, schedule derivatives."""

import base64
import binascii
import os
import uuid
from typing import Any, Optional

from common.logging_config import get_logger
from files_manager.exceptions import MissingFieldError, StorageError
from files_manager.services.file_service import FileService
from files_manager.stores.blobs import BlobStore
from files_manager.stores.job_queue import JobQueue
from files_manager.types import DerivativeJob, FileNode, FileType

logger = get_logger(__name__)


class UploadService:
    """
    Runs a single upload to Accepted (a persisted node) or Rejected (an
    exception, with no metadata written).

    Blob content is written and synced before its metadata record is
    inserted. The two stores are not transactional: a crash between the
    steps leaves a blob with no record, which the orphan sweeper removes
    later, but a record never points at a missing blob.
    """

    def __init__(
        self,
        file_service: FileService,
        blob_store: BlobStore,
        job_queue: JobQueue,
        storage_dir: str,
    ):
        self.file_service = file_service
        self.blob_store = blob_store
        self.job_queue = job_queue
        self.storage_dir = storage_dir

    def upload(
        self,
        user_id: str,
        name: Optional[str],
        type: Optional[str],
        data: Optional[str] = None,
        is_public: bool = False,
        parent_id: Any = None,
    ) -> FileNode:
        if not name:
            raise MissingFieldError("name")
        file_type = FileType.parse(type)
        if file_type is None:
            raise MissingFieldError("type")
        if not data and file_type != FileType.FOLDER:
            raise MissingFieldError("data")

        parent = self.file_service.resolve_parent(parent_id)

        if file_type == FileType.FOLDER:
            return self.file_service.create_folder(user_id, name, parent, is_public, parent_checked=True)

        content = self._decode(data)
        local_path = os.path.join(self.storage_dir, str(uuid.uuid4()))
        self._write_blob(local_path, content)

        node = self.file_service.create_file_record(
            user_id=user_id,
            name=name,
            file_type=file_type,
            parent=parent,
            local_path=local_path,
            is_public=is_public,
            parent_checked=True,
        )
        logger.info(f"Upload accepted: {file_type.value} {node.id} ({len(content)} bytes) [user_id={user_id}]")

        self._enqueue_derivatives(DerivativeJob(user_id=user_id, file_id=node.id))
        return node

    @staticmethod
    def _decode(data: Any) -> bytes:
        """
        Decode standard base64. Whitespace is ignored, so line-wrapped
        encoder output is accepted; any other non-alphabet character is not.
        """
        if not isinstance(data, str):
            raise MissingFieldError("data")
        try:
            return base64.b64decode("".join(data.split()), validate=True)
        except (binascii.Error, ValueError):
            logger.warning("Upload rejected: data is not valid base64")
            raise MissingFieldError("data")

    def _write_blob(self, local_path: str, content: bytes) -> None:
        try:
            self.blob_store.ensure_directory(self.storage_dir)
            self.blob_store.write_durable(local_path, content)
        except OSError as e:
            logger.error(f"Blob write failed, upload rejected: {e}", exc_info=True)
            raise StorageError(str(e)) from e

    def _enqueue_derivatives(self, job: DerivativeJob) -> None:
        try:
            self.job_queue.enqueue(job.to_payload())
        except Exception as e:
            logger.warning(f"Failed to enqueue derivative job for file {job.file_id}: {e}")
