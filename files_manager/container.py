"""Explicit wiring of stores, repositories and services."""

from common.logging_config import get_logger
from files_manager import config
from files_manager.database import connect
from files_manager.repositories import FileRepository, SessionRepository, UserRepository
from files_manager.services import (
    AuthService,
    ContentService,
    FileService,
    ListingService,
    UploadService,
)
from files_manager.stores import (
    BackgroundJobQueue,
    BlobStore,
    DocumentCollection,
    JobQueue,
    KeyValueStore,
    LocalBlobStore,
    RedisJobQueue,
    RedisKeyValueStore,
)

logger = get_logger(__name__)


class ServiceContainer:
    """
    Holds one instance of every component, built from the four collaborator
    adapters. The app keeps it on ``app.state`` and routes reach it through
    a dependency, so tests can substitute in-memory adapters.
    """

    def __init__(
        self,
        key_value_store: KeyValueStore,
        users: DocumentCollection,
        files: DocumentCollection,
        job_queue: JobQueue,
        blob_store: BlobStore,
        storage_dir: str,
    ):
        self.key_value_store = key_value_store
        self.users = users
        self.files = files
        self.job_queue = job_queue
        self.blob_store = blob_store
        self.storage_dir = storage_dir

        self.session_repo = SessionRepository(key_value_store)
        self.user_repo = UserRepository(users)
        self.file_repo = FileRepository(files)

        self.auth_service = AuthService(self.user_repo, self.session_repo)
        self.file_service = FileService(self.file_repo)
        self.upload_service = UploadService(self.file_service, blob_store, job_queue, storage_dir)
        self.listing_service = ListingService(self.file_repo)
        self.content_service = ContentService(self.file_repo, blob_store)


def build_container() -> ServiceContainer:
    """Build a container backed by Redis, MongoDB and the local filesystem."""
    users, files = connect(config.DB_HOST, config.DB_PORT, config.DB_DATABASE)
    container = ServiceContainer(
        key_value_store=RedisKeyValueStore.from_url(config.REDIS_URL, config.REDIS_SOCKET_TIMEOUT),
        users=users,
        files=files,
        job_queue=BackgroundJobQueue(
            RedisJobQueue.from_url(config.REDIS_URL, config.JOB_QUEUE_NAME, config.REDIS_SOCKET_TIMEOUT),
            max_workers=config.JOB_QUEUE_WORKERS,
        ),
        blob_store=LocalBlobStore(),
        storage_dir=config.FOLDER_PATH,
    )
    logger.info(f"Service container built (storage_dir={config.FOLDER_PATH})")
    return container
