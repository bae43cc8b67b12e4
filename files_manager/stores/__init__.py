"""Adapters for the external collaborators: key-value store, documents, queue, blobs."""

from files_manager.stores.key_value import KeyValueStore, RedisKeyValueStore
from files_manager.stores.documents import DocumentCollection, MongoCollection
from files_manager.stores.job_queue import BackgroundJobQueue, JobQueue, RedisJobQueue
from files_manager.stores.blobs import BlobStore, LocalBlobStore

__all__ = [
    "KeyValueStore",
    "RedisKeyValueStore",
    "DocumentCollection",
    "MongoCollection",
    "JobQueue",
    "RedisJobQueue",
    "BackgroundJobQueue",
    "BlobStore",
    "LocalBlobStore",
]
