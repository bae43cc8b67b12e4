"""MongoDB connection and index management."""

from typing import Tuple

from pymongo import ASCENDING, MongoClient

from common.logging_config import get_logger
from files_manager.stores.documents import DocumentCollection, MongoCollection

logger = get_logger(__name__)

USERS_COLLECTION = "users"
FILES_COLLECTION = "files"


def connect(host: str, port: int, database: str) -> Tuple[MongoCollection, MongoCollection]:
    """
    Open a client and return the ``users`` and ``files`` collections.

    pymongo connects lazily, so this never blocks on an unreachable server.
    """
    client = MongoClient(host=host, port=port, serverSelectionTimeoutMS=5000)
    db = client[database]
    logger.info(f"MongoDB client created for {host}:{port}/{database}")
    return MongoCollection(db[USERS_COLLECTION]), MongoCollection(db[FILES_COLLECTION])


def init_database(users: DocumentCollection, files: DocumentCollection) -> None:
    """
    Create the indexes the repositories rely on.
    """
    users.ensure_index([("email", ASCENDING)], unique=True)
    files.ensure_index([("userId", ASCENDING), ("parentId", ASCENDING)])
    files.ensure_index([("localPath", ASCENDING)])
    logger.info("Database indexes ensured")
