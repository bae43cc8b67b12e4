"""Configuration settings for the Files Manager server."""

import os
from common.constants import DEFAULT_FOLDER_PATH, DEFAULT_JOB_QUEUE_NAME


FM_HOST = os.environ.get("FM_HOST", "0.0.0.0")

FM_PORT = int(os.environ.get("PORT", "5000"))

FOLDER_PATH = os.environ.get("FOLDER_PATH", DEFAULT_FOLDER_PATH)

DB_HOST = os.environ.get("DB_HOST", "localhost")

DB_PORT = int(os.environ.get("DB_PORT", "27017"))

DB_DATABASE = os.environ.get("DB_DATABASE", "files_manager")

REDIS_URL = os.environ.get("REDIS_URL", "redis://localhost:6379/0")

JOB_QUEUE_NAME = os.environ.get("JOB_QUEUE_NAME", DEFAULT_JOB_QUEUE_NAME)

ORPHAN_SWEEP_INTERVAL = int(os.environ.get("ORPHAN_SWEEP_INTERVAL", str(6 * 3600)))

ORPHAN_GRACE_SECONDS = int(os.environ.get("ORPHAN_GRACE_SECONDS", "3600"))

BCRYPT_ROUNDS = int(os.environ.get("BCRYPT_ROUNDS", "12"))

REDIS_SOCKET_TIMEOUT = float(os.environ.get("REDIS_SOCKET_TIMEOUT", "2"))

JOB_QUEUE_WORKERS = int(os.environ.get("JOB_QUEUE_WORKERS", "2"))
