"""Project-wide constants (token lifetime, paging, storage conventions)."""

AUTH_KEY_PREFIX: str = "auth_"
TOKEN_TTL_SECONDS: int = 60 * 60 * 24  # 24 hours

ROOT_PARENT_ID: int = 0
PAGE_SIZE: int = 20

DEFAULT_FOLDER_PATH: str = "/tmp/files_manager"
DEFAULT_JOB_QUEUE_NAME: str = "fileQueue"

# Widths produced by the derivative worker, stored as "<localPath>_<width>".
DERIVATIVE_WIDTHS: tuple = (500, 250, 100)
