"""Custom exception classes for the Files Manager."""


class FilesManagerError(Exception):
    """
    Base exception class for all Files Manager errors.

    Every subclass carries a stable ``code`` and a public ``message``. The
    message is what callers see; anything passed to the constructor is kept
    for logs only.
    """
    code = "SERVER_ERROR"
    message = "Server error"

    def __init__(self, detail: str = None):
        super().__init__(detail or self.message)


class UnauthorizedError(FilesManagerError):
    """
    Raised for a missing, invalid or expired token, or a credential mismatch.
    """
    code = "UNAUTHORIZED"
    message = "Unauthorized"


class MissingFieldError(FilesManagerError):
    """
    Raised when a required input is absent or malformed.
    """
    code = "MISSING_FIELD"

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing {field}")

    @property
    def message(self) -> str:
        return f"Missing {self.field}"


class ParentNotFoundError(FilesManagerError):
    """
    Raised when a non-root parent does not exist.
    """
    code = "PARENT_NOT_FOUND"
    message = "Parent not found"


class ParentNotFolderError(FilesManagerError):
    """
    Raised when a non-root parent exists but is not a folder.
    """
    code = "PARENT_NOT_FOLDER"
    message = "Parent is not a folder"


class NotFoundError(FilesManagerError):
    """
    Raised when a node does not exist or the caller may not see it.
    """
    code = "NOT_FOUND"
    message = "Not found"


class NotAFileError(FilesManagerError):
    """
    Raised when content is requested for a folder.
    """
    code = "NOT_A_FILE"
    message = "A folder doesn't have content"


class StorageError(FilesManagerError):
    """
    Raised when a blob cannot be written or read.
    """
    code = "STORAGE_ERROR"
    message = "Storage error"


class ServerError(FilesManagerError):
    """
    Raised for unexpected conditions in a collaborator.
    """


class UserAlreadyExistsError(FilesManagerError):
    """
    Raised when attempting to register an email that already exists.
    """
    code = "USER_ALREADY_EXISTS"
    message = "Already exist"
