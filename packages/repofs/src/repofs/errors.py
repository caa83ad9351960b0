"""Filesystem errors."""


class FilesystemError(Exception):
    """Base class for filesystem failures."""

    operation = "access"

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Unable to {self.operation} {path!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnableToCheckExistence(FilesystemError):
    operation = "check existence of"


class UnableToReadFile(FilesystemError):
    operation = "read file"


class UnableToRetrieveMetadata(FilesystemError):
    operation = "retrieve metadata for"


class UnableToListContents(FilesystemError):
    operation = "list contents of"


class UnsupportedOperation(FilesystemError, NotImplementedError):
    """Mutation attempted on a read-only filesystem."""

    def __init__(self, operation: str, path: str):
        self.operation = operation
        super().__init__(path, "filesystem is read-only")
