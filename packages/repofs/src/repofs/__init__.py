"""Read-only filesystem access to GitHub repositories."""

from .adapter import GitHubAdapter, create_adapter
from .errors import (
    FilesystemError,
    UnableToCheckExistence,
    UnableToListContents,
    UnableToReadFile,
    UnableToRetrieveMetadata,
    UnsupportedOperation,
)
from .filesystem import ReadOnlyFilesystem
from .models import DirectoryEntry, Entry, FileEntry, RepositoryReference

__all__ = [
    "GitHubAdapter",
    "create_adapter",
    "ReadOnlyFilesystem",
    "RepositoryReference",
    "FileEntry",
    "DirectoryEntry",
    "Entry",
    "FilesystemError",
    "UnableToCheckExistence",
    "UnableToReadFile",
    "UnableToRetrieveMetadata",
    "UnableToListContents",
    "UnsupportedOperation",
]
