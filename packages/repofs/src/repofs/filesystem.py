"""Abstract filesystem interface."""

from abc import ABC, abstractmethod
from typing import IO, Any, Iterator

from .errors import UnsupportedOperation
from .models import Entry, FileEntry


class ReadOnlyFilesystem(ABC):
    """Filesystem that can be browsed and read but not changed.

    The mutating methods are part of the surface so that generic callers can
    reach them, and always raise UnsupportedOperation.
    """

    @abstractmethod
    def file_exists(self, path: str) -> bool:
        """Whether ``path`` exists and is a file."""
        ...

    @abstractmethod
    def directory_exists(self, path: str) -> bool:
        """Whether ``path`` exists and is a directory."""
        ...

    @abstractmethod
    def read(self, path: str) -> bytes:
        """Full contents of a file."""
        ...

    @abstractmethod
    def read_stream(self, path: str) -> IO[bytes]:
        """Readable, seekable stream over a file's contents."""
        ...

    @abstractmethod
    def visibility(self, path: str) -> FileEntry:
        ...

    @abstractmethod
    def mime_type(self, path: str) -> FileEntry:
        ...

    @abstractmethod
    def last_modified(self, path: str) -> FileEntry:
        ...

    @abstractmethod
    def file_size(self, path: str) -> FileEntry:
        ...

    @abstractmethod
    def list_contents(self, path: str, deep: bool = False) -> Iterator[Entry]:
        """Entries under ``path``; the whole subtree when ``deep``."""
        ...

    def write(self, path: str, contents: bytes, config: dict[str, Any] | None = None) -> None:
        raise UnsupportedOperation("write", path)

    def write_stream(self, path: str, contents: IO[bytes], config: dict[str, Any] | None = None) -> None:
        raise UnsupportedOperation("write", path)

    def delete(self, path: str) -> None:
        raise UnsupportedOperation("delete", path)

    def delete_directory(self, path: str) -> None:
        raise UnsupportedOperation("delete directory", path)

    def create_directory(self, path: str, config: dict[str, Any] | None = None) -> None:
        raise UnsupportedOperation("create directory", path)

    def set_visibility(self, path: str, visibility: str) -> None:
        raise UnsupportedOperation("set visibility of", path)

    def move(self, source: str, destination: str, config: dict[str, Any] | None = None) -> None:
        raise UnsupportedOperation("move", source)

    def copy(self, source: str, destination: str, config: dict[str, Any] | None = None) -> None:
        raise UnsupportedOperation("copy", source)
