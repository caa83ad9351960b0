"""Filesystem entry models."""

import re

from pydantic import BaseModel, ConfigDict

_REFERENCE_PATTERN = re.compile(r"^(?P<owner>[^/@\s]+)/(?P<repository>[^/@\s]+)(?:@(?P<reference>\S+))?$")


class RepositoryReference(BaseModel):
    """Repository addressed by owner, name and optional revision."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repository: str
    reference: str | None = None  # None means the remote's default branch

    @classmethod
    def parse(cls, value: str) -> "RepositoryReference":
        """Parse ``owner/repo`` or ``owner/repo@ref``."""
        match = _REFERENCE_PATTERN.match(value.strip())
        if not match:
            raise ValueError(f"Invalid repository reference: {value!r} (expected owner/repo[@ref])")
        return cls(**match.groupdict())

    def __str__(self) -> str:
        name = f"{self.owner}/{self.repository}"
        return f"{name}@{self.reference}" if self.reference else name


class FileEntry(BaseModel):
    """File metadata."""

    path: str
    size: int | None = None
    last_modified: int | None = None  # epoch seconds, 0 if unknown, None if not resolved
    mime_type: str = ""

    @property
    def is_file(self) -> bool:
        return True

    @property
    def is_dir(self) -> bool:
        return False


class DirectoryEntry(BaseModel):
    """Directory in a listing."""

    path: str

    @property
    def is_file(self) -> bool:
        return False

    @property
    def is_dir(self) -> bool:
        return True


Entry = FileEntry | DirectoryEntry
