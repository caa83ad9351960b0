"""File metadata derived from describe responses."""

import logging
import mimetypes

import httpx

from ghrest.models import FileDescription

from .errors import UnableToRetrieveMetadata
from .models import FileEntry, RepositoryReference
from .services import ContentsService
from .timestamps import TimestampResolver

logger = logging.getLogger(__name__)

# Built-in extension table only; host mime.types files are not consulted.
_MIME_TYPES = mimetypes.MimeTypes()


def detect_mime_type(path: str) -> str:
    """Content type from the path's extension, or "" if unknown."""
    mime_type, _ = _MIME_TYPES.guess_type(path, strict=False)
    return mime_type or ""


class MetadataResolver:
    """Builds FileEntry records for single paths."""

    def __init__(
        self,
        repository: RepositoryReference,
        contents: ContentsService,
        timestamps: TimestampResolver,
    ):
        self.repository = repository
        self.contents = contents
        self.timestamps = timestamps

    def resolve(self, path: str) -> FileEntry:
        """Describe a path and derive its full metadata."""
        try:
            description = self.contents.describe(
                self.repository.owner,
                self.repository.repository,
                path,
                self.repository.reference,
            )
            if not isinstance(description, FileDescription):
                raise UnableToRetrieveMetadata(path, "path is a directory")
            return self.describe_to_file_entry(description)
        except httpx.HTTPError as e:
            raise UnableToRetrieveMetadata(path, str(e)) from e

    def describe_to_file_entry(self, description: FileDescription) -> FileEntry:
        """Turn a file description into a FileEntry, resolving its timestamp."""
        entry = FileEntry(
            path=description.path,
            size=description.size,
            last_modified=self.timestamps.resolve_timestamp(description.path),
            mime_type=detect_mime_type(description.path),
        )
        logger.debug("Metadata for %s: %s", description.path, entry)
        return entry
