"""File content reads."""

import base64
import binascii
import io
import logging

import httpx

from ghrest.models import FileDescription

from .errors import UnableToReadFile
from .models import RepositoryReference
from .services import ContentsService

logger = logging.getLogger(__name__)


def decode_content(payload: str) -> bytes:
    """
    Strictly decode a base64 payload.

    Line breaks are part of the transport encoding and are dropped; any other
    character outside the base64 alphabet is an error.

    Raises:
        binascii.Error: if the payload is not valid base64
    """
    return base64.b64decode("".join(payload.splitlines()), validate=True)


class ContentReader:
    """Fetches raw file bytes."""

    def __init__(self, repository: RepositoryReference, contents: ContentsService):
        self.repository = repository
        self.contents = contents

    def read(self, path: str) -> bytes:
        """
        Read a file's full contents.

        Args:
            path: File path in repository

        Returns:
            Decoded file bytes

        Raises:
            UnableToReadFile: on transport errors, directories, or bad encoding
        """
        try:
            description = self.contents.describe(
                self.repository.owner,
                self.repository.repository,
                path,
                self.repository.reference,
            )
        except httpx.HTTPError as e:
            raise UnableToReadFile(path, str(e)) from e

        if not isinstance(description, FileDescription):
            raise UnableToReadFile(path, "path is a directory")
        if description.content is None:
            raise UnableToReadFile(path, "response carries no content")
        if description.encoding not in (None, "base64"):
            raise UnableToReadFile(path, f"unsupported encoding {description.encoding!r}")

        try:
            data = decode_content(description.content)
        except binascii.Error as e:
            raise UnableToReadFile(path, f"invalid base64 content: {e}") from e

        logger.debug("Read %s (%d bytes)", path, len(data))
        return data

    def read_stream(self, path: str) -> io.BytesIO:
        """
        Read a file into an in-memory stream.

        Args:
            path: File path in repository

        Returns:
            BytesIO positioned at the start
        """
        stream = io.BytesIO()
        stream.write(self.read(path))
        stream.seek(0)
        return stream
