"""File and directory existence checks."""

import logging

import httpx

from ghrest.models import Description, DirectoryListing, FileDescription

from .errors import UnableToCheckExistence
from .models import RepositoryReference
from .services import ContentsService

logger = logging.getLogger(__name__)

ROOT_PATHS = ("", "/")


def is_root(path: str) -> bool:
    return path in ROOT_PATHS


class ExistenceChecker:
    """Answers whether a path exists, and as what kind."""

    def __init__(self, repository: RepositoryReference, contents: ContentsService):
        self.repository = repository
        self.contents = contents

    def file_exists(self, path: str) -> bool:
        """
        Check whether a path is a file.

        Args:
            path: Path in repository ("" and "/" are the root)

        Returns:
            True only if the path exists and describes as a single "file" item
        """
        if is_root(path):
            return False
        description = self._probe(path)
        if description is None:
            return False
        return isinstance(description, FileDescription) and description.type == "file"

    def directory_exists(self, path: str) -> bool:
        """
        Check whether a path is a directory.

        Args:
            path: Path in repository ("" and "/" are the root)

        Returns:
            True if the path exists and describes as a listing
        """
        if is_root(path):
            return True
        description = self._probe(path)
        if description is None:
            return False
        return isinstance(description, DirectoryListing)

    def _probe(self, path: str) -> Description | None:
        """Describe the path, or return None when the probe reports it absent."""
        owner, repository, reference = (
            self.repository.owner,
            self.repository.repository,
            self.repository.reference,
        )
        try:
            if not self.contents.exists(owner, repository, path, reference):
                logger.debug("Probe: %s is absent", path)
                return None
            return self.contents.describe(owner, repository, path, reference)
        except httpx.HTTPError as e:
            raise UnableToCheckExistence(path, str(e)) from e
