"""Shallow and recursive directory listings."""

import logging
from typing import Iterable, Iterator

import httpx

from ghrest.models import ContentItem, DirectoryListing, TreeItem

from .errors import UnableToListContents
from .metadata import detect_mime_type
from .models import DirectoryEntry, Entry, FileEntry, RepositoryReference
from .services import ContentsService, TreeService

logger = logging.getLogger(__name__)

FILE_TYPES = ("file", "blob")


def classify(item: ContentItem | TreeItem) -> Entry:
    """Map a raw item to a file or directory entry by its type."""
    if item.type in FILE_TYPES:
        return FileEntry(path=item.path, size=item.size, mime_type=detect_mime_type(item.path))
    return DirectoryEntry(path=item.path)


def is_under(item_path: str, prefix: str) -> bool:
    """Whether a repository-relative path lies below ``prefix`` ("" is the root)."""
    return not prefix or item_path.startswith(prefix + "/")


class ListingEngine:
    """Enumerates directory children, or the whole subtree."""

    DEFAULT_TREE_REFERENCE = "main"

    def __init__(
        self,
        repository: RepositoryReference,
        contents: ContentsService,
        trees: TreeService,
        default_tree_reference: str | None = None,
    ):
        self.repository = repository
        self.contents = contents
        self.trees = trees
        self.default_tree_reference = default_tree_reference or self.DEFAULT_TREE_REFERENCE

    def list_contents(self, path: str, deep: bool = False) -> Iterator[Entry]:
        """
        List entries under a path.

        Args:
            path: Directory path ("" or "/" for the root)
            deep: List the whole subtree through one recursive tree call

        Yields:
            FileEntry or DirectoryEntry; listings never resolve timestamps
        """
        for item in self._get_items(path, deep):
            yield classify(item)

    def _get_items(self, path: str, deep: bool) -> Iterable[ContentItem | TreeItem]:
        owner, repository = self.repository.owner, self.repository.repository
        try:
            if not deep:
                description = self.contents.describe(
                    owner, repository, path, self.repository.reference
                )
                if isinstance(description, DirectoryListing):
                    logger.debug("Listing %s: %d items", path, len(description.items))
                    return description.items
                logger.debug("Listing %s: single item", path)
                return [description]

            reference = self.repository.reference or self.default_tree_reference
            tree = self.trees.describe_recursive(owner, repository, reference, True)
        except httpx.HTTPError as e:
            raise UnableToListContents(path, str(e)) from e

        if tree.truncated:
            logger.warning(
                "Tree for %s/%s@%s is truncated, listing is incomplete", owner, repository, reference
            )
        prefix = path.strip("/")
        return [item for item in tree.tree if is_under(item.path, prefix)]
