"""Read-only filesystem over a GitHub repository."""

import io
import logging
from typing import Any, Iterator

from ghrest import GitHubClient

from .existence import ExistenceChecker
from .filesystem import ReadOnlyFilesystem
from .listing import ListingEngine
from .metadata import MetadataResolver
from .models import Entry, FileEntry, RepositoryReference
from .reader import ContentReader
from .services import CommitsService, ContentsService, TreeService
from .timestamps import TimestampResolver

logger = logging.getLogger(__name__)


class GitHubAdapter(ReadOnlyFilesystem):
    """Filesystem view of one repository at one revision.

    Nothing is cached: every call goes to the remote services.
    """

    DEFAULT_TREE_REFERENCE = ListingEngine.DEFAULT_TREE_REFERENCE

    def __init__(
        self,
        repository: RepositoryReference,
        contents: ContentsService,
        trees: TreeService,
        commits: CommitsService,
        default_tree_reference: str | None = None,
    ):
        """
        Initialize adapter.

        Args:
            repository: Owner, name and optional revision to expose
            contents: Existence probe and describe calls
            trees: Recursive tree listing
            commits: Commit history, for timestamps
            default_tree_reference: Revision for deep listings when the
                repository reference has none (default: "main")
        """
        self.repository = repository
        self.timestamps = TimestampResolver(repository, commits)
        self.existence = ExistenceChecker(repository, contents)
        self.reader = ContentReader(repository, contents)
        self.metadata = MetadataResolver(repository, contents, self.timestamps)
        self.listing = ListingEngine(
            repository,
            contents,
            trees,
            default_tree_reference=default_tree_reference or self.DEFAULT_TREE_REFERENCE,
        )
        logger.debug("Adapter ready for %s", repository)

    def file_exists(self, path: str) -> bool:
        return self.existence.file_exists(path)

    def directory_exists(self, path: str) -> bool:
        return self.existence.directory_exists(path)

    def read(self, path: str) -> bytes:
        return self.reader.read(path)

    def read_stream(self, path: str) -> io.BytesIO:
        return self.reader.read_stream(path)

    def visibility(self, path: str) -> FileEntry:
        return self.metadata.resolve(path)

    def mime_type(self, path: str) -> FileEntry:
        return self.metadata.resolve(path)

    def last_modified(self, path: str) -> FileEntry:
        return self.metadata.resolve(path)

    def file_size(self, path: str) -> FileEntry:
        return self.metadata.resolve(path)

    def list_contents(self, path: str, deep: bool = False) -> Iterator[Entry]:
        return self.listing.list_contents(path, deep)


def create_adapter(
    owner: str,
    repository: str,
    reference: str | None = None,
    client: GitHubClient | None = None,
    **client_options: Any,
) -> GitHubAdapter:
    """
    Create an adapter backed by the GitHub REST API.

    Args:
        owner: Repository owner
        repository: Repository name
        reference: Branch/tag/commit (None for the default branch)
        client: Existing client to use
        client_options: GitHubClient arguments, when no client is given

    Returns:
        GitHubAdapter wired to the client's contents, trees and commits APIs
    """
    if client is None:
        client = GitHubClient(**client_options)
    elif client_options:
        raise ValueError("client_options cannot be combined with an existing client")
    return GitHubAdapter(
        RepositoryReference(owner=owner, repository=repository, reference=reference),
        contents=client.contents,
        trees=client.trees,
        commits=client.commits,
    )
