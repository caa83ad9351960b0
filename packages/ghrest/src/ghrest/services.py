"""Narrow API views over GitHubClient, one per capability."""

from typing import TYPE_CHECKING

from .models import CommitRecord, Description, GitTree

if TYPE_CHECKING:
    from .client import GitHubClient


class ContentsApi:
    """Repository contents: existence probe and describe."""

    def __init__(self, client: "GitHubClient"):
        self.client = client

    def exists(self, owner: str, repository: str, path: str, reference: str | None = None) -> bool:
        """Whether the path exists at the reference."""
        return self.client.content_exists(owner, repository, path, reference)

    def describe(
        self, owner: str, repository: str, path: str, reference: str | None = None
    ) -> Description:
        """Single-item description or directory listing for the path."""
        return self.client.get_contents(owner, repository, path, reference)


class TreesApi:
    """Git trees."""

    def __init__(self, client: "GitHubClient"):
        self.client = client

    def describe_recursive(
        self, owner: str, repository: str, reference: str, recursive: bool = True
    ) -> GitTree:
        """Git tree for the reference, flattened when recursive."""
        return self.client.get_tree(owner, repository, reference, recursive=recursive)


class CommitsApi:
    """Commit history."""

    def __init__(self, client: "GitHubClient"):
        self.client = client

    def list(
        self,
        owner: str,
        repository: str,
        *,
        page: int = 1,
        path: str | None = None,
        per_page: int = 30,
        reference: str | None = None,
    ) -> list[CommitRecord]:
        """Commits touching the path, newest first."""
        return self.client.list_commits(
            owner, repository, path=path, sha=reference, page=page, per_page=per_page
        )
