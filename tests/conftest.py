"""Shared test fixtures for repofs."""

import base64

import pytest
from unittest.mock import MagicMock

from ghrest.models import CommitRecord, ContentItem, DirectoryListing, FileDescription
from repofs import GitHubAdapter, RepositoryReference


def encode(data: bytes) -> str:
    """Base64 the way the contents API does it (wrapped lines)."""
    return base64.encodebytes(data).decode("ascii")


def file_description(path: str = "docs/readme.txt", content: bytes = b"lorem ipsum", **extra) -> FileDescription:
    fields = {
        "name": path.rsplit("/", 1)[-1],
        "path": path,
        "type": "file",
        "size": len(content),
        "content": encode(content),
        "encoding": "base64",
    }
    fields.update(extra)
    return FileDescription(**fields)


def directory_listing(path: str, *items: ContentItem) -> DirectoryListing:
    return DirectoryListing(path=path, items=list(items))


def commit(date: str | None) -> CommitRecord:
    return CommitRecord(sha="c0ffee", commit={"message": "update", "committer": {"date": date}})


@pytest.fixture
def repository():
    return RepositoryReference(owner="acme", repository="widget-api", reference="feature-x")


@pytest.fixture
def contents():
    return MagicMock(name="contents")


@pytest.fixture
def trees():
    return MagicMock(name="trees")


@pytest.fixture
def commits():
    service = MagicMock(name="commits")
    service.list.return_value = []
    return service


@pytest.fixture
def adapter(repository, contents, trees, commits):
    return GitHubAdapter(repository, contents=contents, trees=trees, commits=commits)
