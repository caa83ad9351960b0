"""Remote capabilities the adapter depends on.

Each protocol is satisfied by the matching ``ghrest`` API view
(``client.contents``, ``client.trees``, ``client.commits``) and can be
replaced independently by a fake in tests.
"""

from typing import Protocol

from ghrest.models import CommitRecord, Description, GitTree


class ContentsService(Protocol):
    def exists(self, owner: str, repository: str, path: str, reference: str | None = None) -> bool:
        ...

    def describe(
        self, owner: str, repository: str, path: str, reference: str | None = None
    ) -> Description:
        ...


class TreeService(Protocol):
    def describe_recursive(
        self, owner: str, repository: str, reference: str, recursive: bool = True
    ) -> GitTree:
        ...


class CommitsService(Protocol):
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
        ...
