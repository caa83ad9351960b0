"""GitHub API client utilities."""

from .client import GitHubClient, ServerError, get_token
from .models import (
    CommitRecord,
    ContentItem,
    Description,
    DirectoryListing,
    FileDescription,
    GitTree,
    TreeItem,
)
from .services import CommitsApi, ContentsApi, TreesApi

__all__ = [
    "GitHubClient",
    "ServerError",
    "get_token",
    "ContentItem",
    "FileDescription",
    "DirectoryListing",
    "Description",
    "TreeItem",
    "GitTree",
    "CommitRecord",
    "ContentsApi",
    "TreesApi",
    "CommitsApi",
]
