"""GitHub API data models."""

from pydantic import BaseModel, Field


class ContentItem(BaseModel):
    """GitHub content item (file, directory, symlink or submodule)."""

    name: str = ""
    path: str
    sha: str | None = None
    size: int | None = None
    url: str | None = None
    html_url: str | None = None
    git_url: str | None = None
    download_url: str | None = None
    type: str | None = None
    content: str | None = None  # Base64 encoded content for files
    encoding: str | None = None  # Usually "base64" for files


class FileDescription(ContentItem):
    """Contents response for a single path (an object body)."""


class DirectoryListing(BaseModel):
    """Contents response for a directory (an array body)."""

    path: str
    items: list[ContentItem] = Field(default_factory=list)


Description = FileDescription | DirectoryListing


class TreeItem(BaseModel):
    """One node of a git tree."""

    path: str
    type: str | None = None  # "blob", "tree" or "commit"
    mode: str | None = None
    sha: str | None = None
    size: int | None = None  # Only present for blobs


class GitTree(BaseModel):
    """Git tree, flattened when fetched recursively."""

    sha: str | None = None
    tree: list[TreeItem] = Field(default_factory=list)
    truncated: bool = False


class CommitSignature(BaseModel):
    """Author or committer of a commit."""

    name: str | None = None
    email: str | None = None
    date: str | None = None


class CommitDetail(BaseModel):
    """Git-level commit data."""

    message: str = ""
    committer: CommitSignature | None = None


class CommitRecord(BaseModel):
    """Commit as returned by the commits listing."""

    sha: str | None = None
    commit: CommitDetail | None = None

    @property
    def committer_date(self) -> str | None:
        """Committer date string, if the record carries one."""
        if self.commit is None or self.commit.committer is None:
            return None
        return self.commit.committer.date
