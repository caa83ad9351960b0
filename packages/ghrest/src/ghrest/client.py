"""GitHub API client."""

import logging
import os
import subprocess
from typing import Any
from urllib.parse import quote

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
    before_sleep_log,
)

from .models import CommitRecord, Description, DirectoryListing, FileDescription, GitTree
from .services import CommitsApi, ContentsApi, TreesApi

logger = logging.getLogger(__name__)

# Retry configuration
DEFAULT_MAX_RETRIES = 3
DEFAULT_MIN_WAIT = 1  # seconds
DEFAULT_MAX_WAIT = 10  # seconds


class ServerError(httpx.HTTPStatusError):
    """5xx response from the API."""


# Retryable exceptions
RETRYABLE_EXCEPTIONS = (
    httpx.ConnectError,
    httpx.ConnectTimeout,
    httpx.ReadTimeout,
    httpx.WriteTimeout,
    httpx.PoolTimeout,
    httpx.NetworkError,
    ServerError,
)


def get_token_from_gh_cli() -> str | None:
    """
    Get GitHub token from gh cli.

    Returns:
        Token string or None if gh cli not available/authenticated
    """
    try:
        result = subprocess.run(
            ["gh", "auth", "token"],
            capture_output=True,
            text=True,
            timeout=5,
        )
        if result.returncode == 0 and result.stdout.strip():
            logger.info("Using token from gh cli")
            return result.stdout.strip()
    except (subprocess.TimeoutExpired, FileNotFoundError) as e:
        logger.debug("gh cli not available: %s", e)
    return None


def get_token(token: str | None = None, use_gh_cli: bool = False) -> str | None:
    """
    Get GitHub token from various sources.

    Priority:
    1. Explicitly provided token
    2. Environment variable GH_TOKEN / GITHUB_TOKEN
    3. gh cli (`gh auth token`) - only if use_gh_cli=True

    Args:
        token: Explicitly provided token
        use_gh_cli: Whether to use gh cli credentials (requires user consent)

    Returns:
        GitHub token or None
    """
    if token:
        logger.debug("Using explicitly provided token")
        return token

    env_token = os.environ.get("GH_TOKEN") or os.environ.get("GITHUB_TOKEN")
    if env_token:
        logger.info("Using token from environment variable")
        return env_token

    if use_gh_cli:
        return get_token_from_gh_cli()

    return None


def create_retry_decorator(max_retries: int = DEFAULT_MAX_RETRIES):
    """Create a retry decorator with specified max retries."""
    return retry(
        retry=retry_if_exception_type(RETRYABLE_EXCEPTIONS),
        stop=stop_after_attempt(max_retries),
        wait=wait_exponential(multiplier=1, min=DEFAULT_MIN_WAIT, max=DEFAULT_MAX_WAIT),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )


def _contents_path(path: str) -> str:
    return path.strip("/")


def _url_segment(value: str) -> str:
    """Percent-encode a repository path or ref for use inside the URL path."""
    return quote(_contents_path(value), safe="/")


class GitHubClient:
    """GitHub REST API client with retry support."""

    BASE_URL = "https://api.github.com"

    def __init__(
        self,
        token: str | None = None,
        base_url: str | None = None,
        timeout: float = 30.0,
        use_gh_cli: bool = False,
        max_retries: int = DEFAULT_MAX_RETRIES,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize GitHub client.

        Args:
            token: GitHub personal access token (optional)
            base_url: Custom base URL (defaults to GitHub API)
            timeout: Request timeout in seconds
            use_gh_cli: Use gh cli credentials (requires user consent)
            max_retries: Maximum number of attempts per request (default: 3)
            transport: Custom httpx transport (mainly for tests)
        """
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self.transport = transport
        self.headers = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "repofs-github-client",
        }

        resolved_token = get_token(token, use_gh_cli=use_gh_cli)

        if resolved_token:
            self.headers["Authorization"] = f"token {resolved_token}"
            logger.debug("GitHub client initialized with token")
        else:
            logger.warning("GitHub client initialized without token (rate limited)")
        logger.info("GitHub client ready, base_url=%s, max_retries=%d", self.base_url, max_retries)

    @property
    def contents(self) -> ContentsApi:
        """Path-addressed repository contents."""
        return ContentsApi(self)

    @property
    def trees(self) -> TreesApi:
        """Git tree objects."""
        return TreesApi(self)

    @property
    def commits(self) -> CommitsApi:
        """Commit history."""
        return CommitsApi(self)

    def _request(
        self, method: str, endpoint: str, **kwargs: Any
    ) -> httpx.Response:
        """Make HTTP request to GitHub API with retry."""
        url = f"{self.base_url}{endpoint}"

        @create_retry_decorator(self.max_retries)
        def do_request() -> httpx.Response:
            logger.debug("Request: %s %s", method, url)
            with httpx.Client(
                timeout=self.timeout, headers=self.headers, transport=self.transport
            ) as client:
                response = client.request(method, url, **kwargs)
                logger.debug(
                    "Response: %s %s (status=%d)",
                    method,
                    endpoint,
                    response.status_code,
                )
                if response.status_code >= 500:
                    logger.warning("Server error %d, will retry", response.status_code)
                    raise ServerError(
                        f"Server error {response.status_code}",
                        request=response.request,
                        response=response,
                    )
                response.raise_for_status()
                return response

        return do_request()

    def content_exists(
        self, owner: str, repo: str, path: str, ref: str | None = None
    ) -> bool:
        """
        Check whether a path exists in the repository.

        Args:
            owner: Repository owner
            repo: Repository name
            path: Path in repository
            ref: Branch/tag/commit (None for the default branch)

        Returns:
            True if the contents endpoint answers, False on 404
        """
        endpoint = f"/repos/{owner}/{repo}/contents/{_url_segment(path)}"
        params = {"ref": ref} if ref else {}
        logger.info("Checking existence: %s/%s path=%s ref=%s", owner, repo, path, ref)
        try:
            self._request("GET", endpoint, params=params)
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                logger.debug("Path not found: %s", path)
                return False
            raise
        return True

    def get_contents(
        self, owner: str, repo: str, path: str = "", ref: str | None = None
    ) -> Description:
        """
        Get repository contents.

        Args:
            owner: Repository owner
            repo: Repository name
            path: Path in repository (empty for root)
            ref: Branch/tag/commit (None for the default branch)

        Returns:
            FileDescription for a single path, DirectoryListing for a directory
        """
        endpoint = f"/repos/{owner}/{repo}/contents/{_url_segment(path)}"
        params = {"ref": ref} if ref else {}
        logger.info("Fetching contents: %s/%s path=%s ref=%s", owner, repo, path, ref)
        response = self._request("GET", endpoint, params=params)
        data = response.json()

        if isinstance(data, dict):
            logger.debug("Single item response: %s (type=%s)", data.get("path"), data.get("type"))
            return FileDescription(**data)

        logger.debug("Directory listing: %d items", len(data))
        return DirectoryListing(path=_contents_path(path), items=data)

    def get_tree(
        self, owner: str, repo: str, tree_sha: str, recursive: bool = False
    ) -> GitTree:
        """
        Get a git tree.

        Args:
            owner: Repository owner
            repo: Repository name
            tree_sha: Tree SHA, or a branch/tag/commit name
            recursive: Whether to flatten all subtrees into the response

        Returns:
            GitTree with its items
        """
        endpoint = f"/repos/{owner}/{repo}/git/trees/{_url_segment(tree_sha)}"
        params = {"recursive": "1"} if recursive else {}
        logger.info(
            "Fetching tree: %s/%s sha=%s recursive=%s", owner, repo, tree_sha, recursive
        )
        response = self._request("GET", endpoint, params=params)
        tree = GitTree(**response.json())
        logger.debug("Tree fetched: %s (%d items)", tree_sha, len(tree.tree))
        return tree

    def list_commits(
        self,
        owner: str,
        repo: str,
        path: str | None = None,
        sha: str | None = None,
        page: int = 1,
        per_page: int = 30,
    ) -> list[CommitRecord]:
        """
        List commits, newest first.

        Args:
            owner: Repository owner
            repo: Repository name
            path: Only commits touching this path
            sha: Branch/tag/commit to start from (None for the default branch)
            page: Page number (1-based)
            per_page: Results per page

        Returns:
            List of CommitRecord
        """
        endpoint = f"/repos/{owner}/{repo}/commits"
        params: dict[str, Any] = {"page": page, "per_page": per_page}
        if path:
            params["path"] = _contents_path(path)
        if sha:
            params["sha"] = sha
        logger.info("Fetching commits: %s/%s path=%s sha=%s", owner, repo, path, sha)
        response = self._request("GET", endpoint, params=params)
        commits = [CommitRecord(**item) for item in response.json()]
        logger.debug("Commits fetched: %d", len(commits))
        return commits
