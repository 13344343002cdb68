"""GitHub API client for reading commits and posting comments."""

import time
from collections.abc import Callable
from typing import Any, TypeVar
from urllib.parse import urljoin

import requests
from pydantic import ValidationError

from github_commit_checker.config import Settings
from github_commit_checker.models import Comment, Commit, CommitDetail
from github_commit_checker.utils import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT")


def _header_int(response: requests.Response, name: str) -> int | None:
    """Read an integer header, ignoring missing or garbled values."""
    value = response.headers.get(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring non-integer %s header: %r", name, value)
        return None


class GitHubAPIError(Exception):
    """GitHub API call failed (network error, error status or bad JSON)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GitHubAPIClient:
    """GitHub API client with rate limiting and error handling."""

    def __init__(self, settings: Settings) -> None:
        """Initialize GitHub API client.

        Args:
        ----
            settings: Application settings carrying credentials and endpoints

        """
        self.settings = settings
        self.base_url = settings.github_api_base_url.rstrip("/") + "/"
        self.timeout = settings.github_timeout
        self.session = requests.Session()

        self.session.headers.update({
            "Accept": "application/vnd.github.v3+json",
            "Content-Type": "application/json",
            "User-Agent": settings.user_agent,
        })

        # Set up authentication
        if settings.github_token:
            self.session.headers["Authorization"] = f"token {settings.github_token}"
        elif settings.github_username and settings.github_password:
            self.session.auth = (settings.github_username, settings.github_password)
        else:
            logger.warning("No GitHub credentials provided, using unauthenticated requests")

        # Rate limiting
        self.rate_limit_remaining = None
        self.rate_limit_reset = None
        self.last_request_time = 0.0

        # Request delay to avoid hitting rate limits
        self.request_delay = settings.github_request_delay

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def _check_rate_limit(self) -> None:
        """Check rate limit status and wait if necessary."""
        if self.rate_limit_remaining is not None and self.rate_limit_remaining <= 0 and self.rate_limit_reset:
            wait_time = self.rate_limit_reset - time.time()
            if wait_time > 0:
                logger.info("Rate limit exceeded, waiting %.1f seconds", wait_time)
                time.sleep(wait_time + 1)  # Add 1 second buffer

        # Enforce minimum delay between requests
        time_since_last_request = time.time() - self.last_request_time
        if time_since_last_request < self.request_delay:
            time.sleep(self.request_delay - time_since_last_request)

        self.last_request_time = time.time()

    def _make_request(self, method: str, url: str, **kwargs: Any) -> requests.Response:  # noqa: ANN401
        """Make HTTP request with rate limiting and error handling.

        Args:
        ----
            method: HTTP method (GET, POST, etc.)
            url: Request URL
            **kwargs: Additional request parameters

        Returns:
        -------
            requests.Response: Response object

        Raises:
        ------
            GitHubAPIError: If request fails

        """
        self._check_rate_limit()

        # Ensure URL is complete
        if not url.startswith(("http://", "https://")):
            url = urljoin(self.base_url, url.lstrip("/"))

        logger.debug("Making %s request to %s", method, url)
        kwargs.setdefault("timeout", self.timeout)

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            logger.exception("Request to %s failed", url)
            msg = f"{method} {url} failed: {e!s}"
            raise GitHubAPIError(msg) from e

        # Update rate limit info
        remaining = _header_int(response, "X-RateLimit-Remaining")
        if remaining is not None:
            self.rate_limit_remaining = remaining
        reset = _header_int(response, "X-RateLimit-Reset")
        if reset is not None:
            self.rate_limit_reset = reset

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            logger.exception("%s %s returned %d", method, url, response.status_code)
            msg = f"{method} {url} returned {response.status_code}"
            raise GitHubAPIError(msg, status_code=response.status_code) from e

        return response

    def _request_json(self, method: str, url: str, **kwargs: Any) -> Any:  # noqa: ANN401
        """Make HTTP request and decode the JSON body."""
        response = self._make_request(method, url, **kwargs)
        try:
            return response.json()
        except requests.JSONDecodeError as e:
            logger.exception("Malformed JSON returned by %s %s", method, url)
            msg = f"{method} {url} returned malformed JSON"
            raise GitHubAPIError(msg, status_code=response.status_code) from e

    def _to_model(self, url: str, factory: Callable[[Any], ModelT], data: Any) -> ModelT:  # noqa: ANN401
        """Build a model from decoded JSON, treating unexpected shapes as API errors."""
        try:
            return factory(data)
        except (KeyError, TypeError, AttributeError, ValidationError) as e:
            logger.exception("Unexpected data returned by GET %s", url)
            msg = f"GET {url} returned unexpected data: {e!s}"
            raise GitHubAPIError(msg) from e

    def _get_paginated_results(self, url: str, params: dict | None = None) -> list[dict]:
        """Get all results from paginated endpoint.

        Args:
        ----
            url: API endpoint URL
            params: Query parameters

        Returns:
        -------
            List of all results

        """
        all_results = []
        page = 1
        per_page = 100  # Maximum allowed by GitHub

        while True:
            request_params = params.copy() if params else {}
            request_params.update({
                "page": page,
                "per_page": per_page,
            })

            results = self._request_json("GET", url, params=request_params)
            if not isinstance(results, list):
                msg = f"GET {url} did not return a list"
                raise GitHubAPIError(msg)

            if not results:
                break

            all_results.extend(results)

            # Check if we got fewer results than requested (last page)
            if len(results) < per_page:
                break

            page += 1

        return all_results

    def list_pull_commits(self, repo: str, pr_number: int) -> list[Commit]:
        """Get commits of a pull request.

        Args:
        ----
            repo: Repository full name (owner/name)
            pr_number: Pull request number

        Returns:
        -------
            Commits in pull request order

        """
        url = f"/repos/{repo}/pulls/{pr_number}/commits"

        return [self._to_model(url, Commit.from_github_data, item) for item in self._get_paginated_results(url)]

    def get_commit_detail(self, repo: str, sha: str) -> CommitDetail:
        """Get a commit with its file patches.

        Args:
        ----
            repo: Repository full name (owner/name)
            sha: Commit SHA

        Returns:
        -------
            Commit detail with per-file patches

        """
        url = f"/repos/{repo}/commits/{sha}"

        return self._to_model(url, CommitDetail.from_github_data, self._request_json("GET", url))

    def list_commit_comments(self, repo: str, sha: str) -> list[Comment]:
        """Get comments on a commit."""
        url = f"/repos/{repo}/commits/{sha}/comments"

        return [self._to_model(url, Comment.from_github_data, item) for item in self._get_paginated_results(url)]

    def list_pull_comments(self, repo: str, pr_number: int) -> list[Comment]:
        """Get issue comments on a pull request (treated as issue)."""
        url = f"/repos/{repo}/issues/{pr_number}/comments"

        return [self._to_model(url, Comment.from_github_data, item) for item in self._get_paginated_results(url)]

    def post_commit_comment(self, repo: str, sha: str, body: str) -> dict:
        """Post a comment on a commit.

        Args:
        ----
            repo: Repository full name (owner/name)
            sha: Commit SHA
            body: Comment body in Markdown

        Returns:
        -------
            Created comment dictionary

        """
        url = f"/repos/{repo}/commits/{sha}/comments"

        return self._request_json("POST", url, json={"body": body})

    def post_pull_comment(self, repo: str, pr_number: int, body: str) -> dict:
        """Post a comment on a pull request.

        Args:
        ----
            repo: Repository full name (owner/name)
            pr_number: Pull request number
            body: Comment body in Markdown

        Returns:
        -------
            Created comment dictionary

        """
        url = f"/repos/{repo}/issues/{pr_number}/comments"

        return self._request_json("POST", url, json={"body": body})
