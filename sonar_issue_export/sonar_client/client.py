"""SonarCloud API client using httpx."""

import logging
import os
import time
from types import TracebackType
from typing import Any
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError

from .models import IssueSearchPage, SonarIssue

logger = logging.getLogger(__name__)

SONARCLOUD_URL = "https://sonarcloud.io"
SEARCH_PATH = "/api/issues/search"
DEFAULT_PAGE_SIZE = 500
THROTTLE_SECONDS = 0.1


class SonarCloudAPIError(Exception):
    """Raised when SonarCloud answers with a non-success status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"SonarCloud API error {status_code}: {body}")


class SonarCloudResponseError(Exception):
    """Raised when a search response does not have the expected shape."""


def build_search_params(
    organization: str,
    project_key: str,
    page: int,
    page_size: int = DEFAULT_PAGE_SIZE,
    branch: str | None = None,
) -> dict[str, str]:
    """Build query parameters for api/issues/search.

    ``componentKeys`` scopes the search to one project on both SonarQube and
    SonarCloud. Only unresolved issues are requested.

    Example:
        >>> build_search_params("myorg", "myorg_app", 2, 100)
        {'organization': 'myorg', 'componentKeys': 'myorg_app',
         'resolved': 'false', 'ps': '100', 'p': '2'}
    """
    params = {
        "organization": organization,
        "componentKeys": project_key,
        "resolved": "false",
        "ps": str(page_size),
        "p": str(page),
    }
    if branch:
        params["branch"] = branch
    return params


def issue_url(project_key: str, issue_key: str, base_url: str = SONARCLOUD_URL) -> str:
    """Deep link to a single issue inside the project issues view."""
    query = urlencode({"id": project_key, "issues": issue_key, "open": issue_key})
    return f"{base_url.rstrip('/')}/project/issues?{query}"


class SonarCloudClient:
    """SonarCloud API client with token authentication and pagination."""

    def __init__(
        self,
        token: str | None = None,
        base_url: str = SONARCLOUD_URL,
        http_client: httpx.Client | None = None,
        throttle_seconds: float = THROTTLE_SECONDS,
    ):
        """Initialize SonarCloud client with authentication.

        Args:
            token: SonarCloud user token. If None, reads from SONAR_TOKEN
                env var.
            base_url: SonarCloud server URL
            http_client: Preconfigured httpx client (mainly for tests)
            throttle_seconds: Pause after each full page
        """
        self.token = token or os.getenv("SONAR_TOKEN")
        if not self.token:
            raise ValueError(
                "SonarCloud token is required. Set SONAR_TOKEN environment variable."
            )

        self.base_url = base_url.rstrip("/")
        self.throttle_seconds = throttle_seconds
        self._owns_client = http_client is None
        self.http = http_client or httpx.Client(
            headers={"User-Agent": "sonar-issue-export/0.1.0"},
            timeout=30.0,
        )

    def __enter__(self) -> "SonarCloudClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            self.http.close()

    def search_issues_page(
        self,
        organization: str,
        project_key: str,
        page: int,
        page_size: int = DEFAULT_PAGE_SIZE,
        branch: str | None = None,
    ) -> IssueSearchPage:
        """Fetch a single page of unresolved issues.

        Raises:
            SonarCloudAPIError: On any non-success HTTP status
            SonarCloudResponseError: If the body is not a search response
        """
        params = build_search_params(organization, project_key, page, page_size, branch)
        logger.debug("Requesting %s page %d", SEARCH_PATH, page)

        # Token as basic-auth username with an empty password
        response = self.http.get(
            f"{self.base_url}{SEARCH_PATH}",
            params=params,
            auth=(self.token, ""),
        )
        if not response.is_success:
            raise SonarCloudAPIError(response.status_code, response.text)

        return self._parse_page(response)

    def _parse_page(self, response: httpx.Response) -> IssueSearchPage:
        """Validate a search response body."""
        try:
            data: Any = response.json()
        except ValueError as e:
            raise SonarCloudResponseError(f"Response is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise SonarCloudResponseError(
                f"Expected a JSON object, got {type(data).__name__}"
            )

        try:
            return IssueSearchPage.model_validate(data)
        except ValidationError as e:
            raise SonarCloudResponseError(f"Unexpected response shape: {e}") from e

    def fetch_all_issues(
        self,
        organization: str,
        project_key: str,
        page_size: int = DEFAULT_PAGE_SIZE,
        branch: str | None = None,
    ) -> list[SonarIssue]:
        """Fetch every unresolved issue of a project.

        Pages are requested one at a time until the pages fetched cover the
        declared total. Any failure aborts the whole fetch.

        Args:
            organization: SonarCloud organization key
            project_key: Project key
            page_size: Number of issues per page
            branch: Optional branch filter

        Returns:
            List of all SonarIssue records in server order
        """
        if page_size < 1:
            raise ValueError("Page size must be a positive integer")

        issues: list[SonarIssue] = []
        page = 1
        total: float = float("inf")

        while (page - 1) * page_size < total:
            result = self.search_issues_page(
                organization, project_key, page, page_size, branch
            )
            total = result.declared_total
            issues.extend(result.issues)
            logger.debug(
                "Page %d: %d issues (total %d)", page, len(result.issues), total
            )

            if not result.issues and page * page_size < total:
                # Server stopped returning data before reaching its total
                logger.warning(
                    "Page %d was empty, stopping at %d of %d issues",
                    page,
                    len(issues),
                    total,
                )
                break

            # Light throttle for very large projects
            if len(result.issues) == page_size:
                time.sleep(self.throttle_seconds)
            page += 1

        return issues
