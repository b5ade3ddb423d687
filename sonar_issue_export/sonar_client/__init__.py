"""SonarCloud API client package."""

from .client import (
    SonarCloudAPIError,
    SonarCloudClient,
    SonarCloudResponseError,
    build_search_params,
    issue_url,
)
from .models import IssueSearchPage, Paging, SonarIssue

__all__ = [
    "IssueSearchPage",
    "Paging",
    "SonarCloudAPIError",
    "SonarCloudClient",
    "SonarCloudResponseError",
    "SonarIssue",
    "build_search_params",
    "issue_url",
]
