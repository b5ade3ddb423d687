"""Configuration for the SonarCloud export."""

import os
from typing import Optional

from .report.writer import DEFAULT_CHUNK_SIZE
from .sonar_client.client import DEFAULT_PAGE_SIZE, SONARCLOUD_URL, THROTTLE_SECONDS

ORGANIZATION = "useago"
PROJECT_KEY = "useago_ago-chat"


class ExportConfig:
    """Configuration class for the SonarCloud issue export."""

    def __init__(
        self,
        token: Optional[str] = None,
        branch: Optional[str] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        """Initialize export configuration from arguments and environment.

        Explicit arguments take precedence over SONAR_TOKEN and BRANCH.
        Organization and project are fixed.
        """
        self.sonar_token: Optional[str] = token or os.getenv("SONAR_TOKEN")
        self.branch: Optional[str] = branch or os.getenv("BRANCH") or None
        self.organization: str = ORGANIZATION
        self.project_key: str = PROJECT_KEY
        self.base_url: str = SONARCLOUD_URL
        self.page_size = page_size
        self.chunk_size = chunk_size
        self.throttle_seconds = THROTTLE_SECONDS

    def validate(self) -> None:
        """Validate configuration and raise error if invalid."""
        if not self.sonar_token:
            raise ValueError("Missing SONAR_TOKEN env var.")
        if self.page_size < 1:
            raise ValueError("Page size must be a positive integer")
        if self.chunk_size < 1:
            raise ValueError("Chunk size must be a positive integer")

    def describe_target(self) -> str:
        """Human readable target, e.g. 'org/project on branch main'."""
        target = f"{self.organization}/{self.project_key}"
        if self.branch:
            target += f" on branch {self.branch}"
        return target
