"""Test configuration and fixtures."""

from collections.abc import Callable
from typing import Any

import pytest

from sonar_issue_export.sonar_client.models import SonarIssue

IssueFactory = Callable[..., SonarIssue]


def issue_payload(
    key: str,
    path: str = "src/index.ts",
    line: int | None = 1,
    severity: str = "MAJOR",
    message: str = "Remove this unused variable.",
    **overrides: Any,
) -> dict[str, Any]:
    """Build an issue dict shaped like the api/issues/search response."""
    payload: dict[str, Any] = {
        "key": key,
        "component": f"useago_ago-chat:{path}",
        "project": "useago_ago-chat",
        "type": "CODE_SMELL",
        "rule": "typescript:S1481",
        "severity": severity,
        "status": "OPEN",
        "message": message,
        "creationDate": "2024-03-05T14:22:10+0000",
        "tags": ["unused"],
    }
    if line is not None:
        payload["line"] = line
    payload.update(overrides)
    return payload


@pytest.fixture
def make_issue() -> IssueFactory:
    """Factory for SonarIssue records."""

    def _make(key: str, **kwargs: Any) -> SonarIssue:
        return SonarIssue.model_validate(issue_payload(key, **kwargs))

    return _make


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove export related variables from the environment."""
    monkeypatch.delenv("SONAR_TOKEN", raising=False)
    monkeypatch.delenv("BRANCH", raising=False)
    return monkeypatch


@pytest.fixture
def make_payload() -> Callable[..., dict[str, Any]]:
    """Factory for raw issue dicts as returned by the search API."""
    return issue_payload
