"""Helpers for grouping, sorting and chunking issues."""

from collections.abc import Sequence

from ..sonar_client.models import SonarIssue

SEVERITIES = ["BLOCKER", "CRITICAL", "MAJOR", "MINOR", "INFO"]
UNKNOWN_SEVERITY = "UNKNOWN"


def sort_key(issue: SonarIssue) -> tuple[str, int, str]:
    """Order issues by file, then line (missing line counts as 0), then key."""
    return (issue.file_path, issue.line or 0, issue.key)


def sort_issues(issues: Sequence[SonarIssue]) -> list[SonarIssue]:
    """Return a new list of issues in (file, line, key) order."""
    return sorted(issues, key=sort_key)


def group_by_severity(
    issues: Sequence[SonarIssue], severities: Sequence[str] = SEVERITIES
) -> dict[str, list[SonarIssue]]:
    """Group issues by severity and sort each group.

    Every known severity gets a bucket, empty or not, in priority order.
    Severities outside the known list get their own bucket after the known
    ones, in order of first appearance. Issues without a severity go to the
    UNKNOWN bucket.

    Args:
        issues: Issues to group
        severities: Known severities in priority order

    Returns:
        Mapping of severity label to sorted issues
    """
    grouped: dict[str, list[SonarIssue]] = {severity: [] for severity in severities}
    for issue in issues:
        grouped.setdefault(issue.severity or UNKNOWN_SEVERITY, []).append(issue)

    return {severity: sort_issues(bucket) for severity, bucket in grouped.items()}


def chunk_issues(
    issues: Sequence[SonarIssue], chunk_size: int
) -> list[list[SonarIssue]]:
    """Split issues into consecutive chunks of at most chunk_size.

    Raises:
        ValueError: If chunk_size is not positive
    """
    if chunk_size < 1:
        raise ValueError("Chunk size must be a positive integer")

    return [
        list(issues[start : start + chunk_size])
        for start in range(0, len(issues), chunk_size)
    ]
