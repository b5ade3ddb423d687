"""Markdown rendering of SonarCloud issues."""

import re
from collections.abc import Sequence
from typing import Any

from ..sonar_client.client import SONARCLOUD_URL, issue_url
from ..sonar_client.models import SonarIssue
from ..utils.date_parser import to_calendar_day

EMPTY_PLACEHOLDER = "_No unresolved issues._\n"

COLUMNS = [
    "Key",
    "Type",
    "Rule",
    "Severity",
    "Status",
    "File",
    "Line",
    "Message",
    "Created",
]

_NEWLINE = re.compile(r"\r?\n")


def md_escape(value: Any) -> str:
    """Escape a value for use inside a Markdown table cell.

    Pipes are escaped and newlines become ``<br>`` so a cell never breaks
    the row.
    """
    if value is None:
        return ""
    return _NEWLINE.sub("<br>", str(value).replace("|", "\\|"))


def render_header(
    severity: str,
    organization: str,
    project_key: str,
    branch: str | None = None,
    part: int | None = None,
    parts: int | None = None,
) -> str:
    """Render the title line of an output file.

    The part marker is only added when the bucket spans several files.
    """
    header = f"# {severity} issues for {organization}/{project_key}"
    if branch:
        header += f" on branch {branch}"
    if part is not None and parts is not None and parts > 1:
        header += f" (Part {part}/{parts})"
    return header + "\n"


def render_row(
    issue: SonarIssue, project_key: str, base_url: str = SONARCLOUD_URL
) -> str:
    """Render one issue as a table row."""
    key_text = md_escape(issue.key).replace("[", "\\[").replace("]", "\\]")
    key_link = f"[{key_text}]({issue_url(project_key, issue.key, base_url)})"
    cells = [
        key_link,
        md_escape(issue.type),
        md_escape(issue.rule),
        md_escape(issue.severity),
        md_escape(issue.status),
        md_escape(issue.file_path),
        md_escape(issue.line),
        md_escape(issue.message),
        md_escape(to_calendar_day(issue.creation_date)),
    ]
    return "| " + " | ".join(cells) + " |"


def render_table(
    issues: Sequence[SonarIssue], project_key: str, base_url: str = SONARCLOUD_URL
) -> str:
    """Render issues as a Markdown table.

    An empty sequence renders a placeholder sentence instead of an empty
    table.
    """
    if not issues:
        return EMPTY_PLACEHOLDER

    header = "| " + " | ".join(COLUMNS) + " |\n"
    divider = "| " + " | ".join("-" * len(column) for column in COLUMNS) + " |\n"
    rows = "\n".join(render_row(issue, project_key, base_url) for issue in issues)
    return header + divider + rows + "\n"
