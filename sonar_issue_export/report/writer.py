"""Writer for Markdown issue reports."""

import re
from collections.abc import Mapping, Sequence
from pathlib import Path

from rich.console import Console

from ..sonar_client.client import SONARCLOUD_URL
from ..sonar_client.models import SonarIssue
from .grouping import chunk_issues
from .markdown import render_header, render_table

console = Console()

DEFAULT_CHUNK_SIZE = 20

SAFE_LABEL = re.compile(r"[A-Za-z0-9_-]+")


class ReportWriter:
    """Writes severity buckets as chunked Markdown files."""

    def __init__(
        self,
        organization: str,
        project_key: str,
        branch: str | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        output_dir: Path | None = None,
        base_url: str = SONARCLOUD_URL,
    ):
        """Initialize report writer.

        Args:
            organization: SonarCloud organization key
            project_key: Project key, used in headers and issue links
            branch: Branch filter shown in file headers
            chunk_size: Maximum number of issues per file
            output_dir: Directory for output files (defaults to the current
                working directory)
            base_url: SonarCloud server URL for issue links
        """
        if chunk_size < 1:
            raise ValueError("Chunk size must be a positive integer")

        self.organization = organization
        self.project_key = project_key
        self.branch = branch
        self.chunk_size = chunk_size
        self.output_dir = output_dir if output_dir is not None else Path.cwd()
        self.base_url = base_url

    def _check_label(self, severity: str) -> None:
        """Reject labels that are not a plain file name stem.

        Severities come from the remote API and become file names.
        """
        if not SAFE_LABEL.fullmatch(severity):
            raise ValueError(f"Refusing to write files for severity {severity!r}")

    def _generate_filename(self, severity: str, part: int | None = None) -> str:
        """Generate filename for a chunk, e.g. MAJOR2.md or INFO.md."""
        self._check_label(severity)
        if part is None:
            return f"{severity}.md"
        return f"{severity}{part}.md"

    def _write_file(self, filename: str, content: str, count: int) -> Path:
        file_path = self.output_dir / filename
        file_path.write_text(content, encoding="utf-8")
        console.print(f"Wrote {filename} ({count} issues)")
        return file_path

    def write_bucket(self, severity: str, issues: Sequence[SonarIssue]) -> list[Path]:
        """Write one severity bucket.

        An empty bucket still produces a single file holding the
        placeholder. Otherwise one numbered file is written per chunk.

        Args:
            severity: Severity label
            issues: Issues of this severity, already sorted

        Returns:
            Paths of the written files in chunk order
        """
        if not issues:
            content = (
                render_header(
                    severity, self.organization, self.project_key, self.branch
                )
                + "\n"
                + render_table([], self.project_key, self.base_url)
            )
            return [self._write_file(self._generate_filename(severity), content, 0)]

        chunks = chunk_issues(issues, self.chunk_size)
        written = []
        for index, chunk in enumerate(chunks, start=1):
            header = render_header(
                severity,
                self.organization,
                self.project_key,
                self.branch,
                part=index,
                parts=len(chunks),
            )
            table = render_table(chunk, self.project_key, self.base_url)
            content = header + "\n" + table
            written.append(
                self._write_file(
                    self._generate_filename(severity, index), content, len(chunk)
                )
            )

        return written

    def write_all(self, buckets: Mapping[str, Sequence[SonarIssue]]) -> list[Path]:
        """Write every bucket in mapping order.

        All labels are checked before the first file is written.

        Returns:
            Paths of all written files

        Raises:
            ValueError: If a severity label is not a plain file name stem
        """
        for severity in buckets:
            self._check_label(severity)

        written = []
        for severity, issues in buckets.items():
            written.extend(self.write_bucket(severity, issues))
        return written
