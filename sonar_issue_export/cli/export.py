"""CLI command for exporting SonarCloud issues as Markdown files."""

import logging

import httpx
import typer
from rich.console import Console
from rich.markup import escape

from ..config import ExportConfig
from ..report.grouping import SEVERITIES, group_by_severity
from ..report.writer import ReportWriter
from ..sonar_client.client import (
    SonarCloudAPIError,
    SonarCloudClient,
    SonarCloudResponseError,
)
from .options import (
    BRANCH_OPTION,
    CHUNK_SIZE_OPTION,
    PAGE_SIZE_OPTION,
    TOKEN_OPTION,
    VERBOSE_OPTION,
)

console = Console()

app = typer.Typer(
    help="Export unresolved SonarCloud issues as Markdown files",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def configure_logging(verbose: bool) -> None:
    """Route diagnostic logging to stderr at the requested level."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        force=True,
    )


@app.command()
def export(
    branch: str | None = BRANCH_OPTION,
    token: str | None = TOKEN_OPTION,
    page_size: int = PAGE_SIZE_OPTION,
    chunk_size: int = CHUNK_SIZE_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Export unresolved issues grouped by severity.

    Writes BLOCKER, CRITICAL, MAJOR, MINOR and INFO files (plus any other
    severity found) into the current directory, at most --chunk-size issues
    per file. Existing files with the same names are overwritten.

    Examples:
        sonar-export export
        sonar-export export --branch main
        BRANCH=main sonar-export export --chunk-size 50
    """
    configure_logging(verbose)

    config = ExportConfig(
        token=token, branch=branch, page_size=page_size, chunk_size=chunk_size
    )
    try:
        config.validate()
    except ValueError as e:
        console.print(f"❌ Error: {escape(str(e))}")
        raise typer.Exit(1)

    console.print(
        f"🔍 Fetching unresolved issues from SonarCloud for "
        f"{escape(config.describe_target())}..."
    )

    try:
        with SonarCloudClient(
            token=config.sonar_token,
            base_url=config.base_url,
            throttle_seconds=config.throttle_seconds,
        ) as client:
            issues = client.fetch_all_issues(
                config.organization,
                config.project_key,
                page_size=config.page_size,
                branch=config.branch,
            )
    except (SonarCloudAPIError, SonarCloudResponseError) as e:
        console.print(f"❌ Error: {escape(str(e))}")
        raise typer.Exit(1)
    except httpx.HTTPError as e:
        console.print(f"❌ Error: {escape(str(e))}")
        console.print("Please check your network connection.")
        raise typer.Exit(1)

    console.print(f"✅ Fetched {len(issues)} issues. Writing Markdown files...")

    buckets = group_by_severity(issues, SEVERITIES)
    writer = ReportWriter(
        config.organization,
        config.project_key,
        branch=config.branch,
        chunk_size=config.chunk_size,
        base_url=config.base_url,
    )
    try:
        writer.write_all(buckets)
    except (OSError, ValueError) as e:
        console.print(f"❌ Error writing files: {escape(str(e))}")
        raise typer.Exit(1)

    console.print("✨ Done.")


if __name__ == "__main__":
    app()
