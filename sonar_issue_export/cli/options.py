"""Standardized CLI option definitions for consistent shorthand mappings."""

import typer

from ..report.writer import DEFAULT_CHUNK_SIZE
from ..sonar_client.client import DEFAULT_PAGE_SIZE

BRANCH_OPTION = typer.Option(
    None,
    "--branch",
    "-b",
    envvar="BRANCH",
    help="Only export issues of this branch (defaults to BRANCH env var)",
)

TOKEN_OPTION = typer.Option(
    None, "--token", help="SonarCloud user token (defaults to SONAR_TOKEN env var)"
)

PAGE_SIZE_OPTION = typer.Option(
    DEFAULT_PAGE_SIZE, "--page-size", min=1, help="Issues requested per API page"
)

CHUNK_SIZE_OPTION = typer.Option(
    DEFAULT_CHUNK_SIZE, "--chunk-size", min=1, help="Maximum issues per output file"
)

VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", help="Show debug logging for API requests"
)
