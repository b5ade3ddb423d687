"""Main CLI entry point."""

import typer
from dotenv import load_dotenv
from rich.console import Console

from .export import export

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="sonar-export",
    help="Export unresolved SonarCloud issues as Markdown tables",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


app.command(name="export", context_settings={"help_option_names": ["-h", "--help"]})(
    export
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from sonar_issue_export import __version__

    console.print(f"SonarCloud Issue Export v{__version__}")


if __name__ == "__main__":
    app()
