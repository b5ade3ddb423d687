"""Export unresolved SonarCloud issues as Markdown tables."""

__version__ = "0.1.0"
