"""Grouping, rendering and writing of Markdown issue reports."""

from .grouping import SEVERITIES, chunk_issues, group_by_severity, sort_issues
from .markdown import md_escape, render_header, render_table
from .writer import ReportWriter

__all__ = [
    "SEVERITIES",
    "ReportWriter",
    "chunk_issues",
    "group_by_severity",
    "md_escape",
    "render_header",
    "render_table",
    "sort_issues",
]
