"""Pydantic models for SonarCloud data structures.

These models map to the SonarCloud Web API issue search response.
API Reference: https://sonarcloud.io/web_api/api/issues/search
"""

from pydantic import BaseModel, ConfigDict, Field


class SonarIssue(BaseModel):
    """SonarCloud issue model representing one unresolved finding.

    Maps to an element of the ``issues`` array of api/issues/search.
    Records are immutable once fetched.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    key: str = Field(..., description="Unique issue key (string)")
    component: str = Field(
        ..., description="Component identifier in 'project:path' form (string)"
    )
    type: str = Field("", description="Issue type: BUG, VULNERABILITY, CODE_SMELL")
    rule: str = Field("", description="Rule identifier, e.g. 'typescript:S1481'")
    severity: str = Field(
        "", description="Severity: BLOCKER, CRITICAL, MAJOR, MINOR or INFO"
    )
    status: str = Field("", description="Issue status, e.g. OPEN or CONFIRMED")
    line: int | None = Field(None, description="Line number within the file")
    message: str = Field("", description="Human readable issue message")
    creation_date: str | None = Field(
        None,
        alias="creationDate",
        description="Timestamp of issue creation (ISO 8601)",
    )

    @property
    def file_path(self) -> str:
        """File path part of the component identifier.

        ``"useago_ago-chat:src/index.ts"`` becomes ``"src/index.ts"``. A
        component without a colon is returned unchanged.
        """
        _, sep, path = self.component.partition(":")
        return path if sep else self.component


class Paging(BaseModel):
    """Paging block of a search response."""

    model_config = ConfigDict(populate_by_name=True)

    page_index: int | None = Field(None, alias="pageIndex")
    page_size: int | None = Field(None, alias="pageSize")
    total: int | None = Field(None, description="Total number of matching issues")


class IssueSearchPage(BaseModel):
    """One page of the api/issues/search response.

    Older API versions report ``total`` at the top level, newer ones only in
    ``paging``. Absent fields default to an empty page.
    """

    total: int | None = Field(None, description="Declared total (legacy field)")
    paging: Paging | None = Field(None, description="Paging information")
    issues: list[SonarIssue] = Field(
        default_factory=list, description="Issues on this page"
    )

    @property
    def declared_total(self) -> int:
        """Total number of issues the server says match the query."""
        if self.total is not None:
            return self.total
        if self.paging is not None and self.paging.total is not None:
            return self.paging.total
        return 0
