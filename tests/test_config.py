"""Tests for export configuration."""

import pytest

from sonar_issue_export.config import ORGANIZATION, PROJECT_KEY, ExportConfig


class TestExportConfig:
    """Test ExportConfig class."""

    def test_reads_environment(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("SONAR_TOKEN", "env_token")
        clean_env.setenv("BRANCH", "main")

        config = ExportConfig()

        assert config.sonar_token == "env_token"
        assert config.branch == "main"

    def test_arguments_override_environment(
        self, clean_env: pytest.MonkeyPatch
    ) -> None:
        clean_env.setenv("SONAR_TOKEN", "env_token")
        clean_env.setenv("BRANCH", "main")

        config = ExportConfig(token="cli_token", branch="develop")

        assert config.sonar_token == "cli_token"
        assert config.branch == "develop"

    def test_empty_branch_is_none(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("BRANCH", "")
        assert ExportConfig().branch is None

    def test_target_is_fixed(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("ORGANIZATION", "other")
        config = ExportConfig()
        assert config.organization == ORGANIZATION == "useago"
        assert config.project_key == PROJECT_KEY == "useago_ago-chat"

    def test_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        config = ExportConfig()
        assert config.page_size == 500
        assert config.chunk_size == 20

    def test_validate_missing_token(self, clean_env: pytest.MonkeyPatch) -> None:
        config = ExportConfig()
        with pytest.raises(ValueError, match="Missing SONAR_TOKEN"):
            config.validate()

    def test_validate_sizes(self, clean_env: pytest.MonkeyPatch) -> None:
        with pytest.raises(ValueError, match="Chunk size"):
            ExportConfig(token="t", chunk_size=0).validate()
        with pytest.raises(ValueError, match="Page size"):
            ExportConfig(token="t", page_size=0).validate()

    def test_describe_target(self, clean_env: pytest.MonkeyPatch) -> None:
        assert ExportConfig().describe_target() == "useago/useago_ago-chat"
        assert ExportConfig(branch="main").describe_target() == (
            "useago/useago_ago-chat on branch main"
        )
