"""
Unit tests for ChangelogSettings.
"""

import pytest

from github_changelog.settings import ChangelogSettings


class TestFromEnv:
    def test_defaults(self):
        settings = ChangelogSettings.from_env({})

        assert settings == ChangelogSettings()
        assert settings.github_token is None
        assert settings.page_size == 250

    def test_reads_variables(self):
        settings = ChangelogSettings.from_env(
            {
                "GITHUB_TOKEN": "fake_github_token",
                "GITHUB_CHANGELOG_HTTP_TIMEOUT": "5",
                "GITHUB_CHANGELOG_HTTP_RETRIES": "1",
                "GITHUB_CHANGELOG_HTTP_RETRY_DELAY": "0",
                "GITHUB_CHANGELOG_PAGE_SIZE": "100",
                "GITHUB_CHANGELOG_GIT_TIMEOUT": "7",
            }
        )

        assert settings == ChangelogSettings(
            github_token="fake_github_token",
            http_timeout_sec=5,
            http_retries=1,
            http_retry_delay_sec=0,
            page_size=100,
            git_timeout_sec=7,
        )

    def test_empty_token_is_none(self):
        assert ChangelogSettings.from_env({"GITHUB_TOKEN": ""}).github_token is None

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("GITHUB_CHANGELOG_PAGE_SIZE", "42")

        assert ChangelogSettings.from_env().page_size == 42

    def test_rejects_non_integer(self):
        with pytest.raises(ValueError, match="GITHUB_CHANGELOG_PAGE_SIZE"):
            ChangelogSettings.from_env({"GITHUB_CHANGELOG_PAGE_SIZE": "many"})


class TestValidation:
    @pytest.mark.parametrize(
        "field, value",
        [
            ("http_timeout_sec", 0),
            ("http_retries", 0),
            ("http_retry_delay_sec", -1),
            ("page_size", 0),
            ("git_timeout_sec", -5),
        ],
    )
    def test_rejects_invalid_values(self, field, value):
        with pytest.raises(ValueError, match=field):
            ChangelogSettings(**{field: value})
