import os
from collections.abc import Mapping
from dataclasses import dataclass

from .changelog.models import DEFAULT_PAGE_SIZE

ENV_PREFIX = "GITHUB_CHANGELOG_"


@dataclass(frozen=True, slots=True)
class ChangelogSettings:
    github_token: str | None = None
    http_timeout_sec: int = 30
    http_retries: int = 3
    http_retry_delay_sec: int = 2
    page_size: int = DEFAULT_PAGE_SIZE
    git_timeout_sec: int = 30

    def __post_init__(self) -> None:
        if self.http_timeout_sec <= 0:
            raise ValueError("http_timeout_sec must be > 0")
        if self.http_retries <= 0:
            raise ValueError("http_retries must be > 0")
        if self.http_retry_delay_sec < 0:
            raise ValueError("http_retry_delay_sec must be >= 0")
        if self.page_size <= 0:
            raise ValueError("page_size must be > 0")
        if self.git_timeout_sec <= 0:
            raise ValueError("git_timeout_sec must be > 0")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ChangelogSettings":
        """Build settings from ``GITHUB_TOKEN`` and ``GITHUB_CHANGELOG_*`` variables."""
        environ = os.environ if environ is None else environ
        defaults = cls()

        def integer(key: str, default: int) -> int:
            raw = environ.get(f"{ENV_PREFIX}{key}")
            if raw is None or not raw.strip():
                return default
            try:
                return int(raw)
            except ValueError as exc:
                raise ValueError(f"{ENV_PREFIX}{key} must be an integer, got {raw!r}") from exc

        return cls(
            github_token=environ.get("GITHUB_TOKEN") or None,
            http_timeout_sec=integer("HTTP_TIMEOUT", defaults.http_timeout_sec),
            http_retries=integer("HTTP_RETRIES", defaults.http_retries),
            http_retry_delay_sec=integer("HTTP_RETRY_DELAY", defaults.http_retry_delay_sec),
            page_size=integer("PAGE_SIZE", defaults.page_size),
            git_timeout_sec=integer("GIT_TIMEOUT", defaults.git_timeout_sec),
        )
