import subprocess
from pathlib import Path

from github_changelog.changelog.interfaces import GitRemoteGateway
from github_changelog.exceptions import GitCommandError


class SubprocessGitRemoteGateway(GitRemoteGateway):
    __slots__ = ("__git_timeout_sec", "__cwd")

    def __init__(self, git_timeout_sec: int, cwd: Path | None = None) -> None:
        self.__git_timeout_sec = git_timeout_sec
        self.__cwd = cwd

    def remote_urls(self) -> dict[str, str]:
        raw = self.__run(["git", "remote", "-v"])
        if not raw:
            return {}

        # lines look like "origin\tgit@github.com:owner/name.git (fetch)"
        urls: dict[str, str] = {}
        for line in raw.splitlines():
            parts = line.split()
            if len(parts) != 3 or parts[2] != "(fetch)":
                continue
            urls[parts[0]] = parts[1]

        return urls

    def __run(self, command: list[str]) -> str:
        try:
            result = subprocess.run(
                command,
                cwd=str(self.__cwd) if self.__cwd else None,
                capture_output=True,
                text=True,
                timeout=self.__git_timeout_sec,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise GitCommandError(
                f"Command timeout after {self.__git_timeout_sec}s: {' '.join(command)}"
            ) from exc
        except OSError as exc:
            raise GitCommandError(f"Unable to run {' '.join(command)}: {exc}") from exc

        if result.returncode != 0:
            message = result.stderr.strip() or result.stdout.strip() or "Git command failed"
            raise GitCommandError(message)

        return result.stdout.strip()
