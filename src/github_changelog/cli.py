"""
github-changelog - list the pull requests merged between two references

Usage:
    github-changelog v1.0.0              - pull requests merged since v1.0.0
    github-changelog v1.0.0 v1.1.0       - pull requests merged between two references
    github-changelog v1.0.0 -r owner/name --with-commits
"""

import dataclasses
import logging
from pathlib import Path

import click

from github_changelog import __version__
from github_changelog.changelog.models import Range, Repository
from github_changelog.client import ChangelogClient
from github_changelog.exceptions import ChangelogError
from github_changelog.integrations.git.subprocess_gateway import SubprocessGitRemoteGateway
from github_changelog.settings import ChangelogSettings

logger = logging.getLogger(__name__)

PREFERRED_REMOTE = "origin"


def infer_repository(remote_urls: dict[str, str]) -> Repository | None:
    """Pick the GitHub repository of the preferred remote, or of the first one that parses."""
    names = sorted(remote_urls, key=lambda name: (name != PREFERRED_REMOTE, name))
    for name in names:
        try:
            return Repository.from_remote_url(remote_urls[name])
        except ValueError:
            logger.debug("Remote %s is not a GitHub repository: %s", name, remote_urls[name])
    return None


def render(changelog: Range, with_commits: bool = False) -> list[str]:
    lines: list[str] = []
    if with_commits:
        lines.extend(f"* {commit.short_sha} {commit.summary}" for commit in changelog.commits)
        lines.append("")

    if not changelog.pull_requests:
        lines.append("No pull requests found.")
        return lines

    for pull_request in changelog.pull_requests:
        line = f"- {pull_request.title} (#{pull_request.id})"
        if pull_request.author is not None:
            line += f", by @{pull_request.author.login}"
        lines.append(line)
    return lines


@click.command(name="github-changelog")
@click.version_option(version=__version__, prog_name="github-changelog")
@click.argument("start_reference")
@click.argument("end_reference", required=False)
@click.option("-r", "--repository", "repository_name", help="Repository as owner/name (default: inferred from git remotes)")
@click.option("-t", "--token", envvar="GITHUB_TOKEN", help="GitHub API token (default: $GITHUB_TOKEN)")
@click.option("--page-size", type=click.IntRange(min=1), default=None, help="Commits requested per page")
@click.option("--with-commits", is_flag=True, help="Also list the commits of the range")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(
    start_reference: str,
    end_reference: str | None,
    repository_name: str | None,
    token: str | None,
    page_size: int | None,
    with_commits: bool,
    verbose: bool,
) -> None:
    """List the pull requests merged after START_REFERENCE up to END_REFERENCE (default branch if omitted)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        settings = ChangelogSettings.from_env()
        overrides: dict[str, object] = {"github_token": token or settings.github_token}
        if page_size is not None:
            overrides["page_size"] = page_size
        settings = dataclasses.replace(settings, **overrides)

        if repository_name:
            repository = Repository.from_string(repository_name)
        else:
            gateway = SubprocessGitRemoteGateway(git_timeout_sec=settings.git_timeout_sec, cwd=Path.cwd())
            repository = infer_repository(gateway.remote_urls())
            if repository is None:
                raise click.UsageError("Unable to infer the repository from git remotes, pass --repository owner/name")

        changelog = ChangelogClient(settings=settings).changelog.range(repository, start_reference, end_reference)
    except (ChangelogError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc

    for line in render(changelog, with_commits=with_commits):
        click.echo(line)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
