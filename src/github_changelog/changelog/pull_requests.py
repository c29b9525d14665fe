import logging
import re
from collections.abc import Iterable

from github_changelog.exceptions import PullRequestNotFound

from .interfaces import PullRequestApi
from .models import Commit, PullRequest, Repository

logger = logging.getLogger(__name__)

MERGE_COMMIT_PATTERN = re.compile(r"^Merge pull request #(?P<number>\d+) from (?P<source>.+)")


def extract_pull_request_number(message: str) -> int | None:
    """Return the pull request number of a GitHub merge commit message, if any."""
    match = MERGE_COMMIT_PATTERN.match(message)
    if match is None:
        return None
    return int(match.group("number"))


class PullRequestAssociator:
    __slots__ = ("__api",)

    def __init__(self, api: PullRequestApi) -> None:
        self.__api = api

    def show(self, repository: Repository, number: int) -> PullRequest:
        pull_request = self.__api.show_pull_request(repository.owner, repository.name, number)
        if pull_request is None:
            raise PullRequestNotFound(repository, number)
        return pull_request

    def associate(self, repository: Repository, commits: Iterable[Commit]) -> tuple[PullRequest, ...]:
        pull_requests: list[PullRequest] = []
        for commit in commits:
            number = extract_pull_request_number(commit.message)
            if number is None:
                continue

            try:
                pull_requests.append(self.show(repository, number))
            except PullRequestNotFound as exc:
                logger.debug("Skipping merge commit %s: %s", commit.short_sha, exc)

        return tuple(pull_requests)
