import logging

from .commits import CommitRangeResolver
from .models import Commit, PullRequest, Range, Repository
from .pull_requests import PullRequestAssociator

logger = logging.getLogger(__name__)


class ChangelogService:
    __slots__ = ("__commit_resolver", "__pull_request_associator")

    def __init__(
        self,
        commit_resolver: CommitRangeResolver,
        pull_request_associator: PullRequestAssociator,
    ) -> None:
        self.__commit_resolver = commit_resolver
        self.__pull_request_associator = pull_request_associator

    def range(
        self,
        repository: Repository,
        start_reference: str,
        end_reference: str | None = None,
    ) -> Range:
        commits = self.__commit_resolver.resolve(repository, start_reference, end_reference).commits
        pull_requests = self.__pull_request_associator.associate(repository, commits)
        logger.debug(
            "Resolved %d commit(s) and %d pull request(s) for %s between %s and %s",
            len(commits),
            len(pull_requests),
            repository,
            start_reference,
            end_reference or "default branch",
        )
        return Range.of(commits, pull_requests)

    def commits(
        self,
        repository: Repository,
        start_reference: str,
        end_reference: str | None = None,
    ) -> tuple[Commit, ...]:
        return self.__commit_resolver.resolve(repository, start_reference, end_reference).commits

    def pull_requests(
        self,
        repository: Repository,
        start_reference: str,
        end_reference: str | None = None,
    ) -> tuple[PullRequest, ...]:
        return self.range(repository, start_reference, end_reference).pull_requests
