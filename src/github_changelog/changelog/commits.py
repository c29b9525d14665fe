import logging
from collections import deque

from github_changelog.exceptions import ReferenceNotFound

from .interfaces import CommitApi
from .models import DEFAULT_PAGE_SIZE, Commit, CommitPageQuery, Range, Repository

logger = logging.getLogger(__name__)


class CommitRangeResolver:
    __slots__ = ("__api", "__page_size")

    def __init__(self, api: CommitApi, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        if page_size <= 0:
            raise ValueError("page_size must be > 0")

        self.__api = api
        self.__page_size = page_size

    def show(self, repository: Repository, reference: str) -> Commit:
        commit = self.__api.show_commit(repository.owner, repository.name, reference)
        if commit is None:
            raise ReferenceNotFound(repository, reference)
        return commit

    def page(
        self,
        repository: Repository,
        pivot_sha: str | None = None,
        page_size: int | None = None,
        **filters: object,
    ) -> list[Commit]:
        query = CommitPageQuery(
            pivot_sha=pivot_sha,
            page_size=self.__page_size if page_size is None else page_size,
            filters=filters,
        )
        logger.debug("Fetching commits of %s: %s", repository, query.as_params())
        return self.__api.list_commits(repository.owner, repository.name, query)

    def resolve(
        self,
        repository: Repository,
        start_reference: str,
        end_reference: str | None = None,
    ) -> Range:
        """Return the commits after ``start_reference`` up to and including ``end_reference``.

        Commits are ordered oldest first. Without an end reference the walk
        starts at the tip of the default branch. An unknown reference yields an
        empty range; transport errors raised by the API propagate.
        """
        if start_reference == end_reference:
            return Range.empty()

        try:
            start = self.show(repository, start_reference)
            end = self.show(repository, end_reference) if end_reference is not None else None
        except ReferenceNotFound as exc:
            logger.info("%s, nothing to resolve", exc)
            return Range.empty()

        commits: deque[Commit] = deque()
        pivot: Commit | None = None
        page = self.page(repository, pivot_sha=end.sha if end is not None else None)

        while True:
            oldest: Commit | None = None
            for commit in page:
                # every page after the first starts with the previous pivot
                if pivot is not None and commit == pivot:
                    continue
                if commit == start:
                    return Range.of(commits)

                commits.appendleft(commit)
                oldest = commit

            if oldest is None:
                break

            pivot = oldest
            page = self.page(repository, pivot_sha=pivot.sha)

        logger.warning(
            "Start commit %s of %s was not reached, returning %d commit(s)",
            start.sha,
            repository,
            len(commits),
        )
        return Range.of(commits)
