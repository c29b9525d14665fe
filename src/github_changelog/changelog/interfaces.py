from typing import Protocol

from .models import Commit, CommitPageQuery, PullRequest


class CommitApi(Protocol):
    def show_commit(self, owner: str, name: str, reference: str) -> Commit | None:
        ...

    def list_commits(self, owner: str, name: str, query: CommitPageQuery) -> list[Commit]:
        ...


class PullRequestApi(Protocol):
    def show_pull_request(self, owner: str, name: str, number: int) -> PullRequest | None:
        ...


class GitRemoteGateway(Protocol):
    def remote_urls(self) -> dict[str, str]:
        ...
