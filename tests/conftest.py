"""
Shared fixtures: an in-memory GitHub API that records every call.
"""

import pytest

from github_changelog.changelog.models import Commit, CommitPageQuery, PullRequest, Repository


class FakeGitHubApi:
    """Serves commits and pull requests from memory, newest-first pages like GitHub."""

    def __init__(self, commits=None, pages=None, pull_requests=None, references=None):
        self.commits = {commit.sha: commit for commit in commits or []}
        self.pages = dict(pages or {})
        self.pull_requests = {pr.id: pr for pr in pull_requests or []}
        self.references = dict(references or {})
        self.calls = []

    def show_commit(self, owner, name, reference):
        self.calls.append(("show_commit", owner, name, reference))
        sha = self.references.get(reference, reference)
        return self.commits.get(sha)

    def list_commits(self, owner, name, query: CommitPageQuery):
        self.calls.append(("list_commits", owner, name, query))
        return list(self.pages.get(query.pivot_sha, []))

    def show_pull_request(self, owner, name, number):
        self.calls.append(("show_pull_request", owner, name, number))
        return self.pull_requests.get(number)

    def calls_to(self, method):
        return [call for call in self.calls if call[0] == method]


def make_commits(*shas):
    return [Commit(sha=sha, message=f"Commit {sha}") for sha in shas]


def linear_pages(history, page_size):
    """Page a linear history (oldest first) the way GitHub does: newest first, pivot included."""
    pages = {}
    newest_first = list(reversed(history))
    for index, commit in enumerate(newest_first):
        pages[commit.sha] = newest_first[index:index + page_size]
    return pages


@pytest.fixture
def repository():
    return Repository(owner="localheinz", name="github-changelog")


@pytest.fixture
def merge_commit_factory():
    def factory(sha, number, source="localheinz/fix/directory"):
        return Commit(sha=sha, message=f"Merge pull request #{number} from {source}\n\nFix directory")

    return factory


@pytest.fixture
def pull_request_factory():
    def factory(number, title=None):
        return PullRequest(id=number, title=title or f"Pull request {number}")

    return factory


@pytest.fixture
def fake_api_cls():
    return FakeGitHubApi


@pytest.fixture(name="make_commits")
def make_commits_fixture():
    return make_commits


@pytest.fixture(name="linear_pages")
def linear_pages_fixture():
    return linear_pages
