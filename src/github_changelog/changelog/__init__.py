from .commits import CommitRangeResolver
from .models import Author, Commit, CommitPageQuery, PullRequest, Range, Repository
from .pull_requests import PullRequestAssociator, extract_pull_request_number
from .service import ChangelogService

__all__ = [
    "Author",
    "ChangelogService",
    "Commit",
    "CommitPageQuery",
    "CommitRangeResolver",
    "PullRequest",
    "PullRequestAssociator",
    "Range",
    "Repository",
    "extract_pull_request_number",
]
