"""github-changelog public package API."""

from .changelog.models import Author, Commit, PullRequest, Range, Repository
from .client import ChangelogClient
from .exceptions import ChangelogError, PullRequestNotFound, ReferenceNotFound, TransportFault
from .settings import ChangelogSettings

__version__ = "0.1.0"

__all__ = [
    "Author",
    "ChangelogClient",
    "ChangelogError",
    "ChangelogSettings",
    "Commit",
    "PullRequest",
    "PullRequestNotFound",
    "Range",
    "ReferenceNotFound",
    "Repository",
    "TransportFault",
]
