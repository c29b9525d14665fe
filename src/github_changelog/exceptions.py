class ChangelogError(RuntimeError):
    """Base class for every error raised by github_changelog."""


class ReferenceNotFound(ChangelogError):
    def __init__(self, repository: object, reference: str) -> None:
        super().__init__(f"Reference {reference!r} not found in {repository}")
        self.repository = repository
        self.reference = reference


class PullRequestNotFound(ChangelogError):
    def __init__(self, repository: object, number: int) -> None:
        super().__init__(f"Pull request #{number} not found in {repository}")
        self.repository = repository
        self.number = number


class TransportFault(ChangelogError):
    """The GitHub API could not be reached or answered with something unexpected."""


class GitCommandError(ChangelogError):
    pass
