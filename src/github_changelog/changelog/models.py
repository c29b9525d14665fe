import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

DEFAULT_PAGE_SIZE = 250

_REMOTE_URL_PATTERNS = (
    re.compile(r"^git@github\.com:(?P<owner>[^/]+)/(?P<name>[^/]+?)(?:\.git)?/?$"),
    re.compile(r"^(?:https?|ssh|git)://(?:[^@/]+@)?github\.com(?::\d+)?/(?P<owner>[^/]+)/(?P<name>[^/]+?)(?:\.git)?/?$"),
)


@dataclass(frozen=True, slots=True)
class Repository:
    owner: str
    name: str

    def __post_init__(self) -> None:
        if not self.owner or not self.name:
            raise ValueError("owner and name must not be empty")

    @classmethod
    def from_string(cls, value: str) -> "Repository":
        owner, separator, name = value.strip().partition("/")
        if not separator or "/" in name:
            raise ValueError(f"Expected repository as 'owner/name', got {value!r}")
        return cls(owner=owner, name=name)

    @classmethod
    def from_remote_url(cls, url: str) -> "Repository":
        for pattern in _REMOTE_URL_PATTERNS:
            match = pattern.match(url.strip())
            if match:
                return cls(owner=match.group("owner"), name=match.group("name"))
        raise ValueError(f"Not a GitHub remote URL: {url!r}")

    def __str__(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True, slots=True)
class Commit:
    sha: str
    message: str = field(compare=False)

    def __post_init__(self) -> None:
        if not self.sha:
            raise ValueError("sha must not be empty")

    @property
    def short_sha(self) -> str:
        return self.sha[:7]

    @property
    def summary(self) -> str:
        return self.message.splitlines()[0] if self.message else ""


@dataclass(frozen=True, slots=True)
class Author:
    login: str
    html_url: str


@dataclass(frozen=True, slots=True)
class PullRequest:
    id: int
    title: str
    author: Author | None = None

    def __post_init__(self) -> None:
        if self.id <= 0:
            raise ValueError("pull request id must be > 0")


@dataclass(frozen=True, slots=True)
class CommitPageQuery:
    """Parameters of a single "list commits" request.

    GitHub returns the page newest first, starting at ``pivot_sha`` (or at the
    tip of the default branch when no pivot is given).
    """

    pivot_sha: str | None = None
    page_size: int = DEFAULT_PAGE_SIZE
    filters: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.page_size <= 0:
            raise ValueError("page_size must be > 0")

    def as_params(self) -> dict[str, object]:
        params: dict[str, object] = dict(self.filters)
        if self.pivot_sha is not None:
            params["sha"] = self.pivot_sha
        params["per_page"] = self.page_size
        return params


@dataclass(frozen=True, slots=True)
class Range:
    commits: tuple[Commit, ...] = ()
    pull_requests: tuple[PullRequest, ...] = ()

    @classmethod
    def of(
        cls,
        commits: Iterable[Commit] = (),
        pull_requests: Iterable[PullRequest] = (),
    ) -> "Range":
        return cls(commits=tuple(commits), pull_requests=tuple(pull_requests))

    @classmethod
    def empty(cls) -> "Range":
        return cls()

    def __len__(self) -> int:
        return len(self.commits)

    def __bool__(self) -> bool:
        return bool(self.commits)
