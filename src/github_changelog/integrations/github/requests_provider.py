import logging
import time
from collections.abc import Callable
from typing import TypeVar
from urllib.parse import quote

import requests
from pydantic import TypeAdapter, ValidationError

from github_changelog.changelog.interfaces import CommitApi, PullRequestApi
from github_changelog.changelog.models import Author, Commit, CommitPageQuery, PullRequest
from github_changelog.exceptions import TransportFault

from .dto import GitHubCommitDTO, GitHubPullRequestDTO

logger = logging.getLogger(__name__)

# 409 is what GitHub answers for a repository without commits
NOT_FOUND_STATUS_CODES = frozenset({404, 409, 422})
EMPTY_REPOSITORY_STATUS_CODES = frozenset({409})

_COMMIT_LIST_ADAPTER = TypeAdapter(list[GitHubCommitDTO])

T = TypeVar("T")


class RequestsGitHubApi(CommitApi, PullRequestApi):
    __slots__ = (
        "__token",
        "__base_url",
        "__timeout_sec",
        "__retries",
        "__retry_delay_sec",
        "__session",
    )

    def __init__(
        self,
        token: str | None,
        timeout_sec: int,
        retries: int,
        retry_delay_sec: int,
        session: requests.Session | None = None,
        base_url: str = "https://api.github.com",
    ) -> None:
        self.__token = token
        self.__base_url = base_url.rstrip("/")
        self.__timeout_sec = timeout_sec
        self.__retries = max(retries, 1)
        self.__retry_delay_sec = retry_delay_sec
        self.__session = session or requests.Session()

    def show_commit(self, owner: str, name: str, reference: str) -> Commit | None:
        payload = self.__get_json(f"/repos/{owner}/{name}/commits/{quote(reference, safe='/')}")
        if payload is None:
            return None

        dto = self.__validate(GitHubCommitDTO.model_validate, payload)
        return Commit(sha=dto.sha, message=dto.commit.message)

    def list_commits(self, owner: str, name: str, query: CommitPageQuery) -> list[Commit]:
        # only an empty repository lists as empty, an unknown pivot is a fault
        payload = self.__get_json(
            f"/repos/{owner}/{name}/commits",
            params=query.as_params(),
            not_found_status_codes=EMPTY_REPOSITORY_STATUS_CODES,
        )
        if payload is None:
            return []

        dtos = self.__validate(_COMMIT_LIST_ADAPTER.validate_python, payload)
        return [Commit(sha=dto.sha, message=dto.commit.message) for dto in dtos]

    def show_pull_request(self, owner: str, name: str, number: int) -> PullRequest | None:
        payload = self.__get_json(f"/repos/{owner}/{name}/pulls/{number}")
        if payload is None:
            return None

        dto = self.__validate(GitHubPullRequestDTO.model_validate, payload)
        author = None
        if dto.user is not None:
            author = Author(login=dto.user.login, html_url=str(dto.user.html_url))
        return PullRequest(id=dto.number, title=dto.title, author=author)

    @staticmethod
    def __validate(validator: Callable[[object], T], payload: object) -> T:
        try:
            return validator(payload)
        except ValidationError as exc:
            raise TransportFault(f"GitHub API returned an unexpected response: {exc}") from exc

    def __get_json(
        self,
        path: str,
        params: dict[str, object] | None = None,
        not_found_status_codes: frozenset[int] = NOT_FOUND_STATUS_CODES,
    ) -> object | None:
        """GET ``path`` and decode the body; ``None`` for any of ``not_found_status_codes``."""
        url = f"{self.__base_url}{path}"
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if self.__token:
            headers["Authorization"] = f"Bearer {self.__token}"

        for attempt in range(1, self.__retries + 1):
            try:
                response = self.__session.get(
                    url,
                    headers=headers,
                    params=params,
                    timeout=self.__timeout_sec,
                )
                if response.status_code in not_found_status_codes:
                    logger.debug("GET %s answered %s", url, response.status_code)
                    return None
                response.raise_for_status()
                return response.json()
            except requests.HTTPError as exc:
                rate_limit_message = self.__rate_limit_message(exc)
                if rate_limit_message is not None:
                    raise TransportFault(rate_limit_message) from exc
                raise TransportFault(f"GitHub API request failed: {exc}") from exc
            except requests.JSONDecodeError as exc:
                raise TransportFault(f"GitHub API returned a non-JSON response for {url}") from exc
            except (requests.ConnectionError, requests.Timeout) as exc:
                if attempt < self.__retries:
                    logger.warning(
                        "GitHub API unreachable (attempt %d/%d), retrying in %ss: %s",
                        attempt,
                        self.__retries,
                        self.__retry_delay_sec,
                        exc,
                    )
                    time.sleep(self.__retry_delay_sec)
                    continue
                raise TransportFault(
                    "GitHub API is unreachable (DNS/network issue). "
                    "Check internet/VPN/DNS and try again."
                ) from exc

        raise TransportFault("GitHub API request failed")

    @staticmethod
    def __rate_limit_message(exc: requests.HTTPError) -> str | None:
        response = exc.response
        if response is None:
            return None

        remaining = response.headers.get("X-RateLimit-Remaining")
        reset = response.headers.get("X-RateLimit-Reset")
        if response.status_code not in (403, 429) or remaining != "0" or reset is None:
            return None

        try:
            wait_seconds = int(reset) - int(time.time()) + 1
        except ValueError:
            return "GitHub rate limit exceeded. Wait for the limit to reset or use token."
        return f"GitHub rate limit exceeded. Wait about {max(wait_seconds, 0)}s or use token."
