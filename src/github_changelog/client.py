from github_changelog.changelog.commits import CommitRangeResolver
from github_changelog.changelog.pull_requests import PullRequestAssociator
from github_changelog.changelog.service import ChangelogService
from github_changelog.integrations.github.requests_provider import RequestsGitHubApi
from github_changelog.settings import ChangelogSettings


class ChangelogClient:
    __slots__ = ("__settings", "__changelog_service")

    def __init__(
        self,
        settings: ChangelogSettings | None = None,
        changelog_service: ChangelogService | None = None,
    ) -> None:
        self.__settings = settings or ChangelogSettings()

        if changelog_service is not None:
            self.__changelog_service = changelog_service
            return

        github_api = RequestsGitHubApi(
            token=self.__settings.github_token,
            timeout_sec=self.__settings.http_timeout_sec,
            retries=self.__settings.http_retries,
            retry_delay_sec=self.__settings.http_retry_delay_sec,
        )
        self.__changelog_service = ChangelogService(
            commit_resolver=CommitRangeResolver(github_api, page_size=self.__settings.page_size),
            pull_request_associator=PullRequestAssociator(github_api),
        )

    @property
    def settings(self) -> ChangelogSettings:
        return self.__settings

    @property
    def changelog(self) -> ChangelogService:
        return self.__changelog_service
