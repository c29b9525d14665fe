from pydantic import BaseModel, Field, HttpUrl


class GitHubCommitDetailDTO(BaseModel):
    message: str


class GitHubCommitDTO(BaseModel):
    sha: str = Field(min_length=1)
    commit: GitHubCommitDetailDTO


class GitHubUserDTO(BaseModel):
    login: str
    html_url: HttpUrl


class GitHubPullRequestDTO(BaseModel):
    number: int = Field(gt=0)
    title: str
    user: GitHubUserDTO | None = None
