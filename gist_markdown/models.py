"""Typed gist entities, validated at the GitHub API boundary."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

GIST_WEB_BASE = "https://gist.github.com"
GITHUB_WEB_BASE = "https://github.com"


class GistModel(BaseModel):
    """Base for API entities: ignore unknown keys, never mutate after load."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class GistOwner(GistModel):
    login: str
    html_url: str | None = None

    @property
    def profile_url(self) -> str:
        return self.html_url or f"{GITHUB_WEB_BASE}/{self.login}"


class GistFile(GistModel):
    """A single file of a gist.

    ``content`` is absent for very large gists and may be cut short for large
    files, in which case ``truncated`` is set and ``raw_url`` points at the
    full text.
    """

    filename: str | None = None
    language: str | None = None
    size: int = 0
    raw_url: str | None = None
    content: str | None = None
    truncated: bool = False


class Gist(GistModel):
    id: str
    description: str | None = None
    html_url: str | None = None
    owner: GistOwner | None = None
    public: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None
    # Key order is the order returned by the API
    files: dict[str, GistFile] = Field(default_factory=dict)

    @property
    def web_url(self) -> str:
        return self.html_url or f"{GIST_WEB_BASE}/{self.id}"
