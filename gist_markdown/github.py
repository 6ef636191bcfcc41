"""GitHub gist client using PyGithub."""

import logging

import requests
from github import Auth, Github, GithubException
from pydantic import ValidationError

from .console import Console
from .errors import FetchFailed
from .models import Gist
from .settings import get_settings

logging.getLogger("github").setLevel(logging.ERROR)
logging.getLogger("github.Requester").setLevel(logging.ERROR)
logging.getLogger("urllib3").setLevel(logging.ERROR)


def _error_message(e: GithubException) -> str:
    if isinstance(e.data, dict) and e.data.get("message"):
        return str(e.data["message"])
    return str(e)


class GistClient:
    """Fetches a single gist from the GitHub REST API.

    A non-empty token authenticates the request; otherwise the call is
    anonymous and subject to the unauthenticated rate limit. There is exactly
    one attempt per fetch: PyGithub's retry is disabled.
    """

    def __init__(self, token: str | None = None, base_url: str | None = None):
        self.token = token
        self.base_url = base_url or get_settings().github_api_url
        self._github: Github | None = None

    @property
    def github(self) -> Github:
        """Lazy-initialize the GitHub client."""
        if self._github is None:
            auth = Auth.Token(self.token) if self.token else None
            self._github = Github(auth=auth, base_url=self.base_url, retry=None)
        return self._github

    def fetch(self, gist_id: str) -> Gist:
        """GET /gists/{gist_id} and validate the payload.

        Raises:
            FetchFailed: on any API, transport or validation failure.
        """
        try:
            raw = self.github.get_gist(gist_id).raw_data
        except GithubException as e:
            if e.status == 404:
                raise FetchFailed(gist_id, "not_found", f"Gist {gist_id} not found") from e
            if e.status == 401:
                raise FetchFailed(
                    gist_id,
                    "unauthorized",
                    "Authentication failed. Please provide a valid GitHub token",
                ) from e
            if e.status == 403:
                raise FetchFailed(
                    gist_id,
                    "forbidden",
                    "Access forbidden. This might be a private gist - try providing a token",
                ) from e
            raise FetchFailed(
                gist_id, "error", f"Failed to fetch gist: {_error_message(e)}"
            ) from e
        except requests.RequestException as e:
            raise FetchFailed(gist_id, "error", f"Failed to fetch gist: {e}") from e

        try:
            return Gist.model_validate(raw)
        except ValidationError as e:
            raise FetchFailed(
                gist_id,
                "invalid_response",
                f"Failed to fetch gist: unexpected response shape ({e.error_count()} errors)",
            ) from e


def fetch_gist(
    gist_id: str,
    token: str | None = None,
    console: Console | None = None,
    client: GistClient | None = None,
) -> Gist:
    """Fetch a gist, reporting progress and failures on the console."""
    console = console or Console()
    client = client or GistClient(token)

    console.info(f"🔍 Fetching gist {gist_id}...")
    try:
        gist = client.fetch(gist_id)
    except FetchFailed as e:
        console.error(f"❌ {e.message}")
        raise

    console.success(f"✅ Successfully fetched gist with {len(gist.files)} file(s)")
    return gist
