"""Resolve a GitHub token from an explicit value or the gh CLI."""

import subprocess
from typing import Protocol

from .settings import get_settings

GH_TIMEOUT = 30


class TokenProvider(Protocol):
    """Anything that can supply an optional GitHub token."""

    def get_token(self) -> str | None: ...


class StaticTokenProvider:
    """Returns the token it was given, unchecked."""

    def __init__(self, token: str | None):
        self.token = token

    def get_token(self) -> str | None:
        return self.token


class GhCliTokenProvider:
    """Asks the GitHub CLI for the token of the logged-in user.

    A missing binary, a non-zero exit or empty output all mean "no token";
    nothing here raises.
    """

    def __init__(self, command: str | None = None):
        self.command = command or get_settings().gh_command

    def _run(self, *args: str) -> subprocess.CompletedProcess | None:
        try:
            return subprocess.run(
                [self.command, *args],
                capture_output=True,
                text=True,
                timeout=GH_TIMEOUT,
                check=False,
            )
        except (OSError, ValueError, subprocess.SubprocessError):
            # ValueError covers output that does not decode in the locale encoding
            return None

    def is_installed(self) -> bool:
        result = self._run("--version")
        return result is not None and result.returncode == 0

    def get_token(self) -> str | None:
        if not self.is_installed():
            return None
        result = self._run("auth", "token")
        if result is None or result.returncode != 0:
            return None
        token = result.stdout.strip()
        return token or None


def resolve_token(explicit: str | None, helper: TokenProvider | None = None) -> str | None:
    """Pick the token for this run.

    An explicit token (including an empty string) always wins. Otherwise the
    helper is consulted, defaulting to the gh CLI.
    """
    if explicit is not None:
        return StaticTokenProvider(explicit).get_token()
    return (helper or GhCliTokenProvider()).get_token()
