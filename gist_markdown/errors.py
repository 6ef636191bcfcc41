"""Exceptions raised while downloading a gist."""

from pathlib import Path


class GistMarkdownError(Exception):
    """Base class for all errors raised by gist_markdown."""


class InvalidIdentifier(GistMarkdownError):
    """Input is neither a gist URL nor a bare gist ID."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid gist URL or format: {value!r}")


class FetchFailed(GistMarkdownError):
    """The gist could not be retrieved from the GitHub API.

    ``reason`` is one of ``not_found``, ``unauthorized``, ``forbidden``,
    ``invalid_response`` or ``error``.
    """

    def __init__(self, gist_id: str, reason: str, message: str):
        self.gist_id = gist_id
        self.reason = reason
        self.message = message
        super().__init__(message)


class WriteFailed(GistMarkdownError):
    """The rendered markdown could not be written to disk."""

    def __init__(self, path: Path, message: str):
        self.path = path
        self.message = message
        super().__init__(message)
