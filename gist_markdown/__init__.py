"""Download a GitHub gist and render it as a standalone markdown document."""

from .cli import main
from .github import GistClient, fetch_gist
from .identifier import parse_gist_id
from .markdown import gist_to_markdown
from .models import Gist, GistFile, GistOwner

__all__ = [
    "main",
    "GistClient",
    "fetch_gist",
    "parse_gist_id",
    "gist_to_markdown",
    "Gist",
    "GistFile",
    "GistOwner",
]
