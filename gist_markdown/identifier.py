"""Extract a gist ID from a gist URL or a bare ID."""

import re

from .errors import InvalidIdentifier

# https://gist.github.com/<user>/<id> or https://gist.github.com/<id>
GIST_URL_RE = re.compile(r"gist\.github\.com/(?:[^/]+/)?([a-f0-9]+)")
GIST_ID_RE = re.compile(r"[a-f0-9]+")


def parse_gist_id(value: str) -> str:
    """Return the gist ID contained in ``value``.

    URLs are searched anywhere in the string; otherwise the whole string must
    be a lowercase hex ID. No trimming or case folding is applied.

    Raises:
        InvalidIdentifier: if neither form matches.
    """
    match = GIST_URL_RE.search(value)
    if match:
        return match.group(1)
    if GIST_ID_RE.fullmatch(value):
        return value
    raise InvalidIdentifier(value)
