"""Render a fetched gist as a standalone markdown document."""

from datetime import datetime, timezone
from pathlib import PurePosixPath

from .models import Gist, GistFile

UNTITLED = "Untitled Gist"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S UTC"


def format_timestamp(value: datetime | None) -> str:
    """Fixed UTC format so output does not depend on the host locale."""
    if value is None:
        return "Unknown"
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(TIMESTAMP_FORMAT)


def fence_language(name: str, file: GistFile) -> str:
    """Language tag for a file's code fence.

    Declared language lower-cased, else the file extension, else ``text``.
    """
    if file.language:
        return file.language.lower()
    return PurePosixPath(name).suffix[1:] or "text"


def _render_metadata(gist: Gist) -> str:
    lines = [f"**Gist ID:** [{gist.id}]({gist.web_url})"]
    if gist.owner:
        lines.append(f"**Author:** [@{gist.owner.login}]({gist.owner.profile_url})")
    else:
        lines.append("**Author:** Anonymous")
    lines.append(f"**Public:** {'Yes' if gist.public else 'No'}")
    lines.append(f"**Created:** {format_timestamp(gist.created_at)}")
    lines.append(f"**Updated:** {format_timestamp(gist.updated_at)}")
    lines.append(f"**Files:** {len(gist.files)}")
    if gist.description:
        lines.append(f"**Description:** {gist.description}")
    # Two trailing spaces force a markdown line break
    return "".join(f"{line}  \n" for line in lines)


def _render_file(index: int, name: str, file: GistFile, fallback_url: str) -> str:
    out = f"### {index}. {name}\n\n"

    if file.language:
        out += f"**Language:** {file.language}  \n"
    out += f"**Size:** {file.size} bytes  \n"
    if file.raw_url:
        out += f"**Raw URL:** [{file.raw_url}]({file.raw_url})  \n"
    out += "\n"

    if file.content:
        out += f"```{fence_language(name, file)}\n{file.content}\n```\n\n"
    elif file.truncated:
        url = file.raw_url or fallback_url
        out += f"*File content truncated. Download from [{url}]({url})*\n\n"
    return out


def gist_to_markdown(gist: Gist) -> str:
    """Build the markdown document for ``gist``.

    Files appear in the order the API returned them, each numbered from 1 and
    separated by a horizontal rule.
    """
    markdown = f"# {gist.description or UNTITLED}\n\n"
    markdown += _render_metadata(gist)
    markdown += "\n---\n\n"
    markdown += "## Files\n\n"

    sections = [
        _render_file(index, name, file, gist.web_url)
        for index, (name, file) in enumerate(gist.files.items(), start=1)
    ]
    markdown += "---\n\n".join(sections)
    return markdown
