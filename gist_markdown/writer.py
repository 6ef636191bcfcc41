"""Write rendered markdown to disk."""

from pathlib import Path

from .errors import WriteFailed


def default_output_path(gist_id: str, cwd: Path | None = None) -> Path:
    """``gist-<id>.md`` in ``cwd`` (default: the current directory)."""
    return (cwd or Path.cwd()) / f"gist-{gist_id}.md"


def write_markdown(path: Path, markdown: str) -> Path:
    """Create or overwrite ``path`` with ``markdown`` encoded as UTF-8.

    Raises:
        WriteFailed: on any filesystem error. A partially written file is
        left in place.
    """
    path = Path(path)
    try:
        path.write_text(markdown, encoding="utf-8")
    except OSError as e:
        raise WriteFailed(path, e.strerror or str(e)) from e
    return path
