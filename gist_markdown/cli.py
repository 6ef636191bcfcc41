"""Command-line entry point: download a gist and save it as markdown."""

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from .console import Console
from .credentials import TokenProvider, resolve_token
from .errors import FetchFailed, InvalidIdentifier, WriteFailed
from .github import GistClient, fetch_gist
from .identifier import parse_gist_id
from .markdown import gist_to_markdown
from .settings import get_settings
from .writer import default_output_path, write_markdown

DIST_NAME = "gist-markdown"
FALLBACK_VERSION = "0.1.0"

EXAMPLES = """\
examples:
  %(prog)s https://gist.github.com/user/abc123   Download gist abc123
  %(prog)s abc123def456                          Download gist using just the ID
  %(prog)s abc123 -o my-gist.md                  Save to specific file
  %(prog)s abc123 --token ghp_xxx                Use specific GitHub token
"""


def get_version() -> str:
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return FALLBACK_VERSION


class ArgumentParser(argparse.ArgumentParser):
    """Exits with status 1 on usage errors, like every other failure."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = ArgumentParser(
        prog="gh-download-gist",
        description="Download a GitHub gist and convert it to markdown",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "gist",
        help="GitHub gist URL or gist ID",
    )
    parser.add_argument(
        "-t",
        "--token",
        default=get_settings().github_token,
        help="GitHub personal access token (required for private gists, default: $GITHUB_TOKEN)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output file path (default: gist-<id>.md in current directory)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {get_version()}",
    )
    return parser


def run(
    gist_input: str,
    token: str | None = None,
    output: Path | None = None,
    console: Console | None = None,
    token_helper: TokenProvider | None = None,
    client: GistClient | None = None,
) -> Path:
    """Parse, resolve credentials, fetch, render and write one gist.

    Returns the path written. Errors propagate to the caller.
    """
    console = console or Console()

    gist_id = parse_gist_id(gist_input)

    resolved = resolve_token(token, helper=token_helper)
    if token is None and resolved:
        console.note("🔑 Using GitHub token from gh CLI")

    gist = fetch_gist(gist_id, resolved, console=console, client=client or GistClient(resolved))

    console.info("📝 Converting to markdown...")
    markdown = gist_to_markdown(gist)

    path = write_markdown(output or default_output_path(gist_id), markdown)
    console.success(f"✅ Gist saved to: {path}")
    return path


def main(
    argv: list[str] | None = None,
    console: Console | None = None,
    token_helper: TokenProvider | None = None,
    client: GistClient | None = None,
) -> int:
    """Run the CLI and return the process exit code."""
    console = console or Console()
    args = build_parser().parse_args(argv)

    try:
        run(
            args.gist,
            token=args.token,
            output=args.output,
            console=console,
            token_helper=token_helper,
            client=client,
        )
    except InvalidIdentifier:
        console.error("❌ Invalid gist URL or format")
        console.warn("   Expected: https://gist.github.com/user/abc123 or abc123")
        return 1
    except FetchFailed:
        # Already reported by fetch_gist
        return 1
    except WriteFailed as e:
        console.error(f"❌ Failed to write file: {e.message}")
        return 1
    except Exception as e:
        console.error(f"💥 Script failed: {e}")
        return 1
    return 0


def entrypoint() -> None:
    sys.exit(main())


if __name__ == "__main__":
    entrypoint()
