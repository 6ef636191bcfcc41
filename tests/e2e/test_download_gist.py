"""E2E tests: download a real public gist through the CLI."""

# Gist #1 is the oldest public gist on GitHub and is not expected to change
PUBLIC_GIST_ID = "1"


def test_downloads_public_gist(run_cli, tmp_path):
    result = run_cli(PUBLIC_GIST_ID)

    assert result.returncode == 0, f"download failed:\n{result.stdout}\n{result.stderr}"
    markdown = (tmp_path / f"gist-{PUBLIC_GIST_ID}.md").read_text(encoding="utf-8")
    assert f"**Gist ID:** [{PUBLIC_GIST_ID}](" in markdown
    assert "## Files" in markdown
    assert "### 1. " in markdown


def test_unknown_gist_fails_without_output(run_cli, tmp_path):
    result = run_cli("ffffffffffffffffffffffffffffffff")

    assert result.returncode == 1
    assert "not found" in result.stdout or "forbidden" in result.stdout
    assert list(tmp_path.glob("gist-*.md")) == []


def test_invalid_input(run_cli):
    result = run_cli("not-a-valid-id!")

    assert result.returncode == 1
    assert "Invalid gist URL" in result.stdout
