"""Unit tests for the mdxlint CLI."""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from mdxlint import __version__
from mdxlint.cli import app

runner = CliRunner()

VALID_PAGE = """---
title: Quickstart
description: Get going in five minutes
---

# Quickstart

```bash
npm i mint
```
"""


@pytest.fixture(autouse=True)
def no_config_search():
    """Keep tests independent of any .mdxlint.json above the working directory."""
    with patch("mdxlint.config.find_config_file", return_value=None):
        yield


@pytest.fixture
def project(tmp_path):
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "quickstart.mdx").write_text(VALID_PAGE, encoding="utf-8")
    return tmp_path


def invoke(project, *args):
    return runner.invoke(app, [*args, "--root", str(project)])


class TestLintCommand:
    """Test the lint entry point."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"mdxlint version {__version__}" in result.stdout

    def test_all_clean(self, project):
        result = invoke(project, "all")

        assert result.exit_code == 0
        assert "- 1 files (all)" in result.stdout
        assert "### ✅ All checks passed" in result.stdout
        assert "- 1 files checked, 0 errors, 0 warnings" in result.stdout

    def test_errors_exit_one(self, project):
        (project / "docs" / "broken.mdx").write_text("# Broken\n```\nx\n```\n", encoding="utf-8")

        result = invoke(project, "docs/broken.mdx")

        assert result.exit_code == 1
        assert "- 1 files (file: docs/broken.mdx)" in result.stdout
        assert "- `docs/broken.mdx:1` — Missing frontmatter" in result.stdout
        assert "- `docs/broken.mdx:2` — Code block missing language specifier" in result.stdout

    def test_warnings_only_exit_zero(self, project):
        (project / "docs" / "links.mdx").write_text(
            VALID_PAGE + "\nSee [missing](/nowhere).\n", encoding="utf-8"
        )

        result = invoke(project, "docs/links.mdx")

        assert result.exit_code == 0
        assert "### ⚠️ Warnings (should fix)" in result.stdout
        assert "Possibly broken internal link: /nowhere" in result.stdout

    def test_directory_target(self, project):
        (project / "docs" / "guides").mkdir()
        (project / "docs" / "guides" / "a.mdx").write_text(VALID_PAGE, encoding="utf-8")

        result = invoke(project, "docs/guides")

        assert result.exit_code == 0
        assert "- 1 files (path: docs/guides)" in result.stdout

    def test_invalid_path(self, project):
        result = invoke(project, "docs/does-not-exist")

        assert result.exit_code == 0
        assert "- 0 files (invalid path)" in result.stdout
        assert "- No files to check" in result.stdout
        assert "- 0 files checked, 0 errors, 0 warnings" in result.stdout

    def test_changed_mode_without_git(self, project):
        with patch("mdxlint.discovery.subprocess.run", side_effect=FileNotFoundError("git")):
            result = invoke(project)

        assert result.exit_code == 0
        assert "- 0 files (changed)" in result.stdout
        assert "- No changed MDX files found" in result.stdout

    def test_changed_mode_reports_deleted_file(self, project):
        with patch(
            "mdxlint.discovery.FileDiscovery.changed_files",
            return_value=["docs/deleted.mdx"],
        ):
            result = invoke(project)

        assert result.exit_code == 1
        assert "- `docs/deleted.mdx:1` — File not found" in result.stdout

    def test_json_format(self, project):
        result = invoke(project, "all", "--format", "json")

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["mode"] == "all"
        assert data["files_checked"] == 1
        assert data["errors"] == []

    def test_config_file(self, project):
        (project / "docs" / "nohead.mdx").write_text(
            "---\ntitle: T\ndescription: D\n---\ntext\n", encoding="utf-8"
        )
        config_file = project / ".mdxlint.json"
        config_file.write_text(json.dumps({
            "rules": {"disabled": ["headings"]},
            "output": {"format": "json"},
        }))

        result = runner.invoke(app, ["all", "--config", str(config_file)])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["files_checked"] == 2
        assert data["warnings"] == []

    def test_invalid_config(self, project):
        config_file = project / ".mdxlint.json"
        config_file.write_text(json.dumps({"rules": {"disabled": ["spelling"]}}))

        result = runner.invoke(app, ["all", "--config", str(config_file)])

        assert result.exit_code == 2
        assert "Error:" in result.stdout

    def test_missing_config_file(self, project):
        result = runner.invoke(app, ["all", "--config", str(project / "absent.json")])

        assert result.exit_code == 2
        assert "Config file not found" in result.stdout
