"""Rendering of lint run summaries."""

import json

from rich.console import Console
from rich.table import Table
from rich.text import Text

from mdxlint.config import OutputFormat
from mdxlint.discovery import MODE_CHANGED
from mdxlint.lint import RunSummary


class ReportRenderer:
    """Render a RunSummary to a rich console in one of the output formats."""

    def __init__(self, console: Console):
        self.console = console

    def render(self, summary: RunSummary, output_format: OutputFormat | str) -> None:
        output_format = OutputFormat(output_format)
        if output_format == OutputFormat.JSON:
            self._line(json.dumps(summary.to_dict(), indent=2, ensure_ascii=False))
        elif output_format == OutputFormat.TABLE:
            self.render_table(summary)
        else:
            self.render_markdown(summary)

    def render_markdown(self, summary: RunSummary) -> None:
        """Markdown report, suitable for CI logs and PR comments."""
        self._line("## Lint Results\n")
        self._line("### Files checked")
        self._line(f"- {summary.files_checked} files ({summary.mode})")

        if summary.files_checked == 0:
            if summary.mode == MODE_CHANGED:
                self._line("- No changed MDX files found\n")
            else:
                self._line("- No files to check\n")
            self._line("### ✅ Summary")
            self._line("- 0 files checked, 0 errors, 0 warnings")
            return

        self._line("")

        if summary.errors:
            self._line("### ❌ Errors (must fix)")
            for path, issue in summary.errors:
                self._line(f"- `{path}:{issue.line}` — {issue.message}")
            self._line("")

        if summary.warnings:
            self._line("### ⚠️ Warnings (should fix)")
            for path, issue in summary.warnings:
                self._line(f"- `{path}:{issue.line}` — {issue.message}")
            self._line("")

        if not summary.errors and not summary.warnings:
            self._line("### ✅ All checks passed\n")

        self._line("### Summary")
        self._line(self._totals(summary))

    def render_table(self, summary: RunSummary) -> None:
        self._line(f"Files checked: {summary.files_checked} ({summary.mode})")

        entries = summary.errors + summary.warnings
        if entries:
            table = Table()
            table.add_column("Location", style="cyan")
            table.add_column("Severity", style="white")
            table.add_column("Rule", style="dim")
            table.add_column("Message", style="white")

            for path, issue in entries:
                color = "red" if issue.severity.value == "error" else "yellow"
                table.add_row(
                    Text(f"{path}:{issue.line}"),
                    f"[{color}]{issue.severity.value.upper()}[/{color}]",
                    issue.rule or "",
                    Text(issue.message),
                )

            self.console.print(table)
        elif summary.files_checked:
            self.console.print("[green]All checks passed![/green]")

        self._line(self._totals(summary))

    @staticmethod
    def _totals(summary: RunSummary) -> str:
        return (
            f"- {summary.files_checked} files checked, "
            f"{summary.error_count} errors, {summary.warning_count} warnings"
        )

    def _line(self, text: str) -> None:
        # Report text is printed verbatim: no markup, emoji codes or wrapping.
        self.console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)
