"""CLI interface for mdxlint using Typer framework."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from mdxlint import __description__, __version__
from mdxlint.config import OutputFormat, load_config
from mdxlint.discovery import FileDiscovery
from mdxlint.lint import LintEngine
from mdxlint.log import configure_logging
from mdxlint.report import ReportRenderer

# Exit status for configuration problems, distinct from lint failures.
EXIT_CONFIG_ERROR = 2

app = typer.Typer(
    name="mdxlint",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"mdxlint version {__version__}")
        raise typer.Exit()


@app.command()
def lint(
    target: Annotated[
        Optional[str],
        typer.Argument(
            help="Omit to lint changed files, 'all' for every document, "
                 "or a directory or .mdx file relative to the project root"
        )
    ] = None,
    format: Annotated[
        Optional[OutputFormat],
        typer.Option("--format", "-f", help="Output format (default: from config, markdown)")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .mdxlint.json)")
    ] = None,
    root: Annotated[
        Optional[Path],
        typer.Option("--root", help="Project root (default: from config, current directory)")
    ] = None,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True,
                     help="Show version and exit")
    ] = False,
) -> None:
    """Lint MDX documentation sources."""
    try:
        mdx_config = load_config(config)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(EXIT_CONFIG_ERROR)

    if root is not None:
        mdx_config.base_dir = root.resolve()
        mdx_config.project.root = "."

    configure_logging(mdx_config.logging.level)

    discovery = FileDiscovery(
        mdx_config.project_root,
        docs_dir=mdx_config.docs.dir,
        extension=mdx_config.docs.extension,
        base_branch=mdx_config.docs.base_branch,
    )
    selection = discovery.resolve(target)

    engine = LintEngine(mdx_config)
    engine.create_default_rules()
    summary = engine.run(selection.files, selection.mode)

    ReportRenderer(console).render(summary, format or mdx_config.output.format)

    raise typer.Exit(summary.exit_code)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
