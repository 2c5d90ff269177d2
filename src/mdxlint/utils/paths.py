"""Path normalization utilities for cross-platform compatibility."""

from pathlib import Path


def normalize_path(path: str) -> str:
    """Convert any path to canonical forward slash format.

    Reported paths and discovery results use forward slashes regardless of
    platform so that output is stable across CI runners.

    Examples:
        >>> normalize_path("docs\\\\api\\\\intro.mdx")
        'docs/api/intro.mdx'
        >>> normalize_path("docs/api/intro.mdx")
        'docs/api/intro.mdx'
    """
    if not path:
        return path

    return path.replace("\\", "/")


def to_relative_posix(path: Path, root: Path) -> str:
    """Express ``path`` relative to ``root`` with forward slashes.

    Paths outside ``root`` are returned absolute.
    """
    try:
        return normalize_path(str(path.relative_to(root)))
    except ValueError:
        return normalize_path(str(path))
