"""Utility helpers for mdxlint."""

from .paths import normalize_path, to_relative_posix

__all__ = ["normalize_path", "to_relative_posix"]
