"""Data models for mdxlint."""

from .document import Document, LintIssue, Severity

__all__ = ["Document", "LintIssue", "Severity"]
