"""Rule-checking engine for MDX documents.

The engine applies independent line-oriented rules to each document and aggregates
their issues into a run summary suitable for CI gating.
"""

from .framework import FileReport, LintContext, LintEngine, LintRule, RunSummary
from .rules import (
    CodeBlockRule,
    ComponentRule,
    FrontmatterRule,
    HeadingRule,
    InternalLinkRule,
)

__all__ = [
    "LintEngine",
    "LintContext",
    "LintRule",
    "FileReport",
    "RunSummary",
    "FrontmatterRule",
    "HeadingRule",
    "CodeBlockRule",
    "ComponentRule",
    "InternalLinkRule",
]
