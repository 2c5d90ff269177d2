"""Core lint framework for MDX documents.

Rules are independent and stateless across files. The engine runs every enabled
rule against one document, isolates rule failures, and merges the results into a
line-ordered issue list. ``RunSummary`` accumulates per-file results for a run.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from ..config import MdxlintConfig
from ..models import Document, LintIssue, Severity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LintContext:
    """Run-wide inputs that rules may consult."""
    docs_root: Path
    extension: str = ".mdx"
    image_lookback: int = 5

    @classmethod
    def from_config(cls, config: MdxlintConfig) -> "LintContext":
        return cls(
            docs_root=config.docs_root,
            extension=config.docs.extension,
            image_lookback=config.rules.image_lookback,
        )


class LintRule(ABC):
    """Base class for lint rules."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Rule name for identification."""
        pass

    @abstractmethod
    def check(self, document: Document, context: LintContext) -> list[LintIssue]:
        """Check one document.

        Args:
            document: Document to check
            context: Run-wide lint inputs

        Returns:
            Issues in emission order
        """
        pass

    def issue(self, line: int, severity: Severity, message: str) -> LintIssue:
        return LintIssue(line=line, severity=severity, message=message, rule=self.name)


@dataclass
class FileReport:
    """Issues found in a single file, sorted by line."""
    path: str
    issues: list[LintIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[LintIssue]:
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[LintIssue]:
        return [i for i in self.issues if i.severity == Severity.WARNING]


@dataclass
class RunSummary:
    """Aggregated results of a lint run."""
    mode: str = ""
    files: list[str] = field(default_factory=list)
    errors: list[tuple[str, LintIssue]] = field(default_factory=list)
    warnings: list[tuple[str, LintIssue]] = field(default_factory=list)

    @property
    def files_checked(self) -> int:
        return len(self.files)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    @property
    def exit_code(self) -> int:
        """Exit code for CI: 0 = clean or warnings only, 1 = errors."""
        return 1 if self.errors else 0

    def add_report(self, report: FileReport) -> None:
        """Append one file's issues, keeping file-then-line order."""
        self.files.append(report.path)
        for issue in report.issues:
            if issue.severity == Severity.ERROR:
                self.errors.append((report.path, issue))
            else:
                self.warnings.append((report.path, issue))

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "mode": self.mode,
            "files_checked": self.files_checked,
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "exit_code": self.exit_code,
            "errors": [{"path": path, **issue.to_dict()} for path, issue in self.errors],
            "warnings": [{"path": path, **issue.to_dict()} for path, issue in self.warnings],
        }


class LintEngine:
    """Runs lint rules over documents."""

    def __init__(self, config: MdxlintConfig):
        self.config = config
        self.context = LintContext.from_config(config)
        self.rules: list[LintRule] = []

    def add_rule(self, rule: LintRule) -> None:
        """Add a lint rule."""
        self.rules.append(rule)

    def create_default_rules(self) -> None:
        """Register the built-in rules, skipping those disabled in config."""
        from .rules import (
            CodeBlockRule,
            ComponentRule,
            FrontmatterRule,
            HeadingRule,
            InternalLinkRule,
        )

        disabled = set(self.config.rules.disabled)
        for rule in (
            FrontmatterRule(),
            HeadingRule(),
            CodeBlockRule(),
            ComponentRule(),
            InternalLinkRule(),
        ):
            if rule.name in disabled:
                logger.debug(f"Rule disabled by configuration: {rule.name}")
                continue
            self.add_rule(rule)

    def lint_document(self, document: Document) -> FileReport:
        """Run every rule on a document and sort the issues by line."""
        issues: list[LintIssue] = []

        for rule in self.rules:
            logger.debug(f"Executing rule {rule.name} on {document.path}")
            try:
                issues.extend(rule.check(document, self.context))
            except Exception as e:
                logger.error(f"Rule {rule.name} failed on {document.path}: {e}")
                issues.append(rule.issue(
                    1,
                    Severity.ERROR,
                    f"Rule {rule.name} failed with error: {e}"
                ))

        # sorted() is stable, ties keep rule emission order
        return FileReport(document.path, sorted(issues, key=lambda i: i.line))

    def lint_file(self, relative_path: str) -> FileReport:
        """Read and lint a file given relative to the project root."""
        full_path = self.config.project_root / relative_path
        if not full_path.is_file():
            logger.info(f"File not found: {full_path}")
            return FileReport(relative_path, [
                LintIssue(line=1, severity=Severity.ERROR, message="File not found")
            ])

        try:
            document = Document.read(full_path, relative_path)
        except OSError as e:
            logger.error(f"Could not read {full_path}: {e}")
            return FileReport(relative_path, [
                LintIssue(line=1, severity=Severity.ERROR, message=f"Could not read file: {e}")
            ])

        return self.lint_document(document)

    def run(self, files: list[str], mode: str = "") -> RunSummary:
        """Lint files sequentially and aggregate the results."""
        summary = RunSummary(mode=mode)

        logger.info(f"Linting {len(files)} files ({mode}) with {len(self.rules)} rules")

        for relative_path in files:
            summary.add_report(self.lint_file(relative_path))

        logger.info(
            f"Lint completed: {summary.error_count} errors, {summary.warning_count} warnings"
        )
        return summary
