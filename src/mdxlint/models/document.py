"""Models for linted documents and the issues found in them."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Severity(str, Enum):
    """Issue severity. Only errors affect the exit status."""
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class LintIssue:
    """A single rule violation at a 1-indexed line."""
    line: int
    severity: Severity
    message: str
    rule: str | None = None

    def __str__(self) -> str:
        return f"[{self.severity.value.upper()}] line {self.line}: {self.message}"

    def to_dict(self) -> dict:
        return {
            "line": self.line,
            "severity": self.severity.value,
            "message": self.message,
            "rule": self.rule,
        }


@dataclass(frozen=True)
class Document:
    """Raw text of one MDX file plus its logical path."""
    path: str
    text: str

    @classmethod
    def read(cls, file_path: Path, logical_path: str) -> "Document":
        """Read a document from disk as UTF-8, keeping line endings as written."""
        with open(file_path, encoding="utf-8", errors="replace", newline="") as f:
            text = f.read()
        return cls(path=logical_path, text=text)
