"""Lint rules for Mintlify MDX documents.

Each rule inspects the raw text line by line with targeted patterns; no syntax
tree is built.
"""

import logging
import re
from pathlib import Path

from ..models import Document, LintIssue, Severity
from ..scanner import FENCE, prose_lines, scan_lines, split_lines
from .catalog import (
    CALLOUT_TYPOS,
    CARD_GROUP,
    CARD_GROUP_COLUMNS,
    CODE_GROUP,
    IMAGE_EXTENSIONS,
    IMAGE_WRAPPER,
    OPEN_TAG_RE,
    PARENT_CHILD,
    REQUIRED_ATTRIBUTES,
)
from .framework import LintContext, LintRule

logger = logging.getLogger(__name__)

FRONTMATTER_RE = re.compile(r"---\n(.*?)\n---", re.DOTALL)
TITLE_RE = re.compile(r"^title:\s*.+", re.MULTILINE)
DESCRIPTION_RE = re.compile(r"^description:\s*.+", re.MULTILINE)

HEADING_RE = re.compile(r"^(#{1,6})\s+")

CODE_FENCE_RE = re.compile(r"^```(\S*)")

MARKDOWN_LINK_RE = re.compile(r"\[([^\]]*)\]\(/([^)#]+)")
HREF_LINK_RE = re.compile(r'href="/([^"#]+)')
IMAGE_PATH_RE = re.compile(
    r"\.(" + "|".join(IMAGE_EXTENSIONS) + r")$", re.IGNORECASE
)


class FrontmatterRule(LintRule):
    """Require a frontmatter block with `title` and `description`."""

    @property
    def name(self) -> str:
        return "frontmatter"

    def check(self, document: Document, context: LintContext) -> list[LintIssue]:
        match = FRONTMATTER_RE.match(document.text)
        if not match:
            return [self.issue(1, Severity.ERROR, "Missing frontmatter")]

        frontmatter = match.group(1)
        issues = []

        if not TITLE_RE.search(frontmatter):
            issues.append(self.issue(
                1, Severity.ERROR, "Frontmatter missing required `title` field"
            ))

        if not DESCRIPTION_RE.search(frontmatter):
            issues.append(self.issue(
                1, Severity.ERROR, "Frontmatter missing required `description` field"
            ))

        return issues


class HeadingRule(LintRule):
    """Validate heading sequencing outside code blocks."""

    @property
    def name(self) -> str:
        return "headings"

    def check(self, document: Document, context: LintContext) -> list[LintIssue]:
        issues = []
        last_level = 0
        h1_count = 0
        total = 0

        for scanned in prose_lines(document.text):
            match = HEADING_RE.match(scanned.text)
            if not match:
                continue

            level = len(match.group(1))
            total += 1

            if level == 1:
                h1_count += 1
                if h1_count > 1:
                    issues.append(self.issue(
                        scanned.number,
                        Severity.ERROR,
                        "Multiple H1 headings found (should have at most one)"
                    ))

            # Compared against the most recent heading only, not a running maximum.
            if last_level > 0 and level > last_level + 1:
                issues.append(self.issue(
                    scanned.number,
                    Severity.WARNING,
                    f"Skipped heading level: H{last_level} → H{level}"
                ))

            last_level = level

        if total == 0:
            issues.append(self.issue(
                1, Severity.WARNING, "No headings found (at least one heading improves SEO)"
            ))

        return issues


class CodeBlockRule(LintRule):
    """Require language tags on code blocks and labels inside <CodeGroup>."""

    @property
    def name(self) -> str:
        return "code-blocks"

    def check(self, document: Document, context: LintContext) -> list[LintIssue]:
        issues = []
        in_code_group = False

        for scanned in scan_lines(document.text):
            line = scanned.text

            if f"<{CODE_GROUP}>" in line:
                in_code_group = True
            if f"</{CODE_GROUP}>" in line:
                in_code_group = False

            if not scanned.opens_fence:
                continue

            lang = CODE_FENCE_RE.match(line).group(1)

            if not lang:
                issues.append(self.issue(
                    scanned.number, Severity.ERROR, "Code block missing language specifier"
                ))
            elif in_code_group and not line[len(FENCE) + len(lang):].strip():
                issues.append(self.issue(
                    scanned.number,
                    Severity.WARNING,
                    f"Code block in <{CODE_GROUP}> should have a label "
                    "(e.g., ```javascript Node.js)"
                ))

        return issues


class ComponentRule(LintRule):
    """Check Mintlify component usage, comment syntax and image wrapping."""

    @property
    def name(self) -> str:
        return "components"

    def check(self, document: Document, context: LintContext) -> list[LintIssue]:
        issues = []
        lines = split_lines(document.text)

        # Open container components; kept for structure only, never validated.
        component_stack: list[tuple[str, int]] = []

        for index, line in enumerate(lines):
            number = index + 1

            if "<!--" in line:
                issues.append(self.issue(
                    number,
                    Severity.ERROR,
                    "Use MDX comments {/* */} instead of HTML comments <!-- -->"
                ))

            for typo, correct in CALLOUT_TYPOS.items():
                if typo in line:
                    issues.append(self.issue(
                        number, Severity.ERROR, f"Typo: {typo} should be {correct}"
                    ))

            tag_match = OPEN_TAG_RE.search(line)
            if tag_match:
                tag = tag_match.group(1)
                attrs = tag_match.group(2) or ""

                for attr in REQUIRED_ATTRIBUTES.get(tag, ()):
                    if f"{attr}=" not in attrs:
                        issues.append(self.issue(
                            number, Severity.WARNING, f"<{tag}> should have `{attr}` attribute"
                        ))

                if tag == CARD_GROUP and CARD_GROUP_COLUMNS not in attrs:
                    issues.append(self.issue(
                        number,
                        Severity.WARNING,
                        f"<{CARD_GROUP}> should have `{CARD_GROUP_COLUMNS}` attribute"
                    ))

                if tag in PARENT_CHILD and "/>" not in line:
                    component_stack.append((tag, number))

            if "<img" in line:
                if f"<{IMAGE_WRAPPER}" not in line and not self._wrapped(
                    lines, index, context.image_lookback
                ):
                    issues.append(self.issue(
                        number, Severity.WARNING, f"Image should be wrapped in <{IMAGE_WRAPPER}>"
                    ))

                if "alt=" not in line:
                    issues.append(self.issue(
                        number, Severity.WARNING, "<img> should have `alt` attribute"
                    ))

        if component_stack:
            logger.debug(f"{document.path}: containers opened {component_stack}")

        return issues

    @staticmethod
    def _wrapped(lines: list[str], index: int, lookback: int) -> bool:
        start = max(0, index - lookback)
        return any(f"<{IMAGE_WRAPPER}" in lines[j] for j in range(index - 1, start - 1, -1))


class InternalLinkRule(LintRule):
    """Warn about root-relative links that do not resolve to a document."""

    @property
    def name(self) -> str:
        return "internal-links"

    def check(self, document: Document, context: LintContext) -> list[LintIssue]:
        issues = []

        for index, line in enumerate(split_lines(document.text)):
            for pattern, group in ((MARKDOWN_LINK_RE, 2), (HREF_LINK_RE, 1)):
                for match in pattern.finditer(line):
                    link_path = match.group(group)

                    if link_path.startswith("http") or link_path.startswith("#"):
                        continue
                    if IMAGE_PATH_RE.search(link_path):
                        continue

                    if not self._resolves(link_path, context):
                        issues.append(self.issue(
                            index + 1,
                            Severity.WARNING,
                            f"Possibly broken internal link: /{link_path}"
                        ))

        return issues

    @staticmethod
    def _resolves(link_path: str, context: LintContext) -> bool:
        root = context.docs_root
        candidates = (
            root / f"{link_path}{context.extension}",
            root / link_path / f"index{context.extension}",
            root / link_path,
        )
        return any(_exists(candidate) for candidate in candidates)


def _exists(path: Path) -> bool:
    # Over-long or otherwise unusable link paths count as missing.
    try:
        return path.exists()
    except (OSError, ValueError):
        return False
