"""Discovery of MDX files to lint."""

import logging
import os
import subprocess
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from mdxlint.utils.paths import normalize_path, to_relative_posix

logger = logging.getLogger(__name__)

MODE_CHANGED = "changed"
MODE_ALL = "all"
MODE_INVALID = "invalid path"


@dataclass
class DiscoveryResult:
    """Files selected for a run and how they were selected."""
    files: list[str] = field(default_factory=list)
    mode: str = MODE_CHANGED


class FileDiscovery:
    """Locate MDX documents under a project root."""

    def __init__(
        self,
        project_root: Path,
        docs_dir: str = "docs",
        extension: str = ".mdx",
        base_branch: str = "master",
    ):
        """Initialize discovery.

        Args:
            project_root: Root of the repository; returned paths are relative to it
            docs_dir: Content directory relative to the project root
            extension: Document file extension
            base_branch: Branch that changed files are compared against
        """
        self.project_root = project_root.resolve()
        self.docs_dir = normalize_path(docs_dir).strip("/")
        self.extension = extension
        self.base_branch = base_branch

    @property
    def docs_root(self) -> Path:
        return self.project_root / self.docs_dir

    def resolve(self, target: str | None = None) -> DiscoveryResult:
        """Select files for a CLI target.

        No target lints changed files, ``all`` lints the whole content
        directory, a directory lints everything below it and a document
        path lints that single file. Anything else selects nothing.
        """
        if not target:
            return DiscoveryResult(self.changed_files(), MODE_CHANGED)

        if target == MODE_ALL:
            return DiscoveryResult(self.all_files(self.docs_root), MODE_ALL)

        target_path = self.project_root / target
        if target_path.is_dir():
            return DiscoveryResult(self.all_files(target_path), f"path: {target}")
        if target_path.is_file() and target.endswith(self.extension):
            return DiscoveryResult([normalize_path(target)], f"file: {target}")

        logger.debug(f"Target does not resolve to a directory or document: {target}")
        return DiscoveryResult([], MODE_INVALID)

    def changed_files(self) -> list[str]:
        """Documents changed in the working tree or on the branch.

        Returns an empty list when git is unavailable or the comparison
        fails, e.g. outside a repository or without the base branch.
        Paths are relative to the project root, which may sit below the
        repository top level.
        """
        try:
            uncommitted = self._git_diff("HEAD")
            committed = self._git_diff(f"{self.base_branch}...HEAD")
        except (OSError, subprocess.CalledProcessError) as e:
            logger.debug(f"Changed-file discovery failed, linting nothing: {e}")
            return []

        prefix = f"{self.docs_dir}/"
        changed = dict.fromkeys(uncommitted + committed)
        return [
            path for path in changed
            if path.startswith(prefix) and path.endswith(self.extension)
        ]

    def all_files(self, directory: Path) -> list[str]:
        """All documents below a directory, relative to the project root."""
        if not directory.is_dir():
            logger.debug(f"Not a directory, nothing to discover: {directory}")
            return []
        return sorted(
            to_relative_posix(path, self.project_root)
            for path in self._find_documents(directory.resolve())
        )

    def _find_documents(self, directory: Path) -> Iterator[Path]:
        for root, dirs, files in os.walk(directory):
            dirs.sort()
            for file in files:
                if file.endswith(self.extension):
                    yield Path(root) / file

    def _git_diff(self, revision: str) -> list[str]:
        result = subprocess.run(
            ["git", "diff", "--name-only", "--relative", revision],
            cwd=self.project_root,
            capture_output=True,
            text=True,
            check=True,
        )
        return [line for line in result.stdout.strip().split("\n") if line]
