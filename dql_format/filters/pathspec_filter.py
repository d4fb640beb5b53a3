"""Pathspec-based file filtering.

Directory scans use the pathspec library for gitignore handling,
supporting negation patterns, double-star globs, and nested gitignore files.
"""

import logging
from pathlib import Path

import pathspec

logger = logging.getLogger(__name__)


# Default ignore patterns when no .gitignore exists
DEFAULT_IGNORE_PATTERNS: list[str] = [
    "node_modules/",
    "venv/",
    ".venv/",
    "__pycache__/",
    ".git/",
    "dist/",
    "build/",
    "vendor/",
    "coverage/",
    "*.min.js",
    "*.d.ts",
    ".idea/",
    ".vscode/",
    ".next/",
    "target/",
]


def _load_spec(gitignore_path: Path) -> pathspec.PathSpec:
    with open(gitignore_path, encoding="utf-8") as f:
        return pathspec.PathSpec.from_lines("gitwildmatch", f.readlines())


class PathspecFilter:
    """File filter based on pathspec library with nested gitignore support."""

    def __init__(self, root: Path, include_nested: bool = True):
        """
        Initialize the filter.

        Args:
            root: Scan root directory
            include_nested: Whether to honour .gitignore files in subdirectories
        """
        self.root = root
        self._default_spec = pathspec.PathSpec.from_lines(
            "gitwildmatch", DEFAULT_IGNORE_PATTERNS
        )
        self._root_spec: pathspec.PathSpec | None = None
        self._nested_specs: dict[Path, pathspec.PathSpec] = {}
        self._include_nested = include_nested
        self._load_gitignore()

    def _load_gitignore(self) -> None:
        """Load root .gitignore file."""
        gitignore_path = self.root / ".gitignore"
        if not gitignore_path.exists():
            return
        try:
            self._root_spec = _load_spec(gitignore_path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read {gitignore_path}: {e}")

    def load_directory(self, directory: Path) -> None:
        """
        Load the .gitignore of a subdirectory the walker is entering.

        Only directories that are actually walked get their rules loaded,
        so ignored trees are never read.
        """
        if not self._include_nested or directory == self.root:
            return
        gitignore_path = directory / ".gitignore"
        if not gitignore_path.is_file():
            return
        try:
            self._nested_specs[directory.relative_to(self.root)] = _load_spec(gitignore_path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read {gitignore_path}: {e}")

    def should_ignore(self, path: Path, is_dir: bool = False) -> bool:
        """
        Check if a file or directory should be ignored.

        The built-in defaults always apply. The root .gitignore applies to
        all paths, nested ones to paths in their directory and below.
        Directories are matched with a trailing slash so "dir/" patterns hit.
        """
        try:
            relative = path.relative_to(self.root) if path.is_absolute() else path
        except ValueError:
            return False

        suffix = "/" if is_dir else ""
        relative_str = relative.as_posix() + suffix
        if self._default_spec.match_file(relative_str):
            return True
        if self._root_spec is not None and self._root_spec.match_file(relative_str):
            return True

        for gitignore_relative, spec in self._nested_specs.items():
            try:
                path_from_gitignore = relative.relative_to(gitignore_relative)
            except ValueError:
                continue
            if spec.match_file(path_from_gitignore.as_posix() + suffix):
                return True

        return False
