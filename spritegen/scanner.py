"""Discovery of SVG source files below the configured input directory."""

from __future__ import annotations

import os
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterator, List, Sequence

from .config import ConfigError

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    "node_modules",
    "__pycache__",
    ".spritegen",
}

_SOURCE_SUFFIX = ".svg"


class SourceScanner:
    """Walks an input directory and returns SVG sources in a stable order."""

    def __init__(self, exclude: Sequence[str] = ()) -> None:
        self.exclude = list(exclude)

    def scan(self, input_dir: Path) -> List[Path]:
        """Return every ``*.svg`` file under ``input_dir`` sorted by relative POSIX path."""
        root = Path(input_dir).expanduser()
        if not root.exists():
            raise ConfigError(f"Icon input directory not found: {input_dir}")
        if not root.is_dir():
            raise ConfigError(f"Icon input path is not a directory: {input_dir}")

        found = [
            (path.relative_to(root).as_posix(), path)
            for path in self._iter_files(root)
        ]
        found.sort(key=lambda item: item[0])
        return [path for _, path in found]

    def _iter_files(self, root: Path) -> Iterator[Path]:
        for dirpath, dirnames, filenames in os.walk(root):
            current_dir = Path(dirpath)
            rel_dir = current_dir.relative_to(root).as_posix() if current_dir != root else ""
            dirnames[:] = [
                name
                for name in dirnames
                if name not in _EXCLUDED_DIRS
                and not name.startswith(".")
                and not self._is_excluded(f"{rel_dir}/{name}" if rel_dir else name)
            ]
            for filename in filenames:
                if not filename.lower().endswith(_SOURCE_SUFFIX):
                    continue
                rel_path = f"{rel_dir}/{filename}" if rel_dir else filename
                if self._is_excluded(rel_path):
                    continue
                yield current_dir / filename

    def _is_excluded(self, rel_path: str) -> bool:
        return any(fnmatchcase(rel_path, pattern) for pattern in self.exclude)


def discover_sources(input_dir: Path, exclude: Sequence[str] = ()) -> List[Path]:
    """Module-level shortcut for :meth:`SourceScanner.scan`."""
    return SourceScanner(exclude).scan(input_dir)


__all__ = ["SourceScanner", "discover_sources"]
