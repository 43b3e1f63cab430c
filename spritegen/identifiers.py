"""Icon identifier derivation from source file paths."""

from __future__ import annotations

import os
import re
from pathlib import Path, PurePosixPath
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .config import ConfigError

PathLike = Union[str, os.PathLike]

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_SEPARATORS = re.compile(r"[^a-z0-9]+")


class IdentifierCollisionError(ConfigError):
    """Raised when two source files map to the same icon identifier."""

    def __init__(self, identifier: str, first: Path, second: Path) -> None:
        self.identifier = identifier
        self.first = first
        self.second = second
        super().__init__(
            f"Icon identifier '{identifier}' is produced by both {first} and {second}; rename one of them"
        )


def derive_identifier(path: PathLike, input_dir: Optional[PathLike] = None) -> str:
    """Return the kebab-case identifier for ``path``.

    The input directory prefix and the ``.svg`` extension are removed and each
    remaining path segment is kebab-cased; nested directories are joined with
    ``-`` so ``arrows/ArrowLeft.svg`` becomes ``arrows-arrow-left``. The result
    only contains ``[a-z0-9-]`` and can be embedded unescaped in an XML
    attribute or a quoted string literal.
    """
    parts = list(_relative_parts(path, input_dir))
    if not parts:
        raise ConfigError(f"Cannot derive an icon identifier from '{path}'")
    stem, suffix = os.path.splitext(parts[-1])
    if suffix.lower() == ".svg":
        parts[-1] = stem

    segments = [segment for segment in (_kebab(part) for part in parts) if segment]
    identifier = "-".join(segments)
    if not identifier:
        raise ConfigError(f"Cannot derive an icon identifier from '{path}'")
    return identifier


def derive_identifiers(
    files: Iterable[PathLike], input_dir: Optional[PathLike] = None
) -> List[str]:
    """Derive identifiers in input order, failing fast on duplicates."""
    seen: Dict[str, Path] = {}
    identifiers: List[str] = []
    for file in files:
        identifier = derive_identifier(file, input_dir)
        source = Path(file)
        if identifier in seen:
            raise IdentifierCollisionError(identifier, seen[identifier], source)
        seen[identifier] = source
        identifiers.append(identifier)
    return identifiers


def _relative_parts(path: PathLike, input_dir: Optional[PathLike]) -> Tuple[str, ...]:
    candidate = _posix(path)
    if input_dir is None:
        return (candidate.name,) if candidate.name else ()

    base = _posix(input_dir)
    try:
        return candidate.relative_to(base).parts
    except ValueError:
        pass

    if candidate.is_absolute():
        resolved = PurePosixPath(Path(os.fspath(path)).resolve().as_posix())
        resolved_base = PurePosixPath(Path(os.fspath(input_dir)).resolve().as_posix())
        try:
            return resolved.relative_to(resolved_base).parts
        except ValueError:
            return (candidate.name,)

    # Relative paths outside the input directory are taken as already relative to it.
    return tuple(part for part in candidate.parts if part not in {".", ".."})


def _posix(value: PathLike) -> PurePosixPath:
    return PurePosixPath(os.fspath(value).replace("\\", "/"))


def _kebab(segment: str) -> str:
    spaced = _ACRONYM_BOUNDARY.sub(r"\1-\2", segment)
    spaced = _CAMEL_BOUNDARY.sub(r"\1-\2", spaced)
    return _SEPARATORS.sub("-", spaced.lower()).strip("-")


__all__ = ["IdentifierCollisionError", "derive_identifier", "derive_identifiers"]
