"""Change-detected artifact writes."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Optional

from .hashing import content_hash
from .logging import get_logger

logger = get_logger("writer")

_DEFAULT_MODE = 0o644


def write_if_changed(
    path: Path,
    new_content: str,
    *,
    expected_hash: Optional[str] = None,
    force: bool = False,
) -> bool:
    """Write ``new_content`` to ``path`` only when it differs from what is on disk.

    With ``expected_hash`` the decision compares that digest against the hash of
    the existing file instead of comparing raw text. ``force`` always writes.
    Returns True when a write happened.
    """
    path = Path(path)
    existing = _read_existing(path)

    if force:
        reason = "forced"
    elif existing is None:
        if not new_content and expected_hash is None:
            logger.debug("Skipping %s: no file and nothing to write", path)
            return False
        reason = "missing"
    elif expected_hash is not None:
        if content_hash(existing) == expected_hash:
            logger.debug("Skipping %s: hash %s unchanged", path, expected_hash)
            return False
        reason = "hash changed"
    elif existing == new_content:
        logger.debug("Skipping %s: content unchanged", path)
        return False
    else:
        reason = "content changed"

    _atomic_write(path, new_content)
    logger.debug("Wrote %s (%s)", path, reason)
    return True


def _read_existing(path: Path) -> Optional[str]:
    # Undecodable bytes become U+FFFD and compare as changed.
    try:
        with path.open("r", encoding="utf-8", errors="replace", newline="") as handle:
            return handle.read()
    except FileNotFoundError:
        return None


def _atomic_write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    mode = _target_mode(path)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


def _target_mode(path: Path) -> int:
    # mkstemp creates 0600 files; keep the current mode or fall back to world-readable.
    try:
        return path.stat().st_mode & 0o777
    except FileNotFoundError:
        return _DEFAULT_MODE


__all__ = ["write_if_changed"]
