"""Content hashing for generated artifacts."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Union


def content_hash(content: Union[str, bytes]) -> str:
    """Return the md5 hex digest of ``content`` (text is hashed as UTF-8)."""
    data = content.encode("utf-8") if isinstance(content, str) else content
    return hashlib.md5(data).hexdigest()


def hashed_filename(path: Path, digest: str) -> Path:
    """Return ``path`` with ``digest`` inserted before the suffix (``sprite.<digest>.svg``)."""
    return path.with_name(f"{path.stem}.{digest}{path.suffix}")


__all__ = ["content_hash", "hashed_filename"]
