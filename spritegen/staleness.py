"""Fast pre-check deciding whether any artifact needs regeneration."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Mapping, Sequence

from .logging import get_logger
from .sprite.markup import symbol_ids

_UNION_DECLARATION = re.compile(r"export\s+type\s+IconName\s*=(?P<body>[^;]*);", re.DOTALL)
_QUOTED_LITERAL = re.compile(r"'([^'\n]*)'|\"([^\"\n]*)\"")

logger = get_logger("staleness")


def read_text_or_empty(path: Path) -> str:
    """Return file contents, or an empty string when the file does not exist.

    Undecodable bytes are replaced so a corrupted artifact reads as stale.
    """
    try:
        return Path(path).read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError:
        return ""


def declared_identifiers(types_text: str) -> List[str]:
    """Return the string literals of the ``IconName`` union, in declaration order."""
    match = _UNION_DECLARATION.search(types_text)
    if match is None:
        return []
    return [single or double for single, double in _QUOTED_LITERAL.findall(match.group("body"))]


def is_up_to_date(
    desired: Sequence[str], current_sprite_text: str, current_types_text: str
) -> bool:
    """Return True when both artifacts already list exactly ``desired``, in order.

    Extra identifiers left behind by deleted sources and reordered inputs both
    count as stale. Changed markup of an existing icon is not detected here.
    """
    desired_list = list(desired)
    if not desired_list:
        return False

    try:
        sprite_ids = symbol_ids(current_sprite_text)
    except ET.ParseError as exc:
        logger.debug("Current sprite is not parseable (%s); treating as stale", exc)
        return False
    if sprite_ids != desired_list:
        logger.debug("Sprite identifiers differ from sources")
        return False

    if declared_identifiers(current_types_text) != desired_list:
        logger.debug("Type declarations differ from sources")
        return False
    return True


def companions_match(expected: Mapping[Path, str]) -> bool:
    """Return True when every path already holds exactly its expected text."""
    for path, content in expected.items():
        if read_text_or_empty(path) != content:
            logger.debug("%s is missing or out of date", path)
            return False
    return True


__all__ = ["companions_match", "declared_identifiers", "is_up_to_date", "read_text_or_empty"]
