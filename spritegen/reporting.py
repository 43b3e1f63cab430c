"""Human-readable reporting of generation results."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from .logging import get_logger
from .models import HASH_MODULE, ICONS, SPRITE, TYPES, GenerationResult

_SAVED_LABELS = {
    TYPES: "Types saved to {path}",
    ICONS: "Icon names saved to {path}",
    HASH_MODULE: "Hash file saved to {path}",
}


def file_size_kb(content: str) -> float:
    """Return the UTF-8 size of ``content`` in kilobytes, rounded to two decimals."""
    return round(len(content.encode("utf-8")) / 1024, 2)


def report_result(
    result: GenerationResult,
    *,
    input_dir: Path,
    files: Sequence[Path] = (),
    logger: Optional[logging.Logger] = None,
) -> str:
    """Log the per-artifact outcome and return the one-line summary for the caller to print."""
    logger = logger or get_logger("report")

    sprite = result.artifact(SPRITE)
    if sprite is not None and sprite.changed:
        logger.info("Generating sprite for %s", _relativize(input_dir))
        for file in files:
            logger.info("  + %s", _relativize(Path(file)))
        if result.sprite_size_kb is not None:
            logger.info("File size: %s KB", result.sprite_size_kb)
        if result.content_hash:
            logger.info("Generated sprite with hash %s", result.content_hash)
        logger.info("Saved to %s", _relativize(sprite.reported_path))

    for artifact in result.artifacts:
        template = _SAVED_LABELS.get(artifact.kind)
        if template and artifact.changed:
            logger.info(template.format(path=_relativize(artifact.path)))

    if result.changed:
        summary = f"Generated {len(result.identifiers)} icons"
    else:
        summary = "Icons are up to date"
    return summary


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


__all__ = ["file_size_kb", "report_result"]
