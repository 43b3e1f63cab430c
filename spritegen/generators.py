"""Renderers for the generated artifacts."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional, Sequence

from .hashing import hashed_filename
from .models import HASH_MODULE, ICONS, SPRITE, TYPES, ArtifactPlan, GenerationOptions

SPRITE_FILENAME = "sprite.svg"
TYPES_DIRNAME = "types"
TYPES_FILENAME = "icon-name.d.ts"
TYPES_IMPORT = "./types/icon-name"
SETTINGS_FILENAME = "settings.json"


def sprite_path(options: GenerationOptions) -> Path:
    return options.sprite_output_dir / SPRITE_FILENAME


def types_path(options: GenerationOptions) -> Path:
    return options.output_dir / TYPES_DIRNAME / TYPES_FILENAME


def icons_path(options: GenerationOptions) -> Path:
    return options.output_dir / f"icons.{options.output_format}"


def hash_module_path(options: GenerationOptions) -> Path:
    return options.output_dir / f"hash.{options.output_format}"


def settings_path(options: GenerationOptions) -> Path:
    return options.output_dir / SETTINGS_FILENAME


def render_types(identifiers: Sequence[str]) -> str:
    """Render the ``IconName`` union, one literal per line in input order."""
    if not identifiers:
        return "export type IconName = never;\n"
    members = "\n".join(f"\t| {_literal(name)}" for name in identifiers)
    return f"export type IconName =\n{members};\n"


def render_icons(identifiers: Sequence[str], output_format: str = "ts") -> str:
    """Render the exported ``icons`` array typed against ``IconName``."""
    entries = "".join(f"\t{_literal(name)},\n" for name in identifiers)
    if output_format == "js":
        return (
            f"/** @type {{Array<import('{TYPES_IMPORT}').IconName>}} */\n"
            f"export const icons = [\n{entries}];\n"
        )
    return (
        f"import {{ IconName }} from '{TYPES_IMPORT}';\n"
        "\n"
        f"export const icons = [\n{entries}] satisfies Array<IconName>;\n"
    )


def render_hash_module(digest: str) -> str:
    return f"export const hash = {_literal(digest)};\n"


def render_settings(options: GenerationOptions) -> str:
    """Render the settings that shape artifact content, for comparison on the next run."""
    optimizer = options.optimizer_config if options.should_optimize else None
    payload = {
        "hash": options.should_hash,
        "optimize": options.should_optimize,
        "optimizer": asdict(optimizer) if optimizer is not None else None,
        "output_format": options.output_format,
    }
    return json.dumps(payload, indent=2, sort_keys=True) + "\n"


def plan_artifacts(
    options: GenerationOptions,
    identifiers: Sequence[str],
    sprite_content: str,
    digest: Optional[str] = None,
) -> List[ArtifactPlan]:
    """Return the artifacts to consider for this run, sprite first and hash module last."""
    sprite = sprite_path(options)
    plans = [
        ArtifactPlan(
            kind=SPRITE,
            path=sprite,
            content=sprite_content,
            expected_hash=digest,
            reported_path=hashed_filename(sprite, digest) if digest else sprite,
        ),
        ArtifactPlan(kind=TYPES, path=types_path(options), content=render_types(identifiers)),
        ArtifactPlan(
            kind=ICONS,
            path=icons_path(options),
            content=render_icons(identifiers, options.output_format),
        ),
    ]
    if options.should_hash and digest:
        plans.append(
            ArtifactPlan(
                kind=HASH_MODULE,
                path=hash_module_path(options),
                content=render_hash_module(digest),
            )
        )
    return plans


def _literal(value: str) -> str:
    # Identifiers and md5 digests never contain quotes or backslashes.
    return f"'{value}'"


__all__ = [
    "hash_module_path",
    "icons_path",
    "plan_artifacts",
    "render_hash_module",
    "render_icons",
    "render_settings",
    "render_types",
    "settings_path",
    "sprite_path",
    "types_path",
]
