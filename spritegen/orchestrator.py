"""Pipeline orchestration for sprite and icon artifact generation."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

from .config import ConfigError
from .generators import (
    hash_module_path,
    icons_path,
    plan_artifacts,
    render_hash_module,
    render_icons,
    render_settings,
    settings_path,
    sprite_path,
    types_path,
)
from .hashing import content_hash
from .identifiers import derive_identifiers
from .logging import get_logger
from .models import ArtifactPlan, ArtifactResult, GenerationOptions, GenerationResult
from .reporting import file_size_kb
from .sprite.assembler import SpriteAssembler
from .sprite.optimizer import Optimizer, SvgOptimizer
from .staleness import companions_match, is_up_to_date, read_text_or_empty
from .writer import write_if_changed


class Orchestrator:
    """Coordinates identifier derivation, staleness checks, assembly and writes."""

    def __init__(
        self,
        assembler: SpriteAssembler | None = None,
        optimizer: Optimizer | None = None,
    ) -> None:
        self.assembler = assembler or SpriteAssembler()
        self.optimizer: Optimizer = optimizer or SvgOptimizer()
        self.logger = get_logger("orchestrator")

    def generate(self, options: GenerationOptions) -> GenerationResult:
        """Regenerate every artifact whose content no longer matches the sources."""
        if not options.files:
            raise ConfigError(f"No SVG sources found for {options.input_dir}")

        identifiers = derive_identifiers(options.files, options.input_dir)
        self.logger.debug("Derived %d icon identifiers", len(identifiers))
        self._ensure_output_dirs(options)

        if options.force:
            self.logger.debug("Force enabled; skipping up-to-date check")
        elif self._is_up_to_date(options, identifiers):
            self.logger.debug("Artifacts and settings already match sources")
            return GenerationResult(short_circuited=True, identifiers=identifiers)

        content = self.assembler.assemble(options.files, options.input_dir)
        if options.should_optimize:
            content = self.optimizer(content, options.optimizer_config)

        digest = content_hash(content) if options.should_hash else None
        if digest:
            self.logger.debug("Sprite content hash %s", digest)

        plans = plan_artifacts(options, identifiers, content, digest)
        artifacts = [self._write(plan, force=options.force) for plan in plans]
        self._record_settings(options)

        return GenerationResult(
            short_circuited=False,
            identifiers=identifiers,
            artifacts=artifacts,
            content_hash=digest,
            sprite_size_kb=file_size_kb(content),
        )

    @staticmethod
    def _ensure_output_dirs(options: GenerationOptions) -> None:
        for directory in (types_path(options).parent, options.sprite_output_dir):
            directory.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def _is_up_to_date(options: GenerationOptions, identifiers: List[str]) -> bool:
        current_sprite = read_text_or_empty(sprite_path(options))
        current_types = read_text_or_empty(types_path(options))
        if not is_up_to_date(identifiers, current_sprite, current_types):
            return False

        expected: Dict[Path, str] = {
            icons_path(options): render_icons(identifiers, options.output_format),
            settings_path(options): render_settings(options),
        }
        if options.should_hash:
            expected[hash_module_path(options)] = render_hash_module(content_hash(current_sprite))
        return companions_match(expected)

    def _record_settings(self, options: GenerationOptions) -> None:
        path = settings_path(options)
        if write_if_changed(path, render_settings(options), force=options.force):
            self.logger.debug("Recorded generation settings in %s", path)

    def _write(self, plan: ArtifactPlan, *, force: bool) -> ArtifactResult:
        changed = write_if_changed(
            plan.path,
            plan.content,
            expected_hash=plan.expected_hash,
            force=force,
        )
        self.logger.debug("%s %s", plan.kind, "written" if changed else "unchanged")
        return ArtifactResult(
            kind=plan.kind,
            path=plan.path,
            changed=changed,
            reported_path=plan.reported_path or plan.path,
        )


def generate(options: GenerationOptions, *, optimizer: Optional[Optimizer] = None) -> GenerationResult:
    """Run a single generation with the default collaborators."""
    return Orchestrator(optimizer=optimizer).generate(options)


__all__ = ["Orchestrator", "generate"]
