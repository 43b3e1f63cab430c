"""Core data models shared across spritegen components."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

if TYPE_CHECKING:  # pragma: no cover - typing aid
    from spritegen.sprite.optimizer import OptimizerConfig

SPRITE = "sprite"
TYPES = "types"
ICONS = "icons"
HASH_MODULE = "hash_module"

ARTIFACT_KINDS: Tuple[str, ...] = (SPRITE, TYPES, ICONS, HASH_MODULE)

OUTPUT_FORMATS: Tuple[str, ...] = ("ts", "js")


@dataclass(frozen=True)
class GenerationOptions:
    """Resolved settings for one generation run."""

    files: Tuple[Path, ...]
    input_dir: Path
    output_dir: Path
    sprite_output_dir: Path
    should_optimize: bool = False
    should_hash: bool = False
    force: bool = False
    output_format: str = "ts"
    optimizer_config: Optional["OptimizerConfig"] = None

    def __post_init__(self) -> None:
        # Accept plain strings and lists from callers while keeping the stored values uniform.
        object.__setattr__(self, "files", tuple(Path(file) for file in self.files))
        object.__setattr__(self, "input_dir", Path(self.input_dir))
        object.__setattr__(self, "output_dir", Path(self.output_dir))
        object.__setattr__(self, "sprite_output_dir", Path(self.sprite_output_dir))
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unsupported output format '{self.output_format}'; expected one of {', '.join(OUTPUT_FORMATS)}"
            )


@dataclass(frozen=True)
class ArtifactPlan:
    """Freshly rendered artifact awaiting a change-detected write."""

    kind: str
    path: Path
    content: str
    expected_hash: Optional[str] = None
    reported_path: Optional[Path] = None


@dataclass(frozen=True)
class ArtifactResult:
    """Outcome of writing a single artifact."""

    kind: str
    path: Path
    changed: bool
    reported_path: Path


@dataclass
class GenerationResult:
    """Structured outcome of a generation run."""

    short_circuited: bool
    identifiers: List[str]
    artifacts: List[ArtifactResult] = field(default_factory=list)
    content_hash: Optional[str] = None
    sprite_size_kb: Optional[float] = None

    @property
    def changed(self) -> bool:
        return any(artifact.changed for artifact in self.artifacts)

    @property
    def up_to_date(self) -> bool:
        return not self.changed

    @property
    def sprite(self) -> bool:
        return self._changed(SPRITE)

    @property
    def types(self) -> bool:
        return self._changed(TYPES)

    @property
    def icons(self) -> bool:
        return self._changed(ICONS)

    @property
    def hash_module(self) -> bool:
        return self._changed(HASH_MODULE)

    def artifact(self, kind: str) -> Optional[ArtifactResult]:
        for artifact in self.artifacts:
            if artifact.kind == kind:
                return artifact
        return None

    def as_dict(self) -> Dict[str, bool]:
        return {kind: self._changed(kind) for kind in ARTIFACT_KINDS}

    def _changed(self, kind: str) -> bool:
        artifact = self.artifact(kind)
        return artifact.changed if artifact is not None else False
