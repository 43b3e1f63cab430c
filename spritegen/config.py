"""Configuration loading for spritegen (spritegen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .models import OUTPUT_FORMATS, GenerationOptions
from .sprite.optimizer import OptimizerConfig

CONFIG_FILENAME = "spritegen.yml"

DEFAULT_OUTPUT_DIR = ".spritegen"
DEFAULT_INPUT_DIR = "icons"


class ConfigError(RuntimeError):
    """Raised when the configuration or the requested run is invalid."""


@dataclass
class IconsConfig:
    """Icon sprite settings from spritegen.yml."""

    input_dir: Path
    sprite_output_dir: Path
    optimize: bool = False
    hash: bool = False
    optimizer: OptimizerConfig = field(default_factory=OptimizerConfig)
    exclude: List[str] = field(default_factory=list)


@dataclass
class SpriteGenConfig:
    """Represents the high-level settings defined in spritegen.yml."""

    root: Path
    icons: IconsConfig
    output_dir: Path
    output_format: str = "ts"
    verbose: bool = False

    def to_options(
        self,
        files: Sequence[Path],
        *,
        force: bool = False,
        should_optimize: Optional[bool] = None,
        should_hash: Optional[bool] = None,
    ) -> GenerationOptions:
        """Build run options, letting explicit arguments override file settings."""
        return GenerationOptions(
            files=tuple(files),
            input_dir=self.icons.input_dir,
            output_dir=self.output_dir,
            sprite_output_dir=self.icons.sprite_output_dir,
            should_optimize=self.icons.optimize if should_optimize is None else should_optimize,
            should_hash=self.icons.hash if should_hash is None else should_hash,
            force=force,
            output_format=self.output_format,
            optimizer_config=self.icons.optimizer,
        )


def load_config(config_path: Path) -> SpriteGenConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent.resolve()

    data: Dict[str, Any] = {}
    if config_file.exists():
        data = _read_config(config_file)

    output_dir = root / (_as_str(data.get("output_dir")) or DEFAULT_OUTPUT_DIR)

    output_format = (_as_str(data.get("output_format")) or "ts").lower()
    if output_format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"output_format must be one of {', '.join(OUTPUT_FORMATS)} (got '{output_format}')"
        )

    icons_data = _as_dict(data.get("icons"))
    input_dir = root / (_as_str(icons_data.get("input_dir")) or DEFAULT_INPUT_DIR)
    sprite_dir_str = _as_str(icons_data.get("sprite_output_dir"))
    sprite_output_dir = root / sprite_dir_str if sprite_dir_str else output_dir

    optimize_value = icons_data.get("optimize")
    optimizer = OptimizerConfig()
    if isinstance(optimize_value, dict):
        optimize = True
        optimizer = _parse_optimizer(optimize_value)
    else:
        optimize = _as_bool(optimize_value) or False

    icons = IconsConfig(
        input_dir=input_dir,
        sprite_output_dir=sprite_output_dir,
        optimize=optimize,
        hash=_as_bool(icons_data.get("hash")) or False,
        optimizer=optimizer,
        exclude=_as_str_list(icons_data.get("exclude")),
    )

    return SpriteGenConfig(
        root=root,
        icons=icons,
        output_dir=output_dir,
        output_format=output_format,
        verbose=_as_bool(data.get("verbose")) or False,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigError(f"{path.name} is not valid UTF-8: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path.name} must contain a mapping at the root")
    return loaded


def _parse_optimizer(data: Dict[str, Any]) -> OptimizerConfig:
    known = {item.name for item in fields(OptimizerConfig)}
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        raise ConfigError(f"Unknown optimizer options: {', '.join(unknown)}")
    values: Dict[str, bool] = {}
    for key, raw in data.items():
        flag = _as_bool(raw)
        if flag is None:
            raise ConfigError(f"Optimizer option '{key}' must be a boolean")
        values[key] = flag
    return OptimizerConfig(**values)


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []
