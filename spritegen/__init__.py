"""Incremental SVG sprite and icon module generation."""

from .config import ConfigError, load_config
from .identifiers import IdentifierCollisionError, derive_identifier
from .models import GenerationOptions, GenerationResult
from .orchestrator import Orchestrator, generate

__all__ = [
    "ConfigError",
    "GenerationOptions",
    "GenerationResult",
    "IdentifierCollisionError",
    "Orchestrator",
    "derive_identifier",
    "generate",
    "load_config",
]
