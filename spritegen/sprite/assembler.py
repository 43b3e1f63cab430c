"""Merge individual SVG files into a single ``<symbol>`` sprite."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Optional, Sequence

from ..identifiers import derive_identifier
from ..logging import get_logger
from .markup import build_sprite_root, localize, serialize_document

_DROPPED_ROOT_ATTRIBUTES = {"width", "height", "id", "x", "y", "version", "xmlns", "xmlns:xlink"}
_NUMERIC_LENGTH = re.compile(r"^\s*([0-9]*\.?[0-9]+)\s*(px)?\s*$")


class SpriteAssemblyError(RuntimeError):
    """Raised when a source SVG cannot be read or parsed."""


class SpriteAssembler:
    """Builds the merged sprite document keyed by icon identifier."""

    def __init__(self) -> None:
        self.logger = get_logger("assembler")

    def assemble(self, files: Sequence[Path], input_dir: Path) -> str:
        """Return sprite markup with one ``<symbol>`` per file, in input order."""
        input_dir = Path(input_dir)
        symbols: List[ET.Element] = []
        for file in files:
            source = self._resolve(Path(file), input_dir)
            identifier = derive_identifier(file, input_dir)
            root = self._parse(source)
            symbols.append(self._to_symbol(root, identifier))
            self.logger.debug("Added symbol %s from %s", identifier, source)
        return serialize_document(build_sprite_root(symbols))

    @staticmethod
    def _resolve(file: Path, input_dir: Path) -> Path:
        if file.is_absolute():
            return file
        try:
            file.relative_to(input_dir)
        except ValueError:
            candidate = input_dir / file
            return candidate if candidate.exists() or not file.exists() else file
        return file

    @staticmethod
    def _parse(source: Path) -> ET.Element:
        try:
            root = ET.parse(source).getroot()
        except ET.ParseError as exc:
            raise SpriteAssemblyError(f"Failed to parse {source}: {exc}") from exc
        return localize(root)

    @staticmethod
    def _to_symbol(root: ET.Element, identifier: str) -> ET.Element:
        attributes = {"id": identifier}
        view_box = root.get("viewBox") or _view_box_from_size(root.get("width"), root.get("height"))
        if view_box:
            attributes["viewBox"] = view_box
        for key, value in root.attrib.items():
            if key in _DROPPED_ROOT_ATTRIBUTES or key == "viewBox":
                continue
            attributes[key] = value
        symbol = ET.Element("symbol", attributes)
        symbol.text = root.text
        symbol.extend(list(root))
        return symbol


def assemble(files: Sequence[Path], input_dir: Path) -> str:
    """Module-level shortcut for :meth:`SpriteAssembler.assemble`."""
    return SpriteAssembler().assemble(files, input_dir)


def _view_box_from_size(width: Optional[str], height: Optional[str]) -> Optional[str]:
    if width is None or height is None:
        return None
    width_match = _NUMERIC_LENGTH.match(width)
    height_match = _NUMERIC_LENGTH.match(height)
    if not width_match or not height_match:
        return None
    return f"0 0 {width_match.group(1)} {height_match.group(1)}"


__all__ = ["SpriteAssembler", "SpriteAssemblyError", "assemble"]
