"""Built-in SVG optimizer used when sprite optimization is enabled.

The optimizer is a pure ``optimize(document, config) -> document`` transform.
Every pass keeps ``<symbol>`` elements and their ``id`` attributes intact so
identifiers referenced by generated code stay valid.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from ..logging import get_logger
from .markup import local_name, parse_document, serialize_document

_METADATA_TAGS = {"metadata"}
_TEXT_PRESERVING_TAGS = {"text", "tspan", "textPath", "style", "script", "title", "desc"}

logger = get_logger("optimizer")


@dataclass(frozen=True)
class OptimizerConfig:
    """Toggles for individual optimizer passes."""

    remove_metadata: bool = True
    remove_editor_data: bool = True
    remove_empty_attributes: bool = True
    remove_empty_groups: bool = True
    collapse_whitespace: bool = True


Optimizer = Callable[[str, Optional[OptimizerConfig]], str]


class SvgOptimizer:
    """Applies the enabled passes to a sprite document."""

    def __init__(self, config: OptimizerConfig | None = None) -> None:
        self.config = config or OptimizerConfig()

    def __call__(self, document: str, config: OptimizerConfig | None = None) -> str:
        return self.optimize(document, config)

    def optimize(self, document: str, config: OptimizerConfig | None = None) -> str:
        config = config or self.config
        root = parse_document(document)
        if config.remove_metadata:
            _remove_elements(root, lambda element: local_name(element.tag) in _METADATA_TAGS)
        if config.remove_editor_data:
            _remove_elements(root, lambda element: _is_foreign(element.tag))
            _strip_attributes(root, lambda key, value: key.startswith("{"))
        if config.remove_empty_attributes:
            _strip_attributes(root, lambda key, value: key != "id" and not value.strip())
        if config.remove_empty_groups:
            _prune_groups(root)
        if config.collapse_whitespace:
            _collapse_whitespace(root)
        optimized = serialize_document(root)
        logger.debug("Optimized sprite from %d to %d characters", len(document), len(optimized))
        return optimized


def optimize(document: str, config: OptimizerConfig | None = None) -> str:
    """Module-level shortcut for :meth:`SvgOptimizer.optimize`."""
    return SvgOptimizer().optimize(document, config)


def _is_foreign(tag: object) -> bool:
    return isinstance(tag, str) and tag.startswith("{")


def _remove_elements(root: ET.Element, predicate: Callable[[ET.Element], bool]) -> None:
    for parent in list(root.iter()):
        for child in list(parent):
            if predicate(child):
                parent.remove(child)


def _strip_attributes(root: ET.Element, predicate: Callable[[str, str], bool]) -> None:
    for element in root.iter():
        if any(predicate(key, value) for key, value in element.attrib.items()):
            element.attrib = {
                key: value for key, value in element.attrib.items() if not predicate(key, value)
            }


def _prune_groups(parent: ET.Element) -> None:
    children: List[ET.Element] = []
    for child in list(parent):
        _prune_groups(child)
        if local_name(child.tag) != "g" or child.attrib:
            children.append(child)
            continue
        # Attribute-less groups only add nesting; hoist their children.
        children.extend(list(child))
    if len(children) != len(parent) or any(a is not b for a, b in zip(children, parent)):
        for child in list(parent):
            parent.remove(child)
        parent.extend(children)


def _collapse_whitespace(root: ET.Element) -> None:
    parents: Dict[ET.Element, ET.Element] = {child: parent for parent in root.iter() for child in parent}
    for element in root.iter():
        if local_name(element.tag) not in _TEXT_PRESERVING_TAGS and _blank(element.text):
            element.text = None
        parent = parents.get(element)
        in_text = parent is not None and local_name(parent.tag) in _TEXT_PRESERVING_TAGS
        if not in_text and _blank(element.tail):
            element.tail = None


def _blank(value: Optional[str]) -> bool:
    return value is not None and not value.strip()


__all__ = ["Optimizer", "OptimizerConfig", "SvgOptimizer", "optimize"]
