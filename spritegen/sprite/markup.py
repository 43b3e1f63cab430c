"""ElementTree helpers shared by the sprite assembler, optimizer and staleness check."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Iterable, List

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

_SVG_PREFIX = f"{{{SVG_NS}}}"
_XLINK_PREFIX = f"{{{XLINK_NS}}}"

ET.register_namespace("inkscape", "http://www.inkscape.org/namespaces/inkscape")
ET.register_namespace("sodipodi", "http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd")


def local_name(tag: object) -> str:
    """Return ``tag`` without its namespace; comments and PIs yield an empty string."""
    if not isinstance(tag, str):
        return ""
    return tag.split("}", 1)[1] if tag.startswith("{") else tag


def localize(root: ET.Element) -> ET.Element:
    """Drop the SVG namespace from tags in place and spell xlink attributes literally."""
    for element in root.iter():
        if isinstance(element.tag, str) and element.tag.startswith(_SVG_PREFIX):
            element.tag = element.tag[len(_SVG_PREFIX):]
        if any(key.startswith("{") for key in element.attrib):
            element.attrib = {_localize_attribute(key): value for key, value in element.attrib.items()}
    return root


def parse_document(text: str) -> ET.Element:
    """Parse SVG markup and return its localized root element."""
    return localize(ET.fromstring(text.encode("utf-8")))


def build_sprite_root(symbols: Iterable[ET.Element]) -> ET.Element:
    root = ET.Element("svg", {"width": "0", "height": "0", "style": "display: none"})
    root.text = "\n"
    defs = ET.SubElement(root, "defs")
    defs.text = "\n"
    defs.tail = "\n"
    for symbol in symbols:
        symbol.tail = "\n"
        defs.append(symbol)
    return root


def serialize_document(root: ET.Element) -> str:
    """Render a sprite root with the XML declaration and namespace declarations first."""
    rest = {key: value for key, value in root.attrib.items() if key not in {"xmlns", "xmlns:xlink"}}
    root.attrib = {"xmlns": SVG_NS, "xmlns:xlink": XLINK_NS, **rest}
    return f"{XML_DECLARATION}\n{ET.tostring(root, encoding='unicode')}\n"


def symbol_ids(text: str) -> List[str]:
    """Return the ``id`` of every ``<symbol>`` in document order.

    Raises ``xml.etree.ElementTree.ParseError`` for malformed markup.
    """
    if not text.strip():
        return []
    root = ET.fromstring(text.encode("utf-8"))
    return [
        element.attrib["id"]
        for element in root.iter()
        if local_name(element.tag) == "symbol" and "id" in element.attrib
    ]


def _localize_attribute(key: str) -> str:
    if key.startswith(_XLINK_PREFIX):
        return f"xlink:{key[len(_XLINK_PREFIX):]}"
    if key.startswith(_SVG_PREFIX):
        return key[len(_SVG_PREFIX):]
    return key


__all__ = [
    "SVG_NS",
    "XLINK_NS",
    "XML_DECLARATION",
    "build_sprite_root",
    "local_name",
    "localize",
    "parse_document",
    "serialize_document",
    "symbol_ids",
]
