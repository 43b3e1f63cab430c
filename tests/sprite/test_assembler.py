"""Tests for spritegen.sprite.assembler."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from spritegen.sprite.assembler import SpriteAssembler, SpriteAssemblyError, assemble
from spritegen.sprite.markup import symbol_ids
from tests._fixtures.icon_builder import IconProject

_SVG_NS = "{http://www.w3.org/2000/svg}"


def test_assemble_creates_one_symbol_per_file_in_order(icon_project: IconProject) -> None:
    files = icon_project.add_icons("home", "about", "contact")

    sprite = assemble(files, icon_project.input_dir)

    assert sprite.startswith('<?xml version="1.0" encoding="UTF-8"?>\n<svg xmlns="http://www.w3.org/2000/svg"')
    assert symbol_ids(sprite) == ["home", "about", "contact"]
    assert 'id="home"' in sprite


def test_assemble_copies_view_box_and_presentation_attributes(icon_project: IconProject) -> None:
    files = icon_project.write(
        {
            "star.svg": """
            <svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor">
              <polygon points="12 2 15 9 22 9 17 14 19 21 12 17 5 21 7 14 2 9 9 9" />
            </svg>
            """
        }
    )

    root = ET.fromstring(assemble(files, icon_project.input_dir))
    symbol = root.find(f"{_SVG_NS}defs/{_SVG_NS}symbol")

    assert symbol is not None
    assert symbol.get("id") == "star"
    assert symbol.get("viewBox") == "0 0 24 24"
    assert symbol.get("fill") == "none"
    assert symbol.get("stroke") == "currentColor"
    assert symbol.get("width") is None
    assert symbol.find(f"{_SVG_NS}polygon") is not None


def test_assemble_derives_view_box_from_dimensions(icon_project: IconProject) -> None:
    files = icon_project.write(
        {"dot.svg": '<svg xmlns="http://www.w3.org/2000/svg" width="16px" height="16"><circle r="4" /></svg>'}
    )

    sprite = assemble(files, icon_project.input_dir)

    assert 'viewBox="0 0 16 16"' in sprite


def test_assemble_preserves_xlink_references(icon_project: IconProject) -> None:
    files = icon_project.write(
        {
            "linked.svg": """
            <svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" viewBox="0 0 10 10">
              <defs><path id="p" d="M0 0h10" /></defs>
              <use xlink:href="#p" />
            </svg>
            """
        }
    )

    sprite = assemble(files, icon_project.input_dir)

    assert 'xlink:href="#p"' in sprite
    ET.fromstring(sprite)


def test_assemble_accepts_paths_relative_to_input_dir(icon_project: IconProject) -> None:
    icon_project.add_icons("home")

    sprite = SpriteAssembler().assemble(["home.svg"], icon_project.input_dir)

    assert symbol_ids(sprite) == ["home"]


def test_assemble_is_deterministic(icon_project: IconProject) -> None:
    files = icon_project.add_icons("home", "about")

    assert assemble(files, icon_project.input_dir) == assemble(files, icon_project.input_dir)


def test_assemble_reports_malformed_sources(icon_project: IconProject) -> None:
    files = icon_project.write({"broken.svg": "<svg><path></svg>"})

    with pytest.raises(SpriteAssemblyError, match="broken.svg"):
        assemble(files, icon_project.input_dir)
