"""Tests for spritegen.reporting."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from spritegen.models import ArtifactResult, GenerationResult
from spritegen.reporting import file_size_kb, report_result


def test_file_size_kb_rounds_to_two_decimals() -> None:
    assert file_size_kb("") == 0.0
    assert file_size_kb("a" * 1024) == 1.0
    assert file_size_kb("a" * 1536) == 1.5


def test_report_result_up_to_date(caplog: pytest.LogCaptureFixture) -> None:
    result = GenerationResult(short_circuited=True, identifiers=["home"])

    with caplog.at_level(logging.INFO):
        summary = report_result(result, input_dir=Path("icons"), logger=logging.getLogger("test.report"))

    assert summary == "Icons are up to date"
    assert caplog.records == []


def test_report_result_lists_changed_artifacts(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    sprite = tmp_path / "sprite.svg"
    result = GenerationResult(
        short_circuited=False,
        identifiers=["home", "about"],
        artifacts=[
            ArtifactResult(kind="sprite", path=sprite, changed=True, reported_path=tmp_path / "sprite.abc.svg"),
            ArtifactResult(kind="types", path=tmp_path / "icon-name.d.ts", changed=False, reported_path=tmp_path / "icon-name.d.ts"),
            ArtifactResult(kind="icons", path=tmp_path / "icons.ts", changed=True, reported_path=tmp_path / "icons.ts"),
            ArtifactResult(kind="hash_module", path=tmp_path / "hash.ts", changed=True, reported_path=tmp_path / "hash.ts"),
        ],
        content_hash="abc",
        sprite_size_kb=1.25,
    )

    with caplog.at_level(logging.INFO):
        summary = report_result(
            result,
            input_dir=tmp_path,
            files=[tmp_path / "home.svg", tmp_path / "about.svg"],
            logger=logging.getLogger("test.report"),
        )

    messages = [record.getMessage() for record in caplog.records]
    assert summary == "Generated 2 icons"
    assert "File size: 1.25 KB" in messages
    assert "Generated sprite with hash abc" in messages
    assert any(message.startswith("Saved to") and "sprite.abc.svg" in message for message in messages)
    assert any("Icon names saved to" in message for message in messages)
    assert any("Hash file saved to" in message for message in messages)
    assert not any("Types saved to" in message for message in messages)
