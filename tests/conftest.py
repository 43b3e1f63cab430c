from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.icon_builder import IconProject


@pytest.fixture
def icon_project(tmp_path: Path) -> IconProject:
    """Provide a reusable icon project rooted at the pytest tmp_path."""
    return IconProject(tmp_path)
