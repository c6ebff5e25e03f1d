"""
Shared pytest fixtures for scriptfolders tests.

Usage:
    Fixtures are auto-discovered by pytest; request them as arguments.
"""

import os
import sys
from pathlib import Path

import pytest
import structlog

# Ensure scriptfolders and the tests/_support helpers are importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent))

from tests._support import write_tree


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        test_path = Path(item.path).relative_to(Path(__file__).parent)
        if "integration" in test_path.parts:
            item.add_marker(pytest.mark.integration)

        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "integration"}):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo configure_logging() and bound context after each test."""
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep SCRIPTFOLDERS_* variables from the host out of the tests."""
    for key in list(os.environ):
        if key.startswith("SCRIPTFOLDERS_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def scripts_root(tmp_path: Path) -> Path:
    """Root with three version folders, one script each plus a non-SQL file."""
    return write_tree(
        tmp_path / "scripts",
        {
            "1.0": {"001_create.sql": "CREATE TABLE a (id INTEGER);", "notes.txt": "ignored"},
            "1.5": {"001_alter.sql": "ALTER TABLE a ADD b TEXT;"},
            "3.0": {"001_drop.sql": "DROP TABLE a;"},
        },
    )
