"""
Test support utilities for scriptfolders tests.

Helpers that don't fit as pytest fixtures but are useful across test files.
"""

from __future__ import annotations

from pathlib import Path


def write_tree(root: Path, layout: dict[str, dict[str, str | bytes]]) -> Path:
    """
    Create version folders and their files under ``root``.

    Args:
        root: Directory to populate (created if missing)
        layout: Mapping of folder name to {file name: contents}

    Returns:
        ``root``, for chaining
    """
    root.mkdir(parents=True, exist_ok=True)
    for folder, files in layout.items():
        folder_path = root / folder
        folder_path.mkdir(parents=True, exist_ok=True)
        for name, contents in files.items():
            if isinstance(contents, bytes):
                (folder_path / name).write_bytes(contents)
            else:
                (folder_path / name).write_text(contents, encoding="utf-8")
    return root
