"""Shared test fixtures and configuration."""

import logging
from pathlib import Path

import pytest

from audio_works.config import LibraryConfig


def make_tree(base: Path, files: list[str]) -> Path:
    """Create files (and their parent folders) below base.

    Entries ending with "/" create empty directories.
    """
    for rel in files:
        path = base / rel
        if rel.endswith("/"):
            path.mkdir(parents=True, exist_ok=True)
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(b"fake audio data")
    return base


@pytest.fixture
def tree():
    """Expose make_tree to tests."""
    return make_tree


@pytest.fixture
def music_root(tmp_path):
    """An empty root directory."""
    root = tmp_path / "music"
    root.mkdir()
    return root


@pytest.fixture
def library_config(tmp_path, music_root):
    """Config with one root and an image directory."""
    image_dir = tmp_path / "covers"
    image_dir.mkdir()
    return LibraryConfig(
        root_dirs=[music_root],
        image_dir=image_dir,
        scanner_max_recursion_depth=2,
    )


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers installed by setup_logging() between tests."""
    yield
    logger = logging.getLogger("audio_works")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.WARNING)
