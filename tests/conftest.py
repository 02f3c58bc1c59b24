"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

from pathlib import Path

import pytest

from src.assets.store import AssetStore
from src.assets.textures import TextureCatalog
from src.core.config import REFERENCE_THEME, BoardLayoutConfig


class FakeImage:
    """Stands in for a decoded image; remembers which file it came from."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def __repr__(self) -> str:
        return f"FakeImage({self.path.as_posix()!r})"


def fake_loader(path: Path) -> FakeImage:
    return FakeImage(path)


@pytest.fixture
def layout() -> BoardLayoutConfig:
    """Reference theme, images 'read' from a directory that does not exist (the fake loader never opens files)."""
    return REFERENCE_THEME.with_asset_base_path("fake/images")


@pytest.fixture
def fake_store(layout: BoardLayoutConfig) -> AssetStore:
    return AssetStore(layout.asset_base_path, loader=fake_loader)


@pytest.fixture
def fake_catalog(layout: BoardLayoutConfig, fake_store: AssetStore) -> TextureCatalog:
    return TextureCatalog(layout, store=fake_store)
