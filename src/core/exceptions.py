"""Custom exceptions shared by all layers. Everything derives from XiangqiError so callers can catch one type."""

from pathlib import Path
from typing import Hashable


class XiangqiError(Exception):
    """Top-level exception for anything going wrong in the board/asset/controller layers."""


class InvalidSideError(XiangqiError):
    """Only 'top' and 'bottom' are valid sides to place a faction on."""


class PlacementLengthMismatchError(XiangqiError):
    """Starting coordinates and starting pieces did not pair up 1:1. A programming error, never a runtime condition."""


class CellOccupiedError(XiangqiError):
    """Tried to place a piece on a cell that already holds a live piece."""


class InvalidLayoutError(XiangqiError):
    """Board layout configuration with impossible values."""


class AssetNotLoadedError(XiangqiError):
    """Asset requested before its load completed, or never requested at all."""


class AssetLoadError(XiangqiError):
    """A single asset could not be fetched/decoded (or took too long)."""

    def __init__(self, name: Hashable, path: Path, reason: str) -> None:
        self.name = name
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load asset {name!r} from {str(path)!r}: {reason}")
