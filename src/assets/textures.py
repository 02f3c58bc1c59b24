"""
Domain-aware accessors on top of the AssetStore.

Every texture is addressed by a typed key instead of a formatted string. Each key knows which file it is read from:
  pieces/{faction}_{type}.png
  util/{faction}_selected.png
  util/dot.png
  background.jpg
  board.png
"""

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any, Optional

from src.assets.store import AssetStore
from src.core.config import BoardLayoutConfig
from src.core.shared_types import Faction, PieceType


@dataclass(frozen=True)
class PieceTexture:
    faction: Faction
    piece_type: PieceType

    @property
    def relative_path(self) -> Path:
        return Path("pieces") / f"{self.faction}_{self.piece_type}.png"


@dataclass(frozen=True)
class SelectionTexture:
    faction: Faction

    @property
    def relative_path(self) -> Path:
        return Path("util") / f"{self.faction}_selected.png"


class UtilityTexture(StrEnum):
    BOARD = "board.png"
    BACKGROUND = "background.jpg"
    # reserved for showing move hints
    DOT = "util/dot.png"

    @property
    def relative_path(self) -> Path:
        return Path(self.value)


TextureKey = PieceTexture | SelectionTexture | UtilityTexture


def texture_manifest() -> dict[TextureKey, Path]:
    """Every texture the game needs: all factions x all piece types, the highlights, and the utility images."""
    keys: list[TextureKey] = [
        PieceTexture(faction, piece_type)
        for faction in Faction
        for piece_type in PieceType
    ]
    keys.extend(SelectionTexture(faction) for faction in Faction)
    keys.extend(UtilityTexture)
    return {key: key.relative_path for key in keys}


class TextureCatalog:
    def __init__(
        self, layout: BoardLayoutConfig, store: Optional[AssetStore] = None
    ) -> None:
        self.layout = layout
        self.store = store or AssetStore(
            layout.asset_base_path, timeout=layout.asset_timeout
        )

    async def init(self) -> None:
        await self.store.load(texture_manifest())

    def board(self) -> Any:
        return self.store.get(UtilityTexture.BOARD)

    def background(self) -> Any:
        return self.store.get(UtilityTexture.BACKGROUND)

    def dot(self) -> Any:
        return self.store.get(UtilityTexture.DOT)

    def piece(self, faction: Faction, piece_type: PieceType) -> Any:
        return self.store.get(PieceTexture(faction, piece_type))

    def selection_highlight(self, faction: Faction) -> Any:
        return self.store.get(SelectionTexture(faction))
