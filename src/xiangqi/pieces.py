"""Defines the pieces living on the board"""

from dataclasses import dataclass
from typing import Optional

from src.core.shared_types import Faction, PieceType
from src.xiangqi.cell import Cell


@dataclass(eq=False)
class Piece:
    """
    A single piece. Compared by identity: two red pawns are still two different pieces.

    `position` stays None until the piece is placed during faction creation.
    """

    faction: Faction
    type: PieceType
    position: Optional[Cell] = None
    selected: bool = False
    alive: bool = True

    def select(self) -> None:
        self.selected = True

    def deselect(self) -> None:
        self.selected = False
