"""
Click outcomes and the move-legality capability.

The board itself never decides whether a move is legal: that is up to a rules engine plugged in from outside.
Without one, every move attempt is rejected.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional, Protocol

from src.xiangqi.cell import Cell
from src.xiangqi.pieces import Piece

if TYPE_CHECKING:
    from src.xiangqi.board import BoardState


class Transition(Enum):
    SELECTED = auto()
    DESELECTED = auto()
    RESELECTED = auto()
    # a piece is selected and the target passed the legality check; executing the move is not implemented yet
    MOVE_PENDING = auto()
    # a piece is selected and the target is illegal (or there is no rules engine). Selection is kept.
    MOVE_REJECTED = auto()
    IGNORED = auto()


@dataclass(frozen=True)
class ClickResult:
    transition: Transition
    cell: Cell
    piece: Optional[Piece] = None


class MoveRules(Protocol):
    """Rules engine: decides if the selected piece may go to (or capture on) the target cell."""

    def is_legal(self, board: "BoardState", piece: Piece, target: Cell) -> bool: ...
