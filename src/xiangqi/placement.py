"""
Starting positions.

One table pairs every piece type with its starting cell for the faction on top. The bottom faction uses
the same table mirrored across the river. Both `coordinate_placement` and `piece_placement` are views on
that single table, so the i-th coordinate always belongs to the i-th piece.
"""

from dataclasses import dataclass

from src.core.exceptions import InvalidSideError
from src.core.shared_types import Faction, PieceType, Side
from src.xiangqi.cell import Cell
from src.xiangqi.pieces import Piece


@dataclass(frozen=True)
class StartingPosition:
    piece_type: PieceType
    cell: Cell


def _back_rank() -> list[StartingPosition]:
    types = [
        PieceType.ROOK,
        PieceType.KNIGHT,
        PieceType.ELEPHANT,
        PieceType.MANDARIN,
        PieceType.KING,
        PieceType.MANDARIN,
        PieceType.ELEPHANT,
        PieceType.KNIGHT,
        PieceType.ROOK,
    ]
    return [
        StartingPosition(piece_type, Cell(col, 1))
        for col, piece_type in enumerate(types, start=1)
    ]


# Layout for the faction on top. Order: back rank (files 1-9), the two cannons, the five pawns.
TOP_STARTING_POSITIONS: tuple[StartingPosition, ...] = (
    *_back_rank(),
    # the cannons always sit at these two fixed points, on the row of the palace's front edge
    StartingPosition(PieceType.CANNON, Cell(2, 3)),
    StartingPosition(PieceType.CANNON, Cell(8, 3)),
    # pawns only on the odd files
    *(StartingPosition(PieceType.PAWN, Cell(col, 4)) for col in range(1, 10, 2)),
)


def starting_position(side: Side | str) -> list[StartingPosition]:
    """(type, cell) pairs for a faction starting on the given side of the board."""
    if side not in (Side.TOP, Side.BOTTOM):
        raise InvalidSideError(
            f"Invalid side: {side!r}. Pick one from {','.join(s.value for s in Side)}"
        )
    if side == Side.TOP:
        return list(TOP_STARTING_POSITIONS)
    return [
        StartingPosition(entry.piece_type, entry.cell.mirrored())
        for entry in TOP_STARTING_POSITIONS
    ]


def coordinate_placement(side: Side | str) -> list[Cell]:
    """The 16 starting cells for one side, in table order."""
    return [entry.cell for entry in starting_position(side)]


def piece_placement(faction: Faction) -> list[Piece]:
    """16 fresh (unplaced) pieces for a faction, in table order."""
    return [Piece(faction, entry.piece_type) for entry in TOP_STARTING_POSITIONS]
