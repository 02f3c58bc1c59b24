"""Unit tests for /src/xiangqi/placement.py"""

import pytest

from src.core.exceptions import InvalidSideError
from src.core.shared_types import Faction, PieceType, Side
from src.xiangqi.cell import Cell
from src.xiangqi.placement import (
    coordinate_placement,
    piece_placement,
    starting_position,
)

EXPECTED_TYPES = [
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.ELEPHANT,
    PieceType.MANDARIN,
    PieceType.KING,
    PieceType.MANDARIN,
    PieceType.ELEPHANT,
    PieceType.KNIGHT,
    PieceType.ROOK,
    PieceType.CANNON,
    PieceType.CANNON,
    PieceType.PAWN,
    PieceType.PAWN,
    PieceType.PAWN,
    PieceType.PAWN,
    PieceType.PAWN,
]


@pytest.mark.parametrize("side", [Side.TOP, Side.BOTTOM])
def test_sixteen_distinct_cells_on_board(side: Side) -> None:
    cells = coordinate_placement(side)
    assert len(cells) == 16
    assert len(set(cells)) == 16
    assert all(cell.is_within_bounds() for cell in cells)


def test_top_side_coordinates() -> None:
    """Back rank on row 1, the two fixed points on row 3, pawns on the odd files of row 4."""
    cells = coordinate_placement(Side.TOP)
    assert cells[:9] == [Cell(col, 1) for col in range(1, 10)]
    assert cells[9:11] == [Cell(2, 3), Cell(8, 3)]
    assert cells[11:] == [Cell(1, 4), Cell(3, 4), Cell(5, 4), Cell(7, 4), Cell(9, 4)]


def test_bottom_side_is_mirrored() -> None:
    """Rows 1, 3, 4 become 10, 8, 7. Files stay the same."""
    cells = coordinate_placement(Side.BOTTOM)
    assert cells[:9] == [Cell(col, 10) for col in range(1, 10)]
    assert cells[9:11] == [Cell(2, 8), Cell(8, 8)]
    assert cells[11:] == [Cell(1, 7), Cell(3, 7), Cell(5, 7), Cell(7, 7), Cell(9, 7)]


def test_plain_strings_are_accepted_as_side() -> None:
    assert coordinate_placement("top") == coordinate_placement(Side.TOP)
    assert coordinate_placement("bottom") == coordinate_placement(Side.BOTTOM)


@pytest.mark.parametrize("side", ["left", "", "TOP", None])
def test_invalid_side(side: str) -> None:
    with pytest.raises(InvalidSideError):
        coordinate_placement(side)


@pytest.mark.parametrize("faction", [f for f in Faction])
def test_piece_types_in_fixed_order(faction: Faction) -> None:
    pieces = piece_placement(faction)
    assert [piece.type for piece in pieces] == EXPECTED_TYPES
    assert all(piece.faction == faction for piece in pieces)
    assert all(piece.position is None for piece in pieces)


def test_fresh_pieces_every_call() -> None:
    """A board reset must not reuse pieces from the previous game."""
    first = piece_placement(Faction.RED)
    second = piece_placement(Faction.RED)
    assert not any(a is b for a, b in zip(first, second))


@pytest.mark.parametrize("side", [Side.TOP, Side.BOTTOM])
def test_starting_position_pairs_types_with_cells(side: Side) -> None:
    """The table drives both views: types line up with piece_placement, cells with coordinate_placement."""
    table = starting_position(side)
    assert [entry.piece_type for entry in table] == EXPECTED_TYPES
    assert [entry.cell for entry in table] == coordinate_placement(side)


def test_king_sits_in_the_middle_of_the_back_rank() -> None:
    top = {entry.piece_type: entry.cell for entry in starting_position(Side.TOP)}
    bottom = {entry.piece_type: entry.cell for entry in starting_position(Side.BOTTOM)}
    assert top[PieceType.KING] == Cell(5, 1)
    assert bottom[PieceType.KING] == Cell(5, 10)
