"""Unit tests for /src/xiangqi/coordinates.py"""

import pytest

from src.core.config import REFERENCE_THEME
from src.xiangqi.cell import BOARD_DIMENSIONS, Cell
from src.xiangqi.coordinates import BoardCoordinateSystem


@pytest.fixture
def coordinates() -> BoardCoordinateSystem:
    return BoardCoordinateSystem(REFERENCE_THEME)


@pytest.mark.parametrize(
    "x, y, cell",
    [
        (5, 19, Cell(1, 1)),
        (40, 55, Cell(2, 2)),
        (39, 54, Cell(1, 1)),  # last pixel of the first cell
        (5 + 8 * 35, 19 + 9 * 36, Cell(9, 10)),
    ],
)
def test_pixel_to_cell(coordinates: BoardCoordinateSystem, x: int, y: int, cell: Cell) -> None:
    assert coordinates.pixel_to_cell(x, y) == cell


def test_negative_pixels_are_not_clamped(coordinates: BoardCoordinateSystem) -> None:
    """(-10, -10) floors to column/row 0: reported as is, off the board"""
    cell = coordinates.pixel_to_cell(-10, -10)
    assert cell == Cell(0, 0)
    assert not cell.is_within_bounds()


@pytest.mark.parametrize("x, y", [(-10, -10), (4, 19), (5, 18), (5 + 9 * 35, 19), (5, 19 + 10 * 36)])
def test_locate_off_board(coordinates: BoardCoordinateSystem, x: int, y: int) -> None:
    assert coordinates.locate(x, y) is None


def test_locate_on_board(coordinates: BoardCoordinateSystem) -> None:
    assert coordinates.locate(40, 55) == Cell(2, 2)


def test_cell_to_pixel_origin(coordinates: BoardCoordinateSystem) -> None:
    assert coordinates.cell_to_pixel_origin(Cell(1, 1)) == (5, 19)
    assert coordinates.cell_to_pixel_origin(Cell(2, 2)) == (40, 55)
    assert coordinates.cell_to_pixel_origin(Cell(9, 10)) == (285, 343)


def test_roundtrip_for_every_cell(coordinates: BoardCoordinateSystem) -> None:
    for col in range(1, BOARD_DIMENSIONS[0] + 1):
        for row in range(1, BOARD_DIMENSIONS[1] + 1):
            cell = Cell(col, row)
            assert coordinates.pixel_to_cell(*coordinates.cell_to_pixel_origin(cell)) == cell
