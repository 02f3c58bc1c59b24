"""Conversion between pixel space and board cells, for a given layout."""

import math
from typing import Optional

from src.core.config import BoardLayoutConfig
from src.xiangqi.cell import Cell


class BoardCoordinateSystem:
    def __init__(self, layout: BoardLayoutConfig) -> None:
        self.layout = layout

    def pixel_to_cell(self, x: float, y: float) -> Cell:
        """Can return an off-board cell: the caller checks `is_within_bounds()`. Nothing is clamped."""
        col = math.floor((x - self.layout.origin_x) / self.layout.cell_pitch_x) + 1
        row = math.floor((y - self.layout.origin_y) / self.layout.cell_pitch_y) + 1
        return Cell(col, row)

    def cell_to_pixel_origin(self, cell: Cell) -> tuple[int, int]:
        """Top-left anchor where a piece on this cell gets drawn."""
        x = (cell.col - 1) * self.layout.cell_pitch_x + self.layout.origin_x
        y = (cell.row - 1) * self.layout.cell_pitch_y + self.layout.origin_y
        return x, y

    def locate(self, x: float, y: float) -> Optional[Cell]:
        """Cell under the pixel, or None if the pixel is outside the grid."""
        cell = self.pixel_to_cell(x, y)
        return cell if cell.is_within_bounds() else None
