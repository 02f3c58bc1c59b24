"""Board cells: the intersections pieces stand on, addressed 1-indexed as (column, row)."""

from __future__ import annotations

from dataclasses import dataclass

# Xiangqi is played on the intersections of 9 files x 10 ranks
BOARD_DIMENSIONS = (9, 10)


@dataclass(frozen=True)
class Cell:
    col: int
    row: int

    def is_within_bounds(self) -> bool:
        return (1 <= self.col <= BOARD_DIMENSIONS[0]) and (
            1 <= self.row <= BOARD_DIMENSIONS[1]
        )

    def mirrored(self) -> Cell:
        """Same file, rank seen from the other side of the river: row -> 11 - row"""
        return Cell(self.col, BOARD_DIMENSIONS[1] + 1 - self.row)
