"""
Type definitions used across layers
"""

from enum import StrEnum


class Faction(StrEnum):
    RED = "red"
    BLACK = "black"


class PieceType(StrEnum):
    ROOK = "rook"
    KNIGHT = "knight"
    CANNON = "cannon"
    ELEPHANT = "elephant"
    MANDARIN = "mandarin"
    KING = "king"
    PAWN = "pawn"


class Side(StrEnum):
    """Which half of the board a faction starts on."""

    TOP = "top"
    BOTTOM = "bottom"
