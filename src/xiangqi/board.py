"""
The board state: every piece, an index from cell to piece, and the current selection.

BoardState is the only thing allowed to mutate pieces. The piece list and the cell index are always kept consistent:
every live piece is indexed exactly once at its own position.
"""

from typing import Optional

from loguru import logger

from src.core.exceptions import CellOccupiedError, PlacementLengthMismatchError
from src.core.shared_types import Faction, Side
from src.xiangqi.cell import Cell
from src.xiangqi.pieces import Piece
from src.xiangqi.placement import coordinate_placement, piece_placement
from src.xiangqi.rules import ClickResult, MoveRules, Transition


class BoardState:
    def __init__(
        self,
        active_faction: Faction = Faction.RED,
        rules: Optional[MoveRules] = None,
    ) -> None:
        self.pieces: list[Piece] = []
        self.cell_index: dict[Cell, Piece] = {}
        self.active_faction = active_faction
        self.rules = rules
        self._selected: Optional[Piece] = None

    # --- PLACEMENT ---
    def create_faction(self, faction: Faction, side: Side | str) -> None:
        """Pair the starting cells with fresh pieces 1:1 and put them on the board."""
        coordinates = coordinate_placement(side)
        pieces = piece_placement(faction)
        if len(coordinates) != len(pieces):
            raise PlacementLengthMismatchError(
                f"{len(coordinates)} starting cells for {len(pieces)} pieces of {faction}."
            )

        for piece, cell in zip(pieces, coordinates):
            self._place(piece, cell)
        logger.debug(f"Placed {len(pieces)} {faction} pieces on the {side} side")

    def set_up_start_position(self) -> None:
        """Black on top, red at the bottom."""
        self.create_faction(Faction.BLACK, Side.TOP)
        self.create_faction(Faction.RED, Side.BOTTOM)

    def reset(self) -> None:
        """Throw away every piece and the selection, then rebuild the starting position."""
        self.pieces.clear()
        self.cell_index.clear()
        self._selected = None
        self.set_up_start_position()

    def _place(self, piece: Piece, cell: Cell) -> None:
        if cell in self.cell_index:
            raise CellOccupiedError(
                f"Cannot place {piece.faction} {piece.type} on {cell}: occupied by {self.cell_index[cell].faction} {self.cell_index[cell].type}."
            )
        piece.position = cell
        self.cell_index[cell] = piece
        self.pieces.append(piece)

    # --- LOOKUP ---
    @property
    def selected(self) -> Optional[Piece]:
        return self._selected

    def piece_at(self, cell: Cell) -> Optional[Piece]:
        return self.cell_index.get(cell)

    def live_pieces(self) -> list[Piece]:
        """In placement order (which is also the draw order)"""
        return [piece for piece in self.pieces if piece.alive]

    def pieces_of(self, faction: Faction) -> list[Piece]:
        return [piece for piece in self.live_pieces() if piece.faction == faction]

    def is_consistent(self) -> bool:
        """Every live piece indexed once at its own position, and nothing else in the index."""
        live = self.live_pieces()
        if len(live) != len(self.cell_index):
            return False
        return all(
            piece.position is not None and self.cell_index.get(piece.position) is piece
            for piece in live
        )

    # --- SELECTION STATE MACHINE ---
    def handle_cell_click(
        self, cell: Cell, active_faction: Optional[Faction] = None
    ) -> ClickResult:
        """
        Drive the selection state machine with a click on an (on-board) cell.

        ---
        1. own piece clicked: select it / deselect it / switch selection to it
        2. empty or opposing cell while a piece is selected: ask the rules engine. Board stays as it is either way.
        3. anything else: nothing happens
        """
        faction = active_faction if active_faction is not None else self.active_faction
        piece = self.piece_at(cell)

        if piece is not None and piece.faction == faction:
            return self._toggle_selection(piece, cell)

        if self._selected is not None:
            return self._evaluate_move(self._selected, cell)

        return ClickResult(Transition.IGNORED, cell, piece)

    def _toggle_selection(self, piece: Piece, cell: Cell) -> ClickResult:
        previous = self._selected
        if previous is piece:
            piece.deselect()
            self._selected = None
            return ClickResult(Transition.DESELECTED, cell, piece)

        if previous is not None:
            previous.deselect()
        piece.select()
        self._selected = piece
        transition = Transition.SELECTED if previous is None else Transition.RESELECTED
        return ClickResult(transition, cell, piece)

    def _evaluate_move(self, piece: Piece, target: Cell) -> ClickResult:
        if self.rules is not None and self.rules.is_legal(self, piece, target):
            return ClickResult(Transition.MOVE_PENDING, target, piece)
        return ClickResult(Transition.MOVE_REJECTED, target, piece)
