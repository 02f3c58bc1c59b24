"""
Orchestration of the game: load textures, set up the board, draw, and route clicks into the board state.

Initialization order is fixed: textures -> both factions -> first frame -> click listener. The listener is attached last,
so a click can never reach the board before the textures exist.
"""

from typing import Callable, Optional, Protocol

import pygame
from loguru import logger

from src.assets.textures import TextureCatalog
from src.core.config import BoardLayoutConfig
from src.render.renderer import Renderer
from src.xiangqi.board import BoardState
from src.xiangqi.coordinates import BoardCoordinateSystem
from src.xiangqi.rules import ClickResult, MoveRules

ClickListener = Callable[[float, float], None]


class PointerSource(Protocol):
    """Delivers clicks in coordinates local to the drawing surface."""

    def add_click_listener(self, listener: ClickListener) -> None: ...


class GameController:
    def __init__(
        self,
        layout: BoardLayoutConfig,
        renderer: Renderer,
        textures: Optional[TextureCatalog] = None,
        rules: Optional[MoveRules] = None,
    ) -> None:
        self.layout = layout
        self.renderer = renderer
        self.textures = textures or TextureCatalog(layout)
        self.coordinates = BoardCoordinateSystem(layout)
        self.board = BoardState(rules=rules)
        self.initialized = False

    async def init(self, pointer_source: PointerSource) -> None:
        """The only suspending step. A failing asset propagates and no listener gets attached."""
        await self.textures.init()
        self.board.set_up_start_position()
        self.render()
        pointer_source.add_click_listener(self.on_pointer_event)
        self.initialized = True
        logger.info("Game initialized, listening for clicks")

    # --- INPUT ---
    def on_click(
        self, client_x: float, client_y: float, bbox_left: float, bbox_top: float
    ) -> Optional[ClickResult]:
        """Raw window coordinates plus the surface's bounding-box origin."""
        return self.on_pointer_event(client_x - bbox_left, client_y - bbox_top)

    def on_pointer_event(self, x: float, y: float) -> Optional[ClickResult]:
        """Surface-local coordinates. Off-board clicks are dropped without touching anything."""
        cell = self.coordinates.locate(x, y)
        if cell is None:
            logger.debug(f"Click at ({x}, {y}) is off the board, ignored")
            return None

        result = self.board.handle_cell_click(cell)
        logger.debug(f"Click on {cell}: {result.transition.name}")
        self.render()
        return result

    # --- OUTPUT ---
    def render(self) -> None:
        self.renderer.resize(self.layout.pixel_width, self.layout.pixel_height)
        self.renderer.draw(self.textures.board(), 0, 0)
        for piece in self.board.live_pieces():
            # live pieces are always placed
            assert piece.position is not None
            x, y = self.coordinates.cell_to_pixel_origin(piece.position)
            self.renderer.draw(self.textures.piece(piece.faction, piece.type), x, y)
            if piece.selected:
                self.renderer.draw(
                    self.textures.selection_highlight(piece.faction), x, y
                )
        self.renderer.present()


class PygameClickSource:
    """Pumps the pygame event queue. The window is the whole drawing surface, so its bounding box starts at (0, 0)."""

    def __init__(self) -> None:
        self._listeners: list[ClickListener] = []
        self.running = False

    def add_click_listener(self, listener: ClickListener) -> None:
        self._listeners.append(listener)

    def dispatch(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            x, y = event.pos
            for listener in self._listeners:
                listener(x, y)

    def run(self, fps: int = 30) -> None:
        """Blocking event loop until the window is closed."""
        clock = pygame.time.Clock()
        self.running = True
        while self.running:
            for event in pygame.event.get():
                self.dispatch(event)
            clock.tick(fps)
