"""The drawing surface. The controller only talks to the Renderer protocol; pygame lives behind it."""

from typing import Any, Optional, Protocol

import pygame

BACKGROUND_COLOR = (0, 0, 0)


class Renderer(Protocol):
    def resize(self, width: int, height: int) -> None:
        """Make the surface exactly this size (and blank it)."""
        ...

    def clear(self) -> None: ...

    def draw(self, image: Any, x: int, y: int) -> None:
        """Draw an image with its top-left corner at (x, y)."""
        ...

    def present(self) -> None:
        """Make the finished frame visible."""
        ...


class PygameRenderer:
    """Draws onto the display window when `use_display` is set, otherwise onto an off-screen Surface."""

    def __init__(self, use_display: bool = False, caption: str = "Xiangqi") -> None:
        self.use_display = use_display
        self.caption = caption
        self.surface: Optional[pygame.Surface] = None

    def resize(self, width: int, height: int) -> None:
        if self.surface is not None and self.surface.get_size() == (width, height):
            self.clear()
            return
        if self.use_display:
            self.surface = pygame.display.set_mode((width, height))
            pygame.display.set_caption(self.caption)
        else:
            self.surface = pygame.Surface((width, height))
        self.clear()

    def clear(self) -> None:
        self._require_surface().fill(BACKGROUND_COLOR)

    def draw(self, image: pygame.Surface, x: int, y: int) -> None:
        self._require_surface().blit(image, (x, y))

    def present(self) -> None:
        if self.use_display:
            pygame.display.flip()

    def _require_surface(self) -> pygame.Surface:
        if self.surface is None:
            raise RuntimeError("Renderer has no surface yet. Call resize() first.")
        return self.surface
