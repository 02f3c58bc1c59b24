"""Entry point: build the controller, initialize it, then hand control to the pygame event loop."""

import argparse
import asyncio
from typing import Optional, Sequence

import pygame
from loguru import logger

from src.core.config import THEMES, BoardLayoutConfig
from src.core.exceptions import InvalidLayoutError, XiangqiError
from src.core.logging import configure_logging
from src.render.renderer import PygameRenderer
from src.services.game_controller import GameController, PygameClickSource


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Xiangqi board")
    parser.add_argument(
        "--theme", type=int, default=0, help="index into the built-in themes"
    )
    parser.add_argument(
        "--theme-file", default=None, help="JSON file with a board layout"
    )
    parser.add_argument(
        "--assets", default=None, help="override the directory images are read from"
    )
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def build_layout(args: argparse.Namespace) -> BoardLayoutConfig:
    if args.theme_file:
        layout = BoardLayoutConfig.from_json_file(args.theme_file)
    elif 0 <= args.theme < len(THEMES):
        layout = THEMES[args.theme]
    else:
        raise InvalidLayoutError(
            f"No theme {args.theme}. Pick one from 0..{len(THEMES) - 1}"
        )
    if args.assets:
        layout = layout.with_asset_base_path(args.assets)
    return layout


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    pygame.init()
    try:
        clicks = PygameClickSource()
        try:
            layout = build_layout(args)
            controller = GameController(layout, PygameRenderer(use_display=True))
            asyncio.run(controller.init(clicks))
        except XiangqiError as e:
            logger.error(f"Could not start the game: {e}")
            return 1
        clicks.run()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
