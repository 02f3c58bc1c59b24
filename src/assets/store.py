"""
Asynchronous image store.

`load` fans out one fetch+decode per asset and waits for all of them. Decoding is blocking (pygame), so every
asset is decoded in its own daemon thread. A loader that hangs past the timeout is abandoned, not joined, so a
stalled file never keeps the caller (or the interpreter) waiting. A batch either loads completely or fails with the first asset that broke;
there is no partial success.
"""

import asyncio
import threading
from contextlib import suppress
from pathlib import Path
from typing import Any, Callable, Hashable, Mapping

import pygame
from loguru import logger

from src.core.exceptions import AssetLoadError, AssetNotLoadedError

# Anything that turns a file path into an image handle (a pygame Surface by default)
ImageLoader = Callable[[Path], Any]

DEFAULT_TIMEOUT = 10.0


def load_image(path: Path) -> pygame.Surface:
    return pygame.image.load(str(path))


class AssetStore:
    def __init__(
        self,
        base_path: Path | str,
        loader: ImageLoader = load_image,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.base_path = Path(base_path)
        self.loader = loader
        self.timeout = timeout
        self._images: dict[Hashable, Any] = {}

    async def load(self, assets: Mapping[Hashable, Path | str]) -> None:
        """
        Load every asset (name -> path relative to base_path) concurrently.

        ---
        Raises AssetLoadError for the first asset that fails or times out; nothing from a failed batch is stored.
        """
        logger.info(f"Loading {len(assets)} assets from {str(self.base_path)!r}")
        loaded = await asyncio.gather(
            *(self._load_one(name, self.base_path / path) for name, path in assets.items())
        )
        self._images.update(zip(assets.keys(), loaded))
        logger.info(f"Loaded {len(assets)} assets")

    async def _load_one(self, name: Hashable, path: Path) -> Any:
        try:
            return await asyncio.wait_for(
                self._decode_in_thread(path), timeout=self.timeout
            )
        except TimeoutError as e:
            logger.error(f"Timed out loading {name!r} after {self.timeout}s")
            raise AssetLoadError(name, path, f"timed out after {self.timeout}s") from e
        except (OSError, pygame.error) as e:
            logger.error(f"Failed loading {name!r}: {e}")
            raise AssetLoadError(name, path, str(e)) from e

    def _decode_in_thread(self, path: Path) -> asyncio.Future:
        loop = asyncio.get_running_loop()
        future = loop.create_future()

        def worker() -> None:
            try:
                outcome = (_set_result, self.loader(path))
            except Exception as e:
                outcome = (_set_exception, e)
            # the loop is closed when the batch was abandoned after a timeout
            with suppress(RuntimeError):
                loop.call_soon_threadsafe(*outcome, future)

        threading.Thread(
            target=worker, name=f"asset-loader-{path.name}", daemon=True
        ).start()
        return future

    def get(self, name: Hashable) -> Any:
        try:
            return self._images[name]
        except KeyError:
            raise AssetNotLoadedError(f"Asset {name!r} has not been loaded.") from None

    def is_loaded(self, name: Hashable) -> bool:
        return name in self._images


def _set_result(value: Any, future: asyncio.Future) -> None:
    if not future.done():
        future.set_result(value)


def _set_exception(error: Exception, future: asyncio.Future) -> None:
    if not future.done():
        future.set_exception(error)
