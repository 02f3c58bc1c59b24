"""
Board layout (a.k.a. theme) configuration.

The layout ties the board image to the grid: where the top-left intersection sits in pixel space (origin)
and how far apart neighbouring intersections are (cell pitch). Both the texture catalog and the coordinate
system read from the same immutable instance.
"""

import json
from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, field_validator

from src.core.exceptions import InvalidLayoutError


class BoardLayoutConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    asset_base_path: Path
    pixel_width: int
    pixel_height: int
    origin_x: int
    origin_y: int
    cell_pitch_x: int
    cell_pitch_y: int
    # seconds a single asset may take to load before the whole batch fails
    asset_timeout: float = 10.0

    @field_validator(
        *["pixel_width", "pixel_height", "cell_pitch_x", "cell_pitch_y"]
    )
    @classmethod
    def validate_positive(cls, value: int) -> int:
        if value <= 0:
            raise InvalidLayoutError(
                f"Board dimensions and cell pitch must be positive, got {value}."
            )
        return value

    @field_validator("asset_timeout")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        if value <= 0:
            raise InvalidLayoutError(f"Asset timeout must be positive, got {value}.")
        return value

    @classmethod
    def from_json_file(cls, path: Path | str) -> Self:
        """Load a theme from a JSON file using the same field names as the model."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return cls.model_validate(data)
        except (OSError, ValueError) as e:
            # ValueError covers broken JSON as well as pydantic's ValidationError
            raise InvalidLayoutError(f"Cannot read theme file {str(path)!r}: {e}") from e

    def with_asset_base_path(self, asset_base_path: Path | str) -> Self:
        """Same layout, images read from another directory."""
        return self.model_copy(update={"asset_base_path": Path(asset_base_path)})


REFERENCE_THEME = BoardLayoutConfig(
    asset_base_path=Path("assets/images"),
    pixel_width=325,
    pixel_height=403,
    origin_x=5,
    origin_y=19,
    cell_pitch_x=35,
    cell_pitch_y=36,
)

THEMES: list[BoardLayoutConfig] = [REFERENCE_THEME]
