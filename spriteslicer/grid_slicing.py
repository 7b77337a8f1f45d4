"""
Functions for cutting a sprite sheet into a regular grid of tiles.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from spriteslicer.models import BoundingBox, ProcessedImage


@dataclass(frozen=True)
class SliceSpec:
    """
    A grid slicing request: either a tile size in pixels or a row/column count.
    """
    slice_width: int | None = None
    slice_height: int | None = None
    rows: int | None = None
    cols: int | None = None

    def __post_init__(self) -> None:
        by_size = self.slice_width is not None or self.slice_height is not None
        by_grid = self.rows is not None or self.cols is not None
        if by_size == by_grid:
            raise ValueError("Give either slice width/height or rows/cols")
        if by_size and (self.slice_width is None or self.slice_height is None):
            raise ValueError("Both slice width and slice height are required")
        if by_grid and (self.rows is None or self.cols is None):
            raise ValueError("Both rows and cols are required")

    def slice_size(self, image_width: int, image_height: int) -> tuple[int, int]:
        """Tile size in pixels for an image of the given extent."""
        if self.rows is not None and self.cols is not None:
            return slice_size_from_grid(image_width, image_height, self.rows, self.cols)
        assert self.slice_width is not None and self.slice_height is not None
        return self.slice_width, self.slice_height

    def describe(self) -> str:
        if self.rows is not None:
            return f"{self.rows} rows and {self.cols} columns"
        return f"{self.slice_width}x{self.slice_height} pixels"


def parse_slice_spec(first: str, second: str) -> SliceSpec:
    """
    Parse a pair of command line dimensions.

    "32px 16px" means a tile size in pixels, "4 8" means 4 rows and 8 columns.

    Raises:
        ValueError: If the values are not integers or mix the two forms
    """
    first, second = first.strip().lower(), second.strip().lower()
    try:
        if first.endswith("px") and second.endswith("px"):
            return SliceSpec(slice_width=int(first[:-2]), slice_height=int(second[:-2]))
        return SliceSpec(rows=int(first), cols=int(second))
    except ValueError:
        raise ValueError(
            f"Invalid dimensions '{first} {second}': expected '<width>px <height>px' or '<rows> <cols>'"
        ) from None


def slice_size_from_grid(image_width: int, image_height: int, rows: int, cols: int) -> tuple[int, int]:
    """
    Derive the tile size for a rows x cols grid. Integer division is used, so
    any remainder ends up in an extra, narrower last row/column.

    Returns:
        Tuple of (slice width, slice height)
    """
    if rows <= 0 or cols <= 0:
        raise ValueError(f"rows and cols must be positive, got {rows} rows and {cols} cols")
    return image_width // cols, image_height // rows


def grid_regions(image_width: int, image_height: int,
                 slice_width: int, slice_height: int) -> list[BoundingBox]:
    """
    Partition an image into tiles in row-major order.

    Tiles on the right and bottom edges are clipped to the image, never padded
    and never dropped.

    Args:
        image_width: Width of the source image
        image_height: Height of the source image
        slice_width: Tile width in pixels
        slice_height: Tile height in pixels

    Returns:
        List of tile regions

    Raises:
        ValueError: If a slice dimension is not positive
    """
    if slice_width <= 0 or slice_height <= 0:
        raise ValueError(f"Slice dimensions must be positive, got {slice_width}x{slice_height}")

    regions = []
    for y in range(0, image_height, slice_height):
        for x in range(0, image_width, slice_width):
            w = min(slice_width, image_width - x)
            h = min(slice_height, image_height - y)
            regions.append(BoundingBox(x, y, w, h))
    return regions


def slice_grid(img: np.ndarray, slice_width: int, slice_height: int) -> list[ProcessedImage]:
    """
    Cut an image into fixed-size tiles.

    Returns:
        Tiles in row-major order, named sprite_0, sprite_1, ...
    """
    height, width = img.shape[:2]
    return [
        ProcessedImage(
            image=region.crop(img),
            name=f"sprite_{i}",
            bbox=region,
            metadata={"sprite_index": i},
        )
        for i, region in enumerate(grid_regions(width, height, slice_width, slice_height))
    ]
