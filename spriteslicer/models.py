"""
Data types shared by the slicing and detection pipelines.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

import numpy as np

from spriteslicer.dimensions import normalize


class BoundingBox(NamedTuple):
    """Axis-aligned rectangle in pixel coordinates."""
    x: int
    y: int
    width: int
    height: int

    def crop(self, img: np.ndarray) -> np.ndarray:
        """Copy the region out of `img`, keeping all of its channels."""
        return img[self.y:self.y + self.height, self.x:self.x + self.width].copy()


@dataclass
class ProcessedImage:
    """
    An image produced by one of the pipelines.

    Attributes:
        image: The image data as a numpy array (same channels as the source)
        name: Descriptive name (e.g. "sprite_0", "debug_alpha_mask")
        bbox: Region of the source image for sprites, or None for debug images
        is_debug: True if this is a debug/intermediate image
        metadata: Additional metadata (e.g. sprite index)
    """
    image: np.ndarray
    name: str
    bbox: BoundingBox | None
    is_debug: bool = False
    metadata: dict[str, int] | None = None


@dataclass
class DetectionResult:
    """
    Outcome of automatic sprite detection on one image.

    Attributes:
        sprites: Cropped sprites in contour order
        success: False if the image has no alpha channel or no sprites were found
        reason: Human readable failure reason, None on success
        debug_images: Intermediate images, only filled when debug was requested
    """
    sprites: list[ProcessedImage]
    success: bool
    reason: str | None = None
    debug_images: list[ProcessedImage] = field(default_factory=list)

    @property
    def sizes(self) -> list[tuple[int, int]]:
        return [(s.bbox.width, s.bbox.height) for s in self.sprites if s.bbox is not None]

    def common_size(self) -> tuple[int, int] | None:
        """Suggested common sprite size, or None if nothing was detected."""
        if not self.sizes:
            return None
        return normalize(self.sizes)
