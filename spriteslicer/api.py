#!/usr/bin/env python3
"""
Public API for the sprite slicer library.

This module provides the two entry points for programmatic use: automatic
sprite detection from the alpha channel, and regular grid slicing. Neither
performs file I/O; see spriteslicer.sprite_save and spriteslicer.batch for that.
"""

from __future__ import annotations

import logging

import numpy as np

from spriteslicer.alpha_processing import channel_count, has_alpha_channel, sprite_mask
from spriteslicer.grid_slicing import SliceSpec, slice_grid
from spriteslicer.models import DetectionResult, ProcessedImage
from spriteslicer.sprite_segmentation import draw_regions, find_sprite_regions

logger = logging.getLogger(__name__)


def _validate_image(image: np.ndarray | None) -> None:
    if image is None:
        raise ValueError("image cannot be None")

    if not isinstance(image, np.ndarray):
        raise ValueError(f"image must be a numpy array, got {type(image)}")

    if image.ndim not in (2, 3):
        raise ValueError(f"image must be a 2D or 3D array, got shape {image.shape}")

    if image.shape[0] == 0 or image.shape[1] == 0:
        raise ValueError(f"image must not be empty, got shape {image.shape}")


def detect_sprites(image: np.ndarray | None, *, debug: bool = False) -> DetectionResult:
    """
    Detect sprites on a transparent background and crop each one.

    The alpha channel is binarized (any opacity counts as sprite content),
    dilated with a 5x5 square kernel so that nearly touching pixels merge into
    one blob, and the bounding box of every external contour is cropped from
    the original image. Because of the dilation, boxes extend up to 2 pixels
    beyond the opaque pixels on each side (clipped to the image).

    Args:
        image: Input image as numpy array, BGRA (uint8 or uint16).
        debug: If True, the result also carries the intermediate masks and a
               visualization of the detected regions.

    Returns:
        DetectionResult. `success` is False, with no sprites, when the image
        has no alpha channel or no sprite could be found.

    Raises:
        ValueError: If image is None or not an image-shaped numpy array.

    Example:
        >>> import cv2
        >>> from spriteslicer import detect_sprites
        >>>
        >>> img = cv2.imread("spritesheet.png", cv2.IMREAD_UNCHANGED)
        >>> result = detect_sprites(img)
        >>> if result.success:
        >>>     for sprite in result.sprites:
        >>>         cv2.imwrite(f"{sprite.name}.png", sprite.image)
    """
    _validate_image(image)
    assert image is not None

    if not has_alpha_channel(image):
        logger.debug("Image has %d channel(s), skipping auto detection", channel_count(image))
        return DetectionResult(sprites=[], success=False, reason="Image does not have an alpha channel.")

    binary, dilated = sprite_mask(image)
    regions = find_sprite_regions(dilated)
    logger.debug("Found %d contour(s) in %dx%d image", len(regions), image.shape[1], image.shape[0])

    debug_images = []
    if debug:
        debug_images = [
            ProcessedImage(image=binary, name="debug_alpha_mask", bbox=None, is_debug=True),
            ProcessedImage(image=dilated, name="debug_dilated_mask", bbox=None, is_debug=True),
            ProcessedImage(image=draw_regions(image, regions), name="debug_segmented", bbox=None,
                           is_debug=True, metadata={"num_sprites": len(regions)}),
        ]

    if not regions:
        return DetectionResult(sprites=[], success=False, reason="No contours found.",
                               debug_images=debug_images)

    sprites = [
        ProcessedImage(
            image=region.crop(image),
            name=f"sprite_{i}",
            bbox=region,
            metadata={"sprite_index": i},
        )
        for i, region in enumerate(regions)
    ]
    return DetectionResult(sprites=sprites, success=True, debug_images=debug_images)


def slice_spritesheet(image: np.ndarray | None, spec: SliceSpec) -> list[ProcessedImage]:
    """
    Cut an image into a regular grid of tiles.

    Args:
        image: Input image as numpy array, any channel count.
        spec: Tile size in pixels or a rows/cols count. With rows/cols the tile
              size is derived by integer division, so a remainder produces an
              extra, narrower last row or column.

    Returns:
        Tiles in row-major order, named sprite_0, sprite_1, ...

    Raises:
        ValueError: If the image is invalid or the tile size is not positive.
    """
    _validate_image(image)
    assert image is not None

    height, width = image.shape[:2]
    slice_width, slice_height = spec.slice_size(width, height)
    logger.debug("Slicing %dx%d image into %dx%d tiles", width, height, slice_width, slice_height)
    return slice_grid(image, slice_width, slice_height)
