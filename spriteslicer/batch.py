"""
Batch processing of sprite sheet files.

Each image is loaded, sliced or auto-detected, and written to its own output
directory before the next one is touched. A failure on one image is recorded
in its report and never stops the rest of the batch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

import cv2

from spriteslicer.api import detect_sprites, slice_spritesheet
from spriteslicer.grid_slicing import SliceSpec
from spriteslicer.sprite_save import load_image, save_debug_images, save_sprites

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tiff")


@dataclass
class ImageReport:
    """
    Outcome of processing one image.

    Attributes:
        path: Source image
        output_dir: Directory the sprites were (or would have been) written to
        success: True if all sprites of the image were written
        count: Number of sprite files written
        reason: Failure reason, None on success
        common_size: Suggested common sprite size (auto detection only)
    """
    path: Path
    output_dir: Path
    success: bool
    count: int = 0
    reason: str | None = None
    common_size: tuple[int, int] | None = None


def is_supported_image(path: Path) -> bool:
    return path.suffix.lower() in SUPPORTED_EXTENSIONS


def find_images(path: str | Path) -> list[Path]:
    """
    Resolve the input argument to a list of images.

    A file is returned as is. For a directory, all files with a supported
    image extension are returned, sorted by name.

    Raises:
        ValueError: If the path is neither a file nor a directory
    """
    path = Path(path)
    if path.is_file():
        return [path]
    if path.is_dir():
        return sorted(p for p in path.iterdir() if p.is_file() and is_supported_image(p))
    raise ValueError(f"{path} is not a file or directory")


def output_dir_for(image_path: Path, output_root: Path | None = None) -> Path:
    """
    Directory for the sprites of one image: a folder named after the image,
    next to it or under `output_root` if given.
    """
    root = output_root if output_root is not None else image_path.parent
    return root / image_path.stem


def process_image(
    path: str | Path,
    spec: SliceSpec | None = None,
    *,
    output_root: Path | None = None,
    extension: str = "png",
    debug_dir: Path | None = None,
) -> ImageReport:
    """
    Slice one image file and write its sprites.

    Args:
        path: Image file
        spec: Grid to slice by, or None for automatic detection
        output_root: Parent directory for per-image output folders
        extension: Output file extension / format
        debug_dir: If given, intermediate detection images are saved here

    Returns:
        ImageReport for the image
    """
    path = Path(path)
    output_dir = output_dir_for(path, output_root)
    try:
        img = load_image(path)
        logger.debug("Loaded %s with shape %s", path, img.shape)

        common_size = None
        if spec is not None:
            sprites = slice_spritesheet(img, spec)
        else:
            result = detect_sprites(img, debug=debug_dir is not None)
            if debug_dir is not None and result.debug_images:
                save_debug_images(result.debug_images, debug_dir / path.stem)
            if not result.success:
                return ImageReport(path, output_dir, success=False, reason=result.reason)
            sprites = result.sprites
            common_size = result.common_size()

        count = save_sprites(sprites, output_dir, extension)
    except (ValueError, OSError, cv2.error) as e:
        logger.debug("Failed to process %s", path, exc_info=True)
        return ImageReport(path, output_dir, success=False, reason=str(e))

    return ImageReport(path, output_dir, success=True, count=count, common_size=common_size)


def process_batch(paths: Iterable[str | Path], spec: SliceSpec | None = None,
                  **kwargs) -> Iterator[ImageReport]:
    """
    Process images one after another, yielding a report for each.

    Keyword arguments are passed to `process_image`.
    """
    for path in paths:
        yield process_image(path, spec, **kwargs)
