#!/usr/bin/env python3
"""
Functions for loading sprite sheets and saving sliced sprites as individual images.
"""

import logging
from pathlib import Path

import cv2
import numpy as np

from spriteslicer.models import ProcessedImage

logger = logging.getLogger(__name__)


def load_image(path: str | Path) -> np.ndarray:
    """
    Load an image, keeping its alpha channel if it has one.

    Raises:
        ValueError: If the file cannot be decoded as an image
    """
    img = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
    if img is None:
        raise ValueError(f"Could not load image from {path}")
    return img


def encode_image(img: np.ndarray, extension: str) -> bytes:
    """
    Encode an image in the format given by a file extension (e.g. "png").
    """
    ok, buf = cv2.imencode(f".{extension.lstrip('.')}", img)
    if not ok:
        raise ValueError(f"Could not encode image as {extension}")
    return buf.tobytes()


def sprite_path(output_dir: Path, index: int, extension: str = "png") -> Path:
    return output_dir / f"sprite_{index}.{extension.lstrip('.')}"


def remove_stale_sprites(output_dir: Path, count: int, extension: str = "png") -> None:
    """Remove sprite_<n> files with n >= count."""
    for path in output_dir.glob(f"sprite_*.{extension.lstrip('.')}"):
        index = path.stem[len("sprite_"):]
        if index.isdigit() and int(index) >= count:
            path.unlink()
            logger.debug("Removed stale sprite: %s", path)


def save_sprites(
    sprites: list[ProcessedImage],
    output_dir: str | Path,
    extension: str = "png",
) -> int:
    """
    Save each sprite as sprite_<index>.<extension> in the output directory.

    All sprites are encoded before anything is written, and files already
    written are removed again if a later write fails, so an image either gets
    all of its sprites or none. Sprite files left over from an earlier run with
    more sprites are removed.

    Args:
        sprites: Sprites to save, in output order
        output_dir: Directory for the sprite files (created if missing)
        extension: Output file extension / format

    Returns:
        Number of sprite files written

    Raises:
        OSError: If a sprite file cannot be written
    """
    output_dir = Path(output_dir)
    encoded = [encode_image(sprite.image, extension) for sprite in sprites]

    created_dir = not output_dir.exists()
    output_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    try:
        for i, data in enumerate(encoded):
            path = sprite_path(output_dir, i, extension)
            path.write_bytes(data)
            written.append(path)
            logger.debug("Saved: %s", path)
    except OSError:
        for path in written:
            path.unlink(missing_ok=True)
        if created_dir:
            output_dir.rmdir()
        raise

    remove_stale_sprites(output_dir, len(written), extension)
    return len(written)


def save_debug_images(images: list[ProcessedImage], debug_dir: str | Path) -> int:
    """
    Save debug images as <name>.png in the debug directory.

    Returns:
        Number of debug images written

    Raises:
        OSError: If a debug image cannot be written
    """
    debug_dir = Path(debug_dir)
    debug_dir.mkdir(parents=True, exist_ok=True)
    for image in images:
        path = debug_dir / f"{image.name}.png"
        if not cv2.imwrite(str(path), image.image):
            raise OSError(f"Could not write debug image {path}")
    return len(images)
