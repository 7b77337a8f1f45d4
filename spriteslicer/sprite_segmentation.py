"""
Functions for segmenting sprites in a sprite sheet.
"""

import cv2
import numpy as np

from spriteslicer.models import BoundingBox


def find_sprite_regions(mask: np.ndarray) -> list[BoundingBox]:
    """
    Find the bounding box of every external contour in a binary mask.

    Boxes are returned in the order cv2.findContours reports the outer
    contours, which is the reverse of raster discovery: the mask is scanned
    top-to-bottom, left-to-right, and the blob whose first boundary pixel
    (topmost, then leftmost) is met last in that scan comes first. For sprites
    stacked vertically this means bottom-most first. No sorting is applied.

    Args:
        mask: Binary mask (0/255, uint8)

    Returns:
        List of sprite regions
    """
    contours, _hierarchy = cv2.findContours(mask, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)

    regions = []
    for contour in contours:
        x, y, w, h = cv2.boundingRect(contour)
        regions.append(BoundingBox(int(x), int(y), int(w), int(h)))

    return regions


def draw_regions(img: np.ndarray, regions: list[BoundingBox]) -> np.ndarray:
    """
    Draw detected regions on a copy of the image for debugging.
    """
    vis_img = img.copy()
    color = (0, 255, 0, 255)[:img.shape[2]] if img.ndim == 3 else 255
    for x, y, w, h in regions:
        cv2.rectangle(vis_img, (x, y), (x + w - 1, y + h - 1), color, 1)
    return vis_img
