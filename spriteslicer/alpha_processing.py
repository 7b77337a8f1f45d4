"""
Functions for turning an alpha channel into a sprite occupancy mask.
"""

import cv2
import numpy as np

# Any pixel at least this opaque counts as sprite content
ALPHA_THRESHOLD = 1

DILATION_KERNEL_SIZE = 5
DILATION_ITERATIONS = 1


def channel_count(img: np.ndarray) -> int:
    """Number of channels in an OpenCV image (1 for a 2D array)."""
    return 1 if img.ndim == 2 else img.shape[2]


def has_alpha_channel(img: np.ndarray) -> bool:
    return channel_count(img) >= 4


def binarize_alpha(alpha: np.ndarray, threshold: int = ALPHA_THRESHOLD) -> np.ndarray:
    """
    Make a binary mask from the alpha channel.

    Args:
        alpha: Single channel alpha image
        threshold: Minimum alpha value for a pixel to be foreground

    Returns:
        uint8 mask with 255 for foreground and 0 for background
    """
    # THRESH_BINARY keeps values strictly above the threshold
    _, binary = cv2.threshold(alpha, threshold - 1, 255, cv2.THRESH_BINARY)
    return binary.astype(np.uint8)


def dilate_mask(mask: np.ndarray, kernel_size: int = DILATION_KERNEL_SIZE,
                iterations: int = DILATION_ITERATIONS) -> np.ndarray:
    """
    Grow the foreground of a binary mask so that sprite pixels separated by
    narrow gaps end up in a single blob.

    Args:
        mask: Binary mask (0/255)
        kernel_size: Side of the square structuring element
        iterations: Number of dilation passes

    Returns:
        Dilated mask
    """
    kernel = cv2.getStructuringElement(cv2.MORPH_RECT, (kernel_size, kernel_size))
    return cv2.dilate(mask, kernel, iterations=iterations)


def sprite_mask(img: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """
    Build the occupancy mask used for sprite detection.

    Args:
        img: Image with at least 4 channels (BGRA)

    Returns:
        Tuple of (binary alpha mask, dilated mask)
    """
    assert has_alpha_channel(img), "Image must have an alpha channel"
    binary = binarize_alpha(img[:, :, 3])
    return binary, dilate_mask(binary)
