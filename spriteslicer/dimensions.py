"""
Heuristics for suggesting a common sprite size from detected sprite boxes.
"""

from typing import Iterable

import numpy as np

COMMON_SPRITE_SIZES = (8, 16, 32, 48, 64, 128)

# Max distance (pixels) from a common size before falling back to a power of two
SNAP_TOLERANCE = 10


def nearest_power_of_two(value: int) -> int:
    """
    Return the power of two closest to `value`. Ties go to the smaller power.
    """
    if value <= 0:
        return 1

    power = 1
    while power < value:
        power *= 2

    previous_power = power // 2
    if previous_power >= 1 and abs(value - previous_power) <= abs(power - value):
        return previous_power
    return power


def snap_to_common_or_power_of_two(value: int) -> int:
    """
    Snap a dimension to the closest common sprite size, or to the nearest power
    of two if no common size is within SNAP_TOLERANCE pixels.

    Args:
        value: Dimension in pixels

    Returns:
        Snapped dimension
    """
    # min() keeps the first minimum, so the smaller size wins a tie
    closest = min(COMMON_SPRITE_SIZES, key=lambda size: abs(size - value))
    if abs(closest - value) > SNAP_TOLERANCE:
        return nearest_power_of_two(value)
    return closest


def normalize(sizes: Iterable[tuple[int, int]]) -> tuple[int, int]:
    """
    Suggest a common sprite size for a population of detected sprites.

    Width and height are averaged independently, truncated to whole pixels,
    and each snapped with `snap_to_common_or_power_of_two`.

    Args:
        sizes: (width, height) of each detected sprite

    Returns:
        Tuple of (common width, common height)

    Raises:
        ValueError: If `sizes` is empty
    """
    samples = np.array(list(sizes), dtype=float).reshape(-1, 2)
    if len(samples) == 0:
        raise ValueError("Cannot normalize an empty list of sprite sizes")

    avg_w, avg_h = samples.mean(axis=0)
    return snap_to_common_or_power_of_two(int(avg_w)), snap_to_common_or_power_of_two(int(avg_h))
