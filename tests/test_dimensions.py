"""
Tests for the common sprite size heuristics.
"""

import pytest

from spriteslicer.dimensions import (
    COMMON_SPRITE_SIZES,
    nearest_power_of_two,
    normalize,
    snap_to_common_or_power_of_two,
)


@pytest.mark.parametrize("value, expected", [
    (-5, 1),
    (0, 1),
    (1, 1),
    (2, 2),
    (3, 2),     # tie between 2 and 4
    (5, 4),
    (6, 4),     # tie between 4 and 8
    (7, 8),
    (12, 8),    # tie between 8 and 16
    (13, 16),
    (100, 128),
    (1000, 1024),
])
def test_nearest_power_of_two(value, expected):
    assert nearest_power_of_two(value) == expected


def test_snap_to_common_size():
    assert snap_to_common_or_power_of_two(16) == 16
    assert snap_to_common_or_power_of_two(58) == 64
    assert snap_to_common_or_power_of_two(120) == 128
    # 40 is equally far from 32 and 48, the smaller one wins
    assert snap_to_common_or_power_of_two(40) == 32


def test_snap_falls_back_to_power_of_two():
    # Closest common size 64 is 26 away, nearest power of two is also 64
    assert snap_to_common_or_power_of_two(90) == 64
    # Closest common size 128 is 72 away
    assert snap_to_common_or_power_of_two(200) == 256


def test_common_sizes_are_ascending():
    assert list(COMMON_SPRITE_SIZES) == sorted(COMMON_SPRITE_SIZES)


def test_normalize_snaps_to_common_size():
    assert normalize([(16, 16), (17, 15)]) == (16, 16)


def test_normalize_falls_back_to_power_of_two():
    assert normalize([(100, 100)]) == (128, 128)


def test_normalize_width_and_height_independent():
    assert normalize([(200, 30), (200, 34)]) == (256, 32)


def test_normalize_truncates_mean():
    # Mean width 40.5 is truncated to 40, a tie between 32 and 48
    assert normalize([(40, 8), (41, 8)]) == (32, 8)


def test_normalize_empty():
    with pytest.raises(ValueError, match="empty"):
        normalize([])
