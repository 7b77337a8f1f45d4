"""
Tests for grid slicing by tile size and by rows/columns.
"""

import cv2
import numpy as np
import pytest

from spriteslicer import BoundingBox, SliceSpec, slice_spritesheet
from spriteslicer.grid_slicing import grid_regions, parse_slice_spec, slice_grid, slice_size_from_grid


def random_image(height: int, width: int, channels: int = 4) -> np.ndarray:
    rng = np.random.default_rng(0)
    return rng.integers(0, 256, size=(height, width, channels), dtype=np.uint8)


def test_grid_regions_row_major():
    regions = grid_regions(64, 32, 16, 16)

    assert len(regions) == 8
    assert regions[0] == BoundingBox(0, 0, 16, 16)
    assert regions[3] == BoundingBox(48, 0, 16, 16)
    assert regions[4] == BoundingBox(0, 16, 16, 16)
    assert regions[7] == BoundingBox(48, 16, 16, 16)


def test_grid_regions_clips_boundary_tiles():
    regions = grid_regions(10, 10, 4, 4)

    assert len(regions) == 9
    assert [r.width for r in regions[:3]] == [4, 4, 2]
    assert [r.height for r in regions[::3]] == [4, 4, 2]
    assert regions[-1] == BoundingBox(8, 8, 2, 2)


def test_grid_regions_tile_larger_than_image():
    assert grid_regions(10, 6, 32, 32) == [BoundingBox(0, 0, 10, 6)]


@pytest.mark.parametrize("slice_width, slice_height", [(0, 16), (16, 0), (-4, 16), (16, -1)])
def test_grid_regions_rejects_non_positive(slice_width, slice_height):
    with pytest.raises(ValueError, match="positive"):
        grid_regions(64, 64, slice_width, slice_height)


def test_slice_size_from_grid():
    assert slice_size_from_grid(100, 60, rows=3, cols=4) == (25, 20)
    assert slice_size_from_grid(10, 10, rows=3, cols=3) == (3, 3)

    with pytest.raises(ValueError, match="positive"):
        slice_size_from_grid(100, 60, rows=0, cols=4)
    with pytest.raises(ValueError, match="positive"):
        slice_size_from_grid(100, 60, rows=3, cols=-1)


def test_slice_by_rows_and_cols():
    img = random_image(40, 60)

    tiles = slice_spritesheet(img, SliceSpec(rows=2, cols=3))

    assert len(tiles) == 6
    assert [t.name for t in tiles] == [f"sprite_{i}" for i in range(6)]
    assert sum(t.image.shape[1] for t in tiles[:3]) == 60
    assert sum(t.image.shape[0] for t in tiles[::3]) == 40
    assert np.array_equal(tiles[4].image, img[20:40, 20:40])


def test_slice_by_rows_and_cols_with_remainder():
    """A remainder becomes an extra narrow column instead of being dropped."""
    img = random_image(10, 10)

    tiles = slice_spritesheet(img, SliceSpec(rows=2, cols=3))

    assert len(tiles) == 8
    assert [t.bbox.width for t in tiles[:4]] == [3, 3, 3, 1]
    assert sum(t.bbox.width for t in tiles[:4]) == 10


def test_slice_by_pixel_size():
    img = random_image(32, 48, channels=3)

    tiles = slice_spritesheet(img, SliceSpec(slice_width=16, slice_height=16))

    assert len(tiles) == 6
    assert all(t.image.shape == (16, 16, 3) for t in tiles)
    assert tiles[5].bbox == BoundingBox(32, 16, 16, 16)


def test_slice_grayscale_image():
    img = np.arange(64, dtype=np.uint8).reshape(8, 8)

    tiles = slice_spritesheet(img, SliceSpec(slice_width=4, slice_height=4))

    assert len(tiles) == 4
    assert tiles[1].image.tolist() == img[0:4, 4:8].tolist()


def test_slice_rejects_too_many_columns():
    img = random_image(4, 4)
    with pytest.raises(ValueError, match="positive"):
        slice_spritesheet(img, SliceSpec(rows=1, cols=8))


def test_slice_is_idempotent():
    img = random_image(30, 50)
    spec = SliceSpec(slice_width=16, slice_height=12)

    first = slice_spritesheet(img, spec)
    second = slice_spritesheet(img, spec)

    assert len(first) == len(second)
    for a, b in zip(first, second):
        assert a.bbox == b.bbox
        assert cv2.imencode(".png", a.image)[1].tobytes() == cv2.imencode(".png", b.image)[1].tobytes()


def test_slice_grid_tiles_are_copies():
    img = random_image(8, 8)
    tiles = slice_grid(img, 4, 4)
    tiles[0].image[:] = 0
    assert np.array_equal(img, random_image(8, 8))


def test_parse_slice_spec():
    assert parse_slice_spec("32px", "16px") == SliceSpec(slice_width=32, slice_height=16)
    assert parse_slice_spec("32PX", "16Px") == SliceSpec(slice_width=32, slice_height=16)
    assert parse_slice_spec("4", "8") == SliceSpec(rows=4, cols=8)


@pytest.mark.parametrize("first, second", [("32px", "8"), ("a", "b"), ("4", "px"), ("1.5", "2")])
def test_parse_slice_spec_invalid(first, second):
    with pytest.raises(ValueError, match="Invalid dimensions"):
        parse_slice_spec(first, second)


def test_slice_spec_requires_one_form():
    with pytest.raises(ValueError):
        SliceSpec()
    with pytest.raises(ValueError):
        SliceSpec(slice_width=16)
    with pytest.raises(ValueError):
        SliceSpec(rows=2, cols=2, slice_width=16, slice_height=16)


def test_slice_spec_describe():
    assert SliceSpec(rows=2, cols=3).describe() == "2 rows and 3 columns"
    assert SliceSpec(slice_width=16, slice_height=8).describe() == "16x8 pixels"
