import pytest

from falsrue.image import nearest_neighbor_scale


def test_identity_scale_keeps_pixels():
    pixels = list(range(12))
    assert nearest_neighbor_scale(pixels, 4, 3, 4, 3) == pixels


def test_double_size_repeats_pixels():
    result = nearest_neighbor_scale([1, 2, 3, 4], 2, 2, 4, 4)
    assert result == [1, 1, 2, 2, 1, 1, 2, 2, 3, 3, 4, 4, 3, 3, 4, 4]


def test_half_size_picks_even_pixels():
    pixels = list(range(16))
    assert nearest_neighbor_scale(pixels, 4, 4, 2, 2) == [0, 2, 8, 10]


def test_window_canvas_scale_blocks():
    pixels = list(range(300 * 175))
    result = nearest_neighbor_scale(pixels, 300, 175, 1200, 700)
    assert len(result) == 1200 * 700
    for x, y in [(0, 0), (5, 9), (1199, 699), (401, 333)]:
        assert result[y * 1200 + x] == pixels[(y // 4) * 300 + x // 4]


def test_every_output_pixel_comes_from_source():
    pixels = [10, 20, 30, 40, 50, 60]
    result = nearest_neighbor_scale(pixels, 3, 2, 7, 5)
    assert len(result) == 35
    assert set(result) <= set(pixels)


def test_pixel_count_mismatch():
    with pytest.raises(ValueError):
        nearest_neighbor_scale([1, 2, 3], 2, 2, 4, 4)


def test_non_positive_size():
    with pytest.raises(ValueError):
        nearest_neighbor_scale([1], 1, 1, 0, 4)