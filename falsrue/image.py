"""Nearest-neighbour scaling of flat, row-major pixel buffers."""

from __future__ import annotations

import struct
from typing import Sequence, TypeVar

T = TypeVar("T")

_F32 = struct.Struct("f")


def _f32(value: float) -> float:
    return _F32.unpack(_F32.pack(value))[0]


def nearest_neighbor_scale(
    pixels: Sequence[T], src_width: int, src_height: int, width: int, height: int
) -> list[T]:
    """Scale a ``src_width`` by ``src_height`` image to ``width`` by ``height``."""
    if src_width <= 0 or src_height <= 0 or width <= 0 or height <= 0:
        raise ValueError("image dimensions must be positive")
    if len(pixels) != src_width * src_height:
        raise ValueError("pixel count does not match the source dimensions")

    h_rate = _f32(src_height / height)
    w_rate = _f32(src_width / width)
    columns = [int(_f32(w_rate * x)) for x in range(width)]
    result: list[T] = []
    for y in range(height):
        row_start = int(_f32(h_rate * y)) * src_width
        result.extend(pixels[row_start + column] for column in columns)
    return result