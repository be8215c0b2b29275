"""Builders for bordered nine-patch test images."""

from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np

from ninepatch.models.pixel_grid import PixelGrid

MARKER = (0, 0, 0, 255)

Run = Tuple[int, int]


def gradient_content(width: int, height: int) -> np.ndarray:
    """Opaque content where every pixel is distinguishable by its (x, y)."""
    ys, xs = np.mgrid[0:height, 0:width]
    arr = np.empty((height, width, 4), dtype=np.uint8)
    arr[..., 0] = xs % 256
    arr[..., 1] = ys % 256
    arr[..., 2] = (xs * 7 + ys * 13) % 256
    arr[..., 3] = 255
    return arr


def make_ninepatch(content: np.ndarray, top: Iterable[Run] = (), left: Iterable[Run] = ()) -> PixelGrid:
    """Wrap content in a transparent 1px border with black marker runs.

    Runs are inclusive (start, end) offsets relative to the content area.
    """
    height, width = content.shape[:2]
    arr = np.zeros((height + 2, width + 2, 4), dtype=np.uint8)
    arr[1:-1, 1:-1] = content
    for start, end in top:
        arr[0, 1 + start:2 + end] = MARKER
    for start, end in left:
        arr[1 + start:2 + end, 0] = MARKER
    return PixelGrid(arr)
