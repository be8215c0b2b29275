"""Сборка итогового изображения по сетке областей.

Каждый прямоугольник источника независимо по X и Y растягивается/сжимается
в свой прямоугольник назначения (ближайший сосед, без интерполяции).
"""
from __future__ import annotations

from itertools import accumulate
from typing import List, Tuple

import numpy as np

from ninepatch.errors import InvalidInputError
from ninepatch.models.pixel_grid import PixelGrid
from ninepatch.models.regions import AxisRegion, RegionGrid


def sample_indices(src_size: int, dst_size: int) -> np.ndarray:
    """Индексы источника для каждого пикселя назначения: `floor((i + 0.5) * src / dst)`.

    При `src_size == dst_size` это тождество, т.е. пиксели копируются как есть.
    """
    idx = ((np.arange(dst_size, dtype=np.float64) + 0.5) * src_size / dst_size).astype(np.int64)
    return np.minimum(idx, src_size - 1)


def _axis_plan(regions: List[AxisRegion], sizes: List[int]) -> List[Tuple[int, int, np.ndarray]]:
    """(смещение назначения, размер, индексы источника) для областей с размером > 0."""
    offsets = [0] + list(accumulate(sizes))[:-1]
    plan = []
    for region, offset, size in zip(regions, offsets, sizes):
        if size <= 0:
            continue
        plan.append((offset, size, region.start + sample_indices(region.size, size)))
    return plan


def composite(content: PixelGrid, regions: RegionGrid, col_widths: List[int], row_heights: List[int]) -> PixelGrid:
    """Собирает выходную сетку размера `(sum(col_widths), sum(row_heights))`.

    Области с неположительным размером пропускаются, запись обрезается по границам
    выходной сетки; незатронутые пиксели остаются прозрачными.
    """
    if len(col_widths) != len(regions.cols) or len(row_heights) != len(regions.rows):
        raise InvalidInputError("Число размеров не совпадает с числом областей")
    out_w = sum(col_widths)
    out_h = sum(row_heights)
    if out_w < 0 or out_h < 0:
        raise InvalidInputError(f"Отрицательный размер результата: {out_w}×{out_h}")

    src = content.rgba
    out = np.zeros((out_h, out_w, 4), dtype=np.uint8)

    cols = _axis_plan(regions.cols, col_widths)
    for dest_y, row_h, ys in _axis_plan(regions.rows, row_heights):
        y1 = min(dest_y + row_h, out_h)
        if y1 <= dest_y:
            continue
        for dest_x, col_w, xs in cols:
            x1 = min(dest_x + col_w, out_w)
            if x1 <= dest_x:
                continue
            block = src[np.ix_(ys, xs)]
            out[dest_y:y1, dest_x:x1] = block[: y1 - dest_y, : x1 - dest_x]

    return PixelGrid(out)
