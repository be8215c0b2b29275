"""Чтение маркеров растяжения из рамки nine-patch.

Верхняя строка рамки задаёт растягиваемые колонки, левый столбец — строки.
Угловые пиксели не сканируются; смещения сегментов отсчитываются от начала
контентной области.
"""
from __future__ import annotations

import logging
from typing import List

import numpy as np

from ninepatch.config import MARKER_RGBA
from ninepatch.models.pixel_grid import PixelGrid
from ninepatch.models.regions import StretchMarkers, StretchSegment

logger = logging.getLogger(__name__)


def marker_mask(line: np.ndarray) -> np.ndarray:
    """Булева маска маркеров для линии пикселей формы `(n, 4)`.

    Маркер — только (0, 0, 0, 255); полупрозрачный чёрный маркером не считается.
    """
    return np.all(line == np.array(MARKER_RGBA, dtype=np.uint8), axis=-1)


def segments_from_mask(mask: np.ndarray) -> List[StretchSegment]:
    """Сворачивает непрерывные серии `True` в включительные сегменты."""
    # паддинг False с обеих сторон: каждая серия даёт ровно один фронт +1 и один -1
    padded = np.concatenate(([False], mask, [False])).astype(np.int8)
    edges = np.diff(padded)
    starts = np.flatnonzero(edges == 1)
    ends = np.flatnonzero(edges == -1) - 1
    return [StretchSegment(int(s), int(e)) for s, e in zip(starts, ends)]


def read_stretch_segments(grid: PixelGrid, axis: str) -> List[StretchSegment]:
    """Сегменты растяжения вдоль оси.

    Args:
        grid: Полное изображение вместе с рамкой.
        axis: "x" — верхняя строка (y = 0), "y" — левый столбец (x = 0).

    Returns:
        Упорядоченный по возрастанию список непересекающихся `StretchSegment`.
    """
    if axis == "x":
        line = grid.rgba[0, 1:max(1, grid.width - 1)]
    elif axis == "y":
        line = grid.rgba[1:max(1, grid.height - 1), 0]
    else:
        raise ValueError(f"Неизвестная ось: {axis!r}")
    return segments_from_mask(marker_mask(line))


def read_stretch_markers(grid: PixelGrid) -> StretchMarkers:
    """Читает маркеры верхней и левой сторон рамки."""
    markers = StretchMarkers(
        top=read_stretch_segments(grid, "x"),
        left=read_stretch_segments(grid, "y"),
    )
    logger.debug("stretch markers: top=%s left=%s", markers.top, markers.left)
    return markers
