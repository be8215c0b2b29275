"""Разбиение оси на чередующиеся фиксированные и растягиваемые области."""
from __future__ import annotations

from typing import List

from ninepatch.errors import InvalidInputError
from ninepatch.models.regions import AxisRegion, RegionGrid, StretchMarkers, StretchSegment


def split_axis(length: int, segments: List[StretchSegment]) -> List[AxisRegion]:
    """Покрывает `[0, length)` областями без зазоров и перекрытий.

    Промежутки между сегментами и хвост становятся фиксированными областями,
    сами сегменты — растягиваемыми. Без сегментов вся ось — одна фиксированная область.
    """
    regions: List[AxisRegion] = []
    cursor = 0
    for seg in segments:
        if seg.start < cursor or seg.end < seg.start or seg.end >= length:
            raise InvalidInputError(f"Сегмент [{seg.start}, {seg.end}] вне оси длины {length} или не по порядку")
        if seg.start > cursor:
            regions.append(AxisRegion(start=cursor, size=seg.start - cursor, stretch=False))
        regions.append(AxisRegion(start=seg.start, size=seg.size, stretch=True))
        cursor = seg.end + 1
    if cursor < length:
        regions.append(AxisRegion(start=cursor, size=length - cursor, stretch=False))
    return regions


def split_regions(content_width: int, content_height: int, markers: StretchMarkers) -> RegionGrid:
    """Строки — по маркерам левого столбца, колонки — по маркерам верхней строки."""
    return RegionGrid(
        rows=split_axis(content_height, markers.left),
        cols=split_axis(content_width, markers.top),
    )
