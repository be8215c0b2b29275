"""Модели разметки nine-patch: сегменты маркеров и области осей.

Принципы:
- SRP: только структуры данных, без логики разбиения и распределения.
- Неизменяемость (`frozen=True`): все объекты живут в рамках одной операции масштабирования.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class StretchSegment:
    """Включительный диапазон `[start, end]` пикселей контентной области вдоль оси."""
    start: int
    end: int

    @property
    def size(self) -> int:
        return self.end - self.start + 1


@dataclass(frozen=True)
class StretchMarkers:
    """Сегменты растяжения по обеим осям.

    Fields:
        top: сегменты верхней строки рамки (растяжение по ширине, колонки).
        left: сегменты левого столбца рамки (растяжение по высоте, строки).
    """
    top: List[StretchSegment] = field(default_factory=list)
    left: List[StretchSegment] = field(default_factory=list)


@dataclass(frozen=True)
class AxisRegion:
    """Полоса контентной области вдоль одной оси."""
    start: int
    size: int
    stretch: bool


@dataclass(frozen=True)
class RegionGrid:
    """Полное 2-D разбиение контентной области: строки (ось Y) и колонки (ось X)."""
    rows: List[AxisRegion]
    cols: List[AxisRegion]


def total_size(regions: List[AxisRegion]) -> int:
    return sum(r.size for r in regions)
