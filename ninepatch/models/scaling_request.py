"""Параметры запроса масштабирования и результат с промежуточными данными."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ninepatch import config
from ninepatch.models.pixel_grid import PixelGrid
from ninepatch.models.regions import RegionGrid, StretchMarkers


@dataclass(frozen=True)
class ScalingRequest:
    """Целевой размер и разрешения для пересчёта.

    Fields:
        width, height: целевой размер в единицах дизайна (или в пикселях, см. ниже).
        is_raw_pixel_units: размер уже в пикселях (из редактора nine-patch), множитель не применяется.
        design_width, design_height: разрешение, в котором задан дизайн.
        target_design_width, target_design_height: разрешение устройства назначения.
    """
    width: float
    height: float
    is_raw_pixel_units: bool = False
    design_width: float = field(default_factory=lambda: config.settings.design_width)
    design_height: float = field(default_factory=lambda: config.settings.design_height)
    target_design_width: float = field(default_factory=lambda: config.settings.target_design_width)
    target_design_height: float = field(default_factory=lambda: config.settings.target_design_height)


@dataclass(frozen=True)
class ScaleResult:
    """Итоговая сетка и всё, из чего она собрана (для инспекции в UI и тестах)."""
    grid: PixelGrid
    markers: StretchMarkers
    regions: RegionGrid
    col_widths: List[int]
    row_heights: List[int]

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height
