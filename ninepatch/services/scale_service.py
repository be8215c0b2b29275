"""Оркестратор масштабирования nine-patch.

Принципы:
- SRP: только последовательность шагов; алгоритмы — в отдельных модулях сервиса.
- Без состояния: один экземпляр можно переиспользовать и разделять между потоками.
"""
from __future__ import annotations

import logging
import math
from typing import Tuple

from ninepatch.config import LOGICAL_UNIT_PIXEL_FACTOR
from ninepatch.errors import InvalidInputError
from ninepatch.models.pixel_grid import PixelGrid, PixelSource, as_pixel_grid
from ninepatch.models.scaling_request import ScaleResult, ScalingRequest
from ninepatch.services.border_markers import read_stretch_markers
from ninepatch.services.compositor import composite
from ninepatch.services.region_partition import split_regions
from ninepatch.services.size_allocator import allocate_sizes, round_half_up

logger = logging.getLogger(__name__)


def _require_positive(**values: float) -> None:
    for name, value in values.items():
        if not (math.isfinite(value) and value > 0):
            raise InvalidInputError(f"{name} должно быть конечным и > 0, получено {value!r}")


class NinePatchScaler:
    def compute_target_size(
        self,
        requested_width: float,
        requested_height: float,
        is_raw_pixel_units: bool,
        design_width: float,
        design_height: float,
        target_design_width: float,
        target_design_height: float,
    ) -> Tuple[int, int]:
        """Итоговый размер в пикселях.

        Значения не из редактора nine-patch умножаются на `LOGICAL_UNIT_PIXEL_FACTOR`,
        затем пересчитываются из разрешения дизайна в целевое и округляются (.5 вверх).

        Raises:
            InvalidInputError: если какой-либо параметр <= 0 или результат меньше 1 px.
        """
        _require_positive(
            requested_width=requested_width,
            requested_height=requested_height,
            design_width=design_width,
            design_height=design_height,
            target_design_width=target_design_width,
            target_design_height=target_design_height,
        )
        if not is_raw_pixel_units:
            requested_width *= LOGICAL_UNIT_PIXEL_FACTOR
            requested_height *= LOGICAL_UNIT_PIXEL_FACTOR

        scale_x = target_design_width / design_width
        scale_y = target_design_height / design_height
        width = round_half_up(requested_width * scale_x)
        height = round_half_up(requested_height * scale_y)
        if width < 1 or height < 1:
            raise InvalidInputError(f"Целевой размер {width}×{height} меньше 1 px")
        return width, height

    def scale_detailed(
        self,
        source: PixelSource,
        requested_width: float,
        requested_height: float,
        is_raw_pixel_units: bool,
        design_width: float,
        design_height: float,
        target_design_width: float,
        target_design_height: float,
    ) -> ScaleResult:
        """Как `scale`, но возвращает также маркеры, области и размеры по осям."""
        grid = as_pixel_grid(source)
        content = grid.strip_border()
        markers = read_stretch_markers(grid)

        width, height = self.compute_target_size(
            requested_width,
            requested_height,
            is_raw_pixel_units,
            design_width,
            design_height,
            target_design_width,
            target_design_height,
        )
        logger.debug("scaling %dx%d content to %dx%d", content.width, content.height, width, height)

        regions = split_regions(content.width, content.height, markers)
        col_widths = allocate_sizes(regions.cols, width, axis="x")
        row_heights = allocate_sizes(regions.rows, height, axis="y")
        output = composite(content, regions, col_widths, row_heights)

        logger.info("nine-patch %dx%d -> %dx%d", grid.width, grid.height, output.width, output.height)
        return ScaleResult(
            grid=output,
            markers=markers,
            regions=regions,
            col_widths=col_widths,
            row_heights=row_heights,
        )

    def scale(
        self,
        source: PixelSource,
        requested_width: float,
        requested_height: float,
        is_raw_pixel_units: bool,
        design_width: float,
        design_height: float,
        target_design_width: float,
        target_design_height: float,
    ) -> PixelGrid:
        """Масштабирует nine-patch до заданного размера.

        Args:
            source: Изображение с рамкой маркеров (`PixelGrid`, `PIL.Image.Image` или массив).
            requested_width, requested_height: Целевой размер в единицах дизайна.
            is_raw_pixel_units: Размер уже в пикселях (без множителя ×4).
            design_width, design_height: Разрешение дизайна.
            target_design_width, target_design_height: Целевое разрешение.

        Returns:
            Контентная область (без рамки), растянутая по маркерам.

        Raises:
            InvalidInputError: изображение <= 2 px по любой оси или некорректные параметры.
        """
        return self.scale_detailed(
            source,
            requested_width,
            requested_height,
            is_raw_pixel_units,
            design_width,
            design_height,
            target_design_width,
            target_design_height,
        ).grid

    def scale_request(self, source: PixelSource, request: ScalingRequest) -> ScaleResult:
        return self.scale_detailed(
            source,
            request.width,
            request.height,
            request.is_raw_pixel_units,
            request.design_width,
            request.design_height,
            request.target_design_width,
            request.target_design_height,
        )
