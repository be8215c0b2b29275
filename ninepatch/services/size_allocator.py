"""Распределение целевой длины оси между областями.

Фиксированные области сохраняют исходный размер, растягиваемые делят остаток
пропорционально. Ошибка округления целиком уходит в последнюю область,
поэтому сумма всегда равна целевой длине.
"""
from __future__ import annotations

import logging
import math
import warnings
from typing import List

from ninepatch.errors import DegenerateStretchWarning, InvalidInputError
from ninepatch.models.regions import AxisRegion, total_size

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Округление .5 вверх (не банковское), как у `Math.round`."""
    if not math.isfinite(value):
        raise InvalidInputError(f"Нельзя округлить {value!r} до целого")
    return int(math.floor(value + 0.5))


def _warn_degenerate(message: str) -> None:
    logger.warning(message)
    warnings.warn(message, DegenerateStretchWarning, stacklevel=3)


def allocate_sizes(regions: List[AxisRegion], destination_length: int, axis: str = "x") -> List[int]:
    """Целевые размеры областей оси.

    Args:
        regions: Разбиение оси (исходные размеры).
        destination_length: Требуемая суммарная длина, px.
        axis: Имя оси, только для сообщений.

    Returns:
        Список размеров той же длины, что `regions`, с суммой ровно `destination_length`.
        Если цель меньше суммы фиксированных областей, последняя область
        сжимается ниже исходного размера (и может уйти в минус).
    """
    if not regions:
        raise InvalidInputError(f"Пустое разбиение оси {axis}")

    fixed_total = total_size([r for r in regions if not r.stretch])
    stretch_total = total_size([r for r in regions if r.stretch])
    stretch_budget = max(destination_length - fixed_total, 0)

    sizes: List[int] = []
    for region in regions:
        if not region.stretch:
            sizes.append(region.size)
        elif stretch_total > 0:
            sizes.append(round_half_up(region.size * stretch_budget / stretch_total))
        else:
            sizes.append(0)

    if stretch_total == 0 and destination_length != fixed_total:
        _warn_degenerate(
            f"Ось {axis}: нет маркеров растяжения, последняя область поглощает "
            f"{destination_length - fixed_total} px"
        )
    elif stretch_total > 0 and stretch_budget == 0:
        _warn_degenerate(
            f"Ось {axis}: нет бюджета растяжения (цель {destination_length} px, фиксировано {fixed_total} px)"
        )

    sizes[-1] += destination_length - sum(sizes)
    logger.debug("axis %s: %s -> %s (target %d)", axis, [r.size for r in regions], sizes, destination_length)
    return sizes
