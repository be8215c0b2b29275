"""Модель загруженного nine-patch изображения.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PIL import Image

from ninepatch.models.pixel_grid import PixelGrid


@dataclass(frozen=True)
class ImageData:
    """Неизменяемая модель изображения и его метаданные.

    Fields:
        path: Путь к исходному файлу (None, если загружено из байтов или PIL).
        pil_image: Загруженное изображение PIL в режиме RGBA.
        grid: Пиксели в виде `PixelGrid`.
        width: Ширина, px.
        height: Высота, px.
        mode: Режим PIL исходного файла, например "P" или "RGBA".
        size_bytes: Размер файла/буфера, если доступен.
    """
    path: Optional[Path]
    pil_image: Image.Image
    grid: PixelGrid
    width: int
    height: int
    mode: str
    size_bytes: Optional[int]
