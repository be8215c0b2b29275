"""RGBA-сетка пикселей поверх numpy-массива.

Принципы:
- SRP: только хранение пикселей и преобразования форматов, без алгоритмов масштабирования.
- Источник не мутируется: `crop` и `strip_border` возвращают копии.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np
from PIL import Image

from ninepatch.errors import InvalidInputError


@dataclass(frozen=True, eq=False)
class PixelGrid:
    """Сетка RGBA 8 бит на канал, построчно (форма массива `(height, width, 4)`).

    Fields:
        rgba: numpy-массив `uint8` формы `(height, width, 4)`.
    """
    rgba: np.ndarray

    def __post_init__(self) -> None:
        arr = self.rgba
        if arr.ndim != 3 or arr.shape[2] != 4:
            raise InvalidInputError(f"Ожидался массив (h, w, 4), получено {arr.shape}")
        if arr.dtype != np.uint8:
            raise InvalidInputError(f"Ожидался dtype uint8, получено {arr.dtype}")

    # ---- Constructors ----
    @classmethod
    def blank(cls, width: int, height: int) -> "PixelGrid":
        """Прозрачная сетка заданного размера."""
        if width < 0 or height < 0:
            raise InvalidInputError(f"Недопустимый размер: {width}×{height}")
        return cls(np.zeros((height, width, 4), dtype=np.uint8))

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "PixelGrid":
        """Создаёт сетку из массива `(h, w, 4)` или `(h, w, 3)` (альфа = 255)."""
        arr = np.asarray(arr)
        if arr.ndim != 3 or arr.shape[2] not in (3, 4):
            raise InvalidInputError(f"Ожидался массив (h, w, 3|4), получено {arr.shape}")
        if arr.shape[2] == 3:
            alpha = np.full(arr.shape[:2] + (1,), 255, dtype=np.uint8)
            arr = np.concatenate([arr.astype(np.uint8), alpha], axis=2)
        return cls(np.ascontiguousarray(arr, dtype=np.uint8))

    @classmethod
    def from_pil(cls, image: Image.Image) -> "PixelGrid":
        rgba = image if image.mode == "RGBA" else image.convert("RGBA")
        return cls(np.array(rgba, dtype=np.uint8))

    # ---- Accessors ----
    @property
    def width(self) -> int:
        return int(self.rgba.shape[1])

    @property
    def height(self) -> int:
        return int(self.rgba.shape[0])

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """Возвращает RGBA пикселя (x, y)."""
        r, g, b, a = self.rgba[y, x]
        return int(r), int(g), int(b), int(a)

    def crop(self, x: int, y: int, width: int, height: int) -> "PixelGrid":
        """Копия прямоугольника `(x, y, width, height)`."""
        if x < 0 or y < 0 or width < 0 or height < 0 or x + width > self.width or y + height > self.height:
            raise InvalidInputError(
                f"Прямоугольник ({x}, {y}, {width}, {height}) вне сетки {self.width}×{self.height}"
            )
        return PixelGrid(self.rgba[y:y + height, x:x + width].copy())

    def strip_border(self) -> "PixelGrid":
        """Контентная область: изображение без рамки в 1 пиксель с каждой стороны."""
        if self.width <= 2 or self.height <= 2:
            raise InvalidInputError(
                f"Изображение {self.width}×{self.height} слишком мало для рамки nine-patch"
            )
        return self.crop(1, 1, self.width - 2, self.height - 2)

    def to_pil(self) -> Image.Image:
        return Image.fromarray(self.rgba)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return self.rgba.shape == other.rgba.shape and bool(np.array_equal(self.rgba, other.rgba))


PixelSource = Union[PixelGrid, Image.Image, np.ndarray]


def as_pixel_grid(source: PixelSource) -> PixelGrid:
    """Приводит поддерживаемый источник к `PixelGrid`."""
    if isinstance(source, PixelGrid):
        return source
    if isinstance(source, Image.Image):
        return PixelGrid.from_pil(source)
    if isinstance(source, np.ndarray):
        return PixelGrid.from_array(source)
    raise InvalidInputError(f"Неподдерживаемый источник пикселей: {type(source).__name__}")
