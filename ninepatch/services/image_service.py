"""Загрузка nine-patch изображений и кодирование результата.

Принципы:
- SRP: класс отвечает только за ввод/вывод изображений и базовые метаданные.
- OCP: новые источники (стрим, URL) можно добавить отдельными ветками `load_image`.
- Ошибки декодирования всегда приходят как `ImageDecodeError`.
"""
from __future__ import annotations

import base64
import io
import logging
from pathlib import Path
from typing import Optional, Union

from PIL import Image, UnidentifiedImageError

from ninepatch.errors import ImageDecodeError
from ninepatch.models.image_model import ImageData
from ninepatch.models.pixel_grid import PixelGrid

logger = logging.getLogger(__name__)

ImageSource = Union[str, Path, bytes, bytearray, Image.Image]


class ImageService:
    def load_image(self, source: ImageSource) -> ImageData:
        """Загружает изображение и возвращает его вместе с метаданными.

        Args:
            source: Путь до файла, байты закодированного изображения или готовое `PIL.Image.Image`.

        Returns:
            `ImageData` c `PIL.Image.Image` (в режиме RGBA), `PixelGrid`, размерами, режимом и размером.

        Raises:
            FileNotFoundError: если путь не существует или не указывает на файл.
            ImageDecodeError: если данные не распознаны как изображение.
        """
        path: Optional[Path] = None
        size_bytes: Optional[int] = None

        if isinstance(source, Image.Image):
            opened = source
        elif isinstance(source, (bytes, bytearray)):
            size_bytes = len(source)
            opened = self._open(io.BytesIO(bytes(source)), "<bytes>")
        else:
            path = Path(source)
            if not path.exists() or not path.is_file():
                raise FileNotFoundError(f"Файл не найден: {path}")
            try:
                size_bytes = path.stat().st_size
            except OSError:
                size_bytes = None
            opened = self._open(path, str(path))

        mode = opened.mode
        try:
            pil_image = opened.convert("RGBA")
        except OSError as exc:
            # усечённые/повреждённые данные проявляются только при полной загрузке
            logger.warning("failed to decode %s: %s", path or "<image>", exc)
            raise ImageDecodeError(f"Не удалось декодировать изображение: {path or '<image>'}") from exc

        width, height = pil_image.size
        return ImageData(
            path=path,
            pil_image=pil_image,
            grid=PixelGrid.from_pil(pil_image),
            width=width,
            height=height,
            mode=mode,
            size_bytes=size_bytes,
        )

    def encode_png(self, grid: PixelGrid) -> bytes:
        """Кодирует сетку в PNG."""
        buf = io.BytesIO()
        grid.to_pil().save(buf, format="PNG")
        return buf.getvalue()

    def to_data_uri(self, grid: PixelGrid) -> str:
        """`data:image/png;base64,...` для встраивания результата (HTML, CSS)."""
        encoded = base64.b64encode(self.encode_png(grid)).decode("ascii")
        return f"data:image/png;base64,{encoded}"

    def save_image(self, grid: PixelGrid, file_path: str | Path) -> Path:
        """Сохраняет сетку на диск; формат по расширению, без расширения — PNG."""
        path = Path(file_path)
        image = grid.to_pil()
        if path.suffix:
            fmt = None
            if path.suffix.lower() in (".jpg", ".jpeg", ".bmp"):
                # форматы без альфа-канала
                image = image.convert("RGB")
        else:
            fmt = "PNG"
        image.save(path, format=fmt)
        logger.info("saved %dx%d image to %s", grid.width, grid.height, path)
        return path

    def _open(self, fp: object, label: str) -> Image.Image:
        try:
            return Image.open(fp)
        except UnidentifiedImageError as exc:
            logger.warning("unidentified image: %s", label)
            raise ImageDecodeError(f"Файл не является изображением: {label}") from exc
        except Image.DecompressionBombError as exc:
            logger.warning("image too large: %s", label)
            raise ImageDecodeError(f"Изображение слишком велико для декодирования: {label}") from exc
