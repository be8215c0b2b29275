"""Tests for loading nine-patch images and encoding results."""

from __future__ import annotations

import base64
import io

import numpy as np
import pytest
from PIL import Image

from ninepatch.errors import ImageDecodeError
from ninepatch.models.pixel_grid import PixelGrid
from ninepatch.services.image_service import ImageService

from builders import gradient_content, make_ninepatch


@pytest.fixture
def service() -> ImageService:
    return ImageService()


def _png_bytes(image: Image.Image) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def test_load_from_bytes(service):
    grid = make_ninepatch(gradient_content(6, 4), top=[(1, 2)])
    data = _png_bytes(grid.to_pil())
    loaded = service.load_image(data)
    assert loaded.path is None
    assert (loaded.width, loaded.height) == (8, 6)
    assert loaded.mode == "RGBA"
    assert loaded.size_bytes == len(data)
    assert loaded.grid == grid


def test_load_from_path(service, tmp_path):
    path = tmp_path / "button.9.png"
    Image.new("RGB", (5, 3), (9, 8, 7)).save(path)
    loaded = service.load_image(str(path))
    assert loaded.path == path
    assert loaded.mode == "RGB"
    assert loaded.pil_image.mode == "RGBA"
    assert loaded.size_bytes == path.stat().st_size
    assert loaded.grid.pixel(4, 2) == (9, 8, 7, 255)


def test_load_palette_image_converts_to_rgba(service):
    image = Image.new("P", (4, 4))
    loaded = service.load_image(image)
    assert loaded.mode == "P"
    assert loaded.grid.rgba.shape == (4, 4, 4)


def test_missing_file(service, tmp_path):
    with pytest.raises(FileNotFoundError):
        service.load_image(tmp_path / "missing.png")


def test_directory_is_not_a_file(service, tmp_path):
    with pytest.raises(FileNotFoundError):
        service.load_image(tmp_path)


def test_garbage_bytes(service):
    with pytest.raises(ImageDecodeError):
        service.load_image(b"definitely not an image")


def test_garbage_file(service, tmp_path):
    path = tmp_path / "broken.png"
    path.write_bytes(b"\x00\x01\x02 nope")
    with pytest.raises(ImageDecodeError):
        service.load_image(path)


def test_decode_error_is_a_value_error():
    assert issubclass(ImageDecodeError, ValueError)


def test_encode_png_round_trip(service):
    grid = PixelGrid(gradient_content(9, 5))
    with Image.open(io.BytesIO(service.encode_png(grid))) as image:
        assert image.format == "PNG"
        assert PixelGrid.from_pil(image) == grid


def test_data_uri(service):
    grid = PixelGrid(gradient_content(2, 2))
    uri = service.to_data_uri(grid)
    prefix = "data:image/png;base64,"
    assert uri.startswith(prefix)
    assert base64.b64decode(uri[len(prefix):]) == service.encode_png(grid)


def test_save_png_and_default_format(service, tmp_path):
    grid = PixelGrid(gradient_content(3, 3))
    saved = service.save_image(grid, tmp_path / "out.png")
    assert service.load_image(saved).grid == grid
    bare = service.save_image(grid, tmp_path / "out")
    with Image.open(bare) as image:
        assert image.format == "PNG"


def test_save_jpeg_drops_alpha(service, tmp_path):
    grid = PixelGrid(np.full((4, 4, 4), 128, dtype=np.uint8))
    saved = service.save_image(grid, tmp_path / "out.jpg")
    with Image.open(saved) as image:
        assert image.format == "JPEG"
        assert image.mode == "RGB"


def test_decompression_bomb_is_a_decode_error(service, monkeypatch):
    data = _png_bytes(Image.new("RGBA", (10, 10)))
    # 100 px is more than twice the limit, so Pillow refuses to open it
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)
    with pytest.raises(ImageDecodeError, match="слишком велико"):
        service.load_image(data)
