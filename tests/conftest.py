"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from ninepatch.models.pixel_grid import PixelGrid

from builders import gradient_content, make_ninepatch


@pytest.fixture
def content_100() -> np.ndarray:
    return gradient_content(100, 100)


@pytest.fixture
def centered_ninepatch(content_100: np.ndarray) -> PixelGrid:
    """100x100 content, one stretch band [40, 59] on each axis."""
    return make_ninepatch(content_100, top=[(40, 59)], left=[(40, 59)])
