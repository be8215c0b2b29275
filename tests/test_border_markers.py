"""Tests for stretch marker detection on the nine-patch border."""

from __future__ import annotations

import numpy as np
import pytest

from ninepatch.models.regions import StretchSegment
from ninepatch.services.border_markers import (
    marker_mask,
    read_stretch_markers,
    read_stretch_segments,
    segments_from_mask,
)

from builders import gradient_content, make_ninepatch


def test_no_markers_gives_empty_lists():
    markers = read_stretch_markers(make_ninepatch(gradient_content(10, 8)))
    assert markers.top == []
    assert markers.left == []


def test_single_run_offsets_are_content_relative():
    grid = make_ninepatch(gradient_content(10, 10), top=[(3, 5)])
    assert read_stretch_segments(grid, "x") == [StretchSegment(3, 5)]
    assert read_stretch_segments(grid, "y") == []


def test_left_column_reads_rows():
    grid = make_ninepatch(gradient_content(6, 12), left=[(0, 1), (7, 9)])
    assert read_stretch_segments(grid, "y") == [StretchSegment(0, 1), StretchSegment(7, 9)]


def test_run_open_at_scan_end_closes_on_last_offset():
    grid = make_ninepatch(gradient_content(10, 4), top=[(6, 9)])
    assert read_stretch_segments(grid, "x") == [StretchSegment(6, 9)]


def test_full_length_run_is_one_segment():
    grid = make_ninepatch(gradient_content(7, 3), top=[(0, 6)], left=[(0, 2)])
    markers = read_stretch_markers(grid)
    assert markers.top == [StretchSegment(0, 6)]
    assert markers.left == [StretchSegment(0, 2)]


def test_single_pixel_runs():
    grid = make_ninepatch(gradient_content(9, 3), top=[(0, 0), (4, 4), (8, 8)])
    assert read_stretch_segments(grid, "x") == [
        StretchSegment(0, 0),
        StretchSegment(4, 4),
        StretchSegment(8, 8),
    ]


def test_almost_opaque_black_is_not_a_marker():
    grid = make_ninepatch(gradient_content(10, 10))
    grid.rgba[0, 3:6] = (0, 0, 0, 254)
    grid.rgba[4, 0] = (0, 0, 0, 255)
    assert read_stretch_segments(grid, "x") == []
    assert read_stretch_segments(grid, "y") == [StretchSegment(3, 3)]


@pytest.mark.parametrize("rgba", [(1, 0, 0, 255), (0, 1, 0, 255), (0, 0, 1, 255), (255, 255, 255, 255), (0, 0, 0, 0)])
def test_non_black_pixels_are_not_markers(rgba):
    line = np.array([rgba, (0, 0, 0, 255)], dtype=np.uint8)
    assert marker_mask(line).tolist() == [False, True]


def test_corner_pixels_are_ignored():
    grid = make_ninepatch(gradient_content(5, 5))
    for y, x in ((0, 0), (0, 6), (6, 0)):
        grid.rgba[y, x] = (0, 0, 0, 255)
    markers = read_stretch_markers(grid)
    assert markers.top == []
    assert markers.left == []


def test_segments_from_empty_mask():
    assert segments_from_mask(np.zeros(0, dtype=bool)) == []


def test_unknown_axis():
    with pytest.raises(ValueError):
        read_stretch_segments(make_ninepatch(gradient_content(3, 3)), "z")
