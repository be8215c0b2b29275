"""Tests for distributing a destination length across axis regions."""

from __future__ import annotations

import random
import warnings

import pytest

from ninepatch.errors import DegenerateStretchWarning, InvalidInputError
from ninepatch.models.regions import AxisRegion, StretchSegment
from ninepatch.services.region_partition import split_axis
from ninepatch.services.size_allocator import allocate_sizes, round_half_up

CENTERED = [AxisRegion(0, 40, False), AxisRegion(40, 20, True), AxisRegion(60, 40, False)]


def _allocate_quietly(regions, destination):
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", DegenerateStretchWarning)
        return allocate_sizes(regions, destination)


@pytest.mark.parametrize("value, expected", [(0.5, 1), (1.5, 2), (2.5, 3), (1.4999, 1), (0.0, 0), (119.99, 120)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_centered_band_gets_whole_budget():
    assert allocate_sizes(CENTERED, 200) == [40, 120, 40]


def test_identity_keeps_original_sizes_without_warnings():
    with warnings.catch_warnings():
        warnings.simplefilter("error", DegenerateStretchWarning)
        assert allocate_sizes(CENTERED, 100) == [40, 20, 40]


def test_proportional_split_between_bands():
    regions = split_axis(30, [StretchSegment(0, 9), StretchSegment(20, 24)])
    # stretch 10 + 5 share 60 - 15 = 45 as 30 / 15
    assert allocate_sizes(regions, 60) == [30, 10, 15, 5]


def test_halves_round_up_and_last_region_absorbs_drift():
    regions = [AxisRegion(0, 1, True), AxisRegion(1, 1, True)]
    # 2.5 + 2.5 -> 3 + 3 = 6, last region corrected back to 5
    assert allocate_sizes(regions, 5) == [3, 2]


def test_rounding_drift_goes_to_trailing_fixed_region():
    regions = [AxisRegion(0, 3, True), AxisRegion(3, 3, True), AxisRegion(6, 3, True), AxisRegion(9, 2, False)]
    # each band gets round(3 * 8 / 9) = 3, sum 11, so the fixed tail shrinks by 1
    assert allocate_sizes(regions, 10) == [3, 3, 3, 1]


def test_no_markers_last_region_absorbs_delta():
    with pytest.warns(DegenerateStretchWarning):
        assert allocate_sizes([AxisRegion(0, 50, False)], 80) == [80]


def test_target_below_fixed_total_shrinks_last_region():
    with pytest.warns(DegenerateStretchWarning):
        assert allocate_sizes(CENTERED, 50) == [40, 0, 10]
    with pytest.warns(DegenerateStretchWarning):
        assert allocate_sizes(CENTERED, 10) == [40, 0, -30]


def test_zero_budget_with_markers_warns():
    with pytest.warns(DegenerateStretchWarning, match="бюджета"):
        assert allocate_sizes(CENTERED, 80) == [40, 0, 40]


def test_stretch_regions_never_negative():
    for destination in range(0, 400):
        sizes = _allocate_quietly(CENTERED, destination)
        assert sizes[1] >= 0


@pytest.mark.parametrize("seed", range(20))
def test_sizes_always_sum_to_destination(seed):
    rng = random.Random(seed)
    regions = []
    start = 0
    stretch = rng.random() < 0.5
    for _ in range(rng.randint(1, 7)):
        size = rng.randint(1, 30)
        regions.append(AxisRegion(start, size, stretch))
        start += size
        stretch = not stretch
    for destination in range(0, 300, 7):
        assert sum(_allocate_quietly(regions, destination)) == destination


def test_detected_stretch_bands_always_have_positive_total():
    rng = random.Random(7)
    for _ in range(50):
        length = rng.randint(1, 60)
        start = rng.randint(0, length - 1)
        end = rng.randint(start, length - 1)
        regions = split_axis(length, [StretchSegment(start, end)])
        assert sum(r.size for r in regions if r.stretch) > 0


def test_empty_regions_rejected():
    with pytest.raises(InvalidInputError):
        allocate_sizes([], 10)


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_round_half_up_rejects_non_finite(value):
    with pytest.raises(InvalidInputError):
        round_half_up(value)
