"""Tests for the work area and gap computation."""

import pytest

from edgetile.config.defaults import GAP_SIZE_MAX
from edgetile.tiling.rect import Gaps, Rect, round_half_up
from edgetile.tiling.workarea import compute_gaps, compute_work_area


class TestRoundHalfUp:

    def test_halves_round_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(-2.5) == -2

    def test_other_values(self):
        assert round_half_up(2.49) == 2
        assert round_half_up(2.51) == 3
        assert round_half_up(0) == 0


class TestComputeWorkArea:

    @pytest.mark.parametrize("gap", [0, -1, -10])
    def test_no_gap_returns_raw_rect(self, gap):
        raw = Rect(10, 20, 1000, 800)
        area = compute_work_area(raw, gap)

        assert area.rect == raw
        assert area.gaps is None

    def test_gap_insets_each_side(self):
        area = compute_work_area(Rect(0, 0, 1000, 800), 2)

        # 2/200 * 1000 = 10, 2/200 * 800 = 8
        assert area.gaps == Gaps(10, 8)
        assert area.rect == Rect(10, 8, 980, 784)

    def test_offset_origin_is_kept(self):
        area = compute_work_area(Rect(1920, 30, 1000, 800), 2)

        assert area.rect.x == 1930
        assert area.rect.y == 38

    def test_gaps_are_cross_clamped_on_wide_area(self):
        # 10/200 * 4000 = 200, 10/200 * 400 = 20 -> x limited to 40
        gaps = compute_gaps(Rect(0, 0, 4000, 400), 10)

        assert gaps == Gaps(40, 20)

    def test_gaps_are_cross_clamped_on_tall_area(self):
        gaps = compute_gaps(Rect(0, 0, 300, 3000), 10)

        assert gaps == Gaps(15, 30)

    def test_rounding_is_half_up(self):
        # 1/200 * 1100 = 5.5 -> 6 ; 1/200 * 900 = 4.5 -> 5
        gaps = compute_gaps(Rect(0, 0, 1100, 900), 1)

        assert gaps == Gaps(6, 5)

    @pytest.mark.parametrize("gap", [1, 5, 17, GAP_SIZE_MAX])
    @pytest.mark.parametrize(
        "raw",
        [Rect(0, 0, 1920, 1080), Rect(0, 27, 3440, 1413), Rect(0, 0, 600, 2400)],
    )
    def test_size_and_ratio_properties(self, raw, gap):
        area = compute_work_area(raw, gap)

        assert area.rect.w == raw.w - 2 * area.gaps.x
        assert area.rect.h == raw.h - 2 * area.gaps.y
        assert area.gaps.x <= 2 * area.gaps.y
        assert area.gaps.y <= 2 * area.gaps.x
        assert area.rect.w >= 0
        assert area.rect.h >= 0
