"""Tests for the gap size controller."""

from edgetile.config.defaults import GAP_SIZE_INCREMENTS, GAP_SIZE_MAX
from edgetile.tiling.directional import DirectionalIntent as I
from edgetile.tiling.rect import Rect


class TestGapSizeController:

    def test_increase(self, gaps, settings):
        assert gaps.increase() == GAP_SIZE_INCREMENTS
        assert settings.get_gap_size() == GAP_SIZE_INCREMENTS

    def test_decrease(self, gaps, settings):
        settings.set_gap_size(5)

        assert gaps.decrease() == 5 - GAP_SIZE_INCREMENTS

    def test_increase_at_max_stays_at_max(self, gaps, settings):
        settings.set_gap_size(GAP_SIZE_MAX)

        assert gaps.increase() == GAP_SIZE_MAX
        assert gaps.increase() == GAP_SIZE_MAX
        assert settings.get_gap_size() == GAP_SIZE_MAX

    def test_decrease_at_zero_stays_at_zero(self, gaps, settings):
        assert gaps.decrease() == 0
        assert gaps.decrease() == 0
        assert settings.get_gap_size() == 0

    def test_notifies_new_value(self, gaps, host):
        gaps.increase()
        gaps.increase()

        assert host.notifications == [
            ("edgetile", f"Gap size is now at {GAP_SIZE_INCREMENTS} percent"),
            ("edgetile", f"Gap size is now at {2 * GAP_SIZE_INCREMENTS} percent"),
        ]

    def test_notifies_even_when_saturated(self, gaps, host):
        gaps.decrease()

        assert host.notifications == [("edgetile", "Gap size is now at 0 percent")]

    def test_new_gap_is_used_by_engine(self, gaps, engine, settings):
        while settings.get_gap_size() < 2:
            gaps.increase()

        # 1000x800 at 2% -> 10/8 pixel gaps
        assert engine.tile(I.CENTER) == Rect(10, 8, 980, 784)
