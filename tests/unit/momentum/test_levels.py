"""Tests for the XP level curve."""

import pytest

from app.momentum.levels import level_from_xp, level_info, xp_for_next_level, xp_threshold


class TestLevelCurve:
    @pytest.mark.parametrize("level, cost", [(1, 100), (2, 250), (3, 400), (10, 1450)])
    def test_cost_per_level(self, level, cost):
        assert xp_for_next_level(level) == cost

    @pytest.mark.parametrize("level, threshold", [(1, 0), (2, 100), (3, 350), (4, 750), (5, 1300)])
    def test_thresholds(self, level, threshold):
        assert xp_threshold(level) == threshold

    @pytest.mark.parametrize(
        "xp, level",
        [(0, 1), (50, 1), (99, 1), (100, 2), (349, 2), (350, 3), (749, 3), (750, 4), (1300, 5)],
    )
    def test_level_from_xp(self, xp, level):
        assert level_from_xp(xp) == level

    def test_monotonic(self):
        levels = [level_from_xp(xp) for xp in range(0, 10000, 37)]
        assert levels == sorted(levels)


class TestLevelInfo:
    def test_welcome_bonus(self):
        info = level_info(50)
        assert info.level == 1
        assert info.xp_into_level == 50
        assert info.xp_to_next_level == 50
        assert info.progress_pct == 50.0

    def test_exactly_at_threshold(self):
        info = level_info(350)
        assert info.level == 3
        assert info.level_start_xp == 350
        assert info.next_level_xp == 750
        assert info.xp_into_level == 0
        assert info.xp_to_next_level == 400
