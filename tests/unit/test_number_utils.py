"""
Tests for number_utils.
"""

import pytest

from utils.number_utils import round_percent


class TestRoundPercent:

    @pytest.mark.parametrize("part, whole, expected", [
        (0, 250, 0),
        (185, 200, 93),
        (1, 8, 13),
        (29, 200, 14),
        (300, 200, 150),
    ])
    def test_rounding(self, part, whole, expected):
        assert round_percent(part, whole) == expected

    def test_huge_operands_small_ratio(self):
        assert round_percent(10**400, 8 * 10**400) == 13
        assert round_percent(10**400, 3 * 10**400) == 33

    def test_ratio_beyond_float_range(self):
        assert round_percent(10**400, 1) == 10**402
        assert round_percent(10**400, 3) == (10**402 + 1) // 3
