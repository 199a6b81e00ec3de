from datetime import date

import pytest

from athlete_load.utils.calendar import trailing_week_starts, week_end, week_start
from athlete_load.utils.rounding import round_half_up, round_to_int


@pytest.mark.parametrize(
    ("value", "expected"),
    [(2.5, 3), (2.49, 2), (-12.5, -12), (-11.905, -12), (0.5, 1), (14.2857, 14), (0.0, 0)],
)
def test_round_to_int_half_up(value, expected):
    assert round_to_int(value) == expected


def test_round_two_decimals():
    assert round_half_up(1.005, 2) == 1.01
    assert round_half_up(1.3333333, 2) == 1.33
    assert round_half_up(7.45, 1) == 7.5


def test_non_finite_rounds_to_zero():
    assert round_half_up(float("inf")) == 0.0
    assert round_half_up(float("nan"), 2) == 0.0


def test_week_boundaries():
    wednesday = date(2024, 5, 15)
    assert week_start(wednesday) == date(2024, 5, 13)
    assert week_end(wednesday) == date(2024, 5, 19)
    assert week_start(date(2024, 5, 13)) == date(2024, 5, 13)


def test_trailing_week_starts():
    assert trailing_week_starts(date(2024, 5, 15), 3) == [date(2024, 4, 29), date(2024, 5, 6), date(2024, 5, 13)]
