"""Tests for the session-RPE load resolver."""

from datetime import date

import pytest
from pydantic import ValidationError

from athlete_load.config.load_model import DEFAULT_RPE_BASE_LOADS, LoadModelConfig
from athlete_load.metrics.session_load import calculate_session_load, clamp_rpe, resolve_session_load
from athlete_load.schemas.training_load import SessionRecord


@pytest.mark.parametrize(("rpe", "expected"), sorted(DEFAULT_RPE_BASE_LOADS.items()))
def test_sixty_minutes_returns_base_load(rpe, expected):
    assert calculate_session_load(60, rpe) == expected


def test_rpe_eight_hour_session_is_100_au():
    assert calculate_session_load(60, 8) == 100


def test_duration_scales_linearly():
    for rpe in range(1, 11):
        assert calculate_session_load(120, rpe) == 2 * calculate_session_load(60, rpe)
        assert calculate_session_load(30, rpe) * 2 == calculate_session_load(60, rpe)


def test_load_non_decreasing_in_rpe():
    for duration in (15, 45, 60, 90, 150):
        loads = [calculate_session_load(duration, rpe) for rpe in range(1, 11)]
        assert loads == sorted(loads)


def test_partial_hour_is_rounded_to_integer():
    # 45 minutes at RPE 5: 60 * 0.75
    assert calculate_session_load(45, 5) == 45
    # 50 minutes at RPE 9: 120 * 50 / 60 = 100
    assert calculate_session_load(50, 9) == 100


def test_half_au_rounds_up():
    # 1.5 minutes at RPE 1: 20 * 1.5 / 60 = 0.5
    assert calculate_session_load(1.5, 1) == 1


@pytest.mark.parametrize(
    ("rpe", "clamped"),
    [(0, 1), (-3, 1), (1, 1), (7.4, 7), (7.5, 8), (10, 10), (11, 10), (15.2, 10)],
)
def test_rpe_clamped_not_rejected(rpe, clamped):
    assert clamp_rpe(rpe) == clamped


def test_out_of_range_rpe_uses_edge_of_table():
    assert calculate_session_load(60, 0) == 20
    assert calculate_session_load(60, 15) == 140


def test_non_finite_rpe_falls_back_to_lowest():
    assert calculate_session_load(60, float("nan")) == 20


def test_non_positive_duration_yields_zero():
    assert calculate_session_load(0, 8) == 0
    assert calculate_session_load(-30, 8) == 0


def test_custom_rpe_table():
    table = {rpe: float(rpe * 10) for rpe in range(1, 11)}
    config = LoadModelConfig(rpe_base_loads=table)
    assert calculate_session_load(60, 4, config) == 40
    assert calculate_session_load(30, 10, config) == 50


class TestResolveSessionLoad:
    def test_precomputed_load_is_authoritative(self):
        session = SessionRecord(date=date(2024, 5, 1), duration_minutes=60, exertion_rating=8, load=42.0)
        assert resolve_session_load(session) == 42.0

    def test_explicit_zero_load_is_kept(self):
        session = SessionRecord(date=date(2024, 5, 1), duration_minutes=60, exertion_rating=8, load=0.0)
        assert resolve_session_load(session) == 0.0

    def test_missing_load_is_derived(self):
        session = SessionRecord(date=date(2024, 5, 1), duration_minutes=90, exertion_rating=6)
        assert resolve_session_load(session) == 105.0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"duration_minutes": 0},
        {"duration_minutes": -30},
        {"load": -1.0},
        {"exertion_rating": float("nan")},
    ],
)
def test_invalid_session_record_rejected(kwargs):
    fields = {"date": date(2024, 5, 1), "duration_minutes": 60, "exertion_rating": 5} | kwargs
    with pytest.raises(ValidationError):
        SessionRecord(**fields)
