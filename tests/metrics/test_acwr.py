"""Tests for ACWR computation and risk zone classification."""

import math
from datetime import timedelta

import pytest

from athlete_load.config.load_model import AcwrThresholds, LoadModelConfig
from athlete_load.metrics.acwr import (
    classify_risk_zone,
    compute_acwr,
    compute_acwr_from_daily,
    compute_acwr_from_sessions,
)
from athlete_load.metrics.training_load import compute_daily_metrics
from athlete_load.schemas.training_load import AcwrSnapshot, RiskZone


def _daily_sessions(make_session, reference_date, loads_oldest_first):
    """One session per day, the last load falling on reference_date."""
    days = len(loads_oldest_first)
    return [
        make_session(reference_date - timedelta(days=days - 1 - index), load=load)
        for index, load in enumerate(loads_oldest_first)
        if load
    ]


class TestClassifyRiskZone:
    @pytest.mark.parametrize(
        ("acwr", "zone"),
        [
            (0.0, RiskZone.UNDERTRAINED),
            (0.79, RiskZone.UNDERTRAINED),
            (0.8, RiskZone.OPTIMAL),
            (1.0, RiskZone.OPTIMAL),
            (1.3, RiskZone.OPTIMAL),
            (1.31, RiskZone.WARNING),
            (1.5, RiskZone.WARNING),
            (1.51, RiskZone.DANGER),
            (12.0, RiskZone.DANGER),
        ],
    )
    def test_boundaries(self, acwr, zone):
        assert classify_risk_zone(acwr) == zone

    def test_exactly_one_zone_across_range(self):
        seen = set()
        for step in range(0, 301):
            zone = classify_risk_zone(step / 100)
            assert isinstance(zone, RiskZone)
            seen.add(zone)
        assert seen == set(RiskZone)

    def test_nan_and_negative_read_undertrained(self):
        assert classify_risk_zone(math.nan) == RiskZone.UNDERTRAINED
        assert classify_risk_zone(-1.0) == RiskZone.UNDERTRAINED

    def test_custom_thresholds(self):
        thresholds = AcwrThresholds(undertrained_below=0.5, optimal_max=1.0, warning_max=2.0)
        assert classify_risk_zone(0.6, thresholds) == RiskZone.OPTIMAL
        assert classify_risk_zone(1.2, thresholds) == RiskZone.WARNING
        assert classify_risk_zone(2.01, thresholds) == RiskZone.DANGER


class TestComputeAcwr:
    def test_no_sessions_is_zero_undertrained(self, reference_date):
        snapshot = compute_acwr_from_sessions([], reference_date)

        assert snapshot.acute_load == 0
        assert snapshot.chronic_load == 0
        assert snapshot.acwr == 0
        assert snapshot.risk_zone == RiskZone.UNDERTRAINED
        assert snapshot.date == reference_date

    def test_zero_chronic_load_never_divides(self, reference_date):
        snapshot = compute_acwr({}, reference_date)
        assert snapshot.acwr == 0.0
        assert math.isfinite(snapshot.acwr)

    def test_rest_after_hard_block_reads_undertrained(self, reference_date, make_session):
        # 7 days of 100 AU, then 21 rest days ending on the reference date
        sessions = _daily_sessions(make_session, reference_date, [100] * 7 + [0] * 21)
        snapshot = compute_acwr_from_sessions(sessions, reference_date)

        assert snapshot.acute_load == 0
        assert snapshot.chronic_load == 175
        assert snapshot.acwr == 0
        assert snapshot.risk_zone == RiskZone.UNDERTRAINED

    def test_steady_load_is_one(self, reference_date, make_session):
        sessions = _daily_sessions(make_session, reference_date, [57] * 60)
        snapshot = compute_acwr_from_sessions(sessions, reference_date)

        assert snapshot.acute_load == 399
        assert snapshot.chronic_load == 399
        assert snapshot.acwr == 1.0
        assert snapshot.risk_zone == RiskZone.OPTIMAL

    def test_spike_is_danger(self, reference_date, make_session):
        sessions = _daily_sessions(make_session, reference_date, [100] * 21 + [200] * 7)
        snapshot = compute_acwr_from_sessions(sessions, reference_date)

        assert snapshot.acute_load == 1400
        assert snapshot.chronic_load == 875
        assert snapshot.acwr == 1.6
        assert snapshot.risk_zone == RiskZone.DANGER

    def test_moderate_increase_is_warning(self, reference_date, make_session):
        sessions = _daily_sessions(make_session, reference_date, [100] * 21 + [150] * 7)
        snapshot = compute_acwr_from_sessions(sessions, reference_date)

        assert snapshot.acute_load == 1050
        assert snapshot.chronic_load == 788
        assert snapshot.acwr == 1.33
        assert snapshot.risk_zone == RiskZone.WARNING

    @pytest.mark.parametrize(
        ("today_load", "earlier_load", "reported", "zone"),
        [
            (326, 674, 1.3, RiskZone.WARNING),
            (376, 624, 1.5, RiskZone.DANGER),
            (200, 800, 0.8, RiskZone.OPTIMAL),
        ],
    )
    def test_zone_uses_unrounded_ratio(self, reference_date, make_session, today_load, earlier_load, reported, zone):
        sessions = [
            make_session(reference_date, load=today_load),
            make_session(reference_date - timedelta(days=10), load=earlier_load),
        ]
        snapshot = compute_acwr_from_sessions(sessions, reference_date)

        assert snapshot.chronic_load == 250
        assert snapshot.acwr == reported
        assert snapshot.risk_zone == zone

    def test_first_session_after_long_break_reads_danger(self, reference_date, make_session):
        sessions = [
            make_session(reference_date - timedelta(days=40), load=500),
            make_session(reference_date, load=20),
        ]
        snapshot = compute_acwr_from_sessions(sessions, reference_date)

        assert snapshot.acwr == 4.0
        assert snapshot.risk_zone == RiskZone.DANGER

    def test_windows_include_reference_date_only_backwards(self, reference_date, make_session):
        sessions = [
            make_session(reference_date, load=70),
            make_session(reference_date + timedelta(days=1), load=1000),
            make_session(reference_date - timedelta(days=28), load=1000),
        ]
        snapshot = compute_acwr_from_sessions(sessions, reference_date)

        assert snapshot.acute_load == 70
        assert snapshot.chronic_load == 18  # 70 / 4 = 17.5, rounded half-up

    def test_session_day_seven_is_outside_acute_window(self, reference_date, make_session):
        sessions = [make_session(reference_date - timedelta(days=7), load=100)]
        snapshot = compute_acwr_from_sessions(sessions, reference_date)

        assert snapshot.acute_load == 0
        assert snapshot.chronic_load == 25

    def test_sessions_without_load_use_resolver(self, reference_date, make_session):
        snapshot = compute_acwr_from_sessions([make_session(reference_date, 60, 8)], reference_date)

        assert snapshot.acute_load == 100
        assert snapshot.chronic_load == 25
        assert snapshot.acwr == 4.0
        assert snapshot.risk_zone == RiskZone.DANGER


class TestComputeAcwrFromDaily:
    def test_matches_session_variant(self, reference_date, make_session):
        sessions = _daily_sessions(make_session, reference_date, [80, 0, 120, 60, 0, 0, 90] * 8)
        daily = compute_daily_metrics(sessions, reference_date)

        assert compute_acwr_from_daily(daily) == compute_acwr_from_sessions(sessions, reference_date)

    def test_uses_last_entry_as_reference(self, reference_date, make_session):
        daily = compute_daily_metrics([make_session(reference_date, load=40)], reference_date)
        assert compute_acwr_from_daily(daily).date == reference_date

    def test_empty_series(self):
        assert compute_acwr_from_daily([]) == AcwrSnapshot()

    def test_short_series_sums_available_days(self, reference_date, make_session):
        config = LoadModelConfig(window_days=9)
        sessions = _daily_sessions(make_session, reference_date, [10] * 10)
        snapshot = compute_acwr_from_daily(compute_daily_metrics(sessions, reference_date, config), config)

        assert snapshot.acute_load == 70
        assert snapshot.chronic_load == 25
        assert snapshot.acwr == 2.8
