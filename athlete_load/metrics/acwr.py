"""Acute:Chronic Workload Ratio (ACWR) and injury risk zones.

Acute load is the load summed over the trailing 7 days (reference date
inclusive). Chronic load is the load summed over the trailing 28 days divided
by 4, i.e. an average *weekly* load, so that ACWR compares "this week" with "a
typical recent week".

Zones (half-open, total over [0, inf)):
    acwr < 0.8          undertrained
    0.8 <= acwr <= 1.3  optimal
    1.3 < acwr <= 1.5   warning
    acwr > 1.5          danger

The zone is classified on the unrounded ratio, so a reported 1.3 can still
read as warning.

Known limitation: with no load in the chronic window ACWR is reported as 0.
The first session after four idle weeks is in both windows, so chronic load is
a quarter of acute load and the athlete reads as danger (ACWR 4.0) however
light the session was.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from datetime import date, timedelta

from loguru import logger

from athlete_load.config.load_model import DEFAULT_LOAD_MODEL_CONFIG, AcwrThresholds, LoadModelConfig
from athlete_load.metrics.training_load import aggregate_daily_loads
from athlete_load.schemas.training_load import AcwrSnapshot, DailyMetric, RiskZone, SessionRecord
from athlete_load.utils.rounding import round_half_up, round_to_int


def classify_risk_zone(acwr: float, thresholds: AcwrThresholds | None = None) -> RiskZone:
    """Map an ACWR value to its risk zone.

    Negative or NaN values read as undertrained.
    """
    bounds = thresholds or DEFAULT_LOAD_MODEL_CONFIG.acwr_thresholds
    if math.isnan(acwr) or acwr < bounds.undertrained_below:
        return RiskZone.UNDERTRAINED
    if acwr <= bounds.optimal_max:
        return RiskZone.OPTIMAL
    if acwr <= bounds.warning_max:
        return RiskZone.WARNING
    return RiskZone.DANGER


def _trailing_sum(load_by_date: Mapping[date, float], reference_date: date, days: int) -> float:
    return sum(load_by_date.get(reference_date - timedelta(days=offset), 0.0) for offset in range(days))


def _build_snapshot(
    acute_load: float,
    chronic_total: float,
    reference_date: date | None,
    cfg: LoadModelConfig,
) -> AcwrSnapshot:
    chronic_load = chronic_total / cfg.chronic_weeks
    acwr = acute_load / chronic_load if chronic_load > 0 else 0.0
    return AcwrSnapshot(
        date=reference_date,
        acute_load=round_to_int(acute_load),
        chronic_load=round_to_int(chronic_load),
        acwr=round_half_up(acwr, 2),
        risk_zone=classify_risk_zone(acwr, cfg.acwr_thresholds),
    )


def compute_acwr(
    load_by_date: Mapping[date, float],
    reference_date: date,
    config: LoadModelConfig | None = None,
) -> AcwrSnapshot:
    """Compute the ACWR snapshot for reference_date from per-day loads.

    Args:
        load_by_date: Date -> total load (AU). Missing days count as 0. Days after
            reference_date are ignored.
        reference_date: Last day of both trailing windows
        config: Model parameters (uses defaults if None)

    Returns:
        Snapshot with integer loads and ACWR rounded to 2 decimals
    """
    cfg = config or DEFAULT_LOAD_MODEL_CONFIG
    acute_load = _trailing_sum(load_by_date, reference_date, cfg.acute_window_days)
    chronic_total = _trailing_sum(load_by_date, reference_date, cfg.chronic_window_days)
    snapshot = _build_snapshot(acute_load, chronic_total, reference_date, cfg)
    logger.debug(
        f"[ACWR] {reference_date.isoformat()}: acute={snapshot.acute_load} chronic={snapshot.chronic_load} "
        f"acwr={snapshot.acwr} zone={snapshot.risk_zone.value}"
    )
    return snapshot


def compute_acwr_from_sessions(
    sessions: Iterable[SessionRecord],
    reference_date: date,
    config: LoadModelConfig | None = None,
) -> AcwrSnapshot:
    """Compute the ACWR snapshot directly from raw session records."""
    cfg = config or DEFAULT_LOAD_MODEL_CONFIG
    return compute_acwr(aggregate_daily_loads(sessions, cfg), reference_date, cfg)


def compute_acwr_from_daily(
    daily_metrics: list[DailyMetric],
    config: LoadModelConfig | None = None,
) -> AcwrSnapshot:
    """Compute the ACWR snapshot for the last day of a daily series.

    A series shorter than the chronic window contributes only the days it
    holds. An empty series yields the zero snapshot.
    """
    if not daily_metrics:
        return AcwrSnapshot()

    cfg = config or DEFAULT_LOAD_MODEL_CONFIG
    load_by_date = {metric.date: metric.load for metric in daily_metrics}
    return compute_acwr(load_by_date, daily_metrics[-1].date, cfg)
