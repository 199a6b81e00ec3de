"""Day-by-day load trends built on the daily metric series.

- ACWR trend: the ACWR snapshot recomputed for every day that has a full
  chronic window behind it inside the series.
- Daily accumulation: day-over-day load and fitness changes plus the trailing
  7-day load, for the most recent days.
"""

from __future__ import annotations

from loguru import logger

from athlete_load.config.load_model import DEFAULT_LOAD_MODEL_CONFIG, LoadModelConfig
from athlete_load.metrics.acwr import compute_acwr
from athlete_load.schemas.training_load import AcwrSnapshot, DailyAccumulation, DailyMetric, LoadBand
from athlete_load.utils.rounding import round_to_int

LIGHT_LOAD_BELOW = 50
MODERATE_LOAD_BELOW = 100


def compute_acwr_trend(
    daily_metrics: list[DailyMetric],
    period_days: int | None = None,
    config: LoadModelConfig | None = None,
) -> list[AcwrSnapshot]:
    """Compute one ACWR snapshot per day of the series.

    Days before the series holds a full chronic window are skipped, so a
    61-day series yields 34 snapshots and anything shorter than 28 days
    yields none.

    Args:
        daily_metrics: Chronological daily series
        period_days: If set, keep only the most recent period_days snapshots
        config: Model parameters (uses defaults if None)
    """
    cfg = config or DEFAULT_LOAD_MODEL_CONFIG
    if len(daily_metrics) < cfg.chronic_window_days:
        return []

    load_by_date = {metric.date: metric.load for metric in daily_metrics}
    trend = [
        compute_acwr(load_by_date, metric.date, cfg)
        for metric in daily_metrics[cfg.chronic_window_days - 1 :]
    ]

    if period_days is not None:
        trend = trend[-period_days:] if period_days > 0 else []

    logger.debug(f"[ACWR] Trend computed: {len(trend)} points")
    return trend


def classify_load_band(load: float) -> LoadBand:
    if load <= 0:
        return LoadBand.REST
    if load < LIGHT_LOAD_BELOW:
        return LoadBand.LIGHT
    if load < MODERATE_LOAD_BELOW:
        return LoadBand.MODERATE
    return LoadBand.HIGH


def compute_daily_accumulation(
    daily_metrics: list[DailyMetric],
    days_to_show: int = 14,
) -> list[DailyAccumulation]:
    """Summarize the last days_to_show days of the series.

    Changes are relative to the previous *shown* day (0 for the first one).
    The trailing 7-day load looks back over the full series, not only the
    shown days.
    """
    if days_to_show <= 0 or not daily_metrics:
        return []

    first_shown = max(0, len(daily_metrics) - days_to_show)
    display = [metric.to_display() for metric in daily_metrics]
    entries: list[DailyAccumulation] = []

    for index in range(first_shown, len(daily_metrics)):
        current = display[index]
        previous = display[index - 1] if index > first_shown else None
        rolling = sum(metric.load for metric in daily_metrics[max(0, index - 6) : index + 1])
        entries.append(
            DailyAccumulation(
                date=current.date,
                load=current.load,
                fitness=current.fitness,
                load_change=current.load - previous.load if previous else 0,
                fitness_change=current.fitness - previous.fitness if previous else 0,
                rolling_7day_load=round_to_int(rolling),
                band=classify_load_band(current.load),
            )
        )

    return entries


def average_training_day_load(entries: list[DailyAccumulation]) -> int:
    """Average load over days with any training (rest days excluded)."""
    training_days = [entry.load for entry in entries if entry.load > 0]
    if not training_days:
        return 0
    return round_to_int(sum(training_days) / len(training_days))
