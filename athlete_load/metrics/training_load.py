"""Daily training load metrics (Fitness, Fatigue, Form).

This module derives the daily fitness/fatigue series from a sparse list of
logged sessions. All calculations are pure and deterministic: the same
sessions and reference date always produce the same series.

Metrics:
- Fitness (CTL): exponentially weighted average of daily load, tau = 42 days
- Fatigue (ATL): exponentially weighted average of daily load, tau = 7 days
- Form (TSB): Fitness - Fatigue, same day, after both updates

Recurrence (applied on every calendar day, including rest days):
    fitness[t] = fitness[t-1] + (load[t] - fitness[t-1]) / tau_fitness
    fatigue[t] = fatigue[t-1] + (load[t] - fatigue[t-1]) / tau_fatigue

Window:
- The series covers [reference_date - N, reference_date], N + 1 days, oldest first
- Both averages start at 0 on the first day of the window. Load logged before
  the window is ignored, so fitness is under-estimated early in the series
  (cold-start bias). Treat roughly the first 2 x tau_fitness days of an
  athlete's history as unreliable.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta

from loguru import logger

from athlete_load.config.load_model import DEFAULT_LOAD_MODEL_CONFIG, LoadModelConfig
from athlete_load.metrics.session_load import resolve_session_load
from athlete_load.schemas.training_load import CurrentMetrics, DailyMetric, SessionRecord


def aggregate_daily_loads(
    sessions: Iterable[SessionRecord],
    config: LoadModelConfig | None = None,
) -> dict[date, float]:
    """Sum resolved session loads per calendar day.

    Days without sessions are absent from the map (implicitly load 0).
    """
    load_by_date: dict[date, float] = {}
    for session in sessions:
        load_by_date[session.date] = load_by_date.get(session.date, 0.0) + resolve_session_load(session, config)
    return load_by_date


def calculate_fitness_fatigue(
    daily_loads: list[float],
    fitness_tau_days: float,
    fatigue_tau_days: float,
) -> list[tuple[float, float]]:
    """Run the fitness and fatigue recurrences over a chronological load list.

    Args:
        daily_loads: One load per consecutive day, oldest first. Rest days must be 0.0, not omitted.
        fitness_tau_days: Chronic time constant
        fatigue_tau_days: Acute time constant

    Returns:
        (fitness, fatigue) per day, full precision

    Example:
        >>> calculate_fitness_fatigue([100.0], 42, 7)[0][1]
        14.285714285714286
    """
    fitness = 0.0
    fatigue = 0.0
    result: list[tuple[float, float]] = []

    for load in daily_loads:
        fitness += (load - fitness) / fitness_tau_days
        fatigue += (load - fatigue) / fatigue_tau_days
        result.append((fitness, fatigue))

    return result


def compute_daily_metrics(
    sessions: Iterable[SessionRecord],
    reference_date: date,
    config: LoadModelConfig | None = None,
) -> list[DailyMetric]:
    """Compute one DailyMetric per day of the window ending at reference_date.

    Args:
        sessions: Session records in any order. Sessions outside the window are ignored.
        reference_date: Last day of the window ("today")
        config: Model parameters (uses defaults if None)

    Returns:
        window_days + 1 entries, oldest first. An empty session list yields an
        all-zero series of the same length.
    """
    cfg = config or DEFAULT_LOAD_MODEL_CONFIG
    start_date = reference_date - timedelta(days=cfg.window_days)
    load_by_date = aggregate_daily_loads(sessions, cfg)

    dates = [start_date + timedelta(days=offset) for offset in range(cfg.window_days + 1)]
    daily_loads = [load_by_date.get(day, 0.0) for day in dates]

    series = calculate_fitness_fatigue(daily_loads, cfg.fitness_tau_days, cfg.fatigue_tau_days)

    metrics = [
        DailyMetric(date=day, load=load, fitness=fitness, fatigue=fatigue, form=fitness - fatigue)
        for day, load, (fitness, fatigue) in zip(dates, daily_loads, series, strict=True)
    ]

    logger.debug(
        f"[TRAINING_LOAD] Computed {len(metrics)} daily metrics from {start_date.isoformat()} "
        f"to {reference_date.isoformat()} ({sum(1 for load in daily_loads if load > 0)} training days)"
    )
    return metrics


def get_current_metrics(daily_metrics: list[DailyMetric]) -> CurrentMetrics:
    """Get current (most recent) fitness, fatigue and form in raw AU.

    Returns zeros if the series is empty.
    """
    if not daily_metrics:
        return CurrentMetrics()

    latest = daily_metrics[-1].to_display()
    return CurrentMetrics(fitness=latest.fitness, fatigue=latest.fatigue, form=latest.form)

