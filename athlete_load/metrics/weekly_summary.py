"""Weekly load summaries (Monday-Sunday weeks).

Two views of a week:
- summarize_weeks: aggregates of the daily fitness/fatigue series (chart view)
- weekly_target_status: totals of the logged sessions against a weekly load
  target (planning view)
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from loguru import logger

from athlete_load.config.load_model import LoadModelConfig
from athlete_load.metrics.session_load import resolve_session_load
from athlete_load.schemas.training_load import (
    DailyMetric,
    SessionRecord,
    TargetProgressStatus,
    WeeklyLoadStats,
    WeeklyTargetStatus,
    WeekSummary,
)
from athlete_load.utils.calendar import trailing_week_starts, week_end
from athlete_load.utils.rounding import round_half_up, round_to_int

COMPLIANCE_TARGET_FRACTION = 0.8


def _mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def summarize_weeks(
    daily_metrics: list[DailyMetric],
    reference_date: date,
    weeks: int = 8,
    weekly_target: float | None = None,
) -> list[WeekSummary]:
    """Aggregate the daily series into the last `weeks` calendar weeks.

    Args:
        daily_metrics: Daily series (any order). Weeks partly outside it only
            average the days it covers; weeks fully outside it are all zero.
        reference_date: Day that determines the current week
        weeks: Number of weeks, oldest first, ending with the current week
        weekly_target: Optional target attached to every summary

    Returns:
        One WeekSummary per week, oldest first
    """
    summaries: list[WeekSummary] = []
    for start in trailing_week_starts(reference_date, weeks):
        end = week_end(start)
        days = [metric for metric in daily_metrics if start <= metric.date <= end]
        total = sum(metric.load for metric in days)
        summaries.append(
            WeekSummary(
                week_start=start,
                week_end=end,
                total_load=round_to_int(total),
                avg_load=round_to_int(_mean([metric.load for metric in days])),
                avg_fitness=round_to_int(_mean([metric.fitness for metric in days])),
                avg_fatigue=round_to_int(_mean([metric.fatigue for metric in days])),
                avg_form=round_to_int(_mean([metric.form for metric in days])),
                target=weekly_target,
                is_current_week=start <= reference_date <= end,
            )
        )
    return summaries


def weekly_load_trend(summaries: list[WeekSummary]) -> float:
    """Change in weekly load over the last four weeks.

    Mean total of the two most recent weeks minus mean total of the two weeks
    before them. Positive means load is building.
    """
    if len(summaries) < 2:
        return 0.0
    recent = summaries[-4:]
    first_half = sum(week.total_load for week in recent[:2]) / 2
    second_half = sum(week.total_load for week in recent[2:]) / 2
    return second_half - first_half


def weekly_load_stats(summaries: list[WeekSummary], weekly_target: float | None = None) -> WeeklyLoadStats:
    """Average, extremes and target compliance over weeks with any load.

    Compliance is 0 when no weekly target is set.
    """
    loaded = [week.total_load for week in summaries if week.total_load > 0]
    if not loaded:
        return WeeklyLoadStats()

    compliant = 0
    if weekly_target:
        compliant = sum(1 for total in loaded if total >= weekly_target * COMPLIANCE_TARGET_FRACTION)
    return WeeklyLoadStats(
        avg=round_to_int(_mean(loaded)),
        max=max(loaded),
        min=min(loaded),
        compliance=round_to_int(compliant / len(loaded) * 100),
    )


def classify_target_progress(ratio_percent: float) -> TargetProgressStatus:
    """Classify uncapped progress (percent of weekly target)."""
    if 90 <= ratio_percent <= 110:
        return TargetProgressStatus.ON_TARGET
    if 70 <= ratio_percent < 90:
        return TargetProgressStatus.ALMOST
    if ratio_percent > 110:
        return TargetProgressStatus.EXCEEDED
    if ratio_percent >= 50:
        return TargetProgressStatus.IN_PROGRESS
    return TargetProgressStatus.JUST_STARTED


def weekly_target_status(
    sessions: Iterable[SessionRecord],
    reference_date: date,
    weekly_target: float,
    weeks: int = 4,
    config: LoadModelConfig | None = None,
) -> list[WeeklyTargetStatus]:
    """Progress of the last `weeks` weeks of sessions against weekly_target.

    Returns:
        Newest week first. Progress percent is capped at 100 for display; the
        status is classified on the uncapped ratio so overshoot is visible.
    """
    session_list = list(sessions)
    starts = trailing_week_starts(reference_date, weeks)

    totals: list[tuple[date, date, float, list[SessionRecord]]] = []
    for start in starts:
        end = week_end(start)
        week_sessions = [session for session in session_list if start <= session.date <= end]
        total = sum(resolve_session_load(session, config) for session in week_sessions)
        totals.append((start, end, total, week_sessions))

    statuses: list[WeeklyTargetStatus] = []
    for index, (start, end, total, week_sessions) in enumerate(totals):
        ratio_percent = total * 100 / weekly_target if weekly_target > 0 else 0.0
        previous_total = totals[index - 1][2] if index > 0 else None

        load_change: int | None = None
        change_percent: int | None = None
        if previous_total is not None:
            load_change = round_to_int(total - previous_total)
            change_percent = round_to_int((total - previous_total) * 100 / previous_total) if previous_total > 0 else 0

        statuses.append(
            WeeklyTargetStatus(
                week_start=start,
                week_end=end,
                total_load=round_to_int(total),
                session_count=len(week_sessions),
                avg_rpe=round_half_up(_mean([session.exertion_rating for session in week_sessions]), 1),
                progress_percent=min(100, round_to_int(ratio_percent)),
                status=classify_target_progress(ratio_percent),
                load_change=load_change,
                change_percent=change_percent,
            )
        )

    logger.debug(f"[WEEKLY] Target status computed for {len(statuses)} weeks (target={weekly_target})")
    return list(reversed(statuses))
