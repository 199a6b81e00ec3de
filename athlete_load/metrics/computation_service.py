"""Training load dashboard computation.

One pure computation (compute_training_load_dashboard) serves every data
scope. The adapters below only differ in which sessions they fetch:
- get_own_training_load: a user's own training
- get_athlete_training_load: a linked athlete's training

Everything is recomputed from scratch on each call; nothing derived is stored.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, timedelta, timezone

from loguru import logger

from athlete_load.config.load_model import DEFAULT_LOAD_MODEL_CONFIG, LoadModelConfig
from athlete_load.config.settings import settings
from athlete_load.core.logger import log_scope
from athlete_load.db.training_loads import fetch_athlete_sessions, fetch_own_sessions
from athlete_load.metrics.acwr import compute_acwr_from_sessions
from athlete_load.metrics.load_trends import average_training_day_load, compute_acwr_trend, compute_daily_accumulation
from athlete_load.metrics.readiness import build_recommendations, classify_form, recommend_intensity
from athlete_load.metrics.training_load import compute_daily_metrics, get_current_metrics
from athlete_load.metrics.weekly_summary import summarize_weeks, weekly_load_stats, weekly_load_trend, weekly_target_status
from athlete_load.schemas.training_load import SessionRecord, TrainingLoadDashboard

WEEKS_IN_SUMMARY = 8
TARGET_STATUS_WEEKS = 4
ACCUMULATION_DAYS = 14


def history_start(reference_date: date, config: LoadModelConfig | None = None) -> date:
    """First day of history any part of the dashboard reads."""
    cfg = config or DEFAULT_LOAD_MODEL_CONFIG
    lookback_days = max(cfg.window_days, cfg.chronic_window_days - 1)
    return reference_date - timedelta(days=lookback_days)


def compute_training_load_dashboard(
    sessions: Iterable[SessionRecord],
    reference_date: date,
    config: LoadModelConfig | None = None,
    weekly_target: float | None = None,
) -> TrainingLoadDashboard:
    """Compute every training load view for one athlete.

    Args:
        sessions: The athlete's session records (any order)
        reference_date: "Today" for the daily window and ACWR
        config: Model parameters (uses defaults if None)
        weekly_target: Optional weekly load target (AU). Without one the
            target status list is empty and compliance is 0.

    Returns:
        Daily series (integer rounded), ACWR snapshot, current metrics, form
        category, recommendations, intensity, ACWR trend, weekly summaries
        with their trend and stats, weekly target status and the recent daily
        accumulation
    """
    cfg = config or DEFAULT_LOAD_MODEL_CONFIG
    session_list = [session for session in sessions if session.date <= reference_date]

    daily_metrics = compute_daily_metrics(session_list, reference_date, cfg)
    acwr = compute_acwr_from_sessions(session_list, reference_date, cfg)
    current = get_current_metrics(daily_metrics)
    summaries = summarize_weeks(daily_metrics, reference_date, WEEKS_IN_SUMMARY, weekly_target)
    accumulation = compute_daily_accumulation(daily_metrics, ACCUMULATION_DAYS)
    target_status = (
        weekly_target_status(session_list, reference_date, weekly_target, TARGET_STATUS_WEEKS, cfg)
        if weekly_target
        else []
    )

    dashboard = TrainingLoadDashboard(
        reference_date=reference_date,
        daily_metrics=[metric.to_display() for metric in daily_metrics],
        acwr=acwr,
        current=current,
        form_category=classify_form(current.form),
        recommendations=build_recommendations(acwr, current),
        intensity=recommend_intensity(acwr, current),
        acwr_trend=compute_acwr_trend(daily_metrics, config=cfg),
        weekly_summaries=summaries,
        weekly_load_trend=weekly_load_trend(summaries),
        weekly_load_stats=weekly_load_stats(summaries, weekly_target),
        weekly_target_status=target_status,
        daily_accumulation=accumulation,
        average_training_day_load=average_training_day_load(accumulation),
    )

    logger.info(
        f"[TRAINING_LOAD] Dashboard for {reference_date.isoformat()}: sessions={len(session_list)} "
        f"fitness={current.fitness} fatigue={current.fatigue} form={current.form} "
        f"acwr={acwr.acwr} zone={acwr.risk_zone.value}"
    )
    return dashboard


def _today_utc() -> date:
    return datetime.now(timezone.utc).date()


def get_own_training_load(
    user_id: str,
    reference_date: date | None = None,
    config: LoadModelConfig | None = None,
) -> TrainingLoadDashboard:
    """Dashboard for the sessions a user logged for themselves."""
    ref = reference_date or _today_utc()
    cfg = config or settings.load_model_config()
    with log_scope("own", user_id):
        sessions = fetch_own_sessions(user_id, history_start(ref, cfg), ref)
        return compute_training_load_dashboard(sessions, ref, cfg, settings.weekly_load_target)


def get_athlete_training_load(
    athlete_id: str,
    reference_date: date | None = None,
    config: LoadModelConfig | None = None,
) -> TrainingLoadDashboard:
    """Dashboard for a linked athlete's sessions."""
    ref = reference_date or _today_utc()
    cfg = config or settings.load_model_config()
    with log_scope("athlete", athlete_id):
        sessions = fetch_athlete_sessions(athlete_id, history_start(ref, cfg), ref)
        return compute_training_load_dashboard(sessions, ref, cfg, settings.weekly_load_target)
