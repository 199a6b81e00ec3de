"""Session load resolver (session-RPE).

Converts a logged (duration, RPE) pair into a training load in arbitrary
units (AU). The RPE table gives the load of a 60-minute session and grows
faster above RPE 7, reflecting the higher cost of near-maximal effort.

    load = round(base_load[clamp(round(rpe), 1, 10)] * duration_minutes / 60)

A session that already carries a load (manual override, or the value stored
at logging time) is used as-is.
"""

from __future__ import annotations

import math

from athlete_load.config.load_model import DEFAULT_LOAD_MODEL_CONFIG, RPE_MAX, RPE_MIN, LoadModelConfig
from athlete_load.schemas.training_load import SessionRecord
from athlete_load.utils.rounding import round_to_int

SESSION_REFERENCE_MINUTES = 60.0


def clamp_rpe(exertion_rating: float) -> int:
    """Round and clamp an RPE value into 1-10.

    Non-finite ratings fall back to the lowest rating.
    """
    if not math.isfinite(exertion_rating):
        return RPE_MIN
    return min(RPE_MAX, max(RPE_MIN, round_to_int(exertion_rating)))


def calculate_session_load(
    duration_minutes: float,
    exertion_rating: float,
    config: LoadModelConfig | None = None,
) -> int:
    """Compute session load (AU) from duration and RPE.

    Args:
        duration_minutes: Session duration in minutes
        exertion_rating: Session RPE, clamped into 1-10
        config: Model parameters (uses defaults if None)

    Returns:
        Non-negative integer load in AU
    """
    if not math.isfinite(duration_minutes) or duration_minutes <= 0:
        return 0

    cfg = config or DEFAULT_LOAD_MODEL_CONFIG
    base_load = cfg.rpe_base_loads[clamp_rpe(exertion_rating)]
    return round_to_int(base_load * duration_minutes / SESSION_REFERENCE_MINUTES)


def resolve_session_load(session: SessionRecord, config: LoadModelConfig | None = None) -> float:
    """Return the session's stored load, or derive it from duration and RPE."""
    if session.load is not None:
        return session.load
    return float(calculate_session_load(session.duration_minutes, session.exertion_rating, config))
