"""Training load endpoints.

Read endpoints return the full dashboard for a user's own sessions or a
linked athlete's sessions. Write endpoints log and delete sessions.
Authentication is handled upstream; identities arrive as path parameters.
"""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, HTTPException, Query, status
from loguru import logger

from athlete_load.db.errors import TrainingLoadNotFoundError
from athlete_load.db.training_loads import add_training_load, delete_training_load
from athlete_load.metrics.computation_service import get_athlete_training_load, get_own_training_load
from athlete_load.schemas.training_load import TrainingLoadCreate, TrainingLoadCreated, TrainingLoadDashboard

router = APIRouter(prefix="/training-load", tags=["training-load"])


@router.get("/users/{user_id}", response_model=TrainingLoadDashboard)
def get_user_dashboard(
    user_id: str,
    reference_date: date | None = Query(default=None, description="Reference day (default: today, UTC)"),
) -> TrainingLoadDashboard:
    """Get the training load dashboard for a user's own sessions.

    Args:
        user_id: User whose own sessions are analysed
        reference_date: Last day of the analysis window

    Returns:
        Daily fitness/fatigue/form series, ACWR snapshot and guidance
    """
    logger.info(f"[TRAINING_LOAD] GET /training-load/users/{user_id} reference_date={reference_date}")
    return get_own_training_load(user_id, reference_date)


@router.get("/athletes/{athlete_id}", response_model=TrainingLoadDashboard)
def get_athlete_dashboard(
    athlete_id: str,
    reference_date: date | None = Query(default=None, description="Reference day (default: today, UTC)"),
) -> TrainingLoadDashboard:
    """Get the training load dashboard for a linked athlete."""
    logger.info(f"[TRAINING_LOAD] GET /training-load/athletes/{athlete_id} reference_date={reference_date}")
    return get_athlete_training_load(athlete_id, reference_date)


@router.post("/users/{user_id}/sessions", response_model=TrainingLoadCreated, status_code=status.HTTP_201_CREATED)
def create_session(user_id: str, body: TrainingLoadCreate) -> TrainingLoadCreated:
    """Log a training session. Set athlete_id in the body to log it for a linked athlete."""
    logger.info(f"[TRAINING_LOAD] POST /training-load/users/{user_id}/sessions date={body.session_date}")
    return add_training_load(user_id, body)


@router.delete("/sessions/{load_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_session(load_id: str) -> None:
    """Delete a logged training session.

    Raises:
        HTTPException: 404 if the session does not exist
    """
    logger.info(f"[TRAINING_LOAD] DELETE /training-load/sessions/{load_id}")
    try:
        delete_training_load(load_id)
    except TrainingLoadNotFoundError as e:
        logger.warning(f"[TRAINING_LOAD] {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
