"""Training load record store.

Two read scopes share one query:
- own: sessions a user logged for themselves (athlete_id IS NULL)
- athlete: sessions logged for a linked athlete, whoever logged them

Rows are converted to SessionRecord at this boundary; the load model never
sees ORM objects.
"""

from __future__ import annotations

import uuid
from datetime import date

from loguru import logger
from sqlalchemy import select
from sqlalchemy.sql.elements import ColumnElement

from athlete_load.config.load_model import LoadModelConfig
from athlete_load.db.errors import TrainingLoadNotFoundError
from athlete_load.db.models import TrainingLoad
from athlete_load.db.session import get_session
from athlete_load.metrics.session_load import calculate_session_load
from athlete_load.schemas.training_load import SessionRecord, TrainingLoadCreate, TrainingLoadCreated


def _to_session_record(row: TrainingLoad) -> SessionRecord:
    return SessionRecord(
        date=row.session_date,
        duration_minutes=row.duration_minutes,
        exertion_rating=row.rpe,
        load=row.session_load,
        training_type=row.training_type,
    )


def _fetch_sessions(scope: ColumnElement[bool], since: date, until: date) -> list[SessionRecord]:
    with get_session() as session:
        rows = (
            session.execute(
                select(TrainingLoad)
                .where(
                    scope,
                    TrainingLoad.session_date >= since,
                    TrainingLoad.session_date <= until,
                )
                .order_by(TrainingLoad.session_date, TrainingLoad.created_at)
            )
            .scalars()
            .all()
        )
        return [_to_session_record(row) for row in rows]


def fetch_own_sessions(user_id: str, since: date, until: date) -> list[SessionRecord]:
    """Sessions a user logged for their own training, oldest first."""
    records = _fetch_sessions(
        (TrainingLoad.user_id == user_id) & TrainingLoad.athlete_id.is_(None),
        since,
        until,
    )
    logger.info(f"[LOAD_STORE] Fetched {len(records)} own sessions for user_id={user_id} ({since} to {until})")
    return records


def fetch_athlete_sessions(athlete_id: str, since: date, until: date) -> list[SessionRecord]:
    """Sessions logged for a linked athlete, oldest first."""
    records = _fetch_sessions(TrainingLoad.athlete_id == athlete_id, since, until)
    logger.info(f"[LOAD_STORE] Fetched {len(records)} sessions for athlete_id={athlete_id} ({since} to {until})")
    return records


def add_training_load(
    user_id: str,
    data: TrainingLoadCreate,
    config: LoadModelConfig | None = None,
) -> TrainingLoadCreated:
    """Store a training session with its load resolved at logging time.

    A manual session_load in the request overrides the RPE-based estimate.
    """
    session_load = (
        data.session_load
        if data.session_load is not None
        else float(calculate_session_load(data.duration_minutes, data.rpe, config))
    )
    load_id = str(uuid.uuid4())
    record = TrainingLoad(
        id=load_id,
        user_id=user_id,
        athlete_id=data.athlete_id,
        session_date=data.session_date,
        duration_minutes=data.duration_minutes,
        rpe=data.rpe,
        session_load=session_load,
        training_type=data.training_type,
        notes=data.notes,
    )

    with get_session() as session:
        session.add(record)
        session.flush()

    logger.info(
        f"[LOAD_STORE] Stored training load id={load_id} user_id={user_id} athlete_id={data.athlete_id} "
        f"date={data.session_date} load={session_load}"
    )
    return TrainingLoadCreated(id=load_id, session_load=session_load)


def delete_training_load(load_id: str) -> None:
    """Delete a training load record.

    Raises:
        TrainingLoadNotFoundError: If no record has this id
    """
    with get_session() as session:
        record = session.get(TrainingLoad, load_id)
        if record is None:
            raise TrainingLoadNotFoundError(load_id)
        session.delete(record)
        session.flush()

    logger.info(f"[LOAD_STORE] Deleted training load id={load_id}")
