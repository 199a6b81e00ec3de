from __future__ import annotations

import uuid
from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, Float, Index, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all database models."""


class TrainingLoad(Base):
    """Logged training session (session-RPE).

    Stores:
    - user_id: Coach or athlete account that logged the session
    - athlete_id: Linked athlete the session belongs to (NULL = the user's own training)
    - session_date: Calendar day of the session
    - duration_minutes, rpe: Raw inputs of the load estimate
    - session_load: Load in AU resolved at logging time (or a manual override)
    - training_type, notes: Free-text descriptors

    Records are immutable once stored; they are only ever deleted.
    """

    __tablename__ = "training_loads"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    athlete_id: Mapped[str | None] = mapped_column(String, nullable=True, index=True)
    session_date: Mapped[date] = mapped_column(Date, nullable=False)
    duration_minutes: Mapped[float] = mapped_column(Float, nullable=False)
    rpe: Mapped[int] = mapped_column(Integer, nullable=False)
    session_load: Mapped[float | None] = mapped_column(Float, nullable=True)
    training_type: Mapped[str] = mapped_column(String, nullable=False, default="general")
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        Index("idx_training_loads_user_date", "user_id", "session_date"),
        Index("idx_training_loads_athlete_date", "athlete_id", "session_date"),
    )
