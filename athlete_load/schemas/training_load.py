"""Training load schemas.

Plain data passed into and out of the load model. Records are frozen: the
model never mutates its inputs, and derived values are rebuilt on every
recomputation.
"""

from datetime import date as date_type
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from athlete_load.utils.rounding import round_to_int


class SessionRecord(BaseModel):
    """One logged training session.

    Attributes:
        date: Calendar day of the session (no time-of-day)
        duration_minutes: Session duration in minutes
        exertion_rating: Session RPE; values outside 1-10 are clamped when resolving load
        load: Precomputed load in AU; when set it overrides the RPE-based estimate
        training_type: Free-text session type (e.g. "technique", "conditioning")
    """

    model_config = ConfigDict(frozen=True)

    date: date_type
    duration_minutes: float = Field(..., gt=0)
    exertion_rating: float = Field(..., allow_inf_nan=False)
    load: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    training_type: str | None = None


class DisplayDailyMetric(BaseModel):
    """Integer-rounded daily metric for charts and exports."""

    model_config = ConfigDict(frozen=True)

    date: date_type
    load: int
    fitness: int
    fatigue: int
    form: int


class DailyMetric(BaseModel):
    """One computed day in the analysis window (full precision)."""

    model_config = ConfigDict(frozen=True)

    date: date_type
    load: float
    fitness: float
    fatigue: float
    form: float

    def to_display(self) -> DisplayDailyMetric:
        return DisplayDailyMetric(
            date=self.date,
            load=round_to_int(self.load),
            fitness=round_to_int(self.fitness),
            fatigue=round_to_int(self.fatigue),
            form=round_to_int(self.form),
        )


class RiskZone(StrEnum):
    UNDERTRAINED = "undertrained"
    OPTIMAL = "optimal"
    WARNING = "warning"
    DANGER = "danger"


class AcwrSnapshot(BaseModel):
    """Acute:chronic workload ratio for a reference date.

    Attributes:
        date: Reference date (None when computed from an empty series)
        acute_load: Trailing 7-day load sum (AU)
        chronic_load: Trailing 28-day load sum expressed per week (AU/week)
        acwr: acute_load / chronic_load, 0 when chronic load is 0
        risk_zone: Zone derived from acwr
    """

    model_config = ConfigDict(frozen=True)

    date: date_type | None = None
    acute_load: int = 0
    chronic_load: int = 0
    acwr: float = 0.0
    risk_zone: RiskZone = RiskZone.UNDERTRAINED


class CurrentMetrics(BaseModel):
    """Latest fitness, fatigue and form in raw AU (integer rounded)."""

    model_config = ConfigDict(frozen=True)

    fitness: int = 0
    fatigue: int = 0
    form: int = 0


class LoadBand(StrEnum):
    REST = "rest"
    LIGHT = "light"
    MODERATE = "moderate"
    HIGH = "high"


class DailyAccumulation(BaseModel):
    """Day-over-day load accumulation entry."""

    model_config = ConfigDict(frozen=True)

    date: date_type
    load: int
    fitness: int
    load_change: int
    fitness_change: int
    rolling_7day_load: int
    band: LoadBand


class WeekSummary(BaseModel):
    """Aggregate of the daily series over one Monday-Sunday week."""

    model_config = ConfigDict(frozen=True)

    week_start: date_type
    week_end: date_type
    total_load: int
    avg_load: int
    avg_fitness: int
    avg_fatigue: int
    avg_form: int
    target: float | None = None
    is_current_week: bool = False


class WeeklyLoadStats(BaseModel):
    """Statistics over weeks with any recorded load."""

    model_config = ConfigDict(frozen=True)

    avg: int = 0
    max: int = 0
    min: int = 0
    compliance: int = Field(default=0, description="Percent of non-zero weeks reaching 80% of target")


class TargetProgressStatus(StrEnum):
    ON_TARGET = "on_target"
    ALMOST = "almost"
    EXCEEDED = "exceeded"
    IN_PROGRESS = "in_progress"
    JUST_STARTED = "just_started"


class WeeklyTargetStatus(BaseModel):
    """Progress of one week's sessions against a weekly load target."""

    model_config = ConfigDict(frozen=True)

    week_start: date_type
    week_end: date_type
    total_load: int
    session_count: int
    avg_rpe: float
    progress_percent: int
    status: TargetProgressStatus
    load_change: int | None = None
    change_percent: int | None = None


class FormCategory(StrEnum):
    OVERREACHING = "overreaching"
    FATIGUED = "fatigued"
    BASELINE = "baseline"
    FRESH = "fresh"
    PEAKED = "peaked"


RecommendationType = Literal["intensity", "volume", "recovery", "warning"]
RecommendationPriority = Literal["high", "medium", "low"]


class Recommendation(BaseModel):
    """A coaching recommendation derived from ACWR and form."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Stable identifier (e.g. 'acwr_danger', 'form_very_low')")
    type: RecommendationType
    priority: RecommendationPriority
    title: str
    description: str


class IntensityRecommendation(BaseModel):
    """Suggested session intensity band for today."""

    model_config = ConfigDict(frozen=True)

    level: Literal["rest_recovery", "low", "medium", "medium_high"]
    percentage: str = Field(..., description="Suggested intensity range as a percentage of maximum")


class TrainingLoadDashboard(BaseModel):
    """Everything derived from one athlete's session list for a reference date."""

    reference_date: date_type
    daily_metrics: list[DisplayDailyMetric]
    acwr: AcwrSnapshot
    current: CurrentMetrics
    form_category: FormCategory
    recommendations: list[Recommendation]
    intensity: IntensityRecommendation
    acwr_trend: list[AcwrSnapshot]
    weekly_summaries: list[WeekSummary]
    weekly_load_trend: float
    weekly_load_stats: WeeklyLoadStats
    weekly_target_status: list[WeeklyTargetStatus] = Field(
        default_factory=list, description="Newest week first; empty when no weekly target is set"
    )
    daily_accumulation: list[DailyAccumulation]
    average_training_day_load: int


class TrainingLoadCreate(BaseModel):
    """Request body for logging a training session."""

    session_date: date_type
    duration_minutes: float = Field(..., gt=0)
    rpe: int = Field(..., ge=1, le=10)
    training_type: str = Field(default="general", min_length=1)
    notes: str | None = None
    athlete_id: str | None = None
    session_load: float | None = Field(default=None, ge=0, description="Manual load override in AU")


class TrainingLoadCreated(BaseModel):
    id: str
    session_load: float
