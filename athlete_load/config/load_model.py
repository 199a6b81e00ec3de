"""Tunable parameters of the training load model.

All computations take a LoadModelConfig explicitly. Defaults reproduce the
canonical model:
- RPE -> base load for a 60-minute session (AU)
- Fitness (CTL) time constant: 42 days
- Fatigue (ATL) time constant: 7 days
- ACWR windows: 7-day acute, 28-day chronic
- ACWR risk thresholds: 0.8 / 1.3 / 1.5
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_RPE_BASE_LOADS: dict[int, float] = {
    1: 20.0,  # Very light
    2: 30.0,  # Light
    3: 40.0,  # Light-moderate
    4: 50.0,  # Moderate
    5: 60.0,  # Moderate
    6: 70.0,  # Moderate-hard
    7: 80.0,  # Hard
    8: 100.0,  # Very hard
    9: 120.0,  # Very very hard
    10: 140.0,  # Maximum
}

RPE_MIN = 1
RPE_MAX = 10

DEFAULT_WINDOW_DAYS = 60
DEFAULT_FITNESS_TAU_DAYS = 42.0
DEFAULT_FATIGUE_TAU_DAYS = 7.0
DEFAULT_ACUTE_WINDOW_DAYS = 7
DEFAULT_CHRONIC_WINDOW_DAYS = 28


class AcwrThresholds(BaseModel):
    """Boundaries between ACWR risk zones.

    Attributes:
        undertrained_below: ACWR strictly below this is undertrained
        optimal_max: ACWR up to and including this is optimal
        warning_max: ACWR up to and including this is warning, above is danger
    """

    model_config = ConfigDict(frozen=True)

    undertrained_below: float = Field(default=0.8, ge=0.0)
    optimal_max: float = Field(default=1.3, ge=0.0)
    warning_max: float = Field(default=1.5, ge=0.0)

    @model_validator(mode="after")
    def validate_ordering(self) -> AcwrThresholds:
        if not self.undertrained_below < self.optimal_max < self.warning_max:
            raise ValueError(
                "ACWR thresholds must be strictly increasing: "
                f"undertrained_below={self.undertrained_below}, optimal_max={self.optimal_max}, warning_max={self.warning_max}"
            )
        return self


class LoadModelConfig(BaseModel):
    """Immutable parameter set for the fitness/fatigue and ACWR computations.

    Attributes:
        window_days: N, the daily series covers [reference_date - N, reference_date]
        fitness_tau_days: Chronic (fitness) time constant
        fatigue_tau_days: Acute (fatigue) time constant
        rpe_base_loads: RPE 1-10 -> AU for a 60-minute session
        acwr_thresholds: Risk zone boundaries
        acute_window_days: Trailing days summed for acute load
        chronic_window_days: Trailing days summed for chronic load (expressed per week)
    """

    model_config = ConfigDict(frozen=True)

    window_days: int = Field(default=DEFAULT_WINDOW_DAYS, ge=0)
    fitness_tau_days: float = Field(default=DEFAULT_FITNESS_TAU_DAYS, gt=0.0)
    fatigue_tau_days: float = Field(default=DEFAULT_FATIGUE_TAU_DAYS, gt=0.0)
    rpe_base_loads: dict[int, float] = Field(default_factory=lambda: dict(DEFAULT_RPE_BASE_LOADS))
    acwr_thresholds: AcwrThresholds = Field(default_factory=AcwrThresholds)
    acute_window_days: int = Field(default=DEFAULT_ACUTE_WINDOW_DAYS, gt=0)
    chronic_window_days: int = Field(default=DEFAULT_CHRONIC_WINDOW_DAYS, gt=0)

    @field_validator("rpe_base_loads")
    @classmethod
    def validate_rpe_base_loads(cls, value: dict[int, float]) -> dict[int, float]:
        """Require one non-negative, non-decreasing entry per RPE 1-10."""
        expected = set(range(RPE_MIN, RPE_MAX + 1))
        if set(value) != expected:
            raise ValueError(f"rpe_base_loads must have exactly the keys {RPE_MIN}..{RPE_MAX}, got {sorted(value)}")
        previous = 0.0
        for rpe in sorted(value):
            base = value[rpe]
            if base < 0:
                raise ValueError(f"rpe_base_loads[{rpe}] must be non-negative, got {base}")
            if base < previous:
                raise ValueError(f"rpe_base_loads must be non-decreasing, rpe {rpe} has {base} < {previous}")
            previous = base
        return value

    @model_validator(mode="after")
    def validate_windows(self) -> LoadModelConfig:
        if self.acute_window_days > self.chronic_window_days:
            raise ValueError(
                f"acute_window_days ({self.acute_window_days}) cannot exceed chronic_window_days ({self.chronic_window_days})"
            )
        if self.chronic_window_days % 7 != 0:
            raise ValueError(f"chronic_window_days must be a whole number of weeks, got {self.chronic_window_days}")
        return self

    @property
    def chronic_weeks(self) -> int:
        return self.chronic_window_days // 7


DEFAULT_LOAD_MODEL_CONFIG = LoadModelConfig()
