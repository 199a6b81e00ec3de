import os
from pathlib import Path

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from athlete_load.config.load_model import (
    DEFAULT_FATIGUE_TAU_DAYS,
    DEFAULT_FITNESS_TAU_DAYS,
    DEFAULT_WINDOW_DAYS,
    AcwrThresholds,
    LoadModelConfig,
)


def get_database_url() -> str:
    """Get database URL, using absolute path for SQLite to avoid path resolution issues."""
    db_url = os.getenv("DATABASE_URL", "")
    if db_url:
        logger.info(f"Using DATABASE_URL from environment: {db_url}")
        return db_url

    # Use absolute path for SQLite (LOCAL DEVELOPMENT ONLY)
    db_path = Path(__file__).parent.parent.parent / "athlete_load.db"
    abs_path = db_path.resolve()
    db_url = f"sqlite:///{abs_path}"
    logger.info(f"Using default database path: {db_url}")
    return db_url


class Settings(BaseSettings):
    database_url: str = Field(
        default_factory=get_database_url,
        validation_alias="DATABASE_URL",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="LOG_FILE")

    load_window_days: int = Field(
        default=DEFAULT_WINDOW_DAYS,
        ge=0,
        validation_alias="LOAD_WINDOW_DAYS",
        description="Days of history in the daily fitness/fatigue series (window is N+1 days inclusive)",
    )
    fitness_tau_days: float = Field(
        default=DEFAULT_FITNESS_TAU_DAYS,
        gt=0.0,
        validation_alias="FITNESS_TAU_DAYS",
        description="Chronic training load (fitness) time constant in days",
    )
    fatigue_tau_days: float = Field(
        default=DEFAULT_FATIGUE_TAU_DAYS,
        gt=0.0,
        validation_alias="FATIGUE_TAU_DAYS",
        description="Acute training load (fatigue) time constant in days",
    )
    acwr_undertrained_below: float = Field(default=0.8, ge=0.0, validation_alias="ACWR_UNDERTRAINED_BELOW")
    acwr_optimal_max: float = Field(default=1.3, ge=0.0, validation_alias="ACWR_OPTIMAL_MAX")
    acwr_warning_max: float = Field(default=1.5, ge=0.0, validation_alias="ACWR_WARNING_MAX")
    weekly_load_target: float = Field(
        default=500.0,
        ge=0.0,
        validation_alias="WEEKLY_LOAD_TARGET",
        description="Default weekly load target (AU) for weekly summaries",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    def load_model_config(self) -> LoadModelConfig:
        """Build the load model parameters from environment settings.

        Raises:
            pydantic.ValidationError: If the thresholds are not strictly increasing
        """
        return LoadModelConfig(
            window_days=self.load_window_days,
            fitness_tau_days=self.fitness_tau_days,
            fatigue_tau_days=self.fatigue_tau_days,
            acwr_thresholds=AcwrThresholds(
                undertrained_below=self.acwr_undertrained_below,
                optimal_max=self.acwr_optimal_max,
                warning_max=self.acwr_warning_max,
            ),
        )


settings = Settings()
