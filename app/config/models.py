"""Configuration schema models using Pydantic."""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class ScoringConfig(BaseModel):
    """Heuristic weights for skill signal scoring.

    The defaults reproduce the established scoring: +2 for a shared unigram,
    +1 reinforcement when a resume phrase appears on the job side, -3 for
    stop terms, and a keep-threshold of 2.
    """

    base_match_points: int = Field(2, ge=0, description="Points for a shared unigram")
    phrase_bonus_points: int = Field(
        1, ge=0, description="Points added to a matched word inside a shared phrase"
    )
    stop_term_penalty: int = Field(3, ge=0, description="Points removed from stop terms")
    min_score: int = Field(2, description="Minimum final score for a skill to be reported")
    resume_phrase_sizes: List[int] = Field(
        default_factory=lambda: [2, 3],
        description="N-gram sizes extracted from the resume for reinforcement",
    )
    job_phrase_sizes: List[int] = Field(
        default_factory=lambda: [1],
        description="N-gram sizes extracted from the job description for reinforcement",
    )
    extra_stop_terms: List[str] = Field(
        default_factory=list,
        description="Terms penalized in addition to the built-in stop terms",
    )

    @field_validator("resume_phrase_sizes", "job_phrase_sizes")
    @classmethod
    def validate_sizes(cls, v: List[int]) -> List[int]:
        """Require positive sizes and drop duplicates (order preserved)."""
        sizes = []
        for size in v:
            if size < 1:
                raise ValueError(f"N-gram sizes must be positive integers, got: {size}")
            if size not in sizes:
                sizes.append(size)
        if not sizes:
            raise ValueError("At least one n-gram size is required")
        return sizes

    @field_validator("extra_stop_terms")
    @classmethod
    def normalize_terms(cls, v: List[str]) -> List[str]:
        """Normalize terms: strip whitespace, convert to lowercase, remove empty strings."""
        normalized = []
        for term in v:
            stripped = term.strip().lower()
            if stripped and stripped not in normalized:
                normalized.append(stripped)
        return normalized

    model_config = {"extra": "forbid"}


class ReportConfig(BaseModel):
    """Match report settings."""

    # Off by default: job filler words ("looking", "skills") count as missing, so
    # a resume covering every real skill can still score well below 100%. Set
    # exclude_stop_terms: true to rate against the job's skill terms only.
    exclude_stop_terms: bool = Field(
        False,
        description="Drop stop terms from the job vocabulary used for missing skills and rate",
    )

    model_config = {"extra": "forbid"}


class ReminderConfig(BaseModel):
    """Interview reminder settings."""

    window_hours: int = Field(
        24, ge=1, le=168, description="Show a reminder for interviews starting within this window"
    )

    model_config = {"extra": "forbid"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True, "validate_default": True, "extra": "forbid"}


class AppConfig(BaseModel):
    """Root configuration object for CareerPath."""

    scoring: ScoringConfig = Field(default_factory=ScoringConfig, description="Scoring weights")
    report: ReportConfig = Field(default_factory=ReportConfig, description="Report settings")
    reminders: ReminderConfig = Field(
        default_factory=ReminderConfig, description="Interview reminder settings"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    model_config = {"extra": "forbid"}
