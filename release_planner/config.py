# release_planner/config.py

from typing import Optional
from pathlib import Path
import json
import logging
import sys

from pydantic import BaseModel, ConfigDict, Field, model_validator, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv
from pythonjsonlogger.json import JsonFormatter

load_dotenv()

# Custom JSON formatter that excludes null/None fields
class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter that only includes fields with non-None values."""

    def add_fields(self, log_record, record, message_dict):
        """Override to filter out None values before adding to JSON output."""
        super().add_fields(log_record, record, message_dict)

        log_record_copy = dict(log_record)
        for key, value in log_record_copy.items():
            if value is None:
                del log_record[key]

def setup_json_logging(log_level: int = logging.INFO) -> None:
    """Initialize JSON logging for the release_planner logger tree."""
    handler = logging.StreamHandler(sys.stdout)

    # JSON formatter with common fields used across the planner
    formatter = CustomJsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s "
        "%(item_id)s %(count)s %(total)s %(scored)s %(selected)s "
        "%(warning)s %(reason)s %(wsjf_score)s %(job_size)s "
        "%(capacity)s %(total_effort)s %(remaining)s %(cycles)s"
    )

    handler.setFormatter(formatter)

    root_logger = logging.getLogger("release_planner")
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers = []

    root_logger.addHandler(handler)
    root_logger.propagate = False


class ScoringWeights(BaseModel):
    """Multiplicative coefficients applied to the WSJF cost-of-delay terms."""
    model_config = ConfigDict(frozen=True)

    business_value: float = Field(default=0.35, ge=0)
    time_criticality: float = Field(default=0.25, ge=0)
    risk_reduction: float = Field(default=0.25, ge=0)


class PriorityThresholds(BaseModel):
    """WSJF score lower bounds for the URGENT/HIGH/MEDIUM tiers (below medium = LOW)."""
    model_config = ConfigDict(frozen=True)

    urgent: float = 8.0
    high: float = 5.0
    medium: float = 2.0

    @model_validator(mode="after")
    def _validate_order(self) -> "PriorityThresholds":
        if not (self.urgent >= self.high >= self.medium):
            raise ValueError(
                f"Priority thresholds must be non-increasing (urgent >= high >= medium), "
                f"got {self.urgent}/{self.high}/{self.medium}"
            )
        return self


class ScoringConfig(BaseModel):
    """Immutable scoring configuration held by the scoring service and optimizer."""
    model_config = ConfigDict(frozen=True)

    weights: ScoringWeights = Field(default_factory=ScoringWeights)
    thresholds: PriorityThresholds = Field(default_factory=PriorityThresholds)
    scoring_version: str = "1.0.0"

    # Blank dimensions are estimated from item text; the defaults below apply
    # only when estimation is switched off
    estimate_missing_dimensions: bool = True
    default_business_value: float = 5.0
    default_time_criticality: float = 3.0
    default_risk_reduction: float = 2.0
    default_job_size: float = 1.0


BASE_DIR = Path(__file__).resolve().parent.parent  # project root folder


class Settings(BaseSettings):
    # App
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # Scoring
    SCORING_VERSION: str = "1.0.0"
    WSJF_WEIGHTS: ScoringWeights = Field(default_factory=ScoringWeights)
    PRIORITY_THRESHOLDS: PriorityThresholds = Field(default_factory=PriorityThresholds)

    SCORING_DEFAULT_WSJF_BUSINESS_VALUE: float = 5.0
    SCORING_DEFAULT_WSJF_TIME_CRITICALITY: float = 3.0
    SCORING_DEFAULT_WSJF_RISK_REDUCTION: float = 2.0
    SCORING_DEFAULT_WSJF_JOB_SIZE: float = 1.0
    SCORING_ESTIMATE_MISSING_DIMENSIONS: bool = True

    # Optional JSON file with {"weights": {...}, "thresholds": {...}} overrides
    SCORING_CONFIG_FILE: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )

    @field_validator("SCORING_DEFAULT_WSJF_JOB_SIZE")
    @classmethod
    def validate_default_job_size(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("SCORING_DEFAULT_WSJF_JOB_SIZE must be > 0")
        return v

    @model_validator(mode="after")
    def load_scoring_config_from_file(self) -> "Settings":
        """
        If SCORING_CONFIG_FILE is set, read that JSON file and use it to
        override WSJF_WEIGHTS and/or PRIORITY_THRESHOLDS.
        """
        if self.SCORING_CONFIG_FILE:
            cfg_path = Path(self.SCORING_CONFIG_FILE)
            if not cfg_path.is_absolute():
                cfg_path = BASE_DIR / cfg_path

            if not cfg_path.exists():
                raise FileNotFoundError(
                    f"SCORING_CONFIG_FILE points to {cfg_path}, but it does not exist."
                )

            with cfg_path.open("r", encoding="utf-8") as f:
                raw = json.load(f)

            if not isinstance(raw, dict):
                raise ValueError(
                    "SCORING_CONFIG_FILE must contain a JSON object with 'weights' and/or 'thresholds'."
                )

            if "weights" in raw:
                self.WSJF_WEIGHTS = ScoringWeights.model_validate(raw["weights"])
            if "thresholds" in raw:
                self.PRIORITY_THRESHOLDS = PriorityThresholds.model_validate(raw["thresholds"])

        return self

    def scoring_config(self) -> ScoringConfig:
        return ScoringConfig(
            weights=self.WSJF_WEIGHTS,
            thresholds=self.PRIORITY_THRESHOLDS,
            scoring_version=self.SCORING_VERSION,
            estimate_missing_dimensions=self.SCORING_ESTIMATE_MISSING_DIMENSIONS,
            default_business_value=self.SCORING_DEFAULT_WSJF_BUSINESS_VALUE,
            default_time_criticality=self.SCORING_DEFAULT_WSJF_TIME_CRITICALITY,
            default_risk_reduction=self.SCORING_DEFAULT_WSJF_RISK_REDUCTION,
            default_job_size=self.SCORING_DEFAULT_WSJF_JOB_SIZE,
        )


settings = Settings()
