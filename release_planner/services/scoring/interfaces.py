# release_planner/services/scoring/interfaces.py

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Protocol

from pydantic import BaseModel, Field


class ScoringFramework(str, Enum):
    """Supported scoring framework identifiers."""
    WSJF = "WSJF"


class ScoreInputs(BaseModel):
    """Normalized numeric WSJF inputs.

    Defaults for missing values are applied by the scoring service before an
    engine sees the inputs.
    """
    business_value: float = 0.0
    time_criticality: float = 0.0
    risk_reduction: float = 0.0
    job_size: float = 0.0


class ScoreResult(BaseModel):
    """Result returned by a scoring engine.

    value_score: weighted cost of delay
    effort_score: job size
    overall_score: the WSJF score (sortable)
    components: raw components used to derive scores (for audit / transparency)
    warnings: non-fatal computation notes (e.g., division by zero guarded)
    """
    value_score: Optional[float] = None
    effort_score: Optional[float] = None
    overall_score: Optional[float] = None

    components: Dict[str, Any] = Field(default_factory=dict)
    warnings: List[str] = Field(default_factory=list)


class ScoringEngine(Protocol):
    """Protocol that all scoring engines must satisfy."""

    framework: ScoringFramework

    def compute(self, inputs: ScoreInputs) -> ScoreResult:  # pragma: no cover - interface only
        ...


class ScoringError(Exception):
    """Raised when a single work item cannot be scored."""

    def __init__(self, message: str, item_id: Optional[str] = None, phase: Optional[str] = None):
        super().__init__(message)
        self.item_id = item_id
        self.phase = phase


__all__ = [
    "ScoringFramework",
    "ScoreInputs",
    "ScoreResult",
    "ScoringEngine",
    "ScoringError",
]
