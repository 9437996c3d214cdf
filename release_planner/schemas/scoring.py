# release_planner/schemas/scoring.py

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from release_planner.schemas.recommendation import Recommendation
from release_planner.schemas.work_item import PriorityTier, ScoredWorkItem


class PriorityUpdate(BaseModel):
    """Proposed tracker priority change for one item."""
    item_id: str
    current_priority: PriorityTier
    recommended_priority: PriorityTier
    wsjf_score: float
    rationale: str
    created_at: datetime

    @property
    def changed(self) -> bool:
        return self.current_priority != self.recommended_priority


class ScoringFailure(BaseModel):
    item_id: Optional[str] = None
    phase: Optional[str] = None
    message: str


class ScoringSummary(BaseModel):
    total_items: int = 0
    average_wsjf_score: float = 0.0
    high_priority_count: int = 0
    recommendations_count: int = 0
    error_count: int = 0


class ScoringResult(BaseModel):
    scored_items: List[ScoredWorkItem] = Field(default_factory=list)
    priority_updates: List[PriorityUpdate] = Field(default_factory=list)
    recommendations: List[Recommendation] = Field(default_factory=list)
    errors: List[ScoringFailure] = Field(default_factory=list)
    summary: ScoringSummary = Field(default_factory=ScoringSummary)
    processing_time_ms: float = 0.0
    timestamp: datetime


__all__ = [
    "PriorityUpdate",
    "ScoringFailure",
    "ScoringSummary",
    "ScoringResult",
]
