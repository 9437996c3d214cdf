# release_planner/schemas/work_item.py

from __future__ import annotations

from datetime import datetime
from enum import IntEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PriorityTier(IntEnum):
    """Tracker priority levels (1 is highest)."""
    URGENT = 1
    HIGH = 2
    MEDIUM = 3
    LOW = 4


class WorkItem(BaseModel):
    """Raw candidate work item as handed over by the tracker integration.

    Any WSJF dimension left as None is estimated from the title, description
    and story points (or taken from the configured defaults when estimation
    is switched off).
    """
    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    title: str
    description: Optional[str] = None
    current_priority: Optional[PriorityTier] = None
    story_points: Optional[float] = Field(default=None, ge=0)

    business_value: Optional[float] = None
    time_criticality: Optional[float] = None
    risk_reduction: Optional[float] = None
    job_size: Optional[float] = None


class ScoredWorkItem(BaseModel):
    """Immutable scored work item.

    Ordering operations return new lists that reference the same instances;
    no field is ever edited after scoring.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(..., min_length=1)
    title: str
    description: Optional[str] = None

    business_value: float
    time_criticality: float
    risk_reduction: float
    job_size: float

    wsjf_score: float
    recommended_priority: PriorityTier

    priority_score: Optional[float] = None  # 0-100 scale
    current_priority: Optional[PriorityTier] = None
    scoring_version: Optional[str] = None
    scored_at: Optional[datetime] = None

    @property
    def estimated_effort(self) -> float:
        return self.job_size


__all__ = ["PriorityTier", "WorkItem", "ScoredWorkItem"]
