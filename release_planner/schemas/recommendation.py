# release_planner/schemas/recommendation.py

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class RecommendationType(str, Enum):
    PRIORITIZE = "PRIORITIZE"
    SPLIT = "SPLIT"
    DELAY = "DELAY"
    COMBINE = "COMBINE"


class Recommendation(BaseModel):
    """A single value-delivery improvement suggestion.

    Purely derived from the scored set; holds item ids only.
    """
    model_config = ConfigDict(frozen=True)

    recommendation_type: RecommendationType
    affected_items: List[str] = Field(default_factory=list)
    rationale: str
    expected_impact: str
    confidence: float = Field(..., ge=0.0, le=1.0)


__all__ = ["RecommendationType", "Recommendation"]
