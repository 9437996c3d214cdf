# release_planner/services/scoring/tiers.py

from __future__ import annotations

from release_planner.config import PriorityThresholds
from release_planner.schemas.work_item import PriorityTier


def map_score_to_tier(wsjf_score: float, thresholds: PriorityThresholds) -> PriorityTier:
    """Map a WSJF score onto a tracker priority tier (lower bounds inclusive)."""
    if wsjf_score >= thresholds.urgent:
        return PriorityTier.URGENT
    if wsjf_score >= thresholds.high:
        return PriorityTier.HIGH
    if wsjf_score >= thresholds.medium:
        return PriorityTier.MEDIUM
    return PriorityTier.LOW


def priority_score(wsjf_score: float) -> float:
    """0-100 display scale: WSJF * 10, clamped."""
    return max(0.0, min(100.0, wsjf_score * 10))


__all__ = ["map_score_to_tier", "priority_score"]
