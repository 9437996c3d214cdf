# release_planner/services/optimization/timing_optimizer.py

from __future__ import annotations

from typing import Dict, List, Sequence

from release_planner.schemas.work_item import PriorityTier, ScoredWorkItem


def optimize_timing(items: Sequence[ScoredWorkItem]) -> List[ScoredWorkItem]:
    """Regroup items by recommended tier (URGENT..LOW), WSJF descending within a tier.

    Cross-tier order is always tier rank; the incoming order only survives
    between items of the same tier and equal score.
    """
    tiers: Dict[PriorityTier, List[ScoredWorkItem]] = {tier: [] for tier in PriorityTier}
    for item in items:
        tiers[item.recommended_priority].append(item)

    result: List[ScoredWorkItem] = []
    for tier in sorted(tiers):
        result.extend(sorted(tiers[tier], key=lambda i: i.wsjf_score, reverse=True))
    return result


__all__ = ["optimize_timing"]
