# release_planner/services/optimization/prioritizer.py
"""
Cascading WSJF comparator.

Each level only decides when the previous one differs by more than its
tolerance band, so near-equal scores fall through to the tie-breakers:

1. WSJF score, descending (|diff| > 0.1)
2. Business value, descending (|diff| > 5)
3. Job size, ascending (|diff| > 1)
4. Time criticality, descending (always decisive)
"""
from __future__ import annotations

import functools
import logging
from typing import List, Sequence

from release_planner.schemas.work_item import ScoredWorkItem

logger = logging.getLogger("release_planner.services.optimization.prioritizer")

SCORE_TOLERANCE = 0.1
BUSINESS_VALUE_TOLERANCE = 5
JOB_SIZE_TOLERANCE = 1


def compare_items(a: ScoredWorkItem, b: ScoredWorkItem) -> float:
    """Comparator for sorted(); negative means `a` goes first."""
    if abs(a.wsjf_score - b.wsjf_score) > SCORE_TOLERANCE:
        return b.wsjf_score - a.wsjf_score

    if abs(a.business_value - b.business_value) > BUSINESS_VALUE_TOLERANCE:
        return b.business_value - a.business_value

    if abs(a.job_size - b.job_size) > JOB_SIZE_TOLERANCE:
        return a.job_size - b.job_size

    return b.time_criticality - a.time_criticality


def prioritize(items: Sequence[ScoredWorkItem]) -> List[ScoredWorkItem]:
    """Return a new list ordered best-first; equal items keep input order."""
    logger.info("wsjf.prioritize.start", extra={"count": len(items)})

    ordered = sorted(items, key=functools.cmp_to_key(compare_items))

    if ordered:
        logger.info(
            "wsjf.prioritize.done",
            extra={
                "count": len(ordered),
                "top_item": ordered[0].id,
                "top_wsjf": round(ordered[0].wsjf_score, 2),
                "bottom_item": ordered[-1].id,
                "bottom_wsjf": round(ordered[-1].wsjf_score, 2),
            },
        )
    return ordered


__all__ = [
    "SCORE_TOLERANCE",
    "BUSINESS_VALUE_TOLERANCE",
    "JOB_SIZE_TOLERANCE",
    "compare_items",
    "prioritize",
]
