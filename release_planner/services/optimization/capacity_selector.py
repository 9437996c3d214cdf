# release_planner/services/optimization/capacity_selector.py
"""
Greedy first-fit-in-order capacity selection.

Walks the ordered list and keeps items while the cumulative job size stays
within capacity. Selection stops at the first item that would overflow, so
the output is always a prefix of the input; no later item is pulled in to
fill slack.
"""
from __future__ import annotations

import logging
from typing import List, Sequence

from release_planner.schemas.work_item import ScoredWorkItem

logger = logging.getLogger("release_planner.services.optimization.capacity")


def apply_capacity_constraints(items: Sequence[ScoredWorkItem], capacity: float) -> List[ScoredWorkItem]:
    if capacity <= 0:
        raise ValueError(f"capacity must be > 0, got {capacity}")

    logger.debug("capacity.apply.start", extra={"capacity": capacity, "count": len(items)})

    total_effort = 0.0
    selected: List[ScoredWorkItem] = []
    for item in items:
        if total_effort + item.job_size > capacity:
            logger.debug(
                "capacity.exhausted",
                extra={
                    "item_id": item.id,
                    "job_size": item.job_size,
                    "remaining": capacity - total_effort,
                },
            )
            break
        selected.append(item)
        total_effort += item.job_size

    logger.info(
        "capacity.apply.done",
        extra={
            "selected": len(selected),
            "total": len(items),
            "total_effort": total_effort,
            "capacity": capacity,
            "utilization_pct": round(total_effort / capacity * 100, 1),
        },
    )
    return selected


__all__ = ["apply_capacity_constraints"]
