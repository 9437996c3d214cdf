"""Planning Job

Encapsulates the score -> optimize -> recommend run so that the CLI and
other orchestrators can invoke it without depending on service details.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Sequence

from pydantic import BaseModel, Field

from release_planner.config import ScoringConfig
from release_planner.schemas.recommendation import Recommendation
from release_planner.schemas.scoring import PriorityUpdate, ScoringFailure, ScoringSummary
from release_planner.schemas.work_item import ScoredWorkItem, WorkItem
from release_planner.services.optimization import ValueDeliveryOptimizer
from release_planner.services.scoring_service import WorkItemScoringService

logger = logging.getLogger(__name__)


class PlanningRunResult(BaseModel):
    sequence: List[ScoredWorkItem] = Field(default_factory=list)
    deferred: List[str] = Field(default_factory=list)  # scored but cut by capacity
    total_effort: float = 0.0
    priority_updates: List[PriorityUpdate] = Field(default_factory=list)
    recommendations: List[Recommendation] = Field(default_factory=list)
    errors: List[ScoringFailure] = Field(default_factory=list)
    summary: ScoringSummary = Field(default_factory=ScoringSummary)


def run_planning(
    items: Sequence[WorkItem],
    *,
    dependencies: Optional[Mapping[str, Sequence[str]]] = None,
    capacity: Optional[float] = None,
    config: Optional[ScoringConfig] = None,
) -> PlanningRunResult:
    """Score raw work items and produce the optimized delivery sequence.

    Args:
        items: raw work items (blank dimensions use configured defaults)
        dependencies: item id -> ids it depends on (cycles tolerated)
        capacity: effort budget for the period; None or <= 0 disables the cut
        config: scoring config override (None -> settings)

    Returns:
        PlanningRunResult with sequence, deferred ids, proposals and summary.
    """
    logger.info("planning.start", extra={"total": len(items), "capacity": capacity})

    scoring = WorkItemScoringService(config)
    scored = scoring.score_items(items)

    optimizer = ValueDeliveryOptimizer(scoring.config.weights)
    sequence = optimizer.optimize_value_delivery(
        scored.scored_items,
        dependencies=dependencies,
        capacity=capacity,
    )

    selected_ids = {s.id for s in sequence}
    deferred = [s.id for s in scored.scored_items if s.id not in selected_ids]
    result = PlanningRunResult(
        sequence=sequence,
        deferred=deferred,
        total_effort=sum(s.job_size for s in sequence),
        priority_updates=scored.priority_updates,
        recommendations=scored.recommendations,
        errors=scored.errors,
        summary=scored.summary,
    )
    logger.info(
        "planning.done",
        extra={"selected": len(sequence), "total": len(items), "total_effort": result.total_effort},
    )
    return result


def summarize(result: PlanningRunResult) -> Dict[str, object]:
    """Compact, JSON-friendly view of a run for CLI output."""
    return {
        "sequence": [
            {
                "id": s.id,
                "title": s.title,
                "wsjf_score": round(s.wsjf_score, 2),
                "priority": s.recommended_priority.name,
                "job_size": s.job_size,
            }
            for s in result.sequence
        ],
        "deferred": result.deferred,
        "total_effort": result.total_effort,
        "priority_changes": [
            {"id": u.item_id, "from": u.current_priority.name, "to": u.recommended_priority.name}
            for u in result.priority_updates
            if u.changed
        ],
        "recommendations": [r.model_dump(mode="json") for r in result.recommendations],
        "errors": [e.model_dump() for e in result.errors],
        "summary": result.summary.model_dump(),
    }


__all__ = ["PlanningRunResult", "run_planning", "summarize"]
