# release_planner/services/scoring_service.py

from __future__ import annotations

from datetime import datetime, timezone
import logging
import time
from typing import Dict, List, Optional, Sequence

from pydantic import ValidationError

from release_planner.config import ScoringConfig, settings
from release_planner.schemas.scoring import (
    PriorityUpdate,
    ScoringFailure,
    ScoringResult,
    ScoringSummary,
)
from release_planner.schemas.work_item import PriorityTier, ScoredWorkItem, WorkItem
from release_planner.services.recommendations import generate_recommendations
from release_planner.services.scoring import (
    ScoreInputs,
    ScoringEngine,
    ScoringError,
    WsjfScoringEngine,
    map_score_to_tier,
    priority_score,
)
from release_planner.services.scoring.estimator import estimate_dimension

logger = logging.getLogger("release_planner.services.scoring")


class WorkItemScoringService:
    """Service layer for turning raw work items into scored value objects.

    Responsibilities:
    - Map WorkItem fields -> ScoreInputs (keyword estimates, then configured fallbacks)
    - Delegate to the WSJF engine
    - Map scores to priority tiers
    - Batch scoring with per-item error collection, priority update proposals
      and a summary
    """

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or settings.scoring_config()
        self.engine: ScoringEngine = WsjfScoringEngine(self.config.weights)

    def score_item(self, item: WorkItem) -> ScoredWorkItem:
        """Compute WSJF, priority score and tier for a single item."""
        inputs = self._build_score_inputs(item)
        result = self.engine.compute(inputs)

        for warn in result.warnings:
            logger.warning("scoring.warning", extra={"item_id": item.id, "warning": warn})

        wsjf = result.overall_score or 0.0
        try:
            scored = ScoredWorkItem(
                id=item.id,
                title=item.title,
                description=item.description,
                business_value=inputs.business_value,
                time_criticality=inputs.time_criticality,
                risk_reduction=inputs.risk_reduction,
                job_size=inputs.job_size,
                wsjf_score=wsjf,
                priority_score=priority_score(wsjf),
                recommended_priority=map_score_to_tier(wsjf, self.config.thresholds),
                current_priority=item.current_priority,
                scoring_version=self.config.scoring_version,
                scored_at=datetime.now(timezone.utc),
            )
        except ValidationError as e:
            raise ScoringError(f"Failed to score item: {e}", item_id=item.id, phase="individual-scoring") from e

        logger.debug(
            "scoring.computed",
            extra={
                "item_id": item.id,
                "wsjf_score": round(wsjf, 2),
                "recommended_priority": scored.recommended_priority.name,
            },
        )
        return scored

    def score_items(self, items: Sequence[WorkItem]) -> ScoringResult:
        """Score a batch; individual failures are collected, never raised."""
        start = time.perf_counter()
        logger.info("scoring.batch_start", extra={"total": len(items)})

        scored: List[ScoredWorkItem] = []
        failures: List[ScoringFailure] = []
        for item in items:
            try:
                scored.append(self.score_item(item))
            except ScoringError as e:
                failures.append(ScoringFailure(item_id=e.item_id, phase=e.phase, message=str(e)))
                logger.error("scoring.item_failed", extra={"item_id": item.id, "reason": str(e)})

        scored.sort(key=lambda s: s.wsjf_score, reverse=True)

        recommendations = generate_recommendations(scored)
        summary = ScoringSummary(
            total_items=len(scored),
            average_wsjf_score=(sum(s.wsjf_score for s in scored) / len(scored)) if scored else 0.0,
            high_priority_count=sum(1 for s in scored if s.recommended_priority <= PriorityTier.HIGH),
            recommendations_count=len(recommendations),
            error_count=len(failures),
        )
        elapsed_ms = (time.perf_counter() - start) * 1000

        logger.info(
            "scoring.batch_done",
            extra={
                "scored": summary.total_items,
                "total": len(items),
                "average_wsjf": round(summary.average_wsjf_score, 2),
                "high_priority": summary.high_priority_count,
                "elapsed_ms": round(elapsed_ms, 1),
            },
        )

        return ScoringResult(
            scored_items=scored,
            priority_updates=self.build_priority_updates(scored),
            recommendations=recommendations,
            errors=failures,
            summary=summary,
            processing_time_ms=elapsed_ms,
            timestamp=datetime.now(timezone.utc),
        )

    def build_priority_updates(self, scored: Sequence[ScoredWorkItem]) -> List[PriorityUpdate]:
        """One proposal per item; items without a current priority are treated as MEDIUM."""
        now = datetime.now(timezone.utc)
        return [
            PriorityUpdate(
                item_id=s.id,
                current_priority=s.current_priority or PriorityTier.MEDIUM,
                recommended_priority=s.recommended_priority,
                wsjf_score=s.wsjf_score,
                rationale=(
                    f"WSJF Score: {s.wsjf_score:.2f} (Business Value: {s.business_value:.1f}, "
                    f"Time Criticality: {s.time_criticality:.1f}, Risk Reduction: {s.risk_reduction:.1f}, "
                    f"Job Size: {s.job_size:.1f})"
                ),
                created_at=now,
            )
            for s in scored
        ]

    def _build_score_inputs(self, item: WorkItem) -> ScoreInputs:
        """Map WorkItem fields to ScoreInputs.

        Blank dimensions are estimated from the item text and story points;
        with estimation switched off they fall back to config defaults.
        """
        cfg = self.config
        defaults = {
            "business_value": cfg.default_business_value,
            "time_criticality": cfg.default_time_criticality,
            "risk_reduction": cfg.default_risk_reduction,
            "job_size": cfg.default_job_size,
        }
        values: Dict[str, float] = {}
        for dimension, default in defaults.items():
            given = getattr(item, dimension)
            if given is not None:
                values[dimension] = given
                continue
            estimate = estimate_dimension(item, dimension) if cfg.estimate_missing_dimensions else None
            values[dimension] = estimate.total_score if estimate is not None else default
            logger.debug(
                "scoring.dimension_filled",
                extra={"item_id": item.id, "dimension": dimension, "value": values[dimension],
                       "estimated": estimate is not None},
            )
        return ScoreInputs(**values)


__all__ = ["WorkItemScoringService"]
