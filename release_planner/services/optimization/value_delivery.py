# release_planner/services/optimization/value_delivery.py

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from release_planner.config import ScoringWeights
from release_planner.schemas.recommendation import Recommendation
from release_planner.schemas.work_item import ScoredWorkItem
from release_planner.services.optimization.capacity_selector import apply_capacity_constraints
from release_planner.services.optimization.dependency_sequencer import (
    DependencyMap,
    apply_dependency_constraints,
)
from release_planner.services.optimization.prioritizer import prioritize
from release_planner.services.optimization.timing_optimizer import optimize_timing
from release_planner.services.recommendations import generate_recommendations
from release_planner.services.scoring.engines.wsjf import calculate_wsjf

logger = logging.getLogger("release_planner.services.optimization")


class ValueDeliveryOptimizer:
    """WSJF prioritization and value-delivery sequencing.

    Holds only the immutable weight configuration; every call takes its full
    input and returns new lists, so one instance can be shared freely.

    Pipeline (optimize_value_delivery):
    - cascading WSJF prioritization
    - dependency waves (only when a non-empty map is given)
    - greedy capacity prefix (only when capacity > 0 is given)
    - tier regrouping (URGENT -> LOW)
    """

    def __init__(self, weights: Optional[ScoringWeights] = None):
        self.weights = weights or ScoringWeights()
        logger.info("optimizer.init", extra={"weights": self.weights.model_dump()})

    def calculate_wsjf(
        self,
        business_value: float,
        time_criticality: float,
        risk_reduction: float,
        job_size: float,
    ) -> float:
        return calculate_wsjf(business_value, time_criticality, risk_reduction, job_size, self.weights)

    def prioritize(self, items: Sequence[ScoredWorkItem]) -> List[ScoredWorkItem]:
        return prioritize(items)

    def apply_dependency_constraints(
        self,
        items: Sequence[ScoredWorkItem],
        dependencies: Optional[DependencyMap],
    ) -> List[ScoredWorkItem]:
        return apply_dependency_constraints(items, dependencies)

    def apply_capacity_constraints(self, items: Sequence[ScoredWorkItem], capacity: float) -> List[ScoredWorkItem]:
        return apply_capacity_constraints(items, capacity)

    def optimize_timing(self, items: Sequence[ScoredWorkItem]) -> List[ScoredWorkItem]:
        return optimize_timing(items)

    def generate_recommendations(self, items: Sequence[ScoredWorkItem]) -> List[Recommendation]:
        return generate_recommendations(items)

    def optimize_value_delivery(
        self,
        items: Sequence[ScoredWorkItem],
        dependencies: Optional[DependencyMap] = None,
        capacity: Optional[float] = None,
    ) -> List[ScoredWorkItem]:
        logger.info(
            "optimizer.run.start",
            extra={
                "count": len(items),
                "has_dependencies": bool(dependencies),
                "capacity": capacity,
            },
        )

        optimized = prioritize(items)

        if dependencies:
            optimized = apply_dependency_constraints(optimized, dependencies)

        if capacity is not None and capacity > 0:
            optimized = apply_capacity_constraints(optimized, capacity)

        optimized = optimize_timing(optimized)

        logger.info("optimizer.run.done", extra={"count": len(optimized), "total": len(items)})
        return optimized


__all__ = ["ValueDeliveryOptimizer"]
