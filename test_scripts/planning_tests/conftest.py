# Shared fixtures for planning tests
from __future__ import annotations

from typing import Callable

import pytest

from release_planner.config import ScoringConfig, ScoringWeights
from release_planner.schemas.work_item import PriorityTier, ScoredWorkItem


@pytest.fixture
def unit_weights() -> ScoringWeights:
    return ScoringWeights(business_value=1, time_criticality=1, risk_reduction=1)


@pytest.fixture
def unit_config(unit_weights: ScoringWeights) -> ScoringConfig:
    return ScoringConfig(weights=unit_weights)


@pytest.fixture
def make_item() -> Callable[..., ScoredWorkItem]:
    """Build a ScoredWorkItem directly; score defaults to the unit-weight WSJF."""

    def _make(
        id: str,
        *,
        title: str = "",
        bv: float = 0.0,
        tc: float = 0.0,
        rr: float = 0.0,
        size: float = 1.0,
        score: float | None = None,
        tier: PriorityTier = PriorityTier.MEDIUM,
    ) -> ScoredWorkItem:
        if score is None:
            score = (bv + tc + rr) / size if size > 0 else 0.0
        return ScoredWorkItem(
            id=id,
            title=title or f"Item {id}",
            business_value=bv,
            time_criticality=tc,
            risk_reduction=rr,
            job_size=size,
            wsjf_score=score,
            recommended_priority=tier,
        )

    return _make
