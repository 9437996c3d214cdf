# release_planner/services/recommendations/synthesizer.py
"""
Threshold-driven value-delivery recommendations.

Rules are evaluated independently over the scored set (an item can match
several). Each rule with at least one match yields exactly one
Recommendation naming every matched item.
"""
from __future__ import annotations

import logging
from typing import List, Sequence

from release_planner.schemas.recommendation import Recommendation, RecommendationType
from release_planner.schemas.work_item import ScoredWorkItem
from release_planner.services.recommendations.similarity import group_similar_items

logger = logging.getLogger("release_planner.services.recommendations")

QUICK_WIN_MIN_SCORE = 6
QUICK_WIN_MAX_SIZE = 3
SPLIT_MIN_SCORE = 5
SPLIT_MIN_SIZE = 8
DELAY_MAX_SCORE = 2
DELAY_MIN_SIZE = 5
COMBINE_MAX_SIZE = 2
COMBINE_SIMILARITY_THRESHOLD = 0.7


def generate_recommendations(items: Sequence[ScoredWorkItem]) -> List[Recommendation]:
    recommendations: List[Recommendation] = []

    # Quick wins: high value, low effort
    quick_wins = [i for i in items if i.wsjf_score > QUICK_WIN_MIN_SCORE and i.job_size <= QUICK_WIN_MAX_SIZE]
    if quick_wins:
        recommendations.append(
            Recommendation(
                recommendation_type=RecommendationType.PRIORITIZE,
                affected_items=[i.id for i in quick_wins],
                rationale=(
                    f"Found {len(quick_wins)} quick wins with high WSJF scores "
                    f"(>{QUICK_WIN_MIN_SCORE}) and low job size (<={QUICK_WIN_MAX_SIZE})"
                ),
                expected_impact="Quick delivery of high business value with minimal effort",
                confidence=0.9,
            )
        )

    large_valuable = [i for i in items if i.wsjf_score > SPLIT_MIN_SCORE and i.job_size > SPLIT_MIN_SIZE]
    if large_valuable:
        recommendations.append(
            Recommendation(
                recommendation_type=RecommendationType.SPLIT,
                affected_items=[i.id for i in large_valuable],
                rationale=(
                    f"Found {len(large_valuable)} high-value items (WSJF >{SPLIT_MIN_SCORE}) with large "
                    f"job size (>{SPLIT_MIN_SIZE}) that could benefit from decomposition"
                ),
                expected_impact="Earlier and more frequent value delivery through incremental implementation",
                confidence=0.7,
            )
        )

    low_value_high_effort = [i for i in items if i.wsjf_score < DELAY_MAX_SCORE and i.job_size > DELAY_MIN_SIZE]
    if low_value_high_effort:
        recommendations.append(
            Recommendation(
                recommendation_type=RecommendationType.DELAY,
                affected_items=[i.id for i in low_value_high_effort],
                rationale=(
                    f"Found {len(low_value_high_effort)} items with low WSJF scores (<{DELAY_MAX_SCORE}) "
                    f"and high effort (>{DELAY_MIN_SIZE}) that may not provide optimal value"
                ),
                expected_impact="Focus team capacity on higher-value work",
                confidence=0.6,
            )
        )

    small_items = [i for i in items if i.job_size <= COMBINE_MAX_SIZE]
    groups = group_similar_items(small_items, COMBINE_SIMILARITY_THRESHOLD)
    combined = [i for group in groups for i in group]
    if combined:
        recommendations.append(
            Recommendation(
                recommendation_type=RecommendationType.COMBINE,
                affected_items=[i.id for i in combined],
                rationale=(
                    f"Found {len(combined)} small (job size <={COMBINE_MAX_SIZE}), related items in "
                    f"{len(groups)} group(s) with title similarity >={COMBINE_SIMILARITY_THRESHOLD} "
                    f"that could be combined for efficiency"
                ),
                expected_impact="Reduced overhead and improved implementation efficiency",
                confidence=0.5,
            )
        )

    logger.info(
        "recommendations.generated",
        extra={
            "count": len(recommendations),
            "types": [r.recommendation_type.value for r in recommendations],
        },
    )
    return recommendations


__all__ = [
    "QUICK_WIN_MIN_SCORE",
    "QUICK_WIN_MAX_SIZE",
    "SPLIT_MIN_SCORE",
    "SPLIT_MIN_SIZE",
    "DELAY_MAX_SCORE",
    "DELAY_MIN_SIZE",
    "COMBINE_MAX_SIZE",
    "COMBINE_SIMILARITY_THRESHOLD",
    "generate_recommendations",
]
