from .interfaces import (
    ScoringFramework,
    ScoreInputs,
    ScoreResult,
    ScoringEngine,
    ScoringError,
)
from .engines import WsjfScoringEngine, calculate_wsjf
from .tiers import map_score_to_tier, priority_score

__all__ = [
    "ScoringFramework",
    "ScoreInputs",
    "ScoreResult",
    "ScoringEngine",
    "ScoringError",
    "WsjfScoringEngine",
    "calculate_wsjf",
    "map_score_to_tier",
    "priority_score",
]
