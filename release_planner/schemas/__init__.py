from .work_item import PriorityTier, WorkItem, ScoredWorkItem
from .recommendation import RecommendationType, Recommendation
from .scoring import PriorityUpdate, ScoringFailure, ScoringSummary, ScoringResult

__all__ = [
	"PriorityTier",
	"WorkItem",
	"ScoredWorkItem",
	"RecommendationType",
	"Recommendation",
	"PriorityUpdate",
	"ScoringFailure",
	"ScoringSummary",
	"ScoringResult",
]
