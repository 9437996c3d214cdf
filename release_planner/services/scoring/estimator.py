# release_planner/services/scoring/estimator.py
"""
Keyword heuristics for WSJF dimensions a work item leaves blank.

Business value, time criticality and risk reduction are 0-100 scores built
from keyword hits in the title + description. Each sub-score is
`base + hits * step`, capped at 100. Job size is story points scaled by
complexity and uncertainty hits, plus half a point per dependency hint.
A keyword counts once no matter how often it appears (substring match).
"""
from __future__ import annotations

from typing import Dict, Optional, Sequence

from pydantic import BaseModel, Field

from release_planner.schemas.work_item import WorkItem

USER_KEYWORDS = ["user", "customer", "interface", "ui", "ux", "experience", "usability"]
BUSINESS_KEYWORDS = ["revenue", "cost", "efficiency", "automation", "process", "kpi", "metric"]
TECH_DEBT_KEYWORDS = ["refactor", "cleanup", "optimize", "performance", "maintainability", "debt"]
STRATEGIC_KEYWORDS = ["strategic", "vision", "roadmap", "competitive", "innovation", "growth"]

MARKET_KEYWORDS = ["deadline", "launch", "release", "market", "competitive", "window"]
COMMITMENT_KEYWORDS = ["customer", "commitment", "promised", "demo", "presentation", "milestone"]
REGULATORY_KEYWORDS = ["compliance", "regulatory", "legal", "audit", "security", "gdpr", "hipaa"]

SECURITY_KEYWORDS = ["security", "vulnerability", "encryption", "authentication", "authorization"]
OPERATIONAL_KEYWORDS = ["reliability", "availability", "monitoring", "alerting", "backup", "recovery"]
TECHNICAL_KEYWORDS = ["stability", "performance", "scalability", "maintenance", "upgrade"]
BUSINESS_RISK_KEYWORDS = ["risk", "compliance", "continuity", "disaster", "contingency"]

COMPLEXITY_KEYWORDS = ["complex", "integration", "migration", "algorithm", "optimization"]
UNCERTAINTY_KEYWORDS = ["research", "investigate", "explore", "unknown", "unclear", "tbd"]
DEPENDENCY_KEYWORDS = ["depends", "requires", "needs", "after", "prerequisite"]


class DimensionEstimate(BaseModel):
    total_score: float
    components: Dict[str, float] = Field(default_factory=dict)


def _content(item: WorkItem) -> str:
    return f"{item.title} {item.description or ''}".lower()


def count_keywords(content: str, keywords: Sequence[str]) -> int:
    return sum(1 for k in keywords if k in content)


def _sub_score(content: str, keywords: Sequence[str], base: float, step: float) -> float:
    return min(100.0, base + count_keywords(content, keywords) * step)


def estimate_business_value(item: WorkItem) -> DimensionEstimate:
    content = _content(item)
    components = {
        "user_impact": _sub_score(content, USER_KEYWORDS, 30, 15),
        "business_impact": _sub_score(content, BUSINESS_KEYWORDS, 25, 20),
        "technical_debt": _sub_score(content, TECH_DEBT_KEYWORDS, 20, 15),
        "strategic_value": _sub_score(content, STRATEGIC_KEYWORDS, 15, 25),
        # larger items tend to carry more value
        "points_boost": min(20.0, (item.story_points or 0) * 2),
    }
    return DimensionEstimate(total_score=min(100.0, sum(components.values()) / 5), components=components)


def estimate_time_criticality(item: WorkItem) -> DimensionEstimate:
    content = _content(item)
    priority = int(item.current_priority) if item.current_priority else 0
    components = {
        "market_window": _sub_score(content, MARKET_KEYWORDS, 20, 20),
        "customer_commitment": _sub_score(content, COMMITMENT_KEYWORDS, 15, 25),
        "regulatory_deadline": _sub_score(content, REGULATORY_KEYWORDS, 10, 30),
        "priority_boost": max(0.0, (5 - priority) * 15.0) if priority else 0.0,
    }
    return DimensionEstimate(total_score=min(100.0, sum(components.values()) / 4), components=components)


def estimate_risk_reduction(item: WorkItem) -> DimensionEstimate:
    content = _content(item)
    components = {
        "security_risk": _sub_score(content, SECURITY_KEYWORDS, 15, 25),
        "operational_risk": _sub_score(content, OPERATIONAL_KEYWORDS, 20, 20),
        "technical_risk": _sub_score(content, TECHNICAL_KEYWORDS, 25, 15),
        "business_risk": _sub_score(content, BUSINESS_RISK_KEYWORDS, 10, 30),
    }
    return DimensionEstimate(total_score=min(100.0, sum(components.values()) / 4), components=components)


def estimate_job_size(item: WorkItem) -> DimensionEstimate:
    content = _content(item)
    story_points = item.story_points or 1
    complexity = min(5.0, 1 + count_keywords(content, COMPLEXITY_KEYWORDS) * 0.5)
    uncertainty = min(5.0, 1 + count_keywords(content, UNCERTAINTY_KEYWORDS) * 0.7)
    dependencies = count_keywords(content, DEPENDENCY_KEYWORDS)

    total = story_points * (1 + (complexity - 1) * 0.2 + (uncertainty - 1) * 0.2) + dependencies * 0.5
    return DimensionEstimate(
        total_score=total,
        components={
            "story_points": story_points,
            "complexity": complexity,
            "uncertainty": uncertainty,
            "dependencies": dependencies,
        },
    )


def estimate_dimension(item: WorkItem, dimension: str) -> Optional[DimensionEstimate]:
    estimator = _ESTIMATORS.get(dimension)
    return estimator(item) if estimator else None


_ESTIMATORS = {
    "business_value": estimate_business_value,
    "time_criticality": estimate_time_criticality,
    "risk_reduction": estimate_risk_reduction,
    "job_size": estimate_job_size,
}


__all__ = [
    "DimensionEstimate",
    "count_keywords",
    "estimate_business_value",
    "estimate_time_criticality",
    "estimate_risk_reduction",
    "estimate_job_size",
    "estimate_dimension",
]
