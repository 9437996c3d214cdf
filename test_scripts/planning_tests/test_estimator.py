# Tests for keyword-based WSJF dimension estimates
from __future__ import annotations

import pytest

from release_planner.schemas.work_item import PriorityTier, WorkItem
from release_planner.services.scoring.estimator import (
    count_keywords,
    estimate_business_value,
    estimate_dimension,
    estimate_job_size,
    estimate_risk_reduction,
    estimate_time_criticality,
)


@pytest.fixture
def security_item() -> WorkItem:
    return WorkItem(
        id="S",
        title="Security upgrade for customer login",
        story_points=3,
        current_priority=PriorityTier.HIGH,
    )


def test_count_keywords_counts_each_keyword_once():
    assert count_keywords("customer customer user", ["customer", "user", "kpi"]) == 2


def test_business_value_estimate(security_item):
    est = estimate_business_value(security_item)
    assert est.components == {
        "user_impact": 45,  # customer
        "business_impact": 25,
        "technical_debt": 20,
        "strategic_value": 15,
        "points_boost": 6,
    }
    assert est.total_score == pytest.approx(22.2)


def test_time_criticality_estimate(security_item):
    est = estimate_time_criticality(security_item)
    assert est.components == {
        "market_window": 20,
        "customer_commitment": 40,  # customer
        "regulatory_deadline": 40,  # security
        "priority_boost": 45,  # HIGH -> (5 - 2) * 15
    }
    assert est.total_score == pytest.approx(36.25)


def test_time_criticality_without_priority_has_no_boost():
    est = estimate_time_criticality(WorkItem(id="N", title="Plain"))
    assert est.components["priority_boost"] == 0
    assert est.total_score == pytest.approx((20 + 15 + 10) / 4)


def test_risk_reduction_estimate(security_item):
    est = estimate_risk_reduction(security_item)
    assert est.components == {
        "security_risk": 40,
        "operational_risk": 20,
        "technical_risk": 40,  # upgrade
        "business_risk": 10,
    }
    assert est.total_score == pytest.approx(27.5)


def test_job_size_estimate_uses_description_keywords():
    item = WorkItem(
        id="M",
        title="Billing migration",
        description="Requires data migration after research",
        story_points=2,
    )
    est = estimate_job_size(item)
    assert est.components["complexity"] == pytest.approx(1.5)
    assert est.components["uncertainty"] == pytest.approx(1.7)
    assert est.components["dependencies"] == 2
    assert est.total_score == pytest.approx(2 * (1 + 0.1 + 0.14) + 1.0)


def test_job_size_defaults_to_one_story_point():
    assert estimate_job_size(WorkItem(id="P", title="Plain")).total_score == 1


def test_sub_scores_are_capped():
    text = "security vulnerability encryption authentication authorization"
    est = estimate_risk_reduction(WorkItem(id="C", title=text))
    assert est.components["security_risk"] == 100


def test_estimate_dimension_unknown_name():
    assert estimate_dimension(WorkItem(id="X", title="x"), "reach") is None
