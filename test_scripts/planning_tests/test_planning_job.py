# Tests for the planning job and CLI input loading
from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from release_planner.jobs.planning_job import run_planning, summarize
from release_planner.schemas.work_item import WorkItem
from test_scripts.planning_cli import load_input


def _backlog():
    return [
        WorkItem(id="A", title="Alpha", business_value=10, time_criticality=10, risk_reduction=0, job_size=4),
        WorkItem(id="B", title="Bravo", business_value=20, time_criticality=0, risk_reduction=0, job_size=2),
        WorkItem(id="C", title="Charlie", business_value=3, time_criticality=1, risk_reduction=0, job_size=5),
    ]


def test_run_planning_scores_orders_and_defers(unit_config):
    result = run_planning(_backlog(), capacity=6, config=unit_config)

    # B (10, URGENT) then A (5, HIGH); C would overflow the budget
    assert [s.id for s in result.sequence] == ["B", "A"]
    assert result.deferred == ["C"]
    assert result.total_effort == 6
    assert result.summary.total_items == 3


def test_run_planning_respects_dependencies(unit_config):
    result = run_planning(_backlog(), dependencies={"B": ["C"]}, config=unit_config)
    ids = [s.id for s in result.sequence]
    assert sorted(ids) == ["A", "B", "C"]
    assert result.deferred == []


def test_summarize_is_json_serializable(unit_config):
    result = run_planning(_backlog(), config=unit_config)
    payload = summarize(result)
    text = json.dumps(payload)
    assert '"sequence"' in text
    assert payload["sequence"][0]["priority"] == "URGENT"


def test_load_input_accepts_list_and_object(tmp_path):
    as_list = tmp_path / "items.json"
    as_list.write_text(json.dumps([{"id": "A", "title": "Alpha", "job_size": 2}]), encoding="utf-8")
    payload = load_input(as_list)
    assert payload["items"][0].id == "A"
    assert payload["dependencies"] == {}
    assert payload["capacity"] is None

    as_obj = tmp_path / "plan.json"
    as_obj.write_text(
        json.dumps({"items": [{"id": "A", "title": "Alpha"}], "dependencies": {"A": ["B"]}, "capacity": 10}),
        encoding="utf-8",
    )
    payload = load_input(as_obj)
    assert payload["dependencies"] == {"A": ["B"]}
    assert payload["capacity"] == 10


def test_load_input_validates_capacity(tmp_path):
    path = tmp_path / "plan.json"
    path.write_text(json.dumps({"items": [], "capacity": "12"}), encoding="utf-8")
    assert load_input(path)["capacity"] == 12.0

    path.write_text(json.dumps({"items": [], "capacity": "lots"}), encoding="utf-8")
    with pytest.raises(ValidationError):
        load_input(path)
