# Tests for recommendation rules and title similarity grouping
from __future__ import annotations

from release_planner.schemas.recommendation import RecommendationType
from release_planner.services.recommendations import (
    extract_keywords,
    generate_recommendations,
    group_similar_items,
    jaccard_similarity,
)


def _by_type(recs):
    return {r.recommendation_type: r for r in recs}


def test_extract_keywords_strips_short_words_and_punctuation():
    assert extract_keywords("Fix the Login-page, add SSO!") == {"loginpage"}
    assert extract_keywords("Improve login validation flow") == {"improve", "login", "validation", "flow"}


def test_extract_keywords_drops_non_ascii_letters():
    assert extract_keywords("Améliorer café-naïve") == {"amliorer", "cafnave"}


def test_jaccard_similarity():
    assert jaccard_similarity({"a", "b"}, {"a", "b"}) == 1.0
    assert jaccard_similarity({"a", "b"}, {"b", "c"}) == 1 / 3
    assert jaccard_similarity(set(), set()) == 0.0


def test_threshold_rules(make_item):
    items = [
        make_item("QW", score=7, size=3),
        make_item("SP", score=5.5, size=13),
        make_item("DL", score=1.5, size=8),
        make_item("NONE", score=4, size=4),
        make_item("EDGE", score=6, size=2),  # score not > 6
    ]
    recs = _by_type(generate_recommendations(items))

    assert recs[RecommendationType.PRIORITIZE].affected_items == ["QW"]
    assert recs[RecommendationType.PRIORITIZE].confidence == 0.9
    assert recs[RecommendationType.SPLIT].affected_items == ["SP"]
    assert recs[RecommendationType.SPLIT].confidence == 0.7
    assert recs[RecommendationType.DELAY].affected_items == ["DL"]
    assert recs[RecommendationType.DELAY].confidence == 0.6
    assert RecommendationType.COMBINE not in recs
    assert "Found 1 quick wins" in recs[RecommendationType.PRIORITIZE].rationale


def test_item_can_match_multiple_rules(make_item):
    items = [
        make_item("A", title="Localize checkout banner", score=7, size=1),
        make_item("B", title="Localize checkout banner", score=7, size=2),
    ]
    recs = _by_type(generate_recommendations(items))
    assert recs[RecommendationType.PRIORITIZE].affected_items == ["A", "B"]
    assert recs[RecommendationType.COMBINE].affected_items == ["A", "B"]


def test_one_record_per_rule(make_item):
    titles = ["Cache avatars", "Rotate secrets", "Paginate search", "Compress uploads"]
    items = [make_item(str(n), title=t, score=9, size=1) for n, t in enumerate(titles)]
    recs = generate_recommendations(items)
    assert [r.recommendation_type for r in recs] == [RecommendationType.PRIORITIZE]
    assert recs[0].affected_items == ["0", "1", "2", "3"]


def test_combine_similar_small_items(make_item):
    items = [
        make_item("A", title="Update login validation messages", size=1, score=3),
        make_item("B", title="Update login validation messages copy", size=2, score=3),
        make_item("C", title="Refactor billing exports", size=1, score=3),
        make_item("D", title="Update login validation messages", size=5, score=3),  # not small
    ]
    recs = _by_type(generate_recommendations(items))
    combine = recs[RecommendationType.COMBINE]
    assert combine.affected_items == ["A", "B"]
    assert combine.confidence == 0.5


def test_combine_needs_similarity_at_threshold(make_item):
    # 2 shared of 6 distinct keywords -> 0.33
    items = [
        make_item("A", title="Improve login validation flow", size=1),
        make_item("B", title="Enhance login validation process", size=1),
    ]
    assert RecommendationType.COMBINE not in _by_type(generate_recommendations(items))


def test_grouped_item_excluded_from_later_pairing(make_item):
    items = [
        make_item("A", title="Export report invoices monthly", size=1),
        make_item("B", title="Export report invoices monthly", size=1),
        make_item("C", title="Export report invoices monthly", size=1),
        make_item("D", title="Archive audit trail entries", size=1),
        make_item("E", title="Archive audit trail entries", size=1),
    ]
    groups = group_similar_items(items, 0.7)
    assert [[i.id for i in g] for g in groups] == [["A", "B", "C"], ["D", "E"]]
    ids = [i.id for g in groups for i in g]
    assert len(ids) == len(set(ids))


def test_empty_input_yields_no_recommendations():
    assert generate_recommendations([]) == []
