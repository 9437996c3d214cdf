# release_planner/services/recommendations/similarity.py

from __future__ import annotations

import re
from typing import List, Sequence, Set

from release_planner.schemas.work_item import ScoredWorkItem

_NON_WORD = re.compile(r"[^\w\s]", re.ASCII)
MIN_KEYWORD_LENGTH = 4


def extract_keywords(title: str) -> Set[str]:
    """Lower-cased words longer than three characters; non-ASCII letters and punctuation are dropped."""
    cleaned = _NON_WORD.sub("", title.lower())
    return {w for w in cleaned.split() if len(w) >= MIN_KEYWORD_LENGTH}


def jaccard_similarity(a: Set[str], b: Set[str]) -> float:
    union = a | b
    if not union:
        return 0.0
    return len(a & b) / len(union)


def group_similar_items(
    items: Sequence[ScoredWorkItem],
    threshold: float,
) -> List[List[ScoredWorkItem]]:
    """Greedy pairwise grouping by title similarity.

    Each unprocessed item is compared against every later unprocessed item;
    matches join its group and are excluded from further pairing, so an item
    lands in at most one group per call.
    """
    keywords = [extract_keywords(i.title) for i in items]
    processed: Set[str] = set()
    groups: List[List[ScoredWorkItem]] = []

    for i, anchor in enumerate(items):
        if anchor.id in processed:
            continue
        group = [anchor]
        for j in range(i + 1, len(items)):
            other = items[j]
            if other.id in processed:
                continue
            if jaccard_similarity(keywords[i], keywords[j]) >= threshold:
                group.append(other)
                processed.add(other.id)
        if len(group) > 1:
            processed.add(anchor.id)
            groups.append(group)
    return groups


__all__ = ["extract_keywords", "jaccard_similarity", "group_similar_items"]
