# release_planner/services/optimization/dependency_sequencer.py
"""
Dependency-respecting reordering of an already prioritized list.

Items are placed in waves: each pass walks the prioritized order and places
every item whose declared dependencies are all placed. When a pass places
nothing the leftovers (cycles, dangling references) are appended in their
prioritized order and a warning is logged. Planning output is never blocked
by a bad dependency map.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Set

from release_planner.schemas.work_item import ScoredWorkItem

logger = logging.getLogger("release_planner.services.optimization.dependencies")

DependencyMap = Mapping[str, Iterable[str]]


def apply_dependency_constraints(
    items: Sequence[ScoredWorkItem],
    dependencies: Optional[DependencyMap],
) -> List[ScoredWorkItem]:
    """Reorder `items` so each one follows its dependencies wherever possible."""
    if not dependencies:
        return list(items)

    logger.debug("dependencies.apply.start", extra={"count": len(items), "total": len(dependencies)})

    graph = _normalize(dependencies)
    result: List[ScoredWorkItem] = []
    placed: Set[str] = set()
    remaining = list(items)

    while remaining:
        still_waiting: List[ScoredWorkItem] = []
        for item in remaining:
            if all(dep in placed for dep in graph.get(item.id, [])):
                result.append(item)
                placed.add(item.id)
            else:
                still_waiting.append(item)

        if len(still_waiting) == len(remaining):
            _log_unresolved(still_waiting, graph, {i.id for i in items})
            result.extend(still_waiting)
            break
        remaining = still_waiting

    logger.debug("dependencies.apply.done", extra={"count": len(result)})
    return result


def _normalize(dependencies: DependencyMap) -> Dict[str, List[str]]:
    graph: Dict[str, List[str]] = {}
    for dep, reqs in dependencies.items():
        dep_s = str(dep).strip()
        if not dep_s:
            continue
        if isinstance(reqs, str):
            reqs = [reqs]
        graph[dep_s] = [str(r).strip() for r in (reqs or []) if str(r).strip()]
    return graph


def _log_unresolved(
    stuck: Sequence[ScoredWorkItem],
    graph: Dict[str, List[str]],
    known_ids: Set[str],
) -> None:
    stuck_ids = [i.id for i in stuck]
    dangling = sorted({d for i in stuck_ids for d in graph.get(i, []) if d not in known_ids})
    cycles = detect_cycles({k: v for k, v in graph.items() if k in set(stuck_ids)})
    logger.warning(
        "dependencies.unresolved",
        extra={
            "remaining": stuck_ids,
            "cycles": [" -> ".join(c) for c in cycles],
            "dangling": dangling,
            "reason": "circular or missing dependencies; appending in priority order",
        },
    )


def detect_cycles(graph: Dict[str, List[str]]) -> List[List[str]]:
    """
    Detect cycles in a dependency graph.
    Returns list of cycles (each cycle is list of nodes in traversal order,
    first node repeated at the end). Iterative DFS, so deep chains are fine.
    """
    visited: Set[str] = set()
    on_stack: Set[str] = set()
    cycles: List[List[str]] = []

    for start in graph:
        if start in visited:
            continue
        path: List[str] = [start]
        iters = [iter(graph.get(start, []))]
        visited.add(start)
        on_stack.add(start)
        while iters:
            nxt = next(iters[-1], None)
            if nxt is None:
                iters.pop()
                on_stack.discard(path.pop())
                continue
            if nxt in on_stack:
                idx = path.index(nxt)
                cycles.append(path[idx:] + [nxt])
            elif nxt not in visited:
                visited.add(nxt)
                on_stack.add(nxt)
                path.append(nxt)
                iters.append(iter(graph.get(nxt, [])))
    return cycles


__all__ = ["DependencyMap", "apply_dependency_constraints", "detect_cycles"]
