# release_planner/services/scoring/engines/__init__.py

from .wsjf import WsjfScoringEngine, calculate_wsjf

__all__ = ["WsjfScoringEngine", "calculate_wsjf"]
