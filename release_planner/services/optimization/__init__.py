from .prioritizer import compare_items, prioritize
from .dependency_sequencer import DependencyMap, apply_dependency_constraints, detect_cycles
from .capacity_selector import apply_capacity_constraints
from .timing_optimizer import optimize_timing
from .value_delivery import ValueDeliveryOptimizer

__all__ = [
    "compare_items",
    "prioritize",
    "DependencyMap",
    "apply_dependency_constraints",
    "detect_cycles",
    "apply_capacity_constraints",
    "optimize_timing",
    "ValueDeliveryOptimizer",
]
