"""
Decision boundary evaluation.

This package samples a trained classifier on a grid spanning the data
extents and extracts the level set separating the two classes.
"""

from .decision_boundary import (
    DecisionBoundary,
    EvaluationGrid,
    build_grid_points,
    compute_bounds,
    evaluate_decision_boundary,
    evaluate_grid,
    extract_zero_crossing,
)

__all__ = [
    "DecisionBoundary",
    "EvaluationGrid",
    "compute_bounds",
    "build_grid_points",
    "evaluate_grid",
    "extract_zero_crossing",
    "evaluate_decision_boundary",
]
