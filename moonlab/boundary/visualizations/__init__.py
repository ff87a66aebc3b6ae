"""
High-level visualization helpers for moons experiments.

These functions convert datasets, training histories and decision
boundaries into saved figures.
"""

from .visualize import (
    save_dataset_plot,
    save_decision_boundary_plot,
    save_training_curves,
)

__all__ = [
    "save_dataset_plot",
    "save_training_curves",
    "save_decision_boundary_plot",
]
