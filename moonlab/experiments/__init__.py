"""
Training and experiment utilities for the moons harness.

This subpackage contains the reusable training loop and the experiment
driver script that chains data generation, training and decision boundary
evaluation.
"""

from .train_model import (
    PassMetrics,
    TrainingState,
    evaluate_model,
    evaluate_pass,
    train_model,
)

__all__ = [
    "TrainingState",
    "PassMetrics",
    "train_model",
    "evaluate_model",
    "evaluate_pass",
]
