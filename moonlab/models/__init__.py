"""
Model definitions for the moons harness.

Exposes the ``Classifier`` capability and its two-layer dense
implementation.
"""

from .mlp import (
    Classifier,
    MLPClassifier,
    build_mlp_from_config,
    predict_dataset,
)

__all__ = [
    "Classifier",
    "MLPClassifier",
    "build_mlp_from_config",
    "predict_dataset",
]
