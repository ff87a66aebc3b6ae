"""
Utility modules for the moons harness.

This subpackage provides:
    - deterministic seeding helpers
    - configuration dataclasses
    - the package exception hierarchy
    - generic plotting utilities
"""

from .seed import draw_seed, make_generator, set_global_seed
from .configs import (
    BoundaryConfig,
    DatasetConfig,
    ExperimentConfig,
    ModelConfig,
    TrainingConfig,
)
from .errors import (
    DimensionMismatchError,
    InvalidArgumentError,
    MoonlabError,
    NumericalInstabilityError,
)

__all__ = [
    "set_global_seed",
    "draw_seed",
    "make_generator",
    "DatasetConfig",
    "ModelConfig",
    "TrainingConfig",
    "BoundaryConfig",
    "ExperimentConfig",
    "MoonlabError",
    "InvalidArgumentError",
    "DimensionMismatchError",
    "NumericalInstabilityError",
]
