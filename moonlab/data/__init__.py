"""
Moons dataset generation and batching for the moons harness.

This subpackage exposes the parametric and reference moons generators,
the geometric transforms they use, and the mini-batch loader.
"""

from .labeled_dataset import LabeledDataset
from .geometry import rotate_points, separate_classes, translate_points
from .reference_moons import generate_reference_moons
from .datasets import (
    build_moon_splits,
    resolve_dataset_seed,
    generate_moons,
    generate_moons_from_config,
    sample_two_moons,
)
from .loader import Batch, BatchLoader, build_moon_loader

__all__ = [
    "LabeledDataset",
    "separate_classes",
    "rotate_points",
    "translate_points",
    "sample_two_moons",
    "generate_moons",
    "generate_moons_from_config",
    "generate_reference_moons",
    "build_moon_splits",
    "resolve_dataset_seed",
    "Batch",
    "BatchLoader",
    "build_moon_loader",
]
