"""
Labeled 2D point container shared by generators, loaders and evaluators.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

import numpy as np
import torch
from torch import Tensor

from moonlab.utils.errors import DimensionMismatchError, InvalidArgumentError

NUM_CLASSES = 2


@dataclass(frozen=True)
class LabeledDataset:
    """
    Immutable set of 2D points with one binary label per point.

    Args:
        points (np.ndarray): Coordinates of shape (N, 2), converted to float64.
        labels (np.ndarray): Class identifiers of shape (N,) in ``{0, 1}``,
            converted to int64.
    """

    points: np.ndarray
    labels: np.ndarray

    def __post_init__(self) -> None:
        points = np.array(self.points, dtype=np.float64)
        raw_labels = np.asarray(self.labels)
        if raw_labels.dtype.kind not in "biu":
            if raw_labels.dtype.kind != "f" or not np.array_equal(raw_labels, np.round(raw_labels)):
                raise InvalidArgumentError(f"Labels must be integral class identifiers, got dtype {raw_labels.dtype}.")
        labels = raw_labels.astype(np.int64)

        if points.ndim != 2 or points.shape[1] != 2:
            raise DimensionMismatchError(f"Expected points of shape (N, 2), got {points.shape}.")
        if labels.ndim != 1 or labels.shape[0] != points.shape[0]:
            raise DimensionMismatchError(
                f"Got {points.shape[0]} points but labels of shape {labels.shape}."
            )
        if points.shape[0] == 0:
            raise InvalidArgumentError("A labeled dataset needs at least one point.")
        if not np.all(np.isfinite(points)):
            raise InvalidArgumentError("All point coordinates must be finite.")
        if np.any((labels < 0) | (labels >= NUM_CLASSES)):
            raise InvalidArgumentError(f"Labels must lie in [0, {NUM_CLASSES}), got {np.unique(labels).tolist()}.")

        points.setflags(write=False)
        labels.setflags(write=False)
        object.__setattr__(self, "points", points)
        object.__setattr__(self, "labels", labels)

    def __len__(self) -> int:
        return int(self.labels.shape[0])

    def class_counts(self) -> Dict[int, int]:
        """Number of points per class label."""
        return {label: int(np.sum(self.labels == label)) for label in range(NUM_CLASSES)}

    def to_tensors(self) -> Tuple[Tensor, Tensor]:
        """
        Convert to tensors consumed by the training loop.

        Returns:
            Tuple[Tensor, Tensor]: float32 features of shape (N, 2) and int64
            labels of shape (N,).
        """
        x = torch.from_numpy(self.points.astype(np.float32))
        y = torch.from_numpy(self.labels.copy())
        return x, y
