"""
Grid evaluation of a trained classifier's decision boundary.

The data bounding box, padded by a margin, is sampled on a uniform
``n x n`` grid. The class-0 score at every grid point forms a scalar field
whose zero-level set is the decision boundary.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

import contourpy
import numpy as np
import torch

from moonlab.data.labeled_dataset import LabeledDataset
from moonlab.models import Classifier
from moonlab.utils.configs import BoundaryConfig
from moonlab.utils.errors import DimensionMismatchError, InvalidArgumentError

logger = logging.getLogger(__name__)

Bounds = Tuple[float, float, float, float]


@dataclass(frozen=True)
class EvaluationGrid:
    """
    Scalar field sampled on a uniform grid.

    Args:
        x_coords (np.ndarray): Strictly increasing x values (n,).
        y_coords (np.ndarray): Strictly increasing y values (n,).
        scores (np.ndarray): Field of shape (n, n); ``scores[i, j]`` is the
            value at ``(x_coords[i], y_coords[j])``.
    """

    x_coords: np.ndarray
    y_coords: np.ndarray
    scores: np.ndarray

    @property
    def resolution(self) -> int:
        return int(self.x_coords.shape[0])

    @property
    def bounds(self) -> Bounds:
        return (
            float(self.x_coords[0]),
            float(self.x_coords[-1]),
            float(self.y_coords[0]),
            float(self.y_coords[-1]),
        )


@dataclass(frozen=True)
class DecisionBoundary:
    """
    Result of a decision boundary request.

    Args:
        grid (EvaluationGrid): The sampled score field.
        boundary (List[np.ndarray]): Polylines of shape (M, 2) along which
            the field equals the requested level.
    """

    grid: EvaluationGrid
    boundary: List[np.ndarray]


def _as_points(data: Union[LabeledDataset, np.ndarray]) -> np.ndarray:
    if isinstance(data, LabeledDataset):
        return data.points
    points = np.asarray(data, dtype=np.float64)
    if points.size == 0:
        raise InvalidArgumentError("Cannot compute bounds of an empty point set.")
    if points.ndim != 2 or points.shape[1] != 2:
        raise DimensionMismatchError(f"Expected points of shape (N, 2), got {points.shape}.")
    if not np.all(np.isfinite(points)):
        raise InvalidArgumentError("All point coordinates must be finite.")
    return points


def compute_bounds(data: Union[LabeledDataset, np.ndarray], margin: float = 0.25) -> Bounds:
    """
    Axis-aligned bounding box of the points, padded on all four sides.

    Args:
        data (Union[LabeledDataset, np.ndarray]): Dataset or (N, 2) points.
        margin (float): Padding added on every side.

    Returns:
        Bounds: ``(x_min, x_max, y_min, y_max)``.
    """
    if margin < 0:
        raise InvalidArgumentError(f"margin must be non-negative, got {margin}.")
    points = _as_points(data)
    x_min, y_min = points.min(axis=0) - margin
    x_max, y_max = points.max(axis=0) + margin
    return float(x_min), float(x_max), float(y_min), float(y_max)


def build_grid_points(bounds: Bounds, resolution: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Sample ``bounds`` on a uniform ``resolution x resolution`` grid.

    Args:
        bounds (Bounds): ``(x_min, x_max, y_min, y_max)``.
        resolution (int): Number of samples along each axis.

    Returns:
        Tuple[np.ndarray, np.ndarray, np.ndarray]:
            ``x_coords`` (n,), ``y_coords`` (n,) and the flattened grid
            points (n * n, 2), ordered by x first: every x value is paired
            with all y values before moving to the next x.
    """
    if resolution < 2:
        raise InvalidArgumentError(f"Grid resolution must be at least 2, got {resolution}.")
    x_min, x_max, y_min, y_max = bounds
    if not (x_max > x_min and y_max > y_min):
        raise InvalidArgumentError(f"Degenerate grid bounds {bounds}.")

    x_coords = np.linspace(x_min, x_max, resolution)
    y_coords = np.linspace(y_min, y_max, resolution)
    xx, yy = np.meshgrid(x_coords, y_coords, indexing="ij")
    grid_points = np.stack([xx.ravel(), yy.ravel()], axis=1)
    return x_coords, y_coords, grid_points


def evaluate_grid(
    data: Union[LabeledDataset, np.ndarray],
    classifier: Classifier,
    config: BoundaryConfig,
) -> EvaluationGrid:
    """
    Evaluate ``classifier`` on a grid spanning the padded data extents.

    All grid points are scored in a single ``predict`` call.

    Args:
        data (Union[LabeledDataset, np.ndarray]): Dataset whose extents
            define the grid. Only the coordinates are used.
        classifier (Classifier): Trained model.
        config (BoundaryConfig): Resolution, margin and score column.

    Returns:
        EvaluationGrid: Grid coordinates and the (n, n) score field.
    """
    bounds = compute_bounds(data, margin=config.margin)
    x_coords, y_coords, grid_points = build_grid_points(bounds, config.resolution)

    scores = classifier.predict(torch.from_numpy(grid_points.astype(np.float32)))
    scores = scores.detach().cpu().numpy()
    if scores.ndim != 2 or scores.shape[0] != grid_points.shape[0]:
        raise DimensionMismatchError(
            f"Classifier returned scores of shape {scores.shape} for {grid_points.shape[0]} grid points."
        )
    if not 0 <= config.score_index < scores.shape[1]:
        raise InvalidArgumentError(
            f"score_index {config.score_index} out of range for {scores.shape[1]} classes."
        )

    field = scores[:, config.score_index].astype(np.float64).reshape(config.resolution, config.resolution)
    return EvaluationGrid(x_coords=x_coords, y_coords=y_coords, scores=field)


def extract_zero_crossing(grid: EvaluationGrid, level: float = 0.0) -> List[np.ndarray]:
    """
    Trace the polylines where the score field equals ``level``.

    Args:
        grid (EvaluationGrid): Evaluated score field.
        level (float): Field value to trace.

    Returns:
        List[np.ndarray]: One (M, 2) array of ``(x, y)`` vertices per line.
        Empty when the field never crosses ``level``.
    """
    # contourpy expects z indexed [y, x].
    generator = contourpy.contour_generator(
        x=grid.x_coords,
        y=grid.y_coords,
        z=grid.scores.T,
        line_type=contourpy.LineType.Separate,
    )
    return [np.asarray(line, dtype=np.float64) for line in generator.lines(level)]


def evaluate_decision_boundary(
    data: Union[LabeledDataset, np.ndarray],
    classifier: Classifier,
    config: Optional[BoundaryConfig] = None,
) -> DecisionBoundary:
    """
    Compute the score field and the decision boundary of a classifier.

    Args:
        data (Union[LabeledDataset, np.ndarray]): Dataset whose extents
            define the grid.
        classifier (Classifier): Trained model.
        config (Optional[BoundaryConfig]): Grid and boundary settings.
            Defaults to a 100x100 grid with a 0.25 margin.

    Returns:
        DecisionBoundary: Score grid and zero-level polylines.
    """
    config = config or BoundaryConfig()
    grid = evaluate_grid(data, classifier, config)
    boundary = extract_zero_crossing(grid, level=config.level)
    logger.info(
        "Evaluated %dx%d grid over x=[%.2f, %.2f] y=[%.2f, %.2f]; %d boundary segment(s)",
        grid.resolution,
        grid.resolution,
        *grid.bounds,
        len(boundary),
    )
    return DecisionBoundary(grid=grid, boundary=boundary)
