"""
Unit tests for grid construction and decision boundary extraction.
"""

from __future__ import annotations

import numpy as np
import pytest
import torch
from torch import Tensor

from moonlab.boundary import (
    build_grid_points,
    compute_bounds,
    evaluate_decision_boundary,
    evaluate_grid,
)
from moonlab.data import generate_moons, generate_reference_moons
from moonlab.models import build_mlp_from_config
from moonlab.utils.configs import BoundaryConfig, ModelConfig
from moonlab.utils.errors import DimensionMismatchError, InvalidArgumentError


class _LinearScores:
    """Scores ``(a * x + b * y + c, -(a * x + b * y + c))`` and counts calls."""

    def __init__(self, a: float, b: float, c: float) -> None:
        self.a, self.b, self.c = a, b, c
        self.calls = 0

    def predict(self, points: Tensor) -> Tensor:
        self.calls += 1
        points = torch.as_tensor(points, dtype=torch.float64)
        score = self.a * points[:, 0] + self.b * points[:, 1] + self.c
        return torch.stack([score, -score], dim=1)


def test_compute_bounds_adds_margin() -> None:
    points = np.array([[0.0, -1.0], [2.0, 3.0], [1.0, 0.5]])
    assert compute_bounds(points, margin=0.25) == pytest.approx((-0.25, 2.25, -1.25, 3.25))


def test_compute_bounds_accepts_dataset() -> None:
    dataset = generate_reference_moons()
    x_min, x_max, y_min, y_max = compute_bounds(dataset)
    assert x_min == pytest.approx(dataset.points[:, 0].min() - 0.25)
    assert y_max == pytest.approx(dataset.points[:, 1].max() + 0.25)


@pytest.mark.parametrize("empty", [np.zeros((0, 2)), []])
def test_empty_points_are_rejected(empty) -> None:
    with pytest.raises(InvalidArgumentError):
        compute_bounds(empty)
    with pytest.raises(InvalidArgumentError):
        evaluate_decision_boundary(empty, _LinearScores(1.0, 0.0, 0.0))


def test_misshaped_points_are_rejected() -> None:
    with pytest.raises(DimensionMismatchError):
        compute_bounds(np.zeros((4, 3)))


def test_grid_points_are_ordered_x_major() -> None:
    x_coords, y_coords, grid = build_grid_points((0.0, 1.0, 10.0, 12.0), resolution=3)
    assert np.allclose(x_coords, [0.0, 0.5, 1.0])
    assert np.allclose(y_coords, [10.0, 11.0, 12.0])
    assert np.allclose(grid[:3], [[0.0, 10.0], [0.0, 11.0], [0.0, 12.0]])
    assert np.allclose(grid[3], [0.5, 10.0])
    assert grid.shape == (9, 2)


@pytest.mark.parametrize("resolution", [2, 17, 100])
def test_grid_shape_and_monotone_coordinates(resolution: int) -> None:
    dataset = generate_moons(50, noise=0.1, seed=0)
    grid = evaluate_grid(dataset, _LinearScores(1.0, 1.0, 0.0), BoundaryConfig(resolution=resolution))
    assert grid.scores.shape == (resolution, resolution)
    assert grid.x_coords.shape == (resolution,)
    assert grid.y_coords.shape == (resolution,)
    assert np.all(np.diff(grid.x_coords) > 0)
    assert np.all(np.diff(grid.y_coords) > 0)


def test_field_is_indexed_by_x_then_y() -> None:
    dataset = generate_moons(40, noise=0.1, seed=1)
    classifier = _LinearScores(1.0, -2.0, 0.0)
    grid = evaluate_grid(dataset, classifier, BoundaryConfig(resolution=12))
    expected = grid.x_coords[:, None] - 2.0 * grid.y_coords[None, :]
    assert np.allclose(grid.scores, expected, atol=1e-5)
    assert classifier.calls == 1


def test_score_index_selects_column() -> None:
    dataset = generate_moons(40, noise=0.1, seed=1)
    classifier = _LinearScores(1.0, 0.0, 0.0)
    first = evaluate_grid(dataset, classifier, BoundaryConfig(resolution=8, score_index=0))
    second = evaluate_grid(dataset, classifier, BoundaryConfig(resolution=8, score_index=1))
    assert np.allclose(first.scores, -second.scores)
    with pytest.raises(InvalidArgumentError):
        evaluate_grid(dataset, classifier, BoundaryConfig(resolution=8, score_index=2))


def test_zero_crossing_of_vertical_line() -> None:
    points = np.array([[-1.0, -1.0], [1.0, 1.0]])
    result = evaluate_decision_boundary(points, _LinearScores(1.0, 0.0, -0.3), BoundaryConfig(resolution=50))
    assert len(result.boundary) == 1
    line = result.boundary[0]
    assert line.shape[1] == 2
    assert np.allclose(line[:, 0], 0.3, atol=1e-6)
    assert line[:, 1].min() == pytest.approx(-1.25)
    assert line[:, 1].max() == pytest.approx(1.25)


def test_no_crossing_gives_empty_boundary() -> None:
    points = np.array([[-1.0, -1.0], [1.0, 1.0]])
    result = evaluate_decision_boundary(points, _LinearScores(0.0, 0.0, 5.0), BoundaryConfig(resolution=10))
    assert result.boundary == []
    assert np.all(result.grid.scores == 5.0)


@pytest.mark.parametrize("config", [BoundaryConfig(resolution=1), BoundaryConfig(margin=-0.1)])
def test_invalid_boundary_config(config: BoundaryConfig) -> None:
    with pytest.raises(InvalidArgumentError):
        evaluate_decision_boundary(np.array([[0.0, 0.0], [1.0, 1.0]]), _LinearScores(1.0, 0.0, 0.0), config)


def test_mlp_boundary_defaults() -> None:
    dataset = generate_moons(80, noise=0.1, offset=1.0, seed=2)
    model = build_mlp_from_config(ModelConfig(hidden_size=32), seed=0)
    result = evaluate_decision_boundary(dataset, model)
    assert result.grid.scores.shape == (100, 100)
    assert result.grid.scores.dtype == np.float64
    expected = model.predict(np.array([[result.grid.x_coords[3], result.grid.y_coords[7]]]))[0, 0].item()
    assert result.grid.scores[3, 7] == pytest.approx(expected, abs=1e-5)
