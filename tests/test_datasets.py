"""
Unit tests for moons dataset generators and geometric transforms.
"""

from __future__ import annotations

import logging

import numpy as np
import pytest

from moonlab.data import (
    LabeledDataset,
    build_moon_splits,
    resolve_dataset_seed,
    generate_moons,
    generate_reference_moons,
    rotate_points,
    separate_classes,
    translate_points,
)
from moonlab.utils.configs import DatasetConfig
from moonlab.utils.errors import DimensionMismatchError, InvalidArgumentError


def _pairwise_distances(points: np.ndarray) -> np.ndarray:
    diff = points[:, None, :] - points[None, :, :]
    return np.sqrt((diff**2).sum(axis=-1))


def _centroid_gap(dataset: LabeledDataset) -> float:
    y = dataset.points[:, 1]
    return abs(y[dataset.labels == 0].mean() - y[dataset.labels == 1].mean())


@pytest.mark.parametrize("n", [1, 2, 7, 300])
def test_generate_moons_counts_and_labels(n: int) -> None:
    dataset = generate_moons(n, noise=0.1, offset=0.5, seed=3)
    assert dataset.points.shape == (n, 2)
    assert dataset.labels.shape == (n,)
    assert set(np.unique(dataset.labels)) <= {0, 1}
    counts = dataset.class_counts()
    assert abs(counts[0] - counts[1]) <= 1


def test_generate_moons_is_deterministic() -> None:
    first = generate_moons(200, noise=0.2, offset=0.7, rotation_degrees=33.0, seed=11)
    second = generate_moons(200, noise=0.2, offset=0.7, rotation_degrees=33.0, seed=11)
    assert np.array_equal(first.points, second.points)
    assert np.array_equal(first.labels, second.labels)


def test_generate_moons_differs_across_seeds() -> None:
    first = generate_moons(100, noise=0.1, seed=1)
    second = generate_moons(100, noise=0.1, seed=2)
    assert not np.array_equal(first.points, second.points)


def test_offset_increases_vertical_class_gap() -> None:
    gaps = [
        _centroid_gap(generate_moons(300, noise=0.05, offset=offset, rotation_degrees=0.0, seed=5))
        for offset in (0.0, 0.5, 1.0, 2.0)
    ]
    assert all(a <= b for a, b in zip(gaps, gaps[1:]))


def test_rotation_preserves_pairwise_distances() -> None:
    base = generate_moons(60, noise=0.1, offset=0.0, rotation_degrees=0.0, seed=9)
    rotated = generate_moons(60, noise=0.1, offset=0.0, rotation_degrees=37.0, seed=9)
    assert np.allclose(_pairwise_distances(base.points), _pairwise_distances(rotated.points), atol=1e-9)
    assert not np.allclose(base.points, rotated.points)


def test_rotate_points_is_counter_clockwise() -> None:
    rotated = rotate_points(np.array([[1.0, 0.0]]), 90.0)
    assert np.allclose(rotated, [[0.0, 1.0]], atol=1e-12)


def test_rotation_recenters_separated_moons() -> None:
    separated = generate_moons(50, noise=0.0, offset=1.0, rotation_degrees=0.0, seed=4)
    rotated = generate_moons(50, noise=0.0, offset=1.0, rotation_degrees=90.0, seed=4)
    expected = rotate_points(separated.points, 90.0)
    expected[:, 1] += 0.5
    assert np.allclose(rotated.points, expected)


def test_separate_classes_moves_higher_group_up() -> None:
    points = np.array([[0.0, 2.0], [1.0, 0.0], [0.0, 1.0], [1.0, -1.0]])
    labels = np.array([0, 1, 0, 1])
    separate_classes(points, labels, 1.0)
    assert np.allclose(points[:, 1], [2.5, -0.5, 1.5, -1.5])


def test_separate_classes_tie_moves_first_label_down() -> None:
    points = np.array([[0.0, 1.0], [1.0, 1.0]])
    labels = np.array([1, 0])
    separate_classes(points, labels, 2.0)
    assert np.allclose(points[:, 1], [2.0, 0.0])


def test_separate_classes_rejects_mismatched_labels() -> None:
    with pytest.raises(DimensionMismatchError):
        separate_classes(np.zeros((3, 2)), np.array([0, 1]), 1.0)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"n": 0},
        {"n": -5},
        {"n": 10, "noise": -0.1},
        {"n": 10, "noise": float("nan")},
        {"n": 10, "offset": float("inf")},
    ],
)
def test_generate_moons_rejects_invalid_arguments(kwargs: dict) -> None:
    with pytest.raises(InvalidArgumentError):
        generate_moons(**kwargs)


def test_generate_moons_without_seed_still_valid() -> None:
    dataset = generate_moons(20)
    assert len(dataset) == 20


def test_reference_moons_match_golden_points() -> None:
    dataset = generate_reference_moons(offset=0.0, coordinate_downscale=1.0)
    assert len(dataset) == 300
    assert dataset.class_counts() == {0: 150, 1: 150}
    assert np.array_equal(dataset.labels[:150], np.zeros(150))
    assert np.array_equal(dataset.labels[150:], np.ones(150))
    assert np.array_equal(dataset.points[0], [-2.717835893494339, 0.6793610085529345])
    assert np.array_equal(dataset.points[149], [-1.0107773780231675, -0.9895456553950488])
    assert np.array_equal(dataset.points[150], [1.2605697631874289, 1.0458976448210704])
    assert np.array_equal(dataset.points[299], [2.667821411223028, 0.2317409067300455])


def test_reference_moons_offset_and_downscale() -> None:
    base = generate_reference_moons()
    shifted = generate_reference_moons(offset=0.5, coordinate_downscale=2.0)
    expected = base.points.copy()
    expected[:150, 0] -= 0.5
    expected[150:, 0] += 0.5
    assert np.allclose(shifted.points, expected / 2.0)


def test_reference_moons_rejects_zero_downscale() -> None:
    with pytest.raises(InvalidArgumentError):
        generate_reference_moons(coordinate_downscale=0.0)


def test_build_moon_splits_sources() -> None:
    cfg = DatasetConfig(n=120, noise=0.1, offset=1.0, seed=42)
    train, test = build_moon_splits(cfg)
    assert len(train) == 120
    assert len(test) == 300

    cfg.test_source = "parametric"
    train_p, test_p = build_moon_splits(cfg)
    assert np.array_equal(train.points, train_p.points)
    assert len(test_p) == 120
    assert not np.array_equal(train_p.points, test_p.points)


def test_labeled_dataset_validation() -> None:
    with pytest.raises(InvalidArgumentError):
        LabeledDataset(points=np.zeros((0, 2)), labels=np.zeros(0))
    with pytest.raises(DimensionMismatchError):
        LabeledDataset(points=np.zeros((3, 2)), labels=np.zeros(2))
    with pytest.raises(DimensionMismatchError):
        LabeledDataset(points=np.zeros((3, 3)), labels=np.zeros(3))
    with pytest.raises(InvalidArgumentError):
        LabeledDataset(points=np.array([[0.0, np.nan]]), labels=np.zeros(1))
    with pytest.raises(InvalidArgumentError):
        LabeledDataset(points=np.zeros((1, 2)), labels=np.array([2]))
    with pytest.raises(InvalidArgumentError):
        LabeledDataset(points=np.zeros((2, 2)), labels=np.array([0.7, 1.9]))
    with pytest.raises(InvalidArgumentError):
        LabeledDataset(points=np.zeros((1, 2)), labels=np.array([np.nan]))


def test_labeled_dataset_accepts_integral_float_labels() -> None:
    dataset = LabeledDataset(points=np.zeros((2, 2)), labels=np.array([1.0, 0.0]))
    assert dataset.labels.dtype == np.int64
    assert dataset.labels.tolist() == [1, 0]


def test_missing_split_seed_is_drawn_and_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="moonlab.data.datasets"):
        train, _ = build_moon_splits(DatasetConfig(n=20))

    drawn = [r for r in caplog.records if r.levelno == logging.INFO and "drew seed" in r.getMessage()]
    assert len(drawn) == 1
    seed = int(drawn[0].getMessage().rsplit("=", 1)[1])
    replay, _ = build_moon_splits(DatasetConfig(n=20, seed=seed))
    assert np.array_equal(train.points, replay.points)


def test_resolve_dataset_seed_keeps_explicit_seed() -> None:
    config = DatasetConfig(n=10, seed=5)
    assert resolve_dataset_seed(config) is config
    resolved = resolve_dataset_seed(DatasetConfig(n=10))
    assert isinstance(resolved.seed, int) and resolved.seed >= 1


def test_translate_points_shifts_copy() -> None:
    points = np.array([[0.0, 0.0], [1.0, -1.0]])
    shifted = translate_points(points, dx=0.5, dy=2.0)
    assert np.allclose(shifted, [[0.5, 2.0], [1.5, 1.0]])
    assert np.allclose(points, [[0.0, 0.0], [1.0, -1.0]])


def test_labeled_dataset_is_read_only() -> None:
    source = np.zeros((2, 2))
    dataset = LabeledDataset(points=source, labels=np.array([0, 1]))
    source[0, 0] = 5.0
    assert dataset.points[0, 0] == 0.0
    with pytest.raises(ValueError):
        dataset.points[0, 0] = 1.0
