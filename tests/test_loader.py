"""
Unit tests for the mini-batch loader.
"""

from __future__ import annotations

import numpy as np
import pytest
import torch

from moonlab.data import BatchLoader, build_moon_loader, generate_moons
from moonlab.utils.errors import InvalidArgumentError


def _indices_of_pass(loader: BatchLoader) -> list:
    return [int(i) for batch in loader for i in batch.indices]


@pytest.mark.parametrize("shuffle", [False, True])
@pytest.mark.parametrize("batch_size", [1, 7, 50, 64, 101])
def test_one_pass_covers_every_index_once(batch_size: int, shuffle: bool) -> None:
    dataset = generate_moons(101, noise=0.1, seed=0)
    loader = BatchLoader(dataset, batch_size=batch_size, shuffle=shuffle, seed=1)

    indices = _indices_of_pass(loader)
    assert sorted(indices) == list(range(101))


@pytest.mark.parametrize("n,batch_size,expected", [(100, 50, [50, 50]), (103, 50, [50, 50, 3]), (10, 32, [10])])
def test_batch_sizes_and_remainder(n: int, batch_size: int, expected: list) -> None:
    dataset = generate_moons(n, noise=0.1, seed=0)
    loader = BatchLoader(dataset, batch_size=batch_size)
    assert [len(batch) for batch in loader] == expected
    assert len(loader) == len(expected)


def test_batches_carry_matching_points_and_labels() -> None:
    dataset = generate_moons(30, noise=0.1, seed=2)
    loader = BatchLoader(dataset, batch_size=8, shuffle=True, seed=3)
    for batch in loader:
        idx = batch.indices.numpy()
        assert batch.points.dtype == torch.float32
        assert batch.labels.dtype == torch.int64
        assert np.allclose(batch.points.numpy(), dataset.points[idx].astype(np.float32))
        assert np.array_equal(batch.labels.numpy(), dataset.labels[idx])


def test_unshuffled_loader_keeps_dataset_order() -> None:
    dataset = generate_moons(20, noise=0.1, seed=2)
    assert _indices_of_pass(BatchLoader(dataset, batch_size=6)) == list(range(20))


def test_shuffle_draws_new_permutation_each_pass() -> None:
    dataset = generate_moons(200, noise=0.1, seed=2)
    loader = BatchLoader(dataset, batch_size=200, shuffle=True, seed=7)
    first = _indices_of_pass(loader)
    second = _indices_of_pass(loader)
    assert first != second
    assert sorted(first) == sorted(second)


def test_shuffle_is_reproducible_for_a_seed() -> None:
    dataset = generate_moons(50, noise=0.1, seed=2)
    a = BatchLoader(dataset, batch_size=10, shuffle=True, seed=5)
    b = BatchLoader(dataset, batch_size=10, shuffle=True, seed=5)
    assert _indices_of_pass(a) == _indices_of_pass(b)
    assert _indices_of_pass(a) == _indices_of_pass(b)


def test_invalid_batch_size() -> None:
    dataset = generate_moons(10, noise=0.1, seed=0)
    with pytest.raises(InvalidArgumentError):
        BatchLoader(dataset, batch_size=0)


def test_build_moon_loader() -> None:
    loader = build_moon_loader(n=120, offset=1.0, seed=4, batch_size=50)
    assert len(loader.dataset) == 120
    assert loader.shuffle
    assert [len(batch) for batch in loader] == [50, 50, 20]
