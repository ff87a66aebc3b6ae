"""
Mini-batch iteration over labeled datasets.

``BatchLoader`` is built on ``torch.utils.data`` samplers. Each iteration is
a full pass; with shuffling enabled every pass draws a new permutation from
the loader's own generator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

import torch
from torch import Tensor
from torch.utils.data import BatchSampler, RandomSampler, Sampler, SequentialSampler

from moonlab.data.datasets import generate_moons
from moonlab.data.labeled_dataset import LabeledDataset
from moonlab.utils.errors import InvalidArgumentError
from moonlab.utils.seed import make_generator


@dataclass(frozen=True)
class Batch:
    """
    One mini-batch drawn from a dataset.

    Args:
        indices (Tensor): Dataset indices of the batch members (B,).
        points (Tensor): float32 features of shape (B, 2).
        labels (Tensor): int64 labels of shape (B,).
    """

    indices: Tensor
    points: Tensor
    labels: Tensor

    def __len__(self) -> int:
        return int(self.indices.shape[0])


class BatchLoader:
    """
    Iterate over a ``LabeledDataset`` in batches of at most ``batch_size``.

    All batches hold exactly ``batch_size`` examples except possibly the
    last one, which holds the remainder.
    """

    def __init__(
        self,
        dataset: LabeledDataset,
        batch_size: int,
        shuffle: bool = False,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the loader.

        Args:
            dataset (LabeledDataset): Dataset to iterate over.
            batch_size (int): Maximum batch size, must be positive.
            shuffle (bool): Whether to permute indices at the start of every pass.
            seed (Optional[int]): Seed of the loader-owned shuffling generator.
        """
        if batch_size <= 0:
            raise InvalidArgumentError(f"batch_size must be positive, got {batch_size}.")

        self.dataset = dataset
        self.batch_size = batch_size
        self.shuffle = shuffle
        self._points, self._labels = dataset.to_tensors()
        self._generator = make_generator(seed)

        sampler: Sampler[int]
        if shuffle:
            sampler = RandomSampler(range(len(dataset)), generator=self._generator)
        else:
            sampler = SequentialSampler(range(len(dataset)))
        self._batch_sampler = BatchSampler(sampler, batch_size=batch_size, drop_last=False)

    def __len__(self) -> int:
        return len(self._batch_sampler)

    def __iter__(self) -> Iterator[Batch]:
        for batch_indices in self._batch_sampler:
            indices = torch.as_tensor(batch_indices, dtype=torch.int64)
            yield Batch(
                indices=indices,
                points=self._points[indices],
                labels=self._labels[indices],
            )


def build_moon_loader(
    n: int = 300,
    offset: float = 0.5,
    shuffle: bool = True,
    seed: Optional[int] = None,
    batch_size: int = 50,
    noise: float = 0.09,
    rotation_degrees: float = 90.0,
) -> BatchLoader:
    """
    Generate parametric moons and wrap them in a ``BatchLoader``.

    Args:
        n (int): Number of points.
        offset (float): Vertical class separation. Roughly 1.0 gives linearly
            separable moons, 0.5 does not.
        shuffle (bool): Whether the loader reshuffles every pass.
        seed (Optional[int]): Seed for both generation and shuffling.
        batch_size (int): Mini-batch size.
        noise (float): Standard deviation of the Gaussian noise.
        rotation_degrees (float): Rotation applied after separation.

    Returns:
        BatchLoader: Loader over the generated dataset.
    """
    dataset = generate_moons(
        n,
        noise=noise,
        offset=offset,
        rotation_degrees=rotation_degrees,
        seed=seed,
    )
    return BatchLoader(dataset, batch_size=batch_size, shuffle=shuffle, seed=seed)
