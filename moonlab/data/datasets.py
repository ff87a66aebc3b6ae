"""
Parametric two-moons dataset generation.

This module wraps scikit-learn's ``make_moons`` and adds the optional
vertical class separation and rotation steps, plus helpers that assemble
the default train/test pair used by the experiments.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Optional, Tuple

import numpy as np
from sklearn.datasets import make_moons

from moonlab.data.geometry import rotate_points, separate_classes, translate_points
from moonlab.data.labeled_dataset import LabeledDataset
from moonlab.data.reference_moons import generate_reference_moons
from moonlab.utils.configs import DatasetConfig
from moonlab.utils.errors import InvalidArgumentError
from moonlab.utils.seed import draw_seed

logger = logging.getLogger(__name__)


def sample_two_moons(n: int, noise: float, seed: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sample the raw two-moons shape.

    Args:
        n (int): Number of points. Class 0 receives ``n // 2`` points and
            class 1 the remainder.
        noise (float): Standard deviation of the Gaussian noise.
        seed (int): Seed for the sampler.

    Returns:
        Tuple[np.ndarray, np.ndarray]: Points of shape (n, 2) and labels of
        shape (n,).
    """
    points, labels = make_moons(n_samples=n, noise=noise, random_state=seed)
    return points.astype(np.float64), labels.astype(np.int64)


def _validate_moon_arguments(n: int, noise: float, offset: float, rotation_degrees: float) -> None:
    if n <= 0:
        raise InvalidArgumentError(f"Sample count must be positive, got {n}.")
    if not math.isfinite(noise) or noise < 0:
        raise InvalidArgumentError(f"noise must be a finite non-negative value, got {noise}.")
    if not math.isfinite(offset):
        raise InvalidArgumentError(f"offset must be finite, got {offset}.")
    if not math.isfinite(rotation_degrees):
        raise InvalidArgumentError(f"rotation_degrees must be finite, got {rotation_degrees}.")


def generate_moons(
    n: int,
    noise: float = 0.09,
    offset: float = 0.0,
    rotation_degrees: float = 90.0,
    seed: Optional[int] = None,
) -> LabeledDataset:
    """
    Generate a two-moons dataset with optional separation and rotation.

    Steps, in order:
        1. sample the raw moons from ``seed``
        2. if ``offset != 0``, push the classes apart vertically by ``offset``
        3. if ``rotation_degrees != 0``, rotate counter-clockwise and, when an
           offset was applied, shift everything up by ``offset / 2`` to bring
           the clusters back towards the origin

    An offset of about 0.5 keeps the moons interleaved, 1.0 makes them
    linearly separable.

    Args:
        n (int): Number of points.
        noise (float): Standard deviation of the Gaussian noise.
        offset (float): Total vertical separation between the classes.
        rotation_degrees (float): Rotation angle in degrees.
        seed (Optional[int]): Sampler seed. ``None`` draws one and logs it.

    Returns:
        LabeledDataset: Generated points and labels.
    """
    _validate_moon_arguments(n, noise, offset, rotation_degrees)
    if seed is None:
        seed = draw_seed()
        logger.info("No seed given for moons generation, drew seed=%d", seed)

    points, labels = sample_two_moons(n, noise, seed)

    if offset != 0.0:
        separate_classes(points, labels, offset)

    if rotation_degrees != 0.0:
        points = rotate_points(points, rotation_degrees)
        if offset != 0.0:
            points = translate_points(points, dy=offset / 2.0)

    logger.debug(
        "Generated %d moons (noise=%.3f offset=%.3f rotation=%.1f seed=%d)",
        n,
        noise,
        offset,
        rotation_degrees,
        seed,
    )
    return LabeledDataset(points=points, labels=labels)


def generate_moons_from_config(config: DatasetConfig, seed: Optional[int] = None) -> LabeledDataset:
    """
    Generate parametric moons from a ``DatasetConfig``.

    Args:
        config (DatasetConfig): Dataset configuration.
        seed (Optional[int]): Overrides ``config.seed`` when given.

    Returns:
        LabeledDataset: Generated dataset.
    """
    return generate_moons(
        n=config.n,
        noise=config.noise,
        offset=config.offset,
        rotation_degrees=config.rotation_degrees,
        seed=config.seed if seed is None else seed,
    )


def resolve_dataset_seed(config: DatasetConfig) -> DatasetConfig:
    """
    Return ``config`` with a concrete seed, drawing and logging one if unset.

    Args:
        config (DatasetConfig): Dataset configuration.

    Returns:
        DatasetConfig: ``config`` itself when it already has a seed, otherwise
        a copy carrying the drawn seed.
    """
    if config.seed is not None:
        return config
    seed = draw_seed()
    logger.info("No seed given for moons splits, drew seed=%d", seed)
    return replace(config, seed=seed)


def build_moon_splits(config: DatasetConfig) -> Tuple[LabeledDataset, LabeledDataset]:
    """
    Build the train and test datasets for one experiment.

    The training set is always parametric. The test set is either the fixed
    reference moons or a second parametric draw seeded with ``seed + 1``.

    Args:
        config (DatasetConfig): Dataset configuration.

    Returns:
        Tuple[LabeledDataset, LabeledDataset]: ``train`` and ``test`` datasets.
    """
    config = resolve_dataset_seed(config)
    seed = config.seed
    train =generate_moons_from_config(config, seed=seed)

    if config.test_source == "reference":
        test = generate_reference_moons(
            offset=config.reference_offset,
            coordinate_downscale=config.coordinate_downscale,
        )
    elif config.test_source == "parametric":
        test = generate_moons_from_config(config, seed=seed + 1)
    else:
        raise InvalidArgumentError(f"Unknown test_source: {config.test_source}")

    logger.info("Built moons splits: %d train points, %d test points (%s)", len(train), len(test), config.test_source)
    return train, test
