"""
Configuration dataclasses for the moons harness.

These dataclasses centralize all hyperparameters so that modules do not
rely on hard-coded constants spread throughout the codebase.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Mapping, Optional, Sequence

from moonlab.utils.errors import InvalidArgumentError


@dataclass
class DatasetConfig:
    """
    Configuration for moons dataset generation.

    Args:
        n (int): Number of samples in the parametric dataset.
        noise (float): Standard deviation of Gaussian noise added to points.
        offset (float): Vertical separation distance between the two moons.
        rotation_degrees (float): Counter-clockwise rotation applied after
            separation.
        seed (Optional[int]): Seed for the parametric generator. ``None``
            draws a fresh seed.
        test_source (str): ``"reference"`` to evaluate on the fixed golden
            moons, ``"parametric"`` to draw a second parametric set.
        reference_offset (float): Per-class x shift for the reference moons.
        coordinate_downscale (float): Divisor applied to reference coordinates.
    """

    n: int = 300
    noise: float = 0.09
    offset: float = 0.0
    rotation_degrees: float = 90.0
    seed: Optional[int] = None
    test_source: Literal["reference", "parametric"] = "reference"
    reference_offset: float = 0.0
    coordinate_downscale: float = 1.0


@dataclass
class ModelConfig:
    """
    Configuration for the two-layer dense classifier.

    Args:
        input_dim (int): Dimensionality of input features.
        hidden_size (int): Number of hidden units.
        output_dim (int): Number of output classes.
    """

    input_dim: int = 2
    hidden_size: int = 500
    output_dim: int = 2


@dataclass
class TrainingConfig:
    """
    Configuration for the training loop.

    Args:
        learning_rate (float): Adam learning rate.
        epochs (int): Maximum number of training epochs.
        batch_size (int): Mini-batch size.
        accuracy_stop_threshold (float): Training stops once test accuracy
            strictly exceeds this value.
        seed (int): Random seed for initialization and shuffling.
        shuffle (bool): Whether training batches are reshuffled every epoch.
        log_interval (int): Log batch statistics every N batches (0 disables).
    """

    learning_rate: float = 1e-2
    epochs: int = 100
    batch_size: int = 50
    accuracy_stop_threshold: float = 0.90
    seed: int = 0
    shuffle: bool = True
    log_interval: int = 0


@dataclass
class BoundaryConfig:
    """
    Configuration for decision boundary evaluation.

    Args:
        resolution (int): Number of grid points along each axis.
        margin (float): Padding added to every side of the data bounding box.
        score_index (int): Output column used as the scalar field.
        level (float): Field value traced as the decision boundary.
    """

    resolution: int = 100
    margin: float = 0.25
    score_index: int = 0
    level: float = 0.0


_FLAT_KEYS = {
    "n": ("dataset", "n"),
    "noise": ("dataset", "noise"),
    "offset": ("dataset", "offset"),
    "rotation_degrees": ("dataset", "rotation_degrees"),
    "seed": ("dataset", "seed"),
    "batch_size": ("training", "batch_size"),
    "shuffle": ("training", "shuffle"),
    "learning_rate": ("training", "learning_rate"),
    "max_epochs": ("training", "epochs"),
    "accuracy_stop_threshold": ("training", "accuracy_stop_threshold"),
    "grid_resolution": ("boundary", "resolution"),
}


@dataclass
class ExperimentConfig:
    """
    Aggregate configuration describing a single experiment run.

    Args:
        dataset (DatasetConfig): Dataset configuration.
        model (ModelConfig): Model architecture configuration.
        training (TrainingConfig): Training loop configuration.
        boundary (BoundaryConfig): Decision boundary configuration.
        seeds (Sequence[int]): Training seeds to use for repeated runs.
    """

    dataset: DatasetConfig = field(default_factory=DatasetConfig)
    model: ModelConfig = field(default_factory=ModelConfig)
    training: TrainingConfig = field(default_factory=TrainingConfig)
    boundary: BoundaryConfig = field(default_factory=BoundaryConfig)
    seeds: Sequence[int] = (0,)

    @classmethod
    def from_flat(cls, options: Mapping[str, Any]) -> "ExperimentConfig":
        """
        Build an ``ExperimentConfig`` from a flat mapping of named options.

        Recognized keys are ``n``, ``noise``, ``offset``,
        ``rotation_degrees``, ``seed``, ``batch_size``, ``shuffle``,
        ``learning_rate``, ``max_epochs``, ``accuracy_stop_threshold`` and
        ``grid_resolution``. Missing keys keep their defaults. The flat
        ``seed`` drives both data generation and training.

        Args:
            options (Mapping[str, Any]): Flat option mapping.

        Returns:
            ExperimentConfig: Populated configuration.
        """
        unknown = set(options) - set(_FLAT_KEYS)
        if unknown:
            raise InvalidArgumentError(f"Unknown configuration options: {sorted(unknown)}")

        config = cls()
        for key, value in options.items():
            section, attribute = _FLAT_KEYS[key]
            setattr(getattr(config, section), attribute, value)

        if options.get("seed") is not None:
            config.training.seed = int(options["seed"])
            config.seeds = (int(options["seed"]),)
        return config
