"""
Two-layer dense classifier.

This module implements the classifier used throughout the harness:
    - one hidden ``Linear`` layer with ReLU
    - one output ``Linear`` layer producing one score per class
    - He initialization for the hidden layer, Xavier for the output layer

It also defines the ``Classifier`` capability consumed by the training
loop and the decision boundary evaluator.
"""

from __future__ import annotations

from typing import Iterable, Optional, Protocol, Union, runtime_checkable

import numpy as np
import torch
from torch import Tensor, nn

from moonlab.utils.configs import ModelConfig
from moonlab.utils.errors import DimensionMismatchError, InvalidArgumentError
from moonlab.utils.seed import set_global_seed

ArrayLike = Union[np.ndarray, Tensor]


@runtime_checkable
class Classifier(Protocol):
    """Anything mapping a batch of points to one score vector per point."""

    def predict(self, points: ArrayLike) -> Tensor:
        ...


def _initialize_linear(layer: nn.Linear, nonlinearity: str) -> None:
    """
    Initialize a linear layer using He or Xavier initialization.

    Args:
        layer (nn.Linear): Linear layer to initialize.
        nonlinearity (str): ``"relu"`` for He init, anything else for Xavier.

    Returns:
        None
    """
    if nonlinearity == "relu":
        nn.init.kaiming_normal_(layer.weight, nonlinearity="relu")
    else:
        nn.init.xavier_normal_(layer.weight)
    if layer.bias is not None:
        nn.init.zeros_(layer.bias)


class MLPClassifier(nn.Module):
    """
    Dense classifier ``input_dim -> hidden_size (ReLU) -> output_dim``.

    The output is raw logits; the class-0 column doubles as the scalar
    field for decision boundary extraction.
    """

    def __init__(self, config: ModelConfig) -> None:
        """
        Initialize the classifier.

        Args:
            config (ModelConfig): Input, hidden and output sizes.
        """
        super().__init__()
        if min(config.input_dim, config.hidden_size, config.output_dim) <= 0:
            raise InvalidArgumentError(f"All layer sizes must be positive, got {config}.")
        self.config = config

        hidden = nn.Linear(config.input_dim, config.hidden_size)
        _initialize_linear(hidden, "relu")
        self.hidden = nn.Sequential(hidden, nn.ReLU())
        self.output = nn.Linear(config.hidden_size, config.output_dim)
        _initialize_linear(self.output, "linear")

    @property
    def num_classes(self) -> int:
        return self.config.output_dim

    def forward(self, x: Tensor) -> Tensor:
        """
        Perform a forward pass through the network.

        Args:
            x (Tensor): Input features of shape (batch_size, input_dim).

        Returns:
            Tensor: Output logits of shape (batch_size, output_dim).
        """
        return self.output(self.hidden(x))

    def check_input(self, x: Tensor) -> None:
        """Raise ``DimensionMismatchError`` unless ``x`` has shape (N, input_dim)."""
        if x.ndim != 2 or x.shape[1] != self.config.input_dim:
            raise DimensionMismatchError(
                f"Expected input of shape (N, {self.config.input_dim}), got {tuple(x.shape)}."
            )

    def predict(self, points: ArrayLike) -> Tensor:
        """
        Score a batch of points without tracking gradients.

        Args:
            points (ArrayLike): Array or tensor of shape (N, input_dim).

        Returns:
            Tensor: float32 scores of shape (N, output_dim).
        """
        if isinstance(points, np.ndarray):
            # Read-only arrays (e.g. LabeledDataset.points) cannot back a tensor.
            points = np.array(points, dtype=np.float32)
        x = torch.as_tensor(points, dtype=torch.float32)
        self.check_input(x)
        was_training = self.training
        self.eval()
        with torch.no_grad():
            scores = self(x)
        self.train(was_training)
        return scores


def build_mlp_from_config(config: ModelConfig, seed: Optional[int] = None) -> MLPClassifier:
    """
    Construct an ``MLPClassifier`` instance from a ``ModelConfig``.

    Args:
        config (ModelConfig): Model configuration.
        seed (Optional[int]): If given, seed all RNGs before initialization.

    Returns:
        MLPClassifier: Instantiated model.
    """
    if seed is not None:
        set_global_seed(seed)
    return MLPClassifier(config)


def predict_dataset(classifier: Classifier, batches: Iterable) -> Tensor:
    """
    Concatenate the classifier's scores over every batch of a loader pass.

    Args:
        classifier (Classifier): Model to query.
        batches (Iterable): Iterable of ``Batch`` objects, e.g. a ``BatchLoader``.

    Returns:
        Tensor: Scores of shape (N, num_classes) in iteration order.
    """
    scores = [classifier.predict(batch.points) for batch in batches]
    if not scores:
        raise InvalidArgumentError("Cannot predict on an empty loader.")
    return torch.cat(scores, dim=0)
