"""
Training utilities for the two-layer moons classifier.

This module implements:
    - Adam training on summed cross-entropy against one-hot labels
    - per-pass metric reduction over the exact number of examples seen
    - early stopping once test accuracy exceeds a threshold
    - rollback to the last completed epoch on a non-finite loss
"""

from __future__ import annotations

import copy
import logging
import math
from dataclasses import asdict, dataclass
from typing import Dict, List, Tuple, Union

import torch
from torch import Tensor, nn
from torch.nn import functional as F
from torch.optim import Adam

from moonlab.data.labeled_dataset import LabeledDataset
from moonlab.data.loader import BatchLoader
from moonlab.models import MLPClassifier
from moonlab.utils.configs import TrainingConfig
from moonlab.utils.errors import InvalidArgumentError, NumericalInstabilityError
from moonlab.utils.seed import set_global_seed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrainingState:
    """
    Metrics recorded at the end of one epoch.

    Args:
        epoch (int): 1-based epoch index.
        train_loss (float): Mean summed cross-entropy over the training set.
        train_accuracy (float): Training accuracy in [0, 1].
        test_loss (float): Mean summed cross-entropy over the test set.
        test_accuracy (float): Test accuracy in [0, 1].
        stopped_early (bool): Whether this epoch triggered early stopping.
    """

    epoch: int
    train_loss: float
    train_accuracy: float
    test_loss: float
    test_accuracy: float
    stopped_early: bool = False

    def as_dict(self) -> Dict[str, Union[int, float, bool]]:
        return asdict(self)


@dataclass
class PassMetrics:
    """
    Accumulator for one evaluation pass.

    Losses and correct counts are summed over every example and divided by
    the total example count only once, so a short final batch carries the
    same per-example weight as the full ones.
    """

    loss_sum: float = 0.0
    correct_count: int = 0
    total_count: int = 0

    def update(self, logits: Tensor, targets: Tensor) -> float:
        """
        Add one batch to the running totals.

        Args:
            logits (Tensor): Model outputs of shape (B, C).
            targets (Tensor): One-hot targets of shape (B, C).

        Returns:
            float: Summed loss of this batch.
        """
        batch_loss = float(summed_cross_entropy(logits, targets).item())
        self.loss_sum += batch_loss
        self.correct_count += int((logits.argmax(dim=1) == targets.argmax(dim=1)).sum().item())
        self.total_count += int(targets.shape[0])
        return batch_loss

    @property
    def mean_loss(self) -> float:
        if self.total_count == 0:
            return 0.0
        return self.loss_sum / self.total_count

    @property
    def accuracy(self) -> float:
        if self.total_count == 0:
            return 0.0
        return self.correct_count / self.total_count


def one_hot_targets(labels: Tensor, num_classes: int) -> Tensor:
    """Encode integer labels of shape (B,) as float one-hot rows (B, C)."""
    return F.one_hot(labels, num_classes=num_classes).float()


def summed_cross_entropy(logits: Tensor, targets: Tensor) -> Tensor:
    """
    Cross-entropy of logits against one-hot targets, summed over the batch.

    Args:
        logits (Tensor): Model outputs of shape (B, C).
        targets (Tensor): One-hot targets of shape (B, C).

    Returns:
        Tensor: Scalar summed loss.
    """
    return F.cross_entropy(logits, targets, reduction="sum")


def _validate_training_config(config: TrainingConfig) -> None:
    if not (math.isfinite(config.learning_rate) and config.learning_rate > 0):
        raise InvalidArgumentError(f"learning_rate must be positive, got {config.learning_rate}.")
    if config.epochs <= 0:
        raise InvalidArgumentError(f"epochs must be positive, got {config.epochs}.")
    if config.batch_size <= 0:
        raise InvalidArgumentError(f"batch_size must be positive, got {config.batch_size}.")
    if not 0.0 <= config.accuracy_stop_threshold <= 1.0:
        raise InvalidArgumentError(
            f"accuracy_stop_threshold must lie in [0, 1], got {config.accuracy_stop_threshold}."
        )


def _as_loader(data: Union[LabeledDataset, BatchLoader], batch_size: int) -> BatchLoader:
    if isinstance(data, BatchLoader):
        return data
    return BatchLoader(data, batch_size=batch_size, shuffle=False)


def evaluate_pass(
    model: nn.Module,
    data: Union[LabeledDataset, BatchLoader],
    batch_size: int = 50,
) -> PassMetrics:
    """
    Run one full pass over a dataset without gradient tracking.

    Args:
        model (nn.Module): Model to evaluate.
        data (Union[LabeledDataset, BatchLoader]): Dataset, wrapped in an
            unshuffled loader, or an existing loader.
        batch_size (int): Batch size when ``data`` is a dataset.

    Returns:
        PassMetrics: Accumulated loss sum, correct count and example count.
    """
    loader = _as_loader(data, batch_size)
    metrics = PassMetrics()

    model.eval()
    with torch.no_grad():
        for batch in loader:
            logits = model(batch.points)
            metrics.update(logits, one_hot_targets(batch.labels, logits.shape[1]))
    return metrics


def evaluate_model(
    model: nn.Module,
    data: Union[LabeledDataset, BatchLoader],
    batch_size: int = 50,
) -> Tuple[float, float]:
    """
    Evaluate the model on a dataset.

    Args:
        model (nn.Module): Model to evaluate.
        data (Union[LabeledDataset, BatchLoader]): Dataset or loader.
        batch_size (int): Batch size when ``data`` is a dataset.

    Returns:
        Tuple[float, float]: Mean loss per example and accuracy.
    """
    metrics = evaluate_pass(model, data, batch_size)
    return metrics.mean_loss, metrics.accuracy


def _restore(model: nn.Module, snapshot: Dict[str, Tensor], epoch: int, message: str) -> NumericalInstabilityError:
    model.load_state_dict(snapshot)
    logger.error("%s; restored parameters from epoch %d", message, epoch - 1)
    return NumericalInstabilityError(message, epoch=epoch)


def train_one_epoch(
    model: nn.Module,
    loader: BatchLoader,
    optimizer: Adam,
    epoch: int,
    log_interval: int,
) -> PassMetrics:
    """
    Apply one Adam step per batch for a single pass over ``loader``.

    Args:
        model (nn.Module): Model to train.
        loader (BatchLoader): Loader providing training batches.
        optimizer (Adam): Optimizer over the model parameters.
        epoch (int): Current 1-based epoch, reported on failure.
        log_interval (int): Log every ``log_interval`` batches (0 disables).

    Returns:
        PassMetrics: Metrics of the batches as seen during the updates.

    Raises:
        NumericalInstabilityError: If a batch loss is NaN or infinite. The
            offending step is not applied.
    """
    model.train()
    metrics = PassMetrics()

    for batch_idx, batch in enumerate(loader):
        optimizer.zero_grad(set_to_none=True)
        logits = model(batch.points)
        targets = one_hot_targets(batch.labels, logits.shape[1])
        loss = summed_cross_entropy(logits, targets)

        if not torch.isfinite(loss):
            raise NumericalInstabilityError(f"Non-finite training loss {loss.item()} in batch {batch_idx}", epoch=epoch)

        loss.backward()
        optimizer.step()
        metrics.update(logits.detach(), targets)

        if log_interval > 0 and batch_idx % log_interval == 0:
            logger.info(
                "Train batch %d: loss=%.4f size=%d",
                batch_idx,
                loss.item() / len(batch),
                len(batch),
            )
    return metrics


def train_model(
    model: MLPClassifier,
    train_dataset: LabeledDataset,
    test_dataset: LabeledDataset,
    config: TrainingConfig,
) -> Tuple[MLPClassifier, List[TrainingState]]:
    """
    Train a classifier with Adam and accuracy-based early stopping.

    After every epoch the model is evaluated on the full training and test
    sets. Training stops once test accuracy strictly exceeds
    ``config.accuracy_stop_threshold`` or after ``config.epochs`` epochs.

    Args:
        model (MLPClassifier): Model instance to train.
        train_dataset (LabeledDataset): Training data, reshuffled every epoch.
        test_dataset (LabeledDataset): Test data used for early stopping.
        config (TrainingConfig): Training configuration.

    Returns:
        Tuple[MLPClassifier, List[TrainingState]]:
            The trained model and the per-epoch history.

    Raises:
        NumericalInstabilityError: If a loss becomes non-finite. The model
            keeps the parameters of the last completed epoch.
    """
    _validate_training_config(config)
    set_global_seed(config.seed)

    optimizer = Adam(model.parameters(), lr=config.learning_rate)
    train_loader = BatchLoader(
        train_dataset,
        batch_size=config.batch_size,
        shuffle=config.shuffle,
        seed=config.seed,
    )
    eval_train_loader = BatchLoader(train_dataset, batch_size=config.batch_size, shuffle=False)
    eval_test_loader = BatchLoader(test_dataset, batch_size=config.batch_size, shuffle=False)

    history: List[TrainingState] = []
    snapshot = copy.deepcopy(model.state_dict())

    logger.info(
        "Starting training for up to %d epochs (%d train / %d test examples)",
        config.epochs,
        len(train_dataset),
        len(test_dataset),
    )

    for epoch in range(1, config.epochs + 1):
        try:
            train_one_epoch(model, train_loader, optimizer, epoch, config.log_interval)
        except NumericalInstabilityError as exc:
            raise _restore(model, snapshot, epoch, f"Epoch {epoch}: {exc}") from exc

        train_loss, train_acc = evaluate_model(model, eval_train_loader)
        test_loss, test_acc = evaluate_model(model, eval_test_loader)
        if not (math.isfinite(train_loss) and math.isfinite(test_loss)):
            raise _restore(
                model,
                snapshot,
                epoch,
                f"Epoch {epoch}: non-finite evaluation loss (train={train_loss}, test={test_loss})",
            )

        stopped_early = test_acc > config.accuracy_stop_threshold
        state = TrainingState(
            epoch=epoch,
            train_loss=train_loss,
            train_accuracy=train_acc,
            test_loss=test_loss,
            test_accuracy=test_acc,
            stopped_early=stopped_early,
        )
        history.append(state)
        snapshot = copy.deepcopy(model.state_dict())

        logger.info(
            "Epoch %d/%d: train_loss=%.4f train_acc=%.4f test_loss=%.4f test_acc=%.4f",
            epoch,
            config.epochs,
            train_loss,
            train_acc,
            test_loss,
            test_acc,
        )

        if stopped_early:
            logger.info(
                "Stopped after %d epochs because test accuracy exceeded %.1f%%",
                epoch,
                config.accuracy_stop_threshold * 100,
            )
            break

    return model, history
