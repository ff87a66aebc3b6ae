"""
Visualization utilities for moons experiments.

This module glues together numerical outputs from the data, training and
boundary modules and plotting helpers in ``moonlab.utils.plotting`` to
produce figures saved under an output directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from moonlab.boundary.decision_boundary import DecisionBoundary
from moonlab.data.labeled_dataset import LabeledDataset
from moonlab.experiments.train_model import TrainingState
from moonlab.utils.plotting import plot_field_with_boundary, plot_line_multi, plot_scatter


def save_dataset_plot(dataset: LabeledDataset, output_dir: Path, name: str = "dataset") -> Path:
    """
    Save a labeled scatter plot of a dataset.

    Args:
        dataset (LabeledDataset): Dataset to draw.
        output_dir (Path): Directory where the figure will be saved.
        name (str): File name stem and plot title.

    Returns:
        Path: Path of the written figure.
    """
    path = output_dir / f"{name}.png"
    plot_scatter(dataset.points, dataset.labels, title=name, output_path=path)
    return path


def save_training_curves(
    history: Sequence[TrainingState],
    output_dir: Path,
    prefix: str = "training",
) -> None:
    """
    Save loss and accuracy curves of a training run.

    Args:
        history (Sequence[TrainingState]): Per-epoch training states.
        output_dir (Path): Directory where figures will be saved.
        prefix (str): File name prefix for plots.

    Returns:
        None
    """
    epochs = [state.epoch for state in history]

    plot_line_multi(
        x=epochs,
        ys=[[s.train_loss for s in history], [s.test_loss for s in history]],
        labels=["train", "test"],
        xlabel="epoch",
        ylabel="loss",
        title="Loss",
        output_path=output_dir / f"{prefix}_loss.png",
    )

    plot_line_multi(
        x=epochs,
        ys=[[s.train_accuracy for s in history], [s.test_accuracy for s in history]],
        labels=["train", "test"],
        xlabel="epoch",
        ylabel="accuracy",
        title="Accuracy",
        output_path=output_dir / f"{prefix}_accuracy.png",
    )


def save_decision_boundary_plot(
    result: DecisionBoundary,
    output_dir: Path,
    dataset: Optional[LabeledDataset] = None,
    name: str = "decision_boundary",
) -> Path:
    """
    Save the score field with its decision boundary.

    Args:
        result (DecisionBoundary): Output of ``evaluate_decision_boundary``.
        output_dir (Path): Directory where the figure will be saved.
        dataset (Optional[LabeledDataset]): Points drawn on top of the field.
        name (str): File name stem.

    Returns:
        Path: Path of the written figure.
    """
    path = output_dir / f"{name}.png"
    plot_field_with_boundary(
        x_coords=result.grid.x_coords,
        y_coords=result.grid.y_coords,
        field=result.grid.scores,
        boundary=result.boundary,
        title="Decision boundary",
        output_path=path,
        points=dataset.points if dataset is not None else None,
        labels=dataset.labels if dataset is not None else None,
    )
    return path
