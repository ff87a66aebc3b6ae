"""
Plotting utilities for moons experiments.

This module provides small, reusable helpers for:
    - labeled scatter plots (datasets)
    - multi-line plots (loss and accuracy curves)
    - filled contour plots with an overlaid level line (decision boundaries)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np


def _ensure_parent_dir(path: Path) -> None:
    """
    Ensure that the parent directory of a file path exists.

    Args:
        path (Path): Target file path.

    Returns:
        None
    """
    path.parent.mkdir(parents=True, exist_ok=True)


def plot_scatter(
    points: np.ndarray,
    labels: np.ndarray,
    title: str,
    output_path: Path,
) -> None:
    """
    Scatter 2D points colored by label and save the figure.

    Args:
        points (np.ndarray): Points of shape (N, 2).
        labels (np.ndarray): Labels of shape (N,).
        title (str): Plot title.
        output_path (Path): Path to save the figure.

    Returns:
        None
    """
    _ensure_parent_dir(output_path)
    fig, ax = plt.subplots()
    ax.scatter(points[:, 0], points[:, 1], c=labels, s=12)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title(title)
    ax.set_aspect("equal", adjustable="datalim")
    fig.tight_layout()
    fig.savefig(output_path)
    plt.close(fig)


def plot_line_multi(
    x: Sequence[float],
    ys: Sequence[Sequence[float]],
    labels: Sequence[str],
    xlabel: str,
    ylabel: str,
    title: str,
    output_path: Path,
) -> None:
    """
    Create a multi-line plot and save it to disk.

    Args:
        x (Sequence[float]): Shared x-axis values.
        ys (Sequence[Sequence[float]]): Collection of y-series.
        labels (Sequence[str]): Labels for each series.
        xlabel (str): Label for the x-axis.
        ylabel (str): Label for the y-axis.
        title (str): Plot title.
        output_path (Path): Path to save the figure.

    Returns:
        None
    """
    _ensure_parent_dir(output_path)
    fig, ax = plt.subplots()
    for series, label in zip(ys, labels):
        ax.plot(x, series, marker="o", label=label)
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    ax.set_title(title)
    ax.grid(True, linestyle="--", alpha=0.4)
    ax.legend()
    fig.tight_layout()
    fig.savefig(output_path)
    plt.close(fig)


def plot_field_with_boundary(
    x_coords: np.ndarray,
    y_coords: np.ndarray,
    field: np.ndarray,
    boundary: Sequence[np.ndarray],
    title: str,
    output_path: Path,
    points: Optional[np.ndarray] = None,
    labels: Optional[np.ndarray] = None,
) -> None:
    """
    Draw a filled contour of a scalar field, its boundary lines, and
    optionally the labeled data points on top.

    Args:
        x_coords (np.ndarray): Grid x values (n,).
        y_coords (np.ndarray): Grid y values (n,).
        field (np.ndarray): Field of shape (n, n) indexed ``[x, y]``.
        boundary (Sequence[np.ndarray]): Polylines of shape (M, 2).
        title (str): Plot title.
        output_path (Path): Path to save the figure.
        points (Optional[np.ndarray]): Data points of shape (N, 2).
        labels (Optional[np.ndarray]): Labels for ``points``.

    Returns:
        None
    """
    _ensure_parent_dir(output_path)
    fig, ax = plt.subplots()
    contour = ax.contourf(x_coords, y_coords, field.T, levels=20, cmap="RdBu")
    fig.colorbar(contour)
    for line in boundary:
        ax.plot(line[:, 0], line[:, 1], color="black", linewidth=2)
    if points is not None:
        ax.scatter(points[:, 0], points[:, 1], c=labels, s=12, edgecolors="black", linewidths=0.5)
    ax.set_xlim(x_coords[0], x_coords[-1])
    ax.set_ylim(y_coords[0], y_coords[-1])
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title(title)
    fig.tight_layout()
    fig.savefig(output_path)
    plt.close(fig)
