"""
Geometric transforms for 2D point sets.

Both transforms operate on ``(N, 2)`` arrays. ``separate_classes`` shifts
the given array in place; ``rotate_points`` returns a new array.
"""

from __future__ import annotations

import numpy as np

from moonlab.utils.errors import DimensionMismatchError, InvalidArgumentError


def _check_points(points: np.ndarray) -> None:
    if points.ndim != 2 or points.shape[1] != 2:
        raise DimensionMismatchError(f"Expected points of shape (N, 2), got {points.shape}.")


def separate_classes(points: np.ndarray, labels: np.ndarray, offset: float) -> np.ndarray:
    """
    Push the two label groups apart vertically by ``offset`` in total.

    The group whose highest point lies higher moves up by ``offset / 2``,
    the other one moves down by ``offset / 2``. On equal maxima the first
    label (in sorted order) moves down.

    Args:
        points (np.ndarray): Points of shape (N, 2), shifted in place.
        labels (np.ndarray): Labels of shape (N,). A single class is left
            untouched.
        offset (float): Total vertical separation distance.

    Returns:
        np.ndarray: The same ``points`` array, for chaining.
    """
    _check_points(points)
    if labels.shape[0] != points.shape[0]:
        raise DimensionMismatchError(
            f"Got {points.shape[0]} points but {labels.shape[0]} labels."
        )

    classes = np.unique(labels)
    if classes.size > 2:
        raise InvalidArgumentError(f"Class separation needs at most two labels, got {classes.tolist()}.")
    if classes.size < 2:
        return points

    first = labels == classes[0]
    second = labels == classes[1]
    half = offset / 2.0

    if points[first, 1].max() > points[second, 1].max():
        points[first, 1] += half
        points[second, 1] -= half
    else:
        points[first, 1] -= half
        points[second, 1] += half
    return points


def rotation_matrix(degrees: float) -> np.ndarray:
    """Counter-clockwise 2x2 rotation matrix for an angle in degrees."""
    theta = np.deg2rad(degrees)
    cos, sin = np.cos(theta), np.sin(theta)
    return np.array([[cos, -sin], [sin, cos]])


def rotate_points(points: np.ndarray, degrees: float) -> np.ndarray:
    """
    Rotate every point counter-clockwise around the origin.

    Args:
        points (np.ndarray): Points of shape (N, 2).
        degrees (float): Rotation angle in degrees.

    Returns:
        np.ndarray: Rotated copy of ``points``.
    """
    _check_points(points)
    return points @ rotation_matrix(degrees).T


def translate_points(points: np.ndarray, dx: float = 0.0, dy: float = 0.0) -> np.ndarray:
    """Return ``points`` shifted by ``(dx, dy)``."""
    _check_points(points)
    return points + np.array([dx, dy])
