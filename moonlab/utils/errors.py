"""
Exception hierarchy for the moons harness.

All errors are raised synchronously to the caller of the offending
operation and are never retried inside the package.
"""

from __future__ import annotations


class MoonlabError(Exception):
    """Base class for all errors raised by ``moonlab``."""


class InvalidArgumentError(MoonlabError, ValueError):
    """
    Raised for invalid inputs such as non-positive sample counts,
    negative noise, empty datasets, or non-finite coordinates.
    """


class DimensionMismatchError(MoonlabError, ValueError):
    """
    Raised when array shapes disagree, e.g. points and labels of different
    lengths or inputs whose width does not match the model input dimension.
    """


class NumericalInstabilityError(MoonlabError, ArithmeticError):
    """
    Raised when the training loss becomes NaN or infinite.

    Attributes:
        epoch (int): Epoch during which the non-finite loss appeared.
    """

    def __init__(self, message: str, epoch: int) -> None:
        super().__init__(message)
        self.epoch = epoch
