"""
Top-level package for the moons decision boundary harness.

This package contains moons dataset generators, a two-layer classifier,
the training loop with early stopping, and decision boundary evaluation.
"""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    """
    Return the installed package version if available.

    This is safe to call even when the project is not installed
    as a package; in that case a default string is returned.

    Returns:
        str: Semantic version string or a fallback value.
    """
    try:
        return version("moonlab")
    except PackageNotFoundError:
        return "0.0.0"


__all__ = ["get_version"]
