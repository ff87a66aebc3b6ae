"""
Deterministic seeding utilities.

This module centralizes all randomness control for the project to ensure
reproducible runs across Python, NumPy, and PyTorch.
"""

from __future__ import annotations

import os
import random
from typing import Optional

import numpy as np
import torch

SEED_UPPER_BOUND = 2**31


def set_global_seed(seed: int, deterministic: bool = True) -> None:
    """
    Set random seeds for Python, NumPy, and PyTorch.

    Args:
        seed (int): Base seed value to use for all RNGs.
        deterministic (bool): If True, enable PyTorch deterministic flags
            where available. This may have performance implications.

    Returns:
        None
    """
    random.seed(seed)
    np.random.seed(seed)
    torch.manual_seed(seed)

    os.environ["PYTHONHASHSEED"] = str(seed)

    if deterministic:
        torch.use_deterministic_algorithms(True)


def draw_seed() -> int:
    """
    Draw a fresh seed in ``[1, 2**31)`` for callers that did not supply one.

    Returns:
        int: Newly drawn seed. Log it if the run must be reproducible.
    """
    return random.randrange(1, SEED_UPPER_BOUND)


def make_generator(seed: Optional[int]) -> torch.Generator:
    """
    Create a dedicated ``torch.Generator``.

    Args:
        seed (Optional[int]): Seed for the generator. ``None`` seeds it from
            a non-deterministic source.

    Returns:
        torch.Generator: Generator owned by the caller.
    """
    generator = torch.Generator()
    if seed is None:
        generator.seed()
    else:
        generator.manual_seed(seed)
    return generator
