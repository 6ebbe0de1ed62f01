"""
Random source handling shared by all engines.

Every operation that needs randomness takes an ``rng`` argument which may be
None (module-wide generator), an integer seed, or a numpy Generator.
"""
from typing import Optional, Union

import numpy as np


RandomSource = Optional[Union[int, np.random.Generator]]

_default_rng = np.random.default_rng()


def resolve_rng(rng: RandomSource = None) -> np.random.Generator:
    """
    Normalise a random source into a numpy Generator.

    Args:
        rng: None, an integer seed, or an existing Generator.

    Returns:
        The module-wide generator for None, a fresh seeded generator for
        an int, or the given generator unchanged.
    """
    if rng is None:
        return _default_rng
    return np.random.default_rng(rng)


def seed_default_rng(seed: Optional[int]) -> None:
    """Reseed the module-wide generator (used by the CLI --seed flag)."""
    global _default_rng
    _default_rng = np.random.default_rng(seed)
