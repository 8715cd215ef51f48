from __future__ import annotations

import numpy as np


def random_int(high: int, rng: np.random.Generator | None = None) -> int:
    """Uniform integer in [0, high) from a non-cryptographic source."""
    if high <= 0:
        raise ValueError(f"high must be positive, got {high}")
    rng = rng or np.random.default_rng()
    return int(rng.integers(0, high))
