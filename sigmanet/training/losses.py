"""Cost functions used for training diagnostics."""

from __future__ import annotations

import numpy as np

from ..core.types import Array


def quadratic_cost(output: Array, target: Array) -> tuple[float, Array]:
    """Return ``0.5 * ||a - y||^2`` and its gradient ``a - y``.

    The gradient is the output error the trainer multiplies by
    ``sigmoid_prime(z_n)`` to obtain ``delta_n``.
    """

    diff = np.asarray(output, dtype=np.float64) - np.asarray(target, dtype=np.float64)
    return float(0.5 * np.dot(diff, diff)), diff


__all__ = ["quadratic_cost"]
