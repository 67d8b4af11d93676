"""Backward recursion shared by training and saliency."""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from .activations import sigmoid_prime
from .errors import DimensionMismatch
from .types import Array, ForwardCache


def output_delta(cache: ForwardCache, target: Array) -> Array:
    """Return ``(a_n - y) * sigmoid_prime(z_n)``."""

    y = np.asarray(target, dtype=np.float64)
    output = cache.output
    if y.shape != output.shape:
        raise DimensionMismatch(
            f"expected a target vector of length {output.shape[0]}, got shape {y.shape}"
        )
    return (output - y) * sigmoid_prime(cache.zs[-1])


def backward_deltas(
    weights: Sequence[Array], cache: ForwardCache, target: Array
) -> List[Array]:
    """Return ``[delta_1, ..., delta_n]`` computed with ``weights``.

    ``weights`` is read only; callers that mutate parameters must apply their
    updates after this returns.
    """

    last = len(weights) - 1
    deltas: List[Array] = [None] * (last + 1)  # type: ignore[list-item]
    deltas[last] = output_delta(cache, target)
    for idx in reversed(range(last)):
        deltas[idx] = (weights[idx + 1].T @ deltas[idx + 1]) * sigmoid_prime(cache.zs[idx])
    return deltas


__all__ = ["output_delta", "backward_deltas"]
