"""Activation utilities for sigmanet."""

from __future__ import annotations

import numpy as np

from .types import Array


def sigmoid(x: Array) -> Array:
    """Return the logistic sigmoid of ``x``, elementwise."""

    return 1.0 / (1.0 + np.exp(-x))


def sigmoid_prime(x: Array) -> Array:
    """Derivative of :func:`sigmoid` expressed through the sigmoid itself."""

    s = sigmoid(x)
    return s * (1.0 - s)
