"""Forward propagation through a :class:`NetworkModel`."""

from __future__ import annotations

import numpy as np

from .activations import sigmoid
from .errors import DimensionMismatch
from .network import NetworkModel
from .types import Array, ForwardCache


def as_input(model: NetworkModel, inputs: Array) -> Array:
    """Return ``inputs`` as a float64 vector, checking it against the topology."""

    x = np.asarray(inputs, dtype=np.float64)
    if x.ndim != 1 or x.shape[0] != model.input_size:
        raise DimensionMismatch(
            f"expected an input vector of length {model.input_size}, got shape {x.shape}"
        )
    return x


def feedforward(model: NetworkModel, inputs: Array) -> Array:
    """Return the output activation ``a_n`` for ``inputs``."""

    a = as_input(model, inputs)
    for W, b in zip(model.weights, model.biases):
        a = sigmoid(W @ a + b)
    return a


def feedforward_cached(model: NetworkModel, inputs: Array) -> tuple[Array, ForwardCache]:
    """Like :func:`feedforward` but also return every ``z_i`` and ``a_i``."""

    x = as_input(model, inputs)
    zs: list[Array] = []
    activations: list[Array] = [x]
    for W, b in zip(model.weights, model.biases):
        z = W @ activations[-1] + b
        zs.append(z)
        activations.append(sigmoid(z))
    return activations[-1], ForwardCache(zs=zs, activations=activations)


__all__ = ["as_input", "feedforward", "feedforward_cached"]
