"""Input-space saliency maps for a network's own prediction."""

from __future__ import annotations

import numpy as np

from ..core.backward import backward_deltas
from ..core.forward import feedforward_cached
from ..core.network import NetworkModel
from ..core.types import Array


class SaliencyComputer:
    """Propagate the predicted-class error back to the input features.

    The target is the one-hot vector of the *predicted* class, not a ground
    truth label. The backward recursion is the one the trainer uses, but no
    parameter is touched; the final step ``W_1^T delta_1`` applies no
    derivative since the input layer has no nonlinearity.
    """

    def __init__(self, model: NetworkModel) -> None:
        self.model = model

    def saliency_map(self, inputs: Array) -> Array:
        output, cache = feedforward_cached(self.model, inputs)
        target = np.zeros_like(output)
        target[int(np.argmax(output))] = 1.0
        weights = self.model.weights
        deltas = backward_deltas(weights, cache, target)
        return weights[0].T @ deltas[0]


__all__ = ["SaliencyComputer"]
