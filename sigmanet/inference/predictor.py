"""Argmax classification on top of the forward pass."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from ..core.forward import feedforward
from ..core.network import NetworkModel
from ..core.types import Array, Sample
from ..training.metrics import accuracy


class Predictor:
    """Read-only classifier wrapping a :class:`NetworkModel`."""

    def __init__(self, model: NetworkModel) -> None:
        self.model = model

    def predict(self, inputs: Array) -> int:
        """Return the index of the largest output; the lowest index wins ties."""

        return int(np.argmax(feedforward(self.model, inputs)))

    def predict_proba(self, inputs: Array) -> Array:
        return feedforward(self.model, inputs)

    def evaluate(self, dataset: Iterable[Sample]) -> float:
        """Fraction of samples whose prediction matches the one-hot target."""

        predictions: list[int] = []
        targets: list[int] = []
        for sample in dataset:
            predictions.append(self.predict(sample.inputs))
            targets.append(int(np.argmax(sample.target)))
        return accuracy(predictions, targets)


__all__ = ["Predictor"]
