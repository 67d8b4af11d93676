"""Online stochastic gradient descent for :class:`NetworkModel`."""

from __future__ import annotations

import math
import numbers
from typing import Mapping, Sequence

import numpy as np

from ..core.backward import backward_deltas
from ..core.errors import DimensionMismatch
from ..core.forward import feedforward_cached
from ..core.network import NetworkModel
from ..core.types import Dataset, Sample, TrainResult
from .losses import quadratic_cost


class Trainer:
    """Run per-sample gradient descent epochs on a network, in place.

    ``rng`` drives the per-epoch shuffle; pass a seeded generator for
    reproducible runs. Callbacks exposing ``on_epoch(epoch, metrics)`` (or
    plain callables) receive the mean quadratic cost and the running accuracy
    of every epoch.
    """

    def __init__(
        self,
        model: NetworkModel,
        rng: np.random.Generator | None = None,
        callbacks: Sequence[object] | None = None,
    ) -> None:
        self.model = model
        self.rng = rng if rng is not None else np.random.default_rng()
        self.callbacks = list(callbacks or [])

    def train(self, dataset: Dataset, epochs: int, learning_rate: float) -> TrainResult:
        """Train for ``epochs`` passes over ``dataset``, reshuffling it each time."""

        if isinstance(epochs, bool) or not isinstance(epochs, (int, np.integer)) or epochs < 0:
            raise ValueError(f"epochs must be a non-negative integer, got {epochs!r}")
        _check_learning_rate(learning_rate)

        result = TrainResult(epochs=0, samples_seen=0)
        for epoch in range(1, epochs + 1):
            self.rng.shuffle(dataset)
            total_loss = 0.0
            correct = 0
            for sample in dataset:
                loss, hit = self.step(sample, learning_rate)
                total_loss += loss
                correct += int(hit)
            count = len(dataset)
            metrics = {
                "loss": total_loss / count if count else 0.0,
                "accuracy": correct / count if count else 0.0,
            }
            result.epochs = epoch
            result.samples_seen += count
            result.history.append(metrics)
            self._emit_epoch(epoch, metrics)
        return result

    def step(self, sample: Sample, learning_rate: float) -> tuple[float, bool]:
        """Apply one SGD update for ``sample``.

        Returns the pre-update quadratic cost and whether the pre-update
        prediction matched the target class.
        """

        target = np.asarray(sample.target, dtype=np.float64)
        if target.ndim != 1 or target.shape[0] != self.model.output_size:
            raise DimensionMismatch(
                f"expected a target vector of length {self.model.output_size}, "
                f"got shape {target.shape}"
            )
        output, cache = feedforward_cached(self.model, sample.inputs)
        loss, _ = quadratic_cost(output, target)
        hit = int(np.argmax(output)) == int(np.argmax(target))

        # every delta is computed from the pre-update weights
        deltas = backward_deltas(self.model.weights, cache, target)
        for idx in reversed(range(self.model.num_layers)):
            delta = deltas[idx]
            self.model.apply_update(
                idx,
                learning_rate * np.outer(delta, cache.activations[idx]),
                learning_rate * delta,
            )
        return loss, hit

    # ------------------------------------------------------------------
    # Internal helpers

    def _emit_epoch(self, epoch: int, metrics: Mapping[str, float]) -> None:
        for callback in self.callbacks:
            if hasattr(callback, "on_epoch"):
                callback.on_epoch(epoch, metrics)  # type: ignore[attr-defined]
            elif callable(callback):
                callback(epoch, metrics)


def _check_learning_rate(learning_rate: float) -> None:
    if not isinstance(learning_rate, numbers.Real) or isinstance(learning_rate, bool):
        raise ValueError(f"learning_rate must be a number, got {learning_rate!r}")
    if not math.isfinite(learning_rate) or learning_rate <= 0:
        raise ValueError(f"learning_rate must be finite and positive, got {learning_rate!r}")


__all__ = ["Trainer"]
