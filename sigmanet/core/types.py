"""Core typing contracts for sigmanet."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, MutableSequence, Tuple

import numpy as np

Array = np.ndarray


@dataclass(frozen=True)
class Sample:
    """A single ``(inputs, target)`` training pair."""

    inputs: Array
    target: Array


Dataset = MutableSequence[Sample]


@dataclass
class ForwardCache:
    """Pre-activations and activations captured during the forward pass.

    ``zs[i]`` is the pre-activation of layer ``i + 1`` and ``activations[i]``
    is ``a_i``, so ``activations[0]`` is the input itself.
    """

    zs: List[Array]
    activations: List[Array]

    @property
    def output(self) -> Array:
        return self.activations[-1]


@dataclass(frozen=True)
class ModelDescription:
    """Description of the feed-forward network architecture."""

    sizes: Tuple[int, ...]

    @property
    def num_layers(self) -> int:
        return len(self.sizes) - 1


@dataclass
class TrainResult:
    """Summary returned by :meth:`sigmanet.training.trainer.Trainer.train`."""

    epochs: int
    samples_seen: int
    history: List[Dict[str, float]] = field(default_factory=list)


@dataclass(frozen=True)
class RunResult:
    """Summary returned by :func:`sigmanet.training.pipelines.run_pipeline`."""

    epochs: int
    metrics_path: str
    manifest_path: str
    checkpoint_path: str = ""
    test_accuracy: float | None = None
