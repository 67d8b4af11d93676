"""Synthetic datasets honouring the ``Sample`` contract."""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from ..core.errors import DimensionMismatch
from ..core.types import Array, Sample


def one_hot(index: int, size: int) -> Array:
    if not 0 <= index < size:
        raise ValueError(f"class index {index} out of range for {size} classes")
    out = np.zeros(size, dtype=np.float64)
    out[index] = 1.0
    return out


def validate_sample(sample: Sample, sizes: Sequence[int]) -> None:
    """Raise if ``sample`` does not fit a network with topology ``sizes``."""

    inputs = np.asarray(sample.inputs)
    target = np.asarray(sample.target)
    if inputs.shape != (sizes[0],):
        raise DimensionMismatch(f"input shape {inputs.shape}, expected ({sizes[0]},)")
    if target.shape != (sizes[-1],):
        raise DimensionMismatch(f"target shape {target.shape}, expected ({sizes[-1]},)")
    if np.any(inputs < 0.0) or np.any(inputs > 1.0):
        raise ValueError("input values must lie in [0, 1]")
    if np.count_nonzero(target == 1.0) != 1 or np.count_nonzero(target) != 1:
        raise ValueError("target must be one-hot")


def make_blobs(
    n_samples: int,
    n_features: int,
    n_classes: int,
    rng: np.random.Generator,
    spread: float = 0.08,
) -> List[Sample]:
    """Return ``n_samples`` points scattered around one centre per class.

    Centres are drawn in ``[0.2, 0.8]`` and inputs are clipped to ``[0, 1]``.
    """

    centres = rng.uniform(0.2, 0.8, size=(n_classes, n_features))
    labels = rng.integers(0, n_classes, size=n_samples)
    dataset: List[Sample] = []
    for label in labels:
        noise = spread * rng.standard_normal(n_features)
        inputs = np.clip(centres[label] + noise, 0.0, 1.0)
        dataset.append(Sample(inputs=inputs, target=one_hot(int(label), n_classes)))
    return dataset


__all__ = ["one_hot", "validate_sample", "make_blobs"]
