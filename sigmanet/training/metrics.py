"""Classification metrics."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ..core.types import Array


def accuracy(predictions: Sequence[int], targets: Sequence[int]) -> float:
    """Fraction of ``predictions`` equal to ``targets``; ``0.0`` when empty."""

    preds = np.asarray(predictions, dtype=np.int64)
    targs = np.asarray(targets, dtype=np.int64)
    if preds.shape != targs.shape:
        raise ValueError(f"shape mismatch: {preds.shape} vs {targs.shape}")
    if preds.size == 0:
        return 0.0
    return float(np.mean(preds == targs))


def confusion_matrix(
    predictions: Sequence[int], targets: Sequence[int], num_classes: int
) -> Array:
    """Return ``cm`` where ``cm[t, p]`` counts true class ``t`` predicted as ``p``."""

    cm = np.zeros((num_classes, num_classes), dtype=np.int64)
    for pred, true in zip(predictions, targets):
        cm[int(true), int(pred)] += 1
    return cm


__all__ = ["accuracy", "confusion_matrix"]
