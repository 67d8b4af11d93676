"""Parameter container for the fully-connected sigmoid network."""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from .errors import InvalidTopology
from .types import Array, ModelDescription


def _validate_sizes(sizes: Sequence[int]) -> Tuple[int, ...]:
    sizes = tuple(sizes)
    if len(sizes) < 2:
        raise InvalidTopology(
            f"topology needs at least an input and an output size, got {list(sizes)}"
        )
    for size in sizes:
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size < 1:
            raise InvalidTopology(f"layer sizes must be positive integers, got {list(sizes)}")
    return tuple(int(size) for size in sizes)


def _readonly(array: Array) -> Array:
    view = array.view()
    view.flags.writeable = False
    return view


class NetworkModel:
    """Weights and biases of a feed-forward network.

    Layer ``i`` (1-based, ``i = 1..n``) owns ``W_i`` with shape
    ``(sizes[i], sizes[i-1])`` and ``b_i`` with length ``sizes[i]``.
    The constructor copies every array to float64. Accessors hand out
    read-only views; :meth:`apply_update` is the only mutation path.
    """

    def __init__(self, sizes: Sequence[int], weights: List[Array], biases: List[Array]):
        self._sizes = _validate_sizes(sizes)
        weights = [np.array(W, dtype=np.float64) for W in weights]
        biases = [np.array(b, dtype=np.float64) for b in biases]
        if len(weights) != len(self._sizes) - 1 or len(biases) != len(weights):
            raise InvalidTopology(
                f"expected {len(self._sizes) - 1} weight and bias arrays, "
                f"got {len(weights)} and {len(biases)}"
            )
        for idx, (W, b) in enumerate(zip(weights, biases)):
            expected = (self._sizes[idx + 1], self._sizes[idx])
            if W.shape != expected:
                raise InvalidTopology(f"W{idx + 1} has shape {W.shape}, expected {expected}")
            if b.shape != (expected[0],):
                raise InvalidTopology(f"b{idx + 1} has shape {b.shape}, expected ({expected[0]},)")
        self._weights = weights
        self._biases = biases

    @classmethod
    def create(
        cls, sizes: Sequence[int], rng: np.random.Generator | None = None
    ) -> "NetworkModel":
        """Return a network with every parameter drawn uniformly from ``[-1, 1)``."""

        sizes = _validate_sizes(sizes)
        rng = rng if rng is not None else np.random.default_rng()
        weights = [
            rng.uniform(-1.0, 1.0, size=(out_dim, in_dim))
            for in_dim, out_dim in zip(sizes[:-1], sizes[1:])
        ]
        biases = [rng.uniform(-1.0, 1.0, size=out_dim) for out_dim in sizes[1:]]
        return cls(sizes, weights, biases)

    @classmethod
    def from_parameters(
        cls, weights: Sequence[Array], biases: Sequence[Array]
    ) -> "NetworkModel":
        """Build a network from explicit parameter arrays, inferring the topology."""

        weights = [np.asarray(W) for W in weights]
        biases = [np.asarray(b).reshape(-1) for b in biases]
        if not weights:
            raise InvalidTopology("at least one weight matrix is required")
        if any(W.ndim != 2 for W in weights):
            raise InvalidTopology("weight matrices must be two-dimensional")
        sizes = [weights[0].shape[1]] + [W.shape[0] for W in weights]
        return cls(sizes, weights, biases)

    # ------------------------------------------------------------------
    # Read surface

    @property
    def sizes(self) -> Tuple[int, ...]:
        return self._sizes

    @property
    def num_layers(self) -> int:
        return len(self._weights)

    @property
    def input_size(self) -> int:
        return self._sizes[0]

    @property
    def output_size(self) -> int:
        return self._sizes[-1]

    @property
    def weights(self) -> List[Array]:
        return [_readonly(W) for W in self._weights]

    @property
    def biases(self) -> List[Array]:
        return [_readonly(b) for b in self._biases]

    def layer(self, i: int) -> Tuple[Array, Array]:
        """Return ``(W_i, b_i)`` for the 1-based layer index ``i``."""

        if not 1 <= i <= self.num_layers:
            raise IndexError(f"layer index must be in 1..{self.num_layers}, got {i}")
        return _readonly(self._weights[i - 1]), _readonly(self._biases[i - 1])

    def describe(self) -> ModelDescription:
        return ModelDescription(sizes=self._sizes)

    def parameter_count(self) -> int:
        return int(sum(W.size + b.size for W, b in zip(self._weights, self._biases)))

    def copy(self) -> "NetworkModel":
        return NetworkModel(self._sizes, self._weights, self._biases)

    # ------------------------------------------------------------------
    # Write surface (trainer only)

    def apply_update(self, index: int, weight_step: Array, bias_step: Array) -> None:
        """Subtract the given steps from layer ``index`` (0-based) in place."""

        self._weights[index] -= weight_step
        self._biases[index] -= bias_step

    def __repr__(self) -> str:
        return f"NetworkModel(sizes={list(self._sizes)})"


__all__ = ["NetworkModel"]
