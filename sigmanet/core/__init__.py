"""Core numerical primitives for sigmanet."""

from . import activations, backward, errors, forward, network, types

__all__ = ["activations", "backward", "errors", "forward", "network", "types"]
