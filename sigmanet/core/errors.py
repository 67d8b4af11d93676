"""Error types raised by sigmanet."""

from __future__ import annotations


class SigmanetError(Exception):
    """Base class for all sigmanet errors."""


class InvalidTopology(SigmanetError, ValueError):
    """Raised when layer sizes or parameter shapes do not describe a network."""


class DimensionMismatch(SigmanetError, ValueError):
    """Raised when an input or target vector disagrees with the topology."""


class SerializationError(SigmanetError, RuntimeError):
    """Raised when persisted parameters cannot be encoded or decoded."""


__all__ = [
    "SigmanetError",
    "InvalidTopology",
    "DimensionMismatch",
    "SerializationError",
]
