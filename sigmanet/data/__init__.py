"""Dataset helpers for sigmanet."""

from .synthetic import make_blobs, one_hot, validate_sample

__all__ = ["make_blobs", "one_hot", "validate_sample"]
