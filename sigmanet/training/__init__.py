"""Training loops and run assembly for sigmanet."""

from .trainer import Trainer

__all__ = ["Trainer"]
