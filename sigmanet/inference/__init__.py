"""Read-only consumers of a trained network."""

from .predictor import Predictor
from .saliency import SaliencyComputer

__all__ = ["Predictor", "SaliencyComputer"]
