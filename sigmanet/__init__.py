"""sigmanet public API."""

from .core import activations  # noqa: F401
from .core import types  # noqa: F401
from .core.errors import DimensionMismatch, InvalidTopology, SerializationError, SigmanetError
from .core.forward import feedforward, feedforward_cached
from .core.network import NetworkModel
from .core.types import Sample
from .inference import Predictor, SaliencyComputer
from .training.pipelines import load_config, load_preset, presets, run_pipeline
from .training.trainer import Trainer

__all__ = [
    "DimensionMismatch",
    "InvalidTopology",
    "NetworkModel",
    "Predictor",
    "SaliencyComputer",
    "Sample",
    "SerializationError",
    "SigmanetError",
    "Trainer",
    "activations",
    "feedforward",
    "feedforward_cached",
    "load_config",
    "load_preset",
    "presets",
    "run_pipeline",
    "types",
]
