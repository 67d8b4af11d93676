"""Parameter persistence for sigmanet."""

from .checkpoint import load, save
from .records import BiasRecord, ParameterRecords, WeightRecord, from_records, to_records

__all__ = [
    "BiasRecord",
    "ParameterRecords",
    "WeightRecord",
    "from_records",
    "load",
    "save",
    "to_records",
]
