"""Record layout exchanged with parameter serializers.

A network is exported as a sequence of weight records followed by a sequence
of bias records, both in layer order ``1..n``. Weight data is row-major.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from ..core.errors import InvalidTopology, SerializationError
from ..core.network import NetworkModel


@dataclass(frozen=True)
class WeightRecord:
    row_count: int
    col_count: int
    data: Tuple[float, ...]


@dataclass(frozen=True)
class BiasRecord:
    data: Tuple[float, ...]


@dataclass(frozen=True)
class ParameterRecords:
    weights: Tuple[WeightRecord, ...]
    biases: Tuple[BiasRecord, ...]


def to_records(model: NetworkModel) -> ParameterRecords:
    weights = tuple(
        WeightRecord(
            row_count=int(W.shape[0]),
            col_count=int(W.shape[1]),
            data=tuple(float(v) for v in W.ravel(order="C")),
        )
        for W in model.weights
    )
    biases = tuple(BiasRecord(data=tuple(float(v) for v in b)) for b in model.biases)
    return ParameterRecords(weights=weights, biases=biases)


def from_records(records: ParameterRecords) -> NetworkModel:
    """Rebuild a network, raising :class:`SerializationError` on malformed input."""

    if len(records.weights) != len(records.biases):
        raise SerializationError(
            f"{len(records.weights)} weight records but {len(records.biases)} bias records"
        )
    weights = []
    for idx, record in enumerate(records.weights):
        if len(record.data) != record.row_count * record.col_count:
            raise SerializationError(
                f"weight record {idx} holds {len(record.data)} values, "
                f"expected {record.row_count}x{record.col_count}"
            )
        weights.append(
            np.asarray(record.data, dtype=np.float64).reshape(record.row_count, record.col_count)
        )
    biases = [np.asarray(record.data, dtype=np.float64) for record in records.biases]
    try:
        return NetworkModel.from_parameters(weights, biases)
    except InvalidTopology as exc:
        raise SerializationError(f"records do not describe a network: {exc}") from exc


__all__ = [
    "WeightRecord",
    "BiasRecord",
    "ParameterRecords",
    "to_records",
    "from_records",
]
