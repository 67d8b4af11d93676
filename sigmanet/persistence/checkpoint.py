"""``.npz`` checkpoints for trained networks."""

from __future__ import annotations

import zipfile
from pathlib import Path

import numpy as np

from ..core.errors import SerializationError
from ..core.network import NetworkModel
from .records import BiasRecord, ParameterRecords, WeightRecord, from_records, to_records


def save(model: NetworkModel, path: str | Path) -> str:
    """Write ``model`` to ``path`` as ``W0..``/``b0..`` arrays."""

    path = Path(path)
    records = to_records(model)
    payload = {}
    for idx, (weight, bias) in enumerate(zip(records.weights, records.biases)):
        payload[f"W{idx}"] = np.asarray(weight.data, dtype=np.float64).reshape(
            weight.row_count, weight.col_count
        )
        payload[f"b{idx}"] = np.asarray(bias.data, dtype=np.float64)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("wb") as handle:
            np.savez(handle, **payload)
    except OSError as exc:
        raise SerializationError(f"cannot write checkpoint {path}: {exc}") from exc
    return str(path)


def load(path: str | Path) -> NetworkModel:
    path = Path(path)
    try:
        loaded = np.load(path, allow_pickle=False)
        if not isinstance(loaded, np.lib.npyio.NpzFile):
            raise SerializationError(f"{path} is not an .npz archive")
        with loaded as archive:
            count = sum(1 for name in archive.files if name.startswith("W"))
            expected = {f"W{idx}" for idx in range(count)} | {f"b{idx}" for idx in range(count)}
            if set(archive.files) != expected:
                mismatched = sorted(set(archive.files) ^ expected)
                raise SerializationError(f"{path} has missing or unexpected arrays: {mismatched}")
            weights = []
            biases = []
            for idx in range(count):
                W = archive[f"W{idx}"]
                if W.ndim != 2:
                    raise SerializationError(f"W{idx} in {path} is not a matrix")
                weights.append(
                    WeightRecord(
                        row_count=int(W.shape[0]),
                        col_count=int(W.shape[1]),
                        data=tuple(float(v) for v in W.ravel(order="C")),
                    )
                )
                biases.append(BiasRecord(data=tuple(float(v) for v in archive[f"b{idx}"].ravel())))
    except SerializationError:
        raise
    except (OSError, KeyError, ValueError, zipfile.BadZipFile) as exc:
        raise SerializationError(f"cannot read checkpoint {path}: {exc}") from exc
    return from_records(ParameterRecords(weights=tuple(weights), biases=tuple(biases)))


__all__ = ["save", "load"]
