"""Config-driven training runs for sigmanet."""

from __future__ import annotations

import json
from copy import deepcopy
from pathlib import Path
from typing import Dict, Mapping

import numpy as np
import yaml

from ..core.network import NetworkModel
from ..core.types import Dataset, RunResult
from ..inference.predictor import Predictor
from ..persistence.checkpoint import save as save_checkpoint
from ..reporting.artifacts import write_manifest
from ..reporting.metrics import CsvSink, JsonlSink
from ..reporting.plots import PlotAdapter
from .trainer import Trainer

_PRESETS: Dict[str, Mapping[str, object]] = {
    "mnist-784-64-36-10": {
        "model": {"sizes": [784, 64, 36, 10]},
        "train": {
            "epochs": 5,
            "learning_rate": 0.1,
            "run_dir": "runs/mnist-784-64-36-10",
            "enable_plots": False,
            "checkpoint": True,
        },
    },
    "xor-2-4-2": {
        "model": {"sizes": [2, 4, 2]},
        "train": {
            "epochs": 2000,
            "learning_rate": 0.5,
            "seed": 0,
            "run_dir": "runs/xor-2-4-2",
            "enable_plots": False,
            "checkpoint": False,
        },
    },
}

_REQUIRED_SECTIONS = {"model", "train"}


def load_config(path: str | Path) -> Mapping[str, object]:
    """Read a JSON or YAML run config from ``path``."""

    path = Path(path)
    text = path.read_text()
    suffix = path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        data = yaml.safe_load(text) or {}
    elif suffix == ".json":
        data = json.loads(text or "{}")
    else:
        raise ValueError(f"Unsupported config file type: {path.suffix}")

    if not isinstance(data, Mapping):
        raise TypeError(f"Config {path.name} must decode to a mapping")
    missing = _REQUIRED_SECTIONS - set(data)
    if missing:
        raise KeyError(f"Config {path.name} is missing required sections: {', '.join(sorted(missing))}")
    return json.loads(json.dumps(data))


def presets() -> Mapping[str, Mapping[str, object]]:
    return {name: deepcopy(cfg) for name, cfg in _PRESETS.items()}


def load_preset(name: str) -> Mapping[str, object]:
    try:
        return deepcopy(_PRESETS[name])
    except KeyError as exc:
        raise KeyError(f"Unknown preset: {name}") from exc


def run_pipeline(
    config: Mapping[str, object],
    dataset: Dataset,
    *,
    test_dataset: Dataset | None = None,
) -> RunResult:
    """Build, train, evaluate and optionally checkpoint a network.

    ``dataset`` is shuffled in place by the trainer.
    """

    model_cfg = dict(config["model"])  # type: ignore[arg-type]
    train_cfg = dict(config["train"])  # type: ignore[arg-type]

    seed = train_cfg.get("seed")
    rng = np.random.default_rng(None if seed is None else int(seed))
    epochs = int(train_cfg.get("epochs", 1))
    learning_rate = float(train_cfg.get("learning_rate", 0.1))
    run_dir = Path(str(train_cfg.get("run_dir", "runs/default")))
    run_dir.mkdir(parents=True, exist_ok=True)

    model = NetworkModel.create(model_cfg["sizes"], rng=rng)  # type: ignore[arg-type]

    metrics_path = run_dir / "metrics.jsonl"
    plots = PlotAdapter(run_dir, enable_plots=bool(train_cfg.get("enable_plots", False)))
    callbacks = [
        JsonlSink(metrics_path, split="train", seed=None if seed is None else int(seed)),
        CsvSink(run_dir / "metrics.csv", split="train"),
        plots,
    ]
    trainer = Trainer(model, rng=rng, callbacks=callbacks)
    result = trainer.train(dataset, epochs, learning_rate)
    plots.close()

    test_accuracy = None
    if test_dataset is not None:
        test_accuracy = Predictor(model).evaluate(test_dataset)

    checkpoint_path = ""
    if train_cfg.get("checkpoint", False):
        checkpoint_path = save_checkpoint(model, run_dir / "network.npz")

    final = result.history[-1] if result.history else {}
    manifest_path = write_manifest(
        run_dir / "manifest.json",
        config=json.loads(json.dumps(config)),
        sizes=model.sizes,
        results={
            "epochs": result.epochs,
            "samples_seen": result.samples_seen,
            "final_loss": final.get("loss"),
            "test_accuracy": test_accuracy,
        },
    )
    return RunResult(
        epochs=result.epochs,
        metrics_path=str(metrics_path),
        manifest_path=manifest_path,
        checkpoint_path=checkpoint_path,
        test_accuracy=test_accuracy,
    )


__all__ = ["load_config", "presets", "load_preset", "run_pipeline"]
