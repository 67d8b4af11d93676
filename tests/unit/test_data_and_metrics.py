import numpy as np
import pytest

from sigmanet.core.errors import DimensionMismatch
from sigmanet.core.types import Sample
from sigmanet.data.synthetic import make_blobs, one_hot, validate_sample
from sigmanet.training.losses import quadratic_cost
from sigmanet.training.metrics import accuracy, confusion_matrix


def test_one_hot():
    assert np.array_equal(one_hot(2, 4), [0.0, 0.0, 1.0, 0.0])
    with pytest.raises(ValueError):
        one_hot(4, 4)


def test_make_blobs_honours_sample_contract():
    dataset = make_blobs(50, n_features=6, n_classes=3, rng=np.random.default_rng(0))
    assert len(dataset) == 50
    for sample in dataset:
        validate_sample(sample, [6, 4, 3])


def test_validate_sample_rejects_malformed_samples():
    good = Sample(inputs=np.array([0.0, 1.0]), target=one_hot(0, 2))
    validate_sample(good, [2, 2])
    with pytest.raises(DimensionMismatch):
        validate_sample(good, [3, 2])
    with pytest.raises(DimensionMismatch):
        validate_sample(good, [2, 3])
    with pytest.raises(ValueError):
        validate_sample(Sample(inputs=np.array([0.0, 1.5]), target=one_hot(0, 2)), [2, 2])
    with pytest.raises(ValueError):
        validate_sample(Sample(inputs=np.array([0.0, 1.0]), target=np.array([1.0, 1.0])), [2, 2])


def test_quadratic_cost_and_gradient():
    loss, grad = quadratic_cost(np.array([0.75, 0.25]), np.array([1.0, 0.0]))
    assert loss == pytest.approx(0.0625)
    assert np.allclose(grad, [-0.25, 0.25])


def test_accuracy_and_confusion_matrix():
    preds = [0, 1, 2, 2]
    targets = [0, 1, 1, 2]
    assert accuracy(preds, targets) == pytest.approx(0.75)
    assert accuracy([], []) == 0.0
    cm = confusion_matrix(preds, targets, num_classes=3)
    assert cm.tolist() == [[1, 0, 0], [0, 1, 1], [0, 0, 1]]
    with pytest.raises(ValueError):
        accuracy([0, 1], [0])
