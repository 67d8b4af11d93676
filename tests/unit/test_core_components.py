import numpy as np
import pytest

from sigmanet.core.activations import sigmoid, sigmoid_prime
from sigmanet.core.backward import backward_deltas, output_delta
from sigmanet.core.errors import DimensionMismatch, InvalidTopology
from sigmanet.core.forward import feedforward, feedforward_cached
from sigmanet.core.network import NetworkModel
from sigmanet.core.types import Sample
from sigmanet.training.trainer import Trainer


def _reference_network() -> NetworkModel:
    return NetworkModel.from_parameters(
        weights=[[[0.1, 0.2], [0.3, 0.4]], [[0.5, 0.6]]],
        biases=[[0.0, 0.0], [0.0]],
    )


def test_sigmoid_and_derivative():
    x = np.array([-2.0, 0.0, 3.0])
    s = sigmoid(x)
    assert np.allclose(s, 1.0 / (1.0 + np.exp(-x)))
    assert np.isclose(sigmoid(np.array(0.0)), 0.5)
    assert np.allclose(sigmoid_prime(x), s * (1.0 - s))
    assert np.isclose(sigmoid_prime(np.array(0.0)), 0.25)


@pytest.mark.parametrize("sizes", [[], [3], [3, 0], [2, -1, 2], [2.5, 2]])
def test_create_rejects_invalid_topology(sizes):
    with pytest.raises(InvalidTopology):
        NetworkModel.create(sizes, rng=np.random.default_rng(0))


def test_create_shapes_and_init_range():
    sizes = [5, 4, 3, 2]
    model = NetworkModel.create(sizes, rng=np.random.default_rng(0))
    assert model.sizes == (5, 4, 3, 2)
    assert model.num_layers == 3
    assert len(model.weights) == len(model.biases) == 3
    for i in range(1, 4):
        W, b = model.layer(i)
        assert W.shape == (sizes[i], sizes[i - 1])
        assert b.shape == (sizes[i],)
        assert W.dtype == np.float64
        assert np.all(W >= -1.0) and np.all(W < 1.0)
        assert np.all(b >= -1.0) and np.all(b < 1.0)
    assert model.parameter_count() == 5 * 4 + 4 + 4 * 3 + 3 + 3 * 2 + 2


def test_create_is_reproducible_with_seeded_generator():
    first = NetworkModel.create([3, 4, 2], rng=np.random.default_rng(42))
    second = NetworkModel.create([3, 4, 2], rng=np.random.default_rng(42))
    for a, b in zip(first.weights + first.biases, second.weights + second.biases):
        assert np.array_equal(a, b)


def test_accessors_are_read_only():
    model = NetworkModel.create([2, 3, 1], rng=np.random.default_rng(0))
    with pytest.raises(ValueError):
        model.weights[0][0, 0] = 10.0
    with pytest.raises(ValueError):
        model.biases[0][0] = 10.0
    with pytest.raises(IndexError):
        model.layer(0)


def test_from_parameters_rejects_mismatched_shapes():
    with pytest.raises(InvalidTopology):
        NetworkModel.from_parameters([np.zeros((2, 3)), np.zeros((1, 3))], [np.zeros(2), np.zeros(1)])
    with pytest.raises(InvalidTopology):
        NetworkModel.from_parameters([np.zeros((2, 3))], [np.zeros(3)])
    with pytest.raises(InvalidTopology):
        NetworkModel.from_parameters([np.zeros((2, 3))], [])


def test_copy_is_independent():
    model = NetworkModel.create([2, 2], rng=np.random.default_rng(0))
    clone = model.copy()
    model.apply_update(0, np.ones((2, 2)), np.ones(2))
    assert not np.array_equal(model.weights[0], clone.weights[0])


def test_reference_forward_pass():
    model = _reference_network()
    output, cache = feedforward_cached(model, [1.0, 0.0])
    assert np.allclose(cache.zs[0], [0.1, 0.3])
    assert np.allclose(cache.activations[1], [0.52498, 0.57444], atol=1e-5)
    assert np.allclose(cache.zs[1], [0.60715], atol=1e-4)
    assert np.allclose(output, [0.6473], atol=1e-3)
    assert np.array_equal(output, feedforward(model, [1.0, 0.0]))
    assert np.array_equal(cache.activations[0], [1.0, 0.0])


def test_feedforward_output_in_sigmoid_range():
    rng = np.random.default_rng(3)
    model = NetworkModel.create([6, 5, 4], rng=rng)
    for _ in range(20):
        output = feedforward(model, rng.uniform(0.0, 1.0, size=6))
        assert output.shape == (4,)
        assert np.all(output > 0.0) and np.all(output < 1.0)


@pytest.mark.parametrize("inputs", [[1.0, 0.0, 0.5], [1.0], [[1.0, 0.0]]])
def test_feedforward_rejects_wrong_input_length(inputs):
    model = _reference_network()
    with pytest.raises(DimensionMismatch):
        feedforward(model, inputs)
    with pytest.raises(DimensionMismatch):
        feedforward_cached(model, inputs)


def test_backward_deltas_shapes_and_chain_rule():
    model = NetworkModel.create([3, 4, 2], rng=np.random.default_rng(1))
    _, cache = feedforward_cached(model, [0.2, 0.4, 0.6])
    target = np.array([0.0, 1.0])
    deltas = backward_deltas(model.weights, cache, target)
    assert [d.shape for d in deltas] == [(4,), (2,)]
    assert np.allclose(deltas[1], output_delta(cache, target))
    expected = (model.weights[1].T @ deltas[1]) * sigmoid_prime(cache.zs[0])
    assert np.allclose(deltas[0], expected)


def test_output_delta_rejects_wrong_target_length():
    model = _reference_network()
    _, cache = feedforward_cached(model, [1.0, 0.0])
    with pytest.raises(DimensionMismatch):
        output_delta(cache, [1.0, 0.0])


def test_constructor_copies_parameters_to_float64():
    W = np.array([[1, 2]], dtype=np.int64)
    b = np.array([0], dtype=np.int64)
    model = NetworkModel((2, 1), [W], [b])
    assert model.weights[0].dtype == model.biases[0].dtype == np.float64
    model.apply_update(0, np.full((1, 2), 0.5), np.full(1, 0.25))
    assert np.allclose(model.weights[0], [[0.5, 1.5]])
    assert np.allclose(model.biases[0], [-0.25])
    assert W.tolist() == [[1, 2]] and b.tolist() == [0]


def test_training_leaves_caller_buffers_untouched():
    W1 = np.array([[0.1, 0.2], [0.3, 0.4]])
    W2 = np.array([[0.5, 0.6]])
    biases = [np.zeros(2), np.zeros(1)]
    model = NetworkModel.from_parameters([W1, W2], biases)
    Trainer(model).step(Sample(inputs=np.array([1.0, 0.0]), target=np.array([1.0])), 0.1)
    assert not np.array_equal(model.weights[0], W1)
    assert W1.tolist() == [[0.1, 0.2], [0.3, 0.4]]
    assert W2.tolist() == [[0.5, 0.6]]
    assert all(np.array_equal(b, np.zeros_like(b)) for b in biases)
