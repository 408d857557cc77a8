import numpy as np
import pytest

from NetworkVisualizer.core import Config, Layer, Network
from NetworkVisualizer.errors import InvalidTopology, VisualizerError


def test_network_requires_at_least_one_layer():
    with pytest.raises(InvalidTopology):
        Network([])


def test_activation_length_must_match_neuron_count():
    with pytest.raises(InvalidTopology):
        Layer(3, [0.0, 0.0])


@pytest.mark.parametrize("neurons", [0, -2])
def test_non_positive_neuron_count_rejected(neurons):
    with pytest.raises(InvalidTopology):
        Layer(neurons, [])


def test_from_sizes_rejects_empty_layer():
    with pytest.raises(InvalidTopology):
        Network.from_sizes([2, 0, 1])


def test_errors_share_a_base_class():
    assert issubclass(InvalidTopology, VisualizerError)
    assert issubclass(InvalidTopology, ValueError)


def test_from_sizes_and_synapse_count():
    net = Network.from_sizes([4, 5, 2], fill=1.5)
    assert net.number_of_layers == 3
    assert net.layer_sizes() == [4, 5, 2]
    assert net.layers[1].activations == [1.5] * 5
    assert net.synapse_count() == 4 * 5 + 5 * 2


def test_set_activations_between_frames():
    net = Network.from_sizes([2, 1])
    net.set_activations(0, [3.0, -3.0])
    assert net.layers[0].activations == [3.0, -3.0]
    with pytest.raises(InvalidTopology):
        net.set_activations(0, [1.0])
    assert net.layers[0].activations == [3.0, -3.0]


def test_weights_shape_is_validated():
    with pytest.raises(InvalidTopology):
        Network([Layer(2, [0, 0], weights=[[0.1], [0.2]]), Layer(2, [0, 0])])
    with pytest.raises(InvalidTopology):
        Network([Layer(2, [0, 0]), Layer(1, [0], weights=[[0.1]])])
    net = Network([Layer(2, [0, 0], weights=[[0.1, 0.2], [0.3, 0.4]]), Layer(2, [0, 0])])
    assert net.layers[0].weights == [[0.1, 0.2], [0.3, 0.4]]


def test_set_weights_keeps_previous_on_bad_shape():
    net = Network.from_sizes([2, 3])
    net.set_weights(0, [[0.0] * 3, [1.0] * 3])
    with pytest.raises(InvalidTopology):
        net.set_weights(0, [[0.0] * 2, [1.0] * 2])
    assert net.layers[0].weights == [[0.0] * 3, [1.0] * 3]
    with pytest.raises(InvalidTopology):
        net.set_weights(1, [[0.0]])


def test_config_defaults():
    config = Config()
    assert config.mapping['activation_domain'] == (-10.0, 10.0)
    assert config.colors['background'] == (20, 40, 50, 255)
    assert config.colors['synapse'] == (0x55, 0x55, 0x55, 80)
    assert config.layout['x_offset'] == 0


def test_numpy_integer_counts_are_accepted():
    net = Network.from_sizes(np.array([2, 3, 1]))
    assert net.layer_sizes() == [2, 3, 1]
    assert all(type(n) is int for n in net.layer_sizes())
    layer = Layer(np.int32(2), [0.0, 1.0])
    assert layer.neurons == 2


@pytest.mark.parametrize("neurons", [True, 2.0, "2"])
def test_non_integer_neuron_counts_rejected(neurons):
    with pytest.raises(InvalidTopology):
        Layer(neurons, [0.0] * 2)
    with pytest.raises(InvalidTopology):
        Network.from_sizes([1, neurons])
