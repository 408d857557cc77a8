# NetworkVisualizer/core.py
import numbers
from collections import namedtuple

from NetworkVisualizer.errors import InvalidTopology

Canvas = namedtuple('Canvas', ['width', 'height'])
Color = namedtuple('Color', ['r', 'g', 'b', 'a'])
Point = namedtuple('Point', ['x', 'y'])


def _neuron_count(neurons):
    if isinstance(neurons, bool) or not isinstance(neurons, numbers.Integral) or neurons <= 0:
        raise InvalidTopology(f"neuron count must be a positive integer, got {neurons!r}")
    return int(neurons)


class Config:
    """Holds layout, colour and mapping settings for the renderer."""
    def __init__(self):
        self.layout = {
            'x_offset': 0,
            'y_offset': 0,
            'radius_base': 1,
            'radius_scale': 100,
        }
        self.colors = {
            'background': (20, 40, 50, 255),
            'synapse': (0x55, 0x55, 0x55, 80),
            'low': (20, 20, 20),
            'high': (0, 0, 255),
        }
        self.mapping = {
            'activation_domain': (-10.0, 10.0),
            'weight_domain': (-1.0, 1.0),
        }


class Layer:
    """One column of neurons with an activation per neuron.

    When ``mapped`` is true the activations are already intensities in
    0..255 and are drawn as-is. ``weights`` optionally holds one row per
    neuron with one weight per neuron of the next layer.
    """
    def __init__(self, neurons, activations, mapped=False, weights=None):
        neurons = _neuron_count(neurons)
        activations = list(activations)
        if len(activations) != neurons:
            raise InvalidTopology(
                f"layer declares {neurons} neurons but got {len(activations)} activations")
        self.neurons = neurons
        self.activations = activations
        self.mapped = mapped
        self.weights = [list(row) for row in weights] if weights is not None else None

    def set_activations(self, values):
        values = list(values)
        if len(values) != self.neurons:
            raise InvalidTopology(
                f"layer has {self.neurons} neurons but got {len(values)} activations")
        self.activations = values

    def __len__(self):
        return self.neurons

    def __repr__(self):
        return f"Layer(neurons={self.neurons}, mapped={self.mapped}, weighted={self.weights is not None})"


class Network:
    """An ordered, fully connected stack of layers."""
    def __init__(self, layers):
        layers = list(layers)
        if not layers:
            raise InvalidTopology("number of layers must be > 0. got 0")
        for i, layer in enumerate(layers):
            if not isinstance(layer, Layer):
                raise InvalidTopology(f"layer {i} is not a Layer: {layer!r}")
            if layer.weights is None:
                continue
            if i == len(layers) - 1:
                raise InvalidTopology("the output layer has no outgoing synapses to weight")
            self._check_weights(i, layer, layers[i + 1])
        self.layers = layers

    @staticmethod
    def _check_weights(index, layer, next_layer):
        if len(layer.weights) != layer.neurons:
            raise InvalidTopology(
                f"layer {index} weights have {len(layer.weights)} rows, expected {layer.neurons}")
        for row in layer.weights:
            if len(row) != next_layer.neurons:
                raise InvalidTopology(
                    f"layer {index} weights rows must have {next_layer.neurons} columns, got {len(row)}")

    @classmethod
    def from_sizes(cls, sizes, fill=0.0, mapped=False):
        counts = [_neuron_count(n) for n in sizes]
        return cls([Layer(n, [fill] * n, mapped=mapped) for n in counts])

    @property
    def number_of_layers(self):
        return len(self.layers)

    def layer_sizes(self):
        return [layer.neurons for layer in self.layers]

    def set_activations(self, layer_index, values):
        self.layers[layer_index].set_activations(values)

    def set_weights(self, layer_index, weights):
        if layer_index == len(self.layers) - 1:
            raise InvalidTopology("the output layer has no outgoing synapses to weight")
        layer = self.layers[layer_index]
        previous = layer.weights
        layer.weights = [list(row) for row in weights]
        try:
            self._check_weights(layer_index, layer, self.layers[layer_index + 1])
        except InvalidTopology:
            layer.weights = previous
            raise

    def synapse_count(self):
        return sum(a.neurons * b.neurons for a, b in zip(self.layers, self.layers[1:]))
