# NetworkVisualizer/layout.py
from dataclasses import dataclass, field
from typing import List, Optional

from NetworkVisualizer.core import Canvas, Color, Config, Point
from NetworkVisualizer.errors import InvalidTopology
from NetworkVisualizer.mapping import blend_color, map_value


@dataclass(frozen=True)
class NeuronGeometry:
    layer: int
    index: int
    center: Point
    radius: int
    intensity: int
    color: Color


@dataclass(frozen=True)
class SynapseGeometry:
    source: tuple
    target: tuple
    start: Point
    end: Point
    color: Color
    weight: Optional[float] = None


@dataclass
class Layout:
    canvas: Canvas
    layer_x: List[int] = field(default_factory=list)
    neurons: List[NeuronGeometry] = field(default_factory=list)
    synapses: List[SynapseGeometry] = field(default_factory=list)

    def layer_neurons(self, layer):
        return [n for n in self.neurons if n.layer == layer]


def circle_pixels(cx, cy, radius):
    """Every pixel whose centre lies within ``radius`` of (cx, cy).

    Pixels come back row by row, top to bottom, left to right.
    """
    pixels = []
    r2 = radius * radius
    for dy in range(-radius, radius + 1):
        for dx in range(-radius, radius + 1):
            if dx * dx + dy * dy <= r2:
                pixels.append(Point(cx + dx, cy + dy))
    return pixels


def layer_centers(canvas, layer_count, x_offset=0):
    layer_width = canvas.width // layer_count
    return [x_offset + layer_width // 2 + i * layer_width for i in range(layer_count)]


def neuron_centers(canvas, neurons, y_offset=0):
    if neurons <= 0:
        raise InvalidTopology(f"cannot lay out a layer with {neurons} neurons")
    neuron_height = canvas.height // neurons
    return [y_offset + neuron_height // 2 + j * neuron_height for j in range(neurons)]


def neuron_radius(neurons, config):
    return config.layout['radius_base'] + config.layout['radius_scale'] // neurons


def neuron_intensity(layer, value, config):
    if layer.mapped:
        return min(255, max(0, int(value)))
    return map_value(value, *config.mapping['activation_domain'])


def synapse_color(weight, config):
    base = config.colors['synapse']
    if weight is None:
        return Color(*base)
    c = blend_color(map_value(weight, *config.mapping['weight_domain']),
                    config.colors['low'], config.colors['high'])
    return Color(c.r, c.g, c.b, base[3])


def compute_layout(network, canvas, config=None):
    """Positions and colours for every neuron and synapse of ``network``."""
    config = config or Config()
    if canvas.width <= 0 or canvas.height <= 0:
        raise InvalidTopology(f"canvas must have a positive size, got {canvas.width}x{canvas.height}")

    layers = network.layers
    xs = layer_centers(canvas, len(layers), config.layout['x_offset'])
    ys = [neuron_centers(canvas, layer.neurons, config.layout['y_offset']) for layer in layers]
    layout = Layout(canvas=canvas, layer_x=xs)

    for i, layer in enumerate(layers[:-1]):
        for j in range(layer.neurons):
            for k in range(layers[i + 1].neurons):
                weight = layer.weights[j][k] if layer.weights is not None else None
                layout.synapses.append(SynapseGeometry(
                    source=(i, j),
                    target=(i + 1, k),
                    start=Point(xs[i], ys[i][j]),
                    end=Point(xs[i + 1], ys[i + 1][k]),
                    color=synapse_color(weight, config),
                    weight=weight,
                ))

    for i, layer in enumerate(layers):
        radius = neuron_radius(layer.neurons, config)
        for j, value in enumerate(layer.activations):
            intensity = neuron_intensity(layer, value, config)
            layout.neurons.append(NeuronGeometry(
                layer=i,
                index=j,
                center=Point(xs[i], ys[i][j]),
                radius=radius,
                intensity=intensity,
                color=blend_color(intensity, config.colors['low'], config.colors['high']),
            ))

    return layout
