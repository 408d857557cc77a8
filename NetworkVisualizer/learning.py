# NetworkVisualizer/learning.py
import logging

import numpy as np

from NetworkVisualizer.core import Layer, Network
from NetworkVisualizer.errors import InvalidTopology
from NetworkVisualizer.mapping import map_values

logger = logging.getLogger(__name__)


class FeedForwardNetwork:
    """A small sigmoid MLP trained with backprop and momentum.

    It exists to give the visualizer something live to draw: after every
    forward pass the per-layer activations are kept, and ``to_network()``
    turns them and the current weights into a renderable Network.
    """
    def __init__(self, layer_sizes, learning_rate=0.5, momentum_factor=0.2, seed=None):
        layer_sizes = list(layer_sizes)
        if len(layer_sizes) < 2:
            raise InvalidTopology("a trainable network needs at least an input and an output layer")
        if any(n <= 0 for n in layer_sizes):
            raise InvalidTopology(f"every layer needs at least one neuron, got {layer_sizes}")
        self.layer_sizes = layer_sizes
        self.learning_rate = learning_rate
        self.momentum = momentum_factor
        rng = np.random.default_rng(seed)
        self.weights = [rng.uniform(-0.5, 0.5, size=(a, b))
                        for a, b in zip(layer_sizes, layer_sizes[1:])]
        self.biases = [np.zeros(b) for b in layer_sizes[1:]]
        self.previous_weight_updates = [np.zeros_like(w) for w in self.weights]
        self.activations = [np.zeros(n) for n in layer_sizes]

    def _sigmoid(self, x):
        return 1.0 / (1.0 + np.exp(-x))

    def _sigmoid_derivative(self, y):
        return y * (1.0 - y)

    def forward_pass(self, inputs):
        a = np.asarray(inputs, dtype=float)
        if a.shape != (self.layer_sizes[0],):
            raise InvalidTopology(f"expected {self.layer_sizes[0]} inputs, got {a.shape}")
        self.activations = [a]
        for w, b in zip(self.weights, self.biases):
            a = self._sigmoid(a @ w + b)
            self.activations.append(a)
        return list(a)

    def train_step(self, inputs, expected_outputs):
        """One forward and backward pass; returns the squared error."""
        outputs = np.asarray(self.forward_pass(inputs))
        error = np.asarray(expected_outputs, dtype=float) - outputs
        delta = error * self._sigmoid_derivative(outputs)

        for i in range(len(self.weights) - 1, -1, -1):
            prev = self.activations[i]
            next_delta = None
            if i > 0:
                next_delta = (self.weights[i] @ delta) * self._sigmoid_derivative(prev)
            update = self.learning_rate * np.outer(prev, delta) + self.momentum * self.previous_weight_updates[i]
            self.weights[i] += update
            self.biases[i] += self.learning_rate * delta
            self.previous_weight_updates[i] = update
            delta = next_delta

        return float(np.sum(error ** 2))

    def train(self, training_data, epochs=1000, target_error_threshold=0.01, progress_callback=None):
        epoch_errors = []
        for epoch in range(epochs):
            total_error = 0.0
            for inputs, expected_outputs in training_data:
                total_error += self.train_step(inputs, expected_outputs)

            avg_error = total_error / len(training_data)
            epoch_errors.append(avg_error)

            if progress_callback and not progress_callback(epoch, avg_error):
                break

            if avg_error <= target_error_threshold:
                logger.info("Target error reached at epoch %d", epoch + 1)
                break

        return epoch_errors

    def to_network(self):
        """Snapshot of the last forward pass as a renderable Network.

        Sigmoid outputs live in [0, 1], so activations are pre-mapped onto
        0..255 over that range rather than the renderer's default domain.
        """
        layers = []
        for i, acts in enumerate(self.activations):
            weights = self.weights[i].tolist() if i < len(self.weights) else None
            layers.append(Layer(self.layer_sizes[i], map_values(acts, 0.0, 1.0),
                                mapped=True, weights=weights))
        return Network(layers)
