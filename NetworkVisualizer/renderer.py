# NetworkVisualizer/renderer.py
import logging

from NetworkVisualizer.core import Config
from NetworkVisualizer.layout import circle_pixels, compute_layout

logger = logging.getLogger(__name__)


class NetworkRenderer:
    """Draws a Network onto a Surface, one full frame per ``render`` call.

    The renderer holds no per-frame state: the layout is recomputed from the
    network every call, so activations may change freely between frames.
    Surface errors propagate untouched.
    """
    def __init__(self, surface, config=None):
        self.surface = surface
        self.config = config or Config()
        self.last_layout = None

    def render(self, network):
        layout = compute_layout(network, self.surface.canvas, self.config)
        self.draw(layout)
        self.last_layout = layout
        return layout

    def draw(self, layout):
        s = self.surface

        s.set_draw_color(*self.config.colors['background'])
        s.clear()

        for synapse in layout.synapses:
            s.set_draw_color(*synapse.color)
            s.draw_line(synapse.start.x, synapse.start.y, synapse.end.x, synapse.end.y)

        for neuron in layout.neurons:
            self.draw_circle(neuron.center.x, neuron.center.y, neuron.radius, neuron.color)

        s.present()
        logger.debug("Rendered %d neurons and %d synapses",
                     len(layout.neurons), len(layout.synapses))

    def draw_circle(self, cx, cy, radius, color):
        self.surface.set_draw_color(*color)
        self.surface.draw_points(circle_pixels(cx, cy, radius))
