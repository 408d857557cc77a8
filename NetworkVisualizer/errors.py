# NetworkVisualizer/errors.py

class VisualizerError(Exception):
    """Base class for every error raised by the visualizer."""


class InvalidTopology(VisualizerError, ValueError):
    """Layer count, neuron count or activation/weight shape is unusable."""


class InvalidDomain(VisualizerError, ValueError):
    """A mapping domain with min >= max."""


class SurfaceFailure(VisualizerError, RuntimeError):
    """The drawing surface could not be created or refused a draw call."""
