# NetworkVisualizer/mapping.py
import math

import numpy as np

from NetworkVisualizer.core import Color
from NetworkVisualizer.errors import InvalidDomain

DEFAULT_DOMAIN = (-10.0, 10.0)
LOW_COLOR = (20, 20, 20)
HIGH_COLOR = (0, 0, 255)


def _round_half_up(x):
    return int(math.floor(x + 0.5))


def _check_domain(domain_min, domain_max):
    if not domain_min < domain_max:
        raise InvalidDomain(f"domain min must be below max, got [{domain_min}, {domain_max}]")


def map_value(value, domain_min=DEFAULT_DOMAIN[0], domain_max=DEFAULT_DOMAIN[1]):
    """Map a raw scalar onto the 0..255 intensity scale.

    Values below ``domain_min`` map to 0, values above ``domain_max`` map
    to 255, everything in between is interpolated linearly and rounded
    half-up.
    """
    _check_domain(domain_min, domain_max)
    if value < domain_min:
        return 0
    if value > domain_max:
        return 255
    return _round_half_up((value - domain_min) / (domain_max - domain_min) * 255.0)


def map_values(values, domain_min=DEFAULT_DOMAIN[0], domain_max=DEFAULT_DOMAIN[1]):
    """Element-wise ``map_value`` over a sequence, order preserved."""
    _check_domain(domain_min, domain_max)
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        return []
    scaled = (arr - domain_min) / (domain_max - domain_min) * 255.0
    mapped = np.floor(scaled + 0.5)
    mapped = np.where(arr < domain_min, 0, mapped)
    mapped = np.where(arr > domain_max, 255, mapped)
    return [int(v) for v in mapped.ravel()]


def blend_color(intensity, low=LOW_COLOR, high=HIGH_COLOR):
    """Blend between ``low`` and ``high`` by an intensity in 0..255."""
    w = min(255, max(0, intensity)) / 255.0
    channels = []
    for start, end in zip(low[:3], high[:3]):
        c = _round_half_up(start + w * (end - start))
        channels.append(min(255, max(0, c)))
    return Color(channels[0], channels[1], channels[2], 255)
