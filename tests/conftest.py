import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from NetworkVisualizer.surface import Surface
from NetworkVisualizer.errors import SurfaceFailure


class RecordingSurface(Surface):
    """Records every draw call instead of touching a real graphics API."""
    def __init__(self, width=300, height=150, fail_on=None):
        self._width = width
        self._height = height
        self.fail_on = fail_on
        self.calls = []
        self.color = (0, 0, 0, 255)
        self.destroy_count = 0

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    def _record(self, name, *args):
        if name == self.fail_on:
            raise SurfaceFailure(f"{name} failed")
        self.calls.append((name,) + args)

    def set_draw_color(self, r, g, b, a=255):
        self.color = (r, g, b, a)
        self._record("set_draw_color", r, g, b, a)

    def clear(self):
        self._record("clear", self.color)

    def draw_point(self, x, y):
        self._record("draw_point", x, y, self.color)

    def draw_line(self, x1, y1, x2, y2):
        self._record("draw_line", x1, y1, x2, y2, self.color)

    def present(self):
        self._record("present")

    def destroy(self):
        self.destroy_count += 1

    def named(self, name):
        return [c for c in self.calls if c[0] == name]


@pytest.fixture
def recording_surface():
    return RecordingSurface()


@pytest.fixture(scope="session")
def qapp():
    QtWidgets = pytest.importorskip("PyQt5.QtWidgets")
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    yield app
