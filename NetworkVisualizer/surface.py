# NetworkVisualizer/surface.py
import logging
from abc import ABC, abstractmethod

from PyQt5 import QtCore, QtGui

from NetworkVisualizer.core import Canvas
from NetworkVisualizer.errors import SurfaceFailure

logger = logging.getLogger(__name__)


class Surface(ABC):
    """The drawing operations the renderer needs from a host graphics API."""

    @property
    @abstractmethod
    def width(self):
        ...

    @property
    @abstractmethod
    def height(self):
        ...

    @property
    def canvas(self):
        return Canvas(self.width, self.height)

    @abstractmethod
    def set_draw_color(self, r, g, b, a=255):
        ...

    @abstractmethod
    def clear(self):
        ...

    @abstractmethod
    def draw_point(self, x, y):
        ...

    @abstractmethod
    def draw_line(self, x1, y1, x2, y2):
        ...

    def draw_points(self, points):
        for x, y in points:
            self.draw_point(x, y)

    @abstractmethod
    def present(self):
        ...

    @abstractmethod
    def destroy(self):
        ...


class _SurfaceSignals(QtCore.QObject):
    framePresented = QtCore.pyqtSignal(QtGui.QImage)


class QImageSurface(Surface):
    """An off-screen ARGB32 image drawn through a QPainter.

    Draw calls are buffered in the painter until ``present()``, which ends
    the painter and emits ``framePresented`` with a copy of the image.
    """
    def __init__(self, width, height):
        if width <= 0 or height <= 0:
            raise SurfaceFailure(f"surface size must be positive, got {width}x{height}")
        self.image = QtGui.QImage(width, height, QtGui.QImage.Format_ARGB32)
        if self.image.isNull():
            raise SurfaceFailure(f"could not allocate a {width}x{height} image")
        self.image.fill(QtCore.Qt.black)
        self.signals = _SurfaceSignals()
        self.framePresented = self.signals.framePresented
        self.painter = None
        self.color = QtGui.QColor(0, 0, 0, 255)
        self.pen = QtGui.QPen(self.color, 1)
        self.destroyed = False
        self.frames = 0
        logger.info("Created %dx%d surface", width, height)

    @property
    def width(self):
        return self.image.width()

    @property
    def height(self):
        return self.image.height()

    def _active_painter(self):
        if self.destroyed:
            raise SurfaceFailure("surface has been destroyed")
        if self.painter is None:
            painter = QtGui.QPainter()
            if not painter.begin(self.image):
                raise SurfaceFailure("QPainter could not begin on the surface image")
            painter.setRenderHint(QtGui.QPainter.Antialiasing, False)
            painter.setCompositionMode(QtGui.QPainter.CompositionMode_SourceOver)
            painter.setPen(self.pen)
            self.painter = painter
        return self.painter

    def set_draw_color(self, r, g, b, a=255):
        if self.destroyed:
            raise SurfaceFailure("surface has been destroyed")
        self.color = QtGui.QColor(r, g, b, a)
        self.pen = QtGui.QPen(self.color, 1)
        if self.painter is not None:
            self.painter.setPen(self.pen)

    def clear(self):
        painter = self._active_painter()
        painter.setCompositionMode(QtGui.QPainter.CompositionMode_Source)
        painter.fillRect(self.image.rect(), self.color)
        painter.setCompositionMode(QtGui.QPainter.CompositionMode_SourceOver)

    def draw_point(self, x, y):
        self._active_painter().drawPoint(x, y)

    def draw_line(self, x1, y1, x2, y2):
        self._active_painter().drawLine(x1, y1, x2, y2)

    def draw_points(self, points):
        polygon = QtGui.QPolygon([QtCore.QPoint(x, y) for x, y in points])
        self._active_painter().drawPoints(polygon)

    def present(self):
        painter = self._active_painter()
        if not painter.end():
            self.painter = None
            raise SurfaceFailure("QPainter failed to flush the frame")
        self.painter = None
        self.frames += 1
        self.framePresented.emit(self.image.copy())

    def pixel(self, x, y):
        """RGBA of a single pixel, for inspection once a frame is presented."""
        c = self.image.pixelColor(x, y)
        return (c.red(), c.green(), c.blue(), c.alpha())

    def destroy(self):
        if self.destroyed:
            return
        if self.painter is not None and self.painter.isActive():
            self.painter.end()
        self.painter = None
        self.destroyed = True
        logger.info("Destroyed surface after %d frames", self.frames)


class GraphicsContext:
    """Scoped ownership of the Qt application object and one surface.

    Use as a context manager. The surface is released exactly once on exit,
    whether or not the body raised. A QGuiApplication is created only when
    the process has none, and only that one is torn down.
    """
    def __init__(self, width, height, surface_factory=QImageSurface):
        self.width = width
        self.height = height
        self.surface_factory = surface_factory
        self.surface = None
        self._owned_app = None

    def open(self):
        if self.surface is not None:
            raise SurfaceFailure("graphics context already holds a surface")
        if QtGui.QGuiApplication.instance() is None:
            self._owned_app = QtGui.QGuiApplication([])
        try:
            self.surface = self.surface_factory(self.width, self.height)
        except Exception:
            self._release_app()
            raise
        return self

    def close(self):
        if self.surface is not None:
            surface, self.surface = self.surface, None
            try:
                surface.destroy()
            finally:
                self._release_app()
        else:
            self._release_app()

    def _release_app(self):
        if self._owned_app is not None:
            self._owned_app.quit()
            self._owned_app = None

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
