# NetworkVisualizer/visualization.py
from PyQt5 import QtCore, QtGui, QtWidgets


class NetworkVisualization(QtWidgets.QWidget):
    """Shows the frames a QImageSurface presents.

    The widget never draws the network itself; it only blits the most
    recent frame, scaled to fit while keeping its aspect ratio.
    """
    frameShown = QtCore.pyqtSignal(int)

    def __init__(self, surface, parent=None):
        super().__init__(parent)
        self.surface = surface
        self.frame = None
        self.frame_count = 0
        self.keep_aspect = True
        self.setMinimumSize(200, 150)
        surface.framePresented.connect(self.show_frame)

    def sizeHint(self):
        return QtCore.QSize(self.surface.width, self.surface.height)

    def show_frame(self, image):
        self.frame = image
        self.frame_count += 1
        self.update()
        self.frameShown.emit(self.frame_count)

    def target_rect(self):
        if self.frame is None:
            return QtCore.QRect()
        size = self.frame.size()
        mode = QtCore.Qt.KeepAspectRatio if self.keep_aspect else QtCore.Qt.IgnoreAspectRatio
        size.scale(self.size(), mode)
        x = (self.width() - size.width()) // 2
        y = (self.height() - size.height()) // 2
        return QtCore.QRect(x, y, size.width(), size.height())

    def paintEvent(self, event):
        painter = QtGui.QPainter(self)
        painter.fillRect(self.rect(), QtGui.QColor(20, 40, 50))
        if self.frame is not None:
            painter.setRenderHint(QtGui.QPainter.SmoothPixmapTransform)
            painter.drawImage(self.target_rect(), self.frame)
        painter.end()
