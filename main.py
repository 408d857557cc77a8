import sys
import random
from PyQt5 import QtWidgets, QtCore

from NetworkVisualizer.core import Network, Config
from NetworkVisualizer.errors import VisualizerError, InvalidTopology
from NetworkVisualizer.logging_config import setup_logging
from NetworkVisualizer.renderer import NetworkRenderer
from NetworkVisualizer.surface import GraphicsContext
from NetworkVisualizer.visualization import NetworkVisualization

CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600


def parse_layer_sizes(text):
    """'4, 6, 2' -> [4, 6, 2]. Raises InvalidTopology on anything else."""
    parts = [p.strip() for p in text.split(',') if p.strip()]
    try:
        sizes = [int(p) for p in parts]
    except ValueError:
        raise InvalidTopology(f"layer sizes must be integers, got {text!r}") from None
    if not sizes or any(n <= 0 for n in sizes):
        raise InvalidTopology(f"need one or more positive layer sizes, got {text!r}")
    return sizes


def random_weights(network, low=-1.0, high=1.0):
    sizes = network.layer_sizes()
    for i, (a, b) in enumerate(zip(sizes, sizes[1:])):
        network.set_weights(i, [[random.uniform(low, high) for _ in range(b)] for _ in range(a)])


class NetworkViewerApp(QtWidgets.QMainWindow):
    def __init__(self, surface):
        super().__init__()
        self.setWindowTitle("Neural Network Visualizer")
        self.config = Config()
        self.renderer = NetworkRenderer(surface, self.config)
        self.network = Network.from_sizes([3, 5, 4, 2])

        central_widget = QtWidgets.QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QtWidgets.QVBoxLayout(central_widget)

        self.vis = NetworkVisualization(surface, self)
        main_layout.addWidget(self.vis, 1)

        controls_group = QtWidgets.QGroupBox("Controls")
        controls_layout = QtWidgets.QGridLayout(controls_group)

        self.sizes_edit = QtWidgets.QLineEdit("3,5,4,2")
        self.sizes_edit.setToolTip("Neurons per layer, comma-separated, input first.")
        self.sizes_edit.editingFinished.connect(self.rebuild_network)
        controls_layout.addWidget(QtWidgets.QLabel("Layer sizes:"), 0, 0)
        controls_layout.addWidget(self.sizes_edit, 0, 1)

        self.show_weights_cb = QtWidgets.QCheckBox("Colour links by weight")
        self.show_weights_cb.toggled.connect(self.toggle_weights)
        controls_layout.addWidget(self.show_weights_cb, 1, 0)

        self.stimulate_btn = QtWidgets.QPushButton("Stimulate Randomly")
        self.stimulate_btn.clicked.connect(self.stimulate_randomly)
        controls_layout.addWidget(self.stimulate_btn, 1, 1)

        self.run_btn = QtWidgets.QPushButton("Pause")
        self.run_btn.setCheckable(True)
        self.run_btn.toggled.connect(self.toggle_running)
        controls_layout.addWidget(self.run_btn, 2, 0, 1, 2)

        main_layout.addWidget(controls_group)

        self.update_timer = QtCore.QTimer()
        self.update_timer.timeout.connect(self.periodic_network_update)
        self.update_timer.start(100)

        self.stimulate_randomly()

    def rebuild_network(self):
        try:
            sizes = parse_layer_sizes(self.sizes_edit.text())
        except InvalidTopology as e:
            QtWidgets.QMessageBox.warning(self, "Input Error", str(e))
            return
        if sizes == self.network.layer_sizes():
            return
        self.network = Network.from_sizes(sizes)
        if self.show_weights_cb.isChecked():
            random_weights(self.network)
        self.stimulate_randomly()
        self.statusBar().showMessage(f"Network rebuilt: {sizes}", 3000)

    def toggle_weights(self, checked):
        if checked:
            random_weights(self.network)
        else:
            for layer in self.network.layers:
                layer.weights = None
        self.render_frame()

    def toggle_running(self, paused):
        if paused:
            self.update_timer.stop()
            self.run_btn.setText("Resume")
        else:
            self.update_timer.start(100)
            self.run_btn.setText("Pause")

    def stimulate_randomly(self):
        lo, hi = self.config.mapping['activation_domain']
        for i, layer in enumerate(self.network.layers):
            self.network.set_activations(i, [random.uniform(lo, hi) for _ in range(layer.neurons)])
        self.render_frame()

    def periodic_network_update(self):
        lo, hi = self.config.mapping['activation_domain']
        for i, layer in enumerate(self.network.layers):
            drifted = [max(lo, min(hi, v + random.uniform(-0.5, 0.5))) for v in layer.activations]
            self.network.set_activations(i, drifted)
        self.render_frame()

    def render_frame(self):
        try:
            self.renderer.render(self.network)
        except VisualizerError as e:
            self.update_timer.stop()
            self.statusBar().showMessage(f"Render failed: {e}")

    def closeEvent(self, event):
        self.update_timer.stop()
        event.accept()


def main():
    setup_logging()
    app = QtWidgets.QApplication(sys.argv)
    if "Fusion" in QtWidgets.QStyleFactory.keys():
        app.setStyle(QtWidgets.QStyleFactory.create("Fusion"))
    with GraphicsContext(CANVAS_WIDTH, CANVAS_HEIGHT) as ctx:
        window = NetworkViewerApp(ctx.surface)
        window.resize(CANVAS_WIDTH, CANVAS_HEIGHT + 120)
        window.show()
        code = app.exec_()
    sys.exit(code)


if __name__ == "__main__":
    main()
