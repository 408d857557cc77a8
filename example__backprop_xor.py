import sys
import logging

from PyQt5 import QtWidgets, QtCore
from NetworkVisualizer.learning import FeedForwardNetwork
from NetworkVisualizer.logging_config import setup_logging
from NetworkVisualizer.renderer import NetworkRenderer
from NetworkVisualizer.surface import GraphicsContext
from NetworkVisualizer.visualization import NetworkVisualization

logger = logging.getLogger("NetworkVisualizer.example.xor")

TRAINING_DATA = [
    ([0.0, 0.0], [0.0]), ([0.0, 1.0], [1.0]),
    ([1.0, 0.0], [1.0]), ([1.0, 1.0], [0.0])
]


class XorTrainingWindow(QtWidgets.QMainWindow):
    """Trains XOR a few epochs per tick and draws the network after each tick."""
    def __init__(self, surface, max_epochs=5000, epochs_per_tick=20):
        super().__init__()
        self.setWindowTitle("XOR Backpropagation (live)")
        self.learner = FeedForwardNetwork([2, 4, 1], learning_rate=0.7, momentum_factor=0.3)
        self.renderer = NetworkRenderer(surface)
        self.max_epochs = max_epochs
        self.epochs_per_tick = epochs_per_tick
        self.epoch = 0
        self.sample = 0

        self.vis = NetworkVisualization(surface, self)
        self.setCentralWidget(self.vis)

        self.timer = QtCore.QTimer()
        self.timer.timeout.connect(self.training_tick)
        self.timer.start(30)

    def training_tick(self):
        errors = self.learner.train(TRAINING_DATA, epochs=self.epochs_per_tick, target_error_threshold=0.005)
        self.epoch += len(errors)

        # Show the network on one sample per frame, cycling through the set
        inputs, expected = TRAINING_DATA[self.sample]
        self.sample = (self.sample + 1) % len(TRAINING_DATA)
        output = self.learner.forward_pass(inputs)[0]
        self.renderer.render(self.learner.to_network())

        self.statusBar().showMessage(
            f"Epoch {self.epoch}: avg error {errors[-1]:.5f} | {inputs} -> {output:.3f} (expected {expected[0]:.0f})")

        if errors[-1] <= 0.005 or self.epoch >= self.max_epochs:
            self.timer.stop()
            logger.info("Training stopped at epoch %d with avg error %.6f", self.epoch, errors[-1])
            self.report()

    def report(self):
        correct_predictions = 0
        for inputs, expected in TRAINING_DATA:
            actual = self.learner.forward_pass(inputs)[0]
            predicted_binary = 1 if actual > 0.5 else 0
            logger.info("Input: %s, Raw Output: %.4f, Predicted: %d, Expected: %d",
                        inputs, actual, predicted_binary, int(expected[0]))
            if predicted_binary == int(expected[0]):
                correct_predictions += 1
        accuracy = correct_predictions / len(TRAINING_DATA) * 100
        logger.info("Accuracy on training data: %.2f%%", accuracy)


def main():
    setup_logging()
    app = QtWidgets.QApplication(sys.argv)
    with GraphicsContext(600, 400) as ctx:
        window = XorTrainingWindow(ctx.surface)
        window.resize(640, 480)
        window.show()
        code = app.exec_()
    sys.exit(code)


if __name__ == "__main__":
    main()
