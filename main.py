import sys
import logging
import threading
from time import time

from PyQt5.QtWidgets import (
    QApplication, QMainWindow, QVBoxLayout, QWidget, QPushButton, QHBoxLayout,
    QLabel, QGroupBox, QComboBox, QSlider, QColorDialog, QSizePolicy
)
from PyQt5.QtCore import Qt, QThread, pyqtSignal, QPointF
from PyQt5.QtGui import QImage, QPainter, QPen, QColor

from polyfractal.cli import setup_logging
from polyfractal.datatypes import (
    PRESETS, FractalParameters, get_preset, MIN_GENERATIONS, MAX_GENERATIONS, MIN_SCALE, MAX_SCALE
)
from polyfractal.fractal import draw_fractal
from polyfractal.geometry import total_shapes
from polyfractal.points import PointCollector
from polyfractal.settings import default_config, load_config
from polyfractal.styles import get_font, get_stylesheet, get_total_style
from polyfractal.transforms import TransformType

SCALE_STEPS = 100  # slider ticks per unit of scale
POINT_RADIUS = 2

USAGE = (
    "Click the canvas to create up to {max_points} points. "
    "Adjust above settings to generate different recursive shapes. "
    "Available presets can be selected. "
    'Click "Create image" to finalise selection.'
)


class QtRenderTarget:
    """Draws shape outlines with a QPainter."""

    def __init__(self, painter):
        self.painter = painter

    def line(self, a, b):
        self.painter.drawLine(QPointF(a.x, a.y), QPointF(b.x, b.y))


class FractalWorker(QThread):
    rendered = pyqtSignal(QImage, int)

    def __init__(self, image, points, parameters, colour):
        super().__init__()
        self.image = image
        self.points = points
        self.parameters = parameters
        self.colour = colour
        self.cancelled = threading.Event()

    def cancel(self):
        self.cancelled.set()

    def run(self):
        """Draw the fractal onto the worker's own copy of the canvas in a separate thread."""
        logging.info("Starting fractal drawing...")
        start_time = time()
        painter = QPainter(self.image)
        try:
            painter.setRenderHint(QPainter.Antialiasing)
            painter.setPen(QPen(QColor(self.colour), 1))
            count = draw_fractal(
                self.points, self.parameters, QtRenderTarget(painter), should_stop=self.cancelled.is_set
            )
        finally:
            painter.end()

        if self.cancelled.is_set():
            logging.info("Fractal drawing cancelled.")
            return
        logging.info(f"Fractal drawing completed in {time() - start_time:.2f} seconds.")
        self.rendered.emit(self.image, count)


class FractalCanvas(QWidget):
    """Shows the last drawn fractal and the points placed for the next one."""

    clicked = pyqtSignal(float, float)

    def __init__(self, width, height, background, points):
        super().__init__()
        self.setFixedSize(width, height)
        self.background = QColor(background)
        self.points = points
        self.colour = QColor(default_config.colour)
        self.image = QImage(width, height, QImage.Format_RGB32)
        self.clear()

    def clear(self):
        self.image.fill(self.background)
        self.update()

    def set_image(self, image):
        self.image = image
        self.update()

    def set_colour(self, colour):
        self.colour = QColor(colour)
        self.update()

    def mousePressEvent(self, event):
        pos = event.pos()
        if PointCollector.contains(pos.x(), pos.y(), self.width(), self.height()):
            self.clicked.emit(float(pos.x()), float(pos.y()))

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.drawImage(0, 0, self.image)
        points = self.points.points
        if points:
            painter.setRenderHint(QPainter.Antialiasing)
            painter.setPen(QPen(self.colour, 1))
            # Pending outline, closed from the last point back to the first
            for i, point in enumerate(points):
                following = points[(i + 1) % len(points)]
                painter.drawEllipse(QPointF(point.x, point.y), POINT_RADIUS, POINT_RADIUS)
                painter.drawLine(QPointF(point.x, point.y), QPointF(following.x, following.y))
        painter.end()


class FractalApp(QMainWindow):
    CONTROLS_WIDTH = 260

    def __init__(self, config):
        super().__init__()
        self.config = config
        self.colour = config.colour
        self.points = PointCollector(config.max_points)
        self.worker = None
        self.old_workers = []

        self.init_ui()
        self.update_ui()

    def init_ui(self):
        self.setWindowTitle("Polygon Fractals")
        self.setFont(get_font())
        self.setStyleSheet(get_stylesheet(self.colour))

        main_layout = QHBoxLayout()

        self.canvas = FractalCanvas(self.config.width, self.config.height, self.config.background, self.points)
        self.canvas.set_colour(self.colour)
        self.canvas.clicked.connect(self.add_point)
        main_layout.addWidget(self.canvas, alignment=Qt.AlignTop)

        main_layout.addLayout(self.setup_controls())

        container = QWidget()
        container.setLayout(main_layout)
        self.setCentralWidget(container)

    def setup_controls(self):
        """Set up the control column next to the canvas."""
        controls_layout = QVBoxLayout()

        controls_layout.addWidget(self.create_canvas_group(), alignment=Qt.AlignTop)
        controls_layout.addWidget(self.create_parameters_group(), alignment=Qt.AlignTop)
        controls_layout.addWidget(self.create_presets_group(), alignment=Qt.AlignTop)

        start_button = self.create_button("Create image", "Draw the fractal for the placed points", self.create_fractal)
        controls_layout.addWidget(start_button, alignment=Qt.AlignTop)

        usage = QLabel(USAGE.format(max_points=self.config.max_points))
        usage.setObjectName("usage")
        usage.setWordWrap(True)
        usage.setMaximumWidth(self.CONTROLS_WIDTH)
        controls_layout.addWidget(usage, alignment=Qt.AlignTop)

        controls_layout.addStretch()
        return controls_layout

    def create_canvas_group(self):
        canvas_group = QGroupBox("Canvas")
        canvas_group.setMaximumWidth(self.CONTROLS_WIDTH)
        canvas_layout = QVBoxLayout()

        canvas_layout.addWidget(self.create_button("Clear", "Clear canvas and placed points", self.clear_canvas))

        points_layout = QHBoxLayout()
        points_layout.addWidget(QLabel("Number of points:"))
        self.points_value = QLabel()
        points_layout.addWidget(self.points_value)
        canvas_layout.addLayout(points_layout)

        colour_layout = QHBoxLayout()
        colour_layout.addWidget(QLabel("Colour:"))
        self.colour_button = self.create_button("", "Select the line colour", self.choose_colour)
        self.colour_button.setObjectName("colour")
        colour_layout.addWidget(self.colour_button)
        canvas_layout.addLayout(colour_layout)

        canvas_group.setLayout(canvas_layout)
        return canvas_group

    def create_parameters_group(self):
        """Create the fractal type selection, sliders and shape count display."""
        parameters = self.config.parameters.clamped()
        parameters_group = QGroupBox("Fractal")
        parameters_group.setMaximumWidth(self.CONTROLS_WIDTH)
        parameters_layout = QVBoxLayout()

        parameters_layout.addWidget(QLabel("Fractal type:"))
        self.type_selection = QComboBox()
        self.type_selection.addItems(TransformType.labels())
        self.type_selection.setCurrentText(parameters.transform_type.label)
        self.type_selection.currentTextChanged.connect(self.update_ui)
        parameters_layout.addWidget(self.type_selection)

        parameters_layout.addWidget(QLabel("Number of generations:"))
        self.generations_slider, self.generations_value = self.create_slider(
            MIN_GENERATIONS, MAX_GENERATIONS, parameters.generations, parameters_layout
        )

        parameters_layout.addWidget(QLabel("Scale between generations:"))
        self.scale_slider, self.scale_value = self.create_slider(
            int(MIN_SCALE * SCALE_STEPS),
            int(MAX_SCALE * SCALE_STEPS),
            round(parameters.scale * SCALE_STEPS),
            parameters_layout,
        )

        parameters_layout.addWidget(QLabel("Total number of shapes to draw:"))
        self.total_value = QLabel()
        parameters_layout.addWidget(self.total_value)
        self.warning_label = QLabel("WARNING: This may lag your computer")
        self.warning_label.setObjectName("warning")
        self.warning_label.hide()
        parameters_layout.addWidget(self.warning_label)

        parameters_group.setLayout(parameters_layout)
        return parameters_group

    def create_presets_group(self):
        presets_group = QGroupBox("Examples")
        presets_group.setMaximumWidth(self.CONTROLS_WIDTH)
        presets_layout = QVBoxLayout()
        for name in PRESETS:
            presets_layout.addWidget(
                self.create_button(name, f"Load the {name} example", lambda _, n=name: self.load_preset(n))
            )
        presets_group.setLayout(presets_layout)
        return presets_group

    def create_slider(self, minimum, maximum, value, layout):
        """Create a horizontal slider with a label showing its value."""
        slider_layout = QHBoxLayout()
        slider = QSlider(Qt.Horizontal)
        slider.setRange(minimum, maximum)
        slider.setValue(value)
        slider.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
        slider.valueChanged.connect(self.update_ui)
        value_label = QLabel()
        value_label.setFixedWidth(40)
        slider_layout.addWidget(slider)
        slider_layout.addWidget(value_label)
        layout.addLayout(slider_layout)
        return slider, value_label

    def create_button(self, label, tooltip, callback):
        """Create a reusable button."""
        button = QPushButton(label)
        button.setToolTip(tooltip)
        button.clicked.connect(callback)
        return button

    def current_parameters(self):
        return FractalParameters(
            scale=self.scale_slider.value() / SCALE_STEPS,
            transform_type=TransformType.from_label(self.type_selection.currentText()),
            generations=self.generations_slider.value(),
        ).clamped()

    def update_ui(self):
        """Refresh the value labels and the shape count for the current settings."""
        parameters = self.current_parameters()
        self.points_value.setText(str(len(self.points)))
        self.generations_value.setText(str(parameters.generations))
        self.scale_value.setText(f"{parameters.scale:.2f}")

        total = total_shapes(len(self.points), parameters.generations)
        warn = total > self.config.warning_threshold
        self.total_value.setText(str(total))
        self.total_value.setStyleSheet(get_total_style(warn))
        self.warning_label.setVisible(warn)

    def add_point(self, x, y):
        self.cancel_worker()
        self.canvas.clear()
        self.points.add(x, y)
        self.update_ui()

    def clear_canvas(self):
        logging.info("Clearing canvas...")
        self.cancel_worker()
        self.points.clear()
        self.canvas.clear()
        self.update_ui()

    def load_preset(self, name):
        logging.info(f"Loading preset {name}...")
        preset = get_preset(name)
        self.clear_canvas()
        self.type_selection.setCurrentText(preset.parameters.transform_type.label)
        self.generations_slider.setValue(preset.parameters.generations)
        self.scale_slider.setValue(round(preset.parameters.scale * SCALE_STEPS))
        self.points.replace(preset.points(self.canvas.width(), self.canvas.height()))
        self.canvas.update()
        self.update_ui()

    def choose_colour(self):
        colour = QColorDialog.getColor(QColor(self.colour), self, "Line colour")
        if not colour.isValid():
            return
        self.colour = colour.name()
        logging.info(f"Changing colour to: {self.colour}")
        self.setStyleSheet(get_stylesheet(self.colour))
        self.canvas.set_colour(self.colour)

    def create_fractal(self):
        """Start drawing the fractal for the placed points in a separate thread."""
        if not self.points.ready:
            logging.warning("At least 2 points are needed to create a fractal.")
            return

        self.cancel_worker()
        parameters = self.current_parameters()
        self.worker = FractalWorker(self.canvas.image.copy(), self.points.points, parameters, self.colour)
        self.worker.rendered.connect(self.display_fractal)
        self.worker.start()

        self.points.clear()
        self.canvas.update()
        self.update_ui()

    def display_fractal(self, image, count):
        if self.sender() is not self.worker:
            logging.info("Ignoring fractal from a cancelled run.")
            return
        self.canvas.set_image(image)
        logging.info(f"Fractal display updated with {count} shapes.")

    def cancel_worker(self):
        if self.worker is None:
            return
        if self.worker.isRunning():
            self.worker.cancel()
            # Keep a reference until the thread has stopped
            self.old_workers.append(self.worker)
            self.worker.finished.connect(self.forget_workers)
        self.worker = None

    def forget_workers(self):
        self.old_workers = [worker for worker in self.old_workers if worker.isRunning()]

    def closeEvent(self, event):
        self.cancel_worker()
        for worker in self.old_workers:
            worker.wait()
        super().closeEvent(event)


def run(argv):
    """Start the desktop app. `argv[1]`, if given, is a YAML config file."""
    try:
        config = load_config(argv[1]) if len(argv) > 1 else default_config
    except (OSError, ValueError) as e:
        setup_logging(default_config.log_file)
        logging.error(f"Could not load config: {e}")
        return 1
    setup_logging(config.log_file)

    app = QApplication(argv)
    main_window = FractalApp(config)
    main_window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(run(sys.argv))
