"""
Main Application Window
=======================
The primary GUI container: control panel on the left, chart on the right.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Wiring: It creates the session controller around the parameter store and
   the chart, and starts the one-shot background load of the baseline data.
"""
import logging
import os

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import QMainWindow, QScrollArea, QSplitter, QStatusBar

from admissioncurves.config import BASELINE_PATH, VISIBLE_APP_NAME
from admissioncurves.controller.session import SessionController
from admissioncurves.controller.workers import BaselineLoadWorker
from admissioncurves.model.state import ParameterStore
from admissioncurves.view.panels.control_panel import ControlPanel
from admissioncurves.view.widgets.plot_2d import PlotRenderer

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, store: ParameterStore, baseline_path: str | os.PathLike = BASELINE_PATH) -> None:
        super().__init__()
        self.store: ParameterStore = store
        self.baseline_path = baseline_path

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1300, 800)

        # --- SPLITTER (CONTENT AREA) ---
        splitter = QSplitter(Qt.Horizontal)
        splitter.setChildrenCollapsible(False)
        self.setCentralWidget(splitter)

        # --- RIGHT SIDE: Chart ---
        self.plot = PlotRenderer()
        self.controller = SessionController(self.store, self.plot)

        # --- LEFT SIDE: Controls ---
        self.control_panel = ControlPanel(self.store, self.controller)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.control_panel)
        scroll.setMinimumWidth(320)

        splitter.addWidget(scroll)
        splitter.addWidget(self.plot)
        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)

        self.setStatusBar(QStatusBar())

        # Empty chart until the dataset arrives
        self.controller.refresh()

        self.load_worker: BaselineLoadWorker | None = None

    def start_loading(self) -> None:
        """Kick off the background read of the baseline dataset."""
        self.statusBar().showMessage("Loading baseline curves...")
        self.load_worker = BaselineLoadWorker(self.baseline_path, parent=self)
        self.load_worker.loaded.connect(self.on_baseline_loaded)
        self.load_worker.error_occurred.connect(self.on_baseline_failed)
        self.load_worker.start()

    @Slot(object)
    def on_baseline_loaded(self, dataset) -> None:
        self.controller.set_baseline(dataset)
        self.statusBar().showMessage("Baseline curves loaded.", 5000)

    @Slot(str)
    def on_baseline_failed(self, message: str) -> None:
        self.controller.baseline_failed(message)
        self.statusBar().showMessage(f"Could not load baseline curves: {message}")

    def closeEvent(self, event) -> None:
        if self.load_worker is not None and self.load_worker.isRunning():
            self.load_worker.wait()
        super().closeEvent(event)
