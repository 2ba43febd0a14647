"""
Background load of the baseline dataset.

The window is shown first and the JSON is read on a QThread; the result (or
the error text) comes back to the GUI thread as a queued Signal.
"""
import logging
import os

from PySide6.QtCore import QThread, Signal

from admissioncurves.model.io import load_baseline

logger = logging.getLogger(__name__)


class BaselineLoadWorker(QThread):
    # Signals to update the UI from the background
    loaded = Signal(object)  # BaselineData
    error_occurred = Signal(str)

    def __init__(self, filepath: str | os.PathLike, parent=None):
        super().__init__(parent)
        self.filepath = filepath

    def run(self) -> None:
        try:
            dataset = load_baseline(self.filepath)
        except (OSError, ValueError, RecursionError) as e:
            # RecursionError: json gives up on pathologically nested input
            # No retry: the chart simply stays empty
            logger.error(f"Error loading baseline data: {e}")
            self.error_occurred.emit(str(e))
            return

        self.loaded.emit(dataset)
