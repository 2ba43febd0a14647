"""
Application Initialization
==========================
This module wires the model, controller and view together and starts the
Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up logging.
2. Instantiates the parameter store (the only mutable session state).
3. Instantiates the Main Window, passing the store in.
4. Starts the background load of the baseline dataset.
"""
import logging
import os
import sys

import pyqtgraph as pg
from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

from admissioncurves.config import APP_ID, BASELINE_PATH, ORG_ID, VISIBLE_APP_NAME
from admissioncurves.logging_config import setup_logging
from admissioncurves.model.state import ParameterStore
from admissioncurves.view.main_window import MainWindow

pg.setConfigOption("background", "w")
pg.setConfigOption("foreground", "k")
pg.setConfigOption("antialias", True)


def main(baseline_path: str | os.PathLike = BASELINE_PATH, log_level: int = logging.INFO) -> int:
    # 1. Setup Logging (Console)
    logger = setup_logging(level=log_level)

    # 2. Create the Qt Application
    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)
    app = QApplication(sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)

    # 3. Initialize the Data Model
    store = ParameterStore()

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(store, baseline_path=baseline_path)
    window.show()
    window.start_loading()

    logger.info("Admission curve explorer ready.")

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
