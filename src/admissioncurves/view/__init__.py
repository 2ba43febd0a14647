"""The VIEW layer: Qt widgets and the pyqtgraph chart."""
