import os

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from admissioncurves.model.state import ParameterStore


class RecordingRenderer:
    """Stands in for the chart widget and keeps every request it gets."""

    def __init__(self) -> None:
        self.requests = []

    def render(self, request) -> None:
        self.requests.append(request)

    @property
    def last(self):
        return self.requests[-1]


@pytest.fixture
def baseline():
    return {
        "0": {
            "A=3,E=1": [0.5, 0.6],
            "A=1,E=3": [0.2, 0.4, 0.8],
            "Overall": [0.9],
        },
        "1": {
            "A=2,E=2": [0.1, 0.2, 0.3],
        },
    }


@pytest.fixture
def store():
    return ParameterStore()


@pytest.fixture
def renderer():
    return RecordingRenderer()
