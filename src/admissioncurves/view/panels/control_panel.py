"""
Parameter Control Panel
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import (
    QCheckBox, QGridLayout, QGroupBox, QHBoxLayout, QLabel, QLineEdit, QPushButton, QSizePolicy, QSlider,
    QVBoxLayout, QWidget,
)

from admissioncurves.model.state import PARAM_CONFIG, TOGGLE_LABELS, NumericRange, to_label, toggle_keys

if TYPE_CHECKING:
    from admissioncurves.controller.session import SessionController
    from admissioncurves.model.state import ParameterStore

logger = logging.getLogger(__name__)


class NumericControl(QWidget):
    """A slider paired with a text entry for one numeric parameter."""

    def __init__(self, key: str, spec: NumericRange, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.key = key
        self.spec = spec

        row = QHBoxLayout(self)
        row.setContentsMargins(0, 0, 0, 0)

        # Slider positions count steps from the minimum
        self.slider = QSlider(Qt.Orientation.Horizontal, self)
        self.slider.setRange(0, round((spec.max - spec.min) / spec.step))
        self.slider.setSingleStep(1)
        self.slider.setPageStep(1)
        self.slider.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        row.addWidget(self.slider)

        self.entry = QLineEdit(self)
        self.entry.setMaximumWidth(70)
        self.entry.setAlignment(Qt.AlignmentFlag.AlignRight)
        row.addWidget(self.entry)

    def slider_value(self) -> float:
        return self.spec.min + self.slider.value() * self.spec.step

    def show_value(self, value: float) -> None:
        """Show `value` in both widgets without emitting change signals."""
        self.slider.blockSignals(True)
        self.slider.setValue(round((value - self.spec.min) / self.spec.step))
        self.slider.blockSignals(False)
        self.entry.setText(f"{float(value):.{self.spec.decimals}f}")


class ControlPanel(QWidget):
    """
    Builds one control per parameter and routes every edit through the
    session controller.

    Numeric parameters come from `PARAM_CONFIG` (slider + entry), the
    remaining `Parameters` fields get a checkbox each.
    """

    def __init__(self, store: ParameterStore, controller: SessionController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.controller = controller
        self.numeric_controls: dict[str, NumericControl] = {}
        self.checkboxes: dict[str, QCheckBox] = {}

        layout = QVBoxLayout(self)

        title = QLabel("<h3>Parameter Controls</h3>")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        # --- Numeric parameters ---
        grp_numeric = QGroupBox("Applicant Profile")
        grid = QGridLayout(grp_numeric)
        for row, (key, spec) in enumerate(PARAM_CONFIG.items()):
            grid.addWidget(QLabel(to_label(key)), row, 0)
            control = NumericControl(key, spec, grp_numeric)
            control.slider.valueChanged.connect(lambda _=0, k=key: self.on_slider_moved(k))
            control.entry.editingFinished.connect(lambda k=key: self.on_entry_edited(k))
            grid.addWidget(control, row, 1)
            self.numeric_controls[key] = control
        layout.addWidget(grp_numeric)

        # --- Boolean parameters ---
        grp_toggles = QGroupBox("Financial Aid")
        toggles = QVBoxLayout(grp_toggles)
        for key in toggle_keys():
            checkbox = QCheckBox(TOGGLE_LABELS.get(key, to_label(key)))
            checkbox.toggled.connect(lambda checked, k=key: self.on_toggled(k, checked))
            toggles.addWidget(checkbox)
            self.checkboxes[key] = checkbox
        layout.addWidget(grp_toggles)

        self.btn_reset = QPushButton("Reset to defaults")
        self.btn_reset.clicked.connect(self.on_reset_clicked)
        layout.addWidget(self.btn_reset)

        # --- Current parameters ---
        self.lbl_summary = QLabel("")
        self.lbl_summary.setWordWrap(True)
        self.lbl_summary.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.lbl_summary.setStyleSheet("color: gray;")
        layout.addWidget(self.lbl_summary)

        layout.addStretch()

        self.sync_from_store()

    # --- SLOTS ---

    def on_slider_moved(self, key: str) -> None:
        control = self.numeric_controls[key]
        self.controller.dispatch(key, control.slider_value())
        self._sync_numeric(key)
        self.refresh_summary()

    def on_entry_edited(self, key: str) -> None:
        control = self.numeric_controls[key]
        text = control.entry.text().strip()
        try:
            value = float(text)
        except ValueError:
            logger.debug(f"Ignoring non-numeric input {text!r} for '{key}'.")
            self._sync_numeric(key)
            return

        self.controller.dispatch(key, value)
        # The store may have clamped the value; show what was kept
        self._sync_numeric(key)
        self.refresh_summary()

    def on_toggled(self, key: str, checked: bool) -> None:
        self.controller.dispatch(key, checked)
        self.refresh_summary()

    @Slot()
    def on_reset_clicked(self) -> None:
        self.controller.reset()
        self.sync_from_store()

    # --- HELPERS ---

    def _sync_numeric(self, key: str) -> None:
        self.numeric_controls[key].show_value(self.store.get(key))

    def sync_from_store(self) -> None:
        """Show the stored values in every control."""
        for key in self.numeric_controls:
            self._sync_numeric(key)
        for key, checkbox in self.checkboxes.items():
            checkbox.blockSignals(True)
            checkbox.setChecked(self.store.get(key))
            checkbox.blockSignals(False)
        self.refresh_summary()

    def refresh_summary(self) -> None:
        self.lbl_summary.setText(self.store.summary())
