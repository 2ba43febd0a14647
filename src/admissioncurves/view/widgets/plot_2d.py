"""pyqtgraph widget that draws `RenderRequest`s."""
from __future__ import annotations

import logging

import pyqtgraph as pg
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from admissioncurves.config import PLOT_TARGET
from admissioncurves.model.curves import Dash
from admissioncurves.model.render_request import PlotLayout, RenderOptions, RenderRequest, Trace

logger = logging.getLogger(__name__)

PEN_STYLES: dict[Dash, Qt.PenStyle] = {
    Dash.SOLID: Qt.PenStyle.SolidLine,
    Dash.DASH: Qt.PenStyle.DashLine,
    Dash.DOT: Qt.PenStyle.DotLine,
}

MAX_LEGEND_COLUMNS = 5


class PlotRenderer(QWidget):
    """
    Chart surface with a legend and annotations below it.

    Each `render` call updates the existing plot in place. Curve items are
    reused while the curve names stay the same, and the x range from the
    request is only applied on the first call, so a user's pan/zoom survives
    parameter changes.
    """

    def __init__(self, target: str = PLOT_TARGET, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName(target)
        self.curves: dict[str, pg.PlotDataItem] = {}
        self._has_rendered = False

        layout = QVBoxLayout(self)

        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setBackground('w')
        self.plot_widget.showGrid(x=True, y=True, alpha=0.3)
        self.plot_item = self.plot_widget.getPlotItem()
        self.view_box = self.plot_item.getViewBox()
        self.view_box.disableAutoRange()
        for axis in ('bottom', 'left'):
            self.plot_item.getAxis(axis).setPen('k')
            self.plot_item.getAxis(axis).setTextPen('k')
        self.legend = self.plot_item.addLegend(offset=(10, 10))
        layout.addWidget(self.plot_widget, 1)

        # Annotation labels live below the chart, outside data coordinates
        self.annotation_box = QVBoxLayout()
        layout.addLayout(self.annotation_box)
        self._annotation_labels: list[QLabel] = []

    # ---- public API ----

    def render(self, request: RenderRequest) -> None:
        if request.target != self.objectName():
            logger.warning(f"Ignoring render request for '{request.target}' on '{self.objectName()}'.")
            return

        self._apply_traces(request.traces)
        self._apply_layout(request.layout, request.options)
        self._has_rendered = True

    def x_range(self) -> list[float]:
        return self.view_box.viewRange()[0]

    def y_range(self) -> list[float]:
        return self.view_box.viewRange()[1]

    def annotation_texts(self) -> list[str]:
        return [lbl.text() for lbl in self._annotation_labels]

    # ---- helpers ----

    @staticmethod
    def _pen(trace: Trace):
        return pg.mkPen(
            color=trace.style.color,
            width=trace.width,
            style=PEN_STYLES[trace.style.dash],
        )

    def _apply_traces(self, traces: list[Trace]) -> None:
        names = [t.name for t in traces]
        if names != list(self.curves.keys()):
            # Different curve set: rebuild the items so the legend keeps file order
            for item in self.curves.values():
                self.plot_item.removeItem(item)
            self.curves = {}
            for trace in traces:
                item = self.plot_item.plot(
                    trace.x, trace.y,
                    pen=self._pen(trace),
                    name=trace.name,
                    connect='finite',
                )
                item.setOpacity(trace.opacity)
                self.curves[trace.name] = item
        else:
            for trace in traces:
                item = self.curves[trace.name]
                item.setPen(self._pen(trace))
                item.setData(trace.x, trace.y, connect='finite')
                item.setOpacity(trace.opacity)

    def _apply_layout(self, layout: PlotLayout, options: RenderOptions) -> None:
        self.plot_item.setTitle(layout.title, color='k', size='12pt')
        self.plot_item.setLabel('bottom', layout.x_axis.title, color='black')
        self.plot_item.setLabel('left', layout.y_axis.title, color='black')

        if not self._has_rendered or layout.x_axis.fixed:
            self.view_box.setXRange(*layout.x_axis.range, padding=0)
        if not self._has_rendered or layout.y_axis.fixed:
            self.view_box.setYRange(*layout.y_axis.range, padding=0)

        self.view_box.setMouseEnabled(
            x=options.pan_zoom and not layout.x_axis.fixed,
            y=options.pan_zoom and not layout.y_axis.fixed,
        )
        if layout.drag_mode == "pan":
            self.view_box.setMouseMode(pg.ViewBox.PanMode)
        else:
            self.view_box.setMouseMode(pg.ViewBox.RectMode)

        if layout.legend_orientation == "h":
            self.legend.setColumnCount(max(1, min(len(self.curves), MAX_LEGEND_COLUMNS)))
        else:
            self.legend.setColumnCount(1)

        self._apply_annotations(layout)

    def _apply_annotations(self, layout: PlotLayout) -> None:
        while len(self._annotation_labels) > len(layout.annotations):
            lbl = self._annotation_labels.pop()
            self.annotation_box.removeWidget(lbl)
            lbl.deleteLater()
        while len(self._annotation_labels) < len(layout.annotations):
            lbl = QLabel(self)
            lbl.setWordWrap(True)
            self.annotation_box.addWidget(lbl)
            self._annotation_labels.append(lbl)

        for lbl, annotation in zip(self._annotation_labels, layout.annotations):
            lbl.setText(annotation.text)
            lbl.setStyleSheet(f"color: {annotation.color}; font-size: {annotation.font_size}px;")
