"""
Render requests.

A `RenderRequest` is the complete, toolkit independent description of one
chart frame: the traces to draw, the layout around them and the interaction
options. `build_render_request` is a pure function of the baseline dataset
and the current parameters; drawing it is left to the view layer.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Mapping, Sequence

import numpy as np

from admissioncurves.config import PLOT_TARGET
from admissioncurves.model.curves import CurveStyle, resolve_style, transform

if TYPE_CHECKING:
    import numpy.typing as npt
    from admissioncurves.model.state import Parameters

logger = logging.getLogger(__name__)

CurveSet = Mapping[str, Sequence[Any]]
BaselineDataset = Mapping[str, CurveSet]

LINE_WIDTH: float = 2
LINE_OPACITY: float = 0.95

X_AXIS_TITLE = "University Rank"
Y_AXIS_TITLE = "Admission Probability (%)"
X_RANGE: tuple[float, float] = (1, 50)
Y_RANGE: tuple[float, float] = (0, 100)

AID_WARNING = (
    "⚠️ Demonstration assumes perfect visibility of financial aid awareness. "
    "Not true for each university in practice."
)


@dataclass(frozen=True, eq=False)
class Trace:
    """One named, styled line."""
    name: str
    x: npt.NDArray[np.int64]
    y: npt.NDArray[np.float64]
    style: CurveStyle
    width: float = LINE_WIDTH
    opacity: float = LINE_OPACITY

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Trace):
            return NotImplemented
        return (
            self.name == other.name
            and self.style == other.style
            and self.width == other.width
            and self.opacity == other.opacity
            and np.array_equal(self.x, other.x)
            and np.array_equal(self.y, other.y, equal_nan=True)
        )


@dataclass(frozen=True)
class Axis:
    title: str
    range: tuple[float, float]
    fixed: bool = False


@dataclass(frozen=True)
class Annotation:
    text: str
    color: str = "red"
    font_size: int = 12


@dataclass(frozen=True)
class PlotLayout:
    title: str
    x_axis: Axis
    y_axis: Axis
    legend_orientation: str = "h"
    drag_mode: str = "pan"
    annotations: tuple[Annotation, ...] = ()


@dataclass(frozen=True)
class RenderOptions:
    pan_zoom: bool = True


@dataclass(frozen=True)
class RenderRequest:
    target: str
    traces: list[Trace]
    layout: PlotLayout
    options: RenderOptions = field(default_factory=RenderOptions)


def chart_title(params: Parameters) -> str:
    return (
        "Admission Probability Curves "
        f"(Difficulty={params.difficulty}, Major={params.major_competitiveness}, "
        f"Aid={'On' if params.apply_financial_aid else 'Off'}, "
        f"{'Domestic' if params.is_domestic else 'International'})"
    )


def build_layout(params: Parameters) -> PlotLayout:
    return PlotLayout(
        title=chart_title(params),
        x_axis=Axis(title=X_AXIS_TITLE, range=X_RANGE, fixed=False),
        y_axis=Axis(title=Y_AXIS_TITLE, range=Y_RANGE, fixed=True),
        annotations=(Annotation(text=AID_WARNING),),
    )


def build_traces(curves: CurveSet, params: Parameters) -> list[Trace]:
    traces: list[Trace] = []
    for idx, (key, raw_curve) in enumerate(curves.items()):
        series = transform(raw_curve, params)
        traces.append(Trace(name=key, x=series.x, y=series.y, style=resolve_style(key, idx)))
    return traces


def build_render_request(
    baseline: BaselineDataset | None,
    params: Parameters,
    target: str = PLOT_TARGET,
) -> RenderRequest:
    """
    Describe the chart for the given dataset and parameters.

    A missing dataset or a difficulty level absent from it yields a request
    without traces; the layout is always complete.
    """
    traces: list[Trace] = []
    if baseline is not None:
        curves = baseline.get(str(params.difficulty))
        if curves is None:
            logger.debug(f"No curves for difficulty {params.difficulty}.")
        else:
            traces = build_traces(curves, params)

    return RenderRequest(target=target, traces=traces, layout=build_layout(params))
