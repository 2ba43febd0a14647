"""
Curve styling and scaling.

`resolve_style` picks the look of a curve from its key, `transform` turns a
raw baseline curve into the percentages drawn on the chart.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Sequence

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt
    from admissioncurves.model.state import Parameters


PALETTE: tuple[str, ...] = (
    '#1f77b4',  # Blue
    '#ff7f0e',  # Orange
    '#2ca02c',  # Green
    '#d62728',  # Red
    '#9467bd',  # Purple
    '#8c564b',  # Brown
    '#e377c2',  # Pink
    '#7f7f7f',  # Gray
    '#bcbd22',  # Olive
    '#17becf',  # Cyan
)

# Demonstration constants, not fitted values
COMPETITIVENESS_FACTORS: dict[int, float] = {0: 1.0, 1: 0.8, 2: 0.6}
DOMESTIC_AID_FACTOR: float = 0.75
INTERNATIONAL_AID_FACTOR: float = 0.5

_KEY_PATTERN = re.compile(r"A=(\d+),E=(\d+)")


class Dash(StrEnum):
    SOLID = "solid"
    DASH = "dash"
    DOT = "dot"


@dataclass(frozen=True)
class CurveStyle:
    color: str
    dash: Dash = Dash.SOLID


@dataclass(frozen=True)
class AdjustedSeries:
    """Chart-ready series: 1-based rank positions and percentages."""
    x: npt.NDArray[np.int64]
    y: npt.NDArray[np.float64]

    def __len__(self) -> int:
        return len(self.y)


def resolve_style(key: str, index: int) -> CurveStyle:
    """
    Color by position, dash by the A/E numbers embedded in the key.

    Keys that do not contain "A=<int>,E=<int>" are drawn solid.
    """
    color = PALETTE[index % len(PALETTE)]
    match = _KEY_PATTERN.search(key)
    if match is None:
        return CurveStyle(color=color)

    a, e = int(match.group(1)), int(match.group(2))
    if a > e:
        dash = Dash.DASH
    elif e > a:
        dash = Dash.DOT
    else:
        dash = Dash.SOLID
    return CurveStyle(color=color, dash=dash)


def _as_number(value: Any) -> float:
    try:
        return float(value)
    except OverflowError:
        # Integers beyond float range
        return math.inf if value > 0 else -math.inf
    except (TypeError, ValueError):
        return math.nan


def adjustment_factor(params: Parameters) -> float:
    """Product of the competitiveness and financial aid multipliers."""
    factor = COMPETITIVENESS_FACTORS[params.major_competitiveness]
    if params.apply_financial_aid:
        factor *= DOMESTIC_AID_FACTOR if params.is_domestic else INTERNATIONAL_AID_FACTOR
    return factor


def transform(raw_curve: Sequence[Any], params: Parameters) -> AdjustedSeries:
    """
    Scale a raw curve (fractions in [0, 1]) to adjusted percentages.

    Entries that are not numbers come out as NaN without affecting the
    rest of the curve.
    """
    values = np.array([_as_number(v) for v in raw_curve], dtype=np.float64)
    y = values * 100.0 * adjustment_factor(params)
    x = np.arange(1, len(values) + 1, dtype=np.int64)
    return AdjustedSeries(x=x, y=y)
