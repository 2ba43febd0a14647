"""
User-adjustable chart parameters and the store that validates them.

`ParameterStore` is the only writer of the current `Parameters`: numeric
values are clamped to `PARAM_CONFIG` and snapped to their step, anything
unreadable is rejected. It keeps no subscribers; whoever calls `set` decides
whether to redraw.
"""
from __future__ import annotations

import dataclasses
import logging
import math
import re
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class Parameters:
    difficulty: int = 0
    major_competitiveness: int = 0
    apply_financial_aid: bool = False
    is_domestic: bool = True


@dataclass(frozen=True)
class NumericRange:
    min: float
    max: float
    step: float = 1

    @property
    def is_integral(self) -> bool:
        return float(self.min).is_integer() and float(self.step).is_integer()

    @property
    def decimals(self) -> int:
        """Number of decimals used when displaying a value of this range."""
        return 2 if self.step < 1 else 0

    def clamp(self, value: float) -> float | int:
        """Clamp to [min, max] and snap to the nearest step."""
        value = max(self.min, min(self.max, value))
        steps = round((value - self.min) / self.step)
        snapped = min(self.max, self.min + steps * self.step)
        if self.is_integral:
            return int(round(snapped))
        return snapped


# Numeric parameters get a slider + entry pair each, in this order.
PARAM_CONFIG: dict[str, NumericRange] = {
    "difficulty": NumericRange(min=0, max=7, step=1),
    "major_competitiveness": NumericRange(min=0, max=2, step=1),
}

# Checkbox captions for the boolean parameters
TOGGLE_LABELS: dict[str, str] = {
    "apply_financial_aid": "Apply Financial Aid Impact",
    "is_domestic": "Domestic Applicant",
}

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def to_label(key: str) -> str:
    """
    Turn a parameter identifier into a human readable label.

    >>> to_label("major_competitiveness")
    'Major Competitiveness'
    >>> to_label("majorCompetitiveness")
    'Major Competitiveness'
    """
    words = _CAMEL_BOUNDARY.sub(" ", key).replace("_", " ").split()
    return " ".join(w[:1].upper() + w[1:] for w in words)


def numeric_keys() -> list[str]:
    return list(PARAM_CONFIG.keys())


def toggle_keys() -> list[str]:
    return [f.name for f in dataclasses.fields(Parameters) if f.name not in PARAM_CONFIG]


class ParameterStore:
    """Passive holder of the current `Parameters`."""

    def __init__(self, defaults: Parameters | None = None) -> None:
        self._defaults = dataclasses.replace(defaults) if defaults else Parameters()
        self._params = dataclasses.replace(self._defaults)

    @property
    def defaults(self) -> Parameters:
        return dataclasses.replace(self._defaults)

    def _check_key(self, key: str) -> None:
        if key not in PARAM_CONFIG and key not in toggle_keys():
            raise KeyError(f"Unknown parameter '{key}'.")

    def get(self, key: str) -> Any:
        self._check_key(key)
        return getattr(self._params, key)

    def set(self, key: str, value: Any) -> bool:
        """
        Validate and store a parameter value.

        Numeric parameters are clamped into their configured range; input
        that cannot be read as a number leaves the store untouched. Boolean
        parameters only accept real booleans.

        Returns:
            True if the stored value changed. The caller is expected to
            refresh anything depending on the parameters when it did.

        Raises:
            KeyError: If `key` is not a known parameter.
        """
        self._check_key(key)

        if key in PARAM_CONFIG:
            new_value = self._coerce_numeric(key, value)
        else:
            new_value = self._coerce_toggle(key, value)
        if new_value is None:
            return False

        old_value = getattr(self._params, key)
        setattr(self._params, key, new_value)
        if new_value != old_value:
            logger.debug(f"Parameter '{key}' changed: {old_value} -> {new_value}")
            return True
        return False

    def reset(self) -> None:
        """Restore the default values."""
        self._params = dataclasses.replace(self._defaults)
        logger.debug("Parameters reset to defaults.")

    def snapshot(self) -> Parameters:
        """An independent copy of the current values."""
        return dataclasses.replace(self._params)

    def summary(self) -> str:
        p = self._params
        return (
            f"Difficulty: {p.difficulty} | "
            f"Major Competitiveness: {p.major_competitiveness} | "
            f"Aid Impact: {'Yes' if p.apply_financial_aid else 'No'} | "
            f"Applicant: {'Domestic' if p.is_domestic else 'International'}"
        )

    # ---- coercion helpers ----

    @staticmethod
    def _coerce_numeric(key: str, value: Any) -> float | int | None:
        if isinstance(value, bool):
            logger.debug(f"Rejected boolean for numeric parameter '{key}'.")
            return None
        try:
            number = float(value)
        except OverflowError:
            # Integers beyond float range still clamp to the nearest bound
            number = math.inf if value > 0 else -math.inf
        except (TypeError, ValueError):
            logger.debug(f"Rejected non-numeric value {value!r} for '{key}'.")
            return None
        if math.isnan(number):
            logger.debug(f"Rejected NaN for '{key}'.")
            return None
        return PARAM_CONFIG[key].clamp(number)

    @staticmethod
    def _coerce_toggle(key: str, value: Any) -> bool | None:
        if not isinstance(value, bool):
            logger.debug(f"Rejected non-boolean value {value!r} for '{key}'.")
            return None
        return value
