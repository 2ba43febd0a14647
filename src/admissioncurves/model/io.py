"""
Input/Output (JSON)
Reads the baseline curve dataset from disk.

The file is a JSON object keyed by difficulty level ("0".."7"). Each value
is an object mapping a curve key to an array of admission probabilities in
[0, 1], one per university rank starting at 1. Key order in the file is the
order curves are styled and drawn in.
"""
import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

BaselineData = dict[str, dict[str, list[Any]]]


class BaselineFormatError(ValueError):
    """The dataset parsed as JSON but does not have the expected shape."""


def parse_baseline(data: Any) -> BaselineData:
    """
    Check the shape of decoded JSON and return it as a baseline dataset.

    Individual curve values are not checked here; the transformer turns
    anything non-numeric into NaN.

    Raises:
        BaselineFormatError: If the levels, curve sets or curves are not an
            object, objects and arrays respectively.
    """
    if not isinstance(data, dict):
        raise BaselineFormatError(f"Expected a JSON object at top level, got {type(data).__name__}.")

    dataset: BaselineData = {}
    for level, curves in data.items():
        if not isinstance(curves, dict):
            raise BaselineFormatError(f"Difficulty '{level}' must map to an object of curves.")
        for key, values in curves.items():
            if not isinstance(values, list):
                raise BaselineFormatError(f"Curve '{key}' of difficulty '{level}' must be an array.")
        dataset[str(level)] = dict(curves)
    return dataset


def load_baseline(filepath: str | os.PathLike) -> BaselineData:
    """
    Read and validate the baseline dataset.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If it is not valid JSON (json.JSONDecodeError) or has the
            wrong shape (BaselineFormatError).
        RecursionError: If the JSON is nested too deeply to decode.
    """
    logger.info(f"Loading baseline curves from: {filepath}")
    with open(filepath, "r", encoding="utf-8") as f:
        data = json.load(f)

    dataset = parse_baseline(data)
    n_curves = sum(len(curves) for curves in dataset.values())
    logger.info(f"Loaded {n_curves} curves across {len(dataset)} difficulty levels.")
    return dataset
