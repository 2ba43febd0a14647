"""
Paths and application constants.

The baseline dataset ships in the top-level `assets/` directory. In a frozen
build it is unpacked next to the bundle instead, so every asset lookup goes
through `get_resource_path`.
"""
import logging
import os
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """Resolve `relative_path` against the bundle dir if frozen, else the repo root."""
    bundle_dir = getattr(sys, '_MEIPASS', None)
    if bundle_dir is not None:
        return os.path.join(bundle_dir, relative_path)

    # src/admissioncurves/config.py -> repo root
    repo_root = Path(__file__).resolve().parents[2]
    return os.path.join(str(repo_root), relative_path)


ASSETS_PATH: str = get_resource_path("assets")
BASELINE_PATH: str = os.path.join(ASSETS_PATH, "baseline_curves.json")

# objectName of the chart widget; render requests are addressed to it
PLOT_TARGET: str = "admission-plot"

ORG_ID = "admission-curves"
APP_ID = "admission-curves"
VISIBLE_APP_NAME = "Admission Probability Explorer"

if not os.path.exists(BASELINE_PATH):
    logger.warning(f"Baseline dataset not found at {BASELINE_PATH}; the chart will stay empty.")
