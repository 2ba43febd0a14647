"""
Session Controller
==================
The single place where user commands change the parameters.

Why is this file needed?
------------------------
Control widgets never talk to the chart. They call `dispatch`, which writes
through the validated `ParameterStore` and, when a value actually changed,
rebuilds the render request and hands it to the renderer in the same call.
A render therefore always sees the value that was just written.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

from admissioncurves.model.render_request import BaselineDataset, RenderRequest, build_render_request

if TYPE_CHECKING:
    from admissioncurves.model.state import ParameterStore

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    def render(self, request: RenderRequest) -> None: ...


class SessionController:
    def __init__(self, store: ParameterStore, renderer: Renderer) -> None:
        self.store = store
        self.renderer = renderer
        self.baseline: BaselineDataset | None = None

    def dispatch(self, key: str, value: Any) -> bool:
        """
        Apply one parameter change coming from the UI.

        Returns:
            True if the stored value changed (and the chart was redrawn).
        """
        changed = self.store.set(key, value)
        if changed:
            self.refresh()
        return changed

    def reset(self) -> None:
        self.store.reset()
        self.refresh()

    def set_baseline(self, dataset: BaselineDataset) -> None:
        self.baseline = dataset
        logger.info("Baseline data loaded.")
        self.refresh()

    def baseline_failed(self, message: str) -> None:
        # Keep the previous (usually empty) dataset; nothing to redraw
        logger.error(f"Baseline data unavailable: {message}")

    def build_request(self) -> RenderRequest:
        return build_render_request(self.baseline, self.store.snapshot())

    def refresh(self) -> None:
        request = self.build_request()
        logger.debug(f"Rendering {len(request.traces)} curves to '{request.target}'.")
        self.renderer.render(request)
