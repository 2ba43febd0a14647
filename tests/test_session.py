import logging

import pytest

from admissioncurves.controller.session import SessionController


@pytest.fixture
def controller(store, renderer):
    return SessionController(store, renderer)


def test_refresh_without_baseline_renders_empty_chart(controller, renderer):
    controller.refresh()
    assert renderer.last.traces == []
    assert renderer.last.layout.annotations


def test_set_baseline_renders_curves(controller, renderer, baseline):
    controller.set_baseline(baseline)
    assert len(renderer.requests) == 1
    assert [t.name for t in renderer.last.traces] == ["A=3,E=1", "A=1,E=3", "Overall"]


def test_dispatch_renders_the_value_just_written(controller, renderer, baseline):
    controller.set_baseline(baseline)
    assert controller.dispatch("major_competitiveness", 1) is True
    assert renderer.last.traces[0].y.tolist() == pytest.approx([40.0, 48.0])
    assert "Major=1" in renderer.last.layout.title


def test_dispatch_without_change_does_not_render(controller, renderer):
    assert controller.dispatch("difficulty", 0) is False
    assert controller.dispatch("difficulty", "not a number") is False
    assert renderer.requests == []


def test_dispatch_clamps_through_store(controller, store, renderer):
    assert controller.dispatch("difficulty", 42) is True
    assert store.get("difficulty") == 7
    assert "Difficulty=7" in renderer.last.layout.title


def test_aid_toggles(controller, renderer, baseline):
    controller.set_baseline(baseline)
    controller.dispatch("major_competitiveness", 1)
    controller.dispatch("apply_financial_aid", True)
    assert renderer.last.traces[0].y.tolist() == pytest.approx([30.0, 36.0])
    controller.dispatch("is_domestic", False)
    assert renderer.last.traces[0].y.tolist() == pytest.approx([20.0, 24.0])


def test_reset_renders_defaults(controller, store, renderer, baseline):
    controller.set_baseline(baseline)
    controller.dispatch("difficulty", 1)
    controller.reset()
    assert store.get("difficulty") == 0
    assert len(renderer.last.traces) == 3


def test_failed_load_keeps_chart_empty(controller, renderer, caplog):
    with caplog.at_level(logging.ERROR):
        controller.baseline_failed("file not found")
    assert controller.baseline is None
    assert "file not found" in caplog.text
    controller.dispatch("difficulty", 3)
    assert renderer.last.traces == []
