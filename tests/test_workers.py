import json

from admissioncurves.controller import workers
from admissioncurves.controller.workers import BaselineLoadWorker


def test_worker_emits_loaded_dataset(qtbot, tmp_path):
    path = tmp_path / "curves.json"
    path.write_text(json.dumps({"0": {"A=1,E=1": [0.5]}}), encoding="utf-8")

    worker = BaselineLoadWorker(path)
    with qtbot.waitSignal(worker.loaded, timeout=5000) as blocker:
        worker.start()
    worker.wait()

    assert blocker.args[0] == {"0": {"A=1,E=1": [0.5]}}


def test_worker_reports_missing_file(qtbot, tmp_path):
    worker = BaselineLoadWorker(tmp_path / "nope.json")
    with qtbot.assertNotEmitted(worker.loaded):
        with qtbot.waitSignal(worker.error_occurred, timeout=5000) as blocker:
            worker.start()
        worker.wait()

    assert "nope.json" in blocker.args[0]


def test_worker_reports_bad_json(qtbot, tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[]", encoding="utf-8")

    worker = BaselineLoadWorker(path)
    with qtbot.waitSignal(worker.error_occurred, timeout=5000):
        worker.start()
    worker.wait()


def test_worker_reports_recursion_error(qtbot, monkeypatch, tmp_path):
    def too_deep(filepath):
        raise RecursionError("maximum recursion depth exceeded while decoding a JSON array")

    monkeypatch.setattr(workers, "load_baseline", too_deep)

    worker = BaselineLoadWorker(tmp_path / "nested.json")
    with qtbot.assertNotEmitted(worker.loaded):
        with qtbot.waitSignal(worker.error_occurred, timeout=5000) as blocker:
            worker.start()
        worker.wait()

    assert "recursion" in blocker.args[0]
