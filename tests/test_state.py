import pytest

from admissioncurves.model.state import (
    PARAM_CONFIG, NumericRange, ParameterStore, Parameters, numeric_keys, to_label, toggle_keys,
)


def test_defaults(store):
    assert store.snapshot() == Parameters(
        difficulty=0, major_competitiveness=0, apply_financial_aid=False, is_domestic=True
    )


def test_parameter_tables_cover_every_field():
    assert numeric_keys() == ["difficulty", "major_competitiveness"]
    assert toggle_keys() == ["apply_financial_aid", "is_domestic"]


@pytest.mark.parametrize(
    "key, value, expected",
    [
        ("difficulty", 99, 7),
        ("difficulty", -3, 0),
        ("difficulty", float("inf"), 7),
        ("difficulty", 10**400, 7),
        ("difficulty", -10**400, 0),
        ("major_competitiveness", 5, 2),
        ("major_competitiveness", -1, 0),
    ],
)
def test_out_of_range_values_are_clamped_to_nearest_bound(store, key, value, expected):
    store.set(key, value)
    assert store.get(key) == expected


def test_numeric_values_are_snapped_to_integers(store):
    assert store.set("difficulty", "4.4") is True
    assert store.get("difficulty") == 4
    assert isinstance(store.get("difficulty"), int)


@pytest.mark.parametrize("value", ["abc", None, float("nan"), True, [1]])
def test_non_numeric_input_is_rejected(store, value):
    store.set("difficulty", 3)
    assert store.set("difficulty", value) is False
    assert store.get("difficulty") == 3


def test_toggles_store_booleans(store):
    assert store.set("apply_financial_aid", True) is True
    assert store.get("apply_financial_aid") is True
    assert store.set("is_domestic", False) is True
    assert store.get("is_domestic") is False


def test_toggles_reject_non_booleans(store):
    assert store.set("apply_financial_aid", "yes") is False
    assert store.get("apply_financial_aid") is False


def test_set_reports_only_real_changes(store):
    assert store.set("difficulty", 2) is True
    assert store.set("difficulty", 2) is False
    # Clamped onto the current value
    store.set("major_competitiveness", 2)
    assert store.set("major_competitiveness", 10) is False


def test_unknown_key_raises(store):
    with pytest.raises(KeyError):
        store.get("gpa")
    with pytest.raises(KeyError):
        store.set("gpa", 4.0)


def test_reset_restores_defaults(store):
    store.set("difficulty", 5)
    store.set("apply_financial_aid", True)
    store.reset()
    assert store.snapshot() == Parameters()


def test_custom_defaults_are_used_by_reset():
    store = ParameterStore(Parameters(difficulty=3))
    store.set("difficulty", 6)
    store.reset()
    assert store.get("difficulty") == 3


def test_snapshot_is_independent(store):
    snap = store.snapshot()
    store.set("difficulty", 7)
    assert snap.difficulty == 0


def test_summary(store):
    assert store.summary() == (
        "Difficulty: 0 | Major Competitiveness: 0 | Aid Impact: No | Applicant: Domestic"
    )
    store.set("apply_financial_aid", True)
    store.set("is_domestic", False)
    assert "Aid Impact: Yes" in store.summary()
    assert store.summary().endswith("Applicant: International")


@pytest.mark.parametrize(
    "key, label",
    [
        ("difficulty", "Difficulty"),
        ("major_competitiveness", "Major Competitiveness"),
        ("majorCompetitiveness", "Major Competitiveness"),
        ("applyFinancialAid", "Apply Financial Aid"),
    ],
)
def test_to_label(key, label):
    assert to_label(key) == label


def test_fractional_range_keeps_floats():
    spec = NumericRange(min=0, max=1, step=0.25)
    assert spec.clamp(0.3) == pytest.approx(0.25)
    assert spec.clamp(2) == pytest.approx(1.0)
    assert spec.decimals == 2
    assert PARAM_CONFIG["difficulty"].decimals == 0
