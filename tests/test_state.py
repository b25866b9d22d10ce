"""Tests for the submission state machine held by the Store."""
import pytest

from bmicalculator.app import state as state_module
from bmicalculator.app.state import GENERAL_ERROR_MESSAGE, FormErrors, Store, SubmissionMode
from bmicalculator.model.evaluator import Category, ComputationError, EvaluationResult
from bmicalculator.model.validation import Field


def _fill(store: Store, height: str, weight: str) -> None:
    store.set_field_text(Field.HEIGHT, height)
    store.set_field_text(Field.WEIGHT, weight)


class TestPristine:

    def test_initial_state(self, store):
        assert store.mode is SubmissionMode.PRISTINE
        assert store.result is None
        assert store.errors == FormErrors()
        assert store.visible_errors() == FormErrors()
        assert store.highlighted is False

    def test_edits_update_text_but_not_errors(self, store):
        _fill(store, "abc", "")
        assert store.inputs.height_text == "abc"
        assert store.inputs.weight_text == ""
        assert store.errors == FormErrors()
        assert store.visible_errors() == FormErrors()


class TestSubmit:

    def test_valid_submission_computes_result(self, store):
        _fill(store, "170", "70")
        assert store.submit() is True
        assert store.mode is SubmissionMode.SUBMITTED
        assert store.result == EvaluationResult(score=24.2, category=Category.NORMAL)
        assert store.errors == FormErrors()

    def test_empty_submission_marks_submitted_and_shows_errors(self, store):
        assert store.submit() is False
        assert store.mode is SubmissionMode.SUBMITTED
        assert store.visible_errors() == FormErrors(height="Height is required", weight="Weight is required")
        assert store.result is None

    def test_failed_submission_keeps_previous_result(self, store):
        _fill(store, "170", "70")
        store.submit()

        store.set_field_text(Field.WEIGHT, "-5")
        assert store.submit() is False

        assert store.visible_errors().weight == "Please enter a valid weight"
        assert store.visible_errors().height is None
        assert store.result == EvaluationResult(score=24.2, category=Category.NORMAL)

    def test_successful_submission_replaces_result_and_clears_errors(self, store):
        _fill(store, "170", "")
        store.submit()
        assert store.errors.weight == "Weight is required"

        store.set_field_text(Field.WEIGHT, "100")
        assert store.submit() is True
        assert store.result.category is Category.OBESE
        assert store.errors == FormErrors()

    def test_submitted_mode_is_irreversible(self, store):
        store.submit()
        _fill(store, "170", "70")
        store.submit()
        assert store.mode is SubmissionMode.SUBMITTED


class TestLiveRevalidation:

    def test_edit_after_submit_revalidates_only_that_field(self, store):
        store.submit()
        store.set_field_text(Field.HEIGHT, "300")
        assert store.errors.height == "Height seems too high (max 250cm)"
        assert store.errors.weight == "Weight is required"

        store.set_field_text(Field.HEIGHT, "180")
        assert store.errors.height is None
        assert store.errors.weight == "Weight is required"

    def test_live_edits_do_not_compute(self, store):
        store.submit()
        _fill(store, "170", "70")
        assert store.result is None
        assert store.errors == FormErrors()


class TestComputationError:

    def test_general_error_keeps_result(self, store, monkeypatch):
        _fill(store, "170", "70")
        store.submit()
        previous = store.result

        def _broken(height_cm, weight_kg):
            raise ComputationError("Calculation resulted in an invalid value")

        monkeypatch.setattr(state_module, "evaluate", _broken)
        store.set_field_text(Field.WEIGHT, "80")
        assert store.submit() is False
        assert store.result == previous
        assert store.visible_errors().general == GENERAL_ERROR_MESSAGE

        monkeypatch.undo()
        assert store.submit() is True
        assert store.errors.general is None
        assert store.result.score == 27.7


class TestSignals:

    def test_signals_on_successful_submit(self, store):
        seen = {"mode": [], "result": [], "highlight": []}
        store.mode_changed.connect(seen["mode"].append)
        store.result_changed.connect(seen["result"].append)
        store.highlight_changed.connect(seen["highlight"].append)

        _fill(store, "170", "70")
        store.submit()

        assert seen["mode"] == [int(SubmissionMode.SUBMITTED)]
        assert seen["result"] == [EvaluationResult(score=24.2, category=Category.NORMAL)]
        assert seen["highlight"] == [True]
        assert store.highlighted is True

    def test_no_result_signal_on_rejected_submit(self, store):
        results = []
        store.result_changed.connect(results.append)
        store.submit()
        assert results == []

    def test_errors_signal_on_live_edit(self, store):
        store.submit()
        errors = []
        store.errors_changed.connect(errors.append)
        store.set_field_text(Field.HEIGHT, "20")
        assert errors == [FormErrors(height="Height seems too low (min 50cm)", weight="Weight is required")]

    def test_highlight_clears_after_delay(self, store, qapp):
        from PySide6.QtCore import QEventLoop, QTimer

        _fill(store, "170", "70")
        store.submit()
        assert store.highlighted is True

        loop = QEventLoop()
        store.highlight_changed.connect(lambda _: loop.quit())
        QTimer.singleShot(2000, loop.quit)
        loop.exec()

        assert store.highlighted is False

    def test_new_result_restarts_highlight_timer(self, store, qapp):
        from PySide6.QtTest import QTest

        _fill(store, "170", "70")
        store.submit()
        QTest.qWait(350)

        store.set_field_text(Field.WEIGHT, "80")
        store.submit()
        assert store.highlighted is True
        assert store._highlight_timer.remainingTime() > 350

        # 700 ms after the first result, still within 500 ms of the second
        QTest.qWait(350)
        assert store.highlighted is True

        QTest.qWait(600)
        assert store.highlighted is False

    def test_inputs_signal_carries_raw_text(self, store):
        seen = []
        store.inputs_changed.connect(lambda inputs: seen.append((inputs.height_text, inputs.weight_text)))
        _fill(store, "170", " 7")
        assert seen == [("170", ""), ("170", " 7")]


@pytest.mark.parametrize("height, weight, score, category", [
    ("170", "71.825", 24.9, Category.NORMAL),
    ("170", "53.45", 18.5, Category.UNDERWEIGHT),
    ("  160 ", "100", 39.1, Category.OBESE),
])
def test_submit_scenarios(store, height, weight, score, category):
    _fill(store, height, weight)
    store.submit()
    assert store.result == EvaluationResult(score=score, category=category)
