from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal

from bmicalculator.config import HIGHLIGHT_DURATION_MS
from bmicalculator.model.evaluator import ComputationError, EvaluationResult, evaluate
from bmicalculator.model.validation import Field, parse_number, validate_field

logger = logging.getLogger(__name__)

GENERAL_ERROR_MESSAGE = "An error occurred during calculation. Please check your inputs."


class SubmissionMode(IntEnum):
    """Whether the form has been submitted at least once."""
    PRISTINE = 0
    SUBMITTED = 1


@dataclass(frozen=True)
class FormErrors:
    """Current error messages, per field plus one for the computation itself."""
    height: Optional[str] = None
    weight: Optional[str] = None
    general: Optional[str] = None

    def for_field(self, field: Field) -> Optional[str]:
        return getattr(self, field.value)

    def with_field(self, field: Field, message: Optional[str]) -> FormErrors:
        return replace(self, **{field.value: message})

    def has_field_errors(self) -> bool:
        return bool(self.height or self.weight)


@dataclass
class RawInput:
    """Text of the two inputs exactly as typed."""
    height_text: str = ""
    weight_text: str = ""

    def text(self, field: Field) -> str:
        return self.height_text if field is Field.HEIGHT else self.weight_text


class Store(QObject):
    """
    Central state of the calculator with signals for view sync.

    Errors are always computed but only surfaced once the form has been
    submitted; from then on every edit re-validates its field. A failed
    submission never clears the last result.
    """
    inputs_changed = Signal(object)
    errors_changed = Signal(object)
    result_changed = Signal(object)
    mode_changed = Signal(int)
    highlight_changed = Signal(bool)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.inputs = RawInput()
        self._errors = FormErrors()
        self._result: EvaluationResult | None = None
        self._mode = SubmissionMode.PRISTINE
        self._highlighted = False

        self._highlight_timer = QTimer(self)
        self._highlight_timer.setSingleShot(True)
        self._highlight_timer.setInterval(HIGHLIGHT_DURATION_MS)
        self._highlight_timer.timeout.connect(lambda: self._set_highlighted(False))

    # ---- read access ----

    @property
    def mode(self) -> SubmissionMode:
        return self._mode

    @property
    def errors(self) -> FormErrors:
        return self._errors

    @property
    def result(self) -> EvaluationResult | None:
        return self._result

    @property
    def highlighted(self) -> bool:
        return self._highlighted

    def visible_errors(self) -> FormErrors:
        """Errors as they should be rendered; nothing before the first submit."""
        if self._mode is SubmissionMode.PRISTINE:
            return FormErrors()
        return self._errors

    # ---- transitions ----

    def set_field_text(self, field: Field, text: str) -> None:
        """Store the raw text; once submitted, re-validate that field live."""
        if field is Field.HEIGHT:
            self.inputs.height_text = text
        else:
            self.inputs.weight_text = text
        self.inputs_changed.emit(self.inputs)

        if self._mode is SubmissionMode.SUBMITTED:
            self._set_errors(self._errors.with_field(field, validate_field(field, text)))

    def submit(self) -> bool:
        """
        Validate both fields and, if they pass, compute a new result.

        Returns:
            True if a new result was stored.
        """
        self._set_mode(SubmissionMode.SUBMITTED)

        errors = FormErrors(
            height=validate_field(Field.HEIGHT, self.inputs.height_text),
            weight=validate_field(Field.WEIGHT, self.inputs.weight_text),
        )
        self._set_errors(errors)

        if errors.has_field_errors():
            logger.info(f"Submission rejected: height={errors.height!r}, weight={errors.weight!r}")
            return False

        height = parse_number(self.inputs.height_text)
        weight = parse_number(self.inputs.weight_text)
        try:
            result = evaluate(height, weight)
        except ComputationError:
            logger.exception("BMI calculation error")
            self._set_errors(replace(self._errors, general=GENERAL_ERROR_MESSAGE))
            return False

        self._set_result(result)
        logger.info(f"BMI calculated: {result.score} ({result.category.label})")
        return True

    # ---- internals ----

    def _set_mode(self, mode: SubmissionMode) -> None:
        if mode != self._mode:
            self._mode = mode
            self.mode_changed.emit(int(mode))

    def _set_errors(self, errors: FormErrors) -> None:
        if errors != self._errors:
            self._errors = errors
            self.errors_changed.emit(self._errors)

    def _set_result(self, result: EvaluationResult) -> None:
        self._result = result
        self.result_changed.emit(self._result)
        self._set_highlighted(True)
        self._highlight_timer.start()

    def _set_highlighted(self, value: bool) -> None:
        if value != self._highlighted:
            self._highlighted = value
            self.highlight_changed.emit(value)
