"""Validation results — immutable containers for messages and cleaned data."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """The outcome of validating submitted data against a set of fields.

    ``is_valid`` is True when there are no errors.
    The result is falsy when invalid, so you can write::

        result = validate_data(form, fields)
        if not result:
            return render_form(errors=result.errors)

    ``data`` holds the values of every field that passed.

    ``errors`` maps failing field names to lists of error messages::

        {"title": ["This field is required"],
         "email": ["Must be a valid email address"]}
    """

    data: dict[str, Any]
    errors: dict[str, list[str]]

    @property
    def is_valid(self) -> bool:
        """True if validation passed with no errors."""
        return not self.errors

    def __bool__(self) -> bool:
        """Falsy when invalid — enables ``if not result:`` pattern."""
        return self.is_valid


@dataclass(frozen=True, slots=True)
class FieldState:
    """Snapshot of one field binding's validation outcome.

    ``has_been_validated`` starts False and stays True after the first
    validation run for the life of the binding. UIs typically hide
    messages until then.
    """

    error_messages: tuple[str, ...] = ()
    has_been_validated: bool = False

    @property
    def is_in_error_state(self) -> bool:
        """True when the last run produced at least one message."""
        return bool(self.error_messages)
