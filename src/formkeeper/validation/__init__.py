"""Field validation — ordered rules, messages as data.

Usage::

    from formkeeper.validation import validate, max_length, email

    errors = validate(value, required=True, validators=[max_length(200)])
    if errors:
        # errors == ["Must be at most 200 characters"]
        ...

A required field with a missing value reports only the required message;
its other rules do not run. Validation failures are never raised.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from formkeeper.config import DEFAULT_REQUIRED_MESSAGE
from formkeeper.validation.options import FieldOptions
from formkeeper.validation.result import FieldState, ValidationResult
from formkeeper.validation.rules import (
    Validator,
    email,
    integer,
    is_missing,
    matches,
    max_length,
    max_value,
    min_length,
    min_value,
    number,
    one_of,
    predicate,
    url,
)

__all__ = [
    "FieldOptions",
    "FieldState",
    "ValidationResult",
    "Validator",
    "email",
    "integer",
    "is_missing",
    "matches",
    "max_length",
    "max_value",
    "min_length",
    "min_value",
    "number",
    "one_of",
    "predicate",
    "url",
    "validate",
    "validate_data",
]


def validate[T](
    value: T | None,
    required: bool,
    validators: Sequence[Validator[T]] = (),
    *,
    required_message: str = DEFAULT_REQUIRED_MESSAGE,
) -> list[str]:
    """Run one field's rules against *value*.

    Args:
        value: The field's current value. ``None`` and ``""`` are missing;
            every other value (including ``0`` and ``False``) is present.
        required: Whether a missing value is an error.
        validators: Rules to run in order. Each returns an error message
            string on failure, or ``None`` on success.
        required_message: Message reported for a missing required value.

    Returns:
        Error messages in validator order. Empty when the value passed.

    Example::

        validate("", True)                    # ["This field is required"]
        validate("abc", False, [min_length(5)])  # ["Must be at least 5 characters"]
    """
    if required and is_missing(value):
        return [required_message]

    errors: list[str] = []
    for validator in validators:
        error = validator(value)
        if error:
            errors.append(error)
    return errors


def validate_data(
    data: Mapping[str, Any],
    fields: Mapping[str, FieldOptions[Any]],
    *,
    required_message: str = DEFAULT_REQUIRED_MESSAGE,
) -> ValidationResult:
    """Validate a submitted mapping against per-field options.

    Runs the same rules the live fields run, so a submission can be
    re-checked on the server without a coordinator.

    Args:
        data: Any mapping of field names to values.
        fields: Field name to ``FieldOptions``. Fields absent from *data*
            fall back to their ``default_value``.
        required_message: Message reported for a missing required value.

    Returns:
        A ``ValidationResult`` with ``.data`` (values of passing fields)
        and ``.errors`` (field → list of error messages).

    Example::

        result = validate_data(form, {
            "title": FieldOptions(required=True, validators=(max_length(200),)),
            "body": FieldOptions(required=True),
        })
        if not result:
            # result.errors == {"body": ["This field is required"]}
            ...
    """
    errors: dict[str, list[str]] = {}
    cleaned: dict[str, Any] = {}

    for name, options in fields.items():
        value = data.get(name, options.default_value)
        field_errors = validate(
            value,
            options.required,
            options.validators,
            required_message=required_message,
        )
        if field_errors:
            errors[name] = field_errors
        else:
            cleaned[name] = value

    return ValidationResult(data=cleaned, errors=errors)
