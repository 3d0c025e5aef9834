"""Assertion helpers for tests of forms built on formkeeper.

Each assertion produces a clear error message on failure::

    from formkeeper.testing import assert_error_count, assert_field_errors

    form.validate_form()
    assert_error_count(form, 1)
    assert_field_errors(name_field, "This field is required")
"""

from formkeeper.container import FormContainer
from formkeeper.field import FormField


def assert_error_count(container: FormContainer, expected: int) -> None:
    """Assert the container's aggregate error count."""
    actual = container.total_errors.value
    assert actual == expected, (
        f"Expected {expected} field(s) in error, got {actual}.\n"
        f"Registered fields: {', '.join(container.field_ids) or '(none)'}"
    )


def assert_field_errors(field: FormField, *messages: str) -> None:
    """Assert the field's messages are exactly *messages*, in order."""
    actual = field.error_messages.value
    assert actual == messages, (
        f"Field {field.field_id!r} has errors {list(actual)!r}, expected {list(messages)!r}"
    )


def assert_field_valid(field: FormField) -> None:
    """Assert the field has been validated and has no messages."""
    assert field.has_been_validated, f"Field {field.field_id!r} has not been validated"
    assert not field.is_in_error_state, (
        f"Field {field.field_id!r} is in error: {list(field.error_messages.value)!r}"
    )


def assert_not_validated(field: FormField) -> None:
    """Assert the field has never run its rules."""
    assert not field.has_been_validated, (
        f"Field {field.field_id!r} was validated; errors {list(field.error_messages.value)!r}"
    )
