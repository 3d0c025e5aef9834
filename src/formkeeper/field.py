"""Field bindings — one per form field, reporting to a ``FormContainer``.

A binding owns its field's messages and its ``has_been_validated`` flag.
Whoever owns the field's lifetime calls ``attach()`` when the field
appears and ``detach()`` when it goes away; in between, ``validator()``
re-checks the field and reports the outcome to the container.

Two flavors:

- ``FormField`` wraps any zero-argument function that returns the
  field's current messages.
- ``BoundField`` holds its own value and validates it from
  ``FieldOptions``::

      form = use_form_container()
      email_field = bind_field(form, "email", FieldOptions(
          required=True, validators=(email,),
      ))
      with email_field:
          email_field.value = "not-an-email"
          email_field.validator()
          email_field.error_messages.value  # ("Must be a valid email address",)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from formkeeper.config import FormConfig
from formkeeper.container import FormContext
from formkeeper.errors import ConfigurationError
from formkeeper.observable import Observable
from formkeeper.validation import FieldOptions, FieldState, validate

logger = logging.getLogger("formkeeper.field")


class FormField:
    """A field's validation state, wired to its form's context.

    Raises ``ConfigurationError`` at construction when *context* is
    ``None``: a field outside a form is a wiring bug, not a runtime
    condition.
    """

    __slots__ = (
        "_attached",
        "_config",
        "_context",
        "_error_messages",
        "_has_been_validated",
        "_validate_fn",
        "field_id",
    )

    def __init__(
        self,
        context: FormContext | None,
        field_id: str,
        validate_fn: Callable[[], Sequence[str]],
        *,
        config: FormConfig | None = None,
    ) -> None:
        if context is None:
            msg = f"Form validation used outside a form context (field {field_id!r})"
            raise ConfigurationError(msg)
        if config is None:
            config = context.config

        self._context = context
        self._config = config
        self._validate_fn = validate_fn
        self._error_messages: Observable[tuple[str, ...]] = Observable(
            (), buffer_size=config.change_buffer_size
        )
        self._has_been_validated = False
        self._attached = False
        self.field_id = field_id

    # -- State --

    @property
    def error_messages(self) -> Observable[tuple[str, ...]]:
        """Messages from the last validation run, as a live value."""
        return self._error_messages

    @property
    def has_been_validated(self) -> bool:
        """False until the first validation run, then True for good."""
        return self._has_been_validated

    @property
    def is_in_error_state(self) -> bool:
        """The state this field reports to its form.

        True when the last run produced at least one message, unless the
        config sets ``report_valid_as_error``.
        """
        return self._in_error(self._error_messages.value)

    @property
    def state(self) -> FieldState:
        """Immutable snapshot of messages and the validated flag."""
        return FieldState(
            error_messages=self._error_messages.value,
            has_been_validated=self._has_been_validated,
        )

    @property
    def attached(self) -> bool:
        return self._attached

    # -- Validation --

    def validator(self) -> None:
        """Re-check the field and report the outcome to the form.

        A field that is not attached updates its own messages only.
        """
        errors = tuple(self._validate_fn())
        self._has_been_validated = True
        self._error_messages.set(errors)
        if self._attached:
            self._context.update_error_state(self.field_id, self._in_error(errors))

    def _in_error(self, errors: tuple[str, ...]) -> bool:
        if self._config.report_valid_as_error:
            return not errors
        return bool(errors)

    # -- Lifecycle --

    def attach(self) -> None:
        """Register with the form. A second call while attached is a no-op."""
        if self._attached:
            return
        self._context.register(self.field_id, self.validator)
        self._attached = True
        logger.debug("field %r attached", self.field_id)

    def detach(self) -> None:
        """Deregister from the form. A call while detached is a no-op."""
        if not self._attached:
            return
        self._context.deregister(self.field_id)
        self._attached = False
        logger.debug("field %r detached", self.field_id)

    def __enter__(self) -> FormField:
        self.attach()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.detach()

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} {self.field_id!r} "
            f"errors={len(self._error_messages.value)} validated={self._has_been_validated}>"
        )


class BoundField[T](FormField):
    """A ``FormField`` that holds its own value.

    The value starts at ``options.default_value``. Once the field has
    been validated, assigning a new value re-validates it immediately
    (unless the config turns ``validate_on_change`` off), so messages
    clear as soon as the user fixes the input.
    """

    __slots__ = ("_value", "options")

    def __init__(
        self,
        context: FormContext | None,
        field_id: str,
        options: FieldOptions[T] | None = None,
        *,
        config: FormConfig | None = None,
    ) -> None:
        self.options: FieldOptions[T] = options or FieldOptions()
        self._value: T | None = self.options.default_value
        super().__init__(context, field_id, self._run_rules, config=config)

    @property
    def value(self) -> T | None:
        return self._value

    @value.setter
    def value(self, value: T | None) -> None:
        self._value = value
        if self._attached and self._has_been_validated and self._config.validate_on_change:
            self.validator()

    def reset(self) -> None:
        """Restore the default value without re-validating."""
        self._value = self.options.default_value

    def _run_rules(self) -> list[str]:
        return validate(
            self._value,
            self.options.required,
            self.options.validators,
            required_message=self._config.required_message,
        )


def use_form_field(
    context: FormContext | None,
    field_id: str,
    validate_fn: Callable[[], Sequence[str]],
) -> FormField:
    """Create a binding for *field_id* in *context*.

    The binding is not attached yet; call ``attach()`` when the field
    appears. Raises ``ConfigurationError`` when *context* is ``None``.
    """
    return FormField(context, field_id, validate_fn)


def bind_field(
    context: FormContext | None,
    field_id: str,
    options: FieldOptions[Any] | None = None,
) -> BoundField[Any]:
    """Create a value-holding binding validated by *options*.

    Raises ``ConfigurationError`` when *context* is ``None``.
    """
    return BoundField(context, field_id, options)
