"""Form coordinator — field registry and aggregate error count.

A ``FormContainer`` is the context its fields report to. Each field
registers a zero-argument validation callback under its identifier and
reports its error state through ``update_error_state()``. The container
keeps ``total_errors`` current incrementally, one transition at a time,
so a keystroke-triggered validation never rescans the registry.

Example::

    form = use_form_container()
    name = bind_field(form, "name", FieldOptions(required=True))
    name.attach()

    form.validate_form()
    form.total_errors.value  # 1, "name" is empty
"""

import logging
from collections.abc import Callable
from typing import Protocol

from formkeeper.config import FormConfig
from formkeeper.observable import Observable

logger = logging.getLogger("formkeeper.container")


class FormContext(Protocol):
    """What a field binding needs from its enclosing form."""

    @property
    def config(self) -> FormConfig: ...

    def register(self, field_id: str, validate: Callable[[], None]) -> None: ...

    def deregister(self, field_id: str) -> None: ...

    def update_error_state(self, field_id: str, is_in_error_state: bool) -> None: ...


class FormContainer:
    """Registry of fields plus the form-wide error total.

    Invariant: ``total_errors.value`` equals the number of registered
    fields whose last reported state is True, plus any fields that were
    deregistered while in error (unless ``decrement_on_deregister`` is set).
    """

    __slots__ = ("_config", "_error_states", "_total_errors", "_validators")

    def __init__(self, config: FormConfig | None = None) -> None:
        self._config = config or FormConfig()
        self._validators: dict[str, Callable[[], None]] = {}
        self._error_states: dict[str, bool] = {}
        self._total_errors: Observable[int] = Observable(
            0, buffer_size=self._config.change_buffer_size
        )

    @property
    def config(self) -> FormConfig:
        return self._config

    @property
    def total_errors(self) -> Observable[int]:
        """Number of fields currently in error, as a live value."""
        return self._total_errors

    @property
    def is_valid(self) -> bool:
        """True when no field is counted as in error."""
        return self._total_errors.value == 0

    # -- FormContext --

    def register(self, field_id: str, validate: Callable[[], None]) -> None:
        """Register *validate* under *field_id*; the field starts out of error.

        Registering an existing identifier replaces its callback. The
        error total is not touched.
        """
        replaced = field_id in self._validators
        self._validators[field_id] = validate
        self._error_states[field_id] = False
        logger.debug("field %r %s", field_id, "re-registered" if replaced else "registered")

    def deregister(self, field_id: str) -> None:
        """Forget *field_id*. Unknown identifiers are ignored.

        A field deregistered while in error keeps counting toward
        ``total_errors`` unless the config sets ``decrement_on_deregister``.
        """
        self._validators.pop(field_id, None)
        was_in_error = self._error_states.pop(field_id, False)
        logger.debug("field %r deregistered", field_id)

        if not was_in_error:
            return
        if self._config.decrement_on_deregister:
            self._total_errors.set(self._total_errors.value - 1)
        else:
            logger.warning(
                "field %r deregistered while in error; total_errors stays at %d",
                field_id,
                self._total_errors.value,
            )

    def update_error_state(self, field_id: str, is_in_error_state: bool) -> None:
        """Record a field's error state and adjust the total on transitions.

        Reporting the same state twice is a no-op.
        Reports for identifiers that are not registered are ignored.
        """
        if field_id not in self._validators:
            logger.debug("ignoring error state for unregistered field %r", field_id)
            return
        if self._error_states[field_id] == is_in_error_state:
            return
        self._error_states[field_id] = is_in_error_state
        delta = 1 if is_in_error_state else -1
        logger.debug(
            "field %r %s error", field_id, "entered" if is_in_error_state else "left"
        )
        self._total_errors.set(self._total_errors.value + delta)

    # -- Form-wide --

    def validate_form(self) -> None:
        """Run every registered field's validation callback.

        Each callback reports back through ``update_error_state()``, so
        ``total_errors`` is current when this returns.
        """
        for validate in list(self._validators.values()):
            validate()

    # -- Inspection --

    def error_state(self, field_id: str) -> bool | None:
        """The stored error state for *field_id*, or ``None`` if unregistered."""
        return self._error_states.get(field_id)

    @property
    def field_ids(self) -> tuple[str, ...]:
        return tuple(self._validators)

    def __contains__(self, field_id: object) -> bool:
        return field_id in self._validators

    def __len__(self) -> int:
        return len(self._validators)

    def __repr__(self) -> str:
        return f"<FormContainer fields={len(self._validators)} total_errors={self._total_errors.value}>"


def use_form_container(config: FormConfig | None = None) -> FormContainer:
    """Create a coordinator for one form.

    Pass the returned container to each field binding; call
    ``validate_form()`` on submit and watch ``total_errors`` to gate it.
    """
    return FormContainer(config)
