"""Form configuration.

FormConfig is a frozen dataclass: immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

DEFAULT_REQUIRED_MESSAGE = "This field is required"


@dataclass(frozen=True, slots=True)
class FormConfig:
    """Form configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = FormConfig(decrement_on_deregister=True)
    """

    # Validation
    required_message: str = DEFAULT_REQUIRED_MESSAGE

    # Error aggregation
    decrement_on_deregister: bool = False  # Drop a detached field's error from the total
    report_valid_as_error: bool = False  # Report "no messages" as the error state, inverting it

    # Bound fields re-validate on assignment once validated at least once
    validate_on_change: bool = True

    # Async change streams
    change_buffer_size: int = 256  # Per-subscriber; newer values are dropped when full
