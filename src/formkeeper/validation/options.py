"""Per-field validation options."""

from collections.abc import Sequence
from dataclasses import dataclass

from formkeeper.validation.rules import Validator


@dataclass(frozen=True, slots=True)
class FieldOptions[T]:
    """What a single field accepts.

    ``default_value`` seeds a bound field's initial value; the coordinator
    never looks at it. ``required`` and ``validators`` feed ``validate()``.

    Usage::

        title = FieldOptions(required=True, validators=(max_length(200),))
    """

    default_value: T | None = None
    required: bool = False
    validators: Sequence[Validator[T]] = ()
