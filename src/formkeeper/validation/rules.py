"""Built-in validation rules for formkeeper fields.

Each validator is a callable with the signature::

    def rule(value: T | None) -> str | None:
        '''Return error message, or None if valid.'''

Parameterized validators are factory functions that return a validator::

    def max_length(n: int) -> Validator[str]:
        def check(value: str | None) -> str | None:
            if not is_missing(value) and len(value) > n:
                return f"Must be at most {n} characters"
            return None
        return check

Presence is the job of the field's ``required`` flag, so every built-in
rule lets a missing value (``None`` or ``""``) through. Custom validators
follow the same protocol and may treat missing values however they like.
"""

import re
from collections.abc import Callable
from typing import Any

# Type alias for a validator function
type Validator[T] = Callable[[T | None], str | None]


def is_missing(value: object) -> bool:
    """True for ``None`` and the empty string, nothing else.

    ``0``, ``False`` and empty containers are present values.
    """
    return value is None or (isinstance(value, str) and value == "")


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def max_length(n: int) -> Validator[Any]:
    """Value must be at most *n* characters (or items)."""

    def check(value: Any) -> str | None:
        if not is_missing(value) and len(value) > n:
            return f"Must be at most {n} characters"
        return None

    return check


def min_length(n: int) -> Validator[Any]:
    """Value must be at least *n* characters (or items)."""

    def check(value: Any) -> str | None:
        if not is_missing(value) and len(value) < n:
            return f"Must be at least {n} characters"
        return None

    return check


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------

# Structure only, not deliverability
_EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}$")


def email(value: str | None) -> str | None:
    """Value must be a valid email address (basic format check)."""
    if is_missing(value):
        return None
    if not _EMAIL_RE.match(str(value)):
        return "Must be a valid email address"
    return None


# http(s) scheme plus a host
_URL_RE = re.compile(r"^https?://[^\s/$.?#].\S*$", re.IGNORECASE)


def url(value: str | None) -> str | None:
    """Value must be a valid URL (http/https)."""
    if is_missing(value):
        return None
    if not _URL_RE.match(str(value)):
        return "Must be a valid URL"
    return None


def matches(pattern: str, message: str | None = None) -> Validator[str]:
    """Value must match the given regex pattern."""
    compiled = re.compile(pattern)

    def check(value: str | None) -> str | None:
        if is_missing(value):
            return None
        if not compiled.match(str(value)):
            return message or f"Must match pattern: {pattern}"
        return None

    return check


# ---------------------------------------------------------------------------
# Choice
# ---------------------------------------------------------------------------


def one_of(*choices: str) -> Validator[str]:
    """Value must be one of the given choices."""
    allowed = frozenset(choices)

    def check(value: str | None) -> str | None:
        if is_missing(value):
            return None
        if value not in allowed:
            options = ", ".join(sorted(allowed))
            return f"Must be one of: {options}"
        return None

    return check


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


def integer(value: Any) -> str | None:
    """Value must be a whole number (an ``int`` or an integer string)."""
    if is_missing(value):
        return None
    if isinstance(value, bool):
        return "Must be a whole number"
    if isinstance(value, int):
        return None
    try:
        int(value)
    except (ValueError, TypeError):
        return "Must be a whole number"
    return None


def number(value: Any) -> str | None:
    """Value must be a number (int, float, or a numeric string)."""
    if is_missing(value):
        return None
    if isinstance(value, bool):
        return "Must be a number"
    try:
        float(value)
    except (ValueError, TypeError):
        return "Must be a number"
    return None


def min_value(n: float) -> Validator[Any]:
    """Numeric value must be at least *n*. Non-numeric values are left to ``number``."""

    def check(value: Any) -> str | None:
        parsed = _as_float(value)
        if parsed is not None and parsed < n:
            return f"Must be at least {n}"
        return None

    return check


def max_value(n: float) -> Validator[Any]:
    """Numeric value must be at most *n*. Non-numeric values are left to ``number``."""

    def check(value: Any) -> str | None:
        parsed = _as_float(value)
        if parsed is not None and parsed > n:
            return f"Must be at most {n}"
        return None

    return check


def _as_float(value: Any) -> float | None:
    if is_missing(value) or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (ValueError, TypeError):
        return None


# ---------------------------------------------------------------------------
# Custom
# ---------------------------------------------------------------------------


def predicate[T](check: Callable[[T | None], bool], message: str) -> Validator[T]:
    """Wrap a boolean check as a validator.

    Unlike the other built-ins, *check* sees missing values too::

        agreed = predicate(lambda v: v is True, "You must accept the terms")
    """

    def rule(value: T | None) -> str | None:
        if not check(value):
            return message
        return None

    return rule
