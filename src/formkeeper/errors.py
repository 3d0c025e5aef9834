"""Formkeeper exception hierarchy.

Validation failures are never raised. They are returned as data (lists of
messages). Exceptions here signal programmer errors in how the coordinator
and its fields are wired together.
"""


class FormkeeperError(Exception):
    """Base for all formkeeper-specific errors."""


class ConfigurationError(FormkeeperError):
    """Raised when a form is wired incorrectly.

    Typically raised while constructing a field binding that has no
    enclosing ``FormContainer`` to report to.
    """
