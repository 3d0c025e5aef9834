"""Formkeeper — field validation coordination for interactive forms.

Tracks a dynamic set of fields, runs their rules on demand, and keeps a
form-wide error count that a submit button can react to.

Basic usage::

    from formkeeper import FieldOptions, bind_field, use_form_container
    from formkeeper.validation import max_length

    form = use_form_container()
    title = bind_field(form, "title", FieldOptions(
        required=True, validators=(max_length(200),),
    ))
    title.attach()

    form.total_errors.subscribe(lambda total: print("errors:", total))
    form.validate_form()  # errors: 1
"""

__version__ = "0.1.0-dev"
__all__ = [
    "BoundField",
    "ConfigurationError",
    "FieldOptions",
    "FieldState",
    "FormConfig",
    "FormContainer",
    "FormContext",
    "FormField",
    "FormkeeperError",
    "Observable",
    "ValidationResult",
    "Validator",
    "bind_field",
    "use_form_container",
    "use_form_field",
    "validate",
    "validate_data",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import formkeeper`` fast while providing a clean top-level API.
    """
    if name == "FormConfig":
        from formkeeper.config import FormConfig

        return FormConfig

    if name in ("FormContainer", "FormContext", "use_form_container"):
        from formkeeper import container as _container

        return getattr(_container, name)

    if name in ("BoundField", "FormField", "bind_field", "use_form_field"):
        from formkeeper import field as _field

        return getattr(_field, name)

    if name in (
        "FieldOptions",
        "FieldState",
        "ValidationResult",
        "Validator",
        "validate",
        "validate_data",
    ):
        from formkeeper import validation as _validation

        return getattr(_validation, name)

    if name == "Observable":
        from formkeeper.observable import Observable

        return Observable

    if name in ("ConfigurationError", "FormkeeperError"):
        from formkeeper import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
