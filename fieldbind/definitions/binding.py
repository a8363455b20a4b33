"""Binding a single submission against a form definition."""

from typing import Any

from pydantic import BaseModel, Field

from fieldbind.definitions.loader import build_form, definition_translator
from fieldbind.definitions.models import FormDefinition
from fieldbind.wrapping import ReconcileDecision


class BindingResult(BaseModel):
    """Outcome of binding and validating one submission."""

    form_id: str
    valid: bool
    fields: dict[str, Any]
    errors: dict[str, list[str]] = Field(default_factory=dict)
    messages: dict[str, list[str]] = Field(default_factory=dict)
    wrappers: list[ReconcileDecision] = Field(default_factory=list)


def bind_submission(
    definition: FormDefinition,
    submission: Any,
    flat: bool = False,
) -> BindingResult:
    """Import ``submission`` into a fresh form, validate it and report.

    Only fields with errors appear in ``errors`` and ``messages``. Wrapper
    fields are reported too, with the errors borrowed from the fields they
    wrap.

    Args:
        definition: The form definition.
        submission: Nested submission data. Non-mapping input binds nothing.
        flat: Report fields by flat name instead of nested.
    """
    form = build_form(definition, submission)
    valid = form.validate()
    translator = definition_translator(definition)

    errors: dict[str, list[str]] = {}
    messages: dict[str, list[str]] = {}
    reported = list(form.validation.chains)
    for mapping in form.wrappers.mappings:
        for name in mapping.wrapper_fields:
            if name not in reported:
                reported.append(name)

    for field_name in reported:
        field_errors = form.get_errors(field_name)
        if field_errors:
            errors[field_name] = field_errors
        field_messages = form.get_error_messages(field_name, translator)
        if field_messages:
            messages[field_name] = field_messages

    return BindingResult(
        form_id=definition.form_id,
        valid=valid,
        fields=form.to_flat() if flat else form.to_nested(),
        errors=errors,
        messages=messages,
        wrappers=form.wrappers.last_decisions,
    )
