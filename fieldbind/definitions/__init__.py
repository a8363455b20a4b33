"""Declarative form definitions loaded from JSON."""

from fieldbind.definitions.binding import BindingResult, bind_submission
from fieldbind.definitions.loader import (
    DefinitionValidationError,
    build_form,
    definition_translator,
    load_definition,
)
from fieldbind.definitions.models import (
    ConverterSpec,
    FormDefinition,
    ValidatorSpec,
    WrapperSpec,
)

__all__ = [
    "BindingResult",
    "ConverterSpec",
    "DefinitionValidationError",
    "FormDefinition",
    "ValidatorSpec",
    "WrapperSpec",
    "bind_submission",
    "build_form",
    "definition_translator",
    "load_definition",
]
