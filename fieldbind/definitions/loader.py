"""Loading form definitions and building forms from them."""

import json
from pathlib import Path
from typing import Any

import jsonschema

from fieldbind.definitions.models import FormDefinition
from fieldbind.form import Form
from fieldbind.validation import DEFAULT_MESSAGES, DictTranslator
from fieldbind.wrapping import get_converter_factory


class DefinitionValidationError(Exception):
    """Raised when a form definition fails schema validation."""

    pass


def load_definition(
    path: Path | str,
    schema_path: Path | str | None = None,
) -> FormDefinition:
    """Load a form definition from a JSON file.

    Validator names are resolved by importing modules, so only load
    definitions from trusted sources.

    Args:
        path: Path to the definition JSON file.
        schema_path: Optional JSON schema the raw document must satisfy.

    Returns:
        The parsed FormDefinition.

    Raises:
        FileNotFoundError: If the definition file does not exist.
        DefinitionValidationError: If the document fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Form definition not found: {path}")

    with open(path) as f:
        data = json.load(f)

    if schema_path is not None:
        with open(schema_path) as f:
            schema = json.load(f)
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise DefinitionValidationError(
                f"Form definition validation failed for {path}: {e.message}"
            ) from e

    return FormDefinition.model_validate(data)


def build_form(definition: FormDefinition, fields: Any = None) -> Form:
    """Build a form configured by ``definition`` and import ``fields``.

    Validators are appended in declaration order and wrappers are registered
    before the initial import, so the import is reconciled.

    Raises:
        ValidatorNotFoundError: If a validator name does not resolve.
        ConverterNotFoundError: If a wrapper references an unknown converter.
    """
    form = Form(config={"delimiter": definition.delimiter, "form_id": definition.form_id})

    for namespace in definition.validation_namespaces:
        form.append_validation_namespace(namespace)

    for field_name, specs in definition.fields.items():
        for spec in specs:
            form.append_validator(field_name, spec.validator, spec.args)

    for wrapper in definition.wrappers:
        to_factory = get_converter_factory(wrapper.to.converter)
        from_factory = get_converter_factory(wrapper.from_.converter)
        form.add_wrapper(
            wrapper.wrapper_fields,
            wrapper.wrapped_fields,
            to_factory(form.store),
            from_factory(form.store),
            wrapper.to.args,
            wrapper.from_.args,
        )

    if fields is not None:
        form.from_nested(fields)
    return form


def definition_translator(definition: FormDefinition) -> DictTranslator:
    """Translator using the built-in messages overridden by the definition's."""
    return DictTranslator({**DEFAULT_MESSAGES, **definition.messages})
