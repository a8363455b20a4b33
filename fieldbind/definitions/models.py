"""Pydantic models for declarative form definitions."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from fieldbind.config import DEFAULT_DELIMITER


class ValidatorSpec(BaseModel):
    """A validator appended to a field, by qualified name."""

    validator: str
    args: list[Any] = Field(default_factory=list)


class ConverterSpec(BaseModel):
    """A built-in converter referenced by name, with its extra arguments."""

    converter: str
    args: list[Any] = Field(default_factory=list)


class WrapperSpec(BaseModel):
    """Wrapper mapping between two field sets."""

    wrapper_fields: list[str]
    wrapped_fields: list[str]
    to: ConverterSpec
    from_: ConverterSpec = Field(alias="from")

    model_config = ConfigDict(populate_by_name=True)


class FormDefinition(BaseModel):
    """Complete declarative form definition."""

    form_id: str
    version: str = "1.0.0"
    description: str | None = None
    delimiter: str = DEFAULT_DELIMITER
    validation_namespaces: list[str] = Field(default_factory=list)
    fields: dict[str, list[ValidatorSpec]] = Field(default_factory=dict)
    wrappers: list[WrapperSpec] = Field(default_factory=list)
    messages: dict[str, str] = Field(default_factory=dict)

    def validator_names(self) -> list[tuple[str, str]]:
        """All (field, validator) pairs in declaration order."""
        return [
            (field_name, spec.validator)
            for field_name, specs in self.fields.items()
            for spec in specs
        ]
