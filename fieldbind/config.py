"""Form configuration model.

The configuration is read once at construction time and is immutable
afterwards. Besides the recognized options below, any extra option name is
accepted so subclasses can carry their own settings.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_DELIMITER = ":"
BUILTIN_VALIDATOR_NAMESPACE = "fieldbind.validation.validators"


class FormConfig(BaseModel):
    """Immutable form configuration."""

    delimiter: str = DEFAULT_DELIMITER
    validation_namespaces: tuple[str, ...] = Field(
        default=("", BUILTIN_VALIDATOR_NAMESPACE)
    )
    wrapped_fallback: bool = True

    model_config = ConfigDict(frozen=True, extra="allow")

    @field_validator("delimiter")
    @classmethod
    def delimiter_not_empty(cls, value: str) -> str:
        """Reject an empty delimiter, which would make paths unsplittable."""
        if not value:
            raise ValueError("delimiter must be a non-empty string")
        return value

    def get(self, key: str) -> Any:
        """Return an option value, or None if the option is not set."""
        if key in type(self).model_fields:
            return getattr(self, key)
        return (self.model_extra or {}).get(key)

    def merged(self, overrides: "dict[str, Any] | FormConfig | None") -> "FormConfig":
        """Return a new config with ``overrides`` applied on top of this one."""
        if overrides is None:
            return self
        if isinstance(overrides, FormConfig):
            overrides = overrides.model_dump(exclude_unset=True)
        data = self.model_dump()
        data.update(overrides)
        return FormConfig.model_validate(data)
