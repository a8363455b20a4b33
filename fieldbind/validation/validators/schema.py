"""JSON schema validator for structured field values."""

from typing import Any

import jsonschema

from fieldbind.validation.base import BaseValidator


class JsonSchema(BaseValidator):
    """Validates a value against a JSON schema.

    Every schema violation is reported as a separate ``schema_violation``
    error, ordered by the path of the offending value.
    """

    name = "JsonSchema"

    def __init__(self, schema: dict[str, Any]) -> None:
        super().__init__()
        jsonschema.Draft202012Validator.check_schema(schema)
        self.schema = schema
        self._validator = jsonschema.Draft202012Validator(schema)

    def _validate(self, value: Any) -> None:
        violations = sorted(
            self._validator.iter_errors(value),
            key=lambda e: [str(part) for part in e.absolute_path],
        )
        for violation in violations:
            self.add_error(
                "schema_violation",
                detail=violation.message,
                path="/".join(str(part) for part in violation.absolute_path),
            )
