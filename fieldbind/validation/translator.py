"""Translation of error codes into human-readable messages."""

from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable

from fieldbind.validation.base import FieldError


@runtime_checkable
class Translator(Protocol):
    """Protocol for objects turning an error code into a message."""

    def translate(self, code: str, params: Mapping[str, Any]) -> str:
        """Return the message for ``code``, interpolating ``params``."""
        ...


TranslatorLike = Translator | Callable[[str, Mapping[str, Any]], str]


class _KeepMissing(dict):
    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


DEFAULT_MESSAGES: dict[str, str] = {
    "not_empty": "Value is required and can't be empty",
    "too_short": "Value must be at least {min} characters long",
    "too_long": "Value must be at most {max} characters long",
    "regex_no_match": "Value does not match the pattern '{pattern}'",
    "not_in_array": "Value is not one of the allowed values",
    "not_between": "Value must be between {min} and {max}",
    "not_numeric": "Value must be a number",
    "not_digits": "Value must contain only digits",
    "invalid_email": "Value is not a valid email address",
    "invalid_format": "Value does not match the format '{format}'",
    "invalid_type": "Value has an invalid type",
    "schema_violation": "Value does not match the schema: {detail}",
}


class DictTranslator:
    """Translator backed by a mapping of error codes to message templates.

    Templates use ``str.format`` fields named after the error parameters.
    Unknown codes translate to the code itself; unknown fields are left in
    the message untouched. A template that cannot be formatted with the
    params (positional fields, a format spec on a missing param) also
    translates to the code.
    """

    def __init__(self, templates: Mapping[str, str] | None = None) -> None:
        self.templates = dict(DEFAULT_MESSAGES if templates is None else templates)

    def translate(self, code: str, params: Mapping[str, Any]) -> str:
        template = self.templates.get(code)
        if template is None:
            return code
        try:
            return template.format_map(_KeepMissing(params))
        except (ValueError, IndexError, KeyError, AttributeError):
            return code


def render_message(error: FieldError, translator: TranslatorLike | None) -> str:
    """Render one error with an optional translator.

    Without a translator the raw error code is returned.
    """
    if translator is None:
        return error.code
    if isinstance(translator, Translator):
        return translator.translate(error.code, error.params)
    return translator(error.code, error.params)
