"""Built-in field validators.

This package is the default validator namespace: a validator appended as
``"NotEmpty"`` resolves to ``fieldbind.validation.validators.NotEmpty``
when no earlier namespace provides it.
"""

from fieldbind.validation.validators.choices import InArray
from fieldbind.validation.validators.dates import Date
from fieldbind.validation.validators.numbers import Between
from fieldbind.validation.validators.presence import NotEmpty
from fieldbind.validation.validators.schema import JsonSchema
from fieldbind.validation.validators.strings import (
    Digits,
    EmailAddress,
    Regex,
    StringLength,
)

__all__ = [
    "Between",
    "Date",
    "Digits",
    "EmailAddress",
    "InArray",
    "JsonSchema",
    "NotEmpty",
    "Regex",
    "StringLength",
]
