"""String validators.

These operate on the string form of a value; missing fields arrive as an
empty string.
"""

import re
from typing import Any

from fieldbind.validation.base import BaseValidator

# One "@", no whitespace, and a dot somewhere in the domain part.
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class StringLength(BaseValidator):
    """Checks the length of a value against optional bounds."""

    name = "StringLength"

    def __init__(self, min: int = 0, max: int | None = None) -> None:
        super().__init__()
        self.min = min
        self.max = max

    def _validate(self, value: Any) -> None:
        length = len(str(value))
        if length < self.min:
            self.add_error("too_short", min=self.min, length=length)
        if self.max is not None and length > self.max:
            self.add_error("too_long", max=self.max, length=length)


class Regex(BaseValidator):
    """Requires the value to match a regular expression (``re.search``)."""

    name = "Regex"

    def __init__(self, pattern: str, flags: int = 0) -> None:
        super().__init__()
        self.pattern = pattern
        self._compiled = re.compile(pattern, flags)

    def _validate(self, value: Any) -> None:
        if not isinstance(value, (str, int, float)):
            self.add_error("invalid_type")
            return
        if self._compiled.search(str(value)) is None:
            self.add_error("regex_no_match", pattern=self.pattern)


class Digits(BaseValidator):
    """Requires a non-empty value made of decimal digits only."""

    name = "Digits"

    def _validate(self, value: Any) -> None:
        text = str(value)
        if not text or not text.isdigit():
            self.add_error("not_digits")


class EmailAddress(BaseValidator):
    """Basic structural email address check."""

    name = "EmailAddress"

    def _validate(self, value: Any) -> None:
        if not isinstance(value, str) or not EMAIL_PATTERN.match(value):
            self.add_error("invalid_email")
