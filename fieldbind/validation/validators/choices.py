"""Choice validators."""

from collections.abc import Iterable
from typing import Any

from fieldbind.validation.base import BaseValidator


class InArray(BaseValidator):
    """Requires the value to be one of a fixed set of allowed values.

    Submitted values are usually strings, so with ``strict=False`` (the
    default) values are compared by their string form.
    """

    name = "InArray"

    def __init__(self, haystack: Iterable[Any], strict: bool = False) -> None:
        super().__init__()
        self.haystack = list(haystack)
        self.strict = strict

    def _validate(self, value: Any) -> None:
        if self.strict:
            found = value in self.haystack
        else:
            found = str(value) in {str(item) for item in self.haystack}
        if not found:
            self.add_error("not_in_array", haystack=self.haystack)
