"""Presence validators."""

from typing import Any

from fieldbind.validation.base import BaseValidator


class NotEmpty(BaseValidator):
    """Fails on None, empty strings (after stripping) and empty containers."""

    name = "NotEmpty"
    break_chain_on_failure = True

    def _validate(self, value: Any) -> None:
        if value is None:
            self.add_error("not_empty")
        elif isinstance(value, str):
            if not value.strip():
                self.add_error("not_empty")
        elif isinstance(value, (list, tuple, dict, set)) and not value:
            self.add_error("not_empty")
