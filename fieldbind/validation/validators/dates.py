"""Date validators."""

from datetime import datetime
from typing import Any

from fieldbind.validation.base import BaseValidator


class Date(BaseValidator):
    """Requires a string that parses with the given ``strptime`` format."""

    name = "Date"

    def __init__(self, format: str = "%Y-%m-%d") -> None:
        super().__init__()
        self.format = format

    def _validate(self, value: Any) -> None:
        if not isinstance(value, str):
            self.add_error("invalid_format", format=self.format)
            return
        try:
            datetime.strptime(value, self.format)
        except ValueError:
            self.add_error("invalid_format", format=self.format)
