"""Numeric validators."""

from typing import Any

from fieldbind.validation.base import BaseValidator


def _to_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value).strip())
    except ValueError:
        return None


class Between(BaseValidator):
    """Requires a numeric value within ``[min, max]`` (or the open interval)."""

    name = "Between"

    def __init__(self, min: float, max: float, inclusive: bool = True) -> None:
        super().__init__()
        self.min = min
        self.max = max
        self.inclusive = inclusive

    def _validate(self, value: Any) -> None:
        number = _to_number(value)
        if number is None:
            self.add_error("not_numeric")
            return
        if self.inclusive:
            within = self.min <= number <= self.max
        else:
            within = self.min < number < self.max
        if not within:
            self.add_error("not_between", min=self.min, max=self.max)
