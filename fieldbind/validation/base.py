"""
Base validator class that all field validators inherit from.
"""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, Field


class FieldError(BaseModel):
    """A single validation error: a code plus the parameters for its message."""

    code: str
    params: dict[str, Any] = Field(default_factory=dict)


class BaseValidator(ABC):
    """Abstract base class for all field validators.

    Subclasses implement `_validate` and report failures through
    `add_error`. The errors of the last `is_valid` call stay available on the
    `errors` attribute until the next call.

    Attributes:
        name (str): The display name of the validator.
        break_chain_on_failure (bool): If True, a failing validator stops the
            remaining validators of its chain from running.
    """

    name: str = "UnnamedValidator"
    break_chain_on_failure: bool = False

    def __init__(self) -> None:
        self.errors: list[FieldError] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def is_valid(self, value: Any) -> bool:
        """Validates a value, replacing the errors of any previous call.

        Args:
            value (Any): The field value to validate.

        Returns:
            bool: True if no errors were reported.
        """
        self.errors = []
        self._validate(value)
        return not self.errors

    @abstractmethod
    def _validate(self, value: Any) -> None:
        """Abstract method for implementing the validation logic.

        Implementations call `add_error` for every problem found.
        """
        raise NotImplementedError("Subclasses must implement _validate()")

    def add_error(self, code: str, **params: Any) -> None:
        """Records a validation error.

        Args:
            code (str): The error code, used as the message key.
            **params: Values interpolated into the translated message.
        """
        self.errors.append(FieldError(code=code, params=params))

    def get_errors(self) -> list[str]:
        """Returns the error codes of the last run."""
        return [error.code for error in self.errors]
