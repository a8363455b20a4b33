"""Ordered validator chain for a single field."""

from typing import Any

from fieldbind.validation.base import BaseValidator, FieldError
from fieldbind.validation.translator import TranslatorLike, render_message


class ValidationChain:
    """Runs an ordered sequence of validators against one field value.

    Errors from the validators are replaced on every run. Custom errors,
    added by the caller for failures detected outside the chain, are kept
    across runs and always reported after the validator errors.
    """

    def __init__(self) -> None:
        self._validators: list[BaseValidator] = []
        self._errors: list[FieldError] = []
        self._custom_errors: list[FieldError] = []

    def __len__(self) -> int:
        return len(self._validators)

    @property
    def validators(self) -> tuple[BaseValidator, ...]:
        return tuple(self._validators)

    @property
    def errors(self) -> list[FieldError]:
        """Errors of the last run followed by the custom errors."""
        return self._errors + self._custom_errors

    def append_validator(self, validator: BaseValidator) -> None:
        self._validators.append(validator)

    def add_custom_error(self, code: str, **params: Any) -> None:
        self._custom_errors.append(FieldError(code=code, params=params))

    def is_valid(self, value: Any) -> bool:
        """Run every validator against ``value``.

        Returns:
            True if neither the validators nor custom errors report anything.
        """
        errors: list[FieldError] = []
        for validator in self._validators:
            if validator.is_valid(value):
                continue
            errors.extend(validator.errors)
            if validator.break_chain_on_failure:
                break
        self._errors = errors
        return not self.errors

    def get_errors(self) -> list[str]:
        """Error codes of the last run, custom errors included."""
        return [error.code for error in self.errors]

    def get_messages(self, translator: TranslatorLike | None = None) -> list[str]:
        """Rendered error messages; raw codes when no translator is given."""
        return [render_message(error, translator) for error in self.errors]
