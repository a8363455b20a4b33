"""Validation orchestrator.

Holds one validator chain per field, runs the chains against a field store,
and reports errors and messages. A field without a chain is always valid.

When a field has no errors of its own, its errors can fall back to those of
the fields it wraps (see :class:`~fieldbind.wrapping.WrapperEngine`). This
lets a presentation field such as ``date`` report the failure of the
underlying ``datetime`` field. The fallback goes one level deep only.
"""

import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any

from fieldbind.store import FieldStore
from fieldbind.validation.base import BaseValidator
from fieldbind.validation.chain import ValidationChain
from fieldbind.validation.resolver import ValidatorResolver
from fieldbind.validation.translator import TranslatorLike
from fieldbind.wrapping import WrapperEngine

logger = logging.getLogger(__name__)


class ValidationOrchestrator:
    """Runs per-field validator chains and aggregates their results."""

    def __init__(
        self,
        resolver: ValidatorResolver | None = None,
        engine: WrapperEngine | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            resolver: Resolves validator names. Defaults to the built-in
                namespaces.
            engine: Supplies wrapper metadata for the error fallback. Without
                one, fields wrap nothing.
        """
        self.resolver = resolver if resolver is not None else ValidatorResolver()
        self.engine = engine if engine is not None else WrapperEngine()
        self._chains: dict[str, ValidationChain] = {}

    @property
    def chains(self) -> Mapping[str, ValidationChain]:
        """Chains by field name, in creation order."""
        return MappingProxyType(self._chains)

    def get_chain(self, field_name: str) -> ValidationChain | None:
        return self._chains.get(field_name)

    def _chain_for(self, field_name: str) -> ValidationChain:
        if field_name not in self._chains:
            self._chains[field_name] = ValidationChain()
        return self._chains[field_name]

    def append_validator(
        self,
        field_name: str,
        qualified_name: str,
        constructor_args: Sequence[Any] = (),
    ) -> BaseValidator:
        """Resolve a validator by name and append it to a field's chain.

        The validator is resolved before the chain is touched, so a failed
        lookup leaves existing chains as they were.

        Args:
            field_name: The field to validate.
            qualified_name: Validator name, resolved against the namespaces.
            constructor_args: Positional arguments for the validator.

        Returns:
            The appended validator instance.

        Raises:
            ValidatorNotFoundError: If the name resolves in no namespace.
        """
        validator = self.resolver.create(qualified_name, constructor_args)
        self._chain_for(field_name).append_validator(validator)
        return validator

    def add_custom_error(self, field_name: str, code: str, **params: Any) -> None:
        """Attach an error detected outside the declared validators."""
        self._chain_for(field_name).add_custom_error(code, **params)

    def validate(self, store: FieldStore) -> bool:
        """Run every chain against the current store values.

        Chains are not re-run automatically when fields change; call this
        again after mutating the store.

        Returns:
            True only if every chain is valid.
        """
        valid = True
        for field_name, chain in self._chains.items():
            if not chain.is_valid(store.get(field_name)):
                logger.debug("Field %r failed: %s", field_name, chain.get_errors())
                valid = False
        return valid

    def is_valid(self, field_name: str) -> bool:
        """Whether the last run left ``field_name`` without errors."""
        chain = self._chains.get(field_name)
        if chain is None:
            return True
        return not chain.get_errors()

    def get_error_messages(
        self,
        field_name: str | None = None,
        translator: TranslatorLike | None = None,
    ) -> list[str] | dict[str, list[str]]:
        """Return rendered error messages for one field or for all chains.

        Args:
            field_name: The field, or None for a dict covering every chain.
            translator: Renders codes into messages; raw codes when omitted.
        """
        if field_name is None:
            return {
                name: chain.get_messages(translator)
                for name, chain in self._chains.items()
            }

        chain = self._chains.get(field_name)
        if chain is None:
            return []
        return chain.get_messages(translator)

    def get_errors(
        self,
        field_name: str | None = None,
        wrapped_fallback: bool = True,
    ) -> list[str] | dict[str, list[str]]:
        """Return error codes for one field or for all chains.

        With ``wrapped_fallback`` a field that has no errors of its own
        (including one without a chain) reports the errors of the fields it
        wraps. Those are collected with the fallback disabled, so mutually
        wrapping fields cannot recurse.

        Args:
            field_name: The field, or None for a dict covering every chain.
            wrapped_fallback: Whether to borrow errors from wrapped fields.
        """
        if field_name is None:
            return {
                name: self._field_errors(name, wrapped_fallback)
                for name in self._chains
            }
        return self._field_errors(field_name, wrapped_fallback)

    def _field_errors(self, field_name: str, wrapped_fallback: bool) -> list[str]:
        chain = self._chains.get(field_name)
        errors = chain.get_errors() if chain is not None else []
        if errors or not wrapped_fallback:
            return errors

        for wrapped_name in self.engine.wrapped_fields_of(field_name):
            errors.extend(self._field_errors(wrapped_name, False))
        return errors
