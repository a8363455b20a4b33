"""Wrapper engine.

Wrapper fields let the presentation of a form differ from the fields a
consumer expects. A consumer may want a single ``datetime`` field while the
submitted form carries separate ``date`` and ``time`` fields. The engine
holds the mappings between such field sets and, after every bulk import,
decides per mapping which direction of conversion (if any) to run based on
which side has all of its fields present.

The engine does not guard against converters that keep feeding each other:
each mapping is considered once per pass, in registration order, and a
converter's writes are visible to the mappings after it.
"""

import logging
from collections.abc import Iterable
from typing import Any

from fieldbind.store import FieldStore
from fieldbind.wrapping.mapping import (
    Converter,
    ReconcileAction,
    ReconcileDecision,
    WrapperMapping,
)

logger = logging.getLogger(__name__)


class WrapperEngine:
    """Registry of wrapper mappings and the reconciliation pass over them."""

    def __init__(self) -> None:
        self._mappings: list[WrapperMapping] = []
        self.last_decisions: list[ReconcileDecision] = []

    @property
    def mappings(self) -> tuple[WrapperMapping, ...]:
        """Registered mappings in registration order."""
        return tuple(self._mappings)

    def register(
        self,
        wrapper_fields: Iterable[str],
        wrapped_fields: Iterable[str],
        to_converter: Converter,
        from_converter: Converter,
        to_args: Iterable[Any] = (),
        from_args: Iterable[Any] = (),
    ) -> WrapperMapping:
        """Register a wrapper mapping.

        The field sets are not checked for overlap or emptiness; overlapping
        sets give undefined (but non-crashing) reconciliation results.

        Args:
            wrapper_fields: Names of the presentation fields.
            wrapped_fields: Names of the underlying fields.
            to_converter: Derives wrapped fields from wrapper fields.
            from_converter: Derives wrapper fields from wrapped fields.
            to_args: Extra positional arguments for ``to_converter``.
            from_args: Extra positional arguments for ``from_converter``.

        Returns:
            The registered mapping.
        """
        mapping = WrapperMapping(
            wrapper_fields=tuple(wrapper_fields),
            wrapped_fields=tuple(wrapped_fields),
            to_converter=to_converter,
            from_converter=from_converter,
            to_args=tuple(to_args),
            from_args=tuple(from_args),
        )
        self._mappings.append(mapping)
        return mapping

    def reconcile(self, store: FieldStore) -> list[ReconcileDecision]:
        """Run at most one converter per mapping to make the store consistent.

        A side is "missing" when any of its fields is absent from the store.
        Only when exactly one side is missing is a converter run, filling that
        side from the complete one. Existing values are never overwritten by
        inference. Converter exceptions propagate; fields written by earlier
        mappings in the same pass stay written.

        Args:
            store: The field store to inspect and update.

        Returns:
            One decision per mapping, in registration order.
        """
        decisions: list[ReconcileDecision] = []

        for index, mapping in enumerate(self._mappings):
            missing_wrapper = any(not store.has(name) for name in mapping.wrapper_fields)
            missing_wrapped = any(not store.has(name) for name in mapping.wrapped_fields)

            if missing_wrapper and missing_wrapped:
                action = ReconcileAction.SKIPPED_NO_DATA
            elif not missing_wrapper and not missing_wrapped:
                action = ReconcileAction.SKIPPED_COMPLETE
            elif missing_wrapped:
                action = ReconcileAction.TO_WRAPPED
            else:
                action = ReconcileAction.FROM_WRAPPED

            logger.debug(
                "Wrapper %d %s -> %s: %s",
                index,
                ",".join(mapping.wrapper_fields),
                ",".join(mapping.wrapped_fields),
                action.value,
            )

            if action is ReconcileAction.TO_WRAPPED:
                mapping.to_converter(
                    list(mapping.wrapper_fields),
                    list(mapping.wrapped_fields),
                    *mapping.to_args,
                )
            elif action is ReconcileAction.FROM_WRAPPED:
                mapping.from_converter(
                    list(mapping.wrapped_fields),
                    list(mapping.wrapper_fields),
                    *mapping.from_args,
                )

            decisions.append(
                ReconcileDecision(
                    index=index,
                    wrapper_fields=mapping.wrapper_fields,
                    wrapped_fields=mapping.wrapped_fields,
                    missing_wrapper=missing_wrapper,
                    missing_wrapped=missing_wrapped,
                    action=action,
                )
            )

        self.last_decisions = decisions
        return decisions

    def wrapped_fields_of(self, wrapper_field: str) -> list[str]:
        """Return every field wrapped by ``wrapper_field``.

        The result is the union of the wrapped fields of all mappings that
        list ``wrapper_field`` as a wrapper, in registration order and without
        duplicates.
        """
        wrapped: list[str] = []
        for mapping in self._mappings:
            if not mapping.wraps(wrapper_field):
                continue
            for name in mapping.wrapped_fields:
                if name not in wrapped:
                    wrapped.append(name)
        return wrapped
