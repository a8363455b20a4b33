"""Models describing wrapper mappings and reconciliation outcomes."""

from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

Converter = Callable[..., Any]


class WrapperMapping(BaseModel):
    """A wrapper field set paired with the wrapped field set it maps to.

    ``to_converter`` derives the wrapped fields from the wrapper fields and is
    called as ``to_converter(wrapper_fields, wrapped_fields, *to_args)``.
    ``from_converter`` goes the other way and is called as
    ``from_converter(wrapped_fields, wrapper_fields, *from_args)``. Both are
    expected to write their results into the field store themselves.
    """

    wrapper_fields: tuple[str, ...]
    wrapped_fields: tuple[str, ...]
    to_converter: Converter
    from_converter: Converter
    to_args: tuple[Any, ...] = Field(default_factory=tuple)
    from_args: tuple[Any, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def wraps(self, field_name: str) -> bool:
        """Whether ``field_name`` is one of this mapping's wrapper fields."""
        return field_name in self.wrapper_fields


class ReconcileAction(str, Enum):
    """What reconciliation did for a single mapping."""

    SKIPPED_NO_DATA = "skipped_no_data"  # Neither side complete
    SKIPPED_COMPLETE = "skipped_complete"  # Both sides already populated
    TO_WRAPPED = "to_wrapped"  # Wrapper side converted into wrapped fields
    FROM_WRAPPED = "from_wrapped"  # Wrapped side converted into wrapper fields


class ReconcileDecision(BaseModel):
    """Outcome of reconciling one mapping."""

    index: int
    wrapper_fields: tuple[str, ...]
    wrapped_fields: tuple[str, ...]
    missing_wrapper: bool
    missing_wrapped: bool
    action: ReconcileAction

    @property
    def converted(self) -> bool:
        """Whether a converter was invoked."""
        return self.action in (ReconcileAction.TO_WRAPPED, ReconcileAction.FROM_WRAPPED)
