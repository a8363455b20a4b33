"""Flat, addressable storage of form field values."""

import logging
from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, Protocol

from fieldbind.config import DEFAULT_DELIMITER
from fieldbind.store.paths import MISSING, expand_flat, flatten_nested, lookup_path

logger = logging.getLogger(__name__)


class Reconciler(Protocol):
    """Anything that can bring a store to consistency after a bulk import."""

    def reconcile(self, store: "FieldStore") -> Any: ...


class FieldStore:
    """Canonical flat storage of field values.

    Names are unique flat strings. A name may encode nesting with the
    delimiter; the nested view is always computed from the flat storage and
    is never stored itself.
    """

    def __init__(
        self,
        delimiter: str = DEFAULT_DELIMITER,
        reconciler: Reconciler | None = None,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        """Initialize an empty store.

        Args:
            delimiter: String joining nested path segments into flat names.
            reconciler: Run after every bulk import, before the change signal.
            on_change: Called whenever field data was added or changed.
        """
        self.delimiter = delimiter
        self.reconciler = reconciler
        self.on_change = on_change
        self._fields: dict[str, Any] = {}

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __repr__(self) -> str:
        return f"FieldStore({self._fields!r})"

    def on_data_changed(self) -> None:
        """Signal that one or more values were added or changed."""
        if self.on_change is not None:
            self.on_change()

    def get(self, name: str, default: Any = "") -> Any:
        """Return the value stored under ``name``, or ``default`` if absent."""
        return self._fields.get(name, default)

    def set(self, name: str, value: Any) -> None:
        """Store ``value`` under ``name``, overwriting any previous value."""
        self._fields[name] = value
        self.on_data_changed()

    def has(self, name: str) -> bool:
        return name in self._fields

    def unset(self, name: str) -> None:
        self._fields.pop(name, None)

    def import_nested(self, nested: Any) -> "FieldStore":
        """Merge a nested submission into the store.

        Anything that is not a mapping at the top level is ignored, so callers
        can pass raw request data without checking it first. Imported names
        overwrite existing ones; all other fields keep their values. The
        reconciler runs after the merge, then the change signal fires.

        Args:
            nested: Mapping of keys to scalars or further nested containers.

        Returns:
            This store.
        """
        if not isinstance(nested, Mapping):
            logger.debug("Ignoring non-mapping import of type %s", type(nested).__name__)
            return self

        flat = flatten_nested(nested, self.delimiter)
        self._fields.update(flat)
        logger.debug("Imported %d field(s)", len(flat))

        if self.reconciler is not None:
            self.reconciler.reconcile(self)
        self.on_data_changed()
        return self

    def export_nested(self) -> dict[str, Any]:
        """Return the fields as a nested dict, splitting names on the delimiter."""
        return expand_flat(self._fields, self.delimiter)

    def export_flat(self) -> Mapping[str, Any]:
        """Return a read-only view of the flat storage."""
        return MappingProxyType(self._fields)

    def get_value_resolved(self, name: str) -> Any:
        """Return the value at a delimiter-addressed path of the nested view.

        Unlike :meth:`get`, a name that refers to a nesting level returns the
        whole subtree. Absent paths give an empty string.
        """
        value = lookup_path(self.export_nested(), name, self.delimiter)
        if value is MISSING:
            return ""
        return value
