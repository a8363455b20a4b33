"""Flat field storage and nested import/export."""

from fieldbind.store.fields import FieldStore, Reconciler
from fieldbind.store.paths import expand_flat, flatten_nested, lookup_path

__all__ = [
    "FieldStore",
    "Reconciler",
    "expand_flat",
    "flatten_nested",
    "lookup_path",
]
