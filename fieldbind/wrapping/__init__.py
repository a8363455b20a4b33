"""Wrapper mappings between presentation fields and underlying fields."""

from fieldbind.wrapping.converters import (
    CONVERTER_FACTORIES,
    ConverterNotFoundError,
    copy_fields,
    get_converter_factory,
    join_fields,
    split_field,
    strftime_fields,
)
from fieldbind.wrapping.engine import WrapperEngine
from fieldbind.wrapping.mapping import (
    Converter,
    ReconcileAction,
    ReconcileDecision,
    WrapperMapping,
)

__all__ = [
    "CONVERTER_FACTORIES",
    "Converter",
    "ConverterNotFoundError",
    "ReconcileAction",
    "ReconcileDecision",
    "WrapperEngine",
    "WrapperMapping",
    "copy_fields",
    "get_converter_factory",
    "join_fields",
    "split_field",
    "strftime_fields",
]
