"""Built-in converter factories.

A converter is any callable accepting ``(source_fields, target_fields,
*args)`` that writes the target fields. The factories here bind a converter
to a field store; declarative form definitions refer to them by name.

Example:
    engine.register(
        ["date", "time"], ["datetime"],
        join_fields(store), split_field(store),
        to_args=[" "], from_args=[" "],
    )
"""

from collections.abc import Callable
from datetime import datetime

from fieldbind.store import FieldStore
from fieldbind.wrapping.mapping import Converter


class ConverterNotFoundError(Exception):
    """Raised when no converter factory is registered under a name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No converter registered under name: {name}")


def _source_text(store: FieldStore, source: list[str], separator: str) -> str:
    return separator.join(str(store.get(name)) for name in source)


def join_fields(store: FieldStore) -> Converter:
    """Join the source values into every target field."""

    def convert(source: list[str], target: list[str], separator: str = " ") -> None:
        joined = _source_text(store, source, separator)
        for name in target:
            store.set(name, joined)

    return convert


def split_field(store: FieldStore) -> Converter:
    """Split the (joined) source value across the target fields.

    The value is split at most ``len(target) - 1`` times; targets without a
    part receive an empty string.
    """

    def convert(source: list[str], target: list[str], separator: str = " ") -> None:
        text = _source_text(store, source, separator)
        parts = text.split(separator, max(len(target) - 1, 0))
        parts += [""] * (len(target) - len(parts))
        for name, part in zip(target, parts):
            store.set(name, part)

    return convert


def copy_fields(store: FieldStore) -> Converter:
    """Copy source values to target fields pairwise."""

    def convert(source: list[str], target: list[str]) -> None:
        for source_name, target_name in zip(source, target):
            store.set(target_name, store.get(source_name))

    return convert


def strftime_fields(store: FieldStore) -> Converter:
    """Re-format date/time values between field sets.

    The source values are joined with a space and parsed with
    ``in_format``; each target field is written with its own output format.
    Input that does not parse is copied as-is into every target field, so
    validators on the target side can report it.
    """

    def convert(
        source: list[str], target: list[str], in_format: str, *out_formats: str
    ) -> None:
        text = _source_text(store, source, " ")
        try:
            parsed = datetime.strptime(text, in_format)
        except ValueError:
            for name in target:
                store.set(name, text)
            return
        for name, out_format in zip(target, out_formats):
            store.set(name, parsed.strftime(out_format))

    return convert


CONVERTER_FACTORIES: dict[str, Callable[[FieldStore], Converter]] = {
    "join": join_fields,
    "split": split_field,
    "copy": copy_fields,
    "strftime": strftime_fields,
}


def get_converter_factory(name: str) -> Callable[[FieldStore], Converter]:
    """Look up a converter factory by its registered name.

    Raises:
        ConverterNotFoundError: If no factory is registered under ``name``.
    """
    try:
        return CONVERTER_FACTORIES[name]
    except KeyError:
        raise ConverterNotFoundError(name) from None
