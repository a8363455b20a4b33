"""Form: binds submitted data to fields, wrappers and validators.

A form subclass declares its validators and wrappers in :meth:`Form.init`:

    class BookingForm(Form):
        def init(self) -> None:
            self.append_validator("datetime", "Date", ["%Y-%m-%d %H:%M"])
            self.add_wrapper(
                ["date", "time"], ["datetime"],
                join_fields(self.store), split_field(self.store),
            )

    form = BookingForm({"date": "2024-01-01", "time": "10:00"})
    form.validate()
    form["datetime"]  # "2024-01-01 10:00"
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from fieldbind.config import FormConfig
from fieldbind.store import FieldStore
from fieldbind.validation import (
    TranslatorLike,
    ValidationOrchestrator,
    ValidatorResolver,
)
from fieldbind.wrapping import Converter, WrapperEngine


class Form:
    """A set of form fields with wrappers and per-field validator chains.

    Fields are accessed like a mapping; reading an absent field gives an
    empty string. Mutating methods return the form for chaining.
    """

    default_config: Mapping[str, Any] = {}

    def __init__(
        self,
        fields: Any = None,
        config: Mapping[str, Any] | FormConfig | None = None,
    ) -> None:
        """Create the form, run :meth:`init`, then import ``fields``.

        Args:
            fields: Initial nested (or flat) field values.
            config: Options merged over the class's ``default_config``.
        """
        self.config = FormConfig().merged(dict(self.default_config)).merged(config)
        self.wrappers = WrapperEngine()
        self.store = FieldStore(
            delimiter=self.config.delimiter,
            reconciler=self.wrappers,
            on_change=self.on_data_changed,
        )
        self.validation = ValidationOrchestrator(
            resolver=ValidatorResolver(self.config.validation_namespaces),
            engine=self.wrappers,
        )
        self.init()
        self.from_nested({} if fields is None else fields)

    def init(self) -> None:
        """Hook for subclasses to add validators and wrappers."""

    def on_data_changed(self) -> None:
        """Hook called when one or more field values were added or changed."""

    def __getitem__(self, name: str) -> Any:
        return self.store.get(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.store.set(name, value)

    def __delitem__(self, name: str) -> None:
        self.store.unset(name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.store.has(name)

    def get_config(self, key: str) -> Any:
        """Return a configuration value, or None if it is not set."""
        return self.config.get(key)

    def from_nested(self, fields: Any) -> "Form":
        """Merge nested field values into the form and reconcile wrappers."""
        self.store.import_nested(fields)
        return self

    def to_flat(self) -> dict[str, Any]:
        """Return a copy of the fields keyed by flat name."""
        return dict(self.store.export_flat())

    def to_nested(self) -> dict[str, Any]:
        """Return the fields as a nested dict."""
        return self.store.export_nested()

    def get_value(self, name: str) -> Any:
        """Return the value (or subtree) at a delimiter-addressed path."""
        return self.store.get_value_resolved(name)

    def add_wrapper(
        self,
        wrapper_fields: Iterable[str],
        wrapped_fields: Iterable[str],
        to_converter: Converter,
        from_converter: Converter,
        to_args: Iterable[Any] = (),
        from_args: Iterable[Any] = (),
    ) -> "Form":
        """Register wrapper fields for one or more underlying fields.

        Wrapper fields let a form present data in a different shape than its
        consumer expects, e.g. separate ``date`` and ``time`` fields for a
        ``datetime`` field. Wrappers apply to data imported afterwards.
        """
        self.wrappers.register(
            wrapper_fields, wrapped_fields, to_converter, from_converter, to_args, from_args
        )
        return self

    def append_validation_namespace(self, namespace: str) -> "Form":
        """Add a namespace searched when resolving validator names."""
        self.validation.resolver.append_namespace(namespace)
        return self

    def append_validator(
        self,
        field_name: str,
        validator_name: str,
        constructor_args: Sequence[Any] = (),
    ) -> "Form":
        """Append a validator, resolved by name, to a field's chain.

        Raises:
            ValidatorNotFoundError: If the name resolves in no namespace.
        """
        self.validation.append_validator(field_name, validator_name, constructor_args)
        return self

    def add_error(self, field_name: str, code: str, **params: Any) -> "Form":
        """Attach a custom error code to a field."""
        self.validation.add_custom_error(field_name, code, **params)
        return self

    def validate(self) -> bool:
        """Validate the current values; must run before reading errors."""
        return self.validation.validate(self.store)

    def is_valid(self, field_name: str) -> bool:
        return self.validation.is_valid(field_name)

    def get_errors(
        self,
        field_name: str | None = None,
        wrapped_fallback: bool | None = None,
    ) -> list[str] | dict[str, list[str]]:
        """Return error codes, falling back to wrapped fields' errors.

        Args:
            field_name: The field, or None for every field with a chain.
            wrapped_fallback: Overrides the ``wrapped_fallback`` option.
        """
        if wrapped_fallback is None:
            wrapped_fallback = self.config.wrapped_fallback
        return self.validation.get_errors(field_name, wrapped_fallback)

    def get_error_messages(
        self,
        field_name: str | None = None,
        translator: TranslatorLike | None = None,
    ) -> list[str] | dict[str, list[str]]:
        return self.validation.get_error_messages(field_name, translator)
