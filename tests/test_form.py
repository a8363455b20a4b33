"""Tests for the Form facade."""

from typing import Any

import pytest
from pydantic import ValidationError

from fieldbind import Form, FormConfig
from fieldbind.validation import ValidatorNotFoundError
from fieldbind.wrapping import join_fields, split_field, strftime_fields


class BookingForm(Form):
    """Presents a datetime as separate d-m-Y date and H:M time fields."""

    def init(self) -> None:
        self.changes = 0
        self.append_validator("datetime", "NotEmpty")
        self.append_validator("datetime", "Date", ["%Y-%m-%d %H:%M:%S"])
        self.add_wrapper(
            ["date", "time"],
            ["datetime"],
            strftime_fields(self.store),
            strftime_fields(self.store),
            to_args=["%d-%m-%Y %H:%M", "%Y-%m-%d %H:%M:%S"],
            from_args=["%Y-%m-%d %H:%M:%S", "%d-%m-%Y", "%H:%M"],
        )

    def on_data_changed(self) -> None:
        self.changes += 1


class TestFormAccess:
    """Tests for mapping-style access and import/export."""

    def test_mapping_access(self) -> None:
        form = Form({"name": "Ada"})

        assert form["name"] == "Ada"
        assert form["missing"] == ""
        assert "name" in form
        assert "missing" not in form

        form["name"] = "Grace"
        assert form["name"] == "Grace"

        del form["name"]
        assert "name" not in form

    def test_nested_initial_fields(self) -> None:
        form = Form({"address": {"city": "Utrecht"}})

        assert form["address:city"] == "Utrecht"
        assert form.to_flat() == {"address:city": "Utrecht"}
        assert form.to_nested() == {"address": {"city": "Utrecht"}}
        assert form.get_value("address") == {"city": "Utrecht"}
        assert form.get_value("address:city") == "Utrecht"
        assert form.get_value("address:zip") == ""

    def test_to_flat_is_a_copy(self) -> None:
        form = Form({"a": 1})
        flat = form.to_flat()
        flat["a"] = 2

        assert form["a"] == 1

    def test_from_nested_chains_and_merges(self) -> None:
        form = Form({"a": 1})

        assert form.from_nested({"b": 2}) is form
        assert form.to_flat() == {"a": 1, "b": 2}

    def test_malformed_initial_fields_ignored(self) -> None:
        assert Form("not a mapping").to_flat() == {}

    def test_on_data_changed_hook(self) -> None:
        form = BookingForm()
        before = form.changes

        form.from_nested({"x": 1})
        form["y"] = 2

        assert form.changes == before + 2


class TestFormConfig:
    """Tests for configuration handling."""

    def test_defaults(self) -> None:
        form = Form()

        assert form.get_config("delimiter") == ":"
        assert form.get_config("wrapped_fallback") is True
        assert form.get_config("unknown") is None

    def test_custom_delimiter(self) -> None:
        form = Form({"a": {"b": 1}}, config={"delimiter": "."})

        assert form["a.b"] == 1
        assert form.get_value("a.b") == 1

    def test_extra_options_readable(self) -> None:
        form = Form(config={"theme": "dark"})

        assert form.get_config("theme") == "dark"

    def test_class_default_config_merged(self) -> None:
        class DottedForm(Form):
            default_config = {"delimiter": ".", "theme": "light"}

        form = DottedForm(config={"theme": "dark"})

        assert form.get_config("delimiter") == "."
        assert form.get_config("theme") == "dark"

    def test_config_is_immutable(self) -> None:
        form = Form()

        with pytest.raises(ValidationError):
            form.config.delimiter = "."  # type: ignore[misc]

    def test_empty_delimiter_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Form(config={"delimiter": ""})

    def test_form_config_instance_accepted(self) -> None:
        form = Form(config=FormConfig(delimiter="/"))

        assert form.get_config("delimiter") == "/"


class TestFormWrappersAndValidation:
    """Tests combining wrappers and validation on a form."""

    def test_wrapper_fields_build_wrapped(self) -> None:
        form = BookingForm({"date": "31-01-2024", "time": "10:30"})

        assert form["datetime"] == "2024-01-31 10:30:00"
        assert form.validate()
        assert form.get_errors() == {"datetime": []}

    def test_wrapped_field_builds_wrappers(self) -> None:
        form = BookingForm({"datetime": "2024-01-31 10:30:00"})

        assert form["date"] == "31-01-2024"
        assert form["time"] == "10:30"

    def test_both_sides_given(self) -> None:
        form = BookingForm(
            {"date": "01-01-2000", "time": "00:00", "datetime": "2024-01-31 10:30:00"}
        )

        assert form["date"] == "01-01-2000"
        assert form["datetime"] == "2024-01-31 10:30:00"

    def test_neither_side_given(self) -> None:
        form = BookingForm({"other": "x"})

        assert "datetime" not in form
        assert "date" not in form

    def test_invalid_wrapper_input_reported_on_wrapper(self) -> None:
        form = BookingForm({"date": "2024/01/31", "time": "10:30"})

        assert not form.validate()
        assert not form.is_valid("datetime")
        assert form.is_valid("date")
        assert form.get_errors("date") == ["invalid_format"]
        assert form.get_errors("date", wrapped_fallback=False) == []

    def test_wrapped_fallback_config(self) -> None:
        form = BookingForm({"date": "2024/01/31", "time": "10:30"}, config={"wrapped_fallback": False})
        form.validate()

        assert form.get_errors("date") == []
        assert form.get_errors("date", wrapped_fallback=True) == ["invalid_format"]

    def test_wrappers_apply_to_later_imports(self) -> None:
        form = Form({"first": "Ada", "last": "Lovelace"})
        form.add_wrapper(
            ["first", "last"], ["name"], join_fields(form.store), split_field(form.store)
        )

        assert "name" not in form

        form.from_nested({"last": "King"})
        assert form["name"] == "Ada King"

    def test_add_error(self) -> None:
        form = Form({"email": "ada@example.org"})
        form.append_validator("email", "EmailAddress").add_error("email", "already_registered")

        assert not form.validate()
        assert form.get_errors("email") == ["already_registered"]
        assert form.get_error_messages("email") == ["already_registered"]

    def test_append_validation_namespace(self) -> None:
        form = Form(config={"validation_namespaces": [""]})

        with pytest.raises(ValidatorNotFoundError):
            form.append_validator("x", "NotEmpty")

        form.append_validation_namespace("fieldbind.validation.validators")
        form.append_validator("x", "NotEmpty")

        assert not form.validate()

    def test_error_messages_with_translator(self) -> None:
        form = Form()
        form.append_validator("name", "NotEmpty")
        form.validate()

        def translate(code: str, params: dict[str, Any]) -> str:
            return f"[{code}]"

        assert form.get_error_messages("name", translate) == ["[not_empty]"]
        assert form.get_error_messages(None, translate) == {"name": ["[not_empty]"]}
