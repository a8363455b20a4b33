"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path
from typing import Any

import pytest

from fieldbind.store import FieldStore
from fieldbind.wrapping import WrapperEngine, join_fields, split_field


@pytest.fixture
def store() -> FieldStore:
    """An empty store without a reconciler."""
    return FieldStore()


@pytest.fixture
def engine() -> WrapperEngine:
    """An empty wrapper engine."""
    return WrapperEngine()


@pytest.fixture
def datetime_store(engine: WrapperEngine) -> FieldStore:
    """A store reconciled by a date/time <-> datetime wrapper."""
    store = FieldStore(reconciler=engine)
    engine.register(
        ["date", "time"],
        ["datetime"],
        join_fields(store),
        split_field(store),
        to_args=[" "],
        from_args=[" "],
    )
    return store


@pytest.fixture
def booking_definition_data() -> dict[str, Any]:
    """A booking form definition with a date/time wrapper."""
    return {
        "form_id": "booking",
        "version": "1.0.0",
        "fields": {
            "datetime": [
                {"validator": "NotEmpty"},
                {"validator": "Date", "args": ["%Y-%m-%d %H:%M"]},
            ],
            "email": [
                {"validator": "NotEmpty"},
                {"validator": "EmailAddress"},
            ],
            "guests": [{"validator": "Between", "args": [1, 8]}],
        },
        "wrappers": [
            {
                "wrapper_fields": ["date", "time"],
                "wrapped_fields": ["datetime"],
                "to": {"converter": "join", "args": [" "]},
                "from": {"converter": "split", "args": [" "]},
            }
        ],
        "messages": {"invalid_format": "Please use {format}"},
    }


@pytest.fixture
def booking_definition_path(tmp_path: Path, booking_definition_data: dict[str, Any]) -> Path:
    """The booking definition written to a JSON file."""
    path = tmp_path / "booking.json"
    path.write_text(json.dumps(booking_definition_data))
    return path


@pytest.fixture
def valid_booking() -> dict[str, Any]:
    return {
        "date": "2024-01-01",
        "time": "10:00",
        "email": "ada@example.org",
        "guests": "2",
    }


@pytest.fixture
def invalid_booking() -> dict[str, Any]:
    """A booking whose date uses the wrong format."""
    return {
        "date": "01-01-2024",
        "time": "10:00",
        "email": "ada@example.org",
        "guests": "2",
    }
