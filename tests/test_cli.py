"""Tests for the fieldbind CLI."""

import json
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from fieldbind import __version__
from fieldbind.cli import app
from fieldbind.io import read_jsonl

runner = CliRunner()


@pytest.fixture
def submissions_path(
    tmp_path: Path, valid_booking: dict[str, Any], invalid_booking: dict[str, Any]
) -> Path:
    path = tmp_path / "submissions.jsonl"
    path.write_text(
        json.dumps(valid_booking) + "\n" + "not json\n" + json.dumps(invalid_booking) + "\n"
    )
    return path


class TestRunCommand:
    """Tests for `fieldbind run`."""

    def test_run_writes_results(
        self, tmp_path: Path, submissions_path: Path, booking_definition_path: Path
    ) -> None:
        out = tmp_path / "out.jsonl"

        result = runner.invoke(
            app,
            ["run", "--in", str(submissions_path), "--out", str(out), "-d", str(booking_definition_path)],
        )

        assert result.exit_code == 0, result.output
        assert "Invalid JSON on line 2" in result.output
        records = [record for _, record in read_jsonl(out)]
        assert [r["valid"] for r in records] == [True, False]
        assert records[1]["errors"]["date"] == ["invalid_format"]
        assert records[0]["fields"]["datetime"] == "2024-01-01 10:00"

    def test_run_flat(
        self, tmp_path: Path, booking_definition_path: Path
    ) -> None:
        submissions = tmp_path / "in.jsonl"
        submissions.write_text(json.dumps({"contact": {"email": "a@b.org"}}) + "\n")
        out = tmp_path / "out.jsonl"

        result = runner.invoke(
            app,
            ["run", "-i", str(submissions), "-o", str(out), "-d", str(booking_definition_path), "--flat"],
        )

        assert result.exit_code == 0, result.output
        (_, record), = list(read_jsonl(out))
        assert record["fields"] == {"contact:email": "a@b.org"}

    def test_definition_from_environment(
        self, tmp_path: Path, submissions_path: Path, booking_definition_path: Path
    ) -> None:
        out = tmp_path / "out.jsonl"

        result = runner.invoke(
            app,
            ["run", "-i", str(submissions_path), "-o", str(out)],
            env={"FIELDBIND_DEFINITION": str(booking_definition_path)},
        )

        assert result.exit_code == 0, result.output
        assert out.exists()

    def test_missing_definition(
        self, tmp_path: Path, submissions_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("FIELDBIND_DEFINITION", raising=False)

        result = runner.invoke(
            app, ["run", "-i", str(submissions_path), "-o", str(tmp_path / "out.jsonl")]
        )

        assert result.exit_code == 1
        assert "No form definition" in result.output

    def test_missing_input(self, tmp_path: Path, booking_definition_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "run",
                "-i",
                str(tmp_path / "missing.jsonl"),
                "-o",
                str(tmp_path / "out.jsonl"),
                "-d",
                str(booking_definition_path),
            ],
        )

        assert result.exit_code == 1
        assert "Input file not found" in result.output

    def test_unknown_validator(
        self, tmp_path: Path, submissions_path: Path, booking_definition_data: dict[str, Any]
    ) -> None:
        booking_definition_data["fields"]["email"] = [{"validator": "NoSuchValidator"}]
        definition = tmp_path / "bad.json"
        definition.write_text(json.dumps(booking_definition_data))

        result = runner.invoke(
            app,
            ["run", "-i", str(submissions_path), "-o", str(tmp_path / "out.jsonl"), "-d", str(definition)],
        )

        assert result.exit_code == 1
        assert "NoSuchValidator" in result.output
        assert not (tmp_path / "out.jsonl").exists()

    def test_unresolvable_validator_with_empty_input(
        self, tmp_path: Path, booking_definition_data: dict[str, Any]
    ) -> None:
        booking_definition_data["fields"]["email"] = [{"validator": "NoSuchValidator"}]
        definition = tmp_path / "bad.json"
        definition.write_text(json.dumps(booking_definition_data))
        submissions = tmp_path / "empty.jsonl"
        submissions.write_text("")
        out = tmp_path / "out.jsonl"

        result = runner.invoke(
            app, ["run", "-i", str(submissions), "-o", str(out), "-d", str(definition)]
        )

        assert result.exit_code == 1
        assert "NoSuchValidator" in result.output
        assert not out.exists()


class TestFlattenCommand:
    """Tests for `fieldbind flatten`."""

    def test_flatten(self, tmp_path: Path) -> None:
        path = tmp_path / "submission.json"
        path.write_text(json.dumps({"a": {"b": "x"}}))

        result = runner.invoke(app, ["flatten", str(path)])

        assert result.exit_code == 0, result.output
        assert "a:b" in result.output

    def test_flatten_custom_delimiter(self, tmp_path: Path) -> None:
        path = tmp_path / "submission.json"
        path.write_text(json.dumps({"a": {"b": "x"}}))

        result = runner.invoke(app, ["flatten", str(path), "--delimiter", "."])

        assert result.exit_code == 0, result.output
        assert "a.b" in result.output

    def test_flatten_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["flatten", str(tmp_path / "missing.json")])

        assert result.exit_code == 1


class TestCheckCommand:
    """Tests for `fieldbind check`."""

    def test_check_valid(self, booking_definition_path: Path) -> None:
        result = runner.invoke(app, ["check", str(booking_definition_path)])

        assert result.exit_code == 0, result.output
        assert "EmailAddress" in result.output
        assert "Wrappers: 1" in result.output

    def test_check_unknown_converter(
        self, tmp_path: Path, booking_definition_data: dict[str, Any]
    ) -> None:
        booking_definition_data["wrappers"][0]["from"]["converter"] = "explode"
        definition = tmp_path / "bad.json"
        definition.write_text(json.dumps(booking_definition_data))

        result = runner.invoke(app, ["check", str(definition)])

        assert result.exit_code == 1
        assert "explode" in result.output

    def test_check_schema_violation(self, tmp_path: Path) -> None:
        definition = tmp_path / "def.json"
        definition.write_text(json.dumps({"fields": {}}))
        schema = tmp_path / "schema.json"
        schema.write_text(json.dumps({"type": "object", "required": ["form_id"]}))

        result = runner.invoke(app, ["check", str(definition), "--schema", str(schema)])

        assert result.exit_code == 1
        assert "Invalid" in result.output

    def test_check_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["check", str(tmp_path / "missing.json")])

        assert result.exit_code == 1


class TestGlobalOptions:
    """Tests for top-level options."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_verbose_flag_accepted(self, booking_definition_path: Path) -> None:
        result = runner.invoke(app, ["--verbose", "check", str(booking_definition_path)])

        assert result.exit_code == 0, result.output
