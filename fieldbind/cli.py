"""CLI for fieldbind."""

import json
import logging
import os
from collections.abc import Iterator
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from fieldbind import __version__
from fieldbind.definitions import (
    BindingResult,
    DefinitionValidationError,
    FormDefinition,
    bind_submission,
    build_form,
    load_definition,
)
from fieldbind.io import read_jsonl, write_jsonl
from fieldbind.store import flatten_nested
from fieldbind.validation import ValidatorNotFoundError
from fieldbind.wrapping import ConverterNotFoundError

app = typer.Typer(
    name="fieldbind",
    help="Bind nested form submissions to fields, wrappers and validators.",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"fieldbind version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-V", callback=version_callback, is_eager=True),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
) -> None:
    """fieldbind: bind nested form submissions to validated fields."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


def _load_definition_or_exit(path: Path, schema_path: Path | None = None) -> FormDefinition:
    try:
        return load_definition(path, schema_path=schema_path)
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except DefinitionValidationError as e:
        console.print(f"[red]Invalid:[/red] {e}")
        raise typer.Exit(1)
    except (json.JSONDecodeError, ValueError) as e:
        console.print(f"[red]Error:[/red] Could not parse definition {path}: {e}")
        raise typer.Exit(1)


@app.command()
def run(
    input_path: Annotated[
        Path,
        typer.Option("--in", "-i", help="Input JSONL file of nested submissions"),
    ],
    output_path: Annotated[
        Path,
        typer.Option("--out", "-o", help="Output JSONL file path"),
    ],
    definition_path: Annotated[
        Path | None,
        typer.Option(
            "--definition",
            "-d",
            envvar="FIELDBIND_DEFINITION",
            help="Form definition JSON file",
        ),
    ] = None,
    flat: Annotated[
        bool,
        typer.Option("--flat", help="Write fields by flat name instead of nested"),
    ] = False,
) -> None:
    """Bind and validate each submission, writing one result per line."""
    if definition_path is None:
        env_path = os.environ.get("FIELDBIND_DEFINITION")
        if not env_path:
            console.print("[red]Error:[/red] No form definition given (--definition)")
            raise typer.Exit(1)
        definition_path = Path(env_path)

    if not input_path.exists():
        console.print(f"[red]Error:[/red] Input file not found: {input_path}")
        raise typer.Exit(1)

    definition = _load_definition_or_exit(definition_path)
    try:
        build_form(definition)
    except (ValidatorNotFoundError, ConverterNotFoundError) as e:
        console.print(f"[red]Error building form:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"[bold]fieldbind[/bold] v{__version__}")
    console.print(f"  Input: {input_path}")
    console.print(f"  Output: {output_path}")
    console.print(f"  Form: {definition.form_id}@{definition.version}")

    valid_count = 0
    invalid_count = 0

    def warn_invalid_json(line_num: int, error: json.JSONDecodeError) -> None:
        console.print(f"\n[yellow]Warning:[/yellow] Invalid JSON on line {line_num}: {error}")

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Binding submissions...", total=None)

        def results() -> Iterator[BindingResult]:
            nonlocal valid_count, invalid_count
            for line_num, submission in read_jsonl(input_path, on_error=warn_invalid_json):
                result = bind_submission(definition, submission, flat=flat)
                if result.valid:
                    valid_count += 1
                else:
                    invalid_count += 1
                progress.update(task, description=f"Bound {line_num} submissions...")
                yield result

        written = write_jsonl(output_path, results())

    console.print("\n[bold]Summary:[/bold]")
    console.print(f"  Submissions bound: {written}")
    console.print(f"  [green]Valid:[/green] {valid_count}")
    if invalid_count:
        console.print(f"  [red]Invalid:[/red] {invalid_count}")


@app.command()
def flatten(
    path: Annotated[
        Path,
        typer.Argument(help="JSON file holding one nested submission"),
    ],
    delimiter: Annotated[
        str,
        typer.Option("--delimiter", help="Path delimiter for flat names"),
    ] = ":",
) -> None:
    """Print the flat field names and values of a nested submission."""
    if not path.exists():
        console.print(f"[red]Error:[/red] File not found: {path}")
        raise typer.Exit(1)
    if not delimiter:
        console.print("[red]Error:[/red] Delimiter must not be empty")
        raise typer.Exit(1)

    with open(path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        console.print("[yellow]Warning:[/yellow] Top level is not an object; nothing to flatten")
        return

    table = Table("Field", "Value")
    for name, value in flatten_nested(data, delimiter).items():
        table.add_row(name, json.dumps(value, ensure_ascii=False))
    console.print(table)


@app.command()
def check(
    definition_path: Annotated[
        Path,
        typer.Argument(help="Form definition JSON file"),
    ],
    schema_path: Annotated[
        Path | None,
        typer.Option("--schema", "-s", help="JSON schema the definition must satisfy"),
    ] = None,
) -> None:
    """Check that a definition loads and all its validators and converters resolve."""
    if schema_path is not None and not schema_path.exists():
        console.print(f"[red]Error:[/red] Schema file not found: {schema_path}")
        raise typer.Exit(1)

    definition = _load_definition_or_exit(definition_path, schema_path)

    try:
        form = build_form(definition)
    except (ValidatorNotFoundError, ConverterNotFoundError) as e:
        console.print(f"[red]Invalid:[/red] {e}")
        raise typer.Exit(1)

    table = Table("Field", "Validators")
    for field_name, chain in form.validation.chains.items():
        table.add_row(field_name, ", ".join(type(v).__name__ for v in chain.validators))
    console.print(table)
    console.print(f"  Wrappers: {len(form.wrappers.mappings)}")
    console.print(f"[green]Valid:[/green] {definition_path}")


if __name__ == "__main__":
    app()
