"""Reading and writing JSONL files of submissions and results."""

import json
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import Any

from pydantic import BaseModel


def read_jsonl(
    path: Path | str,
    on_error: Callable[[int, json.JSONDecodeError], None] | None = None,
) -> Iterator[tuple[int, Any]]:
    """Yield ``(line_number, record)`` for each non-blank line of a JSONL file.

    Args:
        path: Path to the JSONL file.
        on_error: Called with the line number and error for lines that are
            not valid JSON; those lines are skipped. Without it, such lines
            raise.

    Raises:
        ValueError: If a line is not valid JSON and no ``on_error`` is given.
    """
    with open(path) as f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError as e:
                if on_error is None:
                    raise ValueError(f"Invalid JSON on line {line_num}: {e}") from e
                on_error(line_num, e)
                continue
            yield line_num, record


def write_jsonl(path: Path | str, records: Iterable[dict[str, Any] | BaseModel]) -> int:
    """Write dicts or pydantic models as JSONL.

    Returns:
        Number of records written.
    """
    count = 0
    with open(path, "w") as f:
        for record in records:
            if isinstance(record, BaseModel):
                f.write(record.model_dump_json() + "\n")
            else:
                f.write(json.dumps(record, ensure_ascii=False) + "\n")
            count += 1
    return count
