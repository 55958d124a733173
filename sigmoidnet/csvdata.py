"""Reading numeric rows from comma-separated files."""

from __future__ import annotations

import logging
import os
import re

logger = logging.getLogger(__name__)

_NUMBER_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _split_cells(line: str) -> list[str]:
    cells = line.split(",")
    if cells and cells[-1] == "":
        cells.pop()
    return cells


def _parse_number(cell: str) -> float:
    match = _NUMBER_PREFIX.match(cell)
    if match is None:
        raise ValueError(f"not a number: {cell!r}")
    return float(match.group(1))


def count_lines(path: str | os.PathLike[str]) -> int:
    """Return the number of lines in the file."""
    with open(path, encoding="utf-8") as handle:
        return sum(1 for _ in handle)


def read_row(path: str | os.PathLike[str], index: int) -> list[float]:
    """Return the numbers on line ``index`` (0-based); cells that are not numbers are skipped.

    An empty list is returned when the file has fewer lines.
    """
    with open(path, encoding="utf-8") as handle:
        for number, line in enumerate(handle):
            if number != index:
                continue
            values = []
            for cell in _split_cells(line.rstrip("\n")):
                try:
                    values.append(_parse_number(cell))
                except ValueError:
                    logger.warning("invalid conversion: %r ignored", cell)
            return values
    return []


def count_columns(path: str | os.PathLike[str]) -> int:
    """Return the number of comma-separated cells on the first line."""
    with open(path, encoding="utf-8") as handle:
        first = handle.readline()
    if first == "":
        raise ValueError(f"file is empty: {path}")
    return len(_split_cells(first.rstrip("\n")))