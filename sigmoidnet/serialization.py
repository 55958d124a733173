"""Parsing helpers for the plain-text weight file format."""

from __future__ import annotations

import re
from typing import TextIO

from sigmoidnet.matrix import Matrix

_INT_PREFIX = re.compile(r"[+-]?\d+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _parse_int(token: str) -> int:
    match = _INT_PREFIX.match(token.lstrip())
    if match is None:
        raise ValueError(f"not an integer: {token!r}")
    value = int(match.group(0))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {token!r}")
    return value


def parse_dimensions(line: str) -> list[int]:
    """Return the integers listed between parentheses, e.g. ``(97, 64, 1)``.

    Raises ValueError when the line has no parenthesised list or a token is not a number.
    """
    start = line.find("(")
    end = line.find(")")
    if start == -1 or end == -1 or end <= start:
        raise ValueError(f"no parenthesised dimensions in {line!r}")
    tokens = line[start + 1:end].split(",")
    if tokens[-1] == "":
        tokens.pop()
    dims = []
    for token in tokens:
        stripped = token.strip(" \t")
        if not stripped:
            raise ValueError(f"empty dimension in {line!r}")
        dims.append(_parse_int(stripped))
    return dims


def read_matrix(stream: TextIO, rows: int, cols: int) -> Matrix:
    """Read ``rows`` lines of whitespace-separated values into a matrix."""
    data: list[float] = []
    for row in range(rows):
        line = stream.readline()
        if not line:
            raise ValueError(f"missing matrix row {row}")
        tokens = line.split()
        if len(tokens) < cols:
            raise ValueError(f"matrix row {row} has {len(tokens)} values, expected {cols}")
        try:
            data.extend(float(token) for token in tokens[:cols])
        except ValueError as exc:
            raise ValueError(f"invalid value in matrix row {row}") from exc
    return Matrix(rows, cols, data)


def read_vector(stream: TextIO, expected_size: int) -> list[float]:
    """Read one line of whitespace-separated values; it must hold ``expected_size`` of them."""
    line = stream.readline()
    if not line:
        raise ValueError("missing vector line")
    values: list[float] = []
    for token in line.split():
        try:
            values.append(float(token))
        except ValueError:
            break
    if len(values) != expected_size:
        raise ValueError(f"vector has {len(values)} values, expected {expected_size}")
    return values