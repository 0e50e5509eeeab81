"""Parsing and validation of the interactive index selection."""

from __future__ import annotations

from typing import Iterable

from rmtarget.errors import SelectionError


def parse_selection(line: str) -> list[int]:
    """Parse a line of whitespace-separated indices.

    Only non-negative decimal integers are accepted. An empty or blank line
    gives an empty list.
    """
    indices: list[int] = []
    for token in line.split():
        if not token.isascii() or not token.isdigit():
            raise SelectionError(f"invalid index `{token}`")
        indices.append(int(token))
    return indices


def dedupe(indices: Iterable[int]) -> list[int]:
    """Drop repeated indices. The order of the result is unspecified."""
    return list(set(indices))


def validate(indices: Iterable[int], count: int) -> None:
    """Raise ``SelectionError`` if any index is outside ``range(count)``."""
    for index in indices:
        if index < 0 or index >= count:
            raise SelectionError(f"invalid selection `{index}`")
