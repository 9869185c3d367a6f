"""Small helpers: flattening nested lists and handing out unique codes."""

from __future__ import annotations

from typing import Iterable, List, TypeVar

T = TypeVar("T")


def flatten(nested: Iterable[Iterable[T]]) -> List[T]:
    """Concatenate the inner sequences into one list."""
    return [item for inner in nested for item in inner]


class UniqueCodes:
    """Hands out increasing integer codes, starting from a given value."""

    def __init__(self, start: int) -> None:
        self._current = start

    def get_unique_code(self) -> int:
        code = self._current
        self._current += 1
        return code