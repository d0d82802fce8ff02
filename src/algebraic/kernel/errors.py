"""Error types for algebraic structure construction."""

from __future__ import annotations

from typing import Any


class LawError(Exception):
    """Raised when an instance fails its construction-time self-test.

    Keeps the offending elements for debugging; law checks run through the
    harness report violations instead of raising.
    """

    def __init__(self, message: str, elements: tuple[Any, ...] = ()) -> None:
        self.elements = elements
        super().__init__(message)

    def __repr__(self) -> str:
        return f"LawError({super().__repr__()}, elements={self.elements!r})"
