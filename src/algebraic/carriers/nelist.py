"""Non-empty list carrier: data NEList a = Nil a | Cons a (NEList a).

``Nil`` holds the last element, so there is no empty value and
concatenation has no identity.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

A = TypeVar("A")


@dataclass(frozen=True)
class Nil(Generic[A]):
    value: A


@dataclass(frozen=True)
class Cons(Generic[A]):
    head: A
    tail: NEList[A]


NEList = Nil[A] | Cons[A]


def concat(pre: NEList[A], nxt: NEList[A]) -> NEList[A]:
    """Append ``nxt`` to ``pre``, rebuilding the spine of ``pre``."""
    result = nxt
    for value in reversed(nelist_to_list(pre)):
        result = Cons(value, result)
    return result


def nesum(xs: NEList[int | float]) -> int | float:
    """Sum of the elements; a homomorphism from concatenation to addition."""
    values = nelist_to_list(xs)
    total = values[-1]
    for value in reversed(values[:-1]):
        total = value + total
    return total


def nelist_from_iterable(items: Iterable[A]) -> NEList[A]:
    """Build a non-empty list.

    Raises:
        ValueError: If items is empty
    """
    values = list(items)
    if not values:
        raise ValueError("A non-empty list needs at least one element")
    result: NEList[A] = Nil(values[-1])
    for value in reversed(values[:-1]):
        result = Cons(value, result)
    return result


def nelist_to_list(xs: NEList[A]) -> list[A]:
    out: list[A] = []
    current = xs
    while True:
        match current:
            case Cons(head=head, tail=tail):
                out.append(head)
                current = tail
            case Nil(value=value):
                out.append(value)
                return out
            case _:
                raise TypeError(f"Not a non-empty list: {xs!r}")
