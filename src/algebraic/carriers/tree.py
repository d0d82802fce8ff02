"""Binary tree carrier: data Tree a = Leaf a | Fork (Tree a) (Tree a)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

A = TypeVar("A")


@dataclass(frozen=True)
class Leaf(Generic[A]):
    value: A


@dataclass(frozen=True)
class Fork(Generic[A]):
    left: Tree[A]
    right: Tree[A]


Tree = Leaf[A] | Fork[A]


def fork(left: Tree[A], right: Tree[A]) -> Tree[A]:
    """Join two trees under a new root.

    Closed over trees but neither associative nor unital, so it only
    forms a magma.
    """
    return Fork(left, right)


def leaves(tree: Tree[A]) -> list[A]:
    """Leaf values, left to right."""
    out: list[A] = []
    stack = [tree]
    while stack:
        match stack.pop():
            case Leaf(value=value):
                out.append(value)
            case Fork(left=left, right=right):
                stack.append(right)
                stack.append(left)
            case other:
                raise TypeError(f"Not a tree: {other!r}")
    return out


def tsum(tree: Tree[int | float]) -> int | float:
    """Sum of all leaves; maps fork onto addition."""
    values = leaves(tree)
    total = values[0]
    for value in values[1:]:
        total = total + value
    return total
