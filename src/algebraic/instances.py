"""Catalog of ready-made instances.

An instance stops at the strongest level its carrier supports: tree fork
has no identity and is not associative, so it stays a magma; non-empty
lists have no empty value, so concatenation stays a semigroup.

The list instances accept any sequence, always produce tuples, and compare
items rather than container types, so ``[1]`` and ``(1,)`` are equal.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence

from algebraic.carriers.nelist import NEList, concat, nelist_to_list
from algebraic.carriers.tree import Tree, fork
from algebraic.combinators.ops import endofunction_monoid
from algebraic.kernel.structure import (
    MagmaInstance,
    MonoidInstance,
    SemigroupInstance,
    magma,
    monoid,
    semigroup,
)

_NUMBER_SAMPLES = (0, 1, -1, 2, 7, -13, 1024)
_SEQUENCE_SAMPLES: tuple[tuple[int, ...], ...] = ((), (1,), (1, 2, 3), (0, 0))
_POINTS = (-10, -1, 0, 1, 2, 5, 100)


def _concatenate(a: Sequence, b: Sequence) -> tuple:
    return tuple(a) + tuple(b)


def _same_items(a: Sequence, b: Sequence) -> bool:
    return tuple(a) == tuple(b)


def _same_elements(a: NEList, b: NEList) -> bool:
    return nelist_to_list(a) == nelist_to_list(b)


# Magma

MAGMA_TREE_FORK: MagmaInstance[Tree] = magma(fork, name="tree fork")

# Semigroups

SEMIGROUP_NUMBER_ADDITION: SemigroupInstance[int | float] = semigroup(
    operator.add, name="number +"
)
SEMIGROUP_LIST_CONCATENATION: SemigroupInstance[tuple] = semigroup(
    _concatenate, eq=_same_items, name="list ++"
)
SEMIGROUP_NELIST_CONCATENATION: SemigroupInstance[NEList] = semigroup(
    concat, eq=_same_elements, name="non-empty list ++"
)
SEMIGROUP_ENDOFUNCTION_COMPOSITION: SemigroupInstance[Callable[[int], int]] = (
    endofunction_monoid(_POINTS).semigroup
)

# Monoids

MONOID_NUMBER_ADDITION: MonoidInstance[int | float] = monoid(
    operator.add, 0, samples=_NUMBER_SAMPLES, name="number +"
)
MONOID_NUMBER_MULTIPLICATION: MonoidInstance[int | float] = monoid(
    operator.mul, 1, samples=_NUMBER_SAMPLES, name="number ×"
)
MONOID_BOOLEAN_CONJUNCTION: MonoidInstance[bool] = monoid(
    lambda a, b: a and b, True, samples=(True, False), name="boolean ∧"
)
MONOID_BOOLEAN_DISJUNCTION: MonoidInstance[bool] = monoid(
    lambda a, b: a or b, False, samples=(True, False), name="boolean ∨"
)
MONOID_LIST_CONCATENATION: MonoidInstance[tuple] = monoid(
    _concatenate, (), eq=_same_items, samples=_SEQUENCE_SAMPLES, name="list ++"
)
MONOID_ENDOFUNCTION_COMPOSITION: MonoidInstance[Callable[[int], int]] = endofunction_monoid(
    _POINTS,
    functions=(abs, operator.neg, lambda x: x + 1, lambda x: x * x),
)


def list_sum(xs: tuple[int | float, ...]) -> int | float:
    """Homomorphism from list concatenation to number addition."""
    total = 0
    for x in xs:
        total += x
    return total


__all__ = [
    "MAGMA_TREE_FORK",
    "SEMIGROUP_NUMBER_ADDITION",
    "SEMIGROUP_LIST_CONCATENATION",
    "SEMIGROUP_NELIST_CONCATENATION",
    "SEMIGROUP_ENDOFUNCTION_COMPOSITION",
    "MONOID_NUMBER_ADDITION",
    "MONOID_NUMBER_MULTIPLICATION",
    "MONOID_BOOLEAN_CONJUNCTION",
    "MONOID_BOOLEAN_DISJUNCTION",
    "MONOID_LIST_CONCATENATION",
    "MONOID_ENDOFUNCTION_COMPOSITION",
    "list_sum",
]
