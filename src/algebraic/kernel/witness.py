"""Law witnesses - sample-based checks, not proofs.

Each witness evaluates one algebraic law for the samples it is given and
returns a bool. Confidence comes from running them over many samples; see
``algebraic.combinators.laws`` for the harness that does that.
"""

from __future__ import annotations

import operator
from typing import TypeVar

from algebraic.kernel.operation import Equivalence, Operation

M = TypeVar("M")


def associative(
    a: M,
    b: M,
    c: M,
    operation: Operation[M],
    eq: Equivalence[M] = operator.eq,
) -> bool:
    """Check (a ⊕ b) ⊕ c == a ⊕ (b ⊕ c)."""
    return eq(operation(operation(a, b), c), operation(a, operation(b, c)))


def legacy_associative(
    a: M,
    b: M,
    operation: Operation[M],
    eq: Equivalence[M] = operator.eq,
) -> bool:
    """Check (a ⊕ b) ⊕ b == a ⊕ (b ⊕ a).

    Two-argument form kept for harnesses written against it. It is not an
    associativity test: for addition it only holds when a == b. Use
    :func:`associative` instead.
    """
    return eq(operation(operation(a, b), b), operation(a, operation(b, a)))


def identity(
    empty: M,
    element: M,
    operation: Operation[M],
    eq: Equivalence[M] = operator.eq,
) -> bool:
    """Check ε ⊕ element == element."""
    return eq(operation(empty, element), element)


def right_identity(
    empty: M,
    element: M,
    operation: Operation[M],
    eq: Equivalence[M] = operator.eq,
) -> bool:
    """Check element ⊕ ε == element."""
    return eq(operation(element, empty), element)


def two_sided_identity(
    empty: M,
    element: M,
    operation: Operation[M],
    eq: Equivalence[M] = operator.eq,
) -> bool:
    return identity(empty, element, operation, eq) and right_identity(
        empty, element, operation, eq
    )
