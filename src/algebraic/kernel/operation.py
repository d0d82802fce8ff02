"""Operation contract and capability protocols - pure abstractions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, TypeVar, runtime_checkable

M = TypeVar("M")

# A closed binary operation over a carrier: (M, M) -> M
Operation = Callable[[M, M], M]

# Equality used by witnesses. Carriers without decidable equality
# (functions) supply an observational one.
Equivalence = Callable[[M, M], bool]


@runtime_checkable
class Magma(Protocol[M]):
    """A carrier with one closed binary operation."""

    name: str

    def operation(self, a: M, b: M) -> M:
        """Combine two elements of the carrier."""
        ...


@runtime_checkable
class Semigroup(Magma[M], Protocol[M]):
    """A magma whose operation is witnessed to be associative."""

    def eq(self, a: M, b: M) -> bool:
        """Decide whether two elements are equal."""
        ...

    def associative(self, a: M, b: M, c: M) -> bool:
        """Check (a ⊕ b) ⊕ c == a ⊕ (b ⊕ c) for the given samples."""
        ...


@runtime_checkable
class Monoid(Semigroup[M], Protocol[M]):
    """A semigroup with an identity element."""

    @property
    def identity_element(self) -> M:
        """The element ε with ε ⊕ a == a == a ⊕ ε."""
        ...

    def identity(self, element: M) -> bool:
        """Check ε ⊕ element == element."""
        ...

    def right_identity(self, element: M) -> bool:
        """Check element ⊕ ε == element."""
        ...
