"""Immutable Magma, Semigroup and Monoid instances.

Refinement is by composition: a SemigroupInstance has a MagmaInstance, a
MonoidInstance has a SemigroupInstance. Each level re-exposes the
capabilities of the level below, so an instance satisfies every weaker
protocol in ``algebraic.kernel.operation`` structurally.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from algebraic.kernel import witness
from algebraic.kernel.errors import LawError
from algebraic.kernel.operation import Equivalence, Operation

logger = logging.getLogger(__name__)

M = TypeVar("M")


@dataclass(frozen=True)
class MagmaInstance(Generic[M]):
    """A carrier packaged with one closed binary operation."""

    operation: Operation[M]
    name: str = "magma"


@dataclass(frozen=True)
class SemigroupInstance(Generic[M]):
    """A magma plus an associativity witness."""

    magma: MagmaInstance[M]
    eq: Equivalence[M] = operator.eq

    @property
    def name(self) -> str:
        return self.magma.name

    @property
    def operation(self) -> Operation[M]:
        return self.magma.operation

    def associative(self, a: M, b: M, c: M) -> bool:
        return witness.associative(a, b, c, self.operation, self.eq)

    def legacy_associative(self, a: M, b: M) -> bool:
        """Two-argument compatibility check, see witness.legacy_associative."""
        return witness.legacy_associative(a, b, self.operation, self.eq)


@dataclass(frozen=True)
class MonoidInstance(Generic[M]):
    """A semigroup plus an identity element and identity witnesses.

    Construction verifies both identity sides for every element in
    ``samples`` and raises LawError on the first failure.
    """

    semigroup: SemigroupInstance[M]
    identity_element: M
    samples: tuple[M, ...] = field(default=(), repr=False, compare=False)

    def __post_init__(self) -> None:
        for element in self.samples:
            if not self.identity(element):
                raise LawError(
                    f"{self.name}: identity_element is not a left identity for {element!r}",
                    (self.identity_element, element),
                )
            if not self.right_identity(element):
                raise LawError(
                    f"{self.name}: identity_element is not a right identity for {element!r}",
                    (element, self.identity_element),
                )
        logger.debug("%s passed identity self-test over %d samples", self.name, len(self.samples))

    @property
    def name(self) -> str:
        return self.semigroup.name

    @property
    def magma(self) -> MagmaInstance[M]:
        return self.semigroup.magma

    @property
    def operation(self) -> Operation[M]:
        return self.semigroup.operation

    @property
    def eq(self) -> Equivalence[M]:
        return self.semigroup.eq

    def associative(self, a: M, b: M, c: M) -> bool:
        return self.semigroup.associative(a, b, c)

    def legacy_associative(self, a: M, b: M) -> bool:
        return self.semigroup.legacy_associative(a, b)

    def identity(self, element: M) -> bool:
        return witness.identity(self.identity_element, element, self.operation, self.eq)

    def right_identity(self, element: M) -> bool:
        return witness.right_identity(self.identity_element, element, self.operation, self.eq)


def magma(operation: Operation[M], name: str = "magma") -> MagmaInstance[M]:
    return MagmaInstance(operation=operation, name=name)


def semigroup(
    operation: Operation[M],
    eq: Equivalence[M] = operator.eq,
    name: str = "semigroup",
) -> SemigroupInstance[M]:
    return SemigroupInstance(magma=magma(operation, name), eq=eq)


def monoid(
    operation: Operation[M],
    identity_element: M,
    eq: Equivalence[M] = operator.eq,
    samples: Iterable[M] = (),
    name: str = "monoid",
) -> MonoidInstance[M]:
    """Build a monoid and self-test its identity over samples.

    Raises:
        LawError: If identity_element is not a two-sided identity for
            some sample
    """
    return MonoidInstance(
        semigroup=semigroup(operation, eq, name),
        identity_element=identity_element,
        samples=tuple(samples),
    )
