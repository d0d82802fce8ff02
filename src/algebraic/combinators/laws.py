"""Law-checking harness.

Runs the witnesses from ``algebraic.kernel.witness`` over every
combination of the supplied samples and reports what failed. Violations
are data, not exceptions: callers decide whether a failed law is fatal.

Checked laws:

1. Closure: a ⊕ b is a value of the carrier
2. Associativity: (a ⊕ b) ⊕ c == a ⊕ (b ⊕ c)
3. Identity: ε ⊕ a == a == a ⊕ ε
4. Action: (m1 ⊕ m2) ∙ s == m1 ∙ (m2 ∙ s), and ε ∙ s == s for monoids
5. Homomorphism: f(a ⊕ b) == f(a) ⊛ f(b)
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Callable, Iterable
from itertools import product
from typing import Any, TypeVar

from pydantic import BaseModel, Field

from algebraic.kernel.operation import Equivalence, Magma, Monoid, Semigroup
from algebraic.kernel.trace import Trace

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")
M = TypeVar("M")
S = TypeVar("S")


class LawViolation(BaseModel):
    """One failed law check."""
    law: str
    instance: str
    elements: tuple[str, ...]


class LawReport(BaseModel):
    """Outcome of running a family of law checks against one instance."""
    instance: str
    checks_run: int = 0
    checks_passed: int = 0
    violations: list[LawViolation] = Field(default_factory=list)

    @property
    def holds(self) -> bool:
        return not self.violations


def describe(value: Any) -> str:
    """Readable form of a sample; functions are shown by name."""
    if callable(value):
        return getattr(value, "__name__", repr(value))
    return repr(value)


class _Run:
    """Accumulates checks for one report and mirrors them into a trace."""

    def __init__(self, instance: str, trace: Trace | None) -> None:
        self.instance = instance
        self.trace = trace
        self.run = 0
        self.passed = 0
        self.violations: list[LawViolation] = []
        self._begin_id = trace.begin(instance) if trace is not None else None

    def check(self, law: str, holds: bool, *elements: Any) -> None:
        self.run += 1
        if holds:
            self.passed += 1
            return
        violation = LawViolation(
            law=law,
            instance=self.instance,
            elements=tuple(describe(e) for e in elements),
        )
        self.violations.append(violation)
        logger.debug("%s violates %s for %s", self.instance, law, violation.elements)
        if self.trace is not None:
            self.trace.record("law", info={"law": law, "elements": violation.elements})

    def finish(self) -> LawReport:
        if self.trace is not None:
            self.trace.end(self._begin_id, self.instance, self.run, self.passed)
        return LawReport(
            instance=self.instance,
            checks_run=self.run,
            checks_passed=self.passed,
            violations=self.violations,
        )


def check_magma_closure(
    magma: Magma[M],
    samples: Iterable[M],
    carrier: type | tuple[type, ...],
    trace: Trace | None = None,
) -> LawReport:
    """Check that every pairwise result is an instance of ``carrier``."""
    run = _Run(magma.name, trace)
    for a, b in product(tuple(samples), repeat=2):
        run.check("closure", isinstance(magma.operation(a, b), carrier), a, b)
    return run.finish()


def _associativity(run: _Run, s: Semigroup[M], samples: tuple[M, ...]) -> None:
    for a, b, c in product(samples, repeat=3):
        run.check("associativity", s.associative(a, b, c), a, b, c)


def check_semigroup(
    s: Semigroup[M],
    samples: Iterable[M],
    trace: Trace | None = None,
) -> LawReport:
    """Check associativity over every ordered triple of samples."""
    run = _Run(s.name, trace)
    _associativity(run, s, tuple(samples))
    return run.finish()


def check_monoid(
    m: Monoid[M],
    samples: Iterable[M],
    trace: Trace | None = None,
) -> LawReport:
    """Check associativity plus both identity laws."""
    values = tuple(samples)
    run = _Run(m.name, trace)
    _associativity(run, m, values)
    for x in values:
        run.check("left identity", m.identity(x), m.identity_element, x)
        run.check("right identity", m.right_identity(x), x, m.identity_element)
    return run.finish()


def check_left_action(
    action: Callable[[M, S], S],
    s: Semigroup[M],
    elements: Iterable[M],
    points: Iterable[S],
    eq: Equivalence[S] = operator.eq,
    trace: Trace | None = None,
) -> LawReport:
    """Check that ``action`` respects the operation of ``s``.

    When ``s`` is a monoid the identity element must also act trivially.
    """
    values = tuple(elements)
    targets = tuple(points)
    run = _Run(f"{s.name} acting", trace)
    for m1, m2 in product(values, repeat=2):
        combined = s.operation(m1, m2)
        for p in targets:
            run.check(
                "action compatibility",
                eq(action(combined, p), action(m1, action(m2, p))),
                m1,
                m2,
                p,
            )
    if isinstance(s, Monoid):
        for p in targets:
            run.check("action identity", eq(action(s.identity_element, p), p), p)
    return run.finish()


def check_homomorphism(
    f: Callable[[A], B],
    source: Magma[A],
    target: Magma[B],
    samples: Iterable[A],
    eq: Equivalence[B] | None = None,
    trace: Trace | None = None,
) -> LawReport:
    """Check f(a ⊕ b) == f(a) ⊛ f(b) for every pair of samples.

    Equality defaults to the target's own when it has one.
    """
    if eq is None:
        eq = target.eq if isinstance(target, Semigroup) else operator.eq
    run = _Run(f"{describe(f)}: {source.name} → {target.name}", trace)
    for a, b in product(tuple(samples), repeat=2):
        run.check(
            "homomorphism",
            eq(f(source.operation(a, b)), target.operation(f(a), f(b))),
            a,
            b,
        )
    return run.finish()

