"""Kernel layer - pure abstractions for algebraic structures."""

from algebraic.kernel.errors import LawError
from algebraic.kernel.operation import Equivalence, Magma, Monoid, Operation, Semigroup
from algebraic.kernel.structure import (
    MagmaInstance,
    MonoidInstance,
    SemigroupInstance,
    magma,
    monoid,
    semigroup,
)
from algebraic.kernel.trace import Evidence, Trace

__all__ = [
    "Operation",
    "Equivalence",
    # Capabilities
    "Magma",
    "Semigroup",
    "Monoid",
    # Instances
    "MagmaInstance",
    "SemigroupInstance",
    "MonoidInstance",
    "magma",
    "semigroup",
    "monoid",
    "LawError",
    # Tracing
    "Evidence",
    "Trace",
]
