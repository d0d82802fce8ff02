"""Combinators - generic folds, monoid constructions and law checks."""

from .laws import (
    LawReport,
    LawViolation,
    check_homomorphism,
    check_left_action,
    check_magma_closure,
    check_monoid,
    check_semigroup,
)
from .ops import (
    agree_on,
    cayley,
    cayley_abs,
    cayley_rep,
    compose,
    endofunction_monoid,
    fold_map,
    identity_function,
    mconcat,
    product_monoid,
    sconcat,
)

__all__ = [
    # Folding
    "fold_map",
    "mconcat",
    "sconcat",
    # Constructions
    "product_monoid",
    "endofunction_monoid",
    "compose",
    "identity_function",
    "agree_on",
    # Cayley representation
    "cayley",
    "cayley_rep",
    "cayley_abs",
    # Law checks
    "LawReport",
    "LawViolation",
    "check_magma_closure",
    "check_semigroup",
    "check_monoid",
    "check_left_action",
    "check_homomorphism",
]
