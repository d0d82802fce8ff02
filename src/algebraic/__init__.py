from .actions import (
    LeftAction,
    RightAction,
    RotationConfig,
    Vector,
    action_endofunction,
    as_right_action,
    normalize,
    right_vector_rotation,
    rotation,
    vector_rotation,
)
from .carriers import (
    Cons,
    Fork,
    Leaf,
    NEList,
    Nil,
    Tree,
    nelist_from_iterable,
    nelist_to_list,
    nesum,
    tsum,
)
from .combinators import (
    LawReport,
    LawViolation,
    cayley,
    cayley_abs,
    cayley_rep,
    check_homomorphism,
    check_left_action,
    check_magma_closure,
    check_monoid,
    check_semigroup,
    endofunction_monoid,
    fold_map,
    mconcat,
    product_monoid,
    sconcat,
)
from .instances import (
    MAGMA_TREE_FORK,
    MONOID_BOOLEAN_CONJUNCTION,
    MONOID_BOOLEAN_DISJUNCTION,
    MONOID_ENDOFUNCTION_COMPOSITION,
    MONOID_LIST_CONCATENATION,
    MONOID_NUMBER_ADDITION,
    MONOID_NUMBER_MULTIPLICATION,
    SEMIGROUP_ENDOFUNCTION_COMPOSITION,
    SEMIGROUP_LIST_CONCATENATION,
    SEMIGROUP_NELIST_CONCATENATION,
    SEMIGROUP_NUMBER_ADDITION,
    list_sum,
)
from .kernel import (
    Evidence,
    LawError,
    Magma,
    MagmaInstance,
    Monoid,
    MonoidInstance,
    Semigroup,
    SemigroupInstance,
    Trace,
    magma,
    monoid,
    semigroup,
)
from .kernel.witness import associative, identity, legacy_associative, right_identity

__all__ = [
    # Capabilities
    "Magma",
    "Semigroup",
    "Monoid",
    "MagmaInstance",
    "SemigroupInstance",
    "MonoidInstance",
    "magma",
    "semigroup",
    "monoid",
    "LawError",
    # Witnesses
    "associative",
    "legacy_associative",
    "identity",
    "right_identity",
    # Catalog
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
    # Carriers and homomorphisms
    "Tree",
    "Leaf",
    "Fork",
    "tsum",
    "NEList",
    "Nil",
    "Cons",
    "nesum",
    "nelist_from_iterable",
    "nelist_to_list",
    "list_sum",
    # Combinators
    "fold_map",
    "mconcat",
    "sconcat",
    "product_monoid",
    "endofunction_monoid",
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
    # Actions
    "LeftAction",
    "RightAction",
    "Vector",
    "RotationConfig",
    "normalize",
    "rotation",
    "vector_rotation",
    "right_vector_rotation",
    "as_right_action",
    "action_endofunction",
    # Tracing
    "Evidence",
    "Trace",
]
