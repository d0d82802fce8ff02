"""Tagged-union carriers that are not flat Python collections."""

from .nelist import Cons, NEList, Nil, concat, nelist_from_iterable, nelist_to_list, nesum
from .tree import Fork, Leaf, Tree, fork, leaves, tsum

__all__ = [
    "Tree",
    "Leaf",
    "Fork",
    "fork",
    "leaves",
    "tsum",
    "NEList",
    "Nil",
    "Cons",
    "concat",
    "nesum",
    "nelist_from_iterable",
    "nelist_to_list",
]
