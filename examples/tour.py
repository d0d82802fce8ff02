from __future__ import annotations

import logging

from algebraic import (
    MONOID_ENDOFUNCTION_COMPOSITION,
    MONOID_LIST_CONCATENATION,
    MONOID_NUMBER_ADDITION,
    MONOID_NUMBER_MULTIPLICATION,
    Trace,
    Vector,
    cayley,
    check_left_action,
    check_monoid,
    check_semigroup,
    fold_map,
    product_monoid,
    semigroup,
    vector_rotation,
)

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def folds() -> None:
    total = fold_map(MONOID_NUMBER_ADDITION, lambda x: x)
    length = fold_map(MONOID_NUMBER_ADDITION, lambda _: 1)
    stats = fold_map(
        product_monoid(MONOID_NUMBER_ADDITION, MONOID_NUMBER_MULTIPLICATION),
        lambda x: (x, x),
    )
    print("sum:", total([1, 2, 3, 4, 5]))
    print("length:", length("monoid"))
    print("sum and product:", stats([1, 2, 3, 4]))
    print("flatten:", fold_map(MONOID_LIST_CONCATENATION, tuple)(["ab", "cd"]))
    pipeline = fold_map(MONOID_ENDOFUNCTION_COMPOSITION, lambda n: (lambda x: x + n))
    print("pipeline(0):", pipeline([1, 2, 3])(0))


def representations() -> None:
    print("cayley 3×:", cayley(MONOID_NUMBER_MULTIPLICATION, 3)([1, 2, 5]))
    v = Vector(x=1, y=0)
    print("rotate 30 then 60:", vector_rotation(30, vector_rotation(60, v)))
    print("rotate 90:", vector_rotation(90, v))


def laws() -> None:
    trace = Trace()
    print(check_monoid(MONOID_NUMBER_ADDITION, [0, 1, -2], trace=trace))
    subtraction = semigroup(lambda a, b: a - b, name="number -")
    print(check_semigroup(subtraction, [1, 2], trace=trace))
    points = [Vector(x=1, y=0), Vector(x=0, y=1)]
    print(check_left_action(vector_rotation, MONOID_NUMBER_ADDITION, [0, 90, 180], points, trace=trace))
    print("trace events:", len(trace))


if __name__ == "__main__":
    folds()
    representations()
    laws()
