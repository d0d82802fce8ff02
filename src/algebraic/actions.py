"""Actions of a structure's elements on an unrelated carrier.

A left action ∙ : M × S → S respects the structure's operation:

    (m1 ⊕ m2) ∙ s == m1 ∙ (m2 ∙ s)

and, when M is a monoid, ε ∙ s == s. Equivalently m ↦ (s ↦ m ∙ s) is a
homomorphism into the endofunctions of S under composition, the same
shape as the Cayley representation but over a foreign carrier.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from pydantic import BaseModel, ConfigDict

M = TypeVar("M")
S = TypeVar("S")

LeftAction = Callable[[M, S], S]
RightAction = Callable[[S, M], S]


class Vector(BaseModel):
    """A point in the plane."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float


@dataclass(frozen=True)
class RotationConfig:
    """Decimal places kept after each rotation."""

    precision: int = 2

    def __post_init__(self) -> None:
        if self.precision < 0:
            raise ValueError("precision must be non-negative")


def normalize(value: float, precision: int) -> float:
    """Round to ``precision`` places and collapse -0.0 to 0.0."""
    rounded = round(value, precision)
    if rounded == 0:
        return 0.0
    return rounded


def rotation(config: RotationConfig | None = None) -> LeftAction[float, Vector]:
    """Rotation of a vector by an angle in degrees.

    Angles act through the real-number addition semigroup. Results are
    normalized so that law checks compare equal despite floating-point
    noise.
    """
    precision = (config or RotationConfig()).precision

    def rotate(degrees: float, v: Vector) -> Vector:
        radians = math.radians(degrees)
        cos, sin = math.cos(radians), math.sin(radians)
        return Vector(
            x=normalize(cos * v.x - sin * v.y, precision),
            y=normalize(sin * v.x + cos * v.y, precision),
        )

    return rotate


def as_right_action(action: LeftAction[M, S]) -> RightAction[S, M]:
    """Flip argument order.

    Only a lawful right action when the acting structure is commutative,
    as angle addition is.
    """
    def act(s: S, m: M) -> S:
        return action(m, s)

    return act


def action_endofunction(action: LeftAction[M, S], m: M) -> Callable[[S], S]:
    """The self-map s ↦ m ∙ s of the carrier being acted on."""
    def act(s: S) -> S:
        return action(m, s)

    return act


vector_rotation: LeftAction[float, Vector] = rotation()
right_vector_rotation: RightAction[Vector, float] = as_right_action(vector_rotation)
