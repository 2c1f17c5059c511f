"""Polynomials with coefficients in the scalar field of the group."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from functools import reduce
from itertools import zip_longest
from typing import Union

from .ristretto import Scalar

INFINITY = math.inf
"""Degree of the zero polynomial."""

Degree = Union[int, float]
ScalarLike = Union[Scalar, int]


def _to_scalar(value: ScalarLike) -> Scalar:
    if isinstance(value, Scalar):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Scalar.from_int(value)
    raise TypeError(f"expected a Scalar or an int, got {type(value).__name__}")


@dataclass(frozen=True)
class Polynomial:
    """``f(x) = a_0 + a_1 x + ... + a_n x^n``; ``coefficients[i]`` is ``a_i``.

    Trailing zero coefficients are allowed; they do not count towards the degree.
    """

    coefficients: tuple[Scalar, ...]

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "coefficients", tuple(_to_scalar(c) for c in self.coefficients)
        )

    @classmethod
    def sample_exact(cls, degree: Degree) -> Polynomial:
        """Random polynomial of the given degree; ``INFINITY`` gives the zero polynomial."""
        if degree == INFINITY:
            return cls(())
        if not isinstance(degree, int) or degree < 0:
            raise ValueError(f"invalid polynomial degree: {degree!r}")
        return cls(tuple(Scalar.random() for _ in range(degree + 1)))

    @classmethod
    def sample_exact_with_fixed_const_term(
        cls, n: int, const_term: ScalarLike
    ) -> Polynomial:
        """Random polynomial of degree ``n`` whose constant term is ``const_term``."""
        if n < 0:
            raise ValueError(f"invalid polynomial degree: {n!r}")
        randoms = tuple(Scalar.random() for _ in range(n))
        return cls((_to_scalar(const_term), *randoms))

    def degree(self) -> Degree:
        """Index of the last non-zero coefficient, or ``INFINITY`` if there is none."""
        return next(
            (
                i
                for i, coef in reversed(list(enumerate(self.coefficients)))
                if not coef.is_zero()
            ),
            INFINITY,
        )

    def evaluate(self, x: ScalarLike) -> Scalar:
        """Compute ``f(x)``; ``x`` may be a scalar or an integer."""
        if not self.coefficients:
            raise ValueError("polynomial has no coefficients to evaluate")
        point = _to_scalar(x)
        head, *tail = reversed(self.coefficients)
        return reduce(lambda partial, coef: partial * point + coef, tail, head)

    def evaluate_many(self, xs: Iterable[ScalarLike]) -> Iterator[Scalar]:
        """Yield ``f(x)`` for every ``x`` in ``xs``."""
        return (self.evaluate(x) for x in xs)

    @staticmethod
    def lagrange_basis(x: ScalarLike, j: int, xs: list[ScalarLike]) -> Scalar:
        """Evaluate the ``j``-th Lagrange basis polynomial over ``xs`` at ``x``."""
        points = [_to_scalar(v) for v in xs]
        x = _to_scalar(x)
        x_j = points[j]
        others = [x_m for m, x_m in enumerate(points) if m != j]
        num = reduce(lambda acc, x_m: acc * (x - x_m), others, Scalar.from_int(1))
        denum = reduce(lambda acc, x_m: acc * (x_j - x_m), others, Scalar.from_int(1))
        try:
            return num * denum.invert()
        except ZeroDivisionError:
            raise ValueError("elements in xs are not pairwise distinct") from None

    def __mul__(self, scalar: object) -> Polynomial:
        if not isinstance(scalar, (Scalar, int)) or isinstance(scalar, bool):
            return NotImplemented
        s = _to_scalar(scalar)
        return Polynomial(tuple(c * s for c in self.coefficients))

    __rmul__ = __mul__

    def __add__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        zero = Scalar.zero()
        return Polynomial(
            tuple(
                f + g
                for f, g in zip_longest(
                    self.coefficients, other.coefficients, fillvalue=zero
                )
            )
        )

    def __sub__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        zero = Scalar.zero()
        return Polynomial(
            tuple(
                f - g
                for f, g in zip_longest(
                    self.coefficients, other.coefficients, fillvalue=zero
                )
            )
        )