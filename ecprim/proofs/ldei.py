"""Low degree exponent interpolation (LDEI) proof."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..errors import ProofError
from ..hashing import DEFAULT_HASH, Transcript
from ..polynomial import Polynomial
from ..ristretto import Point, Scalar


class InvalidLdeiStatement(ValueError):
    """The statement is not valid or does not match the witness."""


class AlphaNotPairwiseDistinct(InvalidLdeiStatement):
    def __init__(self) -> None:
        super().__init__("`alpha`s are not pairwise distinct")


class AlphaLengthDoesntMatchG(InvalidLdeiStatement):
    def __init__(self) -> None:
        super().__init__("alpha.len() != g.len()")


class PolynomialDegreeMoreThanD(InvalidLdeiStatement):
    def __init__(self) -> None:
        super().__init__("deg(w) > d")


class ListOfXDoesntMatchExpectedValue(InvalidLdeiStatement):
    def __init__(self) -> None:
        super().__init__("`statement.x` doesn't match expected value")


@dataclass(frozen=True)
class LdeiWitness:
    """The prover's secret polynomial ``w(x)``."""

    w: Polynomial = field(repr=False)


def _check(witness: LdeiWitness, alpha: tuple[Scalar, ...], g: tuple[Point, ...], d: int) -> None:
    if len(g) != len(alpha):
        raise AlphaLengthDoesntMatchG()
    if witness.w.degree() > d:
        raise PolynomialDegreeMoreThanD()
    if len(set(alpha)) != len(alpha):
        raise AlphaNotPairwiseDistinct()


def _exponents(poly: Polynomial, g: tuple[Point, ...], alpha: tuple[Scalar, ...]) -> tuple[Point, ...]:
    return tuple(g_i * poly.evaluate(a_i) for g_i, a_i in zip(g, alpha))


@dataclass(frozen=True)
class LdeiStatement:
    """Claim that ``x[i] = g[i] * w(alpha[i])`` for a known ``w`` with ``deg(w) <= d``."""

    alpha: tuple[Scalar, ...]
    g: tuple[Point, ...]
    x: tuple[Point, ...]
    d: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "alpha", tuple(self.alpha))
        object.__setattr__(self, "g", tuple(self.g))
        object.__setattr__(self, "x", tuple(self.x))

    @classmethod
    def create(
        cls, witness: LdeiWitness, alpha: list[Scalar], g: list[Point], d: int
    ) -> LdeiStatement:
        """Build the statement, computing ``x_i = g_i * w(alpha_i)``."""
        alpha = tuple(alpha)
        g = tuple(g)
        _check(witness, alpha, g, d)
        return cls(alpha, g, _exponents(witness.w, g, alpha), d)


def _challenge(statement: LdeiStatement, a: tuple[Point, ...], hash_name: str) -> Scalar:
    return (
        Transcript(hash_name)
        .chain_points(statement.g)
        .chain_points(statement.x)
        .chain_points(a)
        .result_scalar()
    )


@dataclass(frozen=True)
class LdeiProof:
    """Proof ``(a_1..a_m, e, z)`` with ``z(X) = u(X) - e*w(X)``."""

    a: tuple[Point, ...]
    e: Scalar
    z: Polynomial
    hash_name: str = DEFAULT_HASH

    def __post_init__(self) -> None:
        object.__setattr__(self, "a", tuple(self.a))

    @classmethod
    def prove(
        cls,
        witness: LdeiWitness,
        statement: LdeiStatement,
        hash_name: str = DEFAULT_HASH,
    ) -> LdeiProof:
        """Prove the statement; raise InvalidLdeiStatement if it does not hold."""
        _check(witness, statement.alpha, statement.g, statement.d)
        if statement.x != _exponents(witness.w, statement.g, statement.alpha):
            raise ListOfXDoesntMatchExpectedValue()

        u = Polynomial.sample_exact(statement.d)
        a = _exponents(u, statement.g, statement.alpha)
        e = _challenge(statement, a, hash_name)
        z = u - witness.w * e
        return cls(a, e, z, hash_name)

    def verify(self, statement: LdeiStatement) -> None:
        """Raise ProofError unless the proof is valid for ``statement``."""
        e = _challenge(statement, self.a, self.hash_name)
        if e != self.e:
            raise ProofError()
        if self.z.degree() > statement.d:
            raise ProofError()
        expected_a = tuple(
            g_i * self.z.evaluate(a_i) + x_i * e
            for g_i, a_i, x_i in zip(statement.g, statement.alpha, statement.x)
        )
        if self.a != expected_a:
            raise ProofError()