"""Proof that a homomorphic ElGamal encryption hides the discrete log of a point.

The witness is ``(x, r)`` and the statement is ``(G, Y, Q, D, E)``; the
relation holds when ``D = x*G + r*Y``, ``E = r*G`` and ``Q = x*G``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..errors import ProofError
from ..hashing import DEFAULT_HASH, Transcript
from ..ristretto import Point, Scalar


@dataclass(frozen=True)
class HomoElGamalDlogWitness:
    r: Scalar = field(repr=False)
    x: Scalar = field(repr=False)


@dataclass(frozen=True)
class HomoElGamalDlogStatement:
    G: Point
    Y: Point
    Q: Point
    D: Point
    E: Point


def _challenge(
    A1: Point,
    A2: Point,
    A3: Point,
    statement: HomoElGamalDlogStatement,
    hash_name: str,
) -> Scalar:
    return (
        Transcript(hash_name)
        .chain_points(
            [A1, A2, A3, statement.G, statement.Y, statement.D, statement.E]
        )
        .result_scalar()
    )


@dataclass(frozen=True)
class HomoElGamalDlogProof:
    A1: Point
    A2: Point
    A3: Point
    z1: Scalar
    z2: Scalar
    hash_name: str = DEFAULT_HASH

    @classmethod
    def prove(
        cls,
        witness: HomoElGamalDlogWitness,
        statement: HomoElGamalDlogStatement,
        hash_name: str = DEFAULT_HASH,
    ) -> HomoElGamalDlogProof:
        s1 = Scalar.random()
        s2 = Scalar.random()
        A1 = statement.G * s1
        A2 = statement.Y * s2
        A3 = statement.G * s2
        e = _challenge(A1, A2, A3, statement, hash_name)
        z1 = s1 + e * witness.x
        z2 = s2 + e * witness.r
        return cls(A1, A2, A3, z1, z2, hash_name)

    def verify(self, statement: HomoElGamalDlogStatement) -> None:
        """Raise ProofError unless all three verification equations hold."""
        e = _challenge(self.A1, self.A2, self.A3, statement, self.hash_name)
        z1G = statement.G * self.z1
        z2Y = statement.Y * self.z2
        z2G = statement.G * self.z2
        A1_plus_eQ = self.A1 + statement.Q * e
        A3_plus_eE = self.A3 + statement.E * e
        A2_plus_eDmQ = self.A2 + (statement.D - statement.Q) * e
        if z1G != A1_plus_eQ or z2G != A3_plus_eE or z2Y != A2_plus_eDmQ:
            raise ProofError()