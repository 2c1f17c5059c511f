"""Proof that a pair of points is a valid homomorphic ElGamal encryption.

The witness is ``(x, r)`` and the statement is ``(G, H, Y, D, E)``; the
relation holds when ``D = x*H + r*Y`` and ``E = r*G``.  With ``G = H`` this
is ordinary ElGamal in the exponent.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..errors import ProofError
from ..hashing import DEFAULT_HASH, Transcript
from ..ristretto import Point, Scalar


@dataclass(frozen=True)
class HomoElGamalWitness:
    r: Scalar = field(repr=False)
    x: Scalar = field(repr=False)


@dataclass(frozen=True)
class HomoElGamalStatement:
    G: Point
    H: Point
    Y: Point
    D: Point
    E: Point


def _challenge(
    T: Point, A3: Point, statement: HomoElGamalStatement, hash_name: str
) -> Scalar:
    return (
        Transcript(hash_name)
        .chain_points(
            [T, A3, statement.G, statement.H, statement.Y, statement.D, statement.E]
        )
        .result_scalar()
    )


@dataclass(frozen=True)
class HomoElGamalProof:
    T: Point
    A3: Point
    z1: Scalar
    z2: Scalar
    hash_name: str = DEFAULT_HASH

    @classmethod
    def prove(
        cls,
        witness: HomoElGamalWitness,
        statement: HomoElGamalStatement,
        hash_name: str = DEFAULT_HASH,
    ) -> HomoElGamalProof:
        s1 = Scalar.random()
        s2 = Scalar.random()
        A1 = statement.H * s1
        A2 = statement.Y * s2
        A3 = statement.G * s2
        T = A1 + A2
        e = _challenge(T, A3, statement, hash_name)
        z1 = s1 + witness.x * e
        z2 = s2 + witness.r * e
        return cls(T, A3, z1, z2, hash_name)

    def verify(self, statement: HomoElGamalStatement) -> None:
        """Raise ProofError unless ``z1*H + z2*Y = T + e*D`` and ``z2*G = A3 + e*E``."""
        e = _challenge(self.T, self.A3, statement, self.hash_name)
        z1H_plus_z2Y = statement.H * self.z1 + statement.Y * self.z2
        T_plus_eD = self.T + statement.D * e
        z2G = statement.G * self.z2
        A3_plus_eE = self.A3 + statement.E * e
        if z1H_plus_z2Y != T_plus_eD or z2G != A3_plus_eE:
            raise ProofError()