"""Proof of knowledge of the opening ``(m, r)`` of a Pedersen commitment.

The prover picks ``A1 = s1*G`` and ``A2 = s2*H``, derives ``e = H(G, H, c, A1, A2)``
and answers ``z1 = s1 + e*m``, ``z2 = s2 + e*r``.  The verifier checks
``z1*G + z2*H = A1 + A2 + e*c``.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..commitments import PedersenCommitment
from ..errors import ProofError
from ..hashing import DEFAULT_HASH, Transcript
from ..ristretto import Point, Scalar


def _challenge(com: Point, a1: Point, a2: Point, hash_name: str) -> Scalar:
    return (
        Transcript(hash_name)
        .chain_points([Point.generator(), Point.base_point2(), com, a1, a2])
        .result_scalar()
    )


@dataclass(frozen=True)
class PedersenProof:
    e: Scalar
    a1: Point
    a2: Point
    com: Point
    z1: Scalar
    z2: Scalar
    hash_name: str = DEFAULT_HASH

    @classmethod
    def prove(cls, m: Scalar, r: Scalar, hash_name: str = DEFAULT_HASH) -> PedersenProof:
        g = Point.generator()
        h = Point.base_point2()
        s1 = Scalar.random()
        s2 = Scalar.random()
        a1 = g * s1
        a2 = h * s2
        com = PedersenCommitment().create_commitment_with_user_defined_randomness(
            m.to_int(), r.to_int()
        )
        e = _challenge(com, a1, a2, hash_name)
        z1 = s1 + e * m
        z2 = s2 + e * r
        return cls(e, a1, a2, com, z1, z2, hash_name)

    def verify(self) -> None:
        """Raise ProofError unless ``z1*G + z2*H = A1 + A2 + e*com``."""
        e = _challenge(self.com, self.a1, self.a2, self.hash_name)
        lhs = Point.generator() * self.z1 + Point.base_point2() * self.z2
        rhs = self.a1 + self.a2 + self.com * e
        if lhs != rhs:
            raise ProofError()