"""Proof of knowledge of the blinding factor of a Pedersen commitment to a known value.

The statement is ``(c, m)`` and the witness is ``r`` with ``c = m*G + r*H``.
The prover picks ``A = s*H``, derives ``e = H(G, H, c, A, m)`` and answers
``z = s + e*r``.  The verifier checks ``e*m*G + z*H = A + e*c``.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..commitments import PedersenCommitment
from ..errors import ProofError
from ..hashing import DEFAULT_HASH, Transcript
from ..ristretto import Point, Scalar


def _challenge(com: Point, a: Point, m: Scalar, hash_name: str) -> Scalar:
    return (
        Transcript(hash_name)
        .chain_points([Point.generator(), Point.base_point2(), com, a])
        .chain_scalar(m)
        .result_scalar()
    )


@dataclass(frozen=True)
class PedersenBlindingProof:
    e: Scalar
    m: Scalar
    a: Point
    com: Point
    z: Scalar
    hash_name: str = DEFAULT_HASH

    @classmethod
    def prove(
        cls, m: Scalar, r: Scalar, hash_name: str = DEFAULT_HASH
    ) -> PedersenBlindingProof:
        h = Point.base_point2()
        s = Scalar.random()
        a = h * s
        com = PedersenCommitment().create_commitment_with_user_defined_randomness(
            m.to_int(), r.to_int()
        )
        e = _challenge(com, a, m, hash_name)
        z = s + e * r
        return cls(e, m, a, com, z, hash_name)

    def verify(self) -> None:
        """Raise ProofError unless ``z*H + e*m*G = e*com + A``."""
        e = _challenge(self.com, self.a, self.m, self.hash_name)
        lhs = Point.base_point2() * self.z + Point.generator() * self.m * e
        rhs = self.com * e + self.a
        if lhs != rhs:
            raise ProofError()