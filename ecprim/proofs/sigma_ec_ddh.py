"""Chaum-Pedersen proof that two pairs share the same discrete logarithm."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..errors import ProofError
from ..hashing import DEFAULT_HASH, Transcript
from ..ristretto import Point, Scalar


@dataclass(frozen=True)
class ECDDHStatement:
    """Statement ``h1 = x*g1`` and ``h2 = x*g2``."""

    g1: Point
    h1: Point
    g2: Point
    h2: Point


@dataclass(frozen=True)
class ECDDHWitness:
    x: Scalar = field(repr=False)


@dataclass(frozen=True)
class ECDDHProof:
    a1: Point
    a2: Point
    z: Scalar
    hash_name: str = DEFAULT_HASH

    @staticmethod
    def _challenge(st: ECDDHStatement, a1: Point, a2: Point, hash_name: str) -> Scalar:
        transcript = Transcript(hash_name).chain_points([st.g1, st.h1, st.g2, st.h2, a1, a2])
        return transcript.result_scalar()

    @classmethod
    def prove(
        cls,
        witness: ECDDHWitness,
        statement: ECDDHStatement,
        hash_name: str = DEFAULT_HASH,
    ) -> ECDDHProof:
        nonce = Scalar.random()
        a1, a2 = statement.g1 * nonce, statement.g2 * nonce
        e = cls._challenge(statement, a1, a2, hash_name)
        return cls(a1, a2, nonce + e * witness.x, hash_name)

    def verify(self, statement: ECDDHStatement) -> None:
        """Raise ProofError unless ``z*g1 = a1 + e*h1`` and ``z*g2 = a2 + e*h2``."""
        e = self._challenge(statement, self.a1, self.a2, self.hash_name)
        pairs = ((statement.g1, self.a1, statement.h1), (statement.g2, self.a2, statement.h2))
        if any(g * self.z != a + h * e for g, a, h in pairs):
            raise ProofError()