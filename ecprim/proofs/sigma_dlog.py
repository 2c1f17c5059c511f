"""Schnorr proof of knowledge of a discrete logarithm, made non-interactive."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import ProofError
from ..hashing import DEFAULT_HASH, Transcript
from ..ristretto import Point, Scalar


@dataclass(frozen=True)
class DLogProof:
    """Proof that the prover knows ``sk`` with ``pk = sk * G``."""

    pk: Point
    pk_t_rand_commitment: Point
    challenge_response: Scalar
    hash_name: str = DEFAULT_HASH

    @staticmethod
    def _challenge(commitment: Point, pk: Point, hash_name: str) -> Scalar:
        transcript = Transcript(hash_name).chain_points([commitment, Point.generator(), pk])
        return transcript.result_scalar()

    @classmethod
    def prove(cls, sk: Scalar, hash_name: str = DEFAULT_HASH) -> DLogProof:
        nonce = Scalar.random()
        commitment = Point.generator() * nonce
        pk = Point.generator() * sk
        challenge = cls._challenge(commitment, pk, hash_name)
        return cls(pk, commitment, nonce - challenge * sk, hash_name)

    def verify(self) -> None:
        """Raise ProofError unless ``response*G + challenge*pk`` equals the commitment."""
        challenge = self._challenge(self.pk_t_rand_commitment, self.pk, self.hash_name)
        recomputed = Point.generator() * self.challenge_response + self.pk * challenge
        if recomputed != self.pk_t_rand_commitment:
            raise ProofError()