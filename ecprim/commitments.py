"""Hash-based and Pedersen commitments to integers."""

from __future__ import annotations

import secrets

from .hashing import DEFAULT_HASH, Transcript
from .ristretto import Point, Scalar

SECURITY_BITS = 256


def _sample_blinding_factor() -> int:
    return secrets.randbits(SECURITY_BITS)


class HashCommitment:
    """Commitment ``c = H(m || r)`` where ``r`` is a 256-bit blinding factor."""

    def __init__(self, hash_name: str = DEFAULT_HASH) -> None:
        self.hash_name = hash_name

    def create_commitment_with_user_defined_randomness(
        self, message: int, blinding_factor: int
    ) -> int:
        return (
            Transcript(self.hash_name)
            .chain_bigint(message)
            .chain_bigint(blinding_factor)
            .result_bigint()
        )

    def create_commitment(self, message: int) -> tuple[int, int]:
        """Commit with a fresh random blinding factor; return (commitment, blinding)."""
        blinding_factor = _sample_blinding_factor()
        commitment = self.create_commitment_with_user_defined_randomness(
            message, blinding_factor
        )
        return commitment, blinding_factor


class PedersenCommitment:
    """Commitment ``c = m*G + r*H`` with ``H`` the second base point."""

    def create_commitment_with_user_defined_randomness(
        self, message: int, blinding_factor: int
    ) -> Point:
        message_scalar = Scalar.from_int(message)
        blinding_scalar = Scalar.from_int(blinding_factor)
        return (
            Point.generator() * message_scalar
            + Point.base_point2() * blinding_scalar
        )

    def create_commitment(self, message: int) -> tuple[Point, int]:
        """Commit with a fresh random blinding factor; return (commitment, blinding)."""
        blinding_factor = _sample_blinding_factor()
        commitment = self.create_commitment_with_user_defined_randomness(
            message, blinding_factor
        )
        return commitment, blinding_factor