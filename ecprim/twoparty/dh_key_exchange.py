"""Elliptic-curve Diffie-Hellman key exchange.

Party 1 picks a secret ``x`` and publishes ``x*G``; party 2 picks ``y`` and
publishes ``y*G``.  Both then compute the shared point ``x*y*G``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..ristretto import Point, Scalar


@dataclass(frozen=True)
class EcKeyPair:
    """A party's public share and the secret scalar behind it."""

    public_share: Point
    secret_share: Scalar = field(repr=False)

    @classmethod
    def _from_secret(cls, secret_share: Scalar) -> EcKeyPair:
        return cls(Point.generator() * secret_share, secret_share)


@dataclass(frozen=True)
class Party1FirstMessage:
    public_share: Point

    @classmethod
    def first(cls) -> tuple[Party1FirstMessage, EcKeyPair]:
        """Sample a fresh secret share and return the message with the key pair."""
        return cls.first_with_fixed_secret_share(Scalar.random())

    @classmethod
    def first_with_fixed_secret_share(
        cls, secret_share: Scalar
    ) -> tuple[Party1FirstMessage, EcKeyPair]:
        key_pair = EcKeyPair._from_secret(secret_share)
        return cls(key_pair.public_share), key_pair


@dataclass(frozen=True)
class Party2FirstMessage:
    public_share: Point

    @classmethod
    def first(cls) -> tuple[Party2FirstMessage, EcKeyPair]:
        """Sample a fresh secret share and return the message with the key pair."""
        return cls.first_with_fixed_secret_share(Scalar.random())

    @classmethod
    def first_with_fixed_secret_share(
        cls, secret_share: Scalar
    ) -> tuple[Party2FirstMessage, EcKeyPair]:
        key_pair = EcKeyPair._from_secret(secret_share)
        return cls(key_pair.public_share), key_pair


def compute_pubkey(local_share: EcKeyPair, other_public_share: Point) -> Point:
    """The joint point: the other party's public share times our secret share."""
    return other_public_share * local_share.secret_share