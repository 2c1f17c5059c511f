"""Constant-round two-party coin tossing of a random scalar.

Party 1 commits to a seed with a Pedersen commitment and proves it well formed;
party 2 replies with its own seed; party 1 opens its seed with a blinding proof.
Both sides output the XOR of the two seeds, reduced to a scalar.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..errors import ProofError
from ..hashing import DEFAULT_HASH
from ..proofs.pedersen_blind import PedersenBlindingProof
from ..proofs.pedersen_proof import PedersenProof
from ..ristretto import Point, Scalar


def _xor(a: Scalar, b: Scalar) -> Scalar:
    return Scalar.from_int(a.to_int() ^ b.to_int())


@dataclass(frozen=True)
class Party1FirstMessage:
    proof: PedersenProof

    @classmethod
    def commit(
        cls, hash_name: str = DEFAULT_HASH
    ) -> tuple[Party1FirstMessage, Scalar, Scalar]:
        """Return the message together with party 1's seed and blinding factor."""
        seed = Scalar.random()
        blinding = Scalar.random()
        proof = PedersenProof.prove(seed, blinding, hash_name)
        return cls(proof), seed, blinding


@dataclass(frozen=True)
class Party2FirstMessage:
    seed: Scalar = field(repr=False)

    @classmethod
    def share(cls, proof: PedersenProof) -> Party2FirstMessage:
        """Check party 1's commitment proof and answer with a fresh seed."""
        proof.verify()
        return cls(Scalar.random())


@dataclass(frozen=True)
class Party1SecondMessage:
    proof: PedersenBlindingProof
    seed: Scalar

    @classmethod
    def reveal(
        cls,
        party2seed: Scalar,
        party1seed: Scalar,
        party1blinding: Scalar,
        hash_name: str = DEFAULT_HASH,
    ) -> tuple[Party1SecondMessage, Scalar]:
        """Open party 1's seed and return the message with the coin-flip result."""
        proof = PedersenBlindingProof.prove(party1seed, party1blinding, hash_name)
        return cls(proof, party1seed), _xor(party1seed, party2seed)


def finalize(
    proof: PedersenBlindingProof, party2seed: Scalar, party1comm: Point
) -> Scalar:
    """Party 2's result; raise ProofError if the opening is invalid or mismatched."""
    proof.verify()
    if proof.com != party1comm:
        raise ProofError("revealed commitment differs from the first message")
    return _xor(proof.m, party2seed)