import hashlib
import secrets

import pytest

from ecprim.commitments import SECURITY_BITS, HashCommitment, PedersenCommitment
from ecprim.hashing import int_to_bytes
from ecprim.ristretto import Point, Scalar

HASHES = ["sha256", "sha512", "sha3_256"]


@pytest.mark.parametrize("hash_name", HASHES)
def test_bit_length_create_commitment(hash_name):
    scheme = HashCommitment(hash_name)
    hex_len = hashlib.new(hash_name).digest_size * 8
    samples = 2000
    commit_hits = 0
    blind_hits = 0
    for _ in range(samples):
        message = secrets.randbits(hex_len)
        commitment, blind_factor = scheme.create_commitment(message)
        commit_hits += commitment.bit_length() == hex_len
        blind_hits += blind_factor.bit_length() == SECURITY_BITS
    assert commit_hits / samples > 0.3
    assert blind_hits / samples > 0.3


@pytest.mark.parametrize("hash_name", HASHES)
def test_bit_length_create_commitment_with_user_defined_randomness(hash_name):
    scheme = HashCommitment(hash_name)
    size = hashlib.new(hash_name).digest_size
    message = secrets.randbits(size * 8)
    _, blind_factor = scheme.create_commitment(message)
    commitment2 = scheme.create_commitment_with_user_defined_randomness(
        message, blind_factor
    )
    assert len(int_to_bytes(commitment2)) <= size


@pytest.mark.parametrize("hash_name", HASHES)
def test_random_num_generation_create_commitment_with_user_defined_randomness(
    hash_name,
):
    scheme = HashCommitment(hash_name)
    message = secrets.randbits(SECURITY_BITS)
    commitment, blind_factor = scheme.create_commitment(message)
    commitment2 = scheme.create_commitment_with_user_defined_randomness(
        message, blind_factor
    )
    assert commitment == commitment2


@pytest.mark.parametrize("hash_name", HASHES)
def test_hashing_create_commitment_with_user_defined_randomness(hash_name):
    commitment = HashCommitment(
        hash_name
    ).create_commitment_with_user_defined_randomness(1, 0)
    expected = int.from_bytes(hashlib.new(hash_name, b"\x01\x00").digest(), "big")
    assert commitment == expected


def test_hash_commitment_defaults_to_sha256():
    commitment = HashCommitment().create_commitment_with_user_defined_randomness(1, 0)
    assert commitment == int.from_bytes(hashlib.sha256(b"\x01\x00").digest(), "big")


def test_blinding_factor_changes_commitment():
    scheme = HashCommitment()
    assert scheme.create_commitment_with_user_defined_randomness(
        5, 1
    ) != scheme.create_commitment_with_user_defined_randomness(5, 2)


def test_pedersen_message_one_is_generator():
    commitment = PedersenCommitment().create_commitment_with_user_defined_randomness(
        1, 0
    )
    assert commitment == Point.generator()


def test_pedersen_blinding_one_is_base_point2():
    commitment = PedersenCommitment().create_commitment_with_user_defined_randomness(
        0, 1
    )
    assert commitment == Point.base_point2()


def test_pedersen_is_additively_homomorphic():
    scheme = PedersenCommitment()
    m1, r1, m2, r2 = (secrets.randbits(200) for _ in range(4))
    c1 = scheme.create_commitment_with_user_defined_randomness(m1, r1)
    c2 = scheme.create_commitment_with_user_defined_randomness(m2, r2)
    combined = scheme.create_commitment_with_user_defined_randomness(m1 + m2, r1 + r2)
    assert c1 + c2 == combined


def test_pedersen_reduces_message_modulo_group_order():
    scheme = PedersenCommitment()
    order = Scalar.group_order()
    assert scheme.create_commitment_with_user_defined_randomness(
        7, 3
    ) == scheme.create_commitment_with_user_defined_randomness(7 + order, 3)


def test_pedersen_create_commitment_matches_recomputation():
    scheme = PedersenCommitment()
    commitment, blinding = scheme.create_commitment(42)
    assert 0 <= blinding < 2**SECURITY_BITS
    assert commitment == scheme.create_commitment_with_user_defined_randomness(
        42, blinding
    )