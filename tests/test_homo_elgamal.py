import dataclasses

import pytest

from ecprim.errors import ProofError
from ecprim.proofs.homo_elgamal import (
    HomoElGamalProof,
    HomoElGamalStatement,
    HomoElGamalWitness,
)
from ecprim.ristretto import Point, Scalar

HASHES = ["sha256", "sha512", "sha3_256"]


def _general_statement(witness, wrong_e=False):
    G = Point.generator()
    H = G * Scalar.random()
    Y = G * Scalar.random()
    D = H * witness.x + Y * witness.r
    E = G * witness.r
    if wrong_e:
        E = E + G
    return HomoElGamalStatement(G=G, H=H, Y=Y, D=D, E=E)


@pytest.mark.parametrize("hash_name", HASHES)
def test_correct_general_homo_elgamal(hash_name):
    witness = HomoElGamalWitness(r=Scalar.random(), x=Scalar.random())
    statement = _general_statement(witness)
    proof = HomoElGamalProof.prove(witness, statement, hash_name)
    assert proof.verify(statement) is None
    assert proof.hash_name == hash_name


@pytest.mark.parametrize("hash_name", HASHES)
def test_correct_homo_elgamal(hash_name):
    witness = HomoElGamalWitness(r=Scalar.random(), x=Scalar.random())
    G = Point.generator()
    Y = G * Scalar.random()
    D = G * witness.x + Y * witness.r
    E = G * witness.r
    statement = HomoElGamalStatement(G=G, H=G, Y=Y, D=D, E=E)
    proof = HomoElGamalProof.prove(witness, statement, hash_name)
    assert proof.verify(statement) is None


@pytest.mark.parametrize("hash_name", HASHES)
def test_wrong_homo_elgamal(hash_name):
    witness = HomoElGamalWitness(r=Scalar.random(), x=Scalar.random())
    statement = _general_statement(witness, wrong_e=True)
    proof = HomoElGamalProof.prove(witness, statement, hash_name)
    with pytest.raises(ProofError):
        proof.verify(statement)


def test_tampered_response_is_rejected():
    witness = HomoElGamalWitness(r=Scalar.random(), x=Scalar.random())
    statement = _general_statement(witness)
    proof = HomoElGamalProof.prove(witness, statement)
    bad = dataclasses.replace(proof, z1=proof.z1 + 1)
    with pytest.raises(ProofError):
        bad.verify(statement)


def test_proof_does_not_transfer_to_other_statement():
    witness = HomoElGamalWitness(r=Scalar.random(), x=Scalar.random())
    statement = _general_statement(witness)
    proof = HomoElGamalProof.prove(witness, statement)
    other = dataclasses.replace(statement, D=statement.D + Point.generator())
    with pytest.raises(ProofError):
        proof.verify(other)


def test_witness_repr_hides_values():
    witness = HomoElGamalWitness(r=Scalar.from_int(5), x=Scalar.from_int(7))
    assert "0x5" not in repr(witness)
    assert "0x7" not in repr(witness)