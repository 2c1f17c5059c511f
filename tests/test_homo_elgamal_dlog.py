import dataclasses

import pytest

from ecprim.errors import ProofError
from ecprim.proofs.homo_elgamal_dlog import (
    HomoElGamalDlogProof,
    HomoElGamalDlogStatement,
    HomoElGamalDlogWitness,
)
from ecprim.ristretto import Point, Scalar

HASHES = ["sha256", "sha512", "sha3_256"]


def _statement(witness):
    G = Point.generator()
    Y = G * Scalar.random()
    D = G * witness.x + Y * witness.r
    E = G * witness.r
    Q = G * witness.x
    return HomoElGamalDlogStatement(G=G, Y=Y, Q=Q, D=D, E=E)


@pytest.mark.parametrize("hash_name", HASHES)
def test_correct_homo_elgamal(hash_name):
    witness = HomoElGamalDlogWitness(r=Scalar.random(), x=Scalar.random())
    statement = _statement(witness)
    proof = HomoElGamalDlogProof.prove(witness, statement, hash_name)
    assert proof.verify(statement) is None
    assert proof.hash_name == hash_name


@pytest.mark.parametrize("hash_name", HASHES)
def test_wrong_homo_elgamal(hash_name):
    witness = HomoElGamalDlogWitness(r=Scalar.random(), x=Scalar.random())
    G = Point.generator()
    Y = G * Scalar.random()
    D = G * witness.x + Y * witness.r
    E = G * witness.r + G
    Q = G * witness.x + G
    statement = HomoElGamalDlogStatement(G=G, Y=Y, Q=Q, D=D, E=E)
    proof = HomoElGamalDlogProof.prove(witness, statement, hash_name)
    with pytest.raises(ProofError):
        proof.verify(statement)


def test_wrong_q_only_is_rejected():
    witness = HomoElGamalDlogWitness(r=Scalar.random(), x=Scalar.random())
    statement = _statement(witness)
    statement = dataclasses.replace(statement, Q=statement.Q + statement.G)
    proof = HomoElGamalDlogProof.prove(witness, statement)
    with pytest.raises(ProofError):
        proof.verify(statement)


def test_tampered_commitment_is_rejected():
    witness = HomoElGamalDlogWitness(r=Scalar.random(), x=Scalar.random())
    statement = _statement(witness)
    proof = HomoElGamalDlogProof.prove(witness, statement)
    bad = dataclasses.replace(proof, A2=proof.A2 + Point.generator())
    with pytest.raises(ProofError):
        bad.verify(statement)


def test_tampered_response_is_rejected():
    witness = HomoElGamalDlogWitness(r=Scalar.random(), x=Scalar.random())
    statement = _statement(witness)
    proof = HomoElGamalDlogProof.prove(witness, statement)
    bad = dataclasses.replace(proof, z2=proof.z2 - 1)
    with pytest.raises(ProofError):
        bad.verify(statement)