# ecprim

Elliptic-curve cryptographic building blocks on the prime-order Ristretto255
group, written against the standard library only.

## What is in it

- `ecprim.ristretto`: the group. `Scalar` holds integers modulo the group
  order and supports `+`, `-`, `*`, negation and `invert()`. `Point` holds
  group elements and supports `+`, `-`, negation and multiplication by a
  `Scalar` or an `int`. `Point.generator()` and `Point.base_point2()` give the
  two fixed base points; `base_point2` is derived by hashing the encoded
  generator with SHA-256. Points encode to 32 bytes with `to_bytes()` and
  decode with `Point.from_bytes()`. A Ristretto element exposes no x
  coordinate, so `x_coord()` and `coords()` return `None` and
  `Point.from_coords()` raises `NotOnCurve`.
- `ecprim.hashing`: `Transcript` hashes bytes, integers, scalars and points in
  sequence and returns the digest as an integer (`result_bigint`) or as a
  scalar (`result_scalar`). `BigIntHmac` computes and checks HMACs keyed by
  integers. `int_to_bytes` and `int_from_bytes` convert between integers and
  big-endian bytes.
- `ecprim.commitments`: `HashCommitment` (H(m ‖ r)) and `PedersenCommitment`
  (m·G + r·H), each with a 256-bit random blinding factor.
- `ecprim.merkle_tree`: `MerkleTree` over points, whose `build_proof` returns a
  `MerkleProof` that checks membership against `root()`.
- `ecprim.polynomial`: `Polynomial` over the scalar field, with evaluation,
  addition, subtraction, scaling and Lagrange basis evaluation. The zero
  polynomial has degree `INFINITY`.
- `ecprim.feldman_vss`: `VerifiableSS`, Feldman verifiable secret sharing with
  resharing, share validation, reconstruction and conversion of shares to
  additive form with `map_share_to_new_params`.
- `ecprim.proofs`: non-interactive sigma proofs built with the Fiat–Shamir
  transform:
  - `sigma_dlog.DLogProof`: knowledge of a discrete log.
  - `sigma_ec_ddh.ECDDHProof`: equality of two discrete logs.
  - `homo_elgamal.HomoElGamalProof` and
    `homo_elgamal_dlog.HomoElGamalDlogProof`: correct homomorphic ElGamal
    encryption.
  - `pedersen_proof.PedersenProof` and `pedersen_blind.PedersenBlindingProof`:
    correct construction of a Pedersen commitment.
  - `ldei.LdeiProof`: low degree exponent interpolation, with `LdeiStatement`
    and `LdeiWitness`.
- `ecprim.twoparty`: two-party protocols:
  - `coin_flip`: coin tossing in a constant number of rounds.
  - `dh_key_exchange`: Diffie–Hellman key exchange.

Every function that takes a `hash_name` accepts any algorithm name that
`hashlib` knows whose digest is at least 32 bytes long, for example
`"sha256"`, `"sha512"` or `"sha3_256"`. The default is `"sha256"`.

## Examples

Proving knowledge of a discrete log:

```python
from ecprim.ristretto import Scalar
from ecprim.proofs.sigma_dlog import DLogProof

x = Scalar.random()
proof = DLogProof.prove(x, "sha256")
proof.verify()  # raises ProofError if the proof is invalid
```

Sharing a value three-of-five and reconstructing it:

```python
from ecprim.ristretto import Scalar
from ecprim.feldman_vss import VerifiableSS

value = Scalar.random()
vss, shares = VerifiableSS.share(2, 5, value, "sha256")
vss.validate_share(shares[0], 1)
assert vss.reconstruct([0, 1, 3], [shares[0], shares[1], shares[3]]) == value
```

A Diffie–Hellman exchange:

```python
from ecprim.twoparty.dh_key_exchange import (
    Party1FirstMessage, Party2FirstMessage, compute_pubkey,
)

msg1, keys1 = Party1FirstMessage.first()
msg2, keys2 = Party2FirstMessage.first()
assert compute_pubkey(keys1, msg2.public_share) == compute_pubkey(keys2, msg1.public_share)
```

## Errors

Failed verifications raise `ProofError` from `ecprim.errors`. Shares that do
not match their commitments raise `VerifyShareError`. Malformed encodings
raise `DeserializationError` and unusable coordinates raise `NotOnCurve`
(both are also `ValueError`s). A mismatched HMAC raises `MacError`. Invalid
LDEI statements raise subclasses of `ecprim.proofs.ldei.InvalidLdeiStatement`.

## What it does not do

- It is a library only; it has no command-line tool and does no networking.
  Callers carry protocol messages between parties themselves.
- The only group is Ristretto255; there are no other curves and no pairings.
- The Diffie–Hellman exchange in `ecprim.twoparty.dh_key_exchange` is the
  plain one: there is no variant in which a party commits to its share and
  proves knowledge of it, so a dishonest party can bias the joint key.

## Running the tests

```
pip install -e ".[test]"
pytest
```