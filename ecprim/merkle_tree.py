"""Complete binary Merkle tree over group points."""

from __future__ import annotations

import hashlib
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass

from .errors import ProofError
from .hashing import DEFAULT_HASH
from .ristretto import Point


def _leaf_hash(point: Point, hash_name: str) -> bytes:
    return hashlib.new(hash_name, point.to_bytes(False)).digest()


def _merge(left: bytes, right: bytes, hash_name: str) -> bytes:
    hasher = hashlib.new(hash_name)
    hasher.update(left)
    hasher.update(right)
    return hasher.digest()


@dataclass(frozen=True)
class MerkleProof:
    """Inclusion proof: tree node index of the leaf, sibling hashes and the point."""

    index: int
    lemmas: tuple[bytes, ...]
    point: Point
    hash_name: str = DEFAULT_HASH

    def verify(self, root: bytes) -> None:
        """Raise ProofError unless the proof leads from the point to ``root``."""
        if self.index < 0:
            raise ProofError()
        node = self.index
        node_hash = _leaf_hash(self.point, self.hash_name)
        remaining = deque(self.lemmas)
        while node > 0:
            if not remaining:
                raise ProofError()
            sibling = remaining.popleft()
            if node % 2:
                node_hash = _merge(node_hash, sibling, self.hash_name)
            else:
                node_hash = _merge(sibling, node_hash, self.hash_name)
            node = (node - 1) // 2
        if remaining or node_hash != root:
            raise ProofError()


class MerkleTree:
    """Tree stored as an array: node ``i`` has children ``2i+1`` and ``2i+2``."""

    def __init__(self, leaves: Iterable[Point], hash_name: str = DEFAULT_HASH) -> None:
        self.hash_name = hash_name
        self.leaves = list(leaves)
        hashes = [_leaf_hash(leaf, hash_name) for leaf in self.leaves]
        if not hashes:
            self._nodes: list[bytes] = []
            return
        nodes = [b""] * (len(hashes) - 1) + hashes
        for i in reversed(range(len(hashes) - 1)):
            nodes[i] = _merge(nodes[2 * i + 1], nodes[2 * i + 2], hash_name)
        self._nodes = nodes

    def root(self) -> bytes:
        if not self._nodes:
            return bytes(hashlib.new(self.hash_name).digest_size)
        return self._nodes[0]

    def build_proof(self, point: Point) -> MerkleProof | None:
        """Proof for the first leaf equal to ``point``, or None if it is absent."""
        position = next(
            (i for i, leaf in enumerate(self.leaves) if leaf == point), None
        )
        if position is None:
            return None
        index = position + len(self.leaves) - 1
        lemmas = []
        node = index
        while node > 0:
            sibling = node + 1 if node % 2 else node - 1
            lemmas.append(self._nodes[sibling])
            node = (node - 1) // 2
        return MerkleProof(index, tuple(lemmas), point, self.hash_name)