"""Hashing helpers over big integers, group points and scalars."""

from __future__ import annotations

import hashlib
import hmac
from collections.abc import Iterable

from .errors import DeserializationError, MacError
from .ristretto import SCALAR_SIZE, Point, Scalar

DEFAULT_HASH = "sha256"


def int_to_bytes(n: int) -> bytes:
    """Big-endian magnitude of ``n`` in the fewest bytes; zero becomes one zero byte."""
    n = abs(n)
    return n.to_bytes(max(1, (n.bit_length() + 7) // 8), "big")


def int_from_bytes(data: bytes) -> int:
    """Read bytes as an unsigned big-endian integer."""
    return int.from_bytes(data, "big")


class Transcript:
    """A running hash that can absorb integers, points and scalars."""

    def __init__(self, hash_name: str = DEFAULT_HASH) -> None:
        self.hash_name = hash_name
        self._hasher = hashlib.new(hash_name)

    def chain_bytes(self, data: bytes) -> Transcript:
        self._hasher.update(data)
        return self

    def chain_bigint(self, n: int) -> Transcript:
        return self.chain_bytes(int_to_bytes(n))

    def chain_point(self, point: Point) -> Transcript:
        return self.chain_bytes(point.to_bytes(False))

    def chain_points(self, points: Iterable[Point]) -> Transcript:
        for point in points:
            self.chain_point(point)
        return self

    def chain_scalar(self, scalar: Scalar) -> Transcript:
        return self.chain_bigint(scalar.to_int())

    def chain_scalars(self, scalars: Iterable[Scalar]) -> Transcript:
        for scalar in scalars:
            self.chain_scalar(scalar)
        return self

    def result_bigint(self) -> int:
        return int_from_bytes(self._hasher.copy().digest())

    def result_scalar(self) -> Scalar:
        """Derive a scalar by hashing with an appended counter until one is canonical."""
        size = self._hasher.digest_size
        if size < SCALAR_SIZE:
            raise ValueError(
                f"Output size of the hash({size}) is smaller than "
                f"the scalar length({SCALAR_SIZE})"
            )
        for counter in range(2**32):
            attempt = self._hasher.copy()
            attempt.update(counter.to_bytes(4, "big"))
            try:
                return Scalar.from_bytes(attempt.digest()[:SCALAR_SIZE])
            except DeserializationError:
                continue
        raise RuntimeError("no canonical scalar found for this transcript")

    @classmethod
    def digest_bigint(cls, data: bytes, hash_name: str = DEFAULT_HASH) -> int:
        return cls(hash_name).chain_bytes(data).result_bigint()


class BigIntHmac:
    """HMAC keyed and fed with big integers."""

    def __init__(self, key: int, hash_name: str = DEFAULT_HASH) -> None:
        self._mac = hmac.new(int_to_bytes(key), digestmod=hash_name)

    def chain_bigint(self, n: int) -> BigIntHmac:
        self._mac.update(int_to_bytes(n))
        return self

    def result_bigint(self) -> int:
        return int_from_bytes(self._mac.copy().digest())

    def verify_bigint(self, code: int) -> None:
        """Raise MacError unless ``code`` is the MAC of the absorbed data."""
        size = self._mac.digest_size
        data = int_to_bytes(code)
        if len(data) > size:
            raise MacError()
        expected = self._mac.copy().digest()
        if not hmac.compare_digest(data.rjust(size, b"\x00"), expected):
            raise MacError()