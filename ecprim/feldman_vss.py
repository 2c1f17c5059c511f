"""Feldman verifiable secret sharing, with a discrete-log proof on the secret."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import reduce

from .errors import ProofError, VerifyShareError
from .hashing import DEFAULT_HASH
from .polynomial import Polynomial
from .proofs.sigma_dlog import DLogProof
from .ristretto import Point, Scalar


@dataclass(frozen=True)
class ShamirSecretSharing:
    """Sharing parameters: ``threshold`` (t) and ``share_count`` (n)."""

    threshold: int
    share_count: int


@dataclass(frozen=True, repr=False)
class SecretShares(Sequence):
    """Shares produced by :meth:`VerifiableSS.share`, indexable like a list.

    ``polynomial`` is the polynomial the shares were derived from.
    """

    shares: tuple[Scalar, ...]
    polynomial: Polynomial

    def __post_init__(self) -> None:
        object.__setattr__(self, "shares", tuple(self.shares))

    def __getitem__(self, index):
        return self.shares[index]

    def __len__(self) -> int:
        return len(self.shares)

    def __repr__(self) -> str:
        return "SecretShares{ ... }"


def _commit(polynomial: Polynomial) -> tuple[Point, ...]:
    g = Point.generator()
    return tuple(g * coef for coef in polynomial.coefficients)


@dataclass(frozen=True)
class VerifiableSS:
    """Public part of a sharing: parameters, coefficient commitments and a dlog proof."""

    parameters: ShamirSecretSharing
    commitments: tuple[Point, ...]
    proof: DLogProof

    def __post_init__(self) -> None:
        object.__setattr__(self, "commitments", tuple(self.commitments))

    def reconstruct_limit(self) -> int:
        """Number of shares needed to reconstruct the secret."""
        return self.parameters.threshold + 1

    @classmethod
    def share(
        cls, t: int, n: int, secret: Scalar, hash_name: str = DEFAULT_HASH
    ) -> tuple[VerifiableSS, SecretShares]:
        """Split ``secret`` into ``n`` shares at points 1..n, any ``t+1`` of which recover it."""
        return cls.share_at_indices(t, n, secret, range(1, n + 1), hash_name)

    @classmethod
    def share_at_indices(
        cls,
        t: int,
        n: int,
        secret: Scalar,
        indices: Iterable[int],
        hash_name: str = DEFAULT_HASH,
    ) -> tuple[VerifiableSS, SecretShares]:
        """Like :meth:`share`, but evaluate the polynomial at the given non-zero indices."""
        if not t < n:
            raise ValueError(f"threshold {t} must be smaller than share count {n}")
        indices = list(indices)
        if len(indices) != n:
            raise ValueError(f"expected {n} indices, got {len(indices)}")
        if any(i == 0 for i in indices):
            raise ValueError("indices must be non-zero")

        polynomial = Polynomial.sample_exact_with_fixed_const_term(t, secret)
        shares = tuple(polynomial.evaluate_many(indices))
        proof = DLogProof.prove(secret, hash_name)
        vss = cls(ShamirSecretSharing(t, n), _commit(polynomial), proof)
        return vss, SecretShares(shares, polynomial)

    def reshare(self) -> tuple[VerifiableSS, list[Scalar]]:
        """New commitments for the same secret and zero-sum shares to add to the old ones."""
        t = self.parameters.threshold
        n = self.parameters.share_count
        one = Scalar.from_int(1)
        poly = Polynomial.sample_exact_with_fixed_const_term(t, one)
        zero_shares = [y - one for y in poly.evaluate_many(range(1, n + 1))]
        g = Point.generator()
        new_commitments = [self.commitments[0]] + [
            g * coef + commitment
            for coef, commitment in zip(poly.coefficients[1:], self.commitments[1:])
        ]
        return VerifiableSS(self.parameters, new_commitments, self.proof), zero_shares

    def reconstruct(self, indices: Sequence[int], shares: Sequence[Scalar]) -> Scalar:
        """Recover the secret from shares of parties with zero-based ``indices``."""
        if len(shares) != len(indices):
            raise ValueError("number of shares and indices differ")
        if len(shares) < self.reconstruct_limit():
            raise ValueError(
                f"at least {self.reconstruct_limit()} shares are needed, got {len(shares)}"
            )
        points = [Scalar.from_int(i + 1) for i in indices]
        return self.lagrange_interpolation_at_zero(points, shares)

    @staticmethod
    def lagrange_interpolation_at_zero(
        points: Sequence[Scalar], values: Sequence[Scalar]
    ) -> Scalar:
        """Value at zero of the polynomial through ``(points[i], values[i])``."""
        if len(points) != len(values):
            raise ValueError("points and values differ in length")
        if not values:
            raise ValueError("at least one point is required")
        one = Scalar.from_int(1)
        total = Scalar.zero()
        for i, (xi, yi) in enumerate(zip(points, values)):
            others = [xj for j, xj in enumerate(points) if j != i]
            num = reduce(lambda acc, xj: acc * xj, others, one)
            denum = reduce(lambda acc, xj: acc * (xj - xi), others, one)
            try:
                inverse = denum.invert()
            except ZeroDivisionError:
                raise ValueError("points are not pairwise distinct") from None
            total = total + num * inverse * yi
        return total

    def validate_share(self, secret_share: Scalar, index: int) -> None:
        """Raise VerifyShareError unless ``secret_share`` is the share at ``index``."""
        if self.commitments[0] != self.proof.pk:
            raise VerifyShareError()
        try:
            self.proof.verify()
        except ProofError:
            raise VerifyShareError() from None
        self.validate_share_public(Point.generator() * secret_share, index)

    def validate_share_public(self, ss_point: Point, index: int) -> None:
        """Raise VerifyShareError unless ``ss_point`` equals the commitment at ``index``."""
        if ss_point != self.get_point_commitment(index):
            raise VerifyShareError()

    def get_point_commitment(self, index: int) -> Point:
        """``f(index) * G`` computed from the coefficient commitments."""
        if not self.commitments:
            raise ValueError("no commitments")
        index_fe = Scalar.from_int(index)
        head, *tail = reversed(self.commitments)
        return reduce(lambda acc, c: c + acc * index_fe, tail, head)

    @staticmethod
    def map_share_to_new_params(
        params: ShamirSecretSharing, index: int, s: Sequence[int]
    ) -> Scalar:
        """Lagrange coefficient turning party ``index``'s share into an additive share over ``s``."""
        try:
            j = list(s).index(index)
        except ValueError:
            raise ValueError("`s` doesn't include `index`") from None
        xs = [Scalar.from_int(x + 1) for x in s]
        return Polynomial.lagrange_basis(Scalar.zero(), j, xs)