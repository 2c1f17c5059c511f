"""The Ristretto255 prime-order group: scalars modulo the group order and points."""

from __future__ import annotations

import hashlib
import secrets

from .errors import DeserializationError, NotOnCurve

_P = 2**255 - 19
_L = 2**252 + 27742317777372353535851937790883648493
_D = (-121665 * pow(121666, -1, _P)) % _P
_D2 = 2 * _D % _P
_SQRT_M1 = pow(2, (_P - 1) // 4, _P)

SCALAR_SIZE = 32
POINT_SIZE = 32


def _is_negative(x: int) -> bool:
    return bool(x % _P & 1)


def _abs(x: int) -> int:
    x %= _P
    return (-x) % _P if _is_negative(x) else x


def _sqrt_ratio_m1(u: int, v: int) -> tuple[bool, int]:
    """Return (was_square, non-negative sqrt(u/v) or sqrt(i*u/v))."""
    u %= _P
    v %= _P
    v3 = v * v % _P * v % _P
    v7 = v3 * v3 % _P * v % _P
    r = u * v3 % _P * pow(u * v7 % _P, (_P - 5) // 8, _P) % _P
    check = v * r % _P * r % _P
    correct = check == u
    flipped = check == (-u) % _P
    flipped_i = check == (-u * _SQRT_M1) % _P
    if flipped or flipped_i:
        r = r * _SQRT_M1 % _P
    return correct or flipped, _abs(r)


_INVSQRT_A_MINUS_D = _sqrt_ratio_m1(1, (-1 - _D) % _P)[1]


class Scalar:
    """An element of the scalar field of Ristretto255 (integers modulo the group order)."""

    __slots__ = ("_value",)

    def __init__(self, value: int = 0) -> None:
        self._value = value % _L

    @classmethod
    def random(cls) -> Scalar:
        return cls(secrets.randbelow(_L))

    @classmethod
    def zero(cls) -> Scalar:
        return cls(0)

    @classmethod
    def from_int(cls, n: int) -> Scalar:
        """Reduce an integer modulo the group order."""
        return cls(n)

    @classmethod
    def from_bytes(cls, data: bytes) -> Scalar:
        """Decode 32 little-endian bytes holding a canonical scalar."""
        if len(data) != SCALAR_SIZE:
            raise DeserializationError("scalar must be 32 bytes")
        value = int.from_bytes(data, "little")
        if value >= _L:
            raise DeserializationError("scalar is not canonical")
        return cls(value)

    @classmethod
    def group_order(cls) -> int:
        return _L

    def to_int(self) -> int:
        return self._value

    def to_bytes(self) -> bytes:
        return self._value.to_bytes(SCALAR_SIZE, "little")

    def is_zero(self) -> bool:
        return self._value == 0

    def invert(self) -> Scalar:
        """Multiplicative inverse; raises ZeroDivisionError for zero."""
        if self._value == 0:
            raise ZeroDivisionError("zero scalar has no inverse")
        return Scalar(pow(self._value, -1, _L))

    @staticmethod
    def _coerce(other: object) -> int | None:
        if isinstance(other, Scalar):
            return other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def __add__(self, other: object) -> Scalar:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return Scalar(self._value + value)

    __radd__ = __add__

    def __sub__(self, other: object) -> Scalar:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return Scalar(self._value - value)

    def __rsub__(self, other: object) -> Scalar:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return Scalar(value - self._value)

    def __mul__(self, other: object) -> Scalar:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return Scalar(self._value * value)

    __rmul__ = __mul__

    def __neg__(self) -> Scalar:
        return Scalar(-self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Scalar):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("scalar", self._value))

    def __repr__(self) -> str:
        return f"Scalar({self._value:#x})"


class Point:
    """A Ristretto255 group element held in extended Edwards coordinates."""

    __slots__ = ("_x", "_y", "_z", "_t")

    def __init__(self, x: int, y: int, z: int, t: int) -> None:
        self._x = x % _P
        self._y = y % _P
        self._z = z % _P
        self._t = t % _P

    @classmethod
    def identity(cls) -> Point:
        return cls(0, 1, 1, 0)

    @classmethod
    def generator(cls) -> Point:
        return _GENERATOR

    @classmethod
    def base_point2(cls) -> Point:
        """Second generator derived by hashing the encoded generator with SHA-256."""
        return _BASE_POINT2

    @classmethod
    def from_bytes(cls, data: bytes) -> Point:
        """Decode up to 32 bytes, left-padded with zeros, as a Ristretto encoding."""
        if not 0 < len(data) <= POINT_SIZE:
            raise DeserializationError("point encoding must be 1 to 32 bytes")
        buffer = bytes(POINT_SIZE - len(data)) + bytes(data)
        s = int.from_bytes(buffer, "little")
        if s >= _P or _is_negative(s):
            raise DeserializationError("non-canonical point encoding")
        ss = s * s % _P
        u1 = (1 - ss) % _P
        u2 = (1 + ss) % _P
        u2_sqr = u2 * u2 % _P
        v = (-(_D * u1 % _P * u1) - u2_sqr) % _P
        was_square, invsqrt = _sqrt_ratio_m1(1, v * u2_sqr)
        den_x = invsqrt * u2 % _P
        den_y = invsqrt * den_x % _P * v % _P
        x = _abs(2 * s * den_x)
        y = u1 * den_y % _P
        t = x * y % _P
        if not was_square or _is_negative(t) or y == 0:
            raise DeserializationError("bytes do not encode a group element")
        return cls(x, y, 1, t)

    @classmethod
    def from_coords(cls, x: int, y: int) -> Point:
        """Build a point from coordinates.

        The group exposes no x coordinate, so no pair of coordinates can be
        matched and NotOnCurve is raised.
        """
        try:
            point = cls.from_bytes(y.to_bytes(POINT_SIZE, "little"))
        except (OverflowError, DeserializationError) as exc:
            raise NotOnCurve("y is not the encoding of a group element") from exc
        if point.coords() != (x, y):
            raise NotOnCurve("the x coordinate of a ristretto point cannot be matched")
        return point

    def to_bytes(self, compressed: bool = True) -> bytes:
        """Canonical 32-byte encoding; compressed and uncompressed forms coincide."""
        x0, y0, z0, t0 = self._x, self._y, self._z, self._t
        u1 = (z0 + y0) * (z0 - y0) % _P
        u2 = x0 * y0 % _P
        _, invsqrt = _sqrt_ratio_m1(1, u1 * u2 % _P * u2)
        den1 = invsqrt * u1 % _P
        den2 = invsqrt * u2 % _P
        z_inv = den1 * den2 % _P * t0 % _P
        if _is_negative(t0 * z_inv):
            x = y0 * _SQRT_M1 % _P
            y = x0 * _SQRT_M1 % _P
            den_inv = den1 * _INVSQRT_A_MINUS_D % _P
        else:
            x, y, den_inv = x0, y0, den2
        if _is_negative(x * z_inv):
            y = (-y) % _P
        s = _abs(den_inv * (z0 - y))
        return s.to_bytes(POINT_SIZE, "little")

    def is_zero(self) -> bool:
        return self._x == 0 or self._y == 0

    def _exposed_coordinates(self) -> dict[str, int]:
        """Coordinates the encoding reveals: only the encoded value, exposed as y."""
        return {"y": int.from_bytes(self.to_bytes(), "little")}

    def x_coord(self) -> int | None:
        """Always None: a Ristretto element has no well-defined x coordinate."""
        return self._exposed_coordinates().get("x")

    def y_coord(self) -> int | None:
        """The encoding read as a little-endian integer."""
        return self._exposed_coordinates()["y"]

    def coords(self) -> tuple[int, int] | None:
        """Both coordinates, or None since x is not exposed."""
        exposed = self._exposed_coordinates()
        if "x" not in exposed:
            return None
        return exposed["x"], exposed["y"]

    def check_point_order_equals_group_order(self) -> bool:
        return not self.is_zero()

    def _double(self) -> Point:
        a = self._x * self._x % _P
        b = self._y * self._y % _P
        c = 2 * self._z * self._z % _P
        d = -a
        e = ((self._x + self._y) ** 2 - a - b) % _P
        g = (d + b) % _P
        f = (g - c) % _P
        h = (d - b) % _P
        return Point(e * f, g * h, f * g, e * h)

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        a = (self._y - self._x) * (other._y - other._x) % _P
        b = (self._y + self._x) * (other._y + other._x) % _P
        c = self._t * _D2 % _P * other._t % _P
        d = 2 * self._z * other._z % _P
        e, f, g, h = b - a, d - c, d + c, b + a
        return Point(e * f, g * h, f * g, e * h)

    def __neg__(self) -> Point:
        return Point(-self._x, self._y, self._z, -self._t)

    def __sub__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return self + (-other)

    def __mul__(self, scalar: object) -> Point:
        if isinstance(scalar, Scalar):
            k = scalar.to_int()
        elif isinstance(scalar, int) and not isinstance(scalar, bool):
            k = scalar % _L
        else:
            return NotImplemented
        result = Point.identity()
        addend = self
        while k:
            if k & 1:
                result = result + addend
            addend = addend._double()
            k >>= 1
        return result

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (
            self._x * other._y % _P == self._y * other._x % _P
            or self._y * other._y % _P == self._x * other._x % _P
        )

    def __hash__(self) -> int:
        return hash(("point", self.to_bytes()))

    def __repr__(self) -> str:
        return f"Point({self.to_bytes().hex()})"


def _edwards_basepoint() -> Point:
    y = 4 * pow(5, -1, _P) % _P
    yy = y * y % _P
    _, x = _sqrt_ratio_m1(yy - 1, _D * yy + 1)
    return Point(x, y, 1, x * y)


_GENERATOR = _edwards_basepoint()
_BASE_POINT2 = Point.from_bytes(hashlib.sha256(_GENERATOR.to_bytes()).digest())