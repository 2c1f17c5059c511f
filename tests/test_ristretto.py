import pytest

from ecprim.errors import DeserializationError, NotOnCurve
from ecprim.ristretto import Point, Scalar

ORDER = 2**252 + 27742317777372353535851937790883648493


@pytest.mark.parametrize(
    "multiple, encoding",
    [
        (1, "e2f2ae0a6abc4e71a884a961c500515f58e30b6aa582dd8db6a65945e08d2d76"),
        (2, "6a493210f7499cd17fecb510ae0cea23a110e8d5b901f8acadd3095c73a3b919"),
    ],
)
def test_generator_multiples_encoding(multiple, encoding):
    assert (Point.generator() * multiple).to_bytes().hex() == encoding


def test_scalar_reduction():
    assert Scalar.group_order() == ORDER
    assert Scalar.from_int(ORDER).is_zero()
    assert Scalar.from_int(ORDER - 1) + 1 == Scalar.zero()
    assert Scalar.from_int(-1).to_int() == ORDER - 1


def test_scalar_bytes_round_trip():
    s = Scalar.random()
    assert Scalar.from_bytes(s.to_bytes()) == s
    assert len(s.to_bytes()) == 32


@pytest.mark.parametrize("data", [ORDER.to_bytes(32, "little"), b"\x01" * 31])
def test_scalar_from_bytes_rejects(data):
    with pytest.raises(DeserializationError):
        Scalar.from_bytes(data)


def test_scalar_invert():
    s = Scalar.random() + 1
    assert s * s.invert() == Scalar.from_int(1)
    with pytest.raises(ZeroDivisionError):
        Scalar.zero().invert()


def test_scalar_arithmetic_laws():
    a, b = Scalar.random(), Scalar.random()
    assert (a + b) - b == a
    assert a * b == b * a
    assert a + (-a) == Scalar.zero()


def test_point_bytes_round_trip():
    p = Point.generator() * Scalar.random()
    assert Point.from_bytes(p.to_bytes()) == p
    assert p.to_bytes(False) == p.to_bytes(True)


def test_point_from_bytes_left_pads():
    assert Point.from_bytes(b"\x00").is_zero()


@pytest.mark.parametrize("data", [b"", bytes(33), b"\x01" + bytes(31), b"\xff" * 32])
def test_point_from_bytes_errors(data):
    with pytest.raises(DeserializationError):
        Point.from_bytes(data)


def test_identity():
    ident = Point.identity()
    assert ident.is_zero()
    assert not ident.check_point_order_equals_group_order()
    assert Point.generator() + ident == Point.generator()


def test_coordinates():
    g = Point.generator()
    assert g.x_coord() is None
    assert g.coords() is None
    assert g.y_coord() == int.from_bytes(g.to_bytes(), "little")


@pytest.mark.parametrize(
    "x, y",
    [(1, 2), (0, Point.generator().y_coord()), (5, -1), (0, 2**300)],
)
def test_from_coords_always_fails(x, y):
    with pytest.raises(NotOnCurve):
        Point.from_coords(x, y)


def test_base_point2():
    h = Point.base_point2()
    assert h != Point.generator()
    assert h.check_point_order_equals_group_order()
    assert Point.from_bytes(h.to_bytes()) == h


def test_scalar_multiplication_distributes():
    g = Point.generator()
    a, b = Scalar.random(), Scalar.random()
    assert g * (a + b) == g * a + g * b
    assert (g * a) * b == g * (a * b)
    assert a * g == g * a


def test_point_negation_and_subtraction():
    p = Point.generator() * Scalar.random()
    assert (p - p).is_zero()
    assert (-p + p).is_zero()
    assert p * ORDER == Point.identity()


def test_equal_points_hash_equally():
    g = Point.generator()
    assert hash(g * 2) == hash(g + g)
    assert {g * 2, g + g} == {g + g}