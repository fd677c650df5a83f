import math

import pytest

from e2d.geometry import Matrix32, Point, Rect, Size


def close(a: Point, b: Point) -> bool:
    return math.isclose(a.x, b.x, abs_tol=1e-9) and math.isclose(a.y, b.y, abs_tol=1e-9)


def test_point_add_sub_round_trip():
    p, q = Point(1.5, -2.0), Point(3.0, 4.25)
    assert (p + q) - q == p


def test_point_mul_div_neg():
    p = Point(2.0, 6.0)
    assert p * 2 == p + p
    assert (p * 4) / 4 == p
    assert -p + p == Point()


def test_point_size_conversion_round_trip():
    p = Point(7.0, 9.0)
    assert p.to_size().to_point() == p
    assert p.to_size() == Size(7.0, 9.0)


def test_distance_symmetric_and_known():
    p, q = Point(0, 0), Point(3, 4)
    assert Point.distance(p, q) == Point.distance(q, p)
    assert Point.distance(p, q) == 5.0
    assert Point.distance(q, q) == 0.0


def test_size_arithmetic():
    s, t = Size(4.0, 5.0), Size(1.0, 2.0)
    assert (s + t) - t == s
    assert s * 3 / 3 == s
    assert -s + s == Size()


def test_rect_corners_and_contains():
    r = Rect.from_values(1, 2, 10, 20)
    for corner in (r.left_top(), r.right_top(), r.left_bottom(), r.right_bottom()):
        assert r.contains_point(corner)
    assert r.right_bottom() == r.origin + r.size.to_point()
    assert not r.contains_point(r.right_bottom() + Point(0.1, 0))


def test_rect_set_rect():
    r = Rect()
    r.set_rect(1, 2, 3, 4)
    assert r == Rect.from_values(1, 2, 3, 4)


def test_rect_intersects_symmetric():
    a = Rect.from_values(0, 0, 10, 10)
    b = Rect.from_values(10, 10, 5, 5)
    c = Rect.from_values(20, 20, 1, 1)
    assert a.intersects(b) and b.intersects(a)
    assert not a.intersects(c) and not c.intersects(a)


def test_matrix_default_is_identity():
    m = Matrix32()
    assert m.is_identity()
    p = Point(3, -4)
    assert m.transform_point(p) == p


def test_identity_resets():
    m = Matrix32.rotation(30)
    m.identity()
    assert m.is_identity()


def test_getitem_order():
    m = Matrix32(1, 2, 3, 4, 5, 6)
    assert [m[i] for i in range(6)] == [1, 2, 3, 4, 5, 6]
    with pytest.raises(IndexError):
        m[6]


def test_translation_moves_origin():
    m = Matrix32.translation(5, -3)
    assert m.transform_point(Point()) == Point(5, -3)


def test_translate_composes():
    m = Matrix32()
    m.translate(2, 3)
    assert m == Matrix32.translation(2, 3)


def test_scaling_keeps_center_fixed():
    center = Point(4, 6)
    m = Matrix32.scaling(2, 3, center)
    assert m.transform_point(center) == center


def test_rotation_keeps_center_and_distance():
    center = Point(1, 1)
    m = Matrix32.rotation(90, center)
    assert close(m.transform_point(center), center)
    p = Point(3, 1)
    q = m.transform_point(p)
    assert math.isclose(Point.distance(center, q), Point.distance(center, p))
    assert math.isclose(m.determinant(), 1.0)


def test_invert_round_trip():
    m = Matrix32.rotation(37, Point(2, 5))
    m.translate(4, -1)
    inv = Matrix32.invert(m)
    assert inv.is_invertible()
    p = Point(9, -2)
    back = inv.transform_point(m.transform_point(p))
    assert back.x == pytest.approx(p.x)
    assert back.y == pytest.approx(p.y)


def test_singular_matrix():
    m = Matrix32.scaling(0, 1)
    assert not m.is_invertible()
    with pytest.raises(ZeroDivisionError):
        Matrix32.invert(m)


def test_skewing_zero_is_identity():
    assert Matrix32.skewing(0, 0).is_identity()


def test_transform_rect_identity_and_translation():
    r = Rect.from_values(1, 2, 3, 4)
    assert Matrix32().transform_rect(r) == r
    moved = Matrix32.translation(10, 20).transform_rect(r)
    assert moved.size == r.size
    assert moved.origin == r.origin + Point(10, 20)