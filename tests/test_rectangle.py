from paintcore.rectangle import Rectangle


def _contains(rect, px, py):
    return rect.x <= px < rect.x + rect.width and rect.y <= py < rect.y + rect.height


def test_empty_rectangle_takes_first_point():
    r = Rectangle()
    r.expand_to_include_point(5, 7)
    assert (r.x, r.y, r.width, r.height) == (5, 7, 1, 1)


def test_expand_covers_all_points():
    points = [(5, 7), (2, 10), (9, 3), (-4, -1), (6, 6)]
    r = Rectangle()
    for px, py in points:
        r.expand_to_include_point(px, py)
    assert all(_contains(r, px, py) for px, py in points)
    assert r.x == min(p[0] for p in points)
    assert r.y == min(p[1] for p in points)
    assert r.x + r.width - 1 == max(p[0] for p in points)
    assert r.y + r.height - 1 == max(p[1] for p in points)


def test_point_inside_does_not_change():
    r = Rectangle(0, 0, 10, 10)
    r.expand_to_include_point(3, 4)
    assert r == Rectangle(0, 0, 10, 10)


def test_expand_to_the_right_and_down():
    r = Rectangle(0, 0, 2, 2)
    r.expand_to_include_point(4, 5)
    assert _contains(r, 4, 5)
    assert _contains(r, 0, 0)
    assert r.x == 0 and r.y == 0


def test_copy_is_equal_and_independent():
    r = Rectangle(1, 2, 3, 4)
    c = r.copy()
    assert c == r
    assert c is not r
    c.expand_to_include_point(100, 100)
    assert r == Rectangle(1, 2, 3, 4)
    assert _contains(c, 100, 100)