import math

import pytest

from classicalgo.geometry import Point, main


def test_source_example_distance():
    p = Point(10, 21)
    q = Point(7, 25)
    assert p.distance(q) == pytest.approx(5.0)


def test_distance_symmetric_and_zero():
    p = Point(1.5, -2.0)
    q = Point(-3.25, 4.0)
    assert p.distance(q) == pytest.approx(q.distance(p))
    assert p.distance(p) == 0.0


def test_distance_axis_aligned():
    assert Point(0, 0).distance(Point(0, 6)) == pytest.approx(6.0)
    assert Point(-2, 1).distance(Point(3, 1)) == pytest.approx(5.0)


def test_triangle_inequality():
    a, b, c = Point(0, 0), Point(4, 1), Point(2, 7)
    assert a.distance(c) <= a.distance(b) + b.distance(c) + 1e-12


def test_assign_and_access_coordinates():
    p = Point(1, 2)
    p.x, p.y = 8, 9
    assert (p.x, p.y) == (8, 9)
    assert p.distance(Point(8, 9)) == 0.0


def test_distance_matches_hypot_of_differences():
    p, q = Point(3, 4), Point(0, 0)
    assert p.distance(q) == pytest.approx(math.hypot(3, 4))


def test_main_default_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Distancia entre pontos: 5.0\n"


def test_main_custom_points(capsys):
    assert main(["0", "0", "0", "2.5"]) == 0
    assert capsys.readouterr().out == "Distancia entre pontos: 2.5\n"


def test_main_wrong_argument_count():
    with pytest.raises(SystemExit):
        main(["1", "2", "3"])