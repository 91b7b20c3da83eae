import pytest
from planar.geometry.vector import Vector2
from planar.geometry.line import Line, distance


class TestLine:
    def test_create_line(self):
        p1 = Vector2(x=0.0, y=0.0)
        p2 = Vector2(x=3.0, y=4.0)
        line = Line(p1=p1, p2=p2)

        assert line.p1 == p1
        assert line.p2 == p2

    def test_from_coords(self):
        line = Line.from_coords(1.0, 2.0, 3.0, 4.0)
        assert line.p1 == Vector2(x=1.0, y=2.0)
        assert line.p2 == Vector2(x=3.0, y=4.0)

    def test_zero_length_line(self):
        point = Vector2(x=1.0, y=1.0)
        with pytest.raises(ValueError):
            Line(p1=point, p2=point)

    def test_length(self):
        assert Line.from_coords(0.0, 0.0, 3.0, 4.0).length == 5.0

    def test_midpoint(self):
        assert Line.from_coords(1.0, 2.0, 5.0, 6.0).midpoint == Vector2(x=3.0, y=4.0)

    def test_direction_vector(self):
        line = Line.from_coords(1.0, 2.0, 4.0, 6.0)
        assert line.direction_vector == Vector2(x=3.0, y=4.0)

    def test_unit_direction_vector(self):
        unit_dir = Line.from_coords(0.0, 0.0, 3.0, 4.0).unit_direction_vector
        assert unit_dir.x == pytest.approx(0.6)
        assert unit_dir.y == pytest.approx(0.8)

    def test_normal_vector(self):
        normal = Line.from_coords(0.0, 0.0, 1.0, 0.0).normal_vector
        assert normal.x == 0.0
        assert normal.y == 1.0

    def test_to_abc(self):
        line = Line.from_coords(1.0, 2.0, 4.0, 6.0)
        a, b, c = line.to_abc()

        assert (a, b, c) == (-4.0, 3.0, -2.0)

        # Both defining points and any combination of them satisfy the equation
        for point in (line.p1, line.p2, line.p1 * 3.0 - line.p2 * 2.0):
            assert a * point.x + b * point.y + c == pytest.approx(0.0)

    def test_to_abc_is_not_normalised(self):
        a, b, _ = Line.from_coords(0.0, 0.0, 0.0, 10.0).to_abc()
        assert Vector2(x=a, y=b).norm() == 10.0

    def test_distance_to_point(self):
        line = Line.from_coords(0.0, 0.0, 4.0, 0.0)

        assert line.distance_to_point(Vector2(x=2.0, y=0.0)) == pytest.approx(0.0)
        assert line.distance_to_point(Vector2(x=2.0, y=3.0)) == pytest.approx(3.0)
        assert line.distance_to_point(Vector2(x=2.0, y=-3.0)) == pytest.approx(3.0)

        # The line is infinite
        assert line.distance_to_point(Vector2(x=10.0, y=1.0)) == pytest.approx(1.0)

    def test_very_short_line(self):
        line = Line.from_coords(0.0, 0.0, 1e-170, 0.0)

        assert line.distance_to_point(Vector2(x=0.0, y=1.0)) == 1.0
        assert line.project_point(Vector2(x=5.0, y=1.0)) == Vector2(x=5.0, y=0.0)

    def test_project_point(self):
        line = Line.from_coords(0.0, 0.0, 4.0, 4.0)

        foot = line.project_point(Vector2(x=0.0, y=4.0))
        assert foot.x == pytest.approx(2.0)
        assert foot.y == pytest.approx(2.0)

        # Beyond p2
        foot = line.project_point(Vector2(x=10.0, y=10.0))
        assert foot.x == pytest.approx(10.0)
        assert foot.y == pytest.approx(10.0)

    def test_contains_point(self):
        line = Line.from_coords(0.0, 0.0, 4.0, 0.0)

        assert line.contains_point(Vector2(x=2.0, y=0.0))
        assert line.contains_point(Vector2(x=-5.0, y=0.0))
        assert not line.contains_point(Vector2(x=2.0, y=0.1))
        assert line.contains_point(Vector2(x=2.0, y=0.1), tolerance=0.2)

    def test_distance_function(self):
        line = Line.from_coords(0.0, 0.0, 4.0, 0.0)
        point = Vector2(x=1.0, y=-2.0)

        assert distance(point, line) == pytest.approx(2.0)
        assert distance(line, point) == pytest.approx(2.0)
        assert distance(point, Vector2(x=4.0, y=2.0)) == 5.0

        with pytest.raises(TypeError):
            distance(line, line)

    def test_immutability(self):
        line = Line.from_coords(0.0, 0.0, 1.0, 1.0)

        with pytest.raises(Exception):
            line.p1 = Vector2(x=2.0, y=2.0)

    def test_string_representation(self):
        line = Line.from_coords(0.0, 0.0, 1.0, 1.0)
        assert str(line) == "Line((0.0, 0.0) -> (1.0, 1.0))"
