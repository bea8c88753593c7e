"""Tests for Rectangle, Circle, and make_rectangle."""

import math

import pytest

from selkit.domain.shapes import Circle, Rectangle, make_rectangle


class TestMakeRectangle:
    def test_fields(self) -> None:
        r = make_rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    @pytest.mark.parametrize(
        "width,height",
        [(10, 20), (0, 5), (2.5, 4), (-3, 7), (1, 1)],
    )
    def test_area_is_width_times_height(self, width: float, height: float) -> None:
        assert make_rectangle(width, height).get_area() == width * height

    def test_returns_rectangle(self) -> None:
        assert isinstance(make_rectangle(1, 2), Rectangle)

    def test_area_tracks_mutation(self) -> None:
        """Area is computed on each call, not cached at construction."""
        r = make_rectangle(10, 20)
        assert r.get_area() == 200
        r.width = 5
        assert r.get_area() == 100
        r.height = 3
        assert r.get_area() == 15

    def test_equality_is_field_based(self) -> None:
        assert make_rectangle(3, 4) == make_rectangle(3, 4)
        assert make_rectangle(3, 4) != make_rectangle(4, 3)


class TestCircle:
    def test_area(self) -> None:
        assert Circle(2).get_area() == pytest.approx(4 * math.pi)

    def test_radius(self) -> None:
        assert Circle(radius=10).radius == 10
