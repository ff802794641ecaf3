"""Tests for path primitives and the builder."""

import pytest

from qrstyle.path import Close, CurveTo, LineTo, MoveTo, Path, PathBuilder, fmt_number


def test_rect_segments():
    path = PathBuilder().rect(0, 0, 2, 1).build()
    assert len(path) == 5
    assert path.segments[0] == MoveTo(0, 0)
    assert isinstance(path.segments[-1], Close)
    assert all(isinstance(s, LineTo) for s in path.segments[1:4])


def test_empty_path():
    path = PathBuilder().build()
    assert path.is_empty
    assert path.bounds() == (0.0, 0.0, 0.0, 0.0)


def test_transformed_scales_then_translates():
    path = PathBuilder().rect(0, 0, 1, 1).build().transformed(10, 5, 5)
    assert path.bounds() == (5.0, 5.0, 15.0, 15.0)


def test_reversed_twice_is_identity():
    path = PathBuilder().rounded_rect(0, 0, 4, 2, 0.5).build()
    assert path.reversed().reversed() == path


def test_reversed_swaps_curve_controls():
    path = Path((MoveTo(0, 0), CurveTo(1, 0, 2, 1, 2, 2), Close()))
    rev = path.reversed()
    assert rev.segments[0] == MoveTo(2, 2)
    assert rev.segments[1] == CurveTo(2, 1, 1, 0, 0, 0)


def test_rounded_rect_radius_is_clamped():
    path = PathBuilder().rounded_rect(0, 0, 2, 1, 5).build()
    assert path.bounds() == pytest.approx((0.0, 0.0, 2.0, 1.0))
    assert sum(isinstance(s, CurveTo) for s in path) == 4


def test_rounded_rect_per_corner_radii():
    path = PathBuilder().rounded_rect(0, 0, 1, 1, (0.5, 0, 0.5, 0)).build()
    assert sum(isinstance(s, CurveTo) for s in path) == 2


def test_add_concatenates():
    a = PathBuilder().rect(0, 0, 1, 1).build()
    b = PathBuilder().rect(2, 2, 1, 1).build()
    assert len(a + b) == len(a) + len(b)


def test_svg_data():
    path = PathBuilder().rect(0, 0, 1, 1).build()
    assert path.svg_data() == "M0 0L1 0L1 1L0 1Z"


@pytest.mark.parametrize(
    "value, text",
    [(0.0, "0"), (-0.0, "0"), (10.0, "10"), (1.23456, "1.2346"), (0.5, "0.5"), (-2.25, "-2.25")],
)
def test_fmt_number(value, text):
    assert fmt_number(value) == text


def test_ellipse_is_four_curves():
    path = PathBuilder().ellipse(0, 0, 2, 4).build()
    assert sum(isinstance(s, CurveTo) for s in path) == 4
    assert path.bounds() == pytest.approx((0.0, 0.0, 2.0, 4.0))
