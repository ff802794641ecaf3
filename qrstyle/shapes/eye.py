"""
Eye generators: the one-module-thick 7x7 ring of each finder pattern.

The ring's outer edge is the 10..80 box of the 90x90 frame and its inner
edge the 20..70 box. The inner edge is drawn counter-clockwise so the
non-zero fill leaves it open.
"""

from __future__ import annotations

from qrstyle.path import Path, PathBuilder
from qrstyle.settings import SettingKey, fraction
from qrstyle.shapes import pupil
from qrstyle.shapes.base import EyeShapeGenerator, PupilShapeGenerator
from qrstyle.shapes.outlines import leaf_radii, squircle

OUTER = 10.0
OUTER_SIZE = 70.0
INNER = 20.0
INNER_SIZE = 50.0


class Square(EyeShapeGenerator):
    """Plain square ring, as in the standard symbol."""

    name = "square"
    title = "Square"

    def path(self) -> Path:
        b = PathBuilder()
        b.rect(OUTER, OUTER, OUTER_SIZE, OUTER_SIZE)
        b.rect(INNER, INNER, INNER_SIZE, INNER_SIZE, clockwise=False)
        return b.build()

    def default_pupil(self) -> PupilShapeGenerator:
        return pupil.Square()


class Circle(EyeShapeGenerator):
    """Circular ring; pairs with the circle pupil."""

    name = "circle"
    title = "Circle"

    def path(self) -> Path:
        b = PathBuilder()
        b.ellipse(OUTER, OUTER, OUTER_SIZE, OUTER_SIZE)
        b.ellipse(INNER, INNER, INNER_SIZE, INNER_SIZE, clockwise=False)
        return b.build()

    def default_pupil(self) -> PupilShapeGenerator:
        return pupil.Circle()


class RoundedRect(EyeShapeGenerator):
    """
    Ring with rounded corners on both edges.

    Settings
    --------
    cornerRadiusFraction : float
        Corner radius as a fraction of half the side. The default is
        0.65. The default pupil takes the same rounding.
    """

    name = "roundedrect"
    title = "Rounded rectangle"
    SETTINGS = {SettingKey.CORNER_RADIUS_FRACTION: fraction(0.65)}

    def path(self) -> Path:
        f = self._get(SettingKey.CORNER_RADIUS_FRACTION)
        b = PathBuilder()
        b.rounded_rect(OUTER, OUTER, OUTER_SIZE, OUTER_SIZE, f * OUTER_SIZE / 2.0)
        b.rounded_rect(
            INNER, INNER, INNER_SIZE, INNER_SIZE, f * INNER_SIZE / 2.0, clockwise=False
        )
        return b.build()

    def default_pupil(self) -> PupilShapeGenerator:
        return pupil.RoundedRect(
            {SettingKey.CORNER_RADIUS_FRACTION: self._get(SettingKey.CORNER_RADIUS_FRACTION)}
        )


class RoundedOuter(EyeShapeGenerator):
    """Rounded outside edge with a square hole."""

    name = "roundedouter"
    title = "Rounded outer"
    SETTINGS = {SettingKey.CORNER_RADIUS_FRACTION: fraction(0.65)}

    def path(self) -> Path:
        f = self._get(SettingKey.CORNER_RADIUS_FRACTION)
        b = PathBuilder()
        b.rounded_rect(OUTER, OUTER, OUTER_SIZE, OUTER_SIZE, f * OUTER_SIZE / 2.0)
        b.rect(INNER, INNER, INNER_SIZE, INNER_SIZE, clockwise=False)
        return b.build()

    def default_pupil(self) -> PupilShapeGenerator:
        return pupil.Square()


class Leaf(EyeShapeGenerator):
    """Ring rounded on the top-left and bottom-right corners only."""

    name = "leaf"
    title = "Leaf"
    SETTINGS = {SettingKey.CORNER_RADIUS_FRACTION: fraction(0.65)}

    def path(self) -> Path:
        f = self._get(SettingKey.CORNER_RADIUS_FRACTION)
        b = PathBuilder()
        b.rounded_rect(
            OUTER, OUTER, OUTER_SIZE, OUTER_SIZE, leaf_radii(f * OUTER_SIZE / 2.0)
        )
        b.rounded_rect(
            INNER, INNER, INNER_SIZE, INNER_SIZE,
            leaf_radii(f * INNER_SIZE / 2.0), clockwise=False,
        )
        return b.build()

    def default_pupil(self) -> PupilShapeGenerator:
        return pupil.Leaf(
            {SettingKey.CORNER_RADIUS_FRACTION: self._get(SettingKey.CORNER_RADIUS_FRACTION)}
        )


class Squircle(EyeShapeGenerator):
    """Superellipse ring."""

    name = "squircle"
    title = "Squircle"

    def path(self) -> Path:
        return squircle(OUTER, OUTER, OUTER_SIZE) + squircle(
            INNER, INNER, INNER_SIZE, clockwise=False
        )

    def default_pupil(self) -> PupilShapeGenerator:
        return pupil.Squircle()


GENERATORS = (Square, Circle, RoundedRect, RoundedOuter, Leaf, Squircle)
