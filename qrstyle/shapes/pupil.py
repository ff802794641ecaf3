"""Pupil generators: the 3x3 inner dot, drawn in the 30..60 box of the 90x90 frame."""

from __future__ import annotations

from qrstyle.path import Path, PathBuilder
from qrstyle.settings import SettingKey, fraction
from qrstyle.shapes.base import PupilShapeGenerator
from qrstyle.shapes.outlines import leaf_radii, squircle

# Pupil box inside the 90x90 frame.
ORIGIN = 30.0
SIZE = 30.0


class Square(PupilShapeGenerator):
    """Square 3x3 pupil."""

    name = "square"
    title = "Square"

    def path(self) -> Path:
        return PathBuilder().rect(ORIGIN, ORIGIN, SIZE, SIZE).build()


class Circle(PupilShapeGenerator):
    """Round pupil inscribed in the 3x3 box."""

    name = "circle"
    title = "Circle"

    def path(self) -> Path:
        return PathBuilder().ellipse(ORIGIN, ORIGIN, SIZE, SIZE).build()


class RoundedRect(PupilShapeGenerator):
    """
    Square pupil with circular corners.

    Settings
    --------
    cornerRadiusFraction : float
        Corner radius as a fraction of half the side. The default is 0.65.
    """

    name = "roundedrect"
    title = "Rounded rectangle"
    SETTINGS = {SettingKey.CORNER_RADIUS_FRACTION: fraction(0.65)}

    def path(self) -> Path:
        radius = self._get(SettingKey.CORNER_RADIUS_FRACTION) * SIZE / 2.0
        return PathBuilder().rounded_rect(ORIGIN, ORIGIN, SIZE, SIZE, radius).build()


class Leaf(PupilShapeGenerator):
    """Pupil rounded on the top-left and bottom-right corners, matching the leaf eye."""

    name = "leaf"
    title = "Leaf"
    SETTINGS = {SettingKey.CORNER_RADIUS_FRACTION: fraction(0.65)}

    def path(self) -> Path:
        radius = self._get(SettingKey.CORNER_RADIUS_FRACTION) * SIZE / 2.0
        return PathBuilder().rounded_rect(
            ORIGIN, ORIGIN, SIZE, SIZE, leaf_radii(radius)
        ).build()


class Squircle(PupilShapeGenerator):
    """Superellipse pupil."""

    name = "squircle"
    title = "Squircle"

    def path(self) -> Path:
        return squircle(ORIGIN, ORIGIN, SIZE)


GENERATORS = (Square, Circle, RoundedRect, Leaf, Squircle)
