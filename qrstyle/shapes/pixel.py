"""
Pixel generators: one on-module in a 1x1 frame.

``insetFraction`` shrinks the module evenly on all sides (0 fills the
cell, 1 collapses it). Context-aware generators join neighbouring
modules; ``roundedpath`` with ``hasInnerCorners`` may also draw a small
concave fillet that reaches into the empty diagonal neighbour.
"""

from __future__ import annotations

from qrstyle.path import KAPPA, Path, PathBuilder
from qrstyle.settings import SettingKey, flag, fraction
from qrstyle.shapes.base import NeighborContext, PixelShapeGenerator
from qrstyle.shapes.outlines import squircle


class _Inset(PixelShapeGenerator):
    SETTINGS = {SettingKey.INSET_FRACTION: fraction(0.0)}

    def _box(self) -> tuple[float, float]:
        inset = self._get(SettingKey.INSET_FRACTION)
        return inset / 2.0, 1.0 - inset


class Square(_Inset):
    """Full square module, optionally inset."""

    name = "square"
    title = "Square"

    def path(self, context: NeighborContext = NeighborContext()) -> Path:
        origin, size = self._box()
        return PathBuilder().rect(origin, origin, size, size).build()


class Circle(_Inset):
    """Round dot inscribed in the module."""

    name = "circle"
    title = "Circle"

    def path(self, context: NeighborContext = NeighborContext()) -> Path:
        origin, size = self._box()
        return PathBuilder().ellipse(origin, origin, size, size).build()


class Squircle(_Inset):
    """Superellipse module, between a square and a circle."""

    name = "squircle"
    title = "Squircle"

    def path(self, context: NeighborContext = NeighborContext()) -> Path:
        origin, size = self._box()
        return squircle(origin, origin, size)


class Diamond(_Inset):
    """Square rotated by 45 degrees, corners touching the cell edges."""

    name = "diamond"
    title = "Diamond"

    def path(self, context: NeighborContext = NeighborContext()) -> Path:
        origin, size = self._box()
        mid = origin + size / 2.0
        far = origin + size
        return PathBuilder().rounded_polygon(
            [(mid, origin, 0.0), (far, mid, 0.0), (mid, far, 0.0), (origin, mid, 0.0)]
        ).build()


class RoundedRect(_Inset):
    """
    Square module with circular corners.

    Settings
    --------
    insetFraction : float
        Even spacing around the module. The default is 0.
    cornerRadiusFraction : float
        Corner radius as a fraction of half the side; 1 gives a circle.
        The default is 0.5.
    """

    name = "roundedrect"
    title = "Rounded rectangle"
    SETTINGS = {
        SettingKey.INSET_FRACTION: fraction(0.0),
        SettingKey.CORNER_RADIUS_FRACTION: fraction(0.5),
    }

    def path(self, context: NeighborContext = NeighborContext()) -> Path:
        origin, size = self._box()
        radius = self._get(SettingKey.CORNER_RADIUS_FRACTION) * size / 2.0
        return PathBuilder().rounded_rect(origin, origin, size, size, radius).build()


class Horizontal(PixelShapeGenerator):
    """Bars that join horizontally adjacent modules."""

    name = "horizontal"
    title = "Horizontal"
    uses_context = True
    SETTINGS = {
        SettingKey.INSET_FRACTION: fraction(0.1),
        SettingKey.CORNER_RADIUS_FRACTION: fraction(1.0),
    }

    def path(self, context: NeighborContext = NeighborContext()) -> Path:
        inset = self._get(SettingKey.INSET_FRACTION)
        thickness = 1.0 - inset
        r = self._get(SettingKey.CORNER_RADIUS_FRACTION) * thickness / 2.0
        left = 0.0 if context.left else r
        right = 0.0 if context.right else r
        return PathBuilder().rounded_rect(
            0.0, inset / 2.0, 1.0, thickness, (left, right, right, left)
        ).build()


class Vertical(PixelShapeGenerator):
    """Bars that join vertically adjacent modules."""

    name = "vertical"
    title = "Vertical"
    uses_context = True
    SETTINGS = {
        SettingKey.INSET_FRACTION: fraction(0.1),
        SettingKey.CORNER_RADIUS_FRACTION: fraction(1.0),
    }

    def path(self, context: NeighborContext = NeighborContext()) -> Path:
        inset = self._get(SettingKey.INSET_FRACTION)
        thickness = 1.0 - inset
        r = self._get(SettingKey.CORNER_RADIUS_FRACTION) * thickness / 2.0
        top = 0.0 if context.top else r
        bottom = 0.0 if context.bottom else r
        return PathBuilder().rounded_rect(
            inset / 2.0, 0.0, thickness, 1.0, (top, top, bottom, bottom)
        ).build()


class RoundedPath(PixelShapeGenerator):
    """
    Connected blobs: a corner is rounded only where both modules sharing
    that corner's edges are off.
    """

    name = "roundedpath"
    title = "Rounded path"
    uses_context = True
    SETTINGS = {
        SettingKey.CORNER_RADIUS_FRACTION: fraction(1.0),
        SettingKey.HAS_INNER_CORNERS: flag(False),
    }

    def path(self, context: NeighborContext = NeighborContext()) -> Path:
        r = self._get(SettingKey.CORNER_RADIUS_FRACTION) * 0.5
        c = context
        radii = (
            r if not (c.top or c.left) else 0.0,
            r if not (c.top or c.right) else 0.0,
            r if not (c.bottom or c.right) else 0.0,
            r if not (c.bottom or c.left) else 0.0,
        )
        b = PathBuilder().rounded_rect(0.0, 0.0, 1.0, 1.0, radii)

        if self._get(SettingKey.HAS_INNER_CORNERS) and r > 0:
            corners = (
                (c.top and c.left and not c.top_left, 0.0, 0.0, -1.0, -1.0),
                (c.top and c.right and not c.top_right, 1.0, 0.0, 1.0, -1.0),
                (c.bottom and c.right and not c.bottom_right, 1.0, 1.0, 1.0, 1.0),
                (c.bottom and c.left and not c.bottom_left, 0.0, 1.0, -1.0, 1.0),
            )
            for wanted, x, y, sx, sy in corners:
                if wanted:
                    _inner_fillet(b, x, y, sx, sy, r)
        return b.build()


def _inner_fillet(b: PathBuilder, x: float, y: float, sx: float, sy: float, r: float) -> None:
    # Fills the gap between corner (x, y) and a quarter arc of radius r
    # centred at (x + sx*r, y + sy*r), inside the diagonal neighbour.
    b.move_to(x, y)
    b.line_to(x + sx * r, y)
    b.curve_to(
        x + sx * r * (1.0 - KAPPA), y,
        x, y + sy * r * (1.0 - KAPPA),
        x, y + sy * r,
    )
    b.close()


GENERATORS = (Square, Circle, Squircle, Diamond, RoundedRect, Horizontal, Vertical, RoundedPath)
