"""Outline helpers shared by the eye and pupil generators."""

from __future__ import annotations

from qrstyle.path import Path, PathBuilder

# Squircle outline inside a 30x30 box, clockwise from the top centre.
_SQUIRCLE_30 = (
    (15.0, 0.0),
    ((21.57, 0.0), (25.23, 0.0), (27.61, 2.39)),
    ((30.0, 4.77), (30.0, 8.43), (30.0, 15.0)),
    ((30.0, 21.57), (30.0, 25.23), (27.61, 27.61)),
    ((25.23, 30.0), (21.57, 30.0), (15.0, 30.0)),
    ((8.43, 30.0), (4.77, 30.0), (2.39, 27.61)),
    ((0.0, 25.23), (0.0, 21.57), (0.0, 15.0)),
    ((0.0, 8.43), (0.0, 4.77), (2.39, 2.39)),
    ((4.77, 0.0), (8.43, 0.0), (15.0, 0.0)),
)


def squircle(x: float, y: float, size: float, *, clockwise: bool = True) -> Path:
    """Squircle filling the square (x, y, size, size)."""
    k = size / 30.0
    start, *curves = _SQUIRCLE_30
    b = PathBuilder().move_to(x + start[0] * k, y + start[1] * k)
    for (c1x, c1y), (c2x, c2y), (ex, ey) in curves:
        b.curve_to(
            x + c1x * k, y + c1y * k,
            x + c2x * k, y + c2y * k,
            x + ex * k, y + ey * k,
        )
    path = b.close().build()
    return path if clockwise else path.reversed()


def leaf_radii(radius: float) -> tuple[float, float, float, float]:
    """Per-corner radii (tl, tr, br, bl) rounding only the leaf diagonal."""
    return (radius, 0.0, radius, 0.0)
