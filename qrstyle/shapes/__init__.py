"""Shape generators for the pixel, eye and pupil roles."""

from qrstyle.shapes.base import (
    EyeShapeGenerator,
    NeighborContext,
    PixelShapeGenerator,
    PupilShapeGenerator,
    ShapeGenerator,
)

__all__ = [
    "EyeShapeGenerator",
    "NeighborContext",
    "PixelShapeGenerator",
    "PupilShapeGenerator",
    "ShapeGenerator",
]
