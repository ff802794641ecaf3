"""
qrstyle
=======

Styled rendering of QR code module matrices.

A QR symbol (a square boolean module matrix) is drawn with
independently chosen shapes for the data modules ("pixels"), the three
finder eyes and their pupils, plus fills and an optional logo. The
composed geometry exports to PNG, JPEG, SVG, PDF, two text grids and an
in-memory image.

Example
-------
>>> from qrstyle import Design, Document, EYE_SHAPES, PIXEL_SHAPES
>>> design = Design(
...     pixel_shape=PIXEL_SHAPES.create("roundedpath"),
...     eye_shape=EYE_SHAPES.create("leaf"),
... )
>>> doc = Document.from_text("https://example.com", ecc="H", design=design)
>>> svg = doc.export(400, "svg")

Scan checks of the output need OpenCV (``qrstyle.validate``); when it
is missing those functions raise RuntimeError.
"""

from qrstyle.compositor import GroupRole, PathGroup, RenderedImageModel
from qrstyle.design import Design, LogoTemplate
from qrstyle.document import Document, render
from qrstyle.errors import (
    InvalidDimension,
    InvalidLogoPlacement,
    QRStyleError,
    UnknownShapeName,
    UnsupportedFormat,
    UnsupportedSetting,
)
from qrstyle.export import ExportFormat, export
from qrstyle.fill import BLACK, CLEAR, WHITE, Color, GradientStop, ImagePattern, LinearGradient, Solid
from qrstyle.matrix import ModuleMatrix
from qrstyle.path import Path, PathBuilder
from qrstyle.registry import EYE_SHAPES, PIXEL_SHAPES, PUPIL_SHAPES, ShapeRegistry
from qrstyle.settings import SettingKey, ShapeSettings
from qrstyle.shapes import NeighborContext

__version__ = "1.0.0"

__all__ = [
    "BLACK",
    "CLEAR",
    "Color",
    "Design",
    "Document",
    "EYE_SHAPES",
    "ExportFormat",
    "GradientStop",
    "GroupRole",
    "ImagePattern",
    "InvalidDimension",
    "InvalidLogoPlacement",
    "LinearGradient",
    "LogoTemplate",
    "ModuleMatrix",
    "NeighborContext",
    "PIXEL_SHAPES",
    "PUPIL_SHAPES",
    "Path",
    "PathBuilder",
    "PathGroup",
    "QRStyleError",
    "RenderedImageModel",
    "SettingKey",
    "ShapeRegistry",
    "ShapeSettings",
    "Solid",
    "UnknownShapeName",
    "UnsupportedFormat",
    "UnsupportedSetting",
    "WHITE",
    "export",
    "render",
]
