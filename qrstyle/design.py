"""
Design model: the shapes, fills and optional logo applied to a render.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from typing import Optional

from PIL import Image

from qrstyle.errors import InvalidLogoPlacement
from qrstyle.fill import (
    BLACK,
    WHITE,
    FillStyle,
    ImageLike,
    ImagePattern,
    LinearGradient,
    Solid,
    same_image,
    to_rgba_image,
)
from qrstyle.matrix import FINDER_SIZE
from qrstyle.shapes import eye as eye_shapes
from qrstyle.shapes import pixel as pixel_shapes
from qrstyle.shapes.base import (
    EyeShapeGenerator,
    PixelShapeGenerator,
    PupilShapeGenerator,
)

Rect = tuple[float, float, float, float]

_FILL_TYPES = (Solid, LinearGradient, ImagePattern)


def _overlap(a: Rect, b: Rect) -> bool:
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and bx < ax + aw and ay < by + bh and by < ay + ah


@dataclass(frozen=True, eq=False)
class LogoTemplate:
    """
    Reserved logo area and the image drawn into it.

    Parameters
    ----------
    rect : tuple of float
        Placement (x, y, width, height) in module-grid units, where x is
        the column and y the row of the top-left corner.
    corner_radius_fraction : float, optional
        Rounding of the logo area, 0 (square) to 1 (fully rounded
        ends). The default is 0.
    image : numpy.ndarray or PIL.Image.Image, optional
        Logo image, stretched to the rectangle. When None the area is
        only kept free of modules. The default is None.

    Raises
    ------
    ValueError
        If `rect` does not hold four finite numbers or the corner radius
        fraction is outside [0, 1].
    """

    rect: Rect
    corner_radius_fraction: float = 0.0
    image: Optional[Image.Image] = field(default=None)

    def __post_init__(self) -> None:
        values = tuple(self.rect)
        if len(values) != 4 or not all(
            isinstance(v, numbers.Real) and math.isfinite(v) for v in values
        ):
            raise ValueError(f"logo rect must be four finite numbers, got {self.rect!r}")
        object.__setattr__(self, "rect", tuple(float(v) for v in values))
        if not 0.0 <= self.corner_radius_fraction <= 1.0:
            raise ValueError("'corner_radius_fraction' must be in [0, 1]")
        if self.image is not None:
            object.__setattr__(self, "image", to_rgba_image(self.image, name="logo"))

    @classmethod
    def centered(
        cls,
        module_count: int,
        relative_size: float = 0.25,
        *,
        corner_radius_fraction: float = 0.0,
        image: Optional[ImageLike] = None,
    ) -> LogoTemplate:
        """
        Square logo area centred on the grid.

        Parameters
        ----------
        module_count : int
            Side of the module matrix.
        relative_size : float, optional
            Side of the logo area as a fraction of the grid side,
            clipped to (0, 1]. The default is 0.25.
        """
        relative_size = max(1e-6, min(1.0, float(relative_size)))
        side = module_count * relative_size
        origin = (module_count - side) / 2.0
        return cls((origin, origin, side, side), corner_radius_fraction, image)

    def check_placement(self, module_count: int) -> None:
        """
        Validate the rectangle against a grid of side `module_count`.

        Raises
        ------
        InvalidLogoPlacement
            If the rectangle is empty, leaves the grid, or overlaps any of
            the three finder regions.
        """
        x, y, w, h = self.rect
        if w <= 0 or h <= 0:
            raise InvalidLogoPlacement(self.rect, "width and height must be positive")
        if x < 0 or y < 0 or x + w > module_count or y + h > module_count:
            raise InvalidLogoPlacement(self.rect, f"outside the {module_count}x{module_count} grid")
        far = module_count - FINDER_SIZE
        finders = {
            "top-left": (0, 0),
            "top-right": (far, 0),
            "bottom-left": (0, far),
        }
        for label, (col, row) in finders.items():
            if _overlap(self.rect, (col, row, FINDER_SIZE, FINDER_SIZE)):
                raise InvalidLogoPlacement(self.rect, f"overlaps the {label} finder eye")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LogoTemplate):
            return NotImplemented
        if self.rect != other.rect or self.corner_radius_fraction != other.corner_radius_fraction:
            return False
        if self.image is None or other.image is None:
            return self.image is other.image
        return same_image(self.image, other.image)

    def __hash__(self) -> int:
        return hash((self.rect, self.corner_radius_fraction))


class Design:
    """
    Shapes, fill styles and optional logo for one QR rendering.

    Parameters
    ----------
    pixel_shape : PixelShapeGenerator, optional
        Generator for data modules. The default is a square.
    eye_shape : EyeShapeGenerator, optional
        Generator for the finder rings. The default is a square.
    pupil_shape : PupilShapeGenerator, optional
        Generator for the finder dots. When None the eye generator's
        default pupil is used. The default is None.
    background : FillStyle, optional
        Canvas fill. The default is solid white.
    on_pixels : FillStyle, optional
        Fill for data modules. The default is solid black.
    eye : FillStyle, optional
        Fill for the rings; None reuses `on_pixels`.
    pupil : FillStyle, optional
        Fill for the dots; None reuses the eye fill.
    logo : LogoTemplate, optional
        Logo overlay. The default is None.

    Notes
    -----
    A Design is mutable while it is being configured. ``Document.render``
    works on a ``copy()`` so later changes never affect a finished render.
    """

    def __init__(
        self,
        *,
        pixel_shape: Optional[PixelShapeGenerator] = None,
        eye_shape: Optional[EyeShapeGenerator] = None,
        pupil_shape: Optional[PupilShapeGenerator] = None,
        background: FillStyle = Solid(WHITE),
        on_pixels: FillStyle = Solid(BLACK),
        eye: Optional[FillStyle] = None,
        pupil: Optional[FillStyle] = None,
        logo: Optional[LogoTemplate] = None,
    ) -> None:
        self._pixel_shape: PixelShapeGenerator = pixel_shapes.Square()
        self._eye_shape: EyeShapeGenerator = eye_shapes.Square()
        self._pupil_shape: Optional[PupilShapeGenerator] = None
        self._background: FillStyle = Solid(WHITE)
        self._on_pixels: FillStyle = Solid(BLACK)
        self._eye: Optional[FillStyle] = None
        self._pupil: Optional[FillStyle] = None
        self._logo: Optional[LogoTemplate] = None

        if pixel_shape is not None:
            self.set_pixel_shape(pixel_shape)
        if eye_shape is not None:
            self.set_eye_shape(eye_shape)
        self.set_pupil_shape(pupil_shape)
        self.set_background_style(background)
        self.set_on_pixel_style(on_pixels)
        self.set_eye_style(eye)
        self.set_pupil_style(pupil)
        self.set_logo(logo)

    # ---------- Shapes ----------

    @property
    def pixel_shape(self) -> PixelShapeGenerator:
        return self._pixel_shape

    @property
    def eye_shape(self) -> EyeShapeGenerator:
        return self._eye_shape

    @property
    def pupil_shape(self) -> Optional[PupilShapeGenerator]:
        """The explicitly chosen pupil generator, or None."""
        return self._pupil_shape

    @property
    def actual_pupil_shape(self) -> PupilShapeGenerator:
        """The pupil generator used for rendering."""
        return self._pupil_shape or self._eye_shape.default_pupil()

    def set_pixel_shape(self, shape: PixelShapeGenerator) -> None:
        """
        Use `shape` for the data modules.

        Raises
        ------
        TypeError
            If `shape` is not a pixel shape generator.
        """
        if not isinstance(shape, PixelShapeGenerator):
            raise TypeError(f"expected a pixel shape generator, got {shape!r}")
        self._pixel_shape = shape

    def set_eye_shape(self, shape: EyeShapeGenerator) -> None:
        """
        Use `shape` for the finder rings.

        Raises
        ------
        TypeError
            If `shape` is not an eye shape generator.
        """
        if not isinstance(shape, EyeShapeGenerator):
            raise TypeError(f"expected an eye shape generator, got {shape!r}")
        self._eye_shape = shape

    def set_pupil_shape(self, shape: Optional[PupilShapeGenerator]) -> None:
        """
        Use `shape` for the finder dots; None falls back to the eye's default pupil.

        Raises
        ------
        TypeError
            If `shape` is not a pupil shape generator.
        """
        if shape is not None and not isinstance(shape, PupilShapeGenerator):
            raise TypeError(f"expected a pupil shape generator, got {shape!r}")
        self._pupil_shape = shape

    # ---------- Styles ----------

    @property
    def background_style(self) -> FillStyle:
        return self._background

    @property
    def on_pixel_style(self) -> FillStyle:
        return self._on_pixels

    @property
    def eye_style(self) -> Optional[FillStyle]:
        return self._eye

    @property
    def pupil_style(self) -> Optional[FillStyle]:
        return self._pupil

    @property
    def actual_eye_style(self) -> FillStyle:
        return self._eye or self._on_pixels

    @property
    def actual_pupil_style(self) -> FillStyle:
        return self._pupil or self.actual_eye_style

    def set_background_style(self, style: FillStyle) -> None:
        """Fill for the whole canvas behind the symbol."""
        self._background = _check_fill(style)

    def set_on_pixel_style(self, style: FillStyle) -> None:
        """Fill for the data modules; also the eye fill when none is set."""
        self._on_pixels = _check_fill(style)

    def set_eye_style(self, style: Optional[FillStyle]) -> None:
        """Fill for the finder rings; None reuses the on-pixel fill."""
        self._eye = None if style is None else _check_fill(style)

    def set_pupil_style(self, style: Optional[FillStyle]) -> None:
        """Fill for the finder dots; None reuses the eye fill."""
        self._pupil = None if style is None else _check_fill(style)

    # ---------- Logo ----------

    @property
    def logo(self) -> Optional[LogoTemplate]:
        return self._logo

    def set_logo(self, logo: Optional[LogoTemplate]) -> None:
        """
        Logo overlay, or None for no logo.

        Placement is checked against the matrix when the design is rendered.
        """
        if logo is not None and not isinstance(logo, LogoTemplate):
            raise TypeError(f"expected a LogoTemplate, got {logo!r}")
        self._logo = logo

    # ---------- Snapshot ----------

    def copy(self) -> Design:
        """Independent copy; generators are copied, fills and logo are immutable."""
        return Design(
            pixel_shape=self._pixel_shape.copy(),
            eye_shape=self._eye_shape.copy(),
            pupil_shape=None if self._pupil_shape is None else self._pupil_shape.copy(),
            background=self._background,
            on_pixels=self._on_pixels,
            eye=self._eye,
            pupil=self._pupil,
            logo=self._logo,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Design):
            return NotImplemented
        return (
            self._pixel_shape == other._pixel_shape
            and self._eye_shape == other._eye_shape
            and self._pupil_shape == other._pupil_shape
            and self._background == other._background
            and self._on_pixels == other._on_pixels
            and self._eye == other._eye
            and self._pupil == other._pupil
            and self._logo == other._logo
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Design(pixel={self._pixel_shape.name}, eye={self._eye_shape.name}, "
            f"pupil={self.actual_pupil_shape.name}, logo={self._logo is not None})"
        )


def _check_fill(style: object) -> FillStyle:
    if not isinstance(style, _FILL_TYPES):
        raise TypeError(f"expected a fill style, got {style!r}")
    return style  # type: ignore[return-value]
