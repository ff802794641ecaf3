"""
Resolved generator configuration.

GeneratorConfig gathers everything needed to produce one QR artifact
(payload, canvas size, output format, shapes, colors, logo) and turns it
into the library objects that do the work.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from PIL import Image

from qrstyle.design import Design, LogoTemplate
from qrstyle.document import Document, check_dimension
from qrstyle.export import ExportFormat
from qrstyle.fill import Color, Solid
from qrstyle.matrix import ECC_LEVELS, ModuleMatrix
from qrstyle.registry import EYE_SHAPES, PIXEL_SHAPES, PUPIL_SHAPES
from qrstyle.settings import SettingKey

# Logo side as a fraction of the grid when only an image is given.
DEFAULT_LOGO_SIZE = 0.25


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Immutable configuration for generating one styled QR code.

    Parameters
    ----------
    text : str
        Payload encoded into the QR code. Must be a non-empty string.
    dimension : float
        Canvas side length. Must be positive and finite.
    output_format : str, optional
        Export format name, case-insensitive. The default is 'png'.
    output_file : str, optional
        Destination path for file formats. The default is None.
    compression : float, optional
        Compression factor for png/jpg, clamped to [0, 1]. The default
        is 1.0.
    error_correction : {'L', 'M', 'Q', 'H'}, optional
        Error-correction level. The value is case-insensitive and is
        normalized to uppercase. The default is 'M'.
    pixel_shape : str, optional
        Data module shape name. The default is 'square'.
    pixel_settings : mapping, optional
        Settings for the data module shape, keyed by setting name
        (``insetFraction``, ``cornerRadiusFraction``, ``hasInnerCorners``).
    eye_shape, pupil_shape : str, optional
        Eye and pupil shape names. None keeps the default eye and the
        eye's own pupil.
    eye_corner_radius, pupil_corner_radius : float, optional
        Corner radius fraction, applied only if the shape supports it.
    background_color, data_color, eye_color, pupil_color : str, optional
        Colors as ``"r,g,b,a"`` strings with components in [0, 1].
    quiet_zone : int, optional
        Empty border in modules. The default is 0.
    logo_image_file : str, optional
        Image drawn into the logo area.
    logo_rect : tuple of float, optional
        Logo area (x, y, width, height) in modules. When only an image
        is given, a centred area of DEFAULT_LOGO_SIZE is used.
    logo_corner_radius : float, optional
        Logo corner radius fraction in [0, 1]. The default is 0.

    Raises
    ------
    ValueError
        If any value is malformed. ``InvalidDimension`` and
        ``UnsupportedFormat`` are ValueError subclasses.
    """

    text: str
    dimension: float
    output_format: str = "png"
    output_file: Optional[str] = None
    compression: float = 1.0
    error_correction: str = "M"
    pixel_shape: str = "square"
    pixel_settings: Mapping[str, Any] = field(default_factory=dict)
    eye_shape: Optional[str] = None
    eye_corner_radius: Optional[float] = None
    pupil_shape: Optional[str] = None
    pupil_corner_radius: Optional[float] = None
    background_color: Optional[str] = None
    data_color: Optional[str] = None
    eye_color: Optional[str] = None
    pupil_color: Optional[str] = None
    quiet_zone: int = 0
    logo_image_file: Optional[str] = None
    logo_rect: Optional[tuple[float, float, float, float]] = None
    logo_corner_radius: float = 0.0

    def __post_init__(self) -> None:
        if not isinstance(self.text, str) or not self.text:
            raise ValueError("'text' must be a non-empty string")

        object.__setattr__(self, "dimension", check_dimension(self.dimension))
        object.__setattr__(self, "output_format", ExportFormat.parse(self.output_format).value)

        compression = float(self.compression)
        if math.isnan(compression):
            raise ValueError("'compression' must be a number")
        object.__setattr__(self, "compression", max(0.0, min(1.0, compression)))

        ecc_upper = self.error_correction.strip().upper()[:1]
        if ecc_upper not in ECC_LEVELS:
            raise ValueError("'error_correction' must be one of {'L', 'M', 'Q', 'H'}")
        object.__setattr__(self, "error_correction", ecc_upper)

        if isinstance(self.quiet_zone, bool) or not isinstance(self.quiet_zone, int) or self.quiet_zone < 0:
            raise ValueError("'quiet_zone' must be a non-negative integer")

        # Fail early on malformed colors.
        for name in ("background_color", "data_color", "eye_color", "pupil_color"):
            value = getattr(self, name)
            if value is not None:
                Color.from_rgba_string(value)

        if self.logo_rect is not None:
            rect = tuple(float(v) for v in self.logo_rect)
            if len(rect) != 4:
                raise ValueError("'logo_rect' must be (x, y, width, height)")
            object.__setattr__(self, "logo_rect", rect)
        if not 0.0 <= self.logo_corner_radius <= 1.0:
            raise ValueError("'logo_corner_radius' must be in [0, 1]")

        object.__setattr__(self, "pixel_settings", dict(self.pixel_settings))

    @property
    def export_format(self) -> ExportFormat:
        return ExportFormat(self.output_format)

    @property
    def has_logo(self) -> bool:
        return self.logo_image_file is not None or self.logo_rect is not None

    def build_matrix(self) -> ModuleMatrix:
        """Encode `text` with the configured error correction."""
        return ModuleMatrix.from_text(self.text, ecc=self.error_correction)

    def build_design(self, module_count: Optional[int] = None) -> Design:
        """
        Build the Design described by this configuration.

        Parameters
        ----------
        module_count : int, optional
            Side of the module matrix. Only needed to centre a logo
            when no `logo_rect` is given.

        Raises
        ------
        UnknownShapeName
            If a shape name is not registered.
        UnsupportedSetting
            If the pixel shape does not accept one of `pixel_settings`.
        OSError
            If the logo image cannot be read.
        """
        design = Design(pixel_shape=PIXEL_SHAPES.create(self.pixel_shape, self.pixel_settings))

        if self.eye_shape is not None:
            design.set_eye_shape(EYE_SHAPES.create(self.eye_shape))
        if self.eye_corner_radius is not None:
            design.eye_shape.try_set_setting(
                SettingKey.CORNER_RADIUS_FRACTION, self.eye_corner_radius
            )

        if self.pupil_shape is not None:
            design.set_pupil_shape(PUPIL_SHAPES.create(self.pupil_shape))
        if self.pupil_corner_radius is not None:
            pupil = design.actual_pupil_shape
            if pupil.try_set_setting(SettingKey.CORNER_RADIUS_FRACTION, self.pupil_corner_radius):
                design.set_pupil_shape(pupil)

        if self.background_color is not None:
            design.set_background_style(Solid(Color.from_rgba_string(self.background_color)))
        if self.data_color is not None:
            design.set_on_pixel_style(Solid(Color.from_rgba_string(self.data_color)))
        if self.eye_color is not None:
            design.set_eye_style(Solid(Color.from_rgba_string(self.eye_color)))
        if self.pupil_color is not None:
            design.set_pupil_style(Solid(Color.from_rgba_string(self.pupil_color)))

        if self.has_logo:
            design.set_logo(self._build_logo(module_count))
        return design

    def _build_logo(self, module_count: Optional[int]) -> LogoTemplate:
        image = None
        if self.logo_image_file is not None:
            with Image.open(self.logo_image_file) as img:
                image = img.convert("RGBA")
        if self.logo_rect is not None:
            return LogoTemplate(self.logo_rect, self.logo_corner_radius, image)
        if module_count is None:
            raise ValueError("a module count is needed to centre the logo")
        return LogoTemplate.centered(
            module_count,
            DEFAULT_LOGO_SIZE,
            corner_radius_fraction=self.logo_corner_radius,
            image=image,
        )

    def build_document(self) -> Document:
        """Matrix and design bound together, ready to export."""
        matrix = self.build_matrix()
        return Document(matrix, self.build_design(matrix.size), quiet_zone=self.quiet_zone)
