"""
Geometry composition: module matrix + design -> ordered, styled path groups.

The result, RenderedImageModel, is format-neutral. Exporters only
serialize or rasterize its groups and never derive geometry themselves,
which keeps every output format visually identical at a given size.
"""

from __future__ import annotations

import enum
import itertools
from dataclasses import dataclass
from functools import cached_property
from typing import Optional

import numpy as np
from PIL import Image

from qrstyle.design import Design, LogoTemplate
from qrstyle.fill import FillStyle, same_image
from qrstyle.matrix import ModuleMatrix
from qrstyle.path import Path, PathBuilder
from qrstyle.shapes.base import EyeShapeGenerator, NeighborContext

Rect = tuple[float, float, float, float]

# Units per module in the eye/pupil frame; the frame starts one module
# before the finder pattern.
EYE_UNITS_PER_MODULE = EyeShapeGenerator.FRAME_SIZE / 9.0


class GroupRole(str, enum.Enum):
    BACKGROUND = "background"
    ON_PIXELS = "on-pixels"
    EYE = "eye"
    PUPIL = "pupil"
    LOGO = "logo"


@dataclass(frozen=True, eq=False)
class PathGroup:
    """
    Shapes that share one fill.

    Parameters
    ----------
    role : GroupRole
        What the group draws.
    paths : tuple of Path
        Shapes in document coordinates, filled with the non-zero rule.
    fill : FillStyle or None
        Fill for the shapes. None for the logo group, which is filled
        with `image` instead.
    image : PIL.Image.Image, optional
        Logo image stretched over `rect`; only set on the logo group.
    rect : tuple of float, optional
        Logo placement (x, y, width, height) in document coordinates.
    """

    role: GroupRole
    paths: tuple[Path, ...]
    fill: Optional[FillStyle]
    image: Optional[Image.Image] = None
    rect: Optional[Rect] = None

    @cached_property
    def path(self) -> Path:
        """All shapes of the group merged into one path, built on first use."""
        return Path(tuple(itertools.chain.from_iterable(p.segments for p in self.paths)))

    @property
    def is_empty(self) -> bool:
        return all(p.is_empty for p in self.paths)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathGroup):
            return NotImplemented
        if (self.role, self.paths, self.fill, self.rect) != (
            other.role, other.paths, other.fill, other.rect
        ):
            return False
        if self.image is None or other.image is None:
            return self.image is other.image
        return same_image(self.image, other.image)

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class RenderedImageModel:
    """
    Composed, format-neutral rendering of a QR symbol.

    Attributes
    ----------
    size : float
        Canvas side length (the canvas is square).
    module_size : float
        Side length of one module in canvas units.
    quiet_zone : int
        Empty border, in modules, on each side of the symbol.
    matrix : ModuleMatrix
        The source matrix; text exporters render from it directly.
    groups : tuple of PathGroup
        Groups in paint order: background, on-pixels, the three eyes,
        the three pupils, then the logo when present.
    """

    size: float
    module_size: float
    quiet_zone: int
    matrix: ModuleMatrix
    groups: tuple[PathGroup, ...]

    def groups_with_role(self, role: GroupRole) -> list[PathGroup]:
        return [g for g in self.groups if g.role == role]


def logo_mask(logo: LogoTemplate, module_count: int) -> np.ndarray:
    """Boolean (N, N) mask of modules the logo area overlaps."""
    x, y, w, h = logo.rect
    idx = np.arange(module_count)
    cols = (idx < x + w) & (idx + 1 > x)
    rows = (idx < y + h) & (idx + 1 > y)
    return rows[:, None] & cols[None, :]


def pixel_mask(matrix: ModuleMatrix, logo: Optional[LogoTemplate]) -> np.ndarray:
    """On-modules drawn by the pixel generator: not in a finder and not under the logo."""
    mask = matrix.modules & ~matrix.finder_mask()
    if logo is not None:
        mask &= ~logo_mask(logo, matrix.size)
    return mask


def compose(
    matrix: ModuleMatrix,
    design: Design,
    size: float,
    *,
    quiet_zone: int = 0,
) -> RenderedImageModel:
    """
    Build the ordered path groups for `matrix` drawn with `design`.

    Parameters
    ----------
    matrix : ModuleMatrix
        Module matrix to draw. It is only read.
    design : Design
        Shapes and fills. Callers pass a snapshot; it is only read.
    size : float
        Canvas side length. Must already be validated as positive.
    quiet_zone : int, optional
        Empty border in modules on each side. The default is 0.

    Returns
    -------
    RenderedImageModel
        Composed geometry.

    Notes
    -----
    Each module maps to the square ``(offset + col*m, offset + row*m)``
    of side ``m = size / (N + 2*quiet_zone)``. Coordinates are not
    rounded; rasterizers decide how to sample them.
    """
    module = size / (matrix.size + 2 * quiet_zone)
    offset = quiet_zone * module

    groups: list[PathGroup] = [
        PathGroup(
            GroupRole.BACKGROUND,
            (PathBuilder().rect(0.0, 0.0, size, size).build(),),
            design.background_style,
        )
    ]

    # ---------- Data modules ----------

    generator = design.pixel_shape
    drawn = pixel_mask(matrix, design.logo)
    unit_paths: dict[NeighborContext, Path] = {}
    pixel_paths: list[Path] = []
    for row, col in np.argwhere(drawn):
        if generator.uses_context:
            context = NeighborContext.from_mask(drawn, int(row), int(col))
        else:
            context = NeighborContext()
        unit = unit_paths.get(context)
        if unit is None:
            unit = unit_paths[context] = generator.path(context)
        pixel_paths.append(
            unit.transformed(module, offset + int(col) * module, offset + int(row) * module)
        )
    groups.append(PathGroup(GroupRole.ON_PIXELS, tuple(pixel_paths), design.on_pixel_style))

    # ---------- Finder eyes and pupils ----------

    scale = module / EYE_UNITS_PER_MODULE
    eye_path = design.eye_shape.path()
    pupil_path = design.actual_pupil_shape.path()
    origins = [
        (offset + (col - 1) * module, offset + (row - 1) * module)
        for col, row in matrix.finder_origins()
    ]
    for dx, dy in origins:
        groups.append(PathGroup(
            GroupRole.EYE, (eye_path.transformed(scale, dx, dy),), design.actual_eye_style
        ))
    for dx, dy in origins:
        groups.append(PathGroup(
            GroupRole.PUPIL, (pupil_path.transformed(scale, dx, dy),), design.actual_pupil_style
        ))

    # ---------- Logo ----------

    logo = design.logo
    if logo is not None:
        x, y, w, h = logo.rect
        rect = (offset + x * module, offset + y * module, w * module, h * module)
        radius = logo.corner_radius_fraction * min(rect[2], rect[3]) / 2.0
        shape = PathBuilder().rounded_rect(*rect, radius).build()
        groups.append(PathGroup(GroupRole.LOGO, (shape,), None, image=logo.image, rect=rect))

    return RenderedImageModel(
        size=float(size),
        module_size=module,
        quiet_zone=quiet_zone,
        matrix=matrix,
        groups=tuple(groups),
    )
