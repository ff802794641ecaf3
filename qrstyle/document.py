"""
Document: a module matrix bound to a design, ready to render and export.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Optional, Union

from PIL import Image

from qrstyle.compositor import RenderedImageModel, compose
from qrstyle.design import Design
from qrstyle.errors import InvalidDimension
from qrstyle.export import export
from qrstyle.matrix import MatrixLike, ModuleMatrix


def check_dimension(size: object) -> float:
    """Return `size` as a float, or raise InvalidDimension."""
    if isinstance(size, bool) or not isinstance(size, numbers.Real):
        raise InvalidDimension(size)
    value = float(size)
    if not math.isfinite(value) or value <= 0:
        raise InvalidDimension(size)
    return value


def render(
    matrix: ModuleMatrix,
    design: Design,
    size: float,
    *,
    quiet_zone: int = 0,
) -> RenderedImageModel:
    """
    Compose `matrix` with a snapshot of `design` at canvas side `size`.

    Raises
    ------
    InvalidDimension
        If `size` is not a positive finite number.
    InvalidLogoPlacement
        If the design's logo area is empty, leaves the grid, or overlaps
        a finder eye.
    """
    value = check_dimension(size)
    snapshot = design.copy()
    if snapshot.logo is not None:
        snapshot.logo.check_placement(matrix.size)
    return compose(matrix, snapshot, value, quiet_zone=quiet_zone)


class Document:
    """
    QR module matrix plus the design used to draw it.

    Parameters
    ----------
    matrix : ModuleMatrix or array-like of bool
        Module matrix from the QR encoder. Array input is wrapped in a
        ModuleMatrix (and validated there).
    design : Design, optional
        Design to draw with. The default is a fresh ``Design()``.
    quiet_zone : int, optional
        Empty border in modules on each side. The default is 0.

    Examples
    --------
    >>> doc = Document(ModuleMatrix.from_text("https://example.com"))
    >>> png = doc.export(512, "png")
    """

    def __init__(
        self,
        matrix: Union[ModuleMatrix, MatrixLike],
        design: Optional[Design] = None,
        *,
        quiet_zone: int = 0,
    ) -> None:
        if not isinstance(matrix, ModuleMatrix):
            matrix = ModuleMatrix(matrix)
        if isinstance(quiet_zone, bool) or not isinstance(quiet_zone, int) or quiet_zone < 0:
            raise ValueError("'quiet_zone' must be a non-negative integer")
        self._matrix = matrix
        self.design = design if design is not None else Design()
        self.quiet_zone = quiet_zone

    @classmethod
    def from_text(
        cls,
        data: str,
        *,
        ecc: str = "M",
        design: Optional[Design] = None,
        quiet_zone: int = 0,
    ) -> Document:
        return cls(ModuleMatrix.from_text(data, ecc=ecc), design, quiet_zone=quiet_zone)

    @property
    def matrix(self) -> ModuleMatrix:
        return self._matrix

    def render(self, size: float) -> RenderedImageModel:
        """
        Render at canvas side `size`.

        Parameters
        ----------
        size : float
            Canvas side length; need not be an integer.

        Returns
        -------
        RenderedImageModel
            Composed geometry. Equal inputs give equal models.

        Raises
        ------
        InvalidDimension
            If `size` is not a positive finite number.
        InvalidLogoPlacement
            If the logo area overlaps a finder eye or leaves the grid.
        """
        return render(self._matrix, self.design, size, quiet_zone=self.quiet_zone)

    def export(self, size: float, fmt: str, **options: Any) -> Union[bytes, Image.Image]:
        """Render at `size` and export to `fmt`; see ``qrstyle.export.export``."""
        return export(self.render(size), fmt, **options)
