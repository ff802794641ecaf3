"""
Format-agnostic export of a composed model.

Every backend receives the same RenderedImageModel and only serializes
or rasterizes its groups, so all formats show the same picture.
"""

from __future__ import annotations

import enum
import logging
from typing import Union

from PIL import Image

from qrstyle.compositor import RenderedImageModel
from qrstyle.errors import UnsupportedFormat
from qrstyle.export.pdf import to_pdf_bytes
from qrstyle.export.raster import render_image, to_jpeg_bytes, to_png_bytes
from qrstyle.export.svg import to_svg
from qrstyle.export.text import ascii_text, small_ascii_text

logger = logging.getLogger(__name__)


class ExportFormat(str, enum.Enum):
    PNG = "png"
    JPG = "jpg"
    PDF = "pdf"
    SVG = "svg"
    ASCII = "ascii"
    SMALL_ASCII = "smallascii"
    CLIPBOARD = "clipboard"

    @property
    def is_text(self) -> bool:
        return self in (ExportFormat.ASCII, ExportFormat.SMALL_ASCII)

    @classmethod
    def parse(cls, fmt: Union[str, ExportFormat]) -> ExportFormat:
        """
        Look up a format by name, case-insensitively; ``jpeg`` is accepted for ``jpg``.

        Raises
        ------
        UnsupportedFormat
            If the name is not a known format.
        """
        if isinstance(fmt, ExportFormat):
            return fmt
        key = str(fmt).strip().lower()
        if key == "jpeg":
            key = "jpg"
        try:
            return cls(key)
        except ValueError:
            raise UnsupportedFormat(fmt, [f.value for f in cls]) from None


def export(
    model: RenderedImageModel,
    fmt: Union[str, ExportFormat],
    *,
    compression: float = 1.0,
) -> Union[bytes, Image.Image]:
    """
    Export a composed model.

    Parameters
    ----------
    model : RenderedImageModel
        Output of ``Document.render``.
    fmt : str or ExportFormat
        One of png, jpg, pdf, svg, ascii, smallascii, clipboard.
    compression : float, optional
        Compression factor for png and jpg, clamped to [0, 1]. Other
        formats ignore it. The default is 1.0.

    Returns
    -------
    bytes or PIL.Image.Image
        Encoded bytes (text formats as UTF-8), or an RGBA image handle
        for ``clipboard``; writing it to a clipboard is up to the caller.

    Raises
    ------
    UnsupportedFormat
        If `fmt` is not a known format.
    """
    kind = ExportFormat.parse(fmt)
    compression = max(0.0, min(1.0, float(compression)))
    logger.debug("Exporting %s at size %s", kind.value, model.size)

    if kind is ExportFormat.PNG:
        return to_png_bytes(model, compression=compression)
    if kind is ExportFormat.JPG:
        return to_jpeg_bytes(model, compression=compression)
    if kind is ExportFormat.PDF:
        return to_pdf_bytes(model)
    if kind is ExportFormat.SVG:
        return to_svg(model).encode("utf-8")
    if kind is ExportFormat.ASCII:
        return ascii_text(model).encode("utf-8")
    if kind is ExportFormat.SMALL_ASCII:
        return small_ascii_text(model).encode("utf-8")
    return render_image(model)


__all__ = [
    "ExportFormat",
    "export",
    "render_image",
    "to_svg",
]
