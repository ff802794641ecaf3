"""
Raster backend: composed path groups -> RGBA pixels -> PNG/JPEG bytes.

The model is written out as SVG and rasterized by CairoSVG, so raster
output shows exactly what the vector output describes. The canvas has
``round(size)`` pixels per side; CairoSVG scales the ``size`` viewBox
onto it, so non-integer sizes stay proportional.
"""

from __future__ import annotations

from io import BytesIO

import cairosvg
import numpy as np
from PIL import Image

from qrstyle.compositor import RenderedImageModel
from qrstyle.export.svg import to_svg


def canvas_pixels(size: float) -> int:
    """Pixel side length for a canvas of side `size`."""
    return max(1, int(round(size)))


def render_image(model: RenderedImageModel) -> Image.Image:
    """
    Rasterize a composed model.

    Parameters
    ----------
    model : RenderedImageModel
        Output of ``Document.render``.

    Returns
    -------
    PIL.Image.Image
        RGBA image of ``round(model.size)`` pixels per side.
    """
    pixels = canvas_pixels(model.size)
    png = cairosvg.svg2png(
        bytestring=to_svg(model).encode("utf-8"),
        output_width=pixels,
        output_height=pixels,
    )
    with Image.open(BytesIO(png)) as img:
        return img.convert("RGBA")


def render_array(model: RenderedImageModel) -> np.ndarray:
    """Rasterized model as a uint8 array of shape (H, W, 4) in RGBA order."""
    return np.asarray(render_image(model), dtype=np.uint8)


def to_png_bytes(model: RenderedImageModel, *, compression: float = 1.0) -> bytes:
    """
    PNG-encoded bytes.

    Parameters
    ----------
    compression : float, optional
        Compression factor in [0, 1]; 1.0 favours speed (least zlib
        effort), 0.0 the smallest file. The default is 1.0.
    """
    level = int(round((1.0 - compression) * 9))
    buf = BytesIO()
    render_image(model).save(buf, format="PNG", compress_level=level)
    return buf.getvalue()


def to_jpeg_bytes(model: RenderedImageModel, *, compression: float = 1.0) -> bytes:
    """
    JPEG-encoded bytes, flattened onto white.

    Parameters
    ----------
    compression : float, optional
        Compression factor in [0, 1]; 1.0 is the best quality. The
        default is 1.0.
    """
    img = render_image(model)
    white = Image.new("RGBA", img.size, (255, 255, 255, 255))
    flat = Image.alpha_composite(white, img).convert("RGB")
    buf = BytesIO()
    flat.save(buf, format="JPEG", quality=int(round(1 + compression * 94)))
    return buf.getvalue()
