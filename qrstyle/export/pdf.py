"""
PDF backend built on reportlab.

The page is one canvas of side ``model.size`` points. The coordinate
system is flipped so that document coordinates (origin top-left, y
down) are used unchanged. Page streams are left uncompressed.
"""

from __future__ import annotations

import logging
from io import BytesIO

from PIL import Image
from reportlab.lib import colors
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas as pdf_canvas
from reportlab.pdfgen.canvas import FILL_NON_ZERO

from qrstyle.compositor import GroupRole, RenderedImageModel
from qrstyle.fill import Color, ImagePattern, LinearGradient, Solid
from qrstyle.path import Close, CurveTo, LineTo, MoveTo, Path

logger = logging.getLogger(__name__)


def _pdf_color(color: Color) -> colors.Color:
    return colors.Color(color.r, color.g, color.b, alpha=color.a)


def _pdf_path(c: pdf_canvas.Canvas, path: Path):
    p = c.beginPath()
    for seg in path:
        if isinstance(seg, MoveTo):
            p.moveTo(seg.x, seg.y)
        elif isinstance(seg, LineTo):
            p.lineTo(seg.x, seg.y)
        elif isinstance(seg, CurveTo):
            p.curveTo(seg.c1x, seg.c1y, seg.c2x, seg.c2y, seg.x, seg.y)
        elif isinstance(seg, Close):
            p.close()
    return p


def _draw_image(
    c: pdf_canvas.Canvas, image: Image.Image, x: float, y: float, w: float, h: float
) -> None:
    # Images are drawn bottom-up, so undo the page flip locally.
    c.saveState()
    c.translate(x, y + h)
    c.scale(1, -1)
    c.drawImage(ImageReader(image), 0, 0, width=w, height=h, mask="auto")
    c.restoreState()


def to_pdf_bytes(model: RenderedImageModel) -> bytes:
    """
    PDF document for a composed model.

    Solid fills become filled paths, gradients are drawn as reportlab
    linear shadings clipped to the group outline, and image fills and
    the logo are clipped images.

    Returns
    -------
    bytes
        A single-page PDF.
    """
    size = model.size
    buf = BytesIO()
    c = pdf_canvas.Canvas(buf, pagesize=(size, size), pageCompression=0, invariant=1)
    c.translate(0, size)
    c.scale(1, -1)

    for group in model.groups:
        if group.is_empty:
            continue

        if group.role == GroupRole.LOGO:
            if group.image is None:
                continue
            c.saveState()
            c.clipPath(_pdf_path(c, group.path), stroke=0, fill=0, fillMode=FILL_NON_ZERO)
            _draw_image(c, group.image, *group.rect)
            c.restoreState()
            continue

        fill = group.fill
        if isinstance(fill, Solid):
            c.saveState()
            c.setFillColor(_pdf_color(fill.color))
            c.drawPath(_pdf_path(c, group.path), stroke=0, fill=1, fillMode=FILL_NON_ZERO)
            c.restoreState()
        elif isinstance(fill, LinearGradient):
            x1, y1, x2, y2 = fill.endpoints(size)
            c.saveState()
            c.clipPath(_pdf_path(c, group.path), stroke=0, fill=0, fillMode=FILL_NON_ZERO)
            c.linearGradient(
                x1, y1, x2, y2,
                [_pdf_color(s.color) for s in fill.stops],
                [s.position for s in fill.stops],
                extend=True,
            )
            c.restoreState()
        elif isinstance(fill, ImagePattern):
            c.saveState()
            c.clipPath(_pdf_path(c, group.path), stroke=0, fill=0, fillMode=FILL_NON_ZERO)
            _draw_image(c, fill.image, 0.0, 0.0, size, size)
            c.restoreState()
        else:
            raise TypeError(f"unsupported fill style {fill!r}")

    c.showPage()
    c.save()
    data = buf.getvalue()
    logger.debug("Wrote %d byte PDF at size %s", len(data), size)
    return data
