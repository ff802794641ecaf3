"""Write SVG markup from a composed model."""

from __future__ import annotations

import base64
from io import BytesIO

from PIL import Image

from qrstyle.compositor import GroupRole, RenderedImageModel
from qrstyle.fill import Color, FillStyle, ImagePattern, LinearGradient, Solid
from qrstyle.path import fmt_number


def _color_attrs(prefix: str, color: Color) -> str:
    attrs = f'{prefix}="{color.hex}"'
    if color.a < 1.0:
        attrs += f' {prefix}-opacity="{fmt_number(color.a)}"'
    return attrs


def _png_data_uri(image: Image.Image) -> str:
    buf = BytesIO()
    image.save(buf, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buf.getvalue()).decode("ascii")


def _gradient_def(ident: str, fill: LinearGradient, size: float) -> str:
    x1, y1, x2, y2 = fill.endpoints(size)
    stops = "".join(
        f'<stop offset="{fmt_number(s.position)}" {_color_attrs("stop-color", s.color)}/>'
        for s in fill.stops
    )
    return (
        f'<linearGradient id="{ident}" gradientUnits="userSpaceOnUse" '
        f'x1="{fmt_number(x1)}" y1="{fmt_number(y1)}" x2="{fmt_number(x2)}" y2="{fmt_number(y2)}">'
        f"{stops}</linearGradient>"
    )


def to_svg(model: RenderedImageModel) -> str:
    """
    SVG document for a composed model.

    Every group becomes one ``<path>`` using the default non-zero fill
    rule. Image fills and the logo are drawn as ``<image>`` elements
    clipped to the group's outline.
    """
    size = fmt_number(model.size)
    defs: list[str] = []
    body: list[str] = []
    fill_ids: dict[int, str] = {}
    pattern_uris: dict[int, str] = {}

    for index, group in enumerate(model.groups):
        if group.is_empty:
            continue
        d = group.path.svg_data()

        if group.role == GroupRole.LOGO:
            if group.image is None:
                continue
            x, y, w, h = group.rect
            clip = f"clip-{index}"
            defs.append(f'<clipPath id="{clip}"><path d="{d}"/></clipPath>')
            body.append(
                f'<image x="{fmt_number(x)}" y="{fmt_number(y)}" width="{fmt_number(w)}" height="{fmt_number(h)}" '
                f'preserveAspectRatio="none" clip-path="url(#{clip})" '
                f'xlink:href="{_png_data_uri(group.image)}"/>'
            )
            continue

        fill: FillStyle = group.fill
        if isinstance(fill, Solid):
            body.append(f'<path d="{d}" {_color_attrs("fill", fill.color)}/>')
        elif isinstance(fill, LinearGradient):
            ident = fill_ids.get(id(fill))
            if ident is None:
                ident = fill_ids[id(fill)] = f"fill-{index}"
                defs.append(_gradient_def(ident, fill, model.size))
            body.append(f'<path d="{d}" fill="url(#{ident})"/>')
        elif isinstance(fill, ImagePattern):
            uri = pattern_uris.get(id(fill))
            if uri is None:
                uri = pattern_uris[id(fill)] = _png_data_uri(fill.image)
            clip = f"clip-{index}"
            defs.append(f'<clipPath id="{clip}"><path d="{d}"/></clipPath>')
            body.append(
                f'<image x="0" y="0" width="{size}" height="{size}" '
                f'preserveAspectRatio="none" clip-path="url(#{clip})" xlink:href="{uri}"/>'
            )
        else:
            raise TypeError(f"unsupported fill style {fill!r}")

    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" '
        f'width="{size}" height="{size}" viewBox="0 0 {size} {size}">',
    ]
    if defs:
        lines.append("  <defs>")
        lines.extend(f"    {item}" for item in defs)
        lines.append("  </defs>")
    lines.extend(f"  {item}" for item in body)
    lines.append("</svg>")
    return "\n".join(lines) + "\n"
