"""
Vector path primitives used by every shape generator and exporter.

A Path is an immutable sequence of move/line/cubic/close segments.
Generators build paths with PathBuilder in their own local frame; the
compositor moves them into document coordinates with ``transformed``.
Filling always uses the non-zero winding rule, so holes (for example the
inside of an eye ring) are drawn with the opposite winding direction.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence, Union

import numpy as np

# Control point distance for approximating a quarter circle with a cubic.
KAPPA = 0.5522847498307936


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class CurveTo:
    c1x: float
    c1y: float
    c2x: float
    c2y: float
    x: float
    y: float


@dataclass(frozen=True)
class Close:
    pass


Segment = Union[MoveTo, LineTo, CurveTo, Close]


def fmt_number(value: float) -> str:
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


@dataclass(frozen=True)
class Path:
    """
    Immutable vector path.

    Parameters
    ----------
    segments : tuple of Segment
        Drawing primitives in order. Each subpath starts with a MoveTo.
    """

    segments: tuple[Segment, ...] = ()

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __add__(self, other: Path) -> Path:
        return Path(self.segments + other.segments)

    @property
    def is_empty(self) -> bool:
        return not self.segments

    # ---------- Geometry ----------

    def transformed(self, scale: float, dx: float = 0.0, dy: float = 0.0) -> Path:
        """
        Return a copy scaled uniformly about the origin and then translated.

        Parameters
        ----------
        scale : float
            Uniform scale factor.
        dx, dy : float, optional
            Translation applied after scaling. The defaults are 0.

        Returns
        -------
        Path
            New path with every point mapped to ``(x*scale+dx, y*scale+dy)``.
        """
        out: list[Segment] = []
        for seg in self.segments:
            if isinstance(seg, MoveTo):
                out.append(MoveTo(seg.x * scale + dx, seg.y * scale + dy))
            elif isinstance(seg, LineTo):
                out.append(LineTo(seg.x * scale + dx, seg.y * scale + dy))
            elif isinstance(seg, CurveTo):
                out.append(CurveTo(
                    seg.c1x * scale + dx, seg.c1y * scale + dy,
                    seg.c2x * scale + dx, seg.c2y * scale + dy,
                    seg.x * scale + dx, seg.y * scale + dy,
                ))
            else:
                out.append(seg)
        return Path(tuple(out))

    def reversed(self) -> Path:
        """Return the same outline drawn with the opposite winding."""
        out: list[Segment] = []
        for sub in self._subpaths():
            start = sub[0]
            body = [s for s in sub[1:] if not isinstance(s, Close)]
            closed = isinstance(sub[-1], Close)
            points = [(start.x, start.y)] + [(s.x, s.y) for s in body]
            out.append(MoveTo(*points[-1]))
            for i in range(len(body) - 1, -1, -1):
                seg = body[i]
                px, py = points[i]
                if isinstance(seg, CurveTo):
                    out.append(CurveTo(seg.c2x, seg.c2y, seg.c1x, seg.c1y, px, py))
                else:
                    out.append(LineTo(px, py))
            if closed:
                out.append(Close())
        return Path(tuple(out))

    def points(self) -> np.ndarray:
        """
        All coordinates of the path, control points included.

        Returns
        -------
        numpy.ndarray
            Float array of shape (N, 2).
        """
        pts: list[tuple[float, float]] = []
        for seg in self.segments:
            if isinstance(seg, CurveTo):
                pts.extend([(seg.c1x, seg.c1y), (seg.c2x, seg.c2y), (seg.x, seg.y)])
            elif not isinstance(seg, Close):
                pts.append((seg.x, seg.y))
        return np.array(pts, dtype=float).reshape(-1, 2)

    def bounds(self) -> tuple[float, float, float, float]:
        """Control-point bounding box as (min_x, min_y, max_x, max_y)."""
        pts = self.points()
        if len(pts) == 0:
            return (0.0, 0.0, 0.0, 0.0)
        lo = pts.min(axis=0)
        hi = pts.max(axis=0)
        return (float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1]))

    def _subpaths(self) -> list[list[Segment]]:
        subs: list[list[Segment]] = []
        for seg in self.segments:
            if isinstance(seg, MoveTo):
                subs.append([seg])
            elif subs:
                subs[-1].append(seg)
        return subs

    # ---------- Serialization ----------

    def svg_data(self) -> str:
        """SVG path data (the ``d`` attribute) for this path."""
        parts: list[str] = []
        for seg in self.segments:
            if isinstance(seg, MoveTo):
                parts.append(f"M{fmt_number(seg.x)} {fmt_number(seg.y)}")
            elif isinstance(seg, LineTo):
                parts.append(f"L{fmt_number(seg.x)} {fmt_number(seg.y)}")
            elif isinstance(seg, CurveTo):
                parts.append(
                    f"C{fmt_number(seg.c1x)} {fmt_number(seg.c1y)} {fmt_number(seg.c2x)} "
                    f"{fmt_number(seg.c2y)} {fmt_number(seg.x)} {fmt_number(seg.y)}"
                )
            else:
                parts.append("Z")
        return "".join(parts)


class PathBuilder:
    """
    Mutable helper for assembling a Path.

    Shape helpers draw clockwise on screen (y axis pointing down) unless
    ``clockwise=False`` is passed, which is how holes are cut.
    """

    def __init__(self) -> None:
        self._segments: list[Segment] = []
        self._current: tuple[float, float] | None = None

    def move_to(self, x: float, y: float) -> PathBuilder:
        self._segments.append(MoveTo(x, y))
        self._current = (x, y)
        return self

    def line_to(self, x: float, y: float) -> PathBuilder:
        self._segments.append(LineTo(x, y))
        self._current = (x, y)
        return self

    def curve_to(
        self,
        c1x: float, c1y: float,
        c2x: float, c2y: float,
        x: float, y: float,
    ) -> PathBuilder:
        self._segments.append(CurveTo(c1x, c1y, c2x, c2y, x, y))
        self._current = (x, y)
        return self

    def close(self) -> PathBuilder:
        self._segments.append(Close())
        return self

    def rect(
        self, x: float, y: float, w: float, h: float, *, clockwise: bool = True
    ) -> PathBuilder:
        return self.rounded_rect(x, y, w, h, 0.0, clockwise=clockwise)

    def rounded_rect(
        self,
        x: float,
        y: float,
        w: float,
        h: float,
        radius: float | Sequence[float],
        *,
        clockwise: bool = True,
    ) -> PathBuilder:
        """
        Rectangle with circular corners.

        Parameters
        ----------
        x, y, w, h : float
            Rectangle origin (top-left) and size.
        radius : float or sequence of 4 floats
            Corner radius, or per-corner radii ordered top-left,
            top-right, bottom-right, bottom-left. Each radius is clamped
            to half of the shorter side.
        clockwise : bool, optional
            Winding direction. The default is True.
        """
        if isinstance(radius, (int, float)):
            radii = [float(radius)] * 4
        else:
            radii = [float(r) for r in radius]
        limit = min(w, h) / 2.0
        tl, tr, br, bl = (max(0.0, min(limit, r)) for r in radii)
        return self.rounded_polygon(
            [(x, y, tl), (x + w, y, tr), (x + w, y + h, br), (x, y + h, bl)],
            clockwise=clockwise,
        )

    def rounded_polygon(
        self,
        corners: Sequence[tuple[float, float, float]],
        *,
        clockwise: bool = True,
    ) -> PathBuilder:
        """
        Closed convex polygon whose corners are rounded by quarter-arc cubics.

        Parameters
        ----------
        corners : sequence of (x, y, radius)
            Polygon vertices in clockwise screen order with the rounding
            radius for each vertex. A radius of 0 keeps a sharp corner.
        clockwise : bool, optional
            If False the vertices are walked in reverse. The default is True.
        """
        pts = list(corners) if clockwise else list(reversed(corners))
        n = len(pts)
        for i, (cx, cy, r) in enumerate(pts):
            px, py, _ = pts[i - 1]
            nx, ny, _ = pts[(i + 1) % n]
            ax, ay = _toward(cx, cy, px, py, r)
            bx, by = _toward(cx, cy, nx, ny, r)
            if i == 0:
                self.move_to(ax, ay)
            elif self._current != (ax, ay):
                self.line_to(ax, ay)
            if r > 0:
                self.curve_to(
                    ax + KAPPA * (cx - ax), ay + KAPPA * (cy - ay),
                    bx + KAPPA * (cx - bx), by + KAPPA * (cy - by),
                    bx, by,
                )
        return self.close()

    def ellipse(
        self, x: float, y: float, w: float, h: float, *, clockwise: bool = True
    ) -> PathBuilder:
        """Ellipse inscribed in the rectangle (x, y, w, h)."""
        rx, ry = w / 2.0, h / 2.0
        cx, cy = x + rx, y + ry
        kx, ky = rx * KAPPA, ry * KAPPA
        self.move_to(cx + rx, cy)
        if clockwise:
            self.curve_to(cx + rx, cy + ky, cx + kx, cy + ry, cx, cy + ry)
            self.curve_to(cx - kx, cy + ry, cx - rx, cy + ky, cx - rx, cy)
            self.curve_to(cx - rx, cy - ky, cx - kx, cy - ry, cx, cy - ry)
            self.curve_to(cx + kx, cy - ry, cx + rx, cy - ky, cx + rx, cy)
        else:
            self.curve_to(cx + rx, cy - ky, cx + kx, cy - ry, cx, cy - ry)
            self.curve_to(cx - kx, cy - ry, cx - rx, cy - ky, cx - rx, cy)
            self.curve_to(cx - rx, cy + ky, cx - kx, cy + ry, cx, cy + ry)
            self.curve_to(cx + kx, cy + ry, cx + rx, cy + ky, cx + rx, cy)
        return self.close()

    def build(self) -> Path:
        return Path(tuple(self._segments))


def _toward(cx: float, cy: float, px: float, py: float, dist: float) -> tuple[float, float]:
    if dist <= 0:
        return (cx, cy)
    length = math.hypot(px - cx, py - cy)
    if length == 0:
        return (cx, cy)
    return (cx + (px - cx) / length * dist, cy + (py - cy) / length * dist)
