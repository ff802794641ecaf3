"""
Fill styles applied to groups of paths.

A fill is independent of geometry: Solid paints one color,
LinearGradient blends color stops across the whole canvas, and
ImagePattern stretches an image over the whole canvas and shows it
through the group's shapes.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Union

import numpy as np
from PIL import Image

ImageLike = Union[np.ndarray, Image.Image]


@dataclass(frozen=True)
class Color:
    """
    RGBA color with every channel in [0, 1].

    Raises
    ------
    ValueError
        If a channel is outside [0, 1] or not a number.
    """

    r: float
    g: float
    b: float
    a: float = 1.0

    def __post_init__(self) -> None:
        for channel in ("r", "g", "b", "a"):
            value = getattr(self, channel)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ValueError(f"color channel '{channel}' must be a number")
            if not 0.0 <= float(value) <= 1.0:
                raise ValueError(f"color channel '{channel}' must be in [0, 1], got {value}")
            object.__setattr__(self, channel, float(value))

    @classmethod
    def from_rgba_string(cls, text: str) -> Color:
        """
        Parse an ``"r,g,b,a"`` string such as ``"1.0,0.5,0.5,1.0"``.

        The alpha component may be omitted and defaults to 1.0.
        """
        parts = [p.strip() for p in text.split(",")]
        if len(parts) not in (3, 4):
            raise ValueError(f"expected 'r,g,b' or 'r,g,b,a', got {text!r}")
        try:
            values = [float(p) for p in parts]
        except ValueError as exc:
            raise ValueError(f"invalid color {text!r}") from exc
        return cls(*values)

    def to_rgba8(self) -> tuple[int, int, int, int]:
        return tuple(int(round(c * 255)) for c in (self.r, self.g, self.b, self.a))  # type: ignore[return-value]

    @property
    def hex(self) -> str:
        """``#rrggbb`` without alpha."""
        r, g, b, _ = self.to_rgba8()
        return f"#{r:02x}{g:02x}{b:02x}"


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
CLEAR = Color(0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Solid:
    color: Color


@dataclass(frozen=True)
class GradientStop:
    position: float
    color: Color


@dataclass(frozen=True)
class LinearGradient:
    """
    Linear gradient spanning the canvas.

    Parameters
    ----------
    stops : sequence of GradientStop or (position, Color) pairs
        Color stops with positions in [0, 1]; sorted on construction.
    angle : float, optional
        Direction in degrees. 0 runs left to right, 90 top to bottom.
        The gradient line passes through the canvas centre and is long
        enough that positions 0 and 1 touch opposite canvas corners.
        The default is 0.
    """

    stops: tuple[GradientStop, ...]
    angle: float = 0.0

    def __post_init__(self) -> None:
        stops = []
        for stop in self.stops:
            if not isinstance(stop, GradientStop):
                position, color = stop
                stop = GradientStop(float(position), color)
            if not 0.0 <= stop.position <= 1.0:
                raise ValueError(f"gradient stop position must be in [0, 1], got {stop.position}")
            stops.append(stop)
        if not stops:
            raise ValueError("a gradient needs at least one stop")
        stops.sort(key=lambda s: s.position)
        object.__setattr__(self, "stops", tuple(stops))
        object.__setattr__(self, "angle", float(self.angle))

    def _direction(self) -> tuple[float, float, float]:
        theta = math.radians(self.angle)
        dx, dy = math.cos(theta), math.sin(theta)
        return dx, dy, abs(dx) + abs(dy)

    def endpoints(self, size: float) -> tuple[float, float, float, float]:
        """Start and end points (x1, y1, x2, y2) for a square canvas of side `size`."""
        dx, dy, span = self._direction()
        half = size * span / 2.0
        c = size / 2.0
        return (c - dx * half, c - dy * half, c + dx * half, c + dy * half)


@dataclass(frozen=True, eq=False)
class ImagePattern:
    """
    Image shown through the group's shapes, stretched over the canvas.

    Parameters
    ----------
    image : numpy.ndarray or PIL.Image.Image
        Source image; normalized to an RGBA PIL image on construction.
    """

    image: Image.Image

    def __post_init__(self) -> None:
        object.__setattr__(self, "image", to_rgba_image(self.image, name="pattern"))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImagePattern):
            return NotImplemented
        return same_image(self.image, other.image)

    def __hash__(self) -> int:
        return hash((self.image.size, self.image.tobytes()[:64]))


FillStyle = Union[Solid, LinearGradient, ImagePattern]


def to_rgba_image(image: ImageLike, *, name: str = "image") -> Image.Image:
    """
    Normalize a NumPy array or PIL Image into an RGBA PIL image.

    Parameters
    ----------
    image : numpy.ndarray or PIL.Image.Image
        Grayscale (H, W), RGB (H, W, 3) or RGBA (H, W, 4) array with
        values in 0-255, or a PIL image in any mode.
    name : str, optional
        Name used in error messages. The default is "image".

    Returns
    -------
    PIL.Image.Image
        Image in RGBA mode.

    Raises
    ------
    TypeError
        If `image` is not a NumPy array or PIL Image.
    ValueError
        If the array has an unsupported shape or channel count.
    """
    if isinstance(image, Image.Image):
        return image.convert("RGBA")

    if not isinstance(image, np.ndarray):
        raise TypeError(f"{name} must be a NumPy array or PIL.Image.Image")

    arr = np.asarray(image)
    if arr.ndim == 2:
        arr = np.stack([arr] * 3, axis=-1)
    elif arr.ndim != 3 or arr.shape[2] not in (3, 4):
        raise ValueError(
            f"{name} array must be (H, W), (H, W, 3) or (H, W, 4); got shape {arr.shape}"
        )
    if arr.shape[2] == 3:
        alpha = np.full(arr.shape[:2] + (1,), 255, dtype=np.uint8)
        arr = np.concatenate([arr.astype(np.uint8), alpha], axis=-1)
    return Image.fromarray(arr.astype(np.uint8))


def same_image(a: Image.Image, b: Image.Image) -> bool:
    return a is b or (a.size == b.size and a.mode == b.mode and a.tobytes() == b.tobytes())

