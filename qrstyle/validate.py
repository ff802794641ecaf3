"""
Scan check of rendered output using OpenCV's QR detector.

OpenCV is optional (``pip install qrstyle[validate]``); it is imported
on first use and its absence is reported as RuntimeError.
"""

from __future__ import annotations

from typing import Optional, Union

import numpy as np
from PIL import Image

from qrstyle.compositor import RenderedImageModel
from qrstyle.export.raster import render_image
from qrstyle.fill import ImageLike, to_rgba_image


def _flatten_rgb(image: Union[ImageLike, RenderedImageModel]) -> np.ndarray:
    if isinstance(image, RenderedImageModel):
        img = render_image(image)
    else:
        img = to_rgba_image(image)
    # Transparent areas scan as white, like paper.
    white = Image.new("RGBA", img.size, (255, 255, 255, 255))
    return np.asarray(Image.alpha_composite(white, img).convert("RGB"), dtype=np.uint8)


def decode(image: Union[ImageLike, RenderedImageModel]) -> tuple[Optional[str], bool]:
    """
    Decode a QR image using OpenCV's QRCodeDetector.

    Parameters
    ----------
    image : numpy.ndarray, PIL.Image.Image or RenderedImageModel
        Image to decode. Arrays are interpreted as RGB or RGBA; a
        composed model is rasterized first.

    Returns
    -------
    tuple of (str or None, bool)
        Tuple (decoded_text, ok) where:
        - decoded_text is the decoded string, or None if no QR code
          was detected.
        - ok is True if OpenCV reported a successful decode and
          False otherwise.

    Raises
    ------
    RuntimeError
        If OpenCV (cv2) is not installed.
    """
    try:
        import cv2
    except ImportError as exc:
        raise RuntimeError("decode requires OpenCV (cv2) to be installed.") from exc

    rgb = _flatten_rgb(image)
    bgr = cv2.cvtColor(rgb, cv2.COLOR_RGB2BGR)

    detector = cv2.QRCodeDetector()
    data, points, _ = detector.detectAndDecode(bgr)

    if points is None or not data:
        return None, False

    return data, True


def validate(image: Union[ImageLike, RenderedImageModel], expected: str) -> bool:
    """
    True if `image` decodes to exactly `expected`.

    Raises
    ------
    RuntimeError
        If OpenCV (cv2) is not installed.
    """
    decoded, ok = decode(image)
    return bool(ok and decoded == expected)
