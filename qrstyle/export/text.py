"""Text renderings of the module matrix."""

from __future__ import annotations

import numpy as np

from qrstyle.compositor import RenderedImageModel

_FULL = "█"
_UPPER = "▀"
_LOWER = "▄"


def _padded(model: RenderedImageModel) -> np.ndarray:
    return np.pad(model.matrix.modules, model.quiet_zone, constant_values=False)


def ascii_text(model: RenderedImageModel) -> str:
    """Two characters per module: a full block pair for dark, spaces for light."""
    lines = [
        "".join(_FULL * 2 if on else "  " for on in row)
        for row in _padded(model)
    ]
    return "\n".join(lines) + "\n"


def small_ascii_text(model: RenderedImageModel) -> str:
    """
    Half-block rendering: one character per module column, two module rows per line.

    An odd final row is paired with a light row.
    """
    grid = _padded(model)
    if len(grid) % 2:
        grid = np.vstack([grid, np.zeros((1, grid.shape[1]), dtype=bool)])

    lines = []
    for top, bottom in zip(grid[0::2], grid[1::2]):
        chars = []
        for upper, lower in zip(top, bottom):
            if upper and lower:
                chars.append(_FULL)
            elif upper:
                chars.append(_UPPER)
            elif lower:
                chars.append(_LOWER)
            else:
                chars.append(" ")
        lines.append("".join(chars))
    return "\n".join(lines) + "\n"
