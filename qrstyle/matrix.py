"""
Boolean QR module matrix consumed by the renderer.

The matrix is produced by an external encoder; ``ModuleMatrix.from_text``
asks the qrcode library for one. The renderer only reads it.
"""

from __future__ import annotations

import logging
from typing import Sequence, Union

import numpy as np

import qrcode
from qrcode.constants import (
    ERROR_CORRECT_H,
    ERROR_CORRECT_L,
    ERROR_CORRECT_M,
    ERROR_CORRECT_Q,
)

logger = logging.getLogger(__name__)

ECC_LEVELS = {
    "L": ERROR_CORRECT_L,  # ~7% error correction
    "M": ERROR_CORRECT_M,  # ~15% (default)
    "Q": ERROR_CORRECT_Q,  # ~25%
    "H": ERROR_CORRECT_H,  # ~30%
}

FINDER_SIZE = 7

MatrixLike = Union[np.ndarray, Sequence[Sequence[bool]]]


class ModuleMatrix:
    """
    Read-only square boolean module matrix of a QR symbol.

    Parameters
    ----------
    modules : array-like of bool
        Square matrix of side N = 4 * version + 17 (21 <= N <= 177).
        True marks a dark module. The data is copied and frozen.

    Attributes
    ----------
    size : int
        Side length N in modules.
    version : int
        QR version derived from the side length.

    Raises
    ------
    ValueError
        If the matrix is not square or its side is not a valid QR size.
    """

    def __init__(self, modules: MatrixLike) -> None:
        arr = np.array(modules, dtype=bool)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise ValueError(f"module matrix must be square, got shape {arr.shape}")
        n = arr.shape[0]
        if n < 21 or n > 177 or (n - 17) % 4 != 0:
            raise ValueError(f"{n} is not a valid QR module count (4 * version + 17)")
        arr.setflags(write=False)
        self._modules = arr

    @classmethod
    def from_text(cls, data: str, *, ecc: str = "M") -> ModuleMatrix:
        """
        Encode `data` with the qrcode library and wrap the result.

        Parameters
        ----------
        data : str
            Payload. Must be non-empty.
        ecc : {'L', 'M', 'Q', 'H'}, optional
            Error-correction level, case-insensitive. The default is 'M'.

        Raises
        ------
        ValueError
            If `data` is empty or `ecc` is not a known level.
        """
        if not isinstance(data, str) or not data:
            raise ValueError("'data' must be a non-empty string")
        level = ECC_LEVELS.get(ecc.upper())
        if level is None:
            raise ValueError("'ecc' must be one of {'L', 'M', 'Q', 'H'}")

        qr = qrcode.QRCode(
            version=None,  # let the library pick
            error_correction=level,
            box_size=1,
            border=0,
        )
        qr.add_data(data)
        qr.make(fit=True)
        logger.debug("Encoded %d characters as version %d-%s", len(data), qr.version, ecc.upper())
        return cls(qr.get_matrix())

    @property
    def modules(self) -> np.ndarray:
        """Read-only boolean array of shape (N, N)."""
        return self._modules

    @property
    def size(self) -> int:
        return int(self._modules.shape[0])

    @property
    def version(self) -> int:
        return (self.size - 17) // 4

    def finder_origins(self) -> tuple[tuple[int, int], ...]:
        """(col, row) of the top-left, top-right and bottom-left finder patterns."""
        far = self.size - FINDER_SIZE
        return ((0, 0), (far, 0), (0, far))

    def finder_mask(self) -> np.ndarray:
        """Boolean (N, N) array marking the three 7x7 finder regions."""
        mask = np.zeros_like(self._modules)
        for col, row in self.finder_origins():
            mask[row:row + FINDER_SIZE, col:col + FINDER_SIZE] = True
        return mask

    def rows(self) -> tuple[tuple[bool, ...], ...]:
        return tuple(tuple(bool(v) for v in row) for row in self._modules)

    def __getitem__(self, index: tuple[int, int]) -> bool:
        return bool(self._modules[index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModuleMatrix):
            return NotImplemented
        return np.array_equal(self._modules, other._modules)

    def __hash__(self) -> int:
        return hash(self._modules.tobytes())

    def __repr__(self) -> str:
        return f"ModuleMatrix(version={self.version}, size={self.size})"
