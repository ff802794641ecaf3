"""Shared test fixtures."""

from __future__ import annotations

import logging

import numpy as np
import pytest
from PIL import Image

from qrstyle.matrix import ModuleMatrix

SAMPLE_TEXT = "https://example.com/qrstyle"


def finder_block() -> np.ndarray:
    block = np.ones((7, 7), dtype=bool)
    block[1:6, 1:6] = False
    block[2:5, 2:5] = True
    return block


def finder_only_modules(version: int = 1) -> np.ndarray:
    """Module array holding only the three finder patterns."""
    n = 4 * version + 17
    modules = np.zeros((n, n), dtype=bool)
    for col, row in ((0, 0), (n - 7, 0), (0, n - 7)):
        modules[row:row + 7, col:col + 7] = finder_block()
    return modules


@pytest.fixture
def finder_matrix() -> ModuleMatrix:
    return ModuleMatrix(finder_only_modules())


@pytest.fixture
def text_matrix() -> ModuleMatrix:
    return ModuleMatrix.from_text(SAMPLE_TEXT, ecc="H")


@pytest.fixture
def red_image() -> Image.Image:
    return Image.new("RGBA", (16, 16), (255, 0, 0, 255))


@pytest.fixture(autouse=True)
def reset_qrstyle_logger():
    """Undo handlers that setup_logging attached during a test."""
    logger = logging.getLogger("qrstyle")
    saved_level, saved_handlers = logger.level, list(logger.handlers)
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if handler not in saved_handlers:
            handler.close()
    logger.setLevel(saved_level)
    for handler in saved_handlers:
        logger.addHandler(handler)
