"""Scan checks of rendered output with OpenCV."""

import sys

import numpy as np
import pytest
from PIL import Image

from qrstyle import validate
from qrstyle.design import Design
from qrstyle.document import Document
from qrstyle.matrix import ModuleMatrix
from qrstyle.registry import EYE_SHAPES, PIXEL_SHAPES

from tests.conftest import SAMPLE_TEXT


def test_missing_opencv_raises_runtime_error(monkeypatch):
    monkeypatch.setitem(sys.modules, "cv2", None)
    with pytest.raises(RuntimeError):
        validate.decode(np.zeros((10, 10, 3), dtype=np.uint8))


@pytest.mark.parametrize("pixel_shape, eye_shape", [("square", "square"), ("roundedrect", "roundedrect")])
def test_rendered_code_scans(pixel_shape, eye_shape):
    pytest.importorskip("cv2")
    design = Design(
        pixel_shape=PIXEL_SHAPES.create(pixel_shape),
        eye_shape=EYE_SHAPES.create(eye_shape),
    )
    doc = Document(ModuleMatrix.from_text(SAMPLE_TEXT, ecc="H"), design, quiet_zone=4)
    model = doc.render(400)
    assert validate.validate(model, SAMPLE_TEXT)
    assert not validate.validate(model, "something else")


def test_exported_png_scans():
    pytest.importorskip("cv2")
    doc = Document(ModuleMatrix.from_text(SAMPLE_TEXT), quiet_zone=4)
    image = doc.export(400, "clipboard")
    decoded, ok = validate.decode(image)
    assert ok and decoded == SAMPLE_TEXT


def test_blank_image_does_not_scan():
    pytest.importorskip("cv2")
    blank = Image.new("RGB", (200, 200), (255, 255, 255))
    assert validate.decode(blank) == (None, False)
