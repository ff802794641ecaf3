"""Tests for GeneratorConfig."""

import pytest
from PIL import Image

from qrstyle.config import GeneratorConfig
from qrstyle.design import LogoTemplate
from qrstyle.errors import InvalidDimension, UnknownShapeName, UnsupportedFormat, UnsupportedSetting
from qrstyle.export import ExportFormat
from qrstyle.fill import Color, Solid
from qrstyle.shapes import eye, pixel, pupil

from tests.conftest import SAMPLE_TEXT


def test_defaults():
    config = GeneratorConfig(SAMPLE_TEXT, 256)
    assert config.dimension == 256.0
    assert config.output_format == "png"
    assert config.export_format is ExportFormat.PNG
    assert config.error_correction == "M"
    assert not config.has_logo


def test_normalization():
    config = GeneratorConfig(
        SAMPLE_TEXT, 100, output_format="JPEG", error_correction="h", compression=3.0
    )
    assert config.output_format == "jpg"
    assert config.error_correction == "H"
    assert config.compression == 1.0


@pytest.mark.parametrize(
    "kwargs, error",
    [
        ({"text": ""}, ValueError),
        ({"dimension": 0}, InvalidDimension),
        ({"output_format": "gif"}, UnsupportedFormat),
        ({"error_correction": "Z"}, ValueError),
        ({"quiet_zone": -2}, ValueError),
        ({"data_color": "1,0"}, ValueError),
        ({"bg_color_typo": "1,0,0"}, TypeError),
        ({"logo_rect": (1, 2, 3)}, ValueError),
        ({"logo_corner_radius": 1.5}, ValueError),
    ],
)
def test_invalid_values(kwargs, error):
    values = {"text": SAMPLE_TEXT, "dimension": 100}
    values.update(kwargs)
    with pytest.raises(error):
        GeneratorConfig(**values)


def test_config_is_frozen():
    config = GeneratorConfig(SAMPLE_TEXT, 100)
    with pytest.raises(AttributeError):
        config.dimension = 5  # type: ignore[misc]


def test_build_design_shapes():
    config = GeneratorConfig(
        SAMPLE_TEXT,
        100,
        pixel_shape="RoundedRect",
        pixel_settings={"cornerRadiusFraction": 0.3, "insetFraction": 0.1},
        eye_shape="leaf",
        eye_corner_radius=0.2,
        pupil_shape="circle",
    )
    design = config.build_design()
    assert isinstance(design.pixel_shape, pixel.RoundedRect)
    assert design.pixel_shape.settings()["cornerRadiusFraction"] == 0.3
    assert isinstance(design.eye_shape, eye.Leaf)
    assert design.eye_shape.settings()["cornerRadiusFraction"] == 0.2
    assert isinstance(design.pupil_shape, pupil.Circle)


def test_corner_radius_ignored_when_unsupported():
    design = GeneratorConfig(SAMPLE_TEXT, 100, eye_corner_radius=0.3, pupil_corner_radius=0.3).build_design()
    assert isinstance(design.eye_shape, eye.Square)
    assert design.pupil_shape is None


def test_pupil_corner_radius_applies_to_default_pupil():
    config = GeneratorConfig(SAMPLE_TEXT, 100, eye_shape="roundedrect", pupil_corner_radius=0.1)
    design = config.build_design()
    assert isinstance(design.pupil_shape, pupil.RoundedRect)
    assert design.pupil_shape.settings()["cornerRadiusFraction"] == 0.1


def test_build_design_colors():
    config = GeneratorConfig(
        SAMPLE_TEXT, 100,
        background_color="1,1,0.5,1",
        data_color="0,0,0.5",
        pupil_color="1,0,0,0.5",
    )
    design = config.build_design()
    assert design.background_style == Solid(Color(1, 1, 0.5, 1))
    assert design.on_pixel_style == Solid(Color(0, 0, 0.5))
    assert design.eye_style is None
    assert design.pupil_style == Solid(Color(1, 0, 0, 0.5))


def test_build_design_errors():
    with pytest.raises(UnknownShapeName):
        GeneratorConfig(SAMPLE_TEXT, 100, pixel_shape="stars").build_design()
    with pytest.raises(UnknownShapeName):
        GeneratorConfig(SAMPLE_TEXT, 100, pupil_shape="stars").build_design()
    with pytest.raises(UnsupportedSetting):
        GeneratorConfig(
            SAMPLE_TEXT, 100, pixel_settings={"hasInnerCorners": True}
        ).build_design()


def test_logo_from_rect():
    config = GeneratorConfig(SAMPLE_TEXT, 100, logo_rect=(10, 10, 6, 6), logo_corner_radius=0.5)
    logo = config.build_design().logo
    assert logo == LogoTemplate((10, 10, 6, 6), 0.5)
    assert logo.image is None


def test_logo_from_image_file(tmp_path):
    path = tmp_path / "logo.png"
    Image.new("RGB", (8, 4), (0, 255, 0)).save(path)
    config = GeneratorConfig(SAMPLE_TEXT, 100, logo_image_file=str(path))
    with pytest.raises(ValueError):
        config.build_design()
    logo = config.build_design(33).logo
    assert logo.image.size == (8, 4)
    assert logo.rect == pytest.approx(LogoTemplate.centered(33, 0.25).rect)


def test_build_document():
    config = GeneratorConfig(SAMPLE_TEXT, 100, error_correction="Q", quiet_zone=2)
    doc = config.build_document()
    assert doc.quiet_zone == 2
    assert doc.matrix == config.build_matrix()
    assert doc.export(config.dimension, config.output_format).startswith(b"\x89PNG")
