"""Tests for Document.render and the compositor."""

import numpy as np
import pytest

from qrstyle.compositor import GroupRole, logo_mask, pixel_mask
from qrstyle.design import Design, LogoTemplate
from qrstyle.document import Document
from qrstyle.errors import InvalidDimension, InvalidLogoPlacement
from qrstyle.fill import Color, Solid
from qrstyle.registry import EYE_SHAPES, PIXEL_SHAPES, PUPIL_SHAPES
from qrstyle.shapes import pixel

from tests.conftest import finder_only_modules


@pytest.mark.parametrize("size", [0, -10, float("nan"), float("inf"), "100", True, None])
def test_invalid_dimension(finder_matrix, size):
    with pytest.raises(InvalidDimension):
        Document(finder_matrix).render(size)


def test_document_accepts_arrays():
    doc = Document(finder_only_modules())
    assert doc.matrix.size == 21
    with pytest.raises(ValueError):
        Document(np.zeros((5, 5), dtype=bool))
    with pytest.raises(ValueError):
        Document(finder_only_modules(), quiet_zone=-1)


def test_finder_only_groups(finder_matrix):
    model = Document(finder_matrix).render(210)
    roles = [g.role for g in model.groups]
    assert roles == [
        GroupRole.BACKGROUND,
        GroupRole.ON_PIXELS,
        GroupRole.EYE, GroupRole.EYE, GroupRole.EYE,
        GroupRole.PUPIL, GroupRole.PUPIL, GroupRole.PUPIL,
    ]
    assert len(model.groups_with_role(GroupRole.LOGO)) == 0
    # Finder modules are drawn by the eye/pupil generators only.
    assert model.groups_with_role(GroupRole.ON_PIXELS)[0].is_empty


def test_eye_placement(finder_matrix):
    model = Document(finder_matrix).render(210)
    eyes = [g.path.bounds() for g in model.groups_with_role(GroupRole.EYE)]
    assert eyes == [
        pytest.approx((0, 0, 70, 70)),
        pytest.approx((140, 0, 210, 70)),
        pytest.approx((0, 140, 70, 210)),
    ]
    pupils = [g.path.bounds() for g in model.groups_with_role(GroupRole.PUPIL)]
    assert pupils[0] == pytest.approx((20, 20, 50, 50))
    assert pupils[1] == pytest.approx((160, 20, 190, 50))


def test_quiet_zone_offsets_geometry(finder_matrix):
    model = Document(finder_matrix, quiet_zone=2).render(250)
    assert model.module_size == pytest.approx(10.0)
    eye = model.groups_with_role(GroupRole.EYE)[0]
    assert eye.path.bounds() == pytest.approx((20, 20, 90, 90))
    background = model.groups_with_role(GroupRole.BACKGROUND)[0]
    assert background.path.bounds() == (0.0, 0.0, 250.0, 250.0)


def test_non_integer_size_is_not_rounded(finder_matrix):
    model = Document(finder_matrix).render(100.5)
    assert model.size == 100.5
    assert model.module_size == pytest.approx(100.5 / 21)


def test_render_is_deterministic(text_matrix):
    design = Design(
        pixel_shape=PIXEL_SHAPES.create("roundedpath", {"hasInnerCorners": True}),
        eye_shape=EYE_SHAPES.create("leaf"),
        pupil_shape=PUPIL_SHAPES.create("circle"),
    )
    doc = Document(text_matrix, design)
    assert doc.render(300) == doc.render(300)
    assert Document(text_matrix, design.copy()).render(300) == doc.render(300)


def test_render_uses_a_snapshot(text_matrix):
    design = Design()
    doc = Document(text_matrix, design)
    before = doc.render(200)
    design.set_pixel_shape(pixel.Circle())
    after = doc.render(200)
    assert before != after
    assert before == Document(text_matrix, Design()).render(200)


def test_on_pixels_skip_finders(text_matrix):
    model = Document(text_matrix).render(float(text_matrix.size))
    group = model.groups_with_role(GroupRole.ON_PIXELS)[0]
    expected = int(pixel_mask(text_matrix, None).sum())
    assert len(group.paths) == expected
    assert expected == int((text_matrix.modules & ~text_matrix.finder_mask()).sum())


def test_fills_reach_groups(text_matrix):
    red = Solid(Color(1, 0, 0))
    green = Solid(Color(0, 1, 0))
    design = Design(on_pixels=red, pupil=green)
    model = Document(text_matrix, design).render(100)
    assert model.groups_with_role(GroupRole.ON_PIXELS)[0].fill == red
    assert all(g.fill == red for g in model.groups_with_role(GroupRole.EYE))
    assert all(g.fill == green for g in model.groups_with_role(GroupRole.PUPIL))


@pytest.mark.parametrize(
    "rect", [(0, 0, 3, 3), (15, 2, 3, 3), (2, 15, 3, 3)],
)
def test_logo_over_each_finder_fails(finder_matrix, rect):
    design = Design(logo=LogoTemplate(rect))
    with pytest.raises(InvalidLogoPlacement):
        Document(finder_matrix, design).render(200)


def test_logo_excludes_modules(text_matrix, red_image):
    n = text_matrix.size
    logo = LogoTemplate.centered(n, 0.3, corner_radius_fraction=0.5, image=red_image)
    model = Document(text_matrix, Design(logo=logo)).render(float(n))

    covered = logo_mask(logo, n)
    assert covered.any()
    assert not (pixel_mask(text_matrix, logo) & covered).any()

    group = model.groups[-1]
    assert group.role == GroupRole.LOGO
    assert group.fill is None
    assert group.rect == pytest.approx(logo.rect)
    assert group.image is not None

    # Every drawn module lies outside the logo area.
    x, y, w, h = logo.rect
    for path in model.groups_with_role(GroupRole.ON_PIXELS)[0].paths:
        lo_x, lo_y, hi_x, hi_y = path.bounds()
        assert hi_x <= x or lo_x >= x + w or hi_y <= y or lo_y >= y + h


def test_logo_mask_counts_partial_cells():
    mask = logo_mask(LogoTemplate((8.5, 8.5, 2, 2)), 21)
    assert mask.sum() == 9
    assert mask[8, 8] and mask[10, 10] and not mask[11, 10]


def test_context_treats_undrawn_cells_as_off():
    modules = finder_only_modules()
    # A module touching the right edge of the top-left finder.
    modules[3, 7] = True
    doc = Document(modules, Design(pixel_shape=pixel.Horizontal()))
    group = doc.render(210).groups_with_role(GroupRole.ON_PIXELS)[0]
    (path,) = group.paths
    # Rounded at both ends: the finder module to its left is not a data pixel.
    assert path == pixel.Horizontal().path().transformed(10, 70, 30)


def test_merged_group_path_on_a_full_version_40_grid():
    model = Document(np.ones((177, 177), dtype=bool)).render(800)
    (group,) = model.groups_with_role(GroupRole.ON_PIXELS)
    merged = group.path
    assert merged is group.path
    assert len(merged) == sum(len(p) for p in group.paths)
    assert merged.segments[:len(group.paths[0])] == group.paths[0].segments
    assert merged.segments[-len(group.paths[-1]):] == group.paths[-1].segments
