"""Tests for the module matrix wrapper."""

import numpy as np
import pytest

from qrstyle.matrix import ModuleMatrix

from tests.conftest import SAMPLE_TEXT, finder_only_modules


def test_version_from_size(finder_matrix):
    assert finder_matrix.size == 21
    assert finder_matrix.version == 1
    assert ModuleMatrix(finder_only_modules(version=3)).version == 3


@pytest.mark.parametrize("shape", [(20, 20), (21, 22), (181, 181), (17, 17)])
def test_invalid_sizes(shape):
    with pytest.raises(ValueError):
        ModuleMatrix(np.zeros(shape, dtype=bool))


def test_matrix_is_read_only(finder_matrix):
    with pytest.raises(ValueError):
        finder_matrix.modules[0, 0] = False


def test_input_is_copied():
    modules = finder_only_modules()
    matrix = ModuleMatrix(modules)
    modules[10, 10] = True
    assert not matrix[10, 10]


def test_finder_mask(finder_matrix):
    mask = finder_matrix.finder_mask()
    assert mask.sum() == 3 * 49
    assert mask[0, 0] and mask[0, 20] and mask[20, 0]
    assert not mask[20, 20]
    assert finder_matrix.finder_origins() == ((0, 0), (14, 0), (0, 14))


def test_from_text():
    matrix = ModuleMatrix.from_text(SAMPLE_TEXT)
    assert matrix.size >= 21
    assert matrix == ModuleMatrix.from_text(SAMPLE_TEXT, ecc="m")
    # Finder patterns sit in the three corners.
    block = matrix.modules[0:7, 0:7]
    assert block[0].all() and block[3, 3] and not block[1, 1]


def test_higher_error_correction_never_shrinks():
    low = ModuleMatrix.from_text(SAMPLE_TEXT, ecc="L")
    high = ModuleMatrix.from_text(SAMPLE_TEXT, ecc="H")
    assert high.version >= low.version


@pytest.mark.parametrize("data, ecc", [("", "M"), ("hello", "X")])
def test_from_text_rejects_bad_input(data, ecc):
    with pytest.raises(ValueError):
        ModuleMatrix.from_text(data, ecc=ecc)


def test_equality_and_hash(finder_matrix):
    other = ModuleMatrix(finder_only_modules())
    assert finder_matrix == other
    assert hash(finder_matrix) == hash(other)
    assert finder_matrix.rows()[0][0] is True
