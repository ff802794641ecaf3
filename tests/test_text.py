"""Tests for the text renderings."""

from qrstyle.design import Design
from qrstyle.document import Document
from qrstyle.export.text import ascii_text, small_ascii_text
from qrstyle.registry import PIXEL_SHAPES


def test_ascii(finder_matrix):
    text = Document(finder_matrix).export(100, "ascii").decode("utf-8")
    lines = text.splitlines()
    assert len(lines) == 21
    assert all(len(line) == 42 for line in lines)
    assert lines[0] == "██" * 7 + "  " * 7 + "██" * 7
    assert lines[1] == "██" + "  " * 5 + "██" + "  " * 7 + "██" + "  " * 5 + "██"
    assert lines[10] == " " * 42


def test_ascii_includes_quiet_zone(finder_matrix):
    model = Document(finder_matrix, quiet_zone=1).render(100)
    lines = ascii_text(model).splitlines()
    assert len(lines) == 23
    assert lines[0] == " " * 46
    assert lines[1].startswith("  ██")


def test_small_ascii(finder_matrix):
    text = Document(finder_matrix).export(100, "smallascii").decode("utf-8")
    lines = text.splitlines()
    # 21 rows pair up into 11 lines; the last row pairs with a light row.
    assert len(lines) == 11
    assert all(len(line) == 21 for line in lines)
    assert lines[0] == "█▀▀▀▀▀█" + " " * 7 + "█▀▀▀▀▀█"
    assert lines[1] == "█ ███ █" + " " * 7 + "█ ███ █"
    assert lines[-1] == "▀" * 7 + " " * 14


def test_text_ignores_styling(text_matrix):
    plain = Document(text_matrix).render(100)
    styled = Document(text_matrix, Design(pixel_shape=PIXEL_SHAPES.create("circle"))).render(300)
    assert small_ascii_text(plain) == small_ascii_text(styled)
