"""Tests for the command-line front end."""

import io
import os

import pytest

from qrstyle import cli
from qrstyle.registry import EYE_SHAPES, PIXEL_SHAPES, PUPIL_SHAPES


def test_list_shapes(capsys):
    assert cli.main(["--all-pixel-shapes"]) == 0
    assert capsys.readouterr().out.strip() == " ".join(PIXEL_SHAPES.available_names())
    assert cli.main(["--all-eye-shapes", "--all-pupil-shapes"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [" ".join(EYE_SHAPES.available_names()), " ".join(PUPIL_SHAPES.available_names())]


def test_dimension_is_required():
    with pytest.raises(SystemExit) as info:
        cli.main(["-t", "hello"])
    assert info.value.code == 2


def test_ascii_to_stdout(capsys):
    assert cli.main(["-t", "hello", "--output-format", "ascii", "100"]) == 0
    out = capsys.readouterr().out
    assert "██" in out
    assert len(out.splitlines()) == 21


def test_png_to_file(tmp_path):
    target = tmp_path / "code.png"
    code = cli.main([
        "-t", "hello",
        "-d", "roundedpath", "-a", "true", "-r", "0.8",
        "-e", "leaf", "--eye-shape-corner-radius", "0.4",
        "-p", "circle",
        "--bg-color", "1,1,1,1", "--data-color", "0,0,0.5,1",
        "--output-file", str(target),
        "200",
    ])
    assert code == 0
    assert target.read_bytes().startswith(b"\x89PNG")


def test_temporary_output_file(capsys):
    assert cli.main(["-t", "hello", "--output-format", "svg", "64"]) == 0
    path = capsys.readouterr().out.strip()
    try:
        assert path.endswith(".svg")
        with open(path, encoding="utf-8") as handle:
            assert "<svg" in handle.read()
    finally:
        os.remove(path)


def test_input_file(tmp_path, capsys):
    source = tmp_path / "content.txt"
    source.write_text("from a file", encoding="utf-8")
    assert cli.main(["--input-file", str(source), "--output-format", "smallascii", "50"]) == 0
    assert "█" in capsys.readouterr().out


def test_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("from stdin"))
    assert cli.main(["--output-format", "smallascii", "50"]) == 0
    assert "█" in capsys.readouterr().out


def test_empty_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert cli.main(["50"]) == cli.EXIT_ERROR
    assert "No QR code content" in capsys.readouterr().err


@pytest.mark.parametrize(
    "args, code",
    [
        (["-d", "stars"], cli.EXIT_UNKNOWN_SHAPE),
        (["-e", "stars"], cli.EXIT_UNKNOWN_SHAPE),
        (["-n", "0.2", "-d", "roundedpath"], cli.EXIT_UNSUPPORTED_SETTING),
        (["--output-format", "gif"], cli.EXIT_UNSUPPORTED_FORMAT),
        (["-c", "Z"], cli.EXIT_ERROR),
        (["--data-color", "black"], cli.EXIT_ERROR),
        (["--logo-rect", "0", "0", "4", "4", "--output-format", "ascii"], cli.EXIT_ERROR),
        (["--output-format", "clipboard"], cli.EXIT_ERROR),
    ],
)
def test_errors(args, code, capsys):
    assert cli.main(["-t", "hello", *args, "100"]) == code
    assert capsys.readouterr().err


def test_large_dimension_warning(capsys):
    assert cli.main(["-t", "hello", "--output-format", "ascii", "9000"]) == 0
    captured = capsys.readouterr()
    assert "Large image size" in captured.err
    assert "Large image size" not in captured.out


def test_silence_hides_the_warning(capsys):
    assert cli.main(["-s", "-t", "hello", "--output-format", "ascii", "9000"]) == 0
    assert "Large image size" not in capsys.readouterr().err


def test_verbose_logs_stay_off_stdout(capsys):
    assert cli.main(["-v", "-t", "hello", "--output-format", "ascii", "100"]) == 0
    captured = capsys.readouterr()
    lines = captured.out.splitlines()
    assert len(lines) == 21
    assert all(set(line) <= {"█", " "} for line in lines)
    assert "Rendering ascii" in captured.err
