import pytest

import sys

from bijective_compress.cli.cli import join_operands, parse_integer, run_cli
from bijective_compress.shared.errors import InvalidArgument


@pytest.fixture
def target(tmp_path):
    def make(contents: bytes) -> str:
        file_path = tmp_path / "target.bin"
        file_path.write_bytes(contents)
        return str(file_path)
    return make


def read(file_path: str) -> bytes:
    with open(file_path, "rb") as f:
        return f.read()


@pytest.mark.parametrize("text, value", [
    ("0", 0),
    ("10", 10),
    ("-10", -10),
    ("1 000", 1000),
    (" - 0x 10 ", -16),
    ("0x1f", 31),
    ("0XFF", 255),
    ("017", 15),
    ("0o17", 15),
    ("0b101", 5),
    ("-0x10", -16),
])
def test_parse_integer(text, value):
    assert parse_integer(text) == value


def test_parse_huge_integer():
    assert parse_integer("0x1" + "0" * 4000) == 1 << 16000


@pytest.mark.parametrize("text", ["", "-", "+7", "abc", "08", "0x", "1.5", "--1", "1_000", "0b12"])
def test_parse_integer_rejects(text):
    with pytest.raises(InvalidArgument, match="Argument is not an integer."):
        parse_integer(text)


def test_compress_single_byte_to_empty(target):
    file_path = target(b"\x00")
    assert run_cli(["-c", file_path]) == 0
    assert read(file_path) == b""


def test_decompress_empty_to_single_byte(target):
    file_path = target(b"")
    assert run_cli(["-d", file_path]) == 0
    assert read(file_path) == b"\x00"


def test_shifts_accumulate(target):
    # b"\x05" encodes to 6; net shift is 3 - 1 + 1 = 3
    file_path = target(b"\x05")
    assert run_cli(["-C", "3", "-D", "1", file_path, "-c"]) == 0
    assert read(file_path) == b"\x02"


def test_negative_operand_decompresses(target):
    file_path = target(b"\xff")
    assert run_cli(["-C", "-1", file_path]) == 0
    assert read(file_path) == b"\x00\x00"


def test_compress_then_decompress_restores_file(target):
    original = b"some file contents"
    file_path = target(original)
    assert run_cli(["-C", "0x123456789", file_path]) == 0
    assert len(read(file_path)) <= len(original)
    assert run_cli(["-D", "0x123456789", file_path]) == 0
    assert read(file_path) == original


def test_help(capsys):
    assert run_cli(["-h"], prog="compress") == 0
    out = capsys.readouterr().out
    assert "Usage: compress [-v] -c FILENAME" in out
    assert "it ALWAYS compresses" in out


def test_verbose_trace(target, capsys):
    file_path = target(b"\x00")
    assert run_cli(["-v", "-c", file_path]) == 0
    out = capsys.readouterr().out
    for line in ["compress = 1", "get: filesize = 1", "get: interval base = 1",
                 "get: interval offset = 0", "get (filename) = 1", "n - compress = 0",
                 "put: filesize = 0"]:
        assert line in out


def test_quiet_by_default(target, capsys):
    assert run_cli(["-c", target(b"\x07")]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("argv, message", [
    (["-C", "abc", "FILE"], "Argument is not an integer."),
    (["-x", "FILE"], "Error parsing arguments"),
    (["FILE", "-C"], "Error parsing arguments"),
    (["-c"], "No filename specified."),
    (["-c", "FILE", "extra"], "Too many arguments."),
])
def test_usage_errors_leave_file_untouched(target, capsys, argv, message):
    file_path = target(b"\x42")
    args = [file_path if arg == "FILE" else arg for arg in argv]
    assert run_cli(args) == 1
    assert message in capsys.readouterr().err
    assert read(file_path) == b"\x42"


def test_cannot_compress_empty_file(target, capsys):
    file_path = target(b"")
    assert run_cli(["-c", file_path]) == 1
    assert "Cannot compress a zero-length file." in capsys.readouterr().err
    assert read(file_path) == b""


def test_cannot_compress_that_much(target, capsys):
    file_path = target(b"\x03")
    assert run_cli(["-C", "10", file_path]) == 1
    err = capsys.readouterr().err
    assert "Cannot compress that much." in err
    assert "Hint: compressing 4 time(s) will make a zero-length file." in err
    assert read(file_path) == b"\x03"


def test_missing_file(tmp_path, capsys):
    assert run_cli(["-c", str(tmp_path / "missing.bin")]) == 1
    assert "Unable to access file." in capsys.readouterr().err


@pytest.mark.parametrize("argv, joined", [
    (["-C", "-0x10", "f"], ["-C-0x10", "f"]),
    (["-vD", "-5", "f"], ["-vD-5", "f"]),
    (["f", "-C"], ["f", "-C"]),
    (["--", "-C", "-1"], ["--", "-C", "-1"]),
    (["-C5", "f"], ["-C5", "f"]),
])
def test_join_operands(argv, joined):
    assert join_operands(argv) == joined


def test_detached_negative_hex_operand(target):
    file_path = target(b"\x00")
    assert run_cli(["-C", "-0x10", file_path]) == 0
    assert read(file_path) == b"\x10"


def test_detached_negative_binary_operand(target):
    # -D -3 compresses three times: 7 -> 4
    file_path = target(b"\x06")
    assert run_cli(["-D", "-0b11", file_path]) == 0
    assert read(file_path) == b"\x03"


def test_operand_with_whitespace(target):
    file_path = target(b"\x00")
    assert run_cli(["-D", "1 0", file_path]) == 0
    assert read(file_path) == b"\x0a"


def test_help_wins_over_later_errors(capsys):
    assert run_cli(["-h", "-C", "abc"], prog="compress") == 0
    assert "Usage: compress" in capsys.readouterr().out


def test_earlier_errors_win_over_help(target, capsys):
    file_path = target(b"\x01")
    assert run_cli(["-C", "abc", "-h", file_path]) == 1
    assert "Argument is not an integer." in capsys.readouterr().err
    assert read(file_path) == b"\x01"


@pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="no int/str digit limit")
def test_digit_limit_restored(target, capsys):
    before = sys.get_int_max_str_digits()
    file_path = target(b"\x01")
    assert run_cli(["-C", "1" * 5000, file_path]) == 1
    assert "Cannot compress that much." in capsys.readouterr().err
    assert sys.get_int_max_str_digits() == before
