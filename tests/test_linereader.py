import io
import os

import pytest

from pipex.linereader import LineReader


TEXT = "first line\nsecond\n\nlast without newline"


@pytest.mark.parametrize("size", [1, 2, 3, 7, 100, 1000])
def test_text_lines_rejoin_to_input(size):
    lines = list(LineReader(io.StringIO(TEXT), size))
    assert "".join(lines) == TEXT
    assert lines == TEXT.splitlines(keepends=True)


@pytest.mark.parametrize("size", [1, 4, 100])
def test_binary_lines(size):
    data = TEXT.encode()
    lines = list(LineReader(io.BytesIO(data), size))
    assert lines == data.splitlines(keepends=True)


def test_every_line_but_last_ends_with_newline():
    lines = list(LineReader(io.StringIO(TEXT), 5))
    assert all(line.endswith("\n") for line in lines[:-1])
    assert lines[-1] == "last without newline"


def test_empty_stream_gives_none():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_none_after_exhaustion():
    reader = LineReader(io.StringIO("a\n"), 1)
    assert reader.read_line() == "a\n"
    assert reader.read_line() is None


def test_file_descriptor():
    read_end, write_end = os.pipe()
    try:
        os.write(write_end, b"one\ntwo\n")
        os.close(write_end)
        reader = LineReader(read_end, 3)
        assert reader.read_line() == b"one\n"
        assert reader.read_line() == b"two\n"
        assert reader.read_line() is None
    finally:
        os.close(read_end)


def test_rejects_non_positive_buffer():
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), 0)


def test_rejects_negative_descriptor():
    with pytest.raises(ValueError):
        LineReader(-1)


class _FailingStream:
    def read(self, size):
        raise OSError("read failed")


def test_read_error_propagates():
    reader = LineReader(_FailingStream())
    with pytest.raises(OSError):
        reader.read_line()