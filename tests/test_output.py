import io
import os

import pytest

from minishell.output import put_char, put_endl, put_nbr, put_str


def _drain(read_fd):
    with os.fdopen(read_fd, "rb") as reader:
        return reader.read().decode()


def test_put_char_stream():
    buf = io.StringIO()
    put_char("x", buf)
    put_char("y", buf)
    assert buf.getvalue() == "xy"


def test_put_char_rejects_long():
    with pytest.raises(ValueError):
        put_char("xy", io.StringIO())


def test_put_str_stream():
    buf = io.StringIO()
    put_str("hello", buf)
    assert buf.getvalue() == "hello"


def test_put_str_empty():
    buf = io.StringIO()
    put_str("", buf)
    assert buf.getvalue() == ""


def test_put_endl_adds_newline():
    buf = io.StringIO()
    put_endl("line", buf)
    assert buf.getvalue() == "line\n"


@pytest.mark.parametrize("n", [0, 7, -7, 1234567, 2147483647, -2147483648])
def test_put_nbr_writes_decimal(n):
    buf = io.StringIO()
    put_nbr(n, buf)
    assert buf.getvalue() == str(n)


def test_put_str_to_file_descriptor():
    read_fd, write_fd = os.pipe()
    try:
        put_str("minishell", write_fd)
    finally:
        os.close(write_fd)
    assert _drain(read_fd) == "minishell"


def test_put_endl_to_file_descriptor():
    read_fd, write_fd = os.pipe()
    try:
        put_endl("abc", write_fd)
    finally:
        os.close(write_fd)
    assert _drain(read_fd) == "abc\n"


def test_put_nbr_to_file_descriptor():
    read_fd, write_fd = os.pipe()
    try:
        put_nbr(-2147483648, write_fd)
    finally:
        os.close(write_fd)
    assert _drain(read_fd) == "-2147483648"


def test_put_char_to_file_descriptor():
    read_fd, write_fd = os.pipe()
    try:
        put_char("z", write_fd)
    finally:
        os.close(write_fd)
    assert _drain(read_fd) == "z"