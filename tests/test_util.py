import os

import pytest

from lvpager.util import (
    TOKEN_LENGTH,
    binary_search,
    binary_search_cset,
    extension,
    is_atty,
    token,
)

TABLE = [(0x00A5, 0x5C), (0x203E, 0x7E), (0x3000, 0x2121), (0x4E00, 0x306C)]
CSET_TABLE = [(0x00A5, 0x5C, 1), (0x3000, 0x2121, 14), (0x4E00, 0x306C, 14)]


def test_binary_search_finds_every_entry():
    for code, peer in TABLE:
        assert binary_search(TABLE, code) == peer


def test_binary_search_missing():
    assert binary_search(TABLE, 0x0041) is None
    assert binary_search(TABLE, 0xFFFF) is None
    assert binary_search([], 0x0041) is None


def test_binary_search_cset_finds_every_entry():
    for code, peer, cset in CSET_TABLE:
        assert binary_search_cset(CSET_TABLE, code) == (peer, cset)


def test_binary_search_cset_missing():
    assert binary_search_cset(CSET_TABLE, 0x203E) is None


@pytest.mark.parametrize(
    "text, expected",
    [
        ("abc def", "abc"),
        ("abc\tdef", "abc"),
        ("abc", "abc"),
        ("", ""),
    ],
)
def test_token(text, expected):
    assert token(text) == expected


def test_token_too_long():
    assert token("x" * TOKEN_LENGTH) == ""
    assert token("x" * (TOKEN_LENGTH - 1)) == "x" * (TOKEN_LENGTH - 1)
    assert token("x" * TOKEN_LENGTH + " y") == ""


@pytest.mark.parametrize(
    "path, expected",
    [
        ("file.gz", "gz"),
        ("dir/archive.tar.Z", "Z"),
        ("dir\\notes.z", "z"),
        ("dir.d/file", None),
        ("plain", None),
        ("trailing.", ""),
    ],
)
def test_extension(path, expected):
    assert extension(path) == expected


def test_is_atty_on_pipe():
    read_fd, write_fd = os.pipe()
    try:
        assert is_atty(read_fd) is False
        assert is_atty(write_fd) is False
    finally:
        os.close(read_fd)
        os.close(write_fd)