"""Small helpers: code table searches, option tokens and file names."""

from __future__ import annotations

import bisect
import os
from typing import Sequence

TOKEN_LENGTH = 32


def binary_search(table: Sequence[tuple[int, int]], code):
    """Return the peer of ``code`` in a table of (code, peer) sorted by code, or None."""
    index = bisect.bisect_left(table, code, key=lambda entry: entry[0])
    if index < len(table) and table[index][0] == code:
        return table[index][1]
    return None


def binary_search_cset(table: Sequence[tuple[int, int, int]], code):
    """Return (peer, cset) for ``code`` in a sorted (code, peer, cset) table, or None."""
    index = bisect.bisect_left(table, code, key=lambda entry: entry[0])
    if index < len(table) and table[index][0] == code:
        _, peer, cset = table[index]
        return peer, cset
    return None


def token(s):
    """Return the leading word of ``s``; a word of TOKEN_LENGTH or more yields ''."""
    end = len(s)
    for index, ch in enumerate(s):
        if ch in ("\0", " ", "\t"):
            end = index
            break
    if end >= TOKEN_LENGTH:
        return ""
    return s[:end]


def extension(path):
    """Return the text after the last '.' of the file name part, or None."""
    for index in range(len(path) - 1, -1, -1):
        ch = path[index]
        if ch == ".":
            return path[index + 1 :]
        if ch in ("/", "\\"):
            return None
    return None


def is_atty(fd):
    """Tell whether a file descriptor refers to a terminal."""
    return os.isatty(fd)