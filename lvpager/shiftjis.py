"""Conversion between Shift_JIS byte pairs and JIS X 0208 code points."""

from __future__ import annotations


def is_sjis_lead(b):
    """Tell whether a byte can start a two-byte Shift_JIS character."""
    return 0x81 <= b <= 0x9F or 0xE0 <= b <= 0xFC


def is_sjis_trail(b):
    """Tell whether a byte can be the second byte of a Shift_JIS character."""
    return 0x40 <= b <= 0x7E or 0x80 <= b <= 0xFC


def sjis_to_jis(c1, c2):
    """Convert a Shift_JIS byte pair to a JIS (row, cell) byte pair."""
    if c1 >= 0xE0:
        c1 = (c1 << 1) - 0x160
    else:
        c1 = (c1 << 1) - 0xE0
    if c2 >= 0x9F:
        c2 -= 0x7E
    else:
        c1 -= 1
        c2 -= 0x20 if c2 >= 0x7F else 0x1F
    return c1 & 0xFF, c2 & 0xFF


def jis_to_sjis(c1, c2):
    """Convert a JIS (row, cell) byte pair to a Shift_JIS byte pair."""
    if c1 & 1 == 0:
        c2 += 0x7E
    else:
        c2 += 0x20 if c2 >= 0x60 else 0x1F
    if c1 >= 0x5F:
        c1 = ((c1 - 0x5F) >> 1) + 0xE0
    else:
        c1 = ((c1 - 0x21) >> 1) + 0x81
    return c1 & 0xFF, c2 & 0xFF