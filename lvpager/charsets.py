"""Character sets, coding systems and the international character model."""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Iterable

# Control characters.
NUL = 0x00
BEL = 0x07
BS = 0x08
HT = 0x09
LF = 0x0A
VT = 0x0B
FF = 0x0C
CR = 0x0D
SO = 0x0E
SI = 0x0F
EM = 0x19
SUB = 0x1A
ESC = 0x1B
SP = 0x20
DEL = 0x7F
LS0 = 0x0F
LS1 = 0x0E
SS2 = 0x8E
SS3 = 0x8F

# Widths used when displaying characters.
ICHAR_WIDTH = 2
CNTRLWIDTH_SHORTFORM = 1
CNTRLWIDTH_MIDDLEFORM = 2
CNTRLWIDTH_LONGFORM = 4
HTAB_WIDTH = 8
HTAB_INTERNAL_WIDTH = 2

# Graphic regions and graphic sets of ISO 2022.
GL = 0
GR = 1
G0 = 0
G1 = 1
G2 = 2
G3 = 3

DEFAULT_UNICODE_WIDTH_THRESHOLD = 0x3000


class Charset(IntEnum):
    """Character sets known to the pager."""

    ISO646_US = 0
    X0201ROMAN = 1
    X0201KANA = 2
    ISO8859_1 = 3
    ISO8859_2 = 4
    ISO8859_3 = 5
    ISO8859_4 = 6
    ISO8859_5 = 7
    ISO8859_6 = 8
    ISO8859_7 = 9
    ISO8859_8 = 10
    ISO8859_9 = 11
    C6226 = 12
    GB2312 = 13
    X0208 = 14
    KSC5601 = 15
    X0212 = 16
    ISO_IR_165 = 17
    CNS_1 = 18
    CNS_2 = 19
    CNS_3 = 20
    CNS_4 = 21
    CNS_5 = 22
    CNS_6 = 23
    CNS_7 = 24
    BIG5 = 25
    UNICODE = 26
    PSEUDO = 27
    SPACE = 28
    HTAB = 29
    CNTRL = 30
    NOSET = 31

    ASCII = 0


class CodingSystem(IntEnum):
    """Byte encodings a file may be read or written in."""

    AUTOSELECT = 0
    ISO_2022_CN = 1
    ISO_2022_JP = 2
    ISO_2022_KR = 3
    EUC_CHINA = 4
    EUC_JAPAN = 5
    EUC_KOREA = 6
    EUC_TAIWAN = 7
    SHIFT_JIS = 8
    BIG_FIVE = 9
    ISO_8859_1 = 10
    ISO_8859_2 = 11
    ISO_8859_3 = 12
    ISO_8859_4 = 13
    ISO_8859_5 = 14
    ISO_8859_6 = 15
    ISO_8859_7 = 16
    ISO_8859_8 = 17
    ISO_8859_9 = 18
    UTF_7 = 19
    UTF_8 = 20
    RAW = 21


class Attr(IntFlag):
    """Display attributes of a character."""

    NULL = 0x00
    COLOR_R = 0x01
    COLOR_B = 0x02
    COLOR_G = 0x04
    COLOR = 0x07
    HILIGHT = 0x08
    UNDERLINE = 0x10
    BLINK = 0x20
    REVERSE = 0x40
    STANDOUT = 0x80


@dataclass(frozen=True)
class CharsetInfo:
    """Static properties of one character set."""

    charset: Charset
    fin: str
    multi: bool
    set94: bool
    length: int
    width: int


@dataclass(slots=True)
class IChar:
    """One international character: a charset, a code and display attributes."""

    charset: Charset
    c: int
    attr: int = 0


_SET94 = True
_SET96 = False

CHARSETS: tuple[CharsetInfo, ...] = (
    CharsetInfo(Charset.ISO646_US, "B", False, _SET94, 1, 1),
    CharsetInfo(Charset.X0201ROMAN, "J", False, _SET94, 1, 1),
    CharsetInfo(Charset.X0201KANA, "I", False, _SET94, 1, 1),
    CharsetInfo(Charset.ISO8859_1, "A", False, _SET96, 1, 1),
    CharsetInfo(Charset.ISO8859_2, "B", False, _SET96, 1, 1),
    CharsetInfo(Charset.ISO8859_3, "C", False, _SET96, 1, 1),
    CharsetInfo(Charset.ISO8859_4, "D", False, _SET96, 1, 1),
    CharsetInfo(Charset.ISO8859_5, "L", False, _SET96, 1, 1),
    CharsetInfo(Charset.ISO8859_6, "G", False, _SET96, 1, 1),
    CharsetInfo(Charset.ISO8859_7, "F", False, _SET96, 1, 1),
    CharsetInfo(Charset.ISO8859_8, "H", False, _SET96, 1, 1),
    CharsetInfo(Charset.ISO8859_9, "M", False, _SET96, 1, 1),
    CharsetInfo(Charset.C6226, "@", True, _SET94, 2, 2),
    CharsetInfo(Charset.GB2312, "A", True, _SET94, 2, 2),
    CharsetInfo(Charset.X0208, "B", True, _SET94, 2, 2),
    CharsetInfo(Charset.KSC5601, "C", True, _SET94, 2, 2),
    CharsetInfo(Charset.X0212, "D", True, _SET94, 2, 2),
    CharsetInfo(Charset.ISO_IR_165, "E", True, _SET94, 2, 2),
    CharsetInfo(Charset.CNS_1, "G", True, _SET94, 2, 2),
    CharsetInfo(Charset.CNS_2, "H", True, _SET94, 2, 2),
    CharsetInfo(Charset.CNS_3, "I", True, _SET94, 2, 2),
    CharsetInfo(Charset.CNS_4, "J", True, _SET94, 2, 2),
    CharsetInfo(Charset.CNS_5, "K", True, _SET94, 2, 2),
    CharsetInfo(Charset.CNS_6, "L", True, _SET94, 2, 2),
    CharsetInfo(Charset.CNS_7, "M", True, _SET94, 2, 2),
    CharsetInfo(Charset.BIG5, "0", True, _SET94, 2, 2),
    CharsetInfo(Charset.UNICODE, "2", True, _SET94, 2, 2),
    CharsetInfo(Charset.PSEUDO, "", False, _SET94, 0, 0),
    CharsetInfo(Charset.SPACE, "B", False, _SET94, 1, 1),
    CharsetInfo(Charset.HTAB, "B", False, _SET94, 1, 0),
    CharsetInfo(Charset.CNTRL, "B", False, _SET94, 1, 0),
)

if any(info.charset != index for index, info in enumerate(CHARSETS)):
    raise RuntimeError("invalid ichar table")


_CACHE_SIZE = 4


class CharsetTable:
    """Finds the character set designated by an ISO 2022 final character."""

    def __init__(self, allow_unify=False):
        self.allow_unify = allow_unify
        self._cache: OrderedDict[tuple[str, bool, bool], Charset] = OrderedDict()

    def lookup(self, fin, multi, set94):
        """Return the charset for (fin, multi, set94), or NOSET if none fits.

        With allow_unify, an unknown single-byte 94-set falls back to ASCII.
        """
        key = (fin, bool(multi), bool(set94))
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        for info in CHARSETS[: Charset.PSEUDO]:
            if (info.multi, info.set94, info.fin) == (key[1], key[2], fin):
                self._cache[key] = info.charset
                if len(self._cache) > _CACHE_SIZE:
                    self._cache.popitem(last=False)
                return info.charset
        if self.allow_unify and not multi and set94:
            return Charset.ASCII
        return Charset.NOSET


def make_ichar(c1, c2):
    """Combine two bytes into one 16-bit character code."""
    return ((c1 & 0xFF) << 8) | (c2 & 0xFF)


def high_byte(ic):
    """Return the first byte of a 16-bit character code."""
    return (ic >> 8) & 0xFF


def low_byte(ic):
    """Return the second byte of a 16-bit character code."""
    return ic & 0xFF


def ichar_width(charset, c, unicode_width_threshold=DEFAULT_UNICODE_WIDTH_THRESHOLD):
    """Return the number of screen columns a character occupies."""
    if charset == Charset.UNICODE:
        return 1 if c < unicode_width_threshold else 2
    if charset in (Charset.HTAB, Charset.CNTRL):
        return high_byte(c)
    if not 0 <= charset < len(CHARSETS):
        raise ValueError(f"no width for charset {charset!r}")
    return CHARSETS[charset].width


def istr_width(
    istr: Iterable[IChar], unicode_width_threshold=DEFAULT_UNICODE_WIDTH_THRESHOLD
):
    """Return the total width of a character string, stopping at a NOSET entry."""
    total = 0
    for ch in istr:
        if ch.charset == Charset.NOSET:
            break
        total += ichar_width(ch.charset, ch.c, unicode_width_threshold)
    return total