"""Plain-string search over international character strings."""

from __future__ import annotations

from typing import Iterable, Union

from .charsets import Attr, Charset, IChar

Pattern = Union[str, Iterable[IChar]]


def fold(charset, c, casefold):
    """Lower-case an ASCII capital when case folding is on; otherwise return c."""
    if not casefold:
        return c
    if charset != Charset.ASCII or not ord("A") <= c <= ord("Z"):
        return c
    return c + 0x20


def _as_istr(chars: Pattern) -> list[IChar]:
    """Turn a str or an IChar sequence into a list, stopping at a NOSET entry."""
    if isinstance(chars, str):
        return [
            IChar(Charset.ASCII if ord(ch) < 0x80 else Charset.UNICODE, ord(ch))
            for ch in chars
        ]
    result: list[IChar] = []
    for ic in chars:
        if ic.charset == Charset.NOSET:
            break
        result.append(ic)
    return result


def _matches_at(istr: list[IChar], start: int, pattern: list[IChar]) -> bool:
    if start + len(pattern) > len(istr):
        return False
    return all(
        text.c == pat.c and text.charset == pat.charset
        for text, pat in zip(istr[start:], pattern)
    )


def _spans(istr: list[IChar], pattern: list[IChar]):
    """Yield non-overlapping (start, end) spans where the pattern occurs."""
    if not pattern:
        return
    first = pattern[0].c
    index = 0
    while index < len(istr):
        if istr[index].c == first and _matches_at(istr, index, pattern):
            end = index + len(pattern)
            yield index, end
            index = end
        else:
            index += 1


def contains(istr, pattern):
    """Tell whether the pattern occurs in the string, charsets compared exactly."""
    text = _as_istr(istr)
    return next(_spans(text, _as_istr(pattern)), None) is not None


def mark(istr, pattern):
    """Highlight every occurrence of the pattern and return the matched spans.

    Any earlier highlight is removed from all but control characters, then each
    non-overlapping match gets the STANDOUT attribute. The characters of
    ``istr`` are updated in place; spans are (start, end) index pairs.
    """
    text = _as_istr(istr)
    for ic in text:
        if ic.charset != Charset.CNTRL:
            ic.attr &= ~Attr.STANDOUT
    spans = list(_spans(text, _as_istr(pattern)))
    for start, end in spans:
        for ic in text[start:end]:
            ic.attr |= Attr.STANDOUT
    return spans