"""Parser for the pager's search expressions.

Grammar::

    regexp   = [ '^' ] exp [ '$' ]
    exp      = exp1 { '\\|' exp1 }
    exp1     = exp2 { exp2 }
    exp2     = term [ '*' | '?' | '+' ]
    term     = char | '.' | '\\1' | '\\2' | '\\(' exp ')' | '[' [ '^' ] charset ']'
    char     = ichar | '\\' ichar
    charset  = charset1 { charset1 }
    charset1 = char [ '-' char ]
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional, Union

from .charsets import Charset, IChar


class Op(IntEnum):
    """Node kinds of a parsed expression; leaves come first."""

    LEAF = 0
    SIMPLE_LEAF = 1
    HAT = 2
    DOLLAR = 3
    RANGE = 4
    COMPLEMENT = 5
    COMPRANGE = 6
    CATEGORY1 = 7
    CATEGORY2 = 8
    CATEGORY3 = 9
    PERIOD = 10
    IGETA = 11
    OR = 12
    CLOSURE = 13
    QUESTION = 14
    CAT = 15


OP_LEAF_MAX = 12


class RegexError(ValueError):
    """Raised when a search expression cannot be parsed."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


@dataclass(eq=False)
class Node:
    """One node of an expression tree, with position sets filled in by the NFA pass."""

    op: Op
    ic: Optional[IChar] = None
    left: Optional["Node"] = None
    right: Optional["Node"] = None
    firstpos: Optional[list] = None
    lastpos: Optional[list] = None
    followpos: Optional[list] = None

    def copy(self):
        """Return a structural copy of the subtree, without position sets."""
        return Node(
            self.op,
            None if self.ic is None else IChar(self.ic.charset, self.ic.c),
            None if self.left is None else self.left.copy(),
            None if self.right is None else self.right.copy(),
        )


_END = IChar(Charset.NOSET, 0)


def _is_ascii(ic, ch):
    return ic.charset == Charset.ASCII and ic.c == ord(ch)


def _to_istr(pattern: Union[str, Iterable[IChar]]) -> list[IChar]:
    chars: list[IChar] = []
    if isinstance(pattern, str):
        for ch in pattern:
            code = ord(ch)
            charset = Charset.ASCII if code < 0x80 else Charset.UNICODE
            chars.append(IChar(charset, code))
        return chars
    for ic in pattern:
        if ic.charset == Charset.NOSET:
            break
        chars.append(IChar(ic.charset, ic.c, ic.attr))
    return chars


class _Parser:
    def __init__(self, istr: list[IChar], casefold: bool):
        self.istr = istr
        self.casefold = casefold
        self.idx = 0
        self.complement = False

    def peek(self) -> IChar:
        if 0 <= self.idx < len(self.istr):
            return self.istr[self.idx]
        return _END

    def get(self) -> IChar:
        ic = self.peek()
        self.idx += 1
        return ic

    def char(self) -> Node:
        ic = self.get()
        if _is_ascii(ic, "\\"):
            ic = self.get()
        charset, c = ic.charset, ic.c
        if self.casefold and charset == Charset.ASCII and ord("A") <= c <= ord("Z"):
            c += 0x20
        if charset < Charset.PSEUDO:
            return Node(Op.SIMPLE_LEAF, IChar(charset, c))
        return Node(Op.LEAF, IChar(charset, c & 0xFF))

    def charset1(self) -> Node:
        node = self.char()
        ic = self.peek()
        if _is_ascii(ic, "-"):
            self.idx += 1
            ic = self.peek()
            if _is_ascii(ic, "]"):
                self.idx -= 1
                if self.complement:
                    node.op = Op.COMPLEMENT
                return node
            low = node
            high = self.char()
            op = Op.COMPRANGE if self.complement else Op.RANGE
            node = Node(op, IChar(ic.charset, ic.c), low, high)
            leaves = (Op.LEAF, Op.SIMPLE_LEAF)
            if low.op not in leaves or high.op not in leaves:
                raise RegexError("miscomposed range")
            if low.ic.charset != high.ic.charset:
                raise RegexError("overcrossing range")
        elif self.complement:
            node.op = Op.COMPLEMENT
        return node

    def charset(self) -> Node:
        result: Optional[Node] = None
        while True:
            node = self.charset1()
            result = node if result is None else Node(Op.OR, None, result, node)
            ic = self.peek()
            if ic.charset == Charset.NOSET or _is_ascii(ic, "]"):
                return result

    def term(self) -> Node:
        ic = self.peek()
        if ic.charset == Charset.NOSET:
            raise RegexError("unexpected eol")
        if ic.charset == Charset.ASCII:
            if ic.c == ord("."):
                self.idx += 1
                return Node(Op.PERIOD)
            if ic.c == ord("\\"):
                self.idx += 1
                ic = self.peek()
                if _is_ascii(ic, "1"):
                    self.idx += 1
                    return Node(Op.CATEGORY1)
                if _is_ascii(ic, "2"):
                    self.idx += 1
                    return Node(Op.CATEGORY2)
                if _is_ascii(ic, "("):
                    self.idx += 1
                    node = self.exp()
                    if not _is_ascii(self.get(), ")"):
                        raise RegexError("unmatched (")
                    return node
                self.idx -= 1
            elif ic.c == ord("["):
                self.idx += 1
                if _is_ascii(self.peek(), "^"):
                    self.complement = True
                    self.idx += 1
                try:
                    node = self.charset()
                finally:
                    self.complement = False
                if not _is_ascii(self.get(), "]"):
                    raise RegexError("unmatched [")
                return node
        return self.char()

    def exp2(self) -> Node:
        node = self.term()
        ic = self.peek()
        if _is_ascii(ic, "*"):
            self.idx += 1
            node = Node(Op.CLOSURE, None, node)
        elif _is_ascii(ic, "?"):
            self.idx += 1
            node = Node(Op.QUESTION, None, node)
        elif _is_ascii(ic, "+"):
            self.idx += 1
            node = Node(Op.CAT, None, node, Node(Op.CLOSURE, None, node.copy()))
        return node

    def exp1(self) -> Node:
        result: Optional[Node] = None
        while True:
            node = self.exp2()
            result = node if result is None else Node(Op.CAT, None, result, node)
            ic = self.peek()
            if ic.charset == Charset.NOSET:
                return result
            if _is_ascii(ic, "\\"):
                self.idx += 1
                ic = self.peek()
                if _is_ascii(ic, ")") or _is_ascii(ic, "|"):
                    return result
                self.idx -= 1
            elif _is_ascii(ic, "$"):
                self.idx += 1
                following = self.peek()
                self.idx -= 1
                if following.charset == Charset.NOSET:
                    return result

    def exp(self) -> Node:
        result: Optional[Node] = None
        while True:
            node = self.exp1()
            result = node if result is None else Node(Op.OR, None, result, node)
            if _is_ascii(self.peek(), "|"):
                self.idx += 1
            else:
                return result

    def regexp(self) -> Node:
        if _is_ascii(self.peek(), "^"):
            self.idx += 1
            node = Node(Op.CAT, None, Node(Op.HAT), self.exp())
        else:
            node = self.exp()
        if _is_ascii(self.peek(), "$"):
            self.idx += 1
            if self.peek().charset == Charset.NOSET:
                node = Node(Op.CAT, None, node, Node(Op.DOLLAR))
        return node


def parse(pattern, casefold=False):
    """Parse a pattern (a str or a sequence of IChar) into a tree ending in IGETA.

    Raises RegexError when the pattern is malformed.
    """
    parser = _Parser(_to_istr(pattern), casefold)
    tree = parser.regexp()
    return Node(Op.CAT, None, tree, Node(Op.IGETA))