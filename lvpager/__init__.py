"""Multilingual pager core: character sets, Shift_JIS conversion, search and options."""

__version__ = "4.21.0"

__all__ = ["charsets", "config", "nfa", "regex", "search", "shiftjis", "util"]