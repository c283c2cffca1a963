"""Option handling: defaults, option strings, configuration files and the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence

from .charsets import DEFAULT_UNICODE_WIDTH_THRESHOLD, CodingSystem
from .util import token

VERSION = "v.4.21 (Mar.26th,1997)"

CONF_NAME = ".lv"
HELP_FILE = "/usr/local/lib/lv/lv.hlp"
BUF_SIZE = 128

DEFAULT_INPUT_CODING_SYSTEM = CodingSystem.AUTOSELECT
DEFAULT_OUTPUT_CODING_SYSTEM = CodingSystem.ISO_2022_JP
DEFAULT_KEYBOARD_CODING_SYSTEM = CodingSystem.ISO_2022_JP

_EUC = {
    "c": CodingSystem.EUC_CHINA,
    "j": CodingSystem.EUC_JAPAN,
    "k": CodingSystem.EUC_KOREA,
    "t": CodingSystem.EUC_TAIWAN,
}

_LATIN = {str(n): CodingSystem(CodingSystem.ISO_8859_1 + n - 1) for n in range(1, 10)}

_SIMPLE = {
    "c": CodingSystem.ISO_2022_CN,
    "j": CodingSystem.ISO_2022_JP,
    "k": CodingSystem.ISO_2022_KR,
    "m": CodingSystem.SHIFT_JIS,
    "s": CodingSystem.SHIFT_JIS,
    "b": CodingSystem.BIG_FIVE,
    "r": CodingSystem.RAW,
}

_ANSI = {
    "s": "standout",
    "r": "reverse",
    "b": "blink",
    "u": "underline",
    "h": "hilight",
}

# Single-letter switches: letter -> (attribute, value set by '-').
_SWITCHES = {
    "m": "unimap_iso8859",
    "c": "allow_ansi_esc",
    "d": "casefold_search",
    "p": "immediate_print",
    "s": "smooth_paging",
    "u": "allow_unify",
    "z": "no_scroll",
}


class OptionError(ValueError):
    """Raised for an option that is not recognised."""

    def __init__(self, text, location):
        super().__init__(f"unknown option {text} in {location}")
        self.text = text
        self.location = location


def parse_coding_system(spec, location):
    """Return the coding system named by a selector such as 'j', 'ej', 'l2' or 'u7'.

    Raises OptionError when the selector names no coding system.
    """
    kind, variant = spec[:1], spec[1:2]
    if kind == "e":
        return _EUC.get(variant, CodingSystem.EUC_JAPAN)
    if kind == "l":
        return _LATIN.get(variant, CodingSystem.ISO_8859_1)
    if kind == "u":
        return CodingSystem.UTF_7 if variant == "7" else CodingSystem.UTF_8
    if kind and kind in _SIMPLE:
        return _SIMPLE[kind]
    raise OptionError(spec, location)


def _atoi(text: str) -> int:
    text = text.lstrip(" \t\n\r\f\v")
    sign = 1
    if text[:1] in ("-", "+"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for ch in text:
        if not "0" <= ch <= "9":
            break
        digits += ch
    return sign * int(digits) if digits else 0


def _next_option(s: str, i: int) -> int:
    """Skip to the character after the next '-' or '+' separator."""
    i += 1
    while i < len(s):
        if s[i] in "-+":
            return i + 1
        i += 1
    return i


@dataclass
class Config:
    """Settings gathered from configuration files, the environment and arguments."""

    file: Optional[str] = None
    width: int = -1
    height: int = -1
    options: bool = True
    input_coding: CodingSystem = DEFAULT_INPUT_CODING_SYSTEM
    output_coding: CodingSystem = DEFAULT_OUTPUT_CODING_SYSTEM
    keyboard_coding: CodingSystem = DEFAULT_KEYBOARD_CODING_SYSTEM
    unicode_width_threshold: int = DEFAULT_UNICODE_WIDTH_THRESHOLD
    unimap_iso8859: bool = False
    allow_unify: bool = False
    immediate_print: bool = False
    regexp_search: bool = True
    casefold_search: bool = False
    allow_ansi_esc: bool = False
    no_scroll: bool = False
    smooth_paging: bool = False
    ansi: dict = field(default_factory=dict)
    help_file: str = HELP_FILE
    version_requested: bool = False

    def reset(self):
        """Restore every setting to its default, keeping the help file location."""
        defaults = Config(help_file=self.help_file)
        for name in vars(defaults):
            setattr(self, name, getattr(defaults, name))

    def _coding(self, rest: str, location: str) -> CodingSystem:
        try:
            return parse_coding_system(rest[1:], location)
        except OptionError:
            raise OptionError(rest, location) from None

    def _apply_minus(self, s: str, location: str) -> None:
        if not s:
            self.options = False
            return
        i = 0
        while i < len(s):
            ch = s[i]
            rest = s[i:]
            if ch in _SWITCHES:
                setattr(self, _SWITCHES[ch], True)
                i += 1
                continue
            if ch == "f":
                self.regexp_search = False
                i += 1
                continue
            if ch == "@":
                self.reset()
                i += 1
                continue
            if ch == "A":
                coding = self._coding(rest, location)
                self.input_coding = self.output_coding = self.keyboard_coding = coding
            elif ch == "I":
                if rest[1:2] == "a":
                    self.input_coding = CodingSystem.AUTOSELECT
                else:
                    self.input_coding = self._coding(rest, location)
            elif ch == "K":
                self.keyboard_coding = self._coding(rest, location)
            elif ch == "O":
                self.output_coding = self._coding(rest, location)
            elif ch == "S":
                name = _ANSI.get(rest[1:2])
                if name is None:
                    raise OptionError(rest, location)
                self.ansi[name] = token(rest[2:])
            elif ch == "W":
                self.width = _atoi(rest[1:])
            elif ch == "H":
                self.height = _atoi(rest[1:])
            elif ch == "T":
                self.unicode_width_threshold = _atoi(rest[1:]) & 0xFFFF
            elif ch == "h":
                self.file = self.help_file
            elif ch == "v":
                self.version_requested = True
                return
            elif ch not in " \t":
                raise OptionError(rest, location)
            i = _next_option(s, i)

    def _apply_plus(self, s: str, location: str) -> None:
        i = 0
        while i < len(s):
            ch = s[i]
            if ch in _SWITCHES:
                setattr(self, _SWITCHES[ch], False)
                i += 1
                continue
            if ch == "f":
                self.regexp_search = True
                i += 1
                continue
            if ch not in " \t":
                raise OptionError(s[i:], location)
            i = _next_option(s, i)

    def apply(self, arg, location):
        """Apply one argument: an option group starting with '-' or '+', or a file name.

        A lone '-' ends option processing. Raises OptionError for unknown options.
        """
        if self.options and arg.startswith("-"):
            self._apply_minus(arg[1:], location)
        elif self.options and arg.startswith("+"):
            self._apply_plus(arg[1:], location)
        else:
            self.file = arg

    def load_file(self, path):
        """Apply each non-comment line of a configuration file; a missing file is ignored."""
        try:
            with open(path, encoding="latin-1", newline="") as handle:
                text = handle.read()
        except OSError:
            return
        for line in text.splitlines(keepends=True):
            for start in range(0, len(line), BUF_SIZE - 1):
                chunk = line[start : start + BUF_SIZE - 1]
                if chunk.startswith("#"):
                    continue
                end = len(chunk)
                while end > 0 and ord(chunk[end - 1]) < 0x20:
                    end -= 1
                self.apply(chunk[:end], str(path))
                if self.version_requested:
                    return


def load_config(argv: Sequence[str], environ: Optional[Mapping[str, str]] = None,
                home: Optional[str] = None):
    """Build a Config from ~/.lv, ./.lv, the LV variable and the arguments, in that order.

    ``argv`` holds the arguments without the program name. Processing stops
    as soon as version output is requested.
    """
    if environ is None:
        environ = os.environ
    if home is None:
        home = environ.get("HOME")
    config = Config()
    if home is not None:
        config.load_file(home + "/" + CONF_NAME)
        if config.version_requested:
            return config
    config.load_file(CONF_NAME)
    if config.version_requested:
        return config
    env = environ.get("LV")
    if env is not None:
        config.apply(env, "environment")
        if config.version_requested:
            return config
    config.file = None
    for arg in argv:
        config.apply(arg, "argument")
        if config.version_requested:
            break
    return config


def copyright_text():
    """Return the version banner printed for -v."""
    return f"# lv {VERSION}\n"