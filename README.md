# lvpager

Building blocks of a multilingual text pager, as a plain Python library.
Text is modelled as sequences of *international characters* (`IChar`): each
one carries the character set it belongs to, a 16-bit code and a set of
display attributes. The character sets cover ASCII, JIS X 0201/0208/0212,
GB 2312, KS C 5601, ISO-IR-165, the CNS 11643 planes, Big5, Unicode, the
ISO 8859 family, and pseudo sets for spaces, tabs and control codes.

The package uses only the standard library and supports Python 3.10 and
later.

## Modules

- **`lvpager.charsets`**
  - `Charset`, `CodingSystem` and `Attr` enumerations.
  - `CharsetInfo` records in the `CHARSETS` table: final byte, multi-byte
    flag, 94/96-set flag, code length and display width.
  - `IChar(charset, c, attr=0)`.
  - `CharsetTable(allow_unify=False).lookup(fin, multi, set94)` finds the
    character set an ISO 2022 final byte designates, keeping the last four
    hits in a small cache. It returns `Charset.NOSET` when nothing fits. With
    `allow_unify`, an unknown single-byte 94-set gives `Charset.ASCII`
    instead.
  - `make_ichar`, `high_byte` and `low_byte` pack and unpack 16-bit codes.
  - `ichar_width(charset, c, unicode_width_threshold=0x3000)` gives the
    screen width of one character. Unicode characters at or above the
    threshold are two columns wide. For tabs and control characters the
    width is stored in the high byte of the code.
  - `istr_width` adds up widths, stopping at the first `NOSET` entry.
- **`lvpager.util`**
  - `binary_search(table, code)` looks up `code` in a sorted list of
    `(code, peer)` pairs and returns the peer or `None`.
  - `binary_search_cset(table, code)` does the same for `(code, peer, cset)`
    triples and returns `(peer, cset)` or `None`.
  - `token(s)` returns the leading word of `s`. A word of 32 characters or
    more gives `''`.
  - `extension(path)` returns the text after the last `.` in the file-name
    part, or `None`.
  - `is_atty(fd)` tells whether a file descriptor is a terminal.
- **`lvpager.regex`**
  - `parse(pattern, casefold=False)` turns a `str` or a sequence of `IChar`
    into a tree of `Node` objects tagged with `Op`. The tree always ends in an
    `IGETA` end marker. `Node.copy()` copies a subtree.
  - Malformed patterns raise `RegexError`, whose `message` is one of:
    - `"unexpected eol"`
    - `"unmatched ("`
    - `"unmatched ["`
    - `"miscomposed range"`
    - `"overcrossing range"`
- **`lvpager.nfa`**
  - `nullable`, `firstpos`, `lastpos`, `followpos` and `make_followpos`
    compute position sets over a parsed tree. The sets are stored on the
    nodes themselves.
- **`lvpager.search`**
  - `contains(istr, pattern)` tells whether a plain string occurs in a
    character sequence. Both code and character set must match.
  - `mark(istr, pattern)` first clears any `Attr.STANDOUT` highlight from
    every character that is not a control character. It then highlights each
    non-overlapping match in place and returns the `(start, end)` spans.
  - `fold(charset, c, casefold)` lower-cases an ASCII capital when folding is
    on.
- **`lvpager.shiftjis`**
  - `is_sjis_lead` and `is_sjis_trail` classify bytes.
  - `sjis_to_jis` and `jis_to_sjis` convert between Shift_JIS byte pairs and
    JIS X 0208 row/cell pairs.
- **`lvpager.config`**
  - `Config` holds all settings:
    - coding systems;
    - width and height;
    - search and display switches;
    - ANSI sequences;
    - the file to show;
    - whether version output was requested.
  - `Config.apply(arg, location)` applies one argument.
  - `Config.load_file(path)` reads an option file.
  - `Config.reset()` restores the defaults.
  - `load_config(argv, environ=None, home=None)` reads the sources below.
  - `parse_coding_system(spec, location)` decodes coding-system letters.
  - `copyright_text()` returns the version banner.

## Search-expression dialect

```
regexp   = [ '^' ] exp [ '$' ]
exp      = exp1 { '\|' exp1 }
exp1     = exp2 { exp2 }
exp2     = term [ '*' | '?' | '+' ]
term     = char | '.' | '\1' | '\2' | '\(' exp '\)' | '[' [ '^' ] charset ']'
char     = ichar | '\' ichar
charset  = charset1 { charset1 }
charset1 = char [ '-' char ]
```

Alternation and grouping are written with a backslash (`\|`, `\(`, `\)`). A
plain `|` or `)` is an ordinary character. `$` is an anchor only at the very
end of the pattern, and `x+` is parsed as `x` followed by `x*`. With
`casefold=True`, ASCII capitals in the pattern are lower-cased.

## Options

`load_config` applies option sources in this order:

1. `$HOME/.lv`
2. `./.lv`
3. the `LV` environment variable
4. the arguments

In the option files, lines starting with `#` are skipped. Several letters may
share one argument, for example `-dc`. Options that take a value run to the
next `-` or `+`, as in `-Ij-Oe`.

| Option      | Meaning                                                        |
|-------------|----------------------------------------------------------------|
| `-A<cs>`    | set input, output and keyboard coding systems                  |
| `-I<cs>`    | input coding system (`-Ia` selects automatically)              |
| `-O<cs>`    | output coding system                                           |
| `-K<cs>`    | keyboard coding system                                         |
| `-W<n>`     | screen width                                                   |
| `-H<n>`     | screen height                                                  |
| `-T<n>`     | code point from which Unicode characters are double width      |
| `-S<x><seq>`| ANSI sequence for `s`tandout, `r`everse, `b`link, `u`nderline, `h`ilight |
| `-m` / `+m` | map Unicode to ISO 8859 first, on / off                        |
| `-c` / `+c` | allow / disallow ANSI escape sequences                         |
| `-d` / `+d` | case-folding search on / off                                   |
| `-f` / `+f` | fixed-string / regular-expression search                       |
| `-p` / `+p` | immediate print on / off                                       |
| `-s` / `+s` | smooth paging on / off                                         |
| `-u` / `+u` | unify 94-character sets with ASCII on / off                    |
| `-z` / `+z` | no scrolling on / off                                          |
| `-@`        | reset all options to their defaults                            |
| `-h`        | show the help file                                             |
| `-v`        | request version output; processing stops there                 |
| `-`         | stop reading options; later arguments are file names           |

Coding-system letters:

| Letter(s)              | Coding system     |
|------------------------|-------------------|
| `c`                    | iso-2022-cn       |
| `j`                    | iso-2022-jp       |
| `k`                    | iso-2022-kr       |
| `ec`, `ej`, `ek`, `et` | EUC variants      |
| `s` or `m`             | Shift_JIS         |
| `b`                    | Big5              |
| `l1` … `l9`            | ISO 8859 parts    |
| `u7`, `u8`             | UTF-7, UTF-8      |
| `r`                    | raw               |

An unknown option raises `OptionError`, which names the option and where it
came from.

## Example

```python
from lvpager.config import load_config
from lvpager.regex import parse, Op
from lvpager.shiftjis import jis_to_sjis, sjis_to_jis
from lvpager.util import extension

assert sjis_to_jis(0x88, 0x9F) == (0x30, 0x21)
assert jis_to_sjis(0x30, 0x21) == (0x88, 0x9F)
assert extension("notes.txt.gz") == "gz"

config = load_config(["-d", "notes.txt"], environ={}, home=None)
assert config.casefold_search and config.file == "notes.txt"

tree = parse("ab*")
assert tree.op == Op.CAT and tree.right.op == Op.IGETA
```

## What this package does not do

This is a library, not a pager. It provides no command, no terminal screen,
no paging or key bindings, and no reading of files or compressed input.

It has no byte decoders or encoders for the coding systems it names. Only
the Shift_JIS code conversion is present.

Search expressions are parsed and their position sets are computed, but no
matcher runs them against text. `lvpager.search` matches plain strings only.

`Config` records settings such as screen size and the help-file path, but
nothing in the package acts on them.