"""Identifier grammar.

An identifier is one of:

* a bare word of letters, underscores, digits and characters in the
  ``\\200``-``\\377`` range, not beginning with a digit;
* a numeral ``-?[0-9]+.[0-9]*`` (the decimal point is required);
* a double-quoted string, possibly containing escaped quotes (``\\"``).

All three produce plain text; which form was used is not recorded.
"""

from __future__ import annotations

import re

from simpledot.errors import NoMatch
from simpledot.parsers.cursor import Cursor, lexeme
from simpledot.types import ErrorKind

_BARE_WORD_RE = re.compile(r"[A-Za-z_\x80-\xff][A-Za-z0-9_\x80-\xff]*")
_DIGITS_RE = re.compile(r"[0-9]+")
_QUOTED_FRAGMENT_RE = re.compile(r'(?:[^"\\]|\\(?!"))+')

RESERVED_WORDS = frozenset({"strict", "graph", "digraph", "node", "edge", "subgraph"})


def bare_word(cursor: Cursor) -> str:
    start = cursor.pos
    word = cursor.match_re(_BARE_WORD_RE, "bare word")
    if word in RESERVED_WORDS:
        cursor.pos = start
        raise cursor.fail(f"bare word (reserved {word!r})", ErrorKind.Keyword)
    return word


def numeral(cursor: Cursor) -> str:
    start = cursor.pos
    cursor.optional(lambda c: c.tag("-"))
    cursor.match_re(_DIGITS_RE, "numeral digits")
    cursor.tag(".", rule="numeral decimal point")
    cursor.optional(lambda c: c.match_re(_DIGITS_RE, "numeral fraction"))
    return cursor.src[start : cursor.pos]


def _quoted_fragment(cursor: Cursor) -> str:
    if cursor.peek('\\"'):
        cursor.pos += 2
        return '"'
    return cursor.match_re(_QUOTED_FRAGMENT_RE, "quoted string fragment")


def quoted_string(cursor: Cursor) -> str:
    """Parse ``"..."``; ``\\"`` becomes ``"``, any other backslash is kept as is.

    The closing quote is required: running out of input fails the rule.
    """
    start = cursor.pos
    cursor.char('"')
    fragments = cursor.many0(_quoted_fragment)
    try:
        cursor.char('"')
    except NoMatch as e:
        raise cursor.fail("quoted string", e.failure.kind, [e.failure], position=start) from None
    return "".join(fragments)


@lexeme
def identifier(cursor: Cursor) -> str:
    return cursor.choice("identifier", bare_word, numeral, quoted_string)
