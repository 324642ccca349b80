"""Tests for simpledot.parsers.lexical — identifiers and quoted strings."""

import pytest

from simpledot.config import ParserConfig
from simpledot.errors import NoMatch
from simpledot.parsers.cursor import Cursor
from simpledot.parsers.lexical import bare_word, identifier, numeral, quoted_string
from simpledot.types import ErrorKind

VALID_BARE_WORDS = [
    "Howdy_there",
    "this_is_valid",
    "_so_is_this",
    "foo",
    "an_actual_typical_value",
]

VALID_QUOTED = [
    ('"foo"', "foo"),
    ('"foo\\"bar"', 'foo"bar'),
    ('"this is a longer string"', "this is a longer string"),
    ('"lots\\"of\\"extra\\"escaped\\"quotes"', 'lots"of"extra"escaped"quotes'),
    ('""', ""),
]


def run(rule, text):
    cursor = Cursor(text, ParserConfig())
    value = rule(cursor)
    return value, text[cursor.pos :]


def kinds(failure):
    return {f.kind for f in failure.walk()}


# ─── Bare words ──────────────────────────────────────────────────────────────


@pytest.mark.parametrize("text", VALID_BARE_WORDS)
def test_bare_word_consumes_whole_token(text):
    assert run(bare_word, text) == (text, "")


@pytest.mark.parametrize("text", VALID_BARE_WORDS)
def test_identifier_consumes_whole_bare_word(text):
    assert run(identifier, text) == (text, "")


def test_bare_word_boundary_is_implicit():
    assert run(bare_word, "no-kebab-case") == ("no", "-kebab-case")
    assert run(identifier, "no-kebab-case") == ("no", "-kebab-case")


def test_bare_word_high_bit_characters():
    assert run(identifier, "caf\xe9_\xff2") == ("caf\xe9_\xff2", "")


def test_bare_word_cannot_start_with_digit():
    with pytest.raises(NoMatch):
        run(bare_word, "5cantstartwithnumber")


def test_identifier_rejects_digit_leading_word():
    with pytest.raises(NoMatch) as exc:
        run(identifier, "5cantstartwithnumber")
    failure = exc.value.failure
    assert failure.kind is ErrorKind.Alt
    assert failure.position == 0
    # the numeral branch stops at its missing decimal point
    assert ErrorKind.Tag in kinds(failure)
    assert len(failure.children) == 3


@pytest.mark.parametrize("word", ["node", "edge", "graph", "digraph", "strict", "subgraph"])
def test_reserved_words_are_not_identifiers(word):
    with pytest.raises(NoMatch) as exc:
        run(identifier, word)
    assert ErrorKind.Keyword in kinds(exc.value.failure)


def test_reserved_word_prefix_is_an_identifier():
    assert run(identifier, "nodes") == ("nodes", "")
    assert run(identifier, "graph_1") == ("graph_1", "")


# ─── Numerals ────────────────────────────────────────────────────────────────


@pytest.mark.parametrize("text", ["1.5", "-2.25", "10.", "-0."])
def test_numeral(text):
    assert run(numeral, text) == (text, "")
    assert run(identifier, text) == (text, "")


def test_numeral_requires_decimal_point():
    with pytest.raises(NoMatch) as exc:
        run(numeral, "42")
    assert exc.value.failure.kind in (ErrorKind.Tag, ErrorKind.Eof)


def test_numeral_stops_after_fraction():
    assert run(identifier, "3.14abc") == ("3.14", "abc")


# ─── Quoted strings ──────────────────────────────────────────────────────────


@pytest.mark.parametrize("text,expected", VALID_QUOTED)
def test_quoted_string(text, expected):
    assert run(quoted_string, text) == (expected, "")
    assert run(identifier, text) == (expected, "")


def test_quoted_string_stops_at_closing_quote():
    assert run(quoted_string, '"a" b "c"') == ("a", ' b "c"')


def test_quoted_string_keeps_other_backslashes():
    assert run(quoted_string, r'"a\nb"') == (r"a\nb", "")


def test_unterminated_quoted_string_fails_at_end_of_input():
    text = '"missing ending quote'
    with pytest.raises(NoMatch) as exc:
        run(quoted_string, text)
    assert exc.value.failure.furthest() == len(text)
    assert ErrorKind.Eof in kinds(exc.value.failure)


def test_escaped_quote_does_not_close_string():
    with pytest.raises(NoMatch):
        run(quoted_string, '"abc\\"')


# ─── Whitespace ──────────────────────────────────────────────────────────────


def test_identifier_skips_surrounding_whitespace():
    assert run(identifier, "  \n\tfoo \t bar") == ("foo", "bar")


def test_identifier_skips_comments():
    assert run(identifier, "/* lead */ foo // trailing\n bar") == ("foo", "bar")


def test_unterminated_block_comment_fails_at_end_of_input():
    text = "foo /* no end"
    with pytest.raises(NoMatch) as exc:
        run(identifier, text)
    assert exc.value.failure.position == len(text)
    assert exc.value.failure.kind is ErrorKind.Eof


def test_comment_skipping_can_be_disabled():
    cursor = Cursor("// x\nfoo", ParserConfig(skip_comments=False))
    with pytest.raises(NoMatch):
        identifier(cursor)
