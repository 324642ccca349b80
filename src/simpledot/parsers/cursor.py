"""Input cursor and backtracking primitives shared by the DOT grammar rules.

A grammar rule is a plain function taking a ``Cursor``. On success it
advances ``cursor.pos`` and returns its value; on failure it raises
``NoMatch``. Ordered choice, optional and repetition helpers rewind the
cursor to where the attempt started before trying something else, so a
failed branch never leaves input consumed.
"""

from __future__ import annotations

import functools
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from simpledot.errors import Failure, NoMatch
from simpledot.types import ErrorKind

if TYPE_CHECKING:
    from simpledot.config import ParserConfig

T = TypeVar("T")
Rule = Callable[["Cursor"], T]

# ─── Insignificant text ──────────────────────────────────────────────────────

_WHITESPACE_RE = re.compile(r"[ \t\r\n]+")
_LINE_COMMENT_RE = re.compile(r"//[^\n]*")
_BLOCK_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_PREPROCESSOR_RE = re.compile(r"#[^\n]*")


@dataclass
class Cursor:
    """Parser cursor over one input string. Created fresh for every parse."""

    src: str
    config: ParserConfig
    pos: int = 0
    furthest: Failure | None = None

    # ── Primitive helpers ─────────────────────────────────────────────────────

    def eof(self) -> bool:
        return self.pos >= len(self.src)

    def peek(self, s: str) -> bool:
        return self.src.startswith(s, self.pos)

    def fail(
        self,
        rule: str,
        kind: ErrorKind,
        children: Iterable[Failure] = (),
        position: int | None = None,
    ) -> NoMatch:
        """Build the ``NoMatch`` for a failed attempt at the current position."""
        failure = Failure(self.pos if position is None else position, rule, kind, tuple(children))
        if self.furthest is None:
            self.furthest = failure
        else:
            depth, current = failure.furthest(), self.furthest.furthest()
            if depth > current or (depth == current and any(c is self.furthest for c in failure.children)):
                self.furthest = failure
        return NoMatch(failure)

    def _truncated(self, literal: str) -> bool:
        rest = self.src[self.pos :]
        return len(rest) < len(literal) and literal.startswith(rest)

    def tag(self, literal: str, rule: str | None = None, kind: ErrorKind = ErrorKind.Tag) -> str:
        """Consume ``literal`` exactly."""
        if self.peek(literal):
            self.pos += len(literal)
            return literal
        rule = rule or repr(literal)
        if self._truncated(literal):
            raise self.fail(rule, ErrorKind.Eof, position=len(self.src))
        raise self.fail(rule, kind)

    def char(self, c: str) -> str:
        return self.tag(c, kind=ErrorKind.Char)

    def match_re(self, pattern: re.Pattern[str], rule: str) -> str:
        m = pattern.match(self.src, self.pos)
        if m:
            self.pos = m.end()
            return m.group(0)
        raise self.fail(rule, ErrorKind.Eof if self.eof() else ErrorKind.Pattern)

    def skip_insignificant(self) -> None:
        """Skip whitespace and, unless disabled, comments.

        A ``/*`` with no closing ``*/`` runs to the end of the input and fails
        there.
        """
        while True:
            m = _WHITESPACE_RE.match(self.src, self.pos)
            if m:
                self.pos = m.end()
                continue
            if not self.config.skip_comments:
                break
            m = _LINE_COMMENT_RE.match(self.src, self.pos) or _BLOCK_COMMENT_RE.match(self.src, self.pos)
            if m is None and (self.pos == 0 or self.src[self.pos - 1] == "\n"):
                m = _PREPROCESSOR_RE.match(self.src, self.pos)
            if m:
                self.pos = m.end()
                continue
            if self.peek("/*"):
                raise self.fail("block comment", ErrorKind.Eof, position=len(self.src))
            break

    # ── Combinators ───────────────────────────────────────────────────────────

    def choice(self, rule: str, *branches: Rule[T]) -> T:
        """Ordered choice: the first branch that matches wins."""
        saved = self.pos
        failures: list[Failure] = []
        for branch in branches:
            try:
                return branch(self)
            except NoMatch as e:
                self.pos = saved
                failures.append(e.failure)
        raise self.fail(rule, ErrorKind.Alt, failures)

    def optional(self, parse: Rule[T]) -> T | None:
        saved = self.pos
        try:
            return parse(self)
        except NoMatch:
            self.pos = saved
            return None

    def many0(self, parse: Rule[T]) -> list[T]:
        values: list[T] = []
        while True:
            saved = self.pos
            try:
                value = parse(self)
            except NoMatch:
                self.pos = saved
                return values
            values.append(value)
            if self.pos == saved:
                return values

    def many1(self, parse: Rule[T], rule: str) -> list[T]:
        saved = self.pos
        try:
            first = parse(self)
        except NoMatch as e:
            self.pos = saved
            raise self.fail(rule, ErrorKind.Many1, [e.failure]) from None
        return [first] + self.many0(parse)

    def separated1(self, parse: Rule[T], separator: Rule[object]) -> list[T]:
        """One or more ``parse`` separated by ``separator``; a dangling separator is left unconsumed."""
        values = [parse(self)]
        while True:
            saved = self.pos
            try:
                separator(self)
                values.append(parse(self))
            except NoMatch:
                self.pos = saved
                return values

    def repeat_until(self, parse: Rule[T], closing: Rule[object], rule: str, at_least: int = 0) -> list[T]:
        """Repeat ``parse``, then require ``closing``.

        When neither the next repetition nor the closing rule matches, the
        failure reports both attempts.
        """
        values: list[T] = []
        while True:
            saved = self.pos
            try:
                values.append(parse(self))
                continue
            except NoMatch as e:
                self.pos = saved
                stopped = e.failure
            if len(values) < at_least:
                raise self.fail(rule, ErrorKind.Many1, [stopped])
            try:
                closing(self)
            except NoMatch as e:
                self.pos = saved
                raise self.fail(rule, ErrorKind.Alt, [stopped, e.failure]) from None
            return values

    def not_followed_by(self, parse: Rule[object], rule: str) -> None:
        saved = self.pos
        try:
            parse(self)
        except NoMatch:
            return
        finally:
            self.pos = saved
        raise self.fail(rule, ErrorKind.Lookahead)


def lexeme(rule: Callable[..., T]) -> Callable[..., T]:
    """Wrap a token rule so insignificant text before and after it is skipped."""

    @functools.wraps(rule)
    def wrapper(cursor: Cursor, *args, **kwargs) -> T:
        cursor.skip_insignificant()
        value = rule(cursor, *args, **kwargs)
        cursor.skip_insignificant()
        return value

    return wrapper
