"""Failure reporting for the DOT grammar.

Grammar rules fail by raising ``NoMatch`` with a ``Failure`` describing what
was attempted where. Ordered choices collect the failures of every branch
they tried, so a failure is a tree. ``parse_graph`` turns the outcome into one
of three public exceptions, all ``ValueError`` subclasses:

- ``UnexpectedEof``: the input ran out while a rule still needed characters.
- ``UnexpectedInput``: a whole graph matched but text remains after it.
- ``ParseError``: anything else; carries the flattened failure trace.
"""

from __future__ import annotations

from dataclasses import dataclass

from simpledot.types import ErrorKind


def line_col(src: str, pos: int) -> tuple[int, int]:
    """1-based line and column of offset ``pos`` in ``src``."""
    line = src.count("\n", 0, pos) + 1
    col = pos - (src.rfind("\n", 0, pos) + 1) + 1
    return line, col


@dataclass(frozen=True)
class Failure:
    """One failed attempt of a rule at an input offset."""

    position: int
    rule: str
    kind: ErrorKind
    children: tuple[Failure, ...] = ()

    def furthest(self) -> int:
        """Deepest input offset reached by this attempt or any nested one."""
        return max([self.position] + [child.furthest() for child in self.children])

    def walk(self):
        """Yield nested failures innermost first, then this one."""
        for child in self.children:
            yield from child.walk()
        yield self


@dataclass(frozen=True)
class TraceEntry:
    position: int
    rule: str
    kind: ErrorKind
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}: {self.rule} ({self.kind.name.lower()})"


class NoMatch(Exception):
    """Raised by a grammar rule that does not match; never escapes the parser."""

    def __init__(self, failure: Failure) -> None:
        super().__init__(failure.rule)
        self.failure = failure


class GraphParseError(ValueError):
    """Base of the errors raised by ``parse_graph``."""

    def __init__(self, message: str, src: str, position: int) -> None:
        super().__init__(message)
        self.src = src
        self.position = position
        self.line, self.column = line_col(src, position)


class UnexpectedEof(GraphParseError):
    def __init__(self, src: str) -> None:
        super().__init__("unexpected eof", src, len(src))


class UnexpectedInput(GraphParseError):
    def __init__(self, src: str, position: int) -> None:
        self.remainder = src[position:]
        super().__init__(f"unexpected additional input: {self.remainder}", src, position)


class ParseError(GraphParseError):
    """A rule failed before a graph could be matched.

    ``failures`` holds the failure trees to report: the one that stopped the
    parse and, when it got further into the input, the deepest failure seen
    along the way. ``trace`` flattens them innermost first, listing each
    (position, rule, kind) once.
    """

    def __init__(self, src: str, failures: tuple[Failure, ...]) -> None:
        self.failures = failures
        self.trace = _trace(src, failures)
        position = max(failure.furthest() for failure in failures)
        lines = "\n".join(f"  {entry}" for entry in self.trace)
        super().__init__(f"parse error:\n{lines}", src, position)


def _trace(src: str, failures: tuple[Failure, ...]) -> tuple[TraceEntry, ...]:
    seen: set[tuple[int, str, ErrorKind]] = set()
    entries: list[TraceEntry] = []
    for failure in failures:
        for f in failure.walk():
            key = (f.position, f.rule, f.kind)
            if key in seen:
                continue
            seen.add(key)
            entries.append(TraceEntry(f.position, f.rule, f.kind, *line_col(src, f.position)))
    return tuple(entries)
