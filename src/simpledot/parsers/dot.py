"""DOT statement and graph grammar — hand-rolled ordered-choice descent.

Statement shapes are tried in a fixed order: edge, node, definition,
attribute block. Edge comes before node because every edge chain starts with
something that is also a complete node statement; both come before the
definition form because all three begin with an identifier.
"""

from __future__ import annotations

import logging

from simpledot.config import ParserConfig
from simpledot.errors import Failure, GraphParseError, NoMatch, ParseError, UnexpectedEof, UnexpectedInput
from simpledot.ir.ast import (
    AttributeStatement,
    DefinitionStatement,
    EdgeStatement,
    Graph,
    NodeStatement,
    Statement,
)
from simpledot.parsers.attributes import attribute_list
from simpledot.parsers.cursor import Cursor, lexeme
from simpledot.parsers.lexical import identifier
from simpledot.types import AttributeKind, GraphKind

logger = logging.getLogger(__name__)

_ATTRIBUTE_KINDS: list[tuple[str, AttributeKind]] = [
    ("graph", AttributeKind.Graph),
    ("node", AttributeKind.Node),
    ("edge", AttributeKind.Edge),
]

_GRAPH_KINDS: list[tuple[str, GraphKind]] = [
    ("graph", GraphKind.Undirected),
    ("digraph", GraphKind.Directed),
]


def _keyword(word: str, value):
    @lexeme
    def parse(cursor: Cursor):
        cursor.tag(word)
        return value

    return parse


@lexeme
def _punct(cursor: Cursor, c: str) -> str:
    return cursor.char(c)


@lexeme
def edge_operator(cursor: Cursor) -> str:
    return cursor.choice("edge operator", lambda c: c.tag("--"), lambda c: c.tag("->"))


def _edge_target(cursor: Cursor) -> str:
    edge_operator(cursor)
    return identifier(cursor)


# ─── Statements ──────────────────────────────────────────────────────────────


def edge_statement(cursor: Cursor) -> EdgeStatement:
    head = identifier(cursor)
    rest = cursor.many1(_edge_target, "edge chain")
    attributes = cursor.optional(attribute_list) or ()
    return EdgeStatement(chain=(head, *rest), attributes=attributes)


def node_statement(cursor: Cursor) -> NodeStatement:
    name = identifier(cursor)
    # `a = b` is a definition, not node `a` followed by stray input
    cursor.not_followed_by(lambda c: c.char("="), "node statement")
    attributes = cursor.optional(attribute_list) or ()
    return NodeStatement(name=name, attributes=attributes)


def definition_statement(cursor: Cursor) -> DefinitionStatement:
    lhs = identifier(cursor)
    cursor.char("=")
    rhs = identifier(cursor)
    return DefinitionStatement(lhs=lhs, rhs=rhs)


def attribute_statement(cursor: Cursor) -> AttributeStatement:
    kind = cursor.choice("attribute statement kind", *(_keyword(w, k) for w, k in _ATTRIBUTE_KINDS))
    return AttributeStatement(kind=kind, attributes=attribute_list(cursor))


@lexeme
def statement(cursor: Cursor) -> Statement:
    stmt = cursor.choice(
        "statement",
        edge_statement,
        node_statement,
        definition_statement,
        attribute_statement,
    )
    cursor.optional(lambda c: _punct(c, ";"))
    return stmt


# ─── Graph ───────────────────────────────────────────────────────────────────


def graph(cursor: Cursor) -> Graph:
    strict = cursor.optional(_keyword("strict", True)) is not None
    kind = cursor.choice("graph kind", *(_keyword(w, k) for w, k in _GRAPH_KINDS))
    _punct(cursor, "{")
    statements = cursor.repeat_until(statement, lambda c: _punct(c, "}"), "statement list")
    return Graph(kind=kind, strict=strict, statements=tuple(statements))


class DotParser:
    """Parses DOT source text into a Graph IR."""

    def __init__(self, config: ParserConfig | None = None) -> None:
        self.config = config or ParserConfig()

    def parse(self, src: str) -> Graph:
        """Parse a complete DOT source text into a Graph IR.

        Raises:
            UnexpectedEof: The input ended while a rule still needed characters.
            UnexpectedInput: A graph matched but non-whitespace text follows it.
            ParseError: Any other failure; carries the failure trace.
        """
        logger.debug("parsing %d characters", len(src))
        cursor = Cursor(src, self.config)
        try:
            result = graph(cursor)
            cursor.skip_insignificant()
        except NoMatch as e:
            raise self._classify(cursor, e.failure) from None

        if not cursor.eof():
            logger.debug("graph ends at offset %d, %d characters left", cursor.pos, len(src) - cursor.pos)
            raise UnexpectedInput(src, cursor.pos)
        logger.debug("parsed %s graph with %d statements", result.kind.name.lower(), len(result.statements))
        return result

    @staticmethod
    def _classify(cursor: Cursor, failure: Failure) -> GraphParseError:
        failures: tuple[Failure, ...] = (failure,)
        furthest = cursor.furthest
        if furthest is not None and furthest.furthest() > failure.furthest():
            failures = (furthest, failure)
        if max(f.furthest() for f in failures) >= len(cursor.src):
            logger.debug("input ended inside %s", failure.rule)
            return UnexpectedEof(cursor.src)
        error = ParseError(cursor.src, failures)
        logger.debug("parse failed at %d:%d", error.line, error.column)
        return error
