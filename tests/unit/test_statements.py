"""Tests for simpledot.parsers.dot — statement shapes and their ordering."""

import pytest

from simpledot.config import ParserConfig
from simpledot.errors import NoMatch
from simpledot.ir.ast import (
    AttributeStatement,
    DefinitionStatement,
    EdgeStatement,
    Graph,
    NodeStatement,
    ShapeAttribute,
    StyleAttribute,
)
from simpledot.parsers.cursor import Cursor
from simpledot.parsers.dot import (
    attribute_statement,
    definition_statement,
    edge_statement,
    graph,
    node_statement,
    statement,
)
from simpledot.types import AttributeKind, GraphKind, Shape, Style


def run(rule, text):
    cursor = Cursor(text, ParserConfig())
    value = rule(cursor)
    return value, text[cursor.pos :]


# ─── Individual shapes ───────────────────────────────────────────────────────


def test_edge_statement_chain():
    stmt, rest = run(edge_statement, "a -> b -- c")
    assert stmt == EdgeStatement(chain=("a", "b", "c"))
    assert rest == ""


def test_edge_statement_needs_an_operator():
    with pytest.raises(NoMatch):
        run(edge_statement, "a [shape=box]")


def test_edge_statement_with_attributes():
    stmt, _ = run(edge_statement, 'a--"b c"[style=dotted]')
    assert stmt == EdgeStatement(chain=("a", "b c"), attributes=(StyleAttribute((Style.Dotted,)),))


def test_node_statement_without_attributes():
    assert run(node_statement, "a") == (NodeStatement(name="a"), "")


def test_node_statement_refuses_definition():
    with pytest.raises(NoMatch):
        run(node_statement, "a = b")


def test_node_statement_leaves_invalid_attribute_list():
    stmt, rest = run(node_statement, "a [color=red]")
    assert stmt == NodeStatement(name="a")
    assert rest == "[color=red]"


def test_definition_statement():
    assert run(definition_statement, "rankdir = LR") == (DefinitionStatement("rankdir", "LR"), "")


def test_attribute_statement_requires_list():
    with pytest.raises(NoMatch):
        run(attribute_statement, "edge")


@pytest.mark.parametrize(
    "keyword,kind",
    [("graph", AttributeKind.Graph), ("node", AttributeKind.Node), ("edge", AttributeKind.Edge)],
)
def test_attribute_statement_kinds(keyword, kind):
    stmt, _ = run(attribute_statement, f"{keyword} [shape=box]")
    assert stmt == AttributeStatement(kind=kind, attributes=(ShapeAttribute(Shape.Box),))


# ─── Ordered choice ──────────────────────────────────────────────────────────


def test_edge_is_tried_before_node():
    stmt, rest = run(statement, "a -> b")
    assert isinstance(stmt, EdgeStatement)
    assert rest == ""


def test_node_when_no_operator_follows():
    stmt, _ = run(statement, "a [shape=circle]")
    assert stmt == NodeStatement(name="a", attributes=(ShapeAttribute(Shape.Circle),))


def test_definition_after_node():
    assert run(statement, "a=b") == (DefinitionStatement("a", "b"), "")


def test_attribute_block_for_keyword():
    stmt, _ = run(statement, "node [style=dashed,bold]")
    assert stmt == AttributeStatement(
        kind=AttributeKind.Node,
        attributes=(StyleAttribute((Style.Dashed, Style.Bold)),),
    )


def test_statement_terminator():
    stmt, rest = run(statement, "a -> b; c")
    assert stmt == EdgeStatement(chain=("a", "b"))
    assert rest == "c"


def test_statement_failure_lists_every_shape():
    with pytest.raises(NoMatch) as exc:
        run(statement, "[")
    assert len(exc.value.failure.children) == 4


# ─── Graph ───────────────────────────────────────────────────────────────────


def test_graph_header_variants():
    assert run(graph, "graph {}")[0] == Graph(kind=GraphKind.Undirected)
    assert run(graph, "digraph{}")[0] == Graph(kind=GraphKind.Directed)
    assert run(graph, " strict digraph { } ")[0] == Graph(kind=GraphKind.Directed, strict=True)


def test_graph_requires_kind():
    with pytest.raises(NoMatch):
        run(graph, "strict { a }")


def test_graph_requires_braces():
    with pytest.raises(NoMatch):
        run(graph, "graph a -> b")
    with pytest.raises(NoMatch):
        run(graph, "graph { a -> b")


def test_graph_stops_after_closing_brace():
    g, rest = run(graph, "graph { a } trailing")
    assert g.statements == (NodeStatement(name="a"),)
    assert rest == "trailing"
