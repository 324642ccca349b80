"""simpledot: DOT graph descriptions to an immutable Graph IR."""

from simpledot.config import ParserConfig
from simpledot.errors import GraphParseError, ParseError, TraceEntry, UnexpectedEof, UnexpectedInput
from simpledot.ir import (
    AttributeStatement,
    DefinitionStatement,
    EdgeStatement,
    Graph,
    GraphIR,
    NodeStatement,
    ShapeAttribute,
    StyleAttribute,
)
from simpledot.parsers import parse_graph
from simpledot.parsers.attributes import DEFAULT_ATTRIBUTES, AttributeRegistry
from simpledot.types import AttributeKind, GraphKind, Shape, Style

__all__ = [
    "DEFAULT_ATTRIBUTES",
    "AttributeKind",
    "AttributeRegistry",
    "AttributeStatement",
    "DefinitionStatement",
    "EdgeStatement",
    "Graph",
    "GraphIR",
    "GraphKind",
    "GraphParseError",
    "NodeStatement",
    "ParseError",
    "ParserConfig",
    "Shape",
    "ShapeAttribute",
    "Style",
    "StyleAttribute",
    "TraceEntry",
    "UnexpectedEof",
    "UnexpectedInput",
    "parse_graph",
]
