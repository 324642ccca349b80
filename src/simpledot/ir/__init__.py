"""Intermediate representation: the parsed Graph and its networkx view."""

from simpledot.ir.ast import (
    Attribute,
    AttributeStatement,
    DefinitionStatement,
    EdgeStatement,
    Graph,
    NodeStatement,
    ShapeAttribute,
    Statement,
    StyleAttribute,
)
from simpledot.ir.graph import EdgeData, GraphIR, NodeData

__all__ = [
    "Attribute",
    "AttributeStatement",
    "DefinitionStatement",
    "EdgeData",
    "EdgeStatement",
    "Graph",
    "GraphIR",
    "NodeData",
    "NodeStatement",
    "ShapeAttribute",
    "Statement",
    "StyleAttribute",
]
