"""Indented text dump of a parsed Graph, used by the debug CLI."""

from __future__ import annotations

from dataclasses import fields
from enum import Enum

from simpledot.ir import ast


def _format_value(value: object) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, tuple):
        return ",".join(_format_value(v) for v in value)
    return str(value)


def format_attribute(attr: ast.Attribute) -> str:
    values = [_format_value(getattr(attr, f.name)) for f in fields(attr)]
    return f"{attr.name} = {' '.join(values)}"


def format_graph(graph: ast.Graph) -> str:
    header = ("strict " if graph.strict else "") + ("digraph" if graph.directed else "graph")
    op = " -> " if graph.directed else " -- "
    lines = [header]
    for stmt in graph.statements:
        if isinstance(stmt, ast.EdgeStatement):
            lines.append(f"  edge {op.join(stmt.chain)}")
        elif isinstance(stmt, ast.NodeStatement):
            lines.append(f"  node {stmt.name}")
        elif isinstance(stmt, ast.DefinitionStatement):
            lines.append(f"  definition {stmt.lhs} = {stmt.rhs}")
        else:
            lines.append(f"  attributes {stmt.kind.name.lower()}")
        for attr in getattr(stmt, "attributes", ()):
            lines.append(f"    {format_attribute(attr)}")
    return "\n".join(lines) + "\n"
