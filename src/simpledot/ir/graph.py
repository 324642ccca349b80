"""Graph IR view — loads a parsed Graph into networkx for analysis.

The parsed Graph is a statement list; downstream consumers usually want nodes
and edges. ``GraphIR.from_ast`` replays the statements in order: node
statements and edge chains create nodes on first mention, each adjacent pair
of an edge chain becomes one edge, and default-attribute blocks and
definitions are kept in graph-level data in statement order.

Directed graphs load into a ``MultiDiGraph`` and undirected ones into a
``MultiGraph``; a strict graph allows no parallel edges, so it uses
``DiGraph``/``Graph`` and repeated edges are merged.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import networkx as nx

from simpledot.ir import ast
from simpledot.types import AttributeKind, GraphKind


@dataclass
class NodeData:
    id: str
    attrs: list[ast.Attribute] = field(default_factory=list)


@dataclass
class EdgeData:
    attrs: list[ast.Attribute] = field(default_factory=list)
    statements: list[int] = field(default_factory=list)


class GraphIR:
    """The networkx view of a parsed Graph."""

    def __init__(
        self,
        graph: nx.Graph,
        kind: GraphKind,
        strict: bool,
        defaults: list[tuple[AttributeKind, tuple[ast.Attribute, ...]]],
        definitions: list[tuple[str, str]],
    ) -> None:
        self.graph = graph
        self.kind = kind
        self.strict = strict
        self.defaults = defaults
        self.definitions = definitions

    @classmethod
    def from_ast(cls, ast_graph: ast.Graph) -> GraphIR:
        """Build a GraphIR from a parsed Graph."""
        graph = _new_graph(ast_graph)
        defaults: list[tuple[AttributeKind, tuple[ast.Attribute, ...]]] = []
        definitions: list[tuple[str, str]] = []

        for index, stmt in enumerate(ast_graph.statements):
            if isinstance(stmt, ast.NodeStatement):
                _ensure_node(graph, stmt.name).attrs.extend(stmt.attributes)
            elif isinstance(stmt, ast.EdgeStatement):
                for node_id in stmt.chain:
                    _ensure_node(graph, node_id)
                for u, v in stmt.pairs():
                    _add_edge(graph, u, v, stmt.attributes, index)
            elif isinstance(stmt, ast.AttributeStatement):
                defaults.append((stmt.kind, stmt.attributes))
            elif isinstance(stmt, ast.DefinitionStatement):
                definitions.append((stmt.lhs, stmt.rhs))

        return cls(
            graph=graph,
            kind=ast_graph.kind,
            strict=ast_graph.strict,
            defaults=defaults,
            definitions=definitions,
        )

    def defaults_for(self, kind: AttributeKind) -> list[ast.Attribute]:
        """All default attributes declared for ``kind``, in declaration order."""
        return [attr for k, attrs in self.defaults if k is kind for attr in attrs]

    def is_dag(self) -> bool:
        return self.graph.is_directed() and nx.is_directed_acyclic_graph(self.graph)

    def topological_order(self) -> list[str] | None:
        if not self.graph.is_directed():
            return None
        try:
            return list(nx.topological_sort(self.graph))
        except nx.NetworkXUnfeasible:
            return None

    def node_count(self) -> int:
        return self.graph.number_of_nodes()

    def edge_count(self) -> int:
        return self.graph.number_of_edges()

    def degree(self, node_id: str) -> int:
        if node_id not in self.graph:
            return 0
        return self.graph.degree(node_id)

    def in_degree(self, node_id: str) -> int:
        if node_id not in self.graph or not self.graph.is_directed():
            return self.degree(node_id)
        return self.graph.in_degree(node_id)

    def out_degree(self, node_id: str) -> int:
        if node_id not in self.graph or not self.graph.is_directed():
            return self.degree(node_id)
        return self.graph.out_degree(node_id)

    def adjacency_list(self) -> list[tuple[str, list[str]]]:
        result: list[tuple[str, list[str]]] = []
        for node_id in self.graph.nodes:
            neighbors = sorted(set(self.graph.neighbors(node_id)))
            result.append((node_id, neighbors))
        result.sort(key=lambda x: x[0])
        return result


def _new_graph(ast_graph: ast.Graph) -> nx.Graph:
    if ast_graph.kind is GraphKind.Directed:
        return nx.DiGraph() if ast_graph.strict else nx.MultiDiGraph()
    return nx.Graph() if ast_graph.strict else nx.MultiGraph()


def _ensure_node(graph: nx.Graph, node_id: str) -> NodeData:
    if node_id not in graph:
        graph.add_node(node_id, data=NodeData(id=node_id))
    return graph.nodes[node_id]["data"]


def _add_edge(
    graph: nx.Graph,
    u: str,
    v: str,
    attrs: tuple[ast.Attribute, ...],
    statement: int,
) -> None:
    if not graph.is_multigraph() and graph.has_edge(u, v):
        data = graph.edges[u, v]["data"]
        data.attrs.extend(attrs)
        data.statements.append(statement)
        return
    graph.add_edge(u, v, data=EdgeData(attrs=list(attrs), statements=[statement]))
