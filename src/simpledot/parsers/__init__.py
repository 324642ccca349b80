"""Parser entry point — a single complete DOT input to a Graph IR."""

from __future__ import annotations

from simpledot.config import ParserConfig
from simpledot.ir.ast import Graph
from simpledot.parsers.dot import DotParser


def parse_graph(src: str, config: ParserConfig | None = None) -> Graph:
    """Parse DOT source text to the Graph IR. See ``DotParser.parse`` for errors."""
    return DotParser(config).parse(src)


parse = parse_graph

__all__ = ["DotParser", "parse", "parse_graph"]
