"""IR data structures for DOT graph descriptions.

These types represent the parsed form of the input: the root Graph, the four
statement shapes and the attribute variants. Everything is frozen and uses
tuples, so a parsed Graph is immutable and compares by value.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import ClassVar, Union

from simpledot.types import AttributeKind, GraphKind, Shape, Style

Ident = str


# ─── Attributes ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Attribute:
    """Base of the attribute union; each variant sets ``name``."""

    name: ClassVar[str] = ""


@dataclass(frozen=True)
class StyleAttribute(Attribute):
    name: ClassVar[str] = "style"

    styles: tuple[Style, ...] = ()


@dataclass(frozen=True)
class ShapeAttribute(Attribute):
    name: ClassVar[str] = "shape"

    shape: Shape = Shape.Ellipse


# ─── Statements ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class AttributeStatement:
    kind: AttributeKind
    attributes: tuple[Attribute, ...] = ()


@dataclass(frozen=True)
class NodeStatement:
    name: Ident
    attributes: tuple[Attribute, ...] = ()


@dataclass(frozen=True)
class EdgeStatement:
    chain: tuple[Ident, ...]
    attributes: tuple[Attribute, ...] = ()

    def __post_init__(self) -> None:
        if len(self.chain) < 2:
            raise ValueError(f"edge chain needs at least two identifiers, got {len(self.chain)}")

    def pairs(self) -> Iterator[tuple[Ident, Ident]]:
        """Yield each logical edge ``(chain[i], chain[i + 1])``."""
        return zip(self.chain, self.chain[1:])


@dataclass(frozen=True)
class DefinitionStatement:
    lhs: Ident
    rhs: Ident


Statement = Union[AttributeStatement, NodeStatement, EdgeStatement, DefinitionStatement]


# ─── Graph ───────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Graph:
    kind: GraphKind
    strict: bool = False
    statements: tuple[Statement, ...] = field(default_factory=tuple)

    @property
    def directed(self) -> bool:
        return self.kind is GraphKind.Directed
