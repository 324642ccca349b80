"""Attribute grammar.

An attribute is ``name = value`` followed by an optional ``,`` or ``;``. The
name is matched literally against an ``AttributeRegistry``, which maps each
recognized name to the rule parsing its value. Names are tried in
registration order and there is no generic fallback: an attribute whose name
is not registered fails to parse.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum

from simpledot.ir.ast import Attribute, ShapeAttribute, StyleAttribute
from simpledot.parsers.cursor import Cursor, Rule, lexeme
from simpledot.types import Shape, Style

ValueRule = Callable[[Cursor], Attribute]


class AttributeRegistry:
    """Ordered mapping from attribute name to its value rule."""

    def __init__(self, entries: Iterable[tuple[str, ValueRule]] = ()) -> None:
        self._entries: dict[str, ValueRule] = dict(entries)
        self._frozen = False

    def register(self, name: str) -> Callable[[ValueRule], ValueRule]:
        """Decorator registering the value rule for ``name``.

        Raises:
            TypeError: The registry is frozen.
        """
        if self._frozen:
            raise TypeError(f"cannot register {name!r}: registry is frozen, register on a copy()")

        def decorator(value_rule: ValueRule) -> ValueRule:
            self._entries[name] = value_rule
            return value_rule

        return decorator

    def freeze(self) -> AttributeRegistry:
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def copy(self) -> AttributeRegistry:
        """Unfrozen copy with the same entries."""
        return AttributeRegistry(self._entries.items())

    def names(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def branches(self) -> list[Rule[Attribute]]:
        return [_name_value_pair(name, value_rule) for name, value_rule in self._entries.items()]


# ─── Leaf value grammars ─────────────────────────────────────────────────────


def _keyword(member: Enum) -> Rule[Enum]:
    def parse(cursor: Cursor) -> Enum:
        cursor.tag(member.value)
        return member

    return parse


STYLE_KEYWORDS = tuple(Style)
SHAPE_KEYWORDS = (Shape.Box, Shape.Polygon, Shape.Ellipse, Shape.Oval, Shape.Circle, Shape.Point)

_STYLE_BRANCHES = [_keyword(member) for member in STYLE_KEYWORDS]
_SHAPE_BRANCHES = [_keyword(member) for member in SHAPE_KEYWORDS]


@lexeme
def style_keyword(cursor: Cursor) -> Style:
    return cursor.choice("style keyword", *_STYLE_BRANCHES)


@lexeme
def shape_keyword(cursor: Cursor) -> Shape:
    return cursor.choice("shape keyword", *_SHAPE_BRANCHES)


DEFAULT_ATTRIBUTES = AttributeRegistry()


@DEFAULT_ATTRIBUTES.register("style")
def style_value(cursor: Cursor) -> StyleAttribute:
    styles = cursor.separated1(style_keyword, lambda c: c.char(","))
    return StyleAttribute(tuple(styles))


@DEFAULT_ATTRIBUTES.register("shape")
def shape_value(cursor: Cursor) -> ShapeAttribute:
    return ShapeAttribute(shape_keyword(cursor))


# Shared by every parse without its own registry.
DEFAULT_ATTRIBUTES.freeze()


# ─── Attribute and attribute list ────────────────────────────────────────────


@lexeme
def _attribute_name(cursor: Cursor, name: str) -> str:
    return cursor.tag(name, rule=f"attribute {name!r}")


def _name_value_pair(name: str, value_rule: ValueRule) -> Rule[Attribute]:
    def parse(cursor: Cursor) -> Attribute:
        _attribute_name(cursor, name)
        cursor.char("=")
        return value_rule(cursor)

    return parse


@lexeme
def _separator(cursor: Cursor) -> str:
    return cursor.choice("attribute separator", lambda c: c.char(","), lambda c: c.char(";"))


def attribute(cursor: Cursor) -> Attribute:
    registry = cursor.config.attributes if cursor.config.attributes is not None else DEFAULT_ATTRIBUTES
    value = cursor.choice("attribute", *registry.branches())
    cursor.optional(_separator)
    return value


@lexeme
def _close_bracket(cursor: Cursor) -> str:
    return cursor.char("]")


@lexeme
def _attribute_group(cursor: Cursor) -> list[Attribute]:
    cursor.char("[")
    return cursor.repeat_until(attribute, _close_bracket, "attribute group", at_least=1)


def attribute_list(cursor: Cursor) -> tuple[Attribute, ...]:
    """One or more ``[...]`` groups flattened into a single sequence."""
    groups = cursor.many1(_attribute_group, "attribute list")
    return tuple(attr for group in groups for attr in group)
