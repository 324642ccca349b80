"""Centralized configuration for simpledot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from simpledot.parsers.attributes import AttributeRegistry


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for the grammar engine.

    ``attributes`` selects the attribute names the grammar accepts; None means
    the built-in registry (``style`` and ``shape``).
    """

    skip_comments: bool = True
    attributes: AttributeRegistry | None = None
