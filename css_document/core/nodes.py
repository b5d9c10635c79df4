"""Node model for a parsed stylesheet.

A stylesheet is an ordered tuple of top-level nodes. The node types form a
closed union (:data:`Node`); code walking a stylesheet dispatches on the
concrete type and ends every dispatch with ``assert_never`` so that a new
variant cannot slip through unhandled.

All nodes are frozen. ``css_text`` holds the node's serialization as the
parser produced it and is what gets re-rendered verbatim.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair."""

    name: str
    value: str
    priority: str = ''

    @property
    def css_text(self) -> str:
        """Render as ``name: value;`` with an ``!important`` flag if set."""
        if self.priority:
            return f"{self.name}: {self.value} !{self.priority};"
        return f"{self.name}: {self.value};"

def _find_declarations(declarations: Tuple[Declaration, ...], name: str) -> Tuple[Declaration, ...]:
    name = name.lower()
    return tuple(d for d in declarations if d.name.lower() == name)

@dataclass(frozen=True)
class DeclarationBlock:
    """A style rule: ``selector, selector { declarations }``."""

    selectors: Tuple[str, ...]
    declarations: Tuple[Declaration, ...] = ()
    css_text: str = ''

    def get_declarations(self, name: str) -> Tuple[Declaration, ...]:
        return _find_declarations(self.declarations, name)

@dataclass(frozen=True)
class ConditionalGroup:
    """An at-rule wrapping nested rules, e.g. ``@media screen { ... }``.

    ``args`` is the condition text (the media query list for ``@media``)
    exactly as the parser produced it.
    """

    name: str
    args: str
    rules: Tuple['Node', ...] = ()
    css_text: str = ''

@dataclass(frozen=True)
class AtRule:
    """Any other at-rule, e.g. ``@font-face``, ``@page`` or ``@keyframes``.

    ``declarations`` is ``None`` when the rule has no declaration block the
    parser understood; such rules are opaque.
    """

    name: str
    args: str = ''
    declarations: Optional[Tuple[Declaration, ...]] = None
    css_text: str = ''

    @property
    def is_rule_set(self) -> bool:
        return self.declarations is not None

    def get_declarations(self, name: str) -> Tuple[Declaration, ...]:
        if self.declarations is None:
            return ()
        return _find_declarations(self.declarations, name)

@dataclass(frozen=True)
class CharsetMarker:
    """An ``@charset`` statement."""

    encoding: str = ''
    css_text: str = ''

@dataclass(frozen=True)
class ImportMarker:
    """An ``@import`` statement."""

    href: str = ''
    media: str = ''
    css_text: str = ''

Node = Union[DeclarationBlock, ConditionalGroup, AtRule, CharsetMarker, ImportMarker]

# Node types written with an at-keyword
AT_RULE_NODES = (AtRule, ConditionalGroup, CharsetMarker, ImportMarker)

__all__ = [
    'Declaration',
    'DeclarationBlock',
    'ConditionalGroup',
    'AtRule',
    'CharsetMarker',
    'ImportMarker',
    'Node',
    'AT_RULE_NODES',
]
