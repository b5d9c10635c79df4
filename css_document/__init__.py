"""CSS Document: flatten a stylesheet's style rules and keep its pass-through at-rules."""

from .core import (
    AT_RULE_NODES,
    AtRule,
    CharsetMarker,
    ConditionalGroup,
    CssDocument,
    Declaration,
    DeclarationBlock,
    ImportMarker,
    Node,
    StyleRule,
    StyleRuleData,
    extract_style_rules,
    parse_stylesheet,
    render_preserved_at_rules,
)
from .utils.config import VERSION as __version__

__all__ = [
    'AT_RULE_NODES',
    'AtRule',
    'CharsetMarker',
    'ConditionalGroup',
    'CssDocument',
    'Declaration',
    'DeclarationBlock',
    'ImportMarker',
    'Node',
    'StyleRule',
    'StyleRuleData',
    'extract_style_rules',
    'parse_stylesheet',
    'render_preserved_at_rules',
    '__version__',
]
