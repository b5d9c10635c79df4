"""Core functionality for CSS rule extraction and at-rule rendering."""

from .nodes import (
    AT_RULE_NODES,
    AtRule,
    CharsetMarker,
    ConditionalGroup,
    Declaration,
    DeclarationBlock,
    ImportMarker,
    Node,
)
from .parser import parse_stylesheet
from .extractor import StyleRule, StyleRuleData, extract_style_rules
from .renderer import render_preserved_at_rules
from .document import CssDocument

__all__ = [
    'AT_RULE_NODES',
    'AtRule',
    'CharsetMarker',
    'ConditionalGroup',
    'Declaration',
    'DeclarationBlock',
    'ImportMarker',
    'Node',
    'parse_stylesheet',
    'StyleRule',
    'StyleRuleData',
    'extract_style_rules',
    'render_preserved_at_rules',
    'CssDocument',
]
