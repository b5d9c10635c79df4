"""Core style rule extraction functionality."""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

from typing_extensions import TypedDict, assert_never

from .nodes import (
    AtRule,
    CharsetMarker,
    ConditionalGroup,
    DeclarationBlock,
    ImportMarker,
    Node,
)
from .validator import get_enclosing_media_context, normalize_media_types

logger = logging.getLogger(__name__)

class StyleRuleData(TypedDict):
    """A style rule as a plain mapping, see :class:`StyleRule`."""

    media: str
    selectors: str
    declarations: str

@dataclass(frozen=True)
class StyleRule:
    """A style rule flattened out of a stylesheet.

    Attributes:
        media: The text of the containing at-rule before its opening brace,
            e.g. ``@media screen and (max-width: 480px)``, or an empty string
            for a top-level rule. Only ``@media`` is supported, but the name
            is kept for compatibility.
        selectors: The comma-joined selectors, e.g. ``h1,h2``.
        declarations: The declarations, each ending in ``;``, concatenated,
            e.g. ``color: red;height: 4px;``.
    """

    media: str
    selectors: str
    declarations: str

    @classmethod
    def from_block(cls, block: DeclarationBlock, media: str = '') -> 'StyleRule':
        return cls(
            media=media,
            selectors=','.join(block.selectors),
            declarations=''.join(d.css_text for d in block.declarations),
        )

    def as_dict(self) -> StyleRuleData:
        return StyleRuleData(
            media=self.media,
            selectors=self.selectors,
            declarations=self.declarations,
        )

def _iter_rule_matches(nodes: Iterable[Node], media_types: Tuple[str, ...]) -> Iterator[Tuple[str, DeclarationBlock]]:
    for node in nodes:
        if isinstance(node, DeclarationBlock):
            yield '', node
        elif isinstance(node, ConditionalGroup):
            containing_at_rule = get_enclosing_media_context(node, media_types)
            if containing_at_rule is None:
                continue
            for nested in node.rules:
                if isinstance(nested, DeclarationBlock):
                    yield containing_at_rule, nested
                else:
                    logger.debug(f"Ignoring {type(nested).__name__} nested in {containing_at_rule}")
        elif isinstance(node, (AtRule, CharsetMarker, ImportMarker)):
            continue
        else:
            assert_never(node)

def extract_style_rules(nodes: Iterable[Node], allowed_media_types: Iterable[str]) -> List[StyleRule]:
    """Collate the media query, selectors and declarations of each style rule, in order.

    Top-level style rules come out with an empty ``media``. Style rules
    nested in an ``@media`` rule come out with that rule's text, provided
    the media query names one of ``allowed_media_types`` (or no media type
    at all); other ``@media`` rules, and any other grouping at-rule, are
    skipped with everything inside them.

    Args:
        nodes: Top-level nodes of a parsed stylesheet
        allowed_media_types: Media types whose ``@media`` rules apply,
            e.g. ``['all', 'screen']``

    Returns:
        One :class:`StyleRule` per applicable style rule
    """
    media_types = normalize_media_types(allowed_media_types)
    return [
        StyleRule.from_block(block, containing_at_rule)
        for containing_at_rule, block in _iter_rule_matches(nodes, media_types)
    ]

__all__ = ['StyleRule', 'StyleRuleData', 'extract_style_rules']
