"""Parsed CSS document facade."""

import logging
from typing import Iterable, List, Tuple

from ..utils.config import DEFAULT_ALLOWED_MEDIA_TYPES
from .extractor import StyleRule, StyleRuleData, extract_style_rules
from .nodes import Node
from .parser import parse_stylesheet
from .renderer import render_preserved_at_rules

logger = logging.getLogger(__name__)

class CssDocument:
    """Parses and stores a CSS document, and provides its parts as data structures or CSS.

    The parsed document is immutable, so an instance can be queried any
    number of times, from any thread.
    """

    def __init__(self, css: str):
        """Parse ``css``.

        Args:
            css: CSS source

        Raises:
            CssParseError: If the source cannot be parsed
        """
        self._nodes = parse_stylesheet(css)

    @property
    def nodes(self) -> Tuple[Node, ...]:
        """Top-level nodes of the stylesheet, in source order."""
        return self._nodes

    def get_style_rules(self, allowed_media_types: Iterable[str] = DEFAULT_ALLOWED_MEDIA_TYPES) -> List[StyleRule]:
        """Collate the style rules, see :func:`extract_style_rules`."""
        return extract_style_rules(self._nodes, allowed_media_types)

    def get_style_rules_data(self, allowed_media_types: Iterable[str]) -> List[StyleRuleData]:
        """Collate the media query, selectors and declarations for individual rules, in order.

        Args:
            allowed_media_types: Media types whose ``@media`` rules apply

        Returns:
            List of dicts with the following keys:
            - "media" (the media query string, e.g. "@media screen and (max-width: 480px)",
              or an empty string if not from an ``@media`` rule);
            - "selectors" (the CSS selector(s), e.g., "*" or "h1,h2");
            - "declarations" (the CSS declarations for that/those selector(s),
              e.g., "color: red;height: 4px;").
        """
        return [rule.as_dict() for rule in self.get_style_rules(allowed_media_types)]

    def render_non_conditional_at_rules(self) -> str:
        """Render the at-rules that are valid and not conditional group rules.

        See :func:`render_preserved_at_rules`.
        """
        return render_preserved_at_rules(self._nodes)

    def __repr__(self):
        return f"<{self.__class__.__name__} rules={len(self._nodes)}>"

__all__ = ['CssDocument']
