"""Rendering of the at-rules that are passed through to a ``<style>`` element."""

import logging
from typing import Iterable, List, Tuple

from typing_extensions import assert_never

from .nodes import (
    AT_RULE_NODES,
    CharsetMarker,
    DeclarationBlock,
    ImportMarker,
    Node,
)
from .validator import is_renderable_at_rule

logger = logging.getLogger(__name__)

def classify_at_rule(node: Node, import_allowed: bool) -> Tuple[bool, bool]:
    """Decide whether ``node`` is an at-rule to copy unmodified.

    - ``@charset`` rules are discarded, only UTF-8 is supported;
    - ``@import`` rules are kept only while ``import_allowed``: user agents
      must ignore an ``@import`` after any statement other than ``@charset``
      or ``@import``;
    - every other node closes that window, whether it is kept or not;
    - style rules and ``@media`` rules are not kept, they are extracted
      as style rules instead;
    - other at-rules are checked by :func:`is_renderable_at_rule`.

    Args:
        node: Top-level node
        import_allowed: Whether an ``@import`` may still appear

    Returns:
        Tuple of (keep the node, whether an ``@import`` may still appear after it)
    """
    if isinstance(node, CharsetMarker):
        return False, import_allowed

    if isinstance(node, ImportMarker):
        if not import_allowed:
            logger.debug(f"Discarding misplaced @import of '{node.href}'")
        return import_allowed, import_allowed

    if isinstance(node, DeclarationBlock):
        return False, False

    # @charset and @import were handled above
    if isinstance(node, AT_RULE_NODES):
        return is_renderable_at_rule(node), False

    assert_never(node)

def select_preserved_at_rules(nodes: Iterable[Node]) -> List[Node]:
    """Return the top-level at-rules to copy unmodified, in source order."""
    import_allowed = True
    selected = []
    for node in nodes:
        keep, import_allowed = classify_at_rule(node, import_allowed)
        if keep:
            selected.append(node)
    return selected

def render_preserved_at_rules(nodes: Iterable[Node]) -> str:
    """Render the at-rules that are valid and are not conditional group rules.

    ``@media`` rules are left out since the style rules inside them are
    returned by :func:`~css_document.core.extractor.extract_style_rules`.
    ``@charset`` rules are discarded.

    Args:
        nodes: Top-level nodes of a parsed stylesheet

    Returns:
        The kept rules' CSS, concatenated, or an empty string
    """
    return ''.join(node.css_text for node in select_preserved_at_rules(nodes))

__all__ = ['classify_at_rule', 'select_preserved_at_rules', 'render_preserved_at_rules']
