"""Turn CSS source into the stylesheet node model using cssutils."""

import logging
import re
from typing import Optional, Tuple

import cssutils
from cssutils.css import (
    CSSCharsetRule,
    CSSComment,
    CSSFontFaceRule,
    CSSImportRule,
    CSSMediaRule,
    CSSNamespaceRule,
    CSSPageRule,
    CSSStyleRule,
    CSSUnknownRule,
    CSSVariablesRule,
)

from ..utils.config import CSSUTILS_LOG_LEVEL, DEFAULT_ENCODING, MAX_CSS_SIZE
from ..utils.error import CssParseError, InputTooLargeError
from .nodes import (
    AtRule,
    CharsetMarker,
    ConditionalGroup,
    Declaration,
    DeclarationBlock,
    ImportMarker,
    Node,
)

logger = logging.getLogger(__name__)

# Disable cssutils logging
cssutils.log.setLevel(CSSUTILS_LOG_LEVEL)

# cssutils decodes escapes; control characters are written back as hex escapes
_CONTROL_CHARACTER_RE = re.compile(r'[\x00-\x1f\x7f](?=([0-9a-fA-F ]?))')

def parse_stylesheet(css: str) -> Tuple[Node, ...]:
    """Parse a CSS string into top-level nodes, in source order.

    Malformed rules are dropped by cssutils rather than raising; comments
    are not rules and are left out.

    Raises:
        CssParseError: If ``css`` is not a string or cssutils fails outright
        InputTooLargeError: If ``css`` is larger than ``MAX_CSS_SIZE``
    """
    if not isinstance(css, str):
        raise CssParseError(f"CSS source must be a string, not {type(css).__name__}")
    if len(css.encode(DEFAULT_ENCODING)) > MAX_CSS_SIZE:
        raise InputTooLargeError(
            f"CSS content size exceeds limit ({MAX_CSS_SIZE / 1024 / 1024:.1f}MB)"
        )
    if not css.strip():
        return ()

    parser = cssutils.CSSParser(
        raiseExceptions=False,
        fetcher=_no_fetch,
        validate=False,
    )
    try:
        sheet = parser.parseString(css)
    except Exception as e:
        raise CssParseError(f"Error parsing CSS: {e}") from e

    nodes = tuple(_convert_rules(sheet.cssRules))
    logger.debug(f"Parsed {len(nodes)} top-level rules")
    return nodes

def _no_fetch(url):
    """Leave ``@import`` targets unresolved; they are passed through as text."""
    logger.debug(f"Not fetching imported stylesheet {url}")
    return None

def escape_control_characters(text: str) -> str:
    """Write control characters in ``text`` as CSS hex escapes.

    A space terminates the escape when a hex digit or a space follows, so a
    value parsed from ``100px\\9`` is written as ``100px\\9`` again.
    """
    return _CONTROL_CHARACTER_RE.sub(_escape_match, text)

def _escape_match(match) -> str:
    escaped = '\\' + format(ord(match.group(0)), 'x')
    if match.group(1):
        escaped += ' '
    return escaped

def _convert_rules(rules):
    for rule in rules:
        node = convert_rule(rule)
        if node is not None:
            yield node

def _convert_declarations(style) -> Tuple[Declaration, ...]:
    # all=True keeps overridden duplicates, which are deliberate fallbacks
    return tuple(
        Declaration(p.name, escape_control_characters(p.value), p.priority)
        for p in style.getProperties(all=True)
    )

def _at_rule_name(rule) -> str:
    return (rule.atkeyword or '').lstrip('@').lower()

def convert_rule(rule) -> Optional[Node]:
    """Convert a single cssutils rule, or return ``None`` for a non-rule."""
    if isinstance(rule, CSSComment):
        return None

    if isinstance(rule, CSSStyleRule):
        return DeclarationBlock(
            selectors=tuple(s.selectorText for s in rule.selectorList),
            declarations=_convert_declarations(rule.style),
            css_text=rule.cssText,
        )

    if isinstance(rule, CSSMediaRule):
        return ConditionalGroup(
            name='media',
            args=escape_control_characters(rule.media.mediaText),
            rules=tuple(_convert_rules(rule.cssRules)),
            css_text=rule.cssText,
        )

    if isinstance(rule, CSSCharsetRule):
        return CharsetMarker(encoding=rule.encoding, css_text=rule.cssText)

    if isinstance(rule, CSSImportRule):
        return ImportMarker(
            href=rule.href or '',
            media=rule.media.mediaText,
            css_text=rule.cssText,
        )

    if isinstance(rule, CSSFontFaceRule):
        return AtRule(
            name='font-face',
            declarations=_convert_declarations(rule.style),
            css_text=rule.cssText,
        )

    if isinstance(rule, CSSPageRule):
        return AtRule(
            name='page',
            args=rule.selectorText,
            declarations=_convert_declarations(rule.style),
            css_text=rule.cssText,
        )

    if isinstance(rule, CSSNamespaceRule):
        return AtRule(name='namespace', args=rule.namespaceURI, css_text=rule.cssText)

    if isinstance(rule, CSSVariablesRule):
        return AtRule(name='variables', args=rule.media.mediaText, css_text=rule.cssText)

    if isinstance(rule, CSSUnknownRule):
        # @keyframes, @supports, vendor at-rules and the like
        return AtRule(name=_at_rule_name(rule), css_text=rule.cssText)

    logger.debug(f"Ignoring unsupported cssutils rule {type(rule).__name__}")
    return None

__all__ = ['parse_stylesheet', 'convert_rule', 'escape_control_characters']
