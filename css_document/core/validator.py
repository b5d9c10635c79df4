"""Classification helpers shared by the rule extractor and at-rule renderer."""

import re
import logging
from functools import lru_cache
from typing import Iterable, Optional, Pattern, Tuple, Union

from ..utils.error import ConfigurationError
from .nodes import AtRule, ConditionalGroup

logger = logging.getLogger(__name__)

MEDIA_AT_RULE = 'media'
FONT_FACE_AT_RULE = 'font-face'

# Both properties are required for a usable @font-face rule
FONT_FACE_REQUIRED_PROPERTIES = ('font-family', 'src')

def normalize_media_types(allowed_media_types: Iterable[str]) -> Tuple[str, ...]:
    """Validate the allowed media types and return them as a tuple.

    Args:
        allowed_media_types: Media type names, e.g. ``['all', 'screen']``

    Returns:
        The media types, in the given order

    Raises:
        ConfigurationError: If the argument is a bare string or holds non-strings
    """
    if isinstance(allowed_media_types, (str, bytes)):
        raise ConfigurationError(
            f"Allowed media types must be a collection of strings, not {allowed_media_types!r}"
        )
    try:
        media_types = tuple(allowed_media_types)
    except TypeError:
        raise ConfigurationError(
            f"Allowed media types must be iterable, not {type(allowed_media_types).__name__}"
        )
    for media_type in media_types:
        if not isinstance(media_type, str):
            raise ConfigurationError(f"Invalid media type: {media_type!r}")
    return media_types

@lru_cache(maxsize=32)
def build_media_types_matcher(media_types: Tuple[str, ...]) -> Optional[Pattern]:
    """Compile the pattern recognising a media query list that starts with an allowed type.

    Leading whitespace and an ``only`` keyword are consumed without backtracking
    (the lookahead/backreference pairs act as possessive quantifiers), then one
    of ``media_types`` must follow. Only the start has to match, so trailing
    text such as ``and (...)`` or further comma-separated queries is accepted.

    Returns ``None`` if ``media_types`` is empty; nothing can match then.
    """
    if not media_types:
        return None
    alternatives = '|'.join(re.escape(media_type) for media_type in media_types)
    return re.compile(
        r'(?=(\s*))\1(?=((?:only\s+)?))\2(?:' + alternatives + ')',
        re.IGNORECASE,
    )

def is_media_type_allowed(media_query_list: str, allowed_media_types: Iterable[str]) -> bool:
    """Tell whether a media query list applies to one of the allowed media types.

    A query list starting directly with a feature condition, e.g.
    ``(max-width: 480px)``, names no media type and is always allowed.
    """
    media_type = media_query_list.split('(', 1)[0]
    if not media_type.strip():
        return True

    matcher = build_media_types_matcher(normalize_media_types(allowed_media_types))
    if matcher is None:
        return False
    return matcher.match(media_type) is not None

def get_enclosing_media_context(group: ConditionalGroup, allowed_media_types: Iterable[str]) -> Optional[str]:
    """Return the text rules nested in ``group`` should carry, e.g. ``@media (max-width: 768px)``.

    Returns ``None`` when the group's nested rules are not to be used: the
    group is not an ``@media`` rule, or its media type is not allowed.
    """
    if group.name != MEDIA_AT_RULE:
        logger.debug(f"Skipping rules nested in unsupported @{group.name} rule")
        return None

    if not is_media_type_allowed(group.args, allowed_media_types):
        logger.debug(f"Skipping rules for disallowed media '{group.args}'")
        return None

    return '@media ' + group.args

def is_valid_font_face(rule: Union[AtRule, ConditionalGroup]) -> bool:
    """Check an ``@font-face`` rule declares both ``font-family`` and ``src``."""
    if not isinstance(rule, AtRule) or not rule.is_rule_set:
        return False
    return all(rule.get_declarations(name) for name in FONT_FACE_REQUIRED_PROPERTIES)

def is_renderable_at_rule(rule: Union[AtRule, ConditionalGroup]) -> bool:
    """Check whether an at-rule is copied to the output unmodified.

    - ``@media`` rules are not: their nested rules are extracted instead;
    - ``@font-face`` rules must be valid (see :func:`is_valid_font_face`);
    - anything else is treated as a black box and kept.
    """
    if rule.name == MEDIA_AT_RULE:
        return False
    if rule.name == FONT_FACE_AT_RULE:
        valid = is_valid_font_face(rule)
        if not valid:
            logger.debug("Discarding @font-face rule without both font-family and src")
        return valid
    return True

__all__ = [
    'MEDIA_AT_RULE',
    'FONT_FACE_AT_RULE',
    'FONT_FACE_REQUIRED_PROPERTIES',
    'normalize_media_types',
    'build_media_types_matcher',
    'is_media_type_allowed',
    'get_enclosing_media_context',
    'is_valid_font_face',
    'is_renderable_at_rule',
]
