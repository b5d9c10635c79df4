"""Tests for converting CSS source to the node model."""

import pytest

from ..core.nodes import (
    AtRule,
    CharsetMarker,
    ConditionalGroup,
    DeclarationBlock,
    ImportMarker,
)
from ..core.parser import escape_control_characters, parse_stylesheet
from ..utils.config import MAX_CSS_SIZE
from ..utils.error import CssParseError, InputTooLargeError

class TestStyleRules:
    """Tests for parsing style rules."""

    def test_selectors_and_declarations(self):
        """Selectors and declarations are split out in order."""
        nodes = parse_stylesheet('h1, h2 { color: red; height: 4px; }')
        assert len(nodes) == 1
        block = nodes[0]
        assert isinstance(block, DeclarationBlock)
        assert block.selectors == ('h1', 'h2')
        assert [(d.name, d.value) for d in block.declarations] == [('color', 'red'), ('height', '4px')]
        assert ''.join(d.css_text for d in block.declarations) == 'color: red;height: 4px;'

    def test_important_priority(self):
        """!important is kept on the declaration."""
        block = parse_stylesheet('a { color: blue !important; }')[0]
        assert block.declarations[0].priority == 'important'
        assert block.declarations[0].css_text == 'color: blue !important;'

    def test_repeated_property_is_kept(self):
        """Overridden declarations are fallbacks and are not merged away."""
        block = parse_stylesheet('a { color: red; color: blue; }')[0]
        assert [d.value for d in block.get_declarations('color')] == ['red', 'blue']

    def test_special_characters(self, special_chars_css):
        """Strings and URLs in values do not break parsing."""
        nodes = parse_stylesheet(special_chars_css)
        assert len(nodes) == 1
        assert [d.name for d in nodes[0].declarations] == ['content', 'font-family', 'background']

class TestEscapes:
    """Tests for escapes decoded by the parser."""

    def test_control_character_in_value(self):
        """A \\9 hack in a value is written back as an escape, not a tab."""
        block = parse_stylesheet('p { width: 100px\\9; }')[0]
        assert block.declarations[0].css_text == 'width: 100px\\9;'
        assert '\t' not in block.declarations[0].value

    def test_control_character_in_media_query(self):
        """A \\0 hack in a media query is written back as an escape, not NUL."""
        group = parse_stylesheet('@media screen and (min-width: 0\\0) { p { color: red; } }')[0]
        assert '\x00' not in group.args
        assert group.args.endswith('0\\0)')

    def test_printable_escape_is_decoded(self):
        """Escapes of printable characters are left decoded."""
        block = parse_stylesheet('p { content: "\\201C"; }')[0]
        assert block.declarations[0].value == '"“"'

    @pytest.mark.parametrize('text, expected', [
        ('100px\t', '100px\\9'),
        ('\x00)', '\\0)'),
        ('\ta', '\\9 a'),
        ('\t b', '\\9  b'),
        ('\t\n', '\\9\\a'),
        ('\x7fz', '\\7fz'),
        ('plain', 'plain'),
    ])
    def test_escape_control_characters(self, text, expected):
        """Hex escapes are terminated by a space only when needed."""
        assert escape_control_characters(text) == expected

class TestAtRules:
    """Tests for parsing at-rules."""

    def test_media_rule(self):
        """@media becomes a group holding its style rules."""
        nodes = parse_stylesheet('@media screen and (max-width: 480px) { p { margin: 0; } }')
        assert len(nodes) == 1
        group = nodes[0]
        assert isinstance(group, ConditionalGroup)
        assert group.name == 'media'
        assert group.args.startswith('screen')
        assert 'max-width' in group.args
        assert len(group.rules) == 1
        assert group.rules[0].selectors == ('p',)

    def test_media_without_type(self):
        """A query list starting with a condition is kept as such."""
        group = parse_stylesheet('@media (max-width: 768px) { .a { display: none; } }')[0]
        assert group.args.startswith('(')

    def test_font_face(self):
        """@font-face keeps its declarations."""
        rule = parse_stylesheet('@font-face { font-family: "A"; src: url(a.woff); }')[0]
        assert isinstance(rule, AtRule)
        assert rule.name == 'font-face'
        assert rule.is_rule_set
        assert len(rule.get_declarations('font-family')) == 1
        assert len(rule.get_declarations('src')) == 1
        assert rule.css_text.startswith('@font-face')

    def test_charset_and_import(self):
        """@charset and @import become markers."""
        nodes = parse_stylesheet('@charset "utf-8";\n@import url(a.css);\np { margin: 0; }')
        assert [type(n) for n in nodes] == [CharsetMarker, ImportMarker, DeclarationBlock]
        assert nodes[1].href == 'a.css'
        assert nodes[1].css_text.startswith('@import')

    def test_import_is_not_fetched(self, monkeypatch):
        """Imported stylesheets are never loaded."""
        import cssutils.util

        def fail(*args, **kwargs):
            raise AssertionError('default fetcher used')

        monkeypatch.setattr(cssutils.util, '_defaultFetcher', fail)
        nodes = parse_stylesheet('@import url(http://example.invalid/a.css);')
        assert nodes[0].href == 'http://example.invalid/a.css'

    def test_page_rule(self):
        """@page is a rule set at-rule."""
        rule = parse_stylesheet('@page { margin: 1cm; }')[0]
        assert isinstance(rule, AtRule)
        assert rule.name == 'page'
        assert rule.get_declarations('margin')

    def test_unknown_at_rule(self):
        """At-rules cssutils does not model are opaque."""
        rule = parse_stylesheet('@keyframes spin { to { color: red; } }')[0]
        assert isinstance(rule, AtRule)
        assert rule.name == 'keyframes'
        assert not rule.is_rule_set
        assert rule.css_text.startswith('@keyframes')

class TestInput:
    """Tests for input handling."""

    def test_empty(self):
        """Empty or blank CSS has no nodes."""
        assert parse_stylesheet('') == ()
        assert parse_stylesheet('  \n ') == ()

    def test_comments_are_not_nodes(self):
        """Comments are dropped."""
        nodes = parse_stylesheet('/* header */ p { margin: 0; } /* footer */')
        assert len(nodes) == 1

    def test_source_order(self):
        """Nodes follow the source order."""
        nodes = parse_stylesheet('a { color: red; } @page { margin: 0; } b { color: blue; }')
        assert [type(n) for n in nodes] == [DeclarationBlock, AtRule, DeclarationBlock]

    def test_not_a_string(self):
        """Only strings are parsed."""
        with pytest.raises(CssParseError):
            parse_stylesheet(b'p { margin: 0; }')

    def test_too_large(self):
        """Sources above the size limit are refused before parsing."""
        with pytest.raises(InputTooLargeError):
            parse_stylesheet('a' * (MAX_CSS_SIZE + 1))
