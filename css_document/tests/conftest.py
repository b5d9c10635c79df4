"""Pytest configuration for CSS Document tests."""

import logging

import pytest

from ..core.nodes import (
    AtRule,
    CharsetMarker,
    ConditionalGroup,
    Declaration,
    DeclarationBlock,
    ImportMarker,
)

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

def make_block(selectors, *declarations):
    """Build a style rule node from ``(name, value)`` pairs."""
    return DeclarationBlock(
        selectors=tuple(selectors),
        declarations=tuple(Declaration(*d) for d in declarations),
        css_text=f"{', '.join(selectors)} {{ ... }}",
    )

def make_media(args, *rules):
    """Build an ``@media`` node."""
    return ConditionalGroup(
        name='media',
        args=args,
        rules=tuple(rules),
        css_text=f"@media {args} {{ ... }}",
    )

def make_font_face(*declarations):
    """Build an ``@font-face`` node from ``(name, value)`` pairs."""
    decls = tuple(Declaration(*d) for d in declarations)
    body = ''.join(d.css_text for d in decls)
    return AtRule(
        name='font-face',
        declarations=decls,
        css_text=f"@font-face {{{body}}}",
    )

def make_import(href):
    """Build an ``@import`` node."""
    return ImportMarker(href=href, css_text=f"@import url({href});")

@pytest.fixture
def charset():
    """Return an ``@charset`` node."""
    return CharsetMarker(encoding='utf-8', css_text='@charset "utf-8";')

@pytest.fixture
def headings_block():
    """Return ``h1, h2 { color: red; height: 4px; }``."""
    return make_block(['h1', 'h2'], ('color', 'red'), ('height', '4px'))

@pytest.fixture
def paragraph_block():
    """Return ``p { margin: 0; }``."""
    return make_block(['p'], ('margin', '0'))

@pytest.fixture
def valid_font_face():
    """Return an ``@font-face`` node with both ``font-family`` and ``src``."""
    return make_font_face(('font-family', '"A"'), ('src', 'url(a.woff)'))

@pytest.fixture
def invalid_font_face():
    """Return an ``@font-face`` node without ``src``."""
    return make_font_face(('font-family', '"A"'))

@pytest.fixture
def page_rule():
    """Return an ``@page`` node."""
    return AtRule(
        name='page',
        declarations=(Declaration('margin', '1cm'),),
        css_text='@page {margin: 1cm;}',
    )

@pytest.fixture(scope='session')
def sample_css():
    """Return sample CSS content for testing."""
    return """
    @charset "utf-8";
    @import url(base.css);
    @import url(print.css) print;

    body {
        color: #333;
        margin: 0;
    }

    h1, h2 {
        color: red;
        height: 4px;
    }

    @font-face {
        font-family: "Open Sans";
        src: url(open-sans.woff2);
    }

    @font-face {
        font-family: "Broken";
    }

    @media screen and (max-width: 480px) {
        p {
            margin: 0;
        }

        .sidebar {
            display: none;
        }
    }

    @media print {
        .no-print {
            display: none;
        }
    }

    @media (max-width: 768px) {
        .content {
            flex-direction: column;
        }
    }

    @page {
        margin: 1cm;
    }
    """

@pytest.fixture(scope='session')
def special_chars_css():
    """Return CSS with special characters for testing."""
    return """
    body {
        content: '\\u00A9';
        font-family: "Helvetica Neue", sans-serif;
        background: url('image.jpg?param=value#fragment');
    }
    """
