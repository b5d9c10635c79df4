#!/usr/bin/env python3
"""
Command-line interface for CSS Document.
"""

import argparse
import logging
import sys
from typing import List, Optional

import orjson

from css_document.core.document import CssDocument
from css_document.utils.config import DEFAULT_ALLOWED_MEDIA_TYPES, VERSION
from css_document.utils.error import CssDocumentError
from css_document.utils.file import STDIN_MARKER, safe_read_file, safe_write_file
from css_document.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='css-document',
        description='Flatten the style rules of a stylesheet, or render the at-rules it passes through'
    )

    parser.add_argument(
        'source',
        help=f'Path to a CSS file, or {STDIN_MARKER} for standard input'
    )

    # What to output
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        '--rules',
        help='Print the style rules as JSON (default)',
        dest='mode',
        action='store_const',
        const='rules'
    )
    mode_group.add_argument(
        '--at-rules',
        help='Print the at-rules to keep in a <style> element',
        dest='mode',
        action='store_const',
        const='at-rules'
    )
    parser.set_defaults(mode='rules')

    parser.add_argument(
        '-m', '--media-type',
        help=f'Media type whose @media rules apply; repeatable (default: {", ".join(DEFAULT_ALLOWED_MEDIA_TYPES)})',
        dest='media_types',
        action='append'
    )

    # Output options
    parser.add_argument(
        '-o', '--output',
        help='Write to this file instead of standard output'
    )

    # Other options
    parser.add_argument(
        '-v', '--verbose',
        help='Enable verbose output',
        action='store_true'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {VERSION}'
    )

    return parser.parse_args(argv)

def render_output(document: CssDocument, mode: str, media_types: List[str]) -> str:
    """Produce the text to output for ``mode``."""
    if mode == 'at-rules':
        return document.render_non_conditional_at_rules()

    rules = document.get_style_rules_data(media_types)
    return orjson.dumps(rules, option=orjson.OPT_INDENT_2).decode('utf-8') + '\n'

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        css = safe_read_file(args.source)
        document = CssDocument(css)
        logger.info(f"Parsed {len(document.nodes)} top-level rules from {args.source}")

        media_types = args.media_types or list(DEFAULT_ALLOWED_MEDIA_TYPES)
        output = render_output(document, args.mode, media_types)

        if args.output:
            safe_write_file(args.output, output)
            logger.info(f"Output saved to {args.output}")
        else:
            sys.stdout.write(output)

        return 0

    except CssDocumentError as e:
        logger.error(f"Error: {str(e)}")
        return 1

if __name__ == '__main__':
    sys.exit(main())
