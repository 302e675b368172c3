#!/usr/bin/env python3
"""
KUBETINT MARKUP - Viewer Grammar Helpers
----------------------------------------
Escaping rules and search-region tagging for the viewer markup.

The viewer reads inline style tags ('[steelblue::b]') and region tags
('["search_0"]...[""]'). Anything in the source text that looks like a tag
must be escaped before colorization, and search placeholders are only turned
into live region tags once they are known to be genuine.

Author: KubeTint Team
Date: 2026-10-19
"""

import re

# Characters the viewer accepts inside a tag.
TAG_CHARS = r'a-zA-Z0-9_,;: \-."#'

# '[foo]' is a tag; '[foo[]' renders as the literal '[foo]'.
ESCAPE_PATTERN = re.compile(rf'(\[[{TAG_CHARS}]+\[*)\]')
UNESCAPE_PATTERN = re.compile(rf'(\[[{TAG_CHARS}]+\[*)\[\]')

# A genuine placeholder: <<<"search_N">>>text<<<"">>>
SEARCH_PATTERN = re.compile(r'<<<("search_\d+")>>>(.+)<<<"">>>')

PLACEHOLDER_OPEN = "<<<"
PLACEHOLDER_CLOSE = ">>>"

def escape_markup(text: str) -> str:
    """Neutralizes every tag-like '[...]' span so the viewer prints it verbatim."""
    return ESCAPE_PATTERN.sub(r'\1[]', text)

def unescape_markup(text: str) -> str:
    """Reverses escape_markup."""
    return UNESCAPE_PATTERN.sub(r'\1]', text)

def search_placeholder(index: int, text: str) -> str:
    """Builds the placeholder the region tagger will later activate."""
    return f'{PLACEHOLDER_OPEN}"search_{index}"{PLACEHOLDER_CLOSE}{text}{PLACEHOLDER_OPEN}""{PLACEHOLDER_CLOSE}'

def tag_search_regions(line: str) -> str:
    """
    Turns search placeholders into live region tags.

    Lines without a complete placeholder are returned untouched, so stray
    '<<<' or '>>>' in ordinary values survive as-is.
    """
    if not SEARCH_PATTERN.search(line):
        return line
    return line.replace(PLACEHOLDER_OPEN, "[").replace(PLACEHOLDER_CLOSE, "]")
