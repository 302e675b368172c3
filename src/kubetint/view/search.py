#!/usr/bin/env python3
"""
KUBETINT SEARCH - Match Marker
------------------------------
Wraps query matches in search placeholders before the text reaches the
colorizer. The placeholders are inert until the region tagger activates them.

Author: KubeTint Team
Date: 2026-10-19
"""

import re
from typing import List, Tuple

from kubetint.view.markup import search_placeholder

def compile_query(query: str) -> re.Pattern:
    """Case-insensitive regex; falls back to a literal match for invalid patterns."""
    try:
        return re.compile(query, re.IGNORECASE)
    except re.error:
        return re.compile(re.escape(query), re.IGNORECASE)

def mark_search_regions(raw: str, query: str) -> Tuple[str, int]:
    """
    Returns (marked_text, match_count).
    Matches are numbered across the whole document, starting at 0.
    Matches never span lines; empty matches are ignored.
    """
    if not query or not query.strip():
        return raw, 0

    pattern = compile_query(query)
    count = 0
    marked: List[str] = []

    for line in raw.split("\n"):
        pieces = []
        cursor = 0
        for match in pattern.finditer(line):
            start, end = match.span()
            if start == end:
                continue
            pieces.append(line[cursor:start])
            pieces.append(search_placeholder(count, line[start:end]))
            cursor = end
            count += 1
        pieces.append(line[cursor:])
        marked.append("".join(pieces))

    return "\n".join(marked), count
