#!/usr/bin/env python3
"""
KUBETINT COLORIZER - Line Classifier (Phase 1)
----------------------------------------------
Decorates raw YAML text with viewer markup, one line at a time.

This is a lexical pass, not a parser: every line is classified as a
'key: value' pair, a bare 'key:' header, or an opaque line (list items,
block scalar bodies, comments...). Nothing is dropped; only the indent
and the colon are reinterpreted as structure.

Author: KubeTint Team
Date: 2026-10-19
"""

import re
from typing import List

from kubetint.core.models import LineShape, StyleSpec, YamlLine
from kubetint.view.markup import escape_markup, tag_search_regions

# Viewer templates; the bracketed names are swapped for StyleSpec colors.
PAIR_FMT = "{indent}[{key_color}::b]{key}[{colon_color}::-]: [{value_color}::]{value}"
KEY_FMT = "{indent}[{key_color}::b]{key}[{colon_color}::-]:"
VALUE_FMT = "[{value_color}::]{line}"

class YamlColorizer:
    """
    Classifies lines and renders them with a fixed StyleSpec.

    The compiled patterns are class-level and carry no per-call state, so one
    colorizer (or many) can be shared freely across threads.
    """

    # Group 1: Indent, Group 2: Key, Group 3: Value (needs a non-blank char)
    # Keys start on a non-blank char; the indent owns every leading blank.
    PAIR_PATTERN = re.compile(r'\A(\s*)([\w\-./][\w\-./\s]*): (.*\S.*)\Z', re.ASCII)
    # Group 1: Indent, Group 2: Key
    KEY_PATTERN = re.compile(r'\A(\s*)([\w\-./][\w\-./\s]*):\s*\Z', re.ASCII)

    def __init__(self, style: StyleSpec = None):
        self.style = style or StyleSpec()

    def classify_line(self, line: str) -> YamlLine:
        """
        Works out the shape of an already escaped line.
        Order matters: full pair, then key-only, then the opaque fallback.
        """
        match = self.PAIR_PATTERN.match(line)
        if match:
            indent, key, value = match.groups()
            return YamlLine(LineShape.PAIR, indent=indent, key=key, value=value, raw_line=line)

        match = self.KEY_PATTERN.match(line)
        if match:
            indent, key = match.groups()
            return YamlLine(LineShape.KEY, indent=indent, key=key, raw_line=line)

        return YamlLine(LineShape.OPAQUE, raw_line=line)

    def format_line(self, classified: YamlLine) -> str:
        """Interleaves the style tags with the captured pieces of the line."""
        colors = {
            "key_color": self.style.key_color,
            "colon_color": self.style.colon_color,
            "value_color": self.style.value_color,
        }
        if classified.shape is LineShape.PAIR:
            return PAIR_FMT.format(indent=classified.indent, key=classified.key,
                                   value=classified.value, **colors)
        if classified.shape is LineShape.KEY:
            return KEY_FMT.format(indent=classified.indent, key=classified.key, **colors)
        return VALUE_FMT.format(line=classified.raw_line, **colors)

    def colorize(self, raw: str) -> str:
        """
        Escapes, classifies, formats and region-tags every line of raw.
        A trailing newline yields a trailing (value-styled) empty line.
        """
        lines = escape_markup(raw).split("\n")
        buffer: List[str] = []
        for line in lines:
            formatted = self.format_line(self.classify_line(line))
            buffer.append(tag_search_regions(formatted))
        return "\n".join(buffer)

def colorize_yaml(style: StyleSpec, raw: str) -> str:
    """Functional entry point: colorizes raw with the given style."""
    return YamlColorizer(style).colorize(raw)
