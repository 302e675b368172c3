#!/usr/bin/env python3
"""
KUBETINT RENDER - Terminal Preview
----------------------------------
Reads the viewer markup produced by the colorizer and rebuilds it as a
rich Text so the CLI can print it in any terminal.

Grammar handled:
    [fg:bg:flags]   style tag; empty fields keep the current value, '-' resets
    ["id"] ... [""] region; text inside a region is shown reversed
    [foo[]          escaped literal, printed as '[foo]'

Author: KubeTint Team
Date: 2026-10-19
"""

import logging
import re
from typing import Dict, Optional, Set

from rich.color import Color, ColorParseError
from rich.style import Style
from rich.text import Text

from kubetint.view.markup import TAG_CHARS, unescape_markup

logger = logging.getLogger("kubetint.render")

TOKEN_PATTERN = re.compile(
    rf'(?P<escaped>\[[{TAG_CHARS}]+\[*)\[\]'
    r'|\[(?P<region>"[^"\[\]]*")\]'
    r'|\[(?P<style>[a-zA-Z0-9#\-]*(?::[a-zA-Z0-9#\-]*(?::[a-zA-Z\-]*)?)?)\]'
)

# W3C names used by k9s skins that rich does not know (or maps differently).
COLOR_ALIASES: Dict[str, str] = {
    "steelblue": "#4682b4",
    "papayawhip": "#ffefd5",
    "dodgerblue": "#1e90ff",
    "lightskyblue": "#87cefa",
    "cadetblue": "#5f9ea0",
    "orangered": "#ff4500",
    "lightslategray": "#778899",
    "aqua": "#00ffff",
    "seagreen": "#2e8b57",
}

FLAG_NAMES = {
    "b": "bold",
    "i": "italic",
    "u": "underline",
    "d": "dim",
    "l": "blink",
    "r": "reverse",
    "s": "strike",
}

def resolve_color(name: Optional[str]) -> Optional[Color]:
    """Maps a viewer color name to a rich Color, or None when unknown."""
    if not name:
        return None
    candidate = COLOR_ALIASES.get(name.lower(), name)
    try:
        return Color.parse(candidate)
    except ColorParseError:
        logger.debug(f"Ignoring unknown color '{name}'")
        return None

class MarkupRenderer:
    """
    Stateful reader for one markup document.
    Style state flows across line breaks exactly as it does in the viewer.
    """

    def __init__(self):
        self.fg: Optional[str] = None
        self.bg: Optional[str] = None
        self.flags: Set[str] = set()
        self.region: Optional[str] = None

    def _apply_style_tag(self, tag: str):
        fields = tag.split(":")
        fields += [""] * (3 - len(fields))
        fg, bg, flags = fields[:3]

        if fg == "-":
            self.fg = None
        elif fg:
            self.fg = fg

        if bg == "-":
            self.bg = None
        elif bg:
            self.bg = bg

        if flags == "-":
            self.flags = set()
        elif flags:
            self.flags = {f for f in flags if f in FLAG_NAMES}

    def _current_style(self) -> Style:
        attrs = {FLAG_NAMES[f]: True for f in self.flags}
        if self.region is not None:
            attrs["reverse"] = True
        return Style(color=resolve_color(self.fg), bgcolor=resolve_color(self.bg), **attrs)

    def render(self, markup: str) -> Text:
        text = Text()
        cursor = 0

        for token in TOKEN_PATTERN.finditer(markup):
            if token.start() > cursor:
                text.append(markup[cursor:token.start()], style=self._current_style())
            cursor = token.end()

            if token.group("escaped") is not None:
                text.append(unescape_markup(token.group(0)), style=self._current_style())
            elif token.group("region") is not None:
                region_id = token.group("region").strip('"')
                self.region = region_id or None
            elif token.group("style"):
                self._apply_style_tag(token.group("style"))
            else:
                # '[]' is not a tag
                text.append(token.group(0), style=self._current_style())

        if cursor < len(markup):
            text.append(markup[cursor:], style=self._current_style())
        return text

def render_markup(markup: str) -> Text:
    """Renders a full markup document into a rich Text."""
    return MarkupRenderer().render(markup)
