#!/usr/bin/env python3
"""
KUBETINT CORE MODELS
--------------------
Defines the fundamental data structures used across the KubeTint engine.
These models describe how a single line of YAML is seen by the viewer.

Author: KubeTint Team
Date: 2026-10-19
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

@dataclass(frozen=True)
class StyleSpec:
    """
    The three color tokens applied during one colorization pass.

    Values are viewer color names (e.g. 'steelblue') or hex codes ('#4682b4').
    Defaults mirror the stock k9s skin.
    """
    key_color: str = "steelblue"
    colon_color: str = "white"
    value_color: str = "papayawhip"

class LineShape(Enum):
    """The three lexical shapes a YAML line can take."""
    PAIR = "pair"        # key: value
    KEY = "key"          # key:
    OPAQUE = "opaque"    # list items, block scalars, anything else

@dataclass
class YamlLine:
    """
    The classification of a single (already escaped) YAML line.

    Lives only while the line is being formatted; never stored.
    """
    shape: LineShape
    indent: str = ""            # Leading whitespace, kept verbatim
    key: Optional[str] = None   # Key token without the colon
    value: Optional[str] = None # Remainder after ': ' (PAIR only)
    raw_line: str = ""          # The line as it was classified
