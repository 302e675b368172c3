#!/usr/bin/env python3
"""
KUBETINT COLORIZER SUITE
------------------------
Line classification and markup output of the YAML colorizer.

Author: KubeTint Team
Date: 2026-10-19
"""

import time

import pytest

from kubetint.core.models import LineShape, StyleSpec
from kubetint.view.colorizer import YamlColorizer, colorize_yaml

STYLE = StyleSpec()

def test_pair_line_is_fully_decorated():
    out = colorize_yaml(STYLE, "apiVersion: v1")
    assert out == "[steelblue::b]apiVersion[white::-]: [papayawhip::]v1"

def test_indent_is_preserved_before_key():
    out = colorize_yaml(STYLE, "    image: nginx:1.25")
    assert out == "    [steelblue::b]image[white::-]: [papayawhip::]nginx:1.25"

def test_key_only_line_has_no_value_wrapper():
    out = colorize_yaml(STYLE, "  metadata:")
    assert out == "  [steelblue::b]metadata[white::-]:"
    assert "[papayawhip::]" not in out

def test_key_with_trailing_blanks_is_key_only():
    """A colon followed only by whitespace never counts as a pair."""
    out = colorize_yaml(STYLE, "spec:   ")
    assert out == "[steelblue::b]spec[white::-]:"

@pytest.mark.parametrize("line", ["- item one", "   ", "", "not a key!: x", "a:b", "# comment"])
def test_unmatched_lines_are_wrapped_as_values(line):
    assert colorize_yaml(STYLE, line) == f"[papayawhip::]{line}"

def test_first_colon_space_splits_key_from_value():
    colorizer = YamlColorizer(STYLE)
    classified = colorizer.classify_line("command: echo: hi")
    assert classified.shape is LineShape.PAIR
    assert classified.key == "command"
    assert classified.value == "echo: hi"

def test_keys_may_contain_spaces_dots_and_slashes():
    classified = YamlColorizer().classify_line("  app.kubernetes.io/managed by: helm")
    assert classified.shape is LineShape.PAIR
    assert classified.indent == "  "
    assert classified.key == "app.kubernetes.io/managed by"
    assert classified.value == "helm"

def test_list_item_pair_keeps_dash_in_key():
    classified = YamlColorizer().classify_line("  - name: web")
    assert classified.shape is LineShape.PAIR
    assert classified.key == "- name"

def test_pair_output_keeps_relative_order():
    out = colorize_yaml(STYLE, "  replicas: 3")
    key_at = out.index("replicas")
    colon_at = out.index("]: ") + 1
    value_at = out.rindex("3")
    assert key_at < colon_at < value_at
    assert out.index("[steelblue::b]") < key_at < out.index("[white::-]") < colon_at
    assert out.index("[papayawhip::]") < value_at

def test_custom_style_tokens_are_used():
    style = StyleSpec(key_color="red", colon_color="blue", value_color="#00ff00")
    out = colorize_yaml(style, "kind: Pod\nspec:\n- a")
    assert out.split("\n") == [
        "[red::b]kind[blue::-]: [#00ff00::]Pod",
        "[red::b]spec[blue::-]:",
        "[#00ff00::]- a",
    ]

def test_trailing_newline_produces_empty_value_line():
    out = colorize_yaml(STYLE, "a: b\n")
    assert out.split("\n") == ["[steelblue::b]a[white::-]: [papayawhip::]b", "[papayawhip::]"]

def test_markup_like_values_are_escaped():
    out = colorize_yaml(STYLE, "args: [red]")
    assert out == "[steelblue::b]args[white::-]: [papayawhip::][red[]"

def test_search_placeholder_becomes_region():
    out = colorize_yaml(STYLE, 'value: <<<"search_3">>>needle<<<"">>>')
    assert out == '[steelblue::b]value[white::-]: [papayawhip::]["search_3"]needle[""]'

def test_stray_angle_brackets_are_left_alone():
    out = colorize_yaml(STYLE, "note: value with <<< stray >>>")
    assert out.endswith("value with <<< stray >>>")

def test_multi_line_document():
    raw = (
        "apiVersion: v1\n"
        "kind: ConfigMap\n"
        "metadata:\n"
        "  name: cfg\n"
        "data:\n"
        "  script: |\n"
        "    echo hi\n"
    )
    lines = colorize_yaml(STYLE, raw).split("\n")
    assert len(lines) == raw.count("\n") + 1
    assert lines[2] == "[steelblue::b]metadata[white::-]:"
    assert lines[5] == "  [steelblue::b]script[white::-]: [papayawhip::]|"
    assert lines[6] == "[papayawhip::]    echo hi"

@pytest.mark.parametrize("line", [
    " " * 50000 + "x",
    " " * 50000 + "x" + " " * 50000,
])
def test_deep_indent_without_colon_is_fast(line):
    """Leading blanks must not trigger regex backtracking blowups."""
    started = time.perf_counter()
    out = colorize_yaml(STYLE, line)
    assert time.perf_counter() - started < 1.0
    assert out == f"[papayawhip::]{line}"

def test_deep_indent_pair_is_fast():
    line = " " * 50000 + "key:" + " " * 50000 + "!"
    started = time.perf_counter()
    classified = YamlColorizer().classify_line(line)
    assert time.perf_counter() - started < 1.0
    assert classified.shape is LineShape.PAIR
    assert len(classified.indent) == 50000
    assert classified.key == "key"
    assert classified.value == " " * 49999 + "!"

def test_blank_key_is_opaque():
    assert YamlColorizer().classify_line("   : x").shape is LineShape.OPAQUE
