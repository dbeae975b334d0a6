"""Tests for text helpers."""

import re

from ipcspec_mcp.parser import dedent, concat_regex


def test_dedent_removes_common_indent():
    """Test that the shortest indent is removed from every line."""
    assert dedent("    a\n      b\n") == "a\n  b\n"


def test_dedent_is_idempotent():
    """Test that dedenting twice equals dedenting once."""
    text = "\n        export function a() {\n            return 1;\n        }\n"
    once = dedent(text)
    assert dedent(once) == once
    assert once == "\nexport function a() {\n    return 1;\n}\n"


def test_dedent_ignores_blank_lines():
    """Test that blank lines don't count toward the indent."""
    assert dedent("  a\n\n  b") == "a\n\nb"


def test_dedent_clamps_short_lines():
    """Test that whitespace lines shorter than the indent become empty."""
    assert dedent("    a\n  \n    b") == "a\n\nb"


def test_dedent_all_blank():
    """Test that text without content lines clamps every line."""
    assert dedent("   \n  ") == "\n"


def test_dedent_no_indent_unchanged():
    """Test that unindented text is returned as-is."""
    text = "type A = string;\n  nested\n"
    assert dedent(text) == text


def test_concat_regex():
    """Test regex concatenation and flags."""
    pattern = concat_regex([r"^a", r"|^b"], re.MULTILINE)
    assert pattern.pattern == "^a|^b"
    assert pattern.findall("a\nb\nc") == ["a", "b"]
