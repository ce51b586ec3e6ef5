"""Shared fixtures for token style tests."""

import pytest

from token_style.color_role import ColorMode, ColorRole
from token_style.style_spec import StyleSpec
from token_style.token_class import TokenClass
from token_style.token_style_palette import TokenStylePalette
from token_style.token_style_resolver import TokenStyleResolver


@pytest.fixture
def resolver():
    """Resolver using the default palette and adjacency rules."""
    return TokenStyleResolver()


@pytest.fixture
def minimal_palette():
    """Smallest complete palette: every class falls back to plain text."""
    colors = {
        ColorRole.BACKGROUND: {ColorMode.DARK: "#000000", ColorMode.LIGHT: "#ffffff"},
        ColorRole.PLAIN_TEXT: {ColorMode.DARK: "#eeeeee", ColorMode.LIGHT: "#111111"},
        ColorRole.KEYWORD: {ColorMode.DARK: "#ff00ff", ColorMode.LIGHT: "#880088"},
    }
    styles = {
        TokenClass.TEXT: StyleSpec(role=ColorRole.PLAIN_TEXT),
        TokenClass.KEYWORD: StyleSpec(role=ColorRole.KEYWORD, bold=True),
        TokenClass.COMMENT: StyleSpec(role=ColorRole.PLAIN_TEXT, italic=True),
        TokenClass.ERROR: StyleSpec(role=ColorRole.PLAIN_TEXT),
        TokenClass.OPERATOR: StyleSpec(role=ColorRole.PLAIN_TEXT),
        TokenClass.NUMBER: StyleSpec(role=ColorRole.PLAIN_TEXT),
        TokenClass.STRING: StyleSpec(role=ColorRole.PLAIN_TEXT),
    }
    return TokenStylePalette(colors, styles)
