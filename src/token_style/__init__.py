"""
Syntax highlighting token styles.

This package maps the token classes a lexer emits onto display styles,
including overrides for runs of adjacent tokens, and exports the result as
CSS or Qt text formats.
"""

from token_style.color_role import ColorMode, ColorRole
from token_style.style_spec import StyleSpec
from token_style.token_class import TokenClass
from token_style.token_style_exceptions import TokenStyleConfigError, TokenStyleError
from token_style.token_style_palette import DEFAULT_PALETTE, TokenStylePalette
from token_style.token_style_resolver import StyledToken, TokenStyleResolver
from token_style.token_style_rules import DEFAULT_ADJACENCY_RULES, AdjacencyRule, AdjacencyRuleSet
from token_style.token_style_settings import ThemeSettings
from token_style.token_style_stylesheet import TokenStyleStylesheet

__all__ = [
    # Exceptions
    'TokenStyleError',
    'TokenStyleConfigError',
    # Types
    'ColorMode',
    'ColorRole',
    'StyleSpec',
    'StyledToken',
    'TokenClass',
    # Configuration
    'AdjacencyRule',
    'AdjacencyRuleSet',
    'DEFAULT_ADJACENCY_RULES',
    'DEFAULT_PALETTE',
    'ThemeSettings',
    'TokenStylePalette',
    # Core classes
    'TokenStyleResolver',
    'TokenStyleStylesheet',
]
