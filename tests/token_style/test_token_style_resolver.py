"""Tests for the token style resolver."""

import pytest

from token_style.color_role import ColorMode, ColorRole
from token_style.style_spec import StyleSpec
from token_style.token_class import TokenClass
from token_style.token_style_exceptions import TokenStyleConfigError
from token_style.token_style_palette import DEFAULT_PALETTE, TokenStylePalette
from token_style.token_style_resolver import StyledToken, TokenStyleResolver
from token_style.token_style_rules import AdjacencyRule


KEYWORD_STYLE = StyleSpec(role=ColorRole.KEYWORD, bold=True)
OPERATOR_STYLE = StyleSpec(role=ColorRole.OPERATOR)
PLAIN_STYLE = StyleSpec(role=ColorRole.PLAIN_TEXT)
MEMBER_STYLE = StyleSpec(role=ColorRole.PLATFORM_MEMBER)


class TestBaseStyles:
    """Test resolution without any adjacency override."""

    def test_empty_block(self, resolver):
        """Test that an empty block gives no styles."""
        assert resolver.resolve([]) == []

    def test_comment(self, resolver):
        """Test a lone comment takes the comment colour."""
        assert resolver.resolve([(TokenClass.COMMENT, "// hi")]) == [StyleSpec(role=ColorRole.COMMENT)]

    def test_single_token_never_overridden(self, resolver):
        """Test that a token with no predecessor keeps its base style."""
        for token_class in TokenClass:
            assert resolver.resolve([(token_class, "x")]) == [resolver.base_style(token_class)]

    def test_unknown_class_is_plain_text(self, resolver):
        """Test that unrecognized classes degrade to plain text."""
        styles = resolver.resolve([("gd", "-removed"), (object(), "?"), (42, "42")])
        assert styles == [PLAIN_STYLE, PLAIN_STYLE, PLAIN_STYLE]

    def test_css_class_names_accepted(self, resolver):
        """Test that short CSS class names resolve like TokenClass values."""
        assert resolver.resolve([("c", "# note"), ("mh", "0xff")]) == [
            StyleSpec(role=ColorRole.COMMENT),
            StyleSpec(role=ColorRole.NUMBER)
        ]


class TestAdjacencyOverrides:
    """Test the documented override rules."""

    def test_declaration_keyword_then_function_name(self, resolver):
        """Test that a declared function name inherits its colour."""
        styles = resolver.resolve([(TokenClass.KEYWORD_DECLARATION, "func"), (TokenClass.FUNCTION_NAME, "foo")])
        assert styles == [KEYWORD_STYLE, StyleSpec.inherited()]

    def test_declaration_keyword_then_type_keyword(self, resolver):
        """Test that a type keyword after a declaration inherits its colour."""
        styles = resolver.resolve([(TokenClass.KEYWORD_DECLARATION, "let"), (TokenClass.TYPE_KEYWORD, "Int")])
        assert styles == [KEYWORD_STYLE, StyleSpec.inherited()]

    def test_operator_then_name(self, resolver):
        """Test that a name after an operator takes the platform member colour."""
        styles = resolver.resolve([(TokenClass.OPERATOR, "."), (TokenClass.NAME, "name")])
        assert styles == [OPERATOR_STYLE, MEMBER_STYLE]

    def test_variable_operator_name(self, resolver):
        """Test that the three-token rule beats the operator/name rule."""
        styles = resolver.resolve([
            (TokenClass.VARIABLE_NAME, "self"),
            (TokenClass.OPERATOR, "."),
            (TokenClass.NAME, "name")
        ])
        assert styles == [KEYWORD_STYLE, OPERATOR_STYLE, StyleSpec.inherited()]

    def test_css_names_trigger_rules(self, resolver):
        """Test rules matching when the lexer reports CSS class names."""
        styles = resolver.resolve([("nv", "self"), ("o", "."), ("n", "name")])
        assert styles[2] == StyleSpec.inherited()

    def test_whitespace_breaks_adjacency(self, resolver):
        """Test that rules only match immediately adjacent tokens."""
        styles = resolver.resolve([
            (TokenClass.KEYWORD_DECLARATION, "func"),
            (TokenClass.WHITESPACE, " "),
            (TokenClass.FUNCTION_NAME, "foo")
        ])
        assert styles[2] == StyleSpec(role=ColorRole.PROJECT_MEMBER)

    def test_unknown_predecessor_before_pair(self, resolver):
        """Test that an unknown class only blocks contexts it is part of."""
        styles = resolver.resolve([("zz", "obj"), (TokenClass.OPERATOR, "."), (TokenClass.NAME, "count")])
        assert styles == [PLAIN_STYLE, OPERATOR_STYLE, MEMBER_STYLE]

    def test_chained_member_access(self, resolver):
        """Test rules applying independently along a longer run."""
        styles = resolver.resolve([
            (TokenClass.VARIABLE_NAME, "self"),
            (TokenClass.OPERATOR, "."),
            (TokenClass.NAME, "items"),
            (TokenClass.OPERATOR, "."),
            (TokenClass.NAME, "count")
        ])
        assert styles == [KEYWORD_STYLE, OPERATOR_STYLE, StyleSpec.inherited(), OPERATOR_STYLE, MEMBER_STYLE]


class TestResolverProperties:
    """Test shape and purity of resolution."""

    SAMPLE = [
        (TokenClass.KEYWORD_DECLARATION, "func"),
        (TokenClass.WHITESPACE, " "),
        (TokenClass.FUNCTION_NAME, "area"),
        (TokenClass.PUNCTUATION, "("),
        (TokenClass.PUNCTUATION, ")"),
        (TokenClass.OPERATOR, "->"),
        (TokenClass.TYPE_KEYWORD, "Double"),
        (TokenClass.VARIABLE_NAME, "self"),
        (TokenClass.OPERATOR, "."),
        (TokenClass.NAME, "width"),
        (TokenClass.NUMBER_FLOAT, "2.0"),
        (TokenClass.STRING, '"s"'),
        ("unknown", "?"),
    ]

    def test_output_length_matches_input(self, resolver):
        """Test that every token gets exactly one style."""
        for end in range(len(self.SAMPLE) + 1):
            assert len(resolver.resolve(self.SAMPLE[:end])) == end

    def test_resolution_is_repeatable(self, resolver):
        """Test that resolving twice gives identical output."""
        assert resolver.resolve(self.SAMPLE) == resolver.resolve(self.SAMPLE)

    def test_resolve_tokens_pairs_styles(self, resolver):
        """Test that resolve_tokens keeps class and text alongside the style."""
        styled = resolver.resolve_tokens([(TokenClass.OPERATOR, "."), (TokenClass.NAME, "name")])

        assert styled == [
            StyledToken(TokenClass.OPERATOR, ".", OPERATOR_STYLE),
            StyledToken(TokenClass.NAME, "name", MEMBER_STYLE)
        ]

    def test_blocks_are_independent(self, resolver):
        """Test that rules do not match across block boundaries."""
        styles = resolver.resolve_blocks([
            [(TokenClass.VARIABLE_NAME, "self"), (TokenClass.OPERATOR, ".")],
            [(TokenClass.NAME, "name")]
        ])

        assert styles == [[KEYWORD_STYLE, OPERATOR_STYLE], [PLAIN_STYLE]]


class TestResolverConfiguration:
    """Test resolvers built from custom palettes and rules."""

    def test_no_rules(self):
        """Test that an empty rule list disables overrides."""
        resolver = TokenStyleResolver(rules=[])
        styles = resolver.resolve([(TokenClass.OPERATOR, "."), (TokenClass.NAME, "name")])
        assert styles == [OPERATOR_STYLE, PLAIN_STYLE]

    def test_custom_palette(self, minimal_palette):
        """Test base styles coming from a custom palette."""
        resolver = TokenStyleResolver(minimal_palette, rules=[])
        styles = resolver.resolve([(TokenClass.KEYWORD_CONSTANT, "nil"), (TokenClass.DOC_COMMENT, "/// doc")])
        assert styles == [
            StyleSpec(role=ColorRole.KEYWORD, bold=True),
            StyleSpec(role=ColorRole.PLAIN_TEXT, italic=True)
        ]

    def test_incomplete_palette_rejected(self):
        """Test that construction fails for a palette that misses classes."""
        with pytest.raises(TokenStyleConfigError):
            TokenStyleResolver(TokenStylePalette({}, {}))

    def test_duplicate_rules_rejected(self):
        """Test that construction fails for conflicting rules."""
        rule = AdjacencyRule((TokenClass.OPERATOR, TokenClass.NAME), StyleSpec.inherited())
        with pytest.raises(TokenStyleConfigError):
            TokenStyleResolver(rules=[rule, rule])

    def test_palette_missing_rule_colour_rejected(self):
        """Test that construction fails when an adjacency override uses a colour the palette lacks."""
        colors = {
            role: {mode: DEFAULT_PALETTE.get_color(role, mode) for mode in ColorMode}
            for role in ColorRole
            if role != ColorRole.PLATFORM_MEMBER
        }
        styles = {token_class: DEFAULT_PALETTE.get_style(token_class) for token_class in TokenClass}
        palette = TokenStylePalette(colors, styles)

        with pytest.raises(TokenStyleConfigError):
            TokenStyleResolver(palette)

        # Without the member access rule nothing needs the missing colour
        assert len(TokenStyleResolver(palette, rules=[]).rules()) == 0
