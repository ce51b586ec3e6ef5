"""CSS stylesheet generation for highlighted HTML code blocks."""

import logging
from typing import Iterable, List

from token_style.color_role import ColorMode, ColorRole
from token_style.style_spec import StyleSpec
from token_style.token_class import TokenClass
from token_style.token_style_palette import TokenStylePalette
from token_style.token_style_resolver import TokenStyleResolver
from token_style.token_style_rules import AdjacencyRule, AdjacencyRuleSet


class TokenStyleStylesheet:
    """
    Renders a palette and its adjacency rules as CSS.

    Token classes are written as the short class names Rouge and Pygments
    put on their `<span>` elements, and adjacency rules use the adjacent
    sibling combinator.  Rules are written shortest context first, so a
    longer context (which also has the higher CSS specificity) wins when
    both match the same element.
    """

    def __init__(
        self,
        palette: TokenStylePalette | None = None,
        rules: Iterable[AdjacencyRule] | AdjacencyRuleSet | None = None
    ) -> None:
        """
        Initialize the stylesheet.

        Args:
            palette: Palette to take styles and colours from; defaults to DEFAULT_PALETTE
            rules: Adjacency rules to write; defaults to DEFAULT_ADJACENCY_RULES

        Raises:
            TokenStyleConfigError: If the palette is incomplete or the rules conflict
        """
        # Same configuration checks as the resolver
        resolver = TokenStyleResolver(palette, rules)
        self._palette = resolver.palette()
        self._rules = resolver.rules()
        self._logger = logging.getLogger("TokenStyleStylesheet")

    def _declarations(self, style: StyleSpec, base: StyleSpec | None, mode: ColorMode) -> List[str]:
        declarations = []
        if style.inherit:
            declarations.append("color: inherit;")

        elif style.role is not None:
            declarations.append(f"color: {self._palette.get_color(style.role, mode)};")

        if style.bold:
            declarations.append("font-weight: bold;")

        elif base is not None and base.bold:
            declarations.append("font-weight: normal;")

        if style.italic:
            declarations.append("font-style: italic;")

        elif base is not None and base.italic:
            declarations.append("font-style: normal;")

        return declarations

    @staticmethod
    def _block(selector: str, declarations: List[str]) -> str:
        body = "".join(f"    {declaration}\n" for declaration in declarations)
        return f"{selector} {{\n{body}}}\n"

    def generate(self, mode: ColorMode = ColorMode.DARK, scope: str = ".highlight") -> str:
        """
        Generate the stylesheet.

        Args:
            mode: Colour mode to take colours from
            scope: Selector of the element enclosing each code block

        Returns:
            The CSS text
        """
        blocks = [
            self._block(scope, [
                f"background-color: {self._palette.get_color(ColorRole.BACKGROUND, mode)};",
                f"color: {self._palette.get_color(ColorRole.PLAIN_TEXT, mode)};"
            ])
        ]

        for token_class in TokenClass:
            css_class = token_class.css_class()
            style = self._palette.get_style(token_class)
            if not css_class or style is None:
                continue

            blocks.append(self._block(f"{scope} .{css_class}", self._declarations(style, None, mode)))

        for rule in sorted(self._rules.rules(), key=lambda r: len(r.context)):
            selector = " + ".join(f".{token_class.css_class()}" for token_class in rule.context)
            base = self._palette.get_style(rule.current)
            blocks.append(self._block(f"{scope} {selector}", self._declarations(rule.override, base, mode)))

        self._logger.debug("generated %d CSS rules for %s mode", len(blocks), mode.name)
        return "\n".join(blocks)
