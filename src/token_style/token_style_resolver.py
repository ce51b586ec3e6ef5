"""Resolve the display style of each token in a highlighted code block."""

from dataclasses import dataclass
import logging
from typing import Any, Iterable, List, Sequence, Tuple

from token_style.style_spec import StyleSpec
from token_style.token_class import TokenClass
from token_style.token_style_palette import DEFAULT_PALETTE, TokenStylePalette
from token_style.token_style_rules import DEFAULT_ADJACENCY_RULES, AdjacencyRule, AdjacencyRuleSet


@dataclass(frozen=True)
class StyledToken:
    """A token paired with the style it resolved to."""
    token_class: Any
    text: str
    style: StyleSpec


class TokenStyleResolver:
    """
    Assigns a StyleSpec to every token of a code block.

    Each token first takes the base style of its class from the palette.  A
    single left-to-right pass then checks the classes immediately before each
    token against the adjacency rules and, where one matches, replaces the
    base style with the rule's override.

    The resolver keeps no state between calls, so one instance may be shared
    freely, including across threads.
    """

    def __init__(
        self,
        palette: TokenStylePalette | None = None,
        rules: Iterable[AdjacencyRule] | AdjacencyRuleSet | None = None
    ) -> None:
        """
        Initialize the resolver.

        Args:
            palette: Palette to take base styles from; defaults to DEFAULT_PALETTE
            rules: Adjacency rules to apply; defaults to DEFAULT_ADJACENCY_RULES

        Raises:
            TokenStyleConfigError: If the palette is incomplete or the rules conflict
        """
        self._logger = logging.getLogger("TokenStyleResolver")
        self._palette = palette if palette is not None else DEFAULT_PALETTE

        if rules is None:
            rules = DEFAULT_ADJACENCY_RULES

        self._rules = rules if isinstance(rules, AdjacencyRuleSet) else AdjacencyRuleSet(rules)
        self._palette.validate(self._rules.override_roles())
        self._plain_style = self._palette.get_style(TokenClass.TEXT) or StyleSpec.plain()

    def palette(self) -> TokenStylePalette:
        """Get the palette this resolver uses."""
        return self._palette

    def rules(self) -> AdjacencyRuleSet:
        """Get the adjacency rules this resolver applies."""
        return self._rules

    def _to_token_class(self, token_class: Any) -> TokenClass | None:
        if isinstance(token_class, TokenClass):
            return token_class

        if isinstance(token_class, str):
            return TokenClass.from_css_class(token_class)

        return None

    def base_style(self, token_class: Any) -> StyleSpec:
        """
        Get the style a token class has before any adjacency rule applies.

        Args:
            token_class: A TokenClass or a short CSS class name

        Returns:
            The class's style, or the plain text style if the class is not recognized
        """
        known_class = self._to_token_class(token_class)
        if known_class is None:
            return self._plain_style

        return self._palette.get_style(known_class) or self._plain_style

    def resolve(self, tokens: Sequence[Tuple[Any, str]]) -> List[StyleSpec]:
        """
        Resolve the style of each token in one code block.

        Args:
            tokens: (token class, text) pairs in source order.  A token class is
                a TokenClass or a short CSS class name; anything else is treated
                as plain text.

        Returns:
            One StyleSpec per input token, in input order
        """
        classes: List[TokenClass | None] = []
        for token_class, text in tokens:
            known_class = self._to_token_class(token_class)
            if known_class is None:
                self._logger.debug("unrecognized token class %r for %r, using plain text", token_class, text)

            classes.append(known_class)

        styles: List[StyleSpec] = []
        for index, known_class in enumerate(classes):
            style = self._plain_style
            if known_class is not None:
                style = self._palette.get_style(known_class) or self._plain_style

            # The first token has no predecessor so no rule can apply to it
            if index > 0 and known_class is not None:
                rule = self._rules.match(classes, index)
                if rule is not None:
                    style = rule.override

            styles.append(style)

        return styles

    def resolve_tokens(self, tokens: Sequence[Tuple[Any, str]]) -> List[StyledToken]:
        """
        Resolve one code block and pair every token with its style.

        Args:
            tokens: (token class, text) pairs in source order

        Returns:
            One StyledToken per input token, in input order
        """
        styles = self.resolve(tokens)
        return [
            StyledToken(token_class=token_class, text=text, style=style)
            for (token_class, text), style in zip(tokens, styles)
        ]

    def resolve_blocks(self, blocks: Iterable[Sequence[Tuple[Any, str]]]) -> List[List[StyleSpec]]:
        """
        Resolve several code blocks independently.

        Adjacency rules never match across the end of one block and the start
        of the next.

        Args:
            blocks: Token sequences, one per code block

        Returns:
            Style lists, one per block
        """
        return [self.resolve(block) for block in blocks]
