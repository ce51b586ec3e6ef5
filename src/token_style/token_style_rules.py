"""Adjacency rules that override a token's style based on the tokens before it."""

from dataclasses import dataclass
import logging
from typing import Dict, Iterable, List, Sequence, Tuple

from token_style.color_role import ColorRole
from token_style.style_spec import StyleSpec
from token_style.token_class import TokenClass
from token_style.token_style_exceptions import TokenStyleConfigError


@dataclass(frozen=True)
class AdjacencyRule:
    """
    Style override for a run of adjacent token classes.

    Attributes:
        context: The predecessor classes, in source order, followed by the class
            of the token being styled
        override: The style the last token of the run takes
    """
    context: Tuple[TokenClass, ...]
    override: StyleSpec

    @property
    def current(self) -> TokenClass:
        """The class of the token the override applies to."""
        return self.context[-1]

    @property
    def predecessors(self) -> Tuple[TokenClass, ...]:
        """The classes that must immediately precede the current token."""
        return self.context[:-1]


class AdjacencyRuleSet:
    """
    Registry of adjacency rules keyed by their class context.

    Lookups try the longest registered context first, so a three-token rule
    takes precedence over a two-token rule matching the same trailing pair.
    """

    def __init__(self, rules: Iterable[AdjacencyRule] = ()) -> None:
        """
        Initialize the rule set.

        Args:
            rules: Rules to register, in order

        Raises:
            TokenStyleConfigError: If any rule is malformed or duplicates another
        """
        self._rules: Dict[Tuple[TokenClass, ...], AdjacencyRule] = {}
        self._lengths: List[int] = []
        self._logger = logging.getLogger("AdjacencyRuleSet")

        for rule in rules:
            self._register(rule)

    def _register(self, rule: AdjacencyRule) -> None:
        if len(rule.context) < 2:
            raise TokenStyleConfigError(
                "Adjacency rule needs at least one predecessor",
                {'context': [token_class.name for token_class in rule.context]}
            )

        if rule.context in self._rules:
            raise TokenStyleConfigError(
                f"Duplicate adjacency rule for {self.describe(rule.context)}",
                {'context': [token_class.name for token_class in rule.context]}
            )

        self._rules[rule.context] = rule
        if len(rule.context) not in self._lengths:
            self._lengths.append(len(rule.context))
            self._lengths.sort(reverse=True)

        self._logger.debug("registered rule %s", self.describe(rule.context))

    @staticmethod
    def describe(context: Sequence[TokenClass]) -> str:
        """
        Get a readable description of a class context.

        Args:
            context: The classes to describe

        Returns:
            The class names joined with '+'
        """
        return " + ".join(token_class.name for token_class in context)

    def rules(self) -> List[AdjacencyRule]:
        """Get the registered rules in registration order."""
        return list(self._rules.values())

    def override_roles(self) -> List[ColorRole]:
        """Get the colour roles the registered rules switch tokens to."""
        return [rule.override.role for rule in self._rules.values() if rule.override.role is not None]

    def max_context(self) -> int:
        """Get the length of the longest registered context, or 0 if there are no rules."""
        return self._lengths[0] if self._lengths else 0

    def match(self, classes: Sequence[TokenClass | None], index: int) -> AdjacencyRule | None:
        """
        Find the rule that applies to the token at a given position.

        Args:
            classes: Token classes of the whole block; None marks a class the
                resolver does not recognize
            index: Position of the token being styled

        Returns:
            The most specific matching rule, or None if no rule applies
        """
        for length in self._lengths:
            start = index - length + 1
            if start < 0:
                continue

            context = tuple(classes[start:index + 1])
            rule = self._rules.get(context)  # type: ignore[arg-type]
            if rule is not None:
                return rule

        return None

    def __len__(self) -> int:
        return len(self._rules)


DEFAULT_ADJACENCY_RULES: Tuple[AdjacencyRule, ...] = (
    # A name being declared keeps the declaration's neutral colour
    AdjacencyRule((TokenClass.KEYWORD_DECLARATION, TokenClass.FUNCTION_NAME), StyleSpec.inherited()),
    AdjacencyRule((TokenClass.KEYWORD_DECLARATION, TokenClass.TYPE_KEYWORD), StyleSpec.inherited()),

    # A bare name after an operator is usually a member access
    AdjacencyRule((TokenClass.OPERATOR, TokenClass.NAME), StyleSpec(role=ColorRole.PLATFORM_MEMBER)),

    # ...unless it is a member of a local variable such as self
    AdjacencyRule((TokenClass.VARIABLE_NAME, TokenClass.OPERATOR, TokenClass.NAME), StyleSpec.inherited()),
)
