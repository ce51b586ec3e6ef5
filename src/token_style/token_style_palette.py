"""
Colour palette for syntax highlighting.

A palette holds two tables: the concrete colour of each semantic role in each
colour mode, and the base style of each token class. Classes without a base
style of their own fall back to their parent class.
"""

import logging
import re
from typing import Dict, Iterable, List

from token_style.color_role import ColorMode, ColorRole
from token_style.style_spec import StyleSpec
from token_style.token_class import TokenClass
from token_style.token_style_exceptions import TokenStyleConfigError


class TokenStylePalette:
    """
    Read-only mapping from token classes to styles and from roles to colours.

    Palettes are never mutated after construction; `with_overrides` returns a
    new palette instead.
    """

    _COLOR_PATTERN = re.compile(r"^#[0-9a-fA-F]{6}$")

    def __init__(
        self,
        colors: Dict[ColorRole, Dict[ColorMode, str]],
        styles: Dict[TokenClass, StyleSpec]
    ) -> None:
        """
        Initialize the palette.

        Args:
            colors: Colour for each role, per colour mode
            styles: Base style for each token class that has one
        """
        self._colors = {role: dict(modes) for role, modes in colors.items()}
        self._styles = dict(styles)
        self._logger = logging.getLogger("TokenStylePalette")

    @classmethod
    def is_valid_color(cls, color: str) -> bool:
        """
        Determine if a string is a colour in '#rrggbb' form.

        Args:
            color: The colour string to check

        Returns:
            True if the colour is well formed
        """
        return isinstance(color, str) and cls._COLOR_PATTERN.match(color) is not None

    def roles(self) -> List[ColorRole]:
        """Get the roles that have colours in this palette."""
        return list(self._colors.keys())

    def get_color(self, role: ColorRole, mode: ColorMode) -> str:
        """
        Get the colour for a role.

        Args:
            role: The ColorRole to look up
            mode: The colour mode to use

        Returns:
            The colour string (hex format) for the role

        Raises:
            KeyError: If no colour is defined for the role and mode
        """
        return self._colors[role][mode]

    def color_for(self, style: StyleSpec, mode: ColorMode) -> str:
        """
        Get the concrete colour a style paints with.

        Inherited styles, and styles with no role, take the plain text colour
        of the surrounding code block.

        Args:
            style: The resolved style
            mode: The colour mode to use

        Returns:
            The colour string (hex format)
        """
        if style.inherit or style.role is None:
            return self.get_color(ColorRole.PLAIN_TEXT, mode)

        return self.get_color(style.role, mode)

    def get_style(self, token_class: TokenClass) -> StyleSpec | None:
        """
        Get the base style for a token class, falling back through its parents.

        Args:
            token_class: The class to look up

        Returns:
            The base style, or None if neither the class nor any parent has one
        """
        for candidate in token_class.ancestry():
            style = self._styles.get(candidate)
            if style is not None:
                return style

        return None

    def validate(self, extra_roles: Iterable[ColorRole | None] = ()) -> None:
        """
        Check that the palette is complete.

        Every token class must resolve to a style, and every role a style (or
        the block itself) refers to must have a well formed colour in every mode.

        Args:
            extra_roles: Further roles that must have colours, such as the
                roles adjacency rules switch tokens to

        Raises:
            TokenStyleConfigError: If anything is missing or malformed
        """
        missing_classes = [token_class.name for token_class in TokenClass if self.get_style(token_class) is None]

        required_roles = {ColorRole.BACKGROUND, ColorRole.PLAIN_TEXT}
        required_roles.update(style.role for style in self._styles.values() if style.role is not None)
        required_roles.update(role for role in extra_roles if role is not None)

        missing_colors: List[str] = []
        bad_colors: List[str] = []
        for role in sorted(required_roles, key=lambda r: r.value):
            modes = self._colors.get(role, {})
            for mode in ColorMode:
                if mode not in modes:
                    missing_colors.append(f"{role.name}/{mode.name}")

                elif not self.is_valid_color(modes[mode]):
                    bad_colors.append(f"{role.name}/{mode.name}={modes[mode]!r}")

        if not missing_classes and not missing_colors and not bad_colors:
            return

        problems = []
        if missing_classes:
            problems.append(f"no style for token classes: {', '.join(missing_classes)}")

        if missing_colors:
            problems.append(f"no colour for roles: {', '.join(missing_colors)}")

        if bad_colors:
            problems.append(f"malformed colours: {', '.join(bad_colors)}")

        raise TokenStyleConfigError(
            f"Incomplete palette: {'; '.join(problems)}",
            {
                'missing_classes': missing_classes,
                'missing_colors': missing_colors,
                'bad_colors': bad_colors
            }
        )

    def with_overrides(self, overrides: Dict[ColorRole, str], mode: ColorMode) -> "TokenStylePalette":
        """
        Create a copy of this palette with some role colours replaced.

        Args:
            overrides: New colour for each role to replace
            mode: The colour mode the overrides apply to

        Returns:
            A new palette

        Raises:
            TokenStyleConfigError: If an override colour is malformed
        """
        colors = {role: dict(modes) for role, modes in self._colors.items()}
        for role, color in overrides.items():
            if not self.is_valid_color(color):
                raise TokenStyleConfigError(
                    f"Malformed colour for {role.name}: {color!r}",
                    {'role': role.name, 'color': color}
                )

            colors.setdefault(role, {})[mode] = color
            self._logger.debug("override %s/%s -> %s", role.name, mode.name, color)

        return TokenStylePalette(colors, self._styles)


_DEFAULT_COLORS: Dict[ColorRole, Dict[ColorMode, str]] = {
    ColorRole.BACKGROUND: {
        ColorMode.DARK: "#1f1f24",
        ColorMode.LIGHT: "#ffffff"
    },
    ColorRole.PLAIN_TEXT: {
        ColorMode.DARK: "#ffffff",
        ColorMode.LIGHT: "#000000"
    },
    ColorRole.COMMENT: {
        ColorMode.DARK: "#6c7986",
        ColorMode.LIGHT: "#5d6c79"
    },
    ColorRole.STRING: {
        ColorMode.DARK: "#fc6a5d",
        ColorMode.LIGHT: "#c41a16"
    },
    ColorRole.NUMBER: {
        ColorMode.DARK: "#d0bf69",
        ColorMode.LIGHT: "#1c00cf"
    },
    ColorRole.KEYWORD: {
        ColorMode.DARK: "#fc5fa3",
        ColorMode.LIGHT: "#9b2393"
    },
    ColorRole.OPERATOR: {
        ColorMode.DARK: "#e5e5e5",
        ColorMode.LIGHT: "#262626"
    },
    ColorRole.PREPROCESSOR: {
        ColorMode.DARK: "#fd8f3f",
        ColorMode.LIGHT: "#643820"
    },
    ColorRole.PROJECT_TYPE: {
        ColorMode.DARK: "#5dd8ff",
        ColorMode.LIGHT: "#0b4f79"
    },
    ColorRole.PROJECT_MEMBER: {
        ColorMode.DARK: "#41a1c0",
        ColorMode.LIGHT: "#326d74"
    },
    ColorRole.PLATFORM_TYPE: {
        ColorMode.DARK: "#d0a8ff",
        ColorMode.LIGHT: "#3900a0"
    },
    ColorRole.PLATFORM_MEMBER: {
        ColorMode.DARK: "#a167e6",
        ColorMode.LIGHT: "#6c36a9"
    },
    ColorRole.ERROR: {
        ColorMode.DARK: "#e03020",
        ColorMode.LIGHT: "#f04030"
    }
}

# Classes missing here take the style of their nearest parent
_DEFAULT_STYLES: Dict[TokenClass, StyleSpec] = {
    TokenClass.TEXT: StyleSpec(role=ColorRole.PLAIN_TEXT),
    TokenClass.VARIABLE_NAME: StyleSpec(role=ColorRole.KEYWORD, bold=True),
    TokenClass.FUNCTION_NAME: StyleSpec(role=ColorRole.PROJECT_MEMBER),
    TokenClass.CLASS_NAME: StyleSpec(role=ColorRole.PROJECT_TYPE),
    TokenClass.COMMENT: StyleSpec(role=ColorRole.COMMENT),
    TokenClass.DOC_COMMENT: StyleSpec(role=ColorRole.COMMENT, italic=True),
    TokenClass.PREPROCESSOR_COMMENT: StyleSpec(role=ColorRole.PREPROCESSOR),
    TokenClass.ERROR: StyleSpec(role=ColorRole.ERROR),
    TokenClass.KEYWORD: StyleSpec(role=ColorRole.KEYWORD, bold=True),
    TokenClass.TYPE_KEYWORD: StyleSpec(role=ColorRole.PLATFORM_TYPE),
    TokenClass.OPERATOR: StyleSpec(role=ColorRole.OPERATOR),
    TokenClass.OPERATOR_WORD: StyleSpec(role=ColorRole.KEYWORD, bold=True),
    TokenClass.NUMBER: StyleSpec(role=ColorRole.NUMBER),
    TokenClass.STRING: StyleSpec(role=ColorRole.STRING),
}

DEFAULT_PALETTE = TokenStylePalette(_DEFAULT_COLORS, _DEFAULT_STYLES)
