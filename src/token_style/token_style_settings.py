"""Theme settings module for loading and saving highlighting themes."""

from dataclasses import dataclass, field
import json
import logging
from typing import Dict

from token_style.color_role import ColorMode, ColorRole
from token_style.token_style_exceptions import TokenStyleConfigError
from token_style.token_style_palette import DEFAULT_PALETTE, TokenStylePalette


@dataclass
class ThemeSettings:
    """
    User-adjustable highlighting theme.

    Attributes:
        mode: Colour mode the theme is rendered in
        scope: CSS selector that encloses highlighted code blocks
        colors: Replacement colour for each role the theme overrides
    """
    mode: ColorMode = ColorMode.DARK
    scope: str = ".highlight"
    colors: Dict[ColorRole, str] = field(default_factory=dict)

    @classmethod
    def create_default(cls) -> "ThemeSettings":
        """Create a new ThemeSettings object with default values."""
        return cls(
            mode=ColorMode.DARK,
            scope=".highlight",
            colors={}
        )

    @classmethod
    def load(cls, path: str) -> "ThemeSettings":
        """
        Load theme settings from file.

        Args:
            path: Path to the theme file

        Returns:
            ThemeSettings object with loaded values

        Raises:
            json.JSONDecodeError: If file contains invalid JSON
            TokenStyleConfigError: If a colour role is unknown or a colour is malformed
        """
        logger = logging.getLogger("ThemeSettings")
        settings = cls.create_default()

        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

            if not isinstance(data, dict):
                raise TokenStyleConfigError(f"Theme file {path} must contain a JSON object", {'path': path})

            # Unknown modes fall back to the default (dark mode)
            mode_str = data.get("mode", "DARK")
            try:
                settings.mode = ColorMode[str(mode_str).upper()]

            except KeyError:
                logger.warning("unknown colour mode %r in %s, using DARK", mode_str, path)
                settings.mode = ColorMode.DARK

            scope = data.get("scope", ".highlight")
            if not isinstance(scope, str) or not scope.strip():
                raise TokenStyleConfigError(
                    f"Scope in {path} must be a non-empty string, got {scope!r}",
                    {'path': path, 'scope': scope}
                )

            settings.scope = scope

            colors = data.get("colors", {})
            if not isinstance(colors, dict):
                raise TokenStyleConfigError(
                    f"Colours in {path} must be a JSON object, got {type(colors).__name__}",
                    {'path': path, 'colors': colors}
                )

            for role_name, color in colors.items():
                try:
                    role = ColorRole[role_name.upper()]

                except KeyError as e:
                    raise TokenStyleConfigError(
                        f"Unknown colour role {role_name!r} in {path}",
                        {'path': path, 'role': role_name}
                    ) from e

                if not TokenStylePalette.is_valid_color(color):
                    raise TokenStyleConfigError(
                        f"Malformed colour for {role_name} in {path}: {color!r}",
                        {'path': path, 'role': role_name, 'color': color}
                    )

                settings.colors[role] = color

        logger.debug("loaded theme from %s: mode %s, %d overrides", path, settings.mode.name, len(settings.colors))
        return settings

    def save(self, path: str) -> None:
        """
        Save theme settings to file.

        Args:
            path: Path to save the theme file

        Raises:
            OSError: If there's an error writing the file
        """
        data = {
            "mode": self.mode.name,
            "scope": self.scope,
            "colors": {role.name: color for role, color in self.colors.items()}
        }

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=4)

    def create_palette(self, base: TokenStylePalette | None = None) -> TokenStylePalette:
        """
        Create a palette with this theme's colour overrides applied.

        Args:
            base: Palette to start from; defaults to DEFAULT_PALETTE

        Returns:
            The new palette
        """
        if base is None:
            base = DEFAULT_PALETTE

        return base.with_overrides(self.colors, self.mode)
