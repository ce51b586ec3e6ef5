"""Qt text formats for resolved token styles."""

from typing import Dict, List

from PySide6.QtGui import QColor, QFont, QTextCharFormat

from token_style.color_role import ColorMode, ColorRole
from token_style.style_spec import StyleSpec
from token_style.token_style_palette import DEFAULT_PALETTE, TokenStylePalette


class TokenStyleFormatter:
    """
    Builds and caches QTextCharFormat objects for token styles.

    Formats are created on first use for each distinct StyleSpec and are
    dropped whenever the colour mode changes.
    """

    def __init__(self, palette: TokenStylePalette | None = None, mode: ColorMode = ColorMode.DARK) -> None:
        """
        Initialize the formatter.

        Args:
            palette: Palette to take colours from; defaults to DEFAULT_PALETTE
            mode: Initial colour mode
        """
        self._palette = palette if palette is not None else DEFAULT_PALETTE
        self._color_mode = mode
        self._code_font_families = ["Menlo", "Consolas", "Monaco", "monospace"]
        self._formats: Dict[StyleSpec, QTextCharFormat] = {}

    def color_mode(self) -> ColorMode:
        """Get the current color mode."""
        return self._color_mode

    def set_color_mode(self, mode: ColorMode) -> None:
        """
        Set the color mode, discarding any formats built for the old one.

        Args:
            mode: The ColorMode to switch to
        """
        if mode != self._color_mode:
            self._color_mode = mode
            self._formats.clear()

    def background_color(self) -> QColor:
        """Get the code block background colour for the current mode."""
        return QColor(self._palette.get_color(ColorRole.BACKGROUND, self._color_mode))

    def _create_format(self, style: StyleSpec) -> QTextCharFormat:
        text_format = QTextCharFormat()
        text_format.setFontFamilies(self._code_font_families)
        text_format.setFontFixedPitch(True)
        text_format.setForeground(QColor(self._palette.color_for(style, self._color_mode)))

        if style.bold:
            text_format.setFontWeight(QFont.Weight.Bold)

        if style.italic:
            text_format.setFontItalic(True)

        return text_format

    def get_format(self, style: StyleSpec) -> QTextCharFormat:
        """
        Get the text format for a resolved style.

        Args:
            style: The StyleSpec to look up

        Returns:
            QTextCharFormat: The format for the style
        """
        text_format = self._formats.get(style)
        if text_format is None:
            text_format = self._create_format(style)
            self._formats[style] = text_format

        return text_format

    def get_formats(self, styles: List[StyleSpec]) -> List[QTextCharFormat]:
        """
        Get the text formats for a resolved block.

        Args:
            styles: Styles returned by the resolver for one block

        Returns:
            One format per style, in order
        """
        return [self.get_format(style) for style in styles]
