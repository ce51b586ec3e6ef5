"""
Token Style - command-line tool for syntax highlighting themes.

Usage:
    python -m token_style css [--theme FILE] [--mode dark|light] [--scope SEL] [--output FILE]
    python -m token_style check [--theme FILE]
    python -m token_style tokens FILE [--language NAME] [--theme FILE] [--mode dark|light]

Options:
    --theme PATH      JSON theme file with colour overrides
    --mode MODE       Colour mode, overriding the theme's
    --verbose         Show debug logging
"""

import argparse
import json
import logging
from pathlib import Path
import sys
from typing import List

from token_style.color_role import ColorMode
from token_style.token_style_exceptions import TokenStyleError
from token_style.token_style_lexer import lex_code
from token_style.token_style_resolver import TokenStyleResolver
from token_style.token_style_settings import ThemeSettings
from token_style.token_style_stylesheet import TokenStyleStylesheet


def _load_settings(args: argparse.Namespace) -> ThemeSettings:
    settings = ThemeSettings.load(args.theme) if args.theme else ThemeSettings.create_default()
    if getattr(args, 'mode', None):
        settings.mode = ColorMode[args.mode.upper()]

    return settings


def _command_css(args: argparse.Namespace) -> int:
    settings = _load_settings(args)
    resolver = TokenStyleResolver(settings.create_palette())
    stylesheet = TokenStyleStylesheet(resolver.palette(), resolver.rules())
    css = stylesheet.generate(settings.mode, args.scope or settings.scope)

    if args.output:
        Path(args.output).write_text(css, encoding='utf-8')

    else:
        sys.stdout.write(css)

    return 0


def _command_check(args: argparse.Namespace) -> int:
    settings = _load_settings(args)
    resolver = TokenStyleResolver(settings.create_palette())
    print(f"OK: {len(resolver.rules())} adjacency rules, {len(resolver.palette().roles())} colour roles")
    return 0


def _command_tokens(args: argparse.Namespace) -> int:
    settings = _load_settings(args)
    resolver = TokenStyleResolver(settings.create_palette())
    palette = resolver.palette()

    code = Path(args.file).read_text(encoding='utf-8')
    language = args.language if args.language is not None else Path(args.file).suffix.lstrip('.')

    for styled in resolver.resolve_tokens(lex_code(code, language)):
        token_class = getattr(styled.token_class, 'name', styled.token_class)
        color = palette.color_for(styled.style, settings.mode)
        flags = "".join([
            "B" if styled.style.bold else "-",
            "I" if styled.style.italic else "-",
            "^" if styled.style.inherit else "-"
        ])
        print(f"{token_class!s:<22} {color} {flags} {json.dumps(styled.text)}")

    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="token-style",
        description="Resolve and export syntax highlighting token styles"
    )
    parser.add_argument('--verbose', action='store_true', help="show debug logging")
    subparsers = parser.add_subparsers(dest='command', required=True)

    css_parser = subparsers.add_parser('css', help="write the highlighting stylesheet")
    css_parser.add_argument('--theme', help="JSON theme file")
    css_parser.add_argument('--mode', choices=['dark', 'light'], help="colour mode")
    css_parser.add_argument('--scope', help="selector enclosing highlighted blocks")
    css_parser.add_argument('--output', help="write to this file instead of stdout")
    css_parser.set_defaults(handler=_command_css)

    check_parser = subparsers.add_parser('check', help="validate the palette and adjacency rules")
    check_parser.add_argument('--theme', help="JSON theme file")
    check_parser.set_defaults(handler=_command_check)

    tokens_parser = subparsers.add_parser('tokens', help="show the resolved style of every token in a file")
    tokens_parser.add_argument('file', help="source file to highlight")
    tokens_parser.add_argument('--language', help="language name (default: from the file extension)")
    tokens_parser.add_argument('--theme', help="JSON theme file")
    tokens_parser.add_argument('--mode', choices=['dark', 'light'], help="colour mode")
    tokens_parser.set_defaults(handler=_command_tokens)

    return parser


def main(argv: List[str] | None = None) -> int:
    """
    Run the command-line tool.

    Args:
        argv: Arguments, excluding the program name; defaults to sys.argv

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        return int(args.handler(args))

    except (TokenStyleError, OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
