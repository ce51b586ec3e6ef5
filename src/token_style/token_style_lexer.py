"""Tokenize source code with Pygments and map its token types onto TokenClass."""

import logging
from typing import List, Tuple

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name, guess_lexer
from pygments.token import STANDARD_TYPES, Token, _TokenType
from pygments.util import ClassNotFound

from token_style.token_class import TokenClass


_logger = logging.getLogger("TokenStyleLexer")


def get_lexer(code: str, language: str) -> Lexer:
    """
    Get a Pygments lexer for a language, guessing from the code if needed.

    Args:
        code: The source code that will be lexed
        language: Language name or alias, e.g. "swift"; may be empty

    Returns:
        The lexer to use
    """
    options = {'stripnl': False, 'ensurenl': False}
    if language:
        try:
            return get_lexer_by_name(language, **options)

        except ClassNotFound:
            _logger.debug("no lexer named %r, guessing from content", language)

    return guess_lexer(code, **options)


def token_class_for(ttype: _TokenType) -> TokenClass | str:
    """
    Map a Pygments token type onto a TokenClass.

    Types without a TokenClass of their own fall back to their parent type,
    the same way Pygments styles do.  Types whose only ancestor is the root
    token keep their short CSS class name.

    Args:
        ttype: The Pygments token type

    Returns:
        The TokenClass, or the short class name if no TokenClass matches
    """
    if ttype is Token:
        return TokenClass.TEXT

    current = ttype
    while current is not None and current is not Token:
        short_name = STANDARD_TYPES.get(current)
        if short_name is not None:
            token_class = TokenClass.from_css_class(short_name)
            if token_class is not None:
                return token_class

        current = current.parent

    return STANDARD_TYPES.get(ttype, str(ttype))


def lex_code(code: str, language: str = "") -> List[Tuple[TokenClass | str, str]]:
    """
    Split source code into classified tokens.

    Args:
        code: The source code to lex
        language: Language name or alias; guessed from the code when empty or unknown

    Returns:
        (token class, text) pairs in source order, ready for TokenStyleResolver
    """
    lexer = get_lexer(code, language)
    _logger.debug("lexing %d characters with %s", len(code), lexer.name)
    return [(token_class_for(ttype), text) for ttype, text in lexer.get_tokens(code)]
