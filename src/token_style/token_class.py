from enum import IntEnum, auto
from typing import Dict, List


class TokenClass(IntEnum):
    """Syntactic category assigned to a token by a lexer."""
    TEXT = auto()
    WHITESPACE = auto()
    PUNCTUATION = auto()
    NAME = auto()
    VARIABLE_NAME = auto()
    FUNCTION_NAME = auto()
    CLASS_NAME = auto()
    COMMENT = auto()
    DOC_COMMENT = auto()
    PREPROCESSOR_COMMENT = auto()
    ERROR = auto()
    KEYWORD = auto()
    KEYWORD_CONSTANT = auto()
    KEYWORD_DECLARATION = auto()
    TYPE_KEYWORD = auto()
    OPERATOR = auto()
    OPERATOR_WORD = auto()
    NUMBER = auto()
    NUMBER_BINARY = auto()
    NUMBER_FLOAT = auto()
    NUMBER_HEX = auto()
    NUMBER_INTEGER = auto()
    NUMBER_INTEGER_LONG = auto()
    NUMBER_OCTAL = auto()
    STRING = auto()

    def parent(self) -> "TokenClass | None":
        """
        Get the class this one falls back to when it has no style of its own.

        Returns:
            The parent class, or None for a root class
        """
        return _PARENTS.get(self)

    def ancestry(self) -> List["TokenClass"]:
        """
        Get this class followed by each of its parents, nearest first.

        Returns:
            List of classes, starting with this one
        """
        chain: List[TokenClass] = []
        token_class: TokenClass | None = self
        while token_class is not None:
            chain.append(token_class)
            token_class = token_class.parent()

        return chain

    def css_class(self) -> str:
        """Get the short CSS class name highlighters emit for this class."""
        return _CSS_CLASSES[self]

    @classmethod
    def from_css_class(cls, name: str) -> "TokenClass | None":
        """
        Look up a class by the short CSS class name a highlighter emits.

        Args:
            name: Short class name, e.g. "kd" or "nf"

        Returns:
            The matching TokenClass, or None if the name is not recognized
        """
        if name in _CSS_CLASS_LOOKUP:
            return _CSS_CLASS_LOOKUP[name]

        # Every string subtype (s1, s2, sd, sx, ...) is styled as a string
        if name.startswith("s") and len(name) == 2:
            return cls.STRING

        return None


_PARENTS: Dict[TokenClass, TokenClass] = {
    TokenClass.WHITESPACE: TokenClass.TEXT,
    TokenClass.PUNCTUATION: TokenClass.TEXT,
    TokenClass.NAME: TokenClass.TEXT,
    TokenClass.VARIABLE_NAME: TokenClass.NAME,
    TokenClass.FUNCTION_NAME: TokenClass.NAME,
    TokenClass.CLASS_NAME: TokenClass.NAME,
    TokenClass.DOC_COMMENT: TokenClass.COMMENT,
    TokenClass.PREPROCESSOR_COMMENT: TokenClass.COMMENT,
    TokenClass.KEYWORD_CONSTANT: TokenClass.KEYWORD,
    TokenClass.KEYWORD_DECLARATION: TokenClass.KEYWORD,
    TokenClass.TYPE_KEYWORD: TokenClass.KEYWORD,
    TokenClass.OPERATOR_WORD: TokenClass.OPERATOR,
    TokenClass.NUMBER_BINARY: TokenClass.NUMBER,
    TokenClass.NUMBER_FLOAT: TokenClass.NUMBER,
    TokenClass.NUMBER_HEX: TokenClass.NUMBER,
    TokenClass.NUMBER_INTEGER: TokenClass.NUMBER,
    TokenClass.NUMBER_INTEGER_LONG: TokenClass.NUMBER_INTEGER,
    TokenClass.NUMBER_OCTAL: TokenClass.NUMBER,
}

# Short names follow the Rouge/Pygments HTML class conventions
_CSS_CLASSES: Dict[TokenClass, str] = {
    TokenClass.TEXT: "",
    TokenClass.WHITESPACE: "w",
    TokenClass.PUNCTUATION: "p",
    TokenClass.NAME: "n",
    TokenClass.VARIABLE_NAME: "nv",
    TokenClass.FUNCTION_NAME: "nf",
    TokenClass.CLASS_NAME: "nc",
    TokenClass.COMMENT: "c",
    TokenClass.DOC_COMMENT: "cd",
    TokenClass.PREPROCESSOR_COMMENT: "cp",
    TokenClass.ERROR: "err",
    TokenClass.KEYWORD: "k",
    TokenClass.KEYWORD_CONSTANT: "kc",
    TokenClass.KEYWORD_DECLARATION: "kd",
    TokenClass.TYPE_KEYWORD: "kt",
    TokenClass.OPERATOR: "o",
    TokenClass.OPERATOR_WORD: "ow",
    TokenClass.NUMBER: "m",
    TokenClass.NUMBER_BINARY: "mb",
    TokenClass.NUMBER_FLOAT: "mf",
    TokenClass.NUMBER_HEX: "mh",
    TokenClass.NUMBER_INTEGER: "mi",
    TokenClass.NUMBER_INTEGER_LONG: "il",
    TokenClass.NUMBER_OCTAL: "mo",
    TokenClass.STRING: "s",
}

_CSS_CLASS_LOOKUP: Dict[str, TokenClass] = {name: token_class for token_class, name in _CSS_CLASSES.items()}
