"""Semantic colour roles used by syntax highlighting themes."""

from enum import Enum, auto


class ColorMode(Enum):
    """Enumeration for color theme modes."""
    LIGHT = auto()
    DARK = auto()


class ColorRole(Enum):
    """Enumeration of color roles in a highlighting theme."""
    BACKGROUND = auto()                 # Code block background
    PLAIN_TEXT = auto()                 # Default text color
    COMMENT = auto()                    # Comments and doc comments
    STRING = auto()                     # String literals
    NUMBER = auto()                     # Numeric literals
    KEYWORD = auto()                    # Language keywords
    OPERATOR = auto()                   # Operators
    PREPROCESSOR = auto()               # Preprocessor statements
    PROJECT_TYPE = auto()               # Types declared in the project
    PROJECT_MEMBER = auto()             # Functions and members declared in the project
    PLATFORM_TYPE = auto()              # Types provided by the platform
    PLATFORM_MEMBER = auto()            # Functions and members provided by the platform
    ERROR = auto()                      # Lexer errors
