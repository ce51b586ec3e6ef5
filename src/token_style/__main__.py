"""Main entry point for the token-style command-line tool."""

import sys

from token_style.token_style_cli import main


if __name__ == "__main__":
    sys.exit(main())
