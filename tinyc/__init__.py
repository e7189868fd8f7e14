"""
Tiny Language Tooling Package

Front end for Tiny, a small imperative language (if/else, while, print,
putc). Only lexical analysis lives here today.

Architecture:
    tinyc/
    └── lexer/           # Tokenization and lexical analysis

Author: xwest
License: MIT
"""

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__email__ = "dev@neuralscript.org"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, LexerError, tokenize

__all__ = [
    # Core API
    "Lexer",
    "Token",
    "TokenType",
    "LexerError",
    "tokenize",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
