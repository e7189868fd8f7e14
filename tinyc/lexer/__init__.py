"""
Tiny Lexer Package

Implements a from-scratch lexical analyzer (tokenizer) for Tiny, a small
imperative language with integers, strings, character literals and C-style
operators.

Key Features:
- Ordered, first-match rule table with anchored regular expressions
- Keyword/identifier disambiguation
- Character literal escape decoding
- Fatal, inspectable errors with offset and remainder

Author: xwest
"""

from .tokens import Token, TokenType, KEYWORDS, OPERATORS
from .rules import Rule, Handler, RULE_TABLE, build_rule_table
from .lexer import Lexer, RuleApplication, tokenize
from .errors import (
    LexerError,
    UnrecognizedTokenError,
    UnterminatedLiteralError,
    UnterminatedCommentError,
    UnknownEscapeError,
)

__all__ = [
    "Lexer",
    "tokenize",
    "Token",
    "TokenType",
    "KEYWORDS",
    "OPERATORS",
    "Rule",
    "Handler",
    "RULE_TABLE",
    "build_rule_table",
    "RuleApplication",
    "LexerError",
    "UnrecognizedTokenError",
    "UnterminatedLiteralError",
    "UnterminatedCommentError",
    "UnknownEscapeError",
]
