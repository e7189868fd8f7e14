"""
Token definitions for the Tiny lexer.

This module defines all token types supported by Tiny, including:
- Operators (arithmetic, relational and logical)
- Punctuation and delimiters
- Keywords
- Payload-bearing identifiers and literals (integers, strings)

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any


class TokenType(Enum):
    """
    Enumeration of all token types in Tiny.

    Organized by category for clarity. The set is closed: a future parser
    can rely on never seeing anything else.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    END_OF_INPUT = auto()           # Appended once, after the last token

    # ========================================================================
    # Operators
    # ========================================================================

    # Arithmetic
    OP_MULTIPLY = auto()            # *
    OP_DIVIDE = auto()              # /
    OP_MOD = auto()                 # %
    OP_ADD = auto()                 # +
    OP_SUBTRACT = auto()            # -

    # Relational
    OP_LESS = auto()                # <
    OP_LESS_EQUAL = auto()          # <=
    OP_GREATER = auto()             # >
    OP_GREATER_EQUAL = auto()       # >=
    OP_EQUAL = auto()               # ==
    OP_NOT_EQUAL = auto()           # !=

    # Logical and assignment
    OP_NOT = auto()                 # !
    OP_ASSIGN = auto()              # =
    OP_AND = auto()                 # &&
    OP_OR = auto()                  # ||

    # ========================================================================
    # Punctuation and Delimiters
    # ========================================================================
    OPEN_PAREN = auto()             # (
    CLOSE_PAREN = auto()            # )
    OPEN_BRACE = auto()             # {
    CLOSE_BRACE = auto()            # }
    SEMICOLON = auto()              # ;
    COMMA = auto()                  # ,

    # ========================================================================
    # Keywords
    # ========================================================================
    KEYWORD_IF = auto()             # if
    KEYWORD_ELSE = auto()           # else
    KEYWORD_WHILE = auto()          # while
    KEYWORD_PRINT = auto()          # print
    KEYWORD_PUTC = auto()           # putc

    # ========================================================================
    # Identifiers and Literals
    # ========================================================================
    IDENTIFIER = auto()             # count, _tmp, x1
    INTEGER = auto()                # 42, 'A' (character literals share it)
    STRING = auto()                 # "hello"


# Reserved words. Identifier-shaped text found here never becomes IDENTIFIER.
KEYWORDS = {
    "if": TokenType.KEYWORD_IF,
    "else": TokenType.KEYWORD_ELSE,
    "while": TokenType.KEYWORD_WHILE,
    "print": TokenType.KEYWORD_PRINT,
    "putc": TokenType.KEYWORD_PUTC,
}

OPERATORS = {
    # Two-character spellings
    "==": TokenType.OP_EQUAL,
    "!=": TokenType.OP_NOT_EQUAL,
    "<=": TokenType.OP_LESS_EQUAL,
    ">=": TokenType.OP_GREATER_EQUAL,
    "&&": TokenType.OP_AND,
    "||": TokenType.OP_OR,

    # Single-character spellings
    "=": TokenType.OP_ASSIGN,
    "!": TokenType.OP_NOT,
    "<": TokenType.OP_LESS,
    ">": TokenType.OP_GREATER,
    "+": TokenType.OP_ADD,
    "-": TokenType.OP_SUBTRACT,
    "*": TokenType.OP_MULTIPLY,
    "/": TokenType.OP_DIVIDE,
    "%": TokenType.OP_MOD,

    # Punctuation
    "(": TokenType.OPEN_PAREN,
    ")": TokenType.CLOSE_PAREN,
    "{": TokenType.OPEN_BRACE,
    "}": TokenType.CLOSE_BRACE,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
}

PUNCTUATION = frozenset({
    TokenType.OPEN_PAREN, TokenType.CLOSE_PAREN,
    TokenType.OPEN_BRACE, TokenType.CLOSE_BRACE,
    TokenType.SEMICOLON, TokenType.COMMA,
})

# Types whose tokens carry a semantic value
PAYLOAD_TYPES = frozenset({
    TokenType.IDENTIFIER,
    TokenType.INTEGER,
    TokenType.STRING,
})


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Tiny language.

    `value` holds the decoded payload: the name for IDENTIFIER, the
    interior text for STRING and the numeric value for INTEGER. Every
    other type carries None. Payloads are copies, never views into the
    source buffer.
    """
    type: TokenType
    value: Any = None

    def __str__(self) -> str:
        if self.type in PAYLOAD_TYPES:
            return f"{self.type.name} ({self.value})"
        return f"{self.type.name} ()"

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token({self.type.name})"
        return f"Token({self.type.name}, {self.value!r})"

    def is_one_of(self, *types: TokenType) -> bool:
        """Check if this token has any of the given types."""
        return self.type in types

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in (TokenType.INTEGER, TokenType.STRING)

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORDS.values()

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator (punctuation excluded)."""
        return self.type in OPERATORS.values() and self.type not in PUNCTUATION

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENTIFIER
