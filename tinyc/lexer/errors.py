"""
Error handling for the Tiny lexer.

Every lexer failure is fatal: the error is raised out of ``tokenize`` and no
partial token list is returned. Errors carry the cursor offset and a short
snippet of the unconsumed input so callers can point at the problem.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import OPERATORS


# How much of the unconsumed input an error message quotes
REMAINDER_PREVIEW = 20


@dataclass
class Diagnostic:
    """Diagnostic payload attached to every lexer error."""
    message: str
    offset: int
    remainder: str
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> offset {self.offset}, near {self.remainder!r}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Base class for fatal lexer errors.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        offset: int,
        remainder: str = "",
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            offset=offset,
            remainder=remainder[:REMAINDER_PREVIEW],
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def offset(self) -> int:
        return self.diagnostic.offset

    @property
    def remainder(self) -> str:
        return self.diagnostic.remainder

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnrecognizedTokenError(LexerError):
    """No lexical rule matches at the cursor."""


class UnterminatedLiteralError(UnrecognizedTokenError):
    """A string or character literal is missing its closing quote."""


class UnterminatedCommentError(UnrecognizedTokenError):
    """A block comment is missing its closing ``*/``."""


class UnknownEscapeError(LexerError):
    """A character literal uses an escape letter outside the supported set."""


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unrecognized token",
    "L002": "Unterminated literal",
    "L003": "Unterminated block comment",
    "L006": "Invalid escape sequence",
}


def suggest_operator_corrections(text: str) -> List[str]:
    """Suggest operators that start with the unrecognized text."""
    return sorted(op for op in OPERATORS if len(op) > len(text) and op.startswith(text))


# Helper functions for creating common errors
def create_unrecognized_token_error(offset: int, remainder: str) -> UnrecognizedTokenError:
    """Create an error for input no rule accepts."""
    char = remainder[:1]
    suggestions = suggest_operator_corrections(char)

    if suggestions:
        help_text = f"Did you mean {' or '.join(repr(s) for s in suggestions)}?"
    elif char.isprintable():
        help_text = f"The character {char!r} is not valid in Tiny source code."
    else:
        help_text = f"Non-printable character (U+{ord(char):04X}) is not allowed."

    return UnrecognizedTokenError(
        message=f"Unrecognized token: {char!r}",
        offset=offset,
        remainder=remainder,
        code="L001",
        help_text=help_text,
        suggestions=suggestions
    )


def create_unterminated_literal_error(quote: str, offset: int, remainder: str) -> UnterminatedLiteralError:
    """Create an error for a string or character literal that never closes."""
    kind = "string" if quote == '"' else "character"
    return UnterminatedLiteralError(
        message=f"Unterminated {kind} literal",
        offset=offset,
        remainder=remainder,
        code="L002",
        help_text=f"{kind.capitalize()} literals must be closed with a matching {quote} quote.",
        suggestions=[f"Add a closing {quote} quote"]
    )


def create_unterminated_comment_error(offset: int, remainder: str) -> UnterminatedCommentError:
    """Create an error for a block comment that never closes."""
    return UnterminatedCommentError(
        message="Unterminated block comment",
        offset=offset,
        remainder=remainder,
        code="L003",
        help_text="Block comments must be closed with '*/'."
    )


def create_unknown_escape_error(letter: str, offset: int, remainder: str = "") -> UnknownEscapeError:
    """Create an error for an unsupported escape sequence."""
    return UnknownEscapeError(
        message=f"Unknown escape sequence: '\\{letter}'",
        offset=offset,
        remainder=remainder,
        code="L006",
        help_text="Supported escapes are \\n, \\t, \\r, \\\\, \\' and \\0."
    )
