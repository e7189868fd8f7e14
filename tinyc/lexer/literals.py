"""
Decoding of quoted literals.

String literals are taken verbatim: the delimiting quotes are stripped and
nothing else is transformed, so a string can never contain a double quote.
Character literals decode to the integer code of their single character,
with a small fixed set of backslash escapes.

Author: xwest
"""

from .errors import create_unknown_escape_error, create_unterminated_literal_error


# Escape letter -> decoded character code
ESCAPE_SEQUENCES = {
    'n': 10,    # newline
    't': 9,     # tab
    'r': 13,    # carriage return
    '\\': 92,   # backslash
    "'": 39,    # single quote
    '0': 0,     # null
}

# Characters that may not appear unescaped inside a character literal
FORBIDDEN_CHARACTER_CHARS = frozenset("'\\\n\r")


def decode_escape(letter: str, offset: int) -> int:
    """
    Map the letter following a backslash to its character code.

    Raises:
        UnknownEscapeError: If the letter is not a supported escape
    """
    try:
        return ESCAPE_SEQUENCES[letter]
    except KeyError:
        raise create_unknown_escape_error(letter, offset, "\\" + letter) from None


def decode_character_literal(lexeme: str, offset: int) -> int:
    """
    Decode a complete character literal such as ``'A'`` or ``'\\n'``.

    Args:
        lexeme: The matched text, quotes included
        offset: Offset of the opening quote, for error reporting

    Returns:
        The character code of the literal
    """
    if len(lexeme) < 3 or lexeme[0] != "'" or lexeme[-1] != "'":
        raise create_unterminated_literal_error("'", offset, lexeme)

    body = lexeme[1:-1]
    if body[0] == '\\':
        if len(body) != 2:
            raise create_unterminated_literal_error("'", offset, lexeme)
        return decode_escape(body[1], offset + 1)

    if len(body) != 1 or body in FORBIDDEN_CHARACTER_CHARS:
        raise create_unterminated_literal_error("'", offset, lexeme)
    return ord(body)


def decode_string_literal(lexeme: str) -> str:
    """Strip the delimiting double quotes from a string literal."""
    return lexeme[1:-1]
