"""
Lexical rule table for the Tiny lexer.

The table is an ordered tuple of rules. At every cursor position the lexer
takes the FIRST rule whose pattern matches anchored at the cursor; this is
not longest-match, so the order below is part of the grammar:

- trivia (whitespace, block comments) comes first so it is skipped before
  anything else is tried,
- the identifier rule resolves reserved words itself, so keyword text never
  surfaces as an identifier and vice versa,
- two-character operators come before their one-character prefixes
  (``<=`` before ``<``, ``&&`` before any ``&``-led rule),
- each quoted literal rule is followed by a reject rule for its opening
  quote, so an unterminated literal is reported as such.

Author: xwest
"""

import re
from enum import Enum, auto
from dataclasses import dataclass
from functools import partial
from typing import Callable, Optional, Tuple

from .tokens import TokenType, OPERATORS
from .errors import (
    LexerError, create_unterminated_comment_error, create_unterminated_literal_error
)


class Handler(Enum):
    """What the lexer does with a rule's match."""
    EMIT_FIXED = auto()                 # Token of a fixed type, no payload
    EMIT_INTEGER = auto()               # INTEGER with the digit run's value
    EMIT_IDENTIFIER_OR_KEYWORD = auto() # Keyword if reserved, else IDENTIFIER
    EMIT_STRING = auto()                # STRING with the quotes stripped
    EMIT_CHARACTER = auto()             # INTEGER with the decoded character code
    SKIP = auto()                       # Trivia, nothing emitted
    REJECT = auto()                     # Raise the rule's error


@dataclass(frozen=True)
class Rule:
    """
    A pattern/handler pair.

    ``text`` is set for fixed-spelling rules, ``token_type`` for
    EMIT_FIXED rules and ``error`` for REJECT rules.
    """
    name: str
    pattern: re.Pattern
    handler: Handler
    token_type: Optional[TokenType] = None
    text: Optional[str] = None
    error: Optional[Callable[[int, str], LexerError]] = None

    def match(self, source: str, pos: int) -> Optional[int]:
        """Return the end offset of a match anchored at ``pos``, or None."""
        m = self.pattern.match(source, pos)
        if m is None:
            return None
        return m.end()


# Fixed spellings in priority order. Two-character operators must precede
# the one-character operators they start with.
FIXED_ORDER = (
    "==", "!=", "<=", ">=", "&&", "||",
    "=", "!", "<", ">",
    "+", "-", "*", "/", "%",
    "(", ")", "{", "}", ";", ",",
)


def _fixed(text: str) -> Rule:
    token_type = OPERATORS[text]
    return Rule(
        name=token_type.name.lower(),
        pattern=re.compile(re.escape(text)),
        handler=Handler.EMIT_FIXED,
        token_type=token_type,
        text=text,
    )


def _validate(rules: Tuple[Rule, ...]) -> None:
    """Check the structural guarantees the dispatch loop relies on."""
    for rule in rules:
        # A rule that can match nothing would stall the cursor
        if rule.pattern.match("") is not None:
            raise ValueError(f"Rule {rule.name!r} accepts the empty string")
        if rule.handler is Handler.EMIT_FIXED and rule.token_type is None:
            raise ValueError(f"Fixed rule {rule.name!r} has no token type")
        if rule.handler is Handler.REJECT and rule.error is None:
            raise ValueError(f"Reject rule {rule.name!r} has no error factory")

    fixed = [rule for rule in rules if rule.text is not None]
    for i, earlier in enumerate(fixed):
        for later in fixed[i + 1:]:
            if later.text.startswith(earlier.text):
                raise ValueError(
                    f"Rule {later.name!r} ({later.text!r}) is shadowed by "
                    f"earlier rule {earlier.name!r} ({earlier.text!r})"
                )


def build_rule_table() -> Tuple[Rule, ...]:
    """
    Build the ordered rule table.

    Pure and deterministic; the result is immutable and safe to share
    between threads.

    Raises:
        ValueError: If the table breaks an ordering or progress guarantee
    """
    rules = (
        # Trivia
        Rule("whitespace", re.compile(r"[ \t\r\n\f\v]+"), Handler.SKIP),
        Rule("block_comment", re.compile(r"/\*.*?\*/", re.DOTALL), Handler.SKIP),
        Rule("unterminated_comment", re.compile(r"/\*"), Handler.REJECT,
             error=create_unterminated_comment_error),

        # Literals and names
        Rule("integer", re.compile(r"[0-9]+"), Handler.EMIT_INTEGER),
        Rule("identifier", re.compile(r"[_a-zA-Z][_a-zA-Z0-9]*"),
             Handler.EMIT_IDENTIFIER_OR_KEYWORD),
        Rule("string", re.compile(r'"[^"]*"'), Handler.EMIT_STRING),
        Rule("unterminated_string", re.compile(r'"'), Handler.REJECT,
             error=partial(create_unterminated_literal_error, '"')),
        Rule("character", re.compile(r"'(?:[^'\\\n\r]|\\.)'"), Handler.EMIT_CHARACTER),
        Rule("unterminated_character", re.compile(r"'"), Handler.REJECT,
             error=partial(create_unterminated_literal_error, "'")),

        # Operators and punctuation
        *(_fixed(text) for text in FIXED_ORDER),
    )

    _validate(rules)
    return rules


RULE_TABLE = build_rule_table()
