"""
Tiny Lexer - turns a whole source buffer into a list of tokens

Drives a single forward-only cursor over the source. At each position the
rule table is scanned in order and the first anchored match wins; its
handler emits at most one token and the cursor moves past the match.
Any failure aborts the whole call.

xwest
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .tokens import Token, TokenType, KEYWORDS
from .rules import Rule, Handler, RULE_TABLE
from .errors import create_unrecognized_token_error
from .literals import decode_character_literal, decode_string_literal


LOG = logging.getLogger(__name__)

Source = Union[str, bytes, bytearray]


@dataclass(frozen=True)
class RuleApplication:
    """One step of the dispatch loop: which rule consumed which span."""
    rule_name: str
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


class Lexer:
    """
    Tiny lexical analyzer.

    Each call to ``tokenize`` starts from a clean state, so one instance
    can be reused. Instances are not shared between threads; the rule
    table they read from is.
    """

    def __init__(self, source: Source, rules: Tuple[Rule, ...] = RULE_TABLE):
        """
        Initialize the lexer with source code.

        Args:
            source: Program text, or ASCII-safe bytes. Bytes are mapped one
                to one onto characters so offsets remain byte offsets.
            rules: Ordered rule table, first match wins
        """
        if isinstance(source, (bytes, bytearray)):
            source = bytes(source).decode("latin-1")
        self.source = source
        self.rules = rules
        self.pos = 0
        self.tokens: List[Token] = []
        self.trace: List[RuleApplication] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source.

        Returns:
            List of tokens ending with exactly one END_OF_INPUT token

        Raises:
            UnrecognizedTokenError: If no rule matches at some position
            UnknownEscapeError: If a character literal has a bad escape
        """
        self.pos = 0
        self.tokens = []
        self.trace = []

        LOG.debug("Tokenizing %d characters", len(self.source))

        while not self.at_end():
            rule, end = self._match_rule()
            token = self._apply(rule, end)
            if token is not None:
                self.tokens.append(token)
            self.trace.append(RuleApplication(rule.name, self.pos, end))
            self.pos = end

        self.tokens.append(Token(TokenType.END_OF_INPUT))

        LOG.debug("Produced %d tokens", len(self.tokens))
        return self.tokens

    def _match_rule(self) -> Tuple[Rule, int]:
        """Find the first rule matching at the cursor."""
        for rule in self.rules:
            end = rule.match(self.source, self.pos)
            if end is None:
                continue
            if end <= self.pos:
                raise RuntimeError(
                    f"Rule {rule.name!r} made no progress at offset {self.pos}"
                )
            return rule, end

        LOG.debug("No rule matches at offset %d", self.pos)
        raise create_unrecognized_token_error(self.pos, self.remainder())

    def _apply(self, rule: Rule, end: int) -> Optional[Token]:
        """Run a rule's handler on the span [pos, end)."""
        lexeme = self.source[self.pos:end]
        handler = rule.handler

        if handler is Handler.SKIP:
            return None

        if handler is Handler.EMIT_FIXED:
            return Token(rule.token_type)

        if handler is Handler.EMIT_INTEGER:
            return Token(TokenType.INTEGER, int(lexeme))

        if handler is Handler.EMIT_IDENTIFIER_OR_KEYWORD:
            keyword = KEYWORDS.get(lexeme)
            if keyword is not None:
                return Token(keyword)
            return Token(TokenType.IDENTIFIER, lexeme)

        if handler is Handler.EMIT_STRING:
            return Token(TokenType.STRING, decode_string_literal(lexeme))

        if handler is Handler.EMIT_CHARACTER:
            return Token(TokenType.INTEGER, decode_character_literal(lexeme, self.pos))

        if handler is Handler.REJECT:
            LOG.debug("Rule %s rejected input at offset %d", rule.name, self.pos)
            raise rule.error(self.pos, self.remainder())

        raise ValueError(f"Unknown handler: {handler}")

    def remainder(self) -> str:
        """Unconsumed input from the cursor onward."""
        return self.source[self.pos:]

    def at_end(self) -> bool:
        return self.pos >= len(self.source)


def tokenize(source: Source) -> List[Token]:
    """
    Convenience function to tokenize a source buffer.

    Args:
        source: Entire program text, already read into memory

    Returns:
        List of tokens ending with END_OF_INPUT

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source).tokenize()
